#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
cli.py

命令行接口模块，负责解析命令行参数、验证用户输入、确认继续，
并调用口令生成器执行生成任务。
"""

import sys
import argparse
import os
import logging
from datetime import datetime
import daemon
import lockfile
import time

from typing import Callable, Dict, Any, List, Optional

from wcwidth import wcswidth

# 导入项目其他模块
from . import __version__
from .config_parser import ConfigParser
from .engine import PasswordGenerator
from .exceptions import HumanizerError
from .generators import KeywordSource

# 程序版本和描述
PROGRAM_NAME = "Humanizer"
VERSION = __version__
DESCRIPTION = "真实口令字典生成工具"

class ChineseArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # 简化错误消息的中文替换
        message = message.replace("the following arguments are required:", "缺少以下必需参数:")
        message = message.replace("unrecognized arguments", "无法识别的参数")
        message = message.replace("one of the arguments", "必须指定以下参数之一:")
        message = message.replace("is required", "")
        message = message.replace("not allowed with argument", "不能与以下参数同时使用:")
        message = message.replace("invalid int value", "无效的整数")
        self.exit(2, f"错误: {message}\n")

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    解析命令行参数

    参数:
        argv: 参数列表，默认使用sys.argv

    返回:
        解析后的参数对象
    """
    parser = ChineseArgumentParser(
        prog="humanizer",
        description=f"{PROGRAM_NAME} v{VERSION} - {DESCRIPTION}",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # 关键词来源 (必须指定其中一个)
    source_group = parser.add_argument_group("关键词来源 (必须指定其中一个)")
    source_exclusive = source_group.add_mutually_exclusive_group(required=True)
    source_exclusive.add_argument("-k", "--keywords", type=str,
                                  help="逗号分隔的关键词列表，第一个为原始关键词")
    source_exclusive.add_argument("-K", "--keywords-file", type=str,
                                  help="从文件读取关键词，每行一个")

    # 必需参数
    parser.add_argument("-o", "--output-filename", type=str, required=True,
                        help="输出文件 (已存在时会被覆盖)")

    # 可选参数
    parser.add_argument("-f", "--from-year", type=int, default=None,
                        help="起始年份 (默认读取配置，否则为1990)")
    parser.add_argument("-t", "--to-year", type=int, default=None,
                        help="结束年份 (默认读取配置，否则为2025)")
    parser.add_argument("-c", "--config", type=str, default=None,
                        help="配置文件路径")
    parser.add_argument("--reset-pool", action="store_true",
                        help="处理每个关键词之前清空口令池")
    parser.add_argument("-y", "--yes", action="store_true",
                        help="跳过确认提示")
    parser.add_argument("-d", "--daemon", action="store_true",
                        help="确认后以守护进程模式在后台运行")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="不显示逐行进度")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="详细输出模式")
    parser.add_argument("--version", action="version",
                        version=f"{PROGRAM_NAME} v{VERSION}")

    return parser.parse_args(argv)

def build_config(args: argparse.Namespace, file_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    合并配置文件与命令行参数，命令行参数优先

    参数:
        args: 解析后的参数对象
        file_config: 配置文件内容

    返回:
        最终配置字典
    """
    config = dict(file_config)

    if args.from_year is not None:
        config["from_year"] = args.from_year
    if args.to_year is not None:
        config["to_year"] = args.to_year
    if args.reset_pool:
        config["cumulative_pool"] = False

    config["show_progress"] = not (args.quiet or args.daemon)
    return config

def validate_arguments(args: argparse.Namespace, config: Dict[str, Any]) -> Optional[str]:
    """
    验证参数是否有效

    参数:
        args: 解析后的参数对象
        config: 合并后的配置

    返回:
        错误消息 (如果有错误) 或 None (如果验证通过)
    """
    if config["from_year"] > config["to_year"]:
        return f"起始年份 {config['from_year']} 不能大于结束年份 {config['to_year']}"

    if args.keywords_file and not os.path.exists(args.keywords_file):
        return f"找不到关键词文件: {args.keywords_file}"

    # 检查输出文件目录是否存在
    output_dir = os.path.dirname(args.output_filename)
    if output_dir and not os.path.isdir(output_dir):
        return f"输出文件目录不存在: {output_dir}"

    if os.path.isdir(args.output_filename):
        return f"输出路径是一个目录: {args.output_filename}"

    return None  # 验证通过

def load_keywords(args: argparse.Namespace) -> List[str]:
    """根据参数加载关键词"""
    source = KeywordSource()
    if args.keywords_file:
        return source.from_file(args.keywords_file)
    return source.from_string(args.keywords)

def print_banner() -> None:
    """打印程序横幅 (按显示宽度对齐中文字符)"""
    program_text = f"{PROGRAM_NAME}  v{VERSION}"
    desc_text = f"{DESCRIPTION}"

    # 框内视觉宽度 (不包括左右的 '│')
    inner_width = 41
    left_padding_str = "   "
    left_padding_width = 3

    # wcswidth 把中文字符算作宽度2
    program_text_width = wcswidth(program_text)
    desc_text_width = wcswidth(desc_text)

    # wcswidth 遇到控制字符会返回 -1
    if program_text_width < 0:
        program_text_width = len(program_text)
    if desc_text_width < 0:
        desc_text_width = len(desc_text)

    program_padding = " " * max(0, inner_width - left_padding_width - program_text_width)
    desc_padding = " " * max(0, inner_width - left_padding_width - desc_text_width)

    banner = f"""
    ┌─────────────────────────────────────────┐
    │                                         │
    │{left_padding_str}{program_text}{program_padding}│
    │{left_padding_str}{desc_text}{desc_padding}│
    │                                         │
    └─────────────────────────────────────────┘
    """
    print(banner)

def print_config_summary(args: argparse.Namespace, keywords: List[str], config: Dict[str, Any]) -> None:
    """
    打印配置摘要

    参数:
        args: 解析后的参数对象
        keywords: 关键词列表
        config: 合并后的配置
    """
    print("######################################################")
    print(f"  + 关键词:     {', '.join(keywords)}")
    print(f"  + 输出文件:   {args.output_filename}")
    print(f"  + 起始年份:   {config['from_year']}")
    print(f"  + 结束年份:   {config['to_year']}")
    print(f"  + 口令池模式: {'累积' if config['cumulative_pool'] else '每个关键词清空'}")
    print("######################################################")

def request_continue(input_func: Optional[Callable[[str], str]] = None) -> bool:
    """
    询问用户是否继续，输入无效时重新询问

    参数:
        input_func: 读取输入的函数，默认使用input

    返回:
        True表示继续，False表示退出
    """
    if input_func is None:
        input_func = input

    while True:
        try:
            answer = input_func("是否继续? (y/N): ").strip().lower()
        except EOFError:
            return False

        if answer == "y":
            return True
        if answer in ("n", ""):
            return False
        print(f"无效输入: {answer}")

def setup_logging(verbose: bool = False, log_file: Optional[str] = "log.txt") -> None:
    """
    设置日志记录

    参数:
        verbose: 是否启用详细日志
        log_file: 日志文件路径，为空时只输出到控制台
    """
    # 清除现有的日志处理器
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    # 设置日志级别
    log_level = logging.DEBUG if verbose else logging.INFO

    if log_file:
        file_handler = logging.FileHandler(filename=log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logging.root.addHandler(file_handler)

    # 创建控制台处理器
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))

    # 配置根日志记录器
    logging.root.setLevel(log_level)
    logging.root.addHandler(console_handler)

    logging.info(f"{PROGRAM_NAME} v{VERSION} 启动")
    logging.debug(f"日志级别: {'DEBUG' if verbose else 'INFO'}")

def run_generator(keywords: List[str], output_filename: str, config: Dict[str, Any]) -> int:
    """
    运行口令生成器

    参数:
        keywords: 关键词列表
        output_filename: 输出文件路径
        config: 配置字典

    返回:
        退出代码 (0表示成功，非0表示错误)
    """
    start_time = time.time()

    try:
        generator = PasswordGenerator(config=config)
        count = generator.run(keywords, output_filename)

    except KeyboardInterrupt:
        logging.warning("程序被用户中断 (Ctrl+C)")
        return 1
    except HumanizerError as e:
        logging.error(f"生成失败: {e}")
        print(f"错误: {e}")
        return 1
    except Exception as e:
        logging.error(f"生成过程中出现错误: {e}", exc_info=True)
        return 1

    elapsed = time.time() - start_time
    print(f"完成，共生成 {count} 个口令!")
    print(f" ==> 输出已保存到 `{output_filename}`")
    print(f"耗时: {elapsed:.2f} 秒")
    return 0

def daemon_run(keywords: List[str], output_filename: str, config: Dict[str, Any]) -> int:
    """
    以守护进程模式运行生成器

    参数:
        keywords: 关键词列表
        output_filename: 输出文件路径
        config: 配置字典

    返回:
        退出代码
    """
    # 创建PID文件目录
    if not os.path.exists("pid"):
        os.makedirs("pid")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    pid_file = f"pid/humanizer_{timestamp}.pid"
    log_file = config.get("log_file") or "log.txt"

    print("将在后台运行生成任务...")
    print(f"PID文件: {pid_file}")
    print(f"日志文件: {log_file}")
    print(f"输出文件: {output_filename}")
    print("您可以关闭此终端，生成将继续在后台执行")

    context = daemon.DaemonContext(
        working_directory=os.getcwd(),
        umask=0o002,
        pidfile=lockfile.FileLock(pid_file),
        detach_process=True
    )

    with context:
        # 守护进程模式总是使用详细日志
        setup_logging(verbose=True, log_file=log_file)
        logging.info(f"守护进程已启动，PID文件: {pid_file}")

        return run_generator(keywords, output_filename, config)

def main(argv: Optional[List[str]] = None) -> int:
    """
    主程序入口点

    参数:
        argv: 参数列表，默认使用sys.argv

    返回:
        退出代码 (0表示成功，非0表示错误)
    """
    print_banner()

    args = parse_arguments(argv)

    try:
        config_parser = ConfigParser(args.config)

        # 日志在解析配置之前配置
        setup_logging(verbose=args.verbose, log_file=config_parser.get_log_file())
        config = build_config(args, config_parser.parse_config())

        error = validate_arguments(args, config)
        if error:
            logging.error(error)
            print(f"错误: {error}")
            return 1

        keywords = load_keywords(args)
        print_config_summary(args, keywords, config)

        if not args.yes and not request_continue():
            print("退出..")
            return 0

        if args.daemon:
            return daemon_run(keywords, args.output_filename, config)

        return run_generator(keywords, args.output_filename, config)

    except KeyboardInterrupt:
        print("\n程序被用户中断 (Ctrl+C)")
        return 1
    except HumanizerError as e:
        logging.error(f"{e}")
        print(f"错误: {e}")
        return 1
    except Exception as e:
        print(f"发生未预期的错误: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
