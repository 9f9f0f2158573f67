#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config_parser.py

配置文件解析模块，负责读取和解析 key = value 格式的配置文件，
提供默认配置和配置验证功能。
"""

import os
import logging
from typing import Dict, Any, Iterator, Optional

from .exceptions import ConfigurationError

# 默认配置
DEFAULT_CONFIG = {
    "from_year": 1990,
    "to_year": 2025,
    "cumulative_pool": True,      # 口令池在关键词之间不清空
    "max_keyword_length": 20,     # 0表示不限制
    "progress_interval": 5.0,     # 进度日志间隔(秒)
    "log_file": "log.txt",        # 留空则不写日志文件
}

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


class ConfigParser:
    """配置解析器类，处理配置文件的读取和验证"""

    def __init__(self, config_path: Optional[str] = None):
        """
        初始化配置解析器

        参数:
            config_path: 配置文件路径，为None时只使用默认配置
        """
        self.config_path = config_path
        self.logger = logging.getLogger("config")
        self.config = DEFAULT_CONFIG.copy()

    def parse_config(self) -> Dict[str, Any]:
        """
        解析配置文件

        年份区间不在这里检查，命令行参数可能会覆盖其中一端。

        返回:
            配置字典
        """
        if self.config_path is None:
            return self.config

        if not os.path.exists(self.config_path):
            self.logger.warning(f"配置文件 {self.config_path} 不存在，将创建默认配置")
            self._create_default_config()
            return self.config

        self.logger.info(f"正在读取配置文件: {self.config_path}")
        for line in self._read_lines():
            # 解析键值对
            if '=' not in line:
                self.logger.warning(f"无法解析配置行: {line}")
                continue

            key, value = [part.strip() for part in line.split('=', 1)]
            self._process_config_item(key, value)

        return self.config

    def get_log_file(self) -> str:
        """
        只读取日志文件设置，在日志系统配置之前调用，不输出警告

        返回:
            日志文件路径 (可能为空)
        """
        log_file = DEFAULT_CONFIG["log_file"]
        if self.config_path is None or not os.path.exists(self.config_path):
            return log_file

        for line in self._read_lines():
            if '=' not in line:
                continue
            key, value = [part.strip() for part in line.split('=', 1)]
            if key == "log_file":
                log_file = value

        return log_file

    def _read_lines(self) -> Iterator[str]:
        """逐行读取配置文件，跳过空行和注释"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"读取配置文件时出错: {e}")
            raise ConfigurationError(f"无法读取配置文件 {self.config_path}: {e}") from e

        for line in lines:
            line = line.strip()
            if line and not line.startswith('#'):
                yield line

    def _process_config_item(self, key: str, value: str) -> None:
        """
        处理单个配置项

        参数:
            key: 配置键
            value: 配置值字符串
        """
        if key in ("from_year", "to_year"):
            try:
                self.config[key] = int(value)
            except ValueError:
                self.logger.warning(f"无效的{key}值: {value}，使用默认值: {DEFAULT_CONFIG[key]}")

        elif key == "cumulative_pool":
            lowered = value.lower()
            if lowered in TRUE_VALUES:
                self.config["cumulative_pool"] = True
            elif lowered in FALSE_VALUES:
                self.config["cumulative_pool"] = False
            else:
                self.logger.warning(f"无效的cumulative_pool值: {value}，使用默认值: {DEFAULT_CONFIG['cumulative_pool']}")

        elif key == "max_keyword_length":
            try:
                self.config["max_keyword_length"] = max(0, int(value))
            except ValueError:
                self.logger.warning(f"无效的max_keyword_length值: {value}，使用默认值: {DEFAULT_CONFIG['max_keyword_length']}")

        elif key == "progress_interval":
            try:
                self.config["progress_interval"] = max(0.0, float(value))
            except ValueError:
                self.logger.warning(f"无效的progress_interval值: {value}，使用默认值: {DEFAULT_CONFIG['progress_interval']}")

        elif key == "log_file":
            self.config["log_file"] = value

        else:
            self.logger.warning(f"未知配置项: {key}")

    def _create_default_config(self) -> None:
        """创建默认配置文件"""
        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                f.write("""# Humanizer 配置文件
# 命令行参数优先于此文件中的设置

# 年份区间 (闭区间)
from_year = 1990
to_year = 2025

# 口令池是否在关键词之间累积 (false 表示每个关键词之前清空)
cumulative_pool = true

# 关键词长度上限，0 表示不限制
max_keyword_length = 20

# 进度日志间隔(秒)，0 表示不记录
progress_interval = 5.0

# 日志文件，留空则只输出到控制台
log_file = log.txt
""")
            self.logger.info(f"已创建默认配置文件: {self.config_path}")
        except OSError as e:
            self.logger.error(f"创建默认配置文件失败: {e}")
