#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
engine.py

口令生成协调器，整合字符替换、大小写组合和令牌注入，
管理口令池、输出文件、进度显示和统计信息。
"""

import time
import sys
from typing import List, Dict, Any, Optional, Sequence, TextIO
import logging

from wcwidth import wcswidth

# 导入项目其他模块
from .exceptions import ConfigurationError
from .generators import generate_years
from .injector import add_elements
from .substitutions import apply_substitutions, special_chars
from .variations import DEFAULT_MAX_KEYWORD_LENGTH, case_variations, check_keyword_length
from .writer import OutputSink

# 配置日志
logger = logging.getLogger("engine")


class PasswordGenerator:
    """口令生成协调器，管理整个生成流程"""

    def __init__(self,
                 config: Dict[str, Any],
                 specials: Optional[Sequence[str]] = None,
                 stream: Optional[TextIO] = None):
        """
        初始化口令生成器

        参数:
            config: 配置字典，包含年份区间和生成选项
            specials: 特殊字符序列，默认使用内置列表
            stream: 进度输出流，默认标准输出
        """
        self.from_year = config.get("from_year", 1990)
        self.to_year = config.get("to_year", 2025)
        self.cumulative_pool = config.get("cumulative_pool", True)
        self.max_keyword_length = config.get("max_keyword_length", DEFAULT_MAX_KEYWORD_LENGTH)
        self.progress_interval = config.get("progress_interval", 5.0)
        self.show_progress = config.get("show_progress", True)

        self.specials = list(specials) if specials is not None else special_chars()
        self.stream = stream or sys.stdout

        # 口令池，默认在关键词之间不清空
        self.pool: List[str] = []
        self.sink: Optional[OutputSink] = None

        # 进度行的上次显示宽度，用于覆盖旧内容
        self._last_progress_width = 0

        self._reset_stats()

    def _reset_stats(self) -> None:
        """重置统计信息"""
        self.stats = {
            'total_written': 0,
            'originals_written': 0,
            'keywords_processed': 0,
            'pool_size': 0,
            'start_time': None,
            'end_time': None,
        }

    def prepare(self, keywords: Sequence[str]) -> List[int]:
        """
        在任何文件操作之前验证参数

        参数:
            keywords: 关键词列表

        返回:
            年份列表
        """
        if not keywords:
            raise ConfigurationError("至少需要一个关键词")

        years = generate_years(self.from_year, self.to_year)

        for keyword in keywords:
            check_keyword_length(apply_substitutions(keyword), self.max_keyword_length)

        return years

    def run(self, keywords: Sequence[str], output_filename: str) -> int:
        """
        运行生成任务

        参数:
            keywords: 有序关键词列表，第一个为原始关键词
            output_filename: 输出文件路径

        返回:
            写入的口令数量 (不含原始关键词行)
        """
        years = self.prepare(keywords)
        original = keywords[0]

        self._reset_stats()
        self.pool = []
        self.stats['start_time'] = time.time()

        logger.info(f"开始生成口令，关键词: {', '.join(keywords)}")
        logger.info(f"年份区间: {self.from_year}-{self.to_year}，特殊字符: {''.join(self.specials)}")
        if not self.cumulative_pool:
            logger.info("口令池将在处理每个关键词之前清空")

        self.sink = OutputSink(output_filename)

        try:
            self.sink.open()
            last_progress_time = time.time()

            for keyword in keywords:
                if not self.cumulative_pool:
                    self.pool.clear()

                added = self.generate_for_keyword(keyword, years)
                logger.debug(f"关键词 '{keyword}' 新增 {added} 个口令，口令池: {len(self.pool)}")

                # 写入原始关键词
                self.sink.write(original)
                self.stats['originals_written'] += 1

                # 写入口令池中当前的所有口令
                for password in self.pool:
                    self.sink.write(password)
                    self.stats['total_written'] += 1
                    self._report_progress(password)

                    current_time = time.time()
                    if self.progress_interval and current_time - last_progress_time >= self.progress_interval:
                        self._log_progress()
                        last_progress_time = current_time

                self.stats['keywords_processed'] += 1
                self.stats['pool_size'] = len(self.pool)

            self._finalize()
            return self.stats['total_written']

        except KeyboardInterrupt:
            logger.warning("用户中断生成 (Ctrl+C)")
            self._finalize(interrupted=True)
            raise
        finally:
            # 无论如何都确保输出文件被关闭
            self.close()

    def generate_for_keyword(self, keyword: str, years: Sequence[int]) -> int:
        """
        为单个关键词生成口令并追加到口令池

        参数:
            keyword: 原始关键词
            years: 年份列表

        返回:
            新增的口令数量
        """
        substituted = apply_substitutions(keyword)
        logger.debug(f"关键词替换: {keyword} -> {substituted}")

        added = 0
        for variation in case_variations(substituted):
            added += add_elements(years, self.pool, variation)
            added += add_elements(self.specials, self.pool, variation)

        return added

    def _report_progress(self, password: str) -> None:
        """在同一行显示当前进度"""
        if not self.show_progress:
            return

        line = f"{self.stats['total_written']} 个口令已生成, 当前: {password}"
        width = wcswidth(line)
        if width < 0:
            # 包含控制字符时回退到len
            width = len(line)

        padding = " " * max(0, self._last_progress_width - width)
        self._last_progress_width = width

        self.stream.write(f"\r{line}{padding}")
        self.stream.flush()

    def _log_progress(self) -> None:
        """记录当前生成进度到日志"""
        elapsed = time.time() - self.stats['start_time']
        rate = self.stats['total_written'] / elapsed if elapsed > 0 else 0

        logger.info(
            f"--- 生成进度 --- 已写入: {self.stats['total_written']}, "
            f"已处理关键词: {self.stats['keywords_processed']}, "
            f"口令池: {len(self.pool)}, 耗时: {elapsed:.1f} 秒, 速度: {rate:.0f} 个/秒"
        )

    def _finalize(self, interrupted: bool = False) -> None:
        """完成生成，输出统计信息"""
        self.stats['end_time'] = time.time()
        duration = self.stats['end_time'] - self.stats['start_time']

        if self.show_progress and self._last_progress_width:
            # 清除进度行
            self.stream.write("\r" + " " * self._last_progress_width + "\r")
            self.stream.flush()
            self._last_progress_width = 0

        if interrupted:
            logger.warning(f"生成已中断，已写入 {self.stats['total_written']} 个口令")
        else:
            logger.info(
                f"生成完成，共写入 {self.stats['total_written']} 个口令，"
                f"耗时 {duration:.2f} 秒，输出文件: {self.sink.filename}"
            )

    def close(self) -> None:
        """关闭资源"""
        if self.sink is not None:
            self.sink.close()
