#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
writer.py

输出文件模块。运行开始时删除并重新创建输出文件，之后只追加写入，
每写一行立即刷新。
"""

import os
import logging
from typing import Optional, TextIO

from .exceptions import OutputError

# 配置日志
logger = logging.getLogger("writer")


class OutputSink:
    """口令输出文件，每行一个口令"""

    def __init__(self, filename: str):
        """
        初始化输出文件

        参数:
            filename: 输出文件路径
        """
        self.filename = filename
        self.lines_written = 0
        self._file: Optional[TextIO] = None

    def open(self) -> None:
        """删除已存在的输出文件，并创建新的空文件"""
        if os.path.exists(self.filename):
            try:
                os.remove(self.filename)
                logger.debug(f"已删除旧的输出文件: {self.filename}")
            except OSError as e:
                logger.error(f"无法删除输出文件: {self.filename}")
                raise OutputError(self.filename, "删除", e) from e

        try:
            # 'x' 模式保证文件是新创建的
            self._file = open(self.filename, 'x', encoding='utf-8', newline='\n')
        except OSError as e:
            logger.error(f"无法创建输出文件: {self.filename}")
            raise OutputError(self.filename, "创建", e) from e

        logger.info(f"已创建输出文件: {self.filename}")

    def write(self, password: str) -> None:
        """
        追加一行并刷新

        参数:
            password: 要写入的口令
        """
        if self._file is None:
            raise OutputError(self.filename, "写入", OSError("文件未打开"))

        try:
            self._file.write(f"{password}\n")
            self._file.flush()
        except OSError as e:
            logger.error(f"写入输出文件失败: {self.filename}")
            raise OutputError(self.filename, "写入", e) from e

        self.lines_written += 1

    def close(self) -> None:
        """关闭输出文件"""
        if self._file is not None:
            try:
                self._file.close()
            except OSError as e:
                logger.warning(f"关闭输出文件时出错: {e}")
            self._file = None

    def __enter__(self) -> "OutputSink":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
