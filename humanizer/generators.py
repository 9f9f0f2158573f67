#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
generators.py

关键词与年份来源模块，负责从命令行字符串或文件加载关键词，
并生成年份区间。
"""

import os
from typing import List
import logging

from .exceptions import ConfigurationError

# 配置日志
logger = logging.getLogger("generators")


def generate_years(year_from: int, year_to: int) -> List[int]:
    """
    生成闭区间 [year_from, year_to] 内的所有年份

    参数:
        year_from: 起始年份
        year_to: 结束年份

    返回:
        升序的年份列表

    异常:
        ConfigurationError: 起始年份大于结束年份
    """
    if year_from > year_to:
        raise ConfigurationError(f"起始年份 {year_from} 不能大于结束年份 {year_to}")

    return list(range(year_from, year_to + 1))


class KeywordSource:
    """关键词来源类，加载并规范化用户提供的关键词"""

    def from_string(self, raw: str) -> List[str]:
        """
        解析逗号分隔的关键词

        参数:
            raw: 逗号分隔的关键词字符串，每项去除首尾空白

        返回:
            有序的关键词列表，第一个为原始关键词
        """
        keywords = []
        skipped = 0

        for part in raw.split(','):
            keyword = part.strip()
            if keyword:
                keywords.append(keyword)
            else:
                skipped += 1

        if skipped:
            logger.warning(f"忽略了 {skipped} 个空关键词")

        return self._check_keywords(keywords, "命令行")

    def from_file(self, filepath: str) -> List[str]:
        """
        从文件加载关键词

        参数:
            filepath: 关键词文件路径，每行一个关键词

        返回:
            有序的关键词列表
        """
        if not os.path.exists(filepath):
            logger.error(f"文件不存在: {filepath}")
            raise ConfigurationError(f"找不到关键词文件: {filepath}")

        logger.info(f"从文件加载关键词: {filepath}")
        keywords = []
        line_count = 0

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                for line in f:
                    line_count += 1
                    keyword = line.strip()

                    # 跳过空行和注释行
                    if not keyword or keyword.startswith('#'):
                        continue

                    keywords.append(keyword)
        except UnicodeDecodeError as e:
            logger.error(f"文件编码错误: {e}")
            raise ConfigurationError(f"无法解析关键词文件 {filepath}: {e}") from e
        except OSError as e:
            logger.error(f"读取文件时出错: {e}")
            raise ConfigurationError(f"无法读取关键词文件 {filepath}: {e}") from e

        logger.info(f"文件解析完成。总行数: {line_count}, 关键词: {len(keywords)}")
        return self._check_keywords(keywords, filepath)

    def _check_keywords(self, keywords: List[str], source: str) -> List[str]:
        if not keywords:
            raise ConfigurationError(f"未从{source}中找到有效关键词")
        return keywords
