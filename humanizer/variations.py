#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
variations.py

大小写组合生成器，枚举关键词每个字符的大小写选择。
长度为L的关键词共有 2^L 个组合，数量随长度指数增长。
"""

from typing import Iterator

from .exceptions import KeywordTooLongError

# 默认的关键词长度上限 (2^20 约一百万个组合)
DEFAULT_MAX_KEYWORD_LENGTH = 20


def _upper_char(c: str) -> str:
    # 只取大写映射的第一个字符，保证组合长度不变 (例如 'ß' -> 'S')
    upper = c.upper()
    return upper[0] if upper else c


def variation_count(keyword: str) -> int:
    """返回关键词的大小写组合数量"""
    return 1 << len(keyword)


def check_keyword_length(keyword: str, limit: int = DEFAULT_MAX_KEYWORD_LENGTH) -> None:
    """
    检查关键词长度是否超过上限

    参数:
        keyword: 替换后的关键词
        limit: 长度上限，0表示不限制

    异常:
        KeywordTooLongError: 超过上限时抛出
    """
    if limit and len(keyword) > limit:
        raise KeywordTooLongError(keyword, limit)


def case_variations(keyword: str) -> Iterator[str]:
    """
    按位掩码枚举所有大小写组合

    掩码从 0 到 2^L-1，第i位为1时第i个字符转为大写，为0时保持原样。

    参数:
        keyword: 替换后的关键词

    生成:
        大小写组合字符串，共 2^L 个
    """
    chars = list(keyword)
    upper_chars = [_upper_char(c) for c in chars]

    for mask in range(variation_count(keyword)):
        yield ''.join(
            upper_chars[idx] if mask & (1 << idx) else c
            for idx, c in enumerate(chars)
        )
