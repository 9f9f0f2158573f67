#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
substitutions.py

字符替换表模块，模拟人们常用的leet写法 (例如 a -> @, o -> 0)。
替换按固定顺序依次执行，而不是同时执行，因此顺序会影响结果。
"""

from typing import List, Tuple

# (替代字符, 原字符) 对，按此顺序依次替换
HUMAN_ALTERNATIVES: Tuple[Tuple[str, str], ...] = (
    ('@', 'a'),
    ('4', 'A'),
    ('1', 'I'),
    ('!', '1'),
    ('0', 'o'),
    ('5', 'S'),
    ('3', 'E'),
    ('7', 'T'),
    ('$', 'S'),
    ('2', 'Z'),
    ('8', 'B'),
)

# 每一轮替换前都会执行的固定替换
LITERAL_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ('i', '1'),
    ('e', '3'),
)

# 注入到每个组合中的特殊字符，其中的重复逗号保留原样
SPECIAL_CHARS: Tuple[str, ...] = ('!', '?', ',', ';', ',', '-', '_')


def special_chars() -> List[str]:
    """返回特殊字符列表的副本"""
    return list(SPECIAL_CHARS)


def apply_substitutions(keyword: str,
                        alternatives: Tuple[Tuple[str, str], ...] = HUMAN_ALTERNATIVES) -> str:
    """
    对关键词执行leet替换

    每个替换对都会先执行 i->1 与 e->3，再把原字符替换为替代字符。
    i->1 与 e->3 在第一轮之后不再产生变化，但仍按每个替换对重复执行。

    参数:
        keyword: 原始关键词
        alternatives: 有序的 (替代字符, 原字符) 对

    返回:
        替换后的字符串 (长度与原关键词相同)
    """
    for alt, classic in alternatives:
        for old, new in LITERAL_REPLACEMENTS:
            keyword = keyword.replace(old, new)
        keyword = keyword.replace(classic, alt)

    return keyword
