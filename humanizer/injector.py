#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
injector.py

令牌注入模块，把年份或特殊字符追加到组合末尾，或插入到组合内部的每个位置。
"""

from typing import Iterable, Iterator, List, Union

Token = Union[int, str]


def inject_token(variation: str, token: Token) -> Iterator[str]:
    """
    把单个令牌注入到组合中

    先生成追加在末尾的结果，再依次生成插入到位置 0..n-1 的结果。
    插入到位置n与追加相同，因此不重复生成。

    参数:
        variation: 大小写组合 (长度n)
        token: 年份或特殊字符

    生成:
        n+1 个口令
    """
    token = str(token)
    yield f"{variation}{token}"

    for n in range(len(variation)):
        yield f"{variation[:n]}{token}{variation[n:]}"


def add_elements(tokens: Iterable[Token], pool: List[str], variation: str) -> int:
    """
    把一组令牌依次注入组合，结果追加到口令池

    参数:
        tokens: 年份或特殊字符序列
        pool: 口令池 (原地追加)
        variation: 大小写组合

    返回:
        本次追加的口令数量
    """
    before = len(pool)
    for token in tokens:
        pool.extend(inject_token(variation, token))
    return len(pool) - before
