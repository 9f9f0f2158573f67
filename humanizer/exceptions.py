#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
exceptions.py

生成过程中使用的异常类型。
配置错误在任何文件操作之前抛出，输出错误为致命错误，不做重试。
"""


class HumanizerError(Exception):
    """所有生成错误的基类"""
    pass


class ConfigurationError(HumanizerError, ValueError):
    """参数或配置无效 (例如起始年份大于结束年份)"""
    pass


class KeywordTooLongError(ConfigurationError):
    """关键词长度超过上限，大小写组合数量不可承受"""

    def __init__(self, keyword: str, limit: int):
        self.keyword = keyword
        self.limit = limit
        super().__init__(
            f"关键词 '{keyword}' 长度为 {len(keyword)}，超过上限 {limit} "
            f"(将产生 2^{len(keyword)} 个大小写组合)"
        )


class OutputError(HumanizerError, OSError):
    """输出文件删除、创建或写入失败"""

    def __init__(self, path: str, action: str, cause: OSError):
        self.path = path
        self.action = action
        self.cause = cause
        super().__init__(f"无法{action}输出文件 '{path}': {cause}")
