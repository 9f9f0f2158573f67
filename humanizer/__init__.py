#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Humanizer - 真实口令字典生成工具

根据少量关键词生成人类常用的口令变体(leet替换、大小写组合、年份与特殊字符注入)，
并逐行写入输出文件。
"""

__version__ = "0.2.0"
