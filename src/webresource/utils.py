#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
webresource 工具函数

提供虚拟路径处理等通用功能。所有虚拟路径均视为绝对路径。
"""

from typing import List, Sequence, Tuple


SEPARATOR = "/"


def split_components(path: str) -> List[str]:
    """
    将路径拆分为规范化的组件序列

    1. 视为绝对路径 (自动补全开头的 /)
    2. 忽略空组件和 "."
    3. ".." 回退一级，越过根目录时停留在根目录

    只有 / 是分隔符，反斜杠是普通字符。

    Args:
        path: 原始路径

    Returns:
        组件列表，根目录返回空列表

    Examples:
        >>> split_components("/a/b/../c")
        ['a', 'c']
        >>> split_components("a/b")
        ['a', 'b']
        >>> split_components("../")
        []
    """
    parts: List[str] = []
    for part in path.split(SEPARATOR):
        if not part or part == ".":
            continue
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    return parts


def join_components(parts: Sequence[str]) -> str:
    """将组件序列拼接为绝对路径"""
    return SEPARATOR + SEPARATOR.join(parts)


def normalize_path(path: str) -> str:
    """
    路径规范化

    Examples:
        >>> normalize_path("//a/./b/")
        '/a/b'
        >>> normalize_path("..")
        '/'
    """
    return join_components(split_components(path))


def split_parent(path: str) -> Tuple[str, str]:
    """
    拆分为 (父目录, 名称)

    Examples:
        >>> split_parent("/files/demo.js")
        ('/files', 'demo.js')
        >>> split_parent("/")
        ('/', '')
    """
    parts = split_components(path)
    if not parts:
        return SEPARATOR, ""
    return join_components(parts[:-1]), parts[-1]


def join_path(directory: str, name: str) -> str:
    """拼接目录与条目名称"""
    return normalize_path(directory + SEPARATOR + name)


def file_ext(name: str) -> str:
    """
    获取扩展名 (包含点号，区分大小写)

    Examples:
        >>> file_ext("/js/app.min.js")
        '.js'
        >>> file_ext("README")
        ''
        >>> file_ext(".css")
        '.css'
    """
    base = name.rsplit(SEPARATOR, 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""
