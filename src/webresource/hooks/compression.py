#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内置压缩 Hook 实现 (基于标准库)
"""

import gzip
import os
import zlib
from typing import Optional

from .base import CompressionHook


# 覆盖默认压缩级别的环境变量
COMPRESS_LEVEL_ENV = "WEBRESOURCE_COMPRESS_LEVEL"


def compress_level_from_env(default: int) -> int:
    """
    读取环境变量中的压缩级别

    未设置或取值不在 1-9 之间时返回 default。
    """
    value = os.environ.get(COMPRESS_LEVEL_ENV)
    if not value:
        return default
    try:
        level = int(value)
    except ValueError:
        return default
    if 1 <= level <= 9:
        return level
    return default


class GzipCompressionHook(CompressionHook):
    """
    gzip 压缩

    默认的压缩条目格式。
    """

    def __init__(self, level: Optional[int] = None, mtime: int = 0):
        """
        Args:
            level: 压缩级别 (1-9)，默认读取环境变量，否则为 9
            mtime: 写入 gzip 头的时间戳，固定为 0 使输出可复现
        """
        self._level = level if level is not None else compress_level_from_env(9)
        self._mtime = mtime

    @property
    def display_name(self) -> str:
        return "gzip"

    @property
    def level(self) -> int:
        return self._level

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self._level, mtime=self._mtime)

    def decompress(self, data: bytes) -> bytes:
        return gzip.decompress(data)


class ZlibCompressionHook(CompressionHook):
    """zlib 压缩"""

    def __init__(self, level: Optional[int] = None):
        """
        Args:
            level: 压缩级别 (1-9)，默认读取环境变量，否则为 6
        """
        self._level = level if level is not None else compress_level_from_env(6)

    @property
    def display_name(self) -> str:
        return "zlib"

    @property
    def level(self) -> int:
        return self._level

    def compress(self, data: bytes) -> bytes:
        return zlib.compress(data, self._level)

    def decompress(self, data: bytes) -> bytes:
        return zlib.decompress(data)
