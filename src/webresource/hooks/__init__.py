#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
webresource Hook 系统

提供压缩算法的可插拔接口。
"""

from .base import CompressionHook
from .compression import (
    GzipCompressionHook,
    ZlibCompressionHook,
    COMPRESS_LEVEL_ENV,
    compress_level_from_env,
)

__all__ = [
    # 抽象基类
    "CompressionHook",
    # 内置实现
    "GzipCompressionHook",
    "ZlibCompressionHook",
    # 配置
    "COMPRESS_LEVEL_ENV",
    "compress_level_from_env",
]
