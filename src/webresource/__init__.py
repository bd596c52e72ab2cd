#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
webresource - 轻量级零依赖 Python 前端资源模块管理库

将 JS/CSS 等静态资源打包为带依赖声明的模块 (内存虚拟文件系统)，
按依赖顺序展开后统一遍历、合并。
"""

__version__ = "0.1.0"

# 异常类
from .exceptions import (
    WebResourceError,
    EntryNotFoundError,
    DecompressionError,
    HandleClosedError,
    EndOfDirectory,
    ModuleDefinitionError,
    ParentNotFoundError,
    NotADirectoryEntryError,
    EntryExistsError,
    InvalidEntryNameError,
)

# 工具函数
from .utils import normalize_path, split_components, file_ext

# 模块与依赖解析
from .module import Module, ModuleList, MODULE_API_VERSION, resolve

# 虚拟文件系统
from .core import FileSet, FileEntry, FileInfo, OpenFile

# 遍历与合并
from .walker import walk, walk_modules
from .bundle import Bundle, concatenate

# 本地目录加载
from .loader import load_directory, scan_files, DEFAULT_PATTERN

# Hooks
from .hooks import CompressionHook, GzipCompressionHook, ZlibCompressionHook

__all__ = [
    # 版本
    "__version__",
    # 异常
    "WebResourceError",
    "EntryNotFoundError",
    "DecompressionError",
    "HandleClosedError",
    "EndOfDirectory",
    "ModuleDefinitionError",
    "ParentNotFoundError",
    "NotADirectoryEntryError",
    "EntryExistsError",
    "InvalidEntryNameError",
    # 工具
    "normalize_path",
    "split_components",
    "file_ext",
    # 模块
    "Module",
    "ModuleList",
    "MODULE_API_VERSION",
    "resolve",
    # 虚拟文件系统
    "FileSet",
    "FileEntry",
    "FileInfo",
    "OpenFile",
    # 遍历与合并
    "walk",
    "walk_modules",
    "Bundle",
    "concatenate",
    # 加载
    "load_directory",
    "scan_files",
    "DEFAULT_PATTERN",
    # Hooks
    "CompressionHook",
    "GzipCompressionHook",
    "ZlibCompressionHook",
]
