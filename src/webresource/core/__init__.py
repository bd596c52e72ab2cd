#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
webresource 核心模块

提供内存虚拟文件树、条目结构和文件句柄。
"""

from .entry import FileEntry, FileInfo, DEFAULT_DIR_MODE, DEFAULT_FILE_MODE
from .handle import OpenFile
from .fileset import FileSet

__all__ = [
    "FileEntry",
    "FileInfo",
    "OpenFile",
    "FileSet",
    "DEFAULT_DIR_MODE",
    "DEFAULT_FILE_MODE",
]
