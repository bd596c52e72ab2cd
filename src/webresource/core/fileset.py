#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FileSet - 内存中的虚拟文件树

实现 Module 接口，同时提供构建 API:
- mkdir_all: 递归创建目录
- mkdir: 创建单个目录
- write_file / write_compressed_file: 创建文件

构建 API 在违反不变量时抛出 ModuleDefinitionError，返回 self 以便链式调用。
构建完成后视为只读，读取操作不会修改树结构。
"""

import logging
from datetime import datetime
from typing import List, Optional

from .entry import FileEntry, DEFAULT_DIR_MODE, DEFAULT_FILE_MODE, ROOT_NAME
from .handle import OpenFile, open_entry
from ..exceptions import (
    EntryExistsError,
    EntryNotFoundError,
    NotADirectoryEntryError,
    ParentNotFoundError,
)
from ..hooks.base import CompressionHook
from ..hooks.compression import GzipCompressionHook
from ..module import Module
from ..utils import join_components, split_components, split_parent


logger = logging.getLogger(__name__)


class FileSet(Module):
    """
    内存虚拟文件树

    Example:
        >>> fs = (FileSet("demo", base_module)
        ...       .mkdir("/files", 0o755)
        ...       .write_file("/files/demo.js", 0o644, mtime, b"..."))
        >>> with fs.open("/files/demo.js") as f:
        ...     f.read()
    """

    def __init__(
        self,
        name: str,
        *requires: Module,
        compression_hook: Optional[CompressionHook] = None
    ):
        """
        Args:
            name: 模块名称
            requires: 依赖的模块
            compression_hook: 压缩条目使用的编解码器，默认 gzip
        """
        self._name = name
        self._requires: List[Module] = list(requires)
        self._compression_hook = compression_hook or GzipCompressionHook()
        self._root = FileEntry.directory(ROOT_NAME, DEFAULT_DIR_MODE, datetime.now())

    @property
    def name(self) -> str:
        return self._name

    @property
    def compression_hook(self) -> CompressionHook:
        return self._compression_hook

    @property
    def root(self) -> FileEntry:
        return self._root

    def requires(self) -> List[Module]:
        return list(self._requires)

    def __repr__(self) -> str:
        return f"FileSet({self._name!r})"

    # ==================== 查找 ====================

    def _find(self, parts: List[str]) -> Optional[FileEntry]:
        """沿组件序列从根节点查找，不存在返回 None"""
        entry = self._root
        for part in parts:
            entry = entry.child(part)
            if entry is None:
                return None
        return entry

    def find_entry(self, path: str) -> Optional[FileEntry]:
        """按路径查找条目，不存在返回 None"""
        return self._find(split_components(path))

    def exists(self, path: str) -> bool:
        return self.find_entry(path) is not None

    def _parent_for_create(self, path: str):
        """
        获取待创建条目的父目录和名称

        Raises:
            ParentNotFoundError: 父目录不存在
            NotADirectoryEntryError: 父路径不是目录
            EntryExistsError: 目标已存在 (包括根目录)
        """
        parent_path, base = split_parent(path)
        parent = self.find_entry(parent_path)

        if parent is None:
            raise ParentNotFoundError(parent_path)
        if not parent.is_dir:
            raise NotADirectoryEntryError(parent_path)
        if not base or parent.child(base) is not None:
            raise EntryExistsError(base or ROOT_NAME, parent_path)

        return parent, base

    # ==================== 构建 API ====================

    def mkdir_all(self, path: str, mode: int = DEFAULT_DIR_MODE) -> 'FileSet':
        """
        创建目录及所有缺失的上级目录

        已存在的目录直接跳过。

        Raises:
            NotADirectoryEntryError: 路径上某一级已存在且不是目录
        """
        entry = self._root
        walked: List[str] = []
        for part in split_components(path):
            walked.append(part)
            sub = entry.child(part)
            if sub is None:
                sub = FileEntry.directory(part, mode, datetime.now())
                entry.children.append(sub)
                logger.debug("%s: mkdir %s", self._name, join_components(walked))
            elif not sub.is_dir:
                raise NotADirectoryEntryError(join_components(walked))
            entry = sub
        return self

    def mkdir(self, path: str, mode: int = DEFAULT_DIR_MODE) -> 'FileSet':
        """
        创建单个目录

        父目录必须已存在，目标必须不存在。
        read_dir() 按创建顺序返回条目。
        """
        parent, base = self._parent_for_create(path)
        parent.children.append(FileEntry.directory(base, mode, datetime.now()))
        logger.debug("%s: mkdir %s", self._name, path)
        return self

    def write_file(
        self,
        path: str,
        mode: int = DEFAULT_FILE_MODE,
        mod_time: Optional[datetime] = None,
        data: bytes = b""
    ) -> 'FileSet':
        """
        创建文件

        父目录必须已存在，目标必须不存在。
        mod_time 表示文件的原始构建时间，默认为当前时间。
        """
        return self._write(path, mode, mod_time, data, compressed=False)

    def write_compressed_file(
        self,
        path: str,
        mode: int = DEFAULT_FILE_MODE,
        mod_time: Optional[datetime] = None,
        data: bytes = b""
    ) -> 'FileSet':
        """
        创建压缩文件

        与 write_file 相同，但 data 必须是 compression_hook 格式的压缩数据，
        读取时自动解压。数据有效性在 open() 时才检查。
        """
        return self._write(path, mode, mod_time, data, compressed=True)

    def _write(
        self,
        path: str,
        mode: int,
        mod_time: Optional[datetime],
        data: bytes,
        compressed: bool
    ) -> 'FileSet':
        parent, base = self._parent_for_create(path)
        entry = FileEntry.file(
            base,
            mode,
            mod_time or datetime.now(),
            data,
            codec=self._compression_hook if compressed else None,
        )
        parent.children.append(entry)
        logger.debug(
            "%s: write %s (%d bytes%s)",
            self._name, path, len(data), ", compressed" if compressed else ""
        )
        return self

    # ==================== 读取 API ====================

    def open(self, path: str) -> OpenFile:
        """
        打开文件或目录

        Raises:
            EntryNotFoundError: 路径不存在
            DecompressionError: 压缩数据无效
        """
        parts = split_components(path)
        entry = self._find(parts)
        if entry is None:
            raise EntryNotFoundError(path, self._name)
        return open_entry(entry, join_components(parts))

    def stat(self, path: str):
        """获取路径的元信息 (不打开文件)"""
        entry = self.find_entry(path)
        if entry is None:
            raise EntryNotFoundError(path, self._name)
        return entry.stat()

    def read(self, path: str) -> bytes:
        """读取文件的完整内容"""
        with self.open(path) as f:
            return f.read()
