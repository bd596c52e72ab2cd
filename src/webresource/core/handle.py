#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
打开的文件句柄

每次 open() 创建一个独立的 OpenFile:
- 文件: 基于解码后内容的可 seek 读取器，位置从 0 开始
- 目录: 额外持有子节点快照上的私有游标，用于分批读取目录
"""

import io
from typing import List, Optional, Tuple

from .entry import FileEntry, FileInfo
from ..exceptions import EndOfDirectory, HandleClosedError


class OpenFile(io.BytesIO):
    """
    虚拟文件句柄

    继承 BytesIO，提供 read/seek/tell 等标准接口，并支持 with 语句。
    关闭后不可再读取。
    """

    def __init__(self, entry: FileEntry, path: str, content: bytes = b""):
        super().__init__(content)
        self._entry = entry
        self._path = path
        self._size = len(content)
        # 快照为不可变元组，游标只在本句柄内前进
        self._children: Tuple[FileEntry, ...] = tuple(entry.children)
        self._cursor = 0

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_dir(self) -> bool:
        return self._entry.is_dir

    def _check_open(self) -> None:
        if self.closed:
            raise HandleClosedError(self._path)

    def stat(self) -> FileInfo:
        """
        获取元信息

        文件的 size 为解码后的长度。
        """
        self._check_open()
        if self._entry.is_dir:
            return FileInfo(self._entry, size=0)
        return FileInfo(self._entry, size=self._size)

    def read_dir(self, count: int = -1) -> List[FileInfo]:
        """
        分批读取目录条目

        Args:
            count: 最多返回的条目数，<= 0 表示返回剩余全部

        Returns:
            按创建顺序排列的条目信息列表

        Raises:
            EndOfDirectory: 没有剩余条目
            HandleClosedError: 句柄已关闭
        """
        self._check_open()

        remaining = len(self._children) - self._cursor
        if count <= 0 or count > remaining:
            count = remaining

        batch = self._children[self._cursor:self._cursor + count]
        self._cursor += count

        if not batch:
            raise EndOfDirectory(self._path)

        return [entry.stat() for entry in batch]

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<OpenFile {self._path!r} {state}>"


def open_entry(entry: FileEntry, path: str) -> OpenFile:
    """
    打开条目

    压缩文件在此整体解压 (解压流不可 seek)。

    Raises:
        DecompressionError: 压缩数据无效
    """
    content: Optional[bytes] = None
    if not entry.is_dir:
        content = entry.decode(path)
    return OpenFile(entry, path, content or b"")
