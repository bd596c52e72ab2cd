#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
虚拟文件树的数据结构定义

定义 FileEntry (树节点) 和 FileInfo (元信息视图)。
"""

import stat
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..exceptions import DecompressionError, InvalidEntryNameError
from ..hooks.base import CompressionHook
from ..utils import SEPARATOR


# ==================== 常量定义 ====================

# 默认权限位
DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644

# 根目录名称
ROOT_NAME = SEPARATOR


# ==================== 树节点 ====================

@dataclass(eq=False)
class FileEntry:
    """
    虚拟文件树节点

    文件节点持有 data (原始或压缩后的字节)，目录节点持有 children。
    children 按创建顺序排列，同一目录下名称唯一。
    """
    name: str
    mode: int
    mod_time: datetime
    data: Optional[bytes] = None
    compressed: bool = False
    codec: Optional[CompressionHook] = field(default=None, repr=False)
    children: List['FileEntry'] = field(default_factory=list, repr=False)

    def __post_init__(self):
        # 只允许单个路径组件，根目录除外
        if self.name != ROOT_NAME and (
            not self.name or SEPARATOR in self.name or self.name in (".", "..")
        ):
            raise InvalidEntryNameError(self.name)

    @classmethod
    def directory(cls, name: str, mode: int, mod_time: datetime) -> 'FileEntry':
        """创建目录节点，mode 只保留权限位并带上目录标志"""
        return cls(name=name, mode=stat.S_IMODE(mode) | stat.S_IFDIR, mod_time=mod_time)

    @classmethod
    def file(
        cls,
        name: str,
        mode: int,
        mod_time: datetime,
        data: bytes,
        codec: Optional[CompressionHook] = None
    ) -> 'FileEntry':
        """创建文件节点，codec 不为空时表示 data 为压缩数据"""
        return cls(
            name=name,
            mode=stat.S_IMODE(mode) | stat.S_IFREG,
            mod_time=mod_time,
            data=bytes(data),
            compressed=codec is not None,
            codec=codec,
        )

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    def child(self, name: str) -> Optional['FileEntry']:
        """按名称查找子节点"""
        for entry in self.children:
            if entry.name == name:
                return entry
        return None

    def decode(self, path: str = None) -> bytes:
        """
        返回解码后的完整内容

        压缩条目在此一次性解压，目录返回空字节。

        Raises:
            DecompressionError: 压缩数据无效
        """
        if self.data is None:
            return b""
        if not self.compressed:
            return self.data
        try:
            return self.codec.decompress(self.data)
        except Exception as e:
            raise DecompressionError(path or self.name, e) from e

    @property
    def size(self) -> int:
        """
        解码后的字节数

        压缩条目每次访问都会解压，条目本身不被修改。
        """
        if self.data is None:
            return 0
        if not self.compressed:
            return len(self.data)
        return len(self.decode())

    @property
    def stored_size(self) -> int:
        """实际存储的字节数 (压缩条目为压缩后大小)"""
        return len(self.data) if self.data is not None else 0

    def stat(self) -> 'FileInfo':
        return FileInfo(self)


# ==================== 元信息视图 ====================

class FileInfo:
    """
    条目元信息

    stat() 和 read_dir() 返回的只读视图，不持有文件内容。
    """

    __slots__ = ("_entry", "_size")

    def __init__(self, entry: FileEntry, size: Optional[int] = None):
        self._entry = entry
        self._size = size

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def size(self) -> int:
        if self._size is not None:
            return self._size
        return self._entry.size

    @property
    def mode(self) -> int:
        return self._entry.mode

    @property
    def mod_time(self) -> datetime:
        return self._entry.mod_time

    @property
    def is_dir(self) -> bool:
        return self._entry.is_dir

    @property
    def compressed(self) -> bool:
        return self._entry.compressed

    def __repr__(self) -> str:
        kind = "dir" if self.is_dir else "file"
        return f"FileInfo({self.name!r}, {kind}, mode={stat.filemode(self.mode)})"
