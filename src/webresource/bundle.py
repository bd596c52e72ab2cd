#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
资源合并

按遍历顺序拼接同一扩展名的所有文件 (如生成 combined.js / combined.css)，
同时记录最新的修改时间，便于调用方生成缓存标识。
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple, Union, Iterable

from .module import Module
from .walker import walk, walk_modules


logger = logging.getLogger(__name__)


@dataclass
class Bundle:
    """
    合并结果

    paths 记录访问过的 (模块名, 路径)，顺序与 data 中的拼接顺序一致。
    """
    ext: str
    data: bytes = b""
    mod_time: Optional[datetime] = None
    paths: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.paths)

    @property
    def version(self) -> str:
        """基于最新修改时间的版本号 (Unix 秒)，没有文件时为空串"""
        if self.mod_time is None:
            return ""
        return str(int(self.mod_time.timestamp()))


def concatenate(
    modules: Union[Module, Iterable[Module]],
    ext: str,
    separator: bytes = b"\n"
) -> Bundle:
    """
    拼接模块中所有匹配扩展名的文件

    不做依赖解析，传入的列表应已经过 resolve()。

    Args:
        modules: 单个模块或有序模块列表
        ext: 扩展名 (如 ".js")
        separator: 每个文件之后追加的分隔字节

    Returns:
        Bundle 合并结果
    """
    chunks: List[bytes] = []
    bundle = Bundle(ext=ext)

    def visit(module: Module, full_path: str, f) -> None:
        chunks.append(f.read())
        chunks.append(separator)
        mod_time = f.stat().mod_time
        if bundle.mod_time is None or mod_time > bundle.mod_time:
            bundle.mod_time = mod_time
        bundle.paths.append((module.name, full_path))

    if isinstance(modules, Module):
        walk(modules, ext, visit)
    else:
        walk_modules(modules, ext, visit)

    bundle.data = b"".join(chunks)
    logger.info(
        "bundled %d %s files, %d bytes", bundle.file_count, ext, len(bundle.data)
    )
    return bundle
