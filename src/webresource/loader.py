#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
从本地目录构建模块

扫描本地目录，按正则过滤文件路径，将内容写入新的 FileSet。
默认只收集 .js 和 .css 文件，并以 gzip 压缩存储。
"""

import logging
import os
import re
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .core.entry import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE
from .core.fileset import FileSet
from .hooks.base import CompressionHook
from .module import Module
from .utils import join_components, normalize_path, split_parent


logger = logging.getLogger(__name__)


# 默认文件过滤表达式
DEFAULT_PATTERN = r"\.(js|css)$"


def _raise_walk_error(error: OSError) -> None:
    """os.walk 的 onerror 回调，不可读的目录直接抛出"""
    raise error


def _to_vfs_path(rel_path: str) -> str:
    """本地相对路径转为虚拟路径，只按本地分隔符拆分"""
    parts = rel_path.split(os.sep)
    if os.altsep:
        parts = [p for part in parts for p in part.split(os.altsep)]
    return join_components(parts)


def scan_files(
    local_dir: str,
    pattern: str = DEFAULT_PATTERN,
    recursive: bool = False
) -> List[Tuple[str, str]]:
    """
    扫描本地目录

    Args:
        local_dir: 本地目录路径
        pattern: 正则表达式 (search 匹配)；非递归时匹配文件名，
            递归时匹配以 / 开头的相对路径
        recursive: 是否递归扫描子目录

    Returns:
        [(本地路径, 虚拟路径), ...]，按虚拟路径排序

    Raises:
        NotADirectoryError: local_dir 不是目录
        OSError: 子目录不可读
        re.error: 正则表达式无效
    """
    if not os.path.isdir(local_dir):
        raise NotADirectoryError(f"不是目录: {local_dir}")

    matcher = re.compile(pattern)
    result = []

    if recursive:
        for root, dirs, files in os.walk(local_dir, onerror=_raise_walk_error):
            for filename in files:
                local_path = os.path.join(root, filename)
                vfs_path = _to_vfs_path(os.path.relpath(local_path, local_dir))
                if matcher.search(vfs_path):
                    result.append((local_path, vfs_path))
    else:
        for filename in os.listdir(local_dir):
            local_path = os.path.join(local_dir, filename)
            if not os.path.isfile(local_path):
                continue
            if matcher.search(filename):
                result.append((local_path, join_components([filename])))

    result.sort(key=lambda item: item[1])
    return result


def load_directory(
    name: str,
    local_dir: str,
    requires: Iterable[Module] = (),
    pattern: str = DEFAULT_PATTERN,
    recursive: bool = False,
    compress: bool = True,
    compression_hook: Optional[CompressionHook] = None,
    mount_point: str = "/"
) -> FileSet:
    """
    从本地目录构建 FileSet

    Args:
        name: 模块名称
        local_dir: 本地目录路径
        requires: 依赖的模块
        pattern: 文件过滤正则
        recursive: 是否递归扫描并保留子目录结构
        compress: 是否压缩存储
        compression_hook: 压缩算法，默认 gzip
        mount_point: 虚拟挂载点

    Returns:
        构建好的 FileSet
    """
    fileset = FileSet(name, *requires, compression_hook=compression_hook)
    mount_point = normalize_path(mount_point)
    fileset.mkdir_all(mount_point, DEFAULT_DIR_MODE)

    files = scan_files(local_dir, pattern, recursive)
    stored = 0

    for local_path, rel_path in files:
        vfs_path = normalize_path(mount_point + rel_path)
        parent, _ = split_parent(vfs_path)
        fileset.mkdir_all(parent, DEFAULT_DIR_MODE)

        with open(local_path, 'rb') as f:
            data = f.read()
        mod_time = datetime.fromtimestamp(os.path.getmtime(local_path))

        if compress:
            packed = fileset.compression_hook.compress(data)
            fileset.write_compressed_file(vfs_path, DEFAULT_FILE_MODE, mod_time, packed)
            stored += len(packed)
        else:
            fileset.write_file(vfs_path, DEFAULT_FILE_MODE, mod_time, data)
            stored += len(data)

    logger.info(
        "loaded module %s from %s: %d files, %d bytes stored",
        name, local_dir, len(files), stored
    )
    return fileset
