#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
模块文件遍历

按目录读取顺序 (即创建顺序) 深度优先遍历模块的虚拟文件系统，
对扩展名匹配的文件调用回调。不遍历 requires()。
"""

import logging
from typing import Iterable, List

from .exceptions import EndOfDirectory
from .module import Module, WalkFunc
from .utils import SEPARATOR, file_ext, join_path


logger = logging.getLogger(__name__)


def walk(module: Module, ext: str, fn: WalkFunc) -> None:
    """
    遍历单个模块

    Args:
        module: 要遍历的模块
        ext: 扩展名过滤 (包含点号，区分大小写)
        fn: 回调 fn(module, full_path, file)，文件在回调返回后立即关闭

    Raises:
        回调或文件系统抛出的第一个异常
    """
    _walk_dir(module, SEPARATOR, ext, fn)


def walk_modules(modules: Iterable[Module], ext: str, fn: WalkFunc) -> None:
    """按顺序遍历多个模块，遇到异常立即停止"""
    for module in modules:
        walk(module, ext, fn)


def _read_all(module: Module, root: str) -> List:
    """读取目录的全部条目，读完立即关闭目录句柄"""
    with module.open(root) as dirf:
        try:
            return dirf.read_dir(-1)
        except EndOfDirectory:
            # 空目录
            return []


def _walk_dir(module: Module, root: str, ext: str, fn: WalkFunc) -> None:
    for info in _read_all(module, root):
        full_path = join_path(root, info.name)

        if info.is_dir:
            _walk_dir(module, full_path, ext, fn)
            continue

        if file_ext(info.name) != ext:
            continue

        with module.open(full_path) as f:
            logger.debug("%s: visit %s", module.name, full_path)
            fn(module, full_path, f)
