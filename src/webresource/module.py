#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
模块接口与依赖解析

Module 描述一个带名称、带虚拟文件系统、并声明依赖的资源模块。
resolve() 将模块依赖图展开为去重后的有序列表，依赖总是排在依赖方之前。
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Iterable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .core.handle import OpenFile


logger = logging.getLogger(__name__)


# 模块接口版本，接口发生不兼容变更时递增
MODULE_API_VERSION = 1


class Module(ABC):
    """
    资源模块接口

    子类需提供:
    - name: 模块名称，解析时用作唯一标识
    - requires(): 依赖的模块列表 (有序)
    - open(path): 打开虚拟文件系统中的路径
    """

    api_version: ClassVar[int] = MODULE_API_VERSION

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def requires(self) -> List['Module']:
        pass

    @abstractmethod
    def open(self, path: str) -> 'OpenFile':
        """
        打开路径

        Raises:
            EntryNotFoundError: 路径不存在
            DecompressionError: 压缩数据无效
        """
        pass

    def __str__(self) -> str:
        """
        依赖树的可读表示

        Examples:
            'a'
            'd -> (b -> (a), c -> (a))'
        """
        requires = self.requires()
        if not requires:
            return self.name
        return f"{self.name} -> ({', '.join(str(r) for r in requires)})"


# walk() 回调签名: (模块, 完整路径, 打开的文件句柄)
WalkFunc = Callable[[Module, str, 'OpenFile'], None]


class ModuleList(list):
    """
    模块列表

    resolve() 的返回类型，附带按名称查找和遍历等方法。
    """

    def named(self, name: str) -> Optional[Module]:
        """按名称查找模块，不存在返回 None"""
        for module in self:
            if module.name == name:
                return module
        return None

    def names(self) -> List[str]:
        return [module.name for module in self]

    def walk(self, ext: str, fn: WalkFunc) -> None:
        """
        依次遍历每个模块的文件系统

        不会遍历 requires()，顺序即列表顺序。遇到第一个异常立即停止并抛出。

        Args:
            ext: 扩展名过滤 (包含点号，如 ".js")
            fn: 访问回调
        """
        from .walker import walk_modules
        walk_modules(self, ext, fn)

    def __str__(self) -> str:
        """每个模块一行"""
        return "\n".join(str(module) for module in self)


def resolve(modules: Iterable[Module]) -> ModuleList:
    """
    解析依赖，返回有序且去重的模块列表

    1. 输入按名称排序，保证结果与输入顺序无关
    2. 对每个模块递归解析其 requires()，逐个追加尚未出现的模块
    3. 最后追加模块本身 (若尚未出现)

    依赖图必须是有向无环图，存在环时会无限递归 (RecursionError)。

    Args:
        modules: 模块集合 (顺序无关)

    Returns:
        依赖在前、依赖方在后的 ModuleList

    Examples:
        >>> resolve([c])        # c -> b -> a
        [a, b, c]
    """
    result = _resolve(modules)
    if result:
        logger.debug("resolved modules: %s", ", ".join(result.names()))
    return result


def _resolve(modules: Iterable[Module]) -> ModuleList:
    result = ModuleList()
    seen = set()

    for module in sorted(modules, key=lambda m: m.name):
        for dep in _resolve(module.requires()):
            if dep.name not in seen:
                seen.add(dep.name)
                result.append(dep)

        if module.name not in seen:
            seen.add(module.name)
            result.append(module)

    return result
