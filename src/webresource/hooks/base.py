#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Hook 基类定义

定义压缩编解码的抽象接口。
"""

from abc import ABC, abstractmethod


class CompressionHook(ABC):
    """
    压缩算法钩子

    FileSet 通过它解码压缩条目，目录加载器通过它编码文件。
    解码必须是一次性完成的 (open 时整体解压)。
    """

    @property
    def display_name(self) -> str:
        """可读名称，默认返回类名"""
        return type(self).__name__

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """
        压缩数据

        Args:
            data: 原始数据

        Returns:
            压缩后的数据
        """
        pass

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """
        解压数据

        Args:
            data: 压缩后的数据

        Returns:
            解压后的数据

        Raises:
            Exception: 数据无效时由具体实现抛出，调用方负责包装
        """
        pass
