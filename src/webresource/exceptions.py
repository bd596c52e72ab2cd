#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
webresource 异常定义

分为两类:
- 运行期异常 (继承自 WebResourceError): 路径不存在、解压失败等，调用方可以捕获处理。
- 模块定义异常 (继承自 ModuleDefinitionError): 构建 FileSet 时违反不变量，
  属于编程错误，不应被当作普通错误吞掉，因此不继承 WebResourceError。
"""


class WebResourceError(Exception):
    """webresource 运行期异常基类"""
    pass


class EntryNotFoundError(WebResourceError, FileNotFoundError):
    """
    条目不存在异常

    open() 时路径上任意一级不存在即抛出。
    """
    def __init__(self, path: str, module_name: str = None):
        self.path = path
        self.module_name = module_name
        if module_name:
            message = f"模块 '{module_name}' 中不存在路径: {path}"
        else:
            message = f"路径不存在: {path}"
        super().__init__(message)


class DecompressionError(WebResourceError):
    """
    解压失败异常

    压缩条目的数据无法解码时在 open() 阶段抛出，写入阶段不做校验。
    """
    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"文件 '{path}' 解压失败: {cause}")


class HandleClosedError(WebResourceError, ValueError):
    """对已关闭的句柄进行读取"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"句柄已关闭: {name}")


class EndOfDirectory(EOFError):
    """
    目录读取结束

    read_dir() 在游标耗尽后抛出，表示没有更多条目 (而不是返回空列表)。
    """
    def __init__(self, name: str = None):
        self.name = name
        super().__init__(f"目录 '{name}' 已读取完毕" if name else "目录已读取完毕")


# ==================== 模块定义异常 ====================

class ModuleDefinitionError(RuntimeError):
    """
    模块定义异常基类

    构建期的不变量被破坏 (父目录缺失、条目重复等) 时抛出。
    构建代码不应尝试从中恢复。
    """
    pass


class ParentNotFoundError(ModuleDefinitionError):
    """父目录不存在"""
    def __init__(self, parent: str):
        self.parent = parent
        super().__init__(f"父目录不存在: {parent!r}")


class NotADirectoryEntryError(ModuleDefinitionError):
    """路径上的条目不是目录"""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path!r} 不是目录")


class EntryExistsError(ModuleDefinitionError):
    """目标路径已存在条目"""
    def __init__(self, name: str, parent: str):
        self.name = name
        self.parent = parent
        super().__init__(f"目录 {parent!r} 中已存在条目 {name!r}")


class InvalidEntryNameError(ModuleDefinitionError):
    """条目名称非法 (为空或包含分隔符)"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"非法的条目名称: {name!r}")
