#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 全局配置

提供共享 fixtures 和测试工具。
"""

import gzip
import os
from datetime import datetime

import pytest

from webresource import FileSet


# ==================== 常量 ====================

FIXED_TIME = datetime(2020, 1, 2, 3, 4, 5)


def gz(data: bytes) -> bytes:
    """gzip 压缩 (测试用)"""
    return gzip.compress(data)


def js_module(name: str, *requires) -> FileSet:
    """创建只含一个 /<name>.js 文件的模块"""
    return FileSet(name, *requires).write_file(
        f"/{name}.js", 0o644, FIXED_TIME, f"/* {name}.js */".encode()
    )


# ==================== 自定义 Markers ====================

def pytest_configure(config):
    """注册自定义 markers"""
    config.addinivalue_line("markers", "slow: 耗时较长的测试")


# ==================== 基础 Fixtures ====================

@pytest.fixture
def demo_fileset() -> FileSet:
    """
    包含普通文件和压缩文件的 FileSet

    /files/demo.js    原始存储
    /files/demogz.js  gzip 存储
    """
    return (
        FileSet("demo/pkg/import/path")
        .mkdir("/files", 0o755)
        .write_file("/files/demo.js", 0o755, FIXED_TIME, b'console.log("demo.js was here");')
        .write_compressed_file(
            "/files/demogz.js", 0o755, FIXED_TIME, gz(b'console.log("demogz.js was here");')
        )
    )


@pytest.fixture
def make_module():
    """返回 js_module 构造函数"""
    return js_module


@pytest.fixture
def chain_modules():
    """c -> b -> a"""
    a = js_module("a")
    b = js_module("b", a)
    c = js_module("c", b)
    return a, b, c


@pytest.fixture
def diamond_modules():
    """d -> (b, c), b -> a, c -> a"""
    a = js_module("a")
    b = js_module("b", a)
    c = js_module("c", a)
    d = js_module("d", b, c)
    return a, b, c, d


@pytest.fixture
def sample_files(tmp_path) -> tuple:
    """
    创建本地资源目录

    Returns:
        (目录路径, 文件内容字典)
    """
    files = {
        "app.js": b"var app = 1;",
        "style.css": b"body { margin: 0; }",
        "README.md": b"# readme",
        "lib/util.js": b"function util() {}",
        "lib/deep/theme.css": b".theme { color: red; }",
        "lib/notes.txt": b"notes",
    }

    for name, content in files.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    # 固定修改时间，便于断言
    os.utime(tmp_path / "app.js", (1500000000, 1500000000))
    os.utime(tmp_path / "style.css", (1600000000, 1600000000))

    return tmp_path, files
