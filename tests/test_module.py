#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Module / resolve 测试

测试依赖解析的顺序、去重和确定性。
"""

import itertools
import logging

import pytest

from webresource import FileSet, Module, ModuleList, MODULE_API_VERSION, resolve


def names(modules):
    return [m.name for m in modules]


# ==================== resolve 测试 ====================

class TestResolve:
    """resolve() 依赖解析"""

    def test_empty(self):
        """空输入返回空列表"""
        result = resolve([])
        assert isinstance(result, ModuleList)
        assert result == []

    def test_no_requires(self, make_module):
        """没有依赖的模块只贡献自己"""
        a = make_module("a")
        assert names(resolve([a])) == ["a"]

    def test_chain(self, chain_modules):
        """c -> b -> a"""
        a, b, c = chain_modules
        assert names(resolve([c])) == ["a", "b", "c"]

    @pytest.mark.parametrize("subset", [("c",), ("c", "b"), ("c", "b", "a")])
    def test_chain_input_variants(self, chain_modules, subset):
        """输入 {C}、{C,B}、{C,B,A} 结果相同"""
        by_name = {m.name: m for m in chain_modules}
        for perm in itertools.permutations(subset):
            result = resolve([by_name[n] for n in perm])
            assert names(result) == ["a", "b", "c"]

    def test_shared_dependency(self, make_module):
        """b、c 都依赖 a，按名称排序后先处理 b"""
        a = make_module("a")
        b = make_module("b", a)
        c = make_module("c", a)
        assert names(resolve([c, b])) == ["a", "b", "c"]
        assert names(resolve([b, c])) == ["a", "b", "c"]

    def test_diamond(self, diamond_modules):
        """菱形依赖中 a 只出现一次"""
        a, b, c, d = diamond_modules
        result = resolve([d])
        assert names(result) == ["a", "b", "c", "d"]
        assert names(result).count("a") == 1

    def test_dependencies_before_dependents(self, diamond_modules):
        """依赖总是排在依赖方之前"""
        result = resolve(diamond_modules)
        index = {m.name: i for i, m in enumerate(result)}
        for m in result:
            for dep in m.requires():
                assert index[dep.name] < index[m.name]

    def test_idempotent(self, diamond_modules):
        """对已解析的列表再次解析结果不变"""
        first = resolve([diamond_modules[3]])
        second = resolve(first)
        assert names(second) == names(first)
        assert all(x is y for x, y in zip(first, second))

    def test_name_ordering_of_top_level(self, make_module):
        """互不相关的模块按名称排序"""
        z = make_module("z")
        m = make_module("m")
        b = make_module("b")
        assert names(resolve([z, m, b])) == ["b", "m", "z"]

    def test_requires_sorted_by_name(self, make_module):
        """requires() 同样按名称排序后展开"""
        shared = make_module("zzz")
        x = make_module("x", shared)
        y = make_module("y")
        a = make_module("a", y, x)
        assert names(resolve([a])) == ["zzz", "x", "y", "a"]

    def test_shared_dependency_position(self, make_module):
        """共享依赖的位置由最先处理的分支决定"""
        shared = make_module("s")
        late = make_module("late", shared)
        early = make_module("early", shared)
        other = make_module("b")
        assert names(resolve([late, other, early])) == ["b", "s", "early", "late"]

    def test_same_name_deduplicated(self, make_module):
        """同名模块视为同一个，保留先出现的"""
        first = make_module("a")
        second = make_module("a")
        result = resolve([first, second])
        assert len(result) == 1
        assert result[0] is first

    def test_input_not_modified(self, chain_modules):
        a, b, c = chain_modules
        modules = [c, a, b]
        resolve(modules)
        assert modules == [c, a, b]

    def test_cycle_recurses(self):
        """依赖环会导致无限递归 (调用方需保证无环)"""
        a = FileSet("a")
        b = FileSet("b", a)
        a._requires.append(b)
        with pytest.raises(RecursionError):
            resolve([a])

    def test_logs_once_per_call(self, diamond_modules, caplog):
        """每次调用只记录一条最终结果，不记录中间层"""
        caplog.set_level(logging.DEBUG, logger="webresource.module")
        resolve([diamond_modules[3]])

        records = [r for r in caplog.records if "resolved modules" in r.getMessage()]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].getMessage() == "resolved modules: a, b, c, d"


# ==================== ModuleList 测试 ====================

class TestModuleList:
    """ModuleList 辅助方法"""

    def test_named(self, diamond_modules):
        result = resolve([diamond_modules[3]])
        assert result.named("c") is diamond_modules[2]
        assert result.named("missing") is None

    def test_string_chain(self, chain_modules):
        assert str(resolve([chain_modules[2]])) == "a\nb -> (a)\nc -> (b -> (a))"

    def test_string_shared(self, make_module):
        a = make_module("a")
        b = make_module("b", a)
        c = make_module("c", a)
        assert str(resolve([c, b])) == "a\nb -> (a)\nc -> (a)"

    def test_string_diamond(self, diamond_modules):
        expected = "a\nb -> (a)\nc -> (a)\nd -> (b -> (a), c -> (a))"
        assert str(resolve([diamond_modules[3]])) == expected


# ==================== Module 接口测试 ====================

class TestModuleInterface:
    """Module 抽象接口"""

    def test_api_version(self):
        assert FileSet.api_version == MODULE_API_VERSION

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Module()

    def test_custom_module(self, make_module):
        """自定义 Module 实现可参与解析"""
        base = make_module("base")

        class Proxy(Module):
            def __init__(self, inner, name):
                self._inner = inner
                self._name = name

            @property
            def name(self):
                return self._name

            def requires(self):
                return [base]

            def open(self, path):
                return self._inner.open(path)

        proxy = Proxy(make_module("inner"), "proxy")
        assert names(resolve([proxy])) == ["base", "proxy"]
        assert str(proxy) == "proxy -> (base)"

    def test_requires_returns_copy(self, chain_modules):
        a, b, c = chain_modules
        c.requires().append(a)
        assert c.requires() == [b]
