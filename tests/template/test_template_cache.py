"""Tests for TemplateCache.

Covers cache hits returning the same node, per-instance isolation, LRU
eviction, and that failed builds are not cached.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from json_expect.exceptions import UnsupportedValueError
from json_expect.template.builder import TemplateBuilder
from json_expect.template.cache import TemplateCache
from json_expect.template.nodes import NodeKind


class TestTemplateCache:
    def test_miss_builds_object_node(self) -> None:
        cache = TemplateCache()
        node = cache.get_or_build('{"id": 1}')
        assert node.kind == NodeKind.OBJECT
        assert cache.curr_size == 1

    def test_hit_returns_same_node(self) -> None:
        cache = TemplateCache()
        first = cache.get_or_build('{"id": 1}')
        assert cache.get_or_build('{"id": 1}') is first

    def test_hit_does_not_call_builder(self) -> None:
        builder = MagicMock(wraps=TemplateBuilder())
        cache = TemplateCache(builder=builder)
        cache.get_or_build('{"id": 1}')
        cache.get_or_build('{"id": 1}')
        assert builder.from_json.call_count == 1

    def test_default_max_size(self) -> None:
        assert TemplateCache().max_size == 128

    def test_lru_eviction(self) -> None:
        cache = TemplateCache(max_size=2)
        a = cache.get_or_build('{"a": 1}')
        cache.get_or_build('{"b": 1}')
        cache.get_or_build('{"c": 1}')
        assert cache.curr_size == 2
        assert cache.get_or_build('{"a": 1}') is not a

    def test_instances_do_not_share_entries(self) -> None:
        one = TemplateCache()
        two = TemplateCache()
        one.get_or_build('{"a": 1}')
        assert two.curr_size == 0

    def test_failed_build_not_cached(self) -> None:
        cache = TemplateCache()
        with pytest.raises(UnsupportedValueError):
            cache.get_or_build("[1]")
        assert cache.curr_size == 0

    def test_clear(self) -> None:
        cache = TemplateCache()
        cache.get_or_build('{"a": 1}')
        cache.clear()
        assert cache.curr_size == 0
