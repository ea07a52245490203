"""Tests for TemplateBuilder.

Covers all literal types, nesting, declaration order, bool/int dispatch
ordering, placeholder normalisation (ValueKind, re.Pattern, custom
matchers), JSON-text templates, and UnsupportedValueError on invalid input.
"""

from __future__ import annotations

import re
from typing import Any

import pytest

from json_expect.exceptions import UnsupportedValueError
from json_expect.matchers import INT, RegexMatcher, TypeMatcher, ValueKind
from json_expect.protocols import MatchResult, PropertyDescriptor
from json_expect.template.builder import TemplateBuilder
from json_expect.template.nodes import ExpectedNode, NodeKind

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> TemplateBuilder:
    """A fresh TemplateBuilder instance for each test."""
    return TemplateBuilder()


class AlwaysFails:
    """Minimal custom matcher used to exercise Protocol detection."""

    def match(self, prop: PropertyDescriptor, actual: Any) -> MatchResult:
        return MatchResult.failed("nope")


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


class TestLiterals:
    @pytest.mark.parametrize("value", ["x", "", 0, 7, -3, 1.5, True, False, None])
    def test_scalar_becomes_literal(self, builder: TemplateBuilder, value: Any) -> None:
        node = builder.build(value)
        assert node.kind == NodeKind.LITERAL
        assert node.value == value
        assert type(node.value) is type(value)

    def test_bool_stays_bool(self, builder: TemplateBuilder) -> None:
        node = builder.build(True)
        assert node.value is True

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_rejected(self, builder: TemplateBuilder, value: float) -> None:
        with pytest.raises(UnsupportedValueError, match="Non-finite"):
            builder.build(value)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class TestContainers:
    def test_object_properties_in_declaration_order(self, builder: TemplateBuilder) -> None:
        node = builder.build({"zeta": 1, "alpha": 2, "mid": 3})
        assert node.kind == NodeKind.OBJECT
        assert list(node.properties) == ["zeta", "alpha", "mid"]

    def test_nested_object(self, builder: TemplateBuilder) -> None:
        node = builder.build({"user": {"name": "a"}})
        user = node.properties["user"]
        assert user.kind == NodeKind.OBJECT
        assert user.properties["name"].value == "a"

    def test_list_becomes_array(self, builder: TemplateBuilder) -> None:
        node = builder.build([1, "two", None])
        assert node.kind == NodeKind.ARRAY
        assert [item.value for item in node.items] == [1, "two", None]

    def test_tuple_becomes_array(self, builder: TemplateBuilder) -> None:
        node = builder.build((1, 2))
        assert node.kind == NodeKind.ARRAY
        assert len(node.items) == 2

    def test_array_of_objects(self, builder: TemplateBuilder) -> None:
        node = builder.build([{"id": 1}, {"id": 2}])
        assert all(item.kind == NodeKind.OBJECT for item in node.items)

    def test_empty_containers(self, builder: TemplateBuilder) -> None:
        assert builder.build({}).properties == {}
        assert builder.build([]).items == ()

    def test_non_string_key_rejected(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError, match="property names must be strings"):
            builder.build({1: "x"})

    def test_nested_invalid_value_rejected(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError):
            builder.build({"a": [{"b": {1, 2}}]})


# ---------------------------------------------------------------------------
# Placeholders and matchers
# ---------------------------------------------------------------------------


class TestPlaceholders:
    def test_value_kind_becomes_type_matcher(self, builder: TemplateBuilder) -> None:
        node = builder.build(ValueKind.STRING)
        assert node.kind == NodeKind.MATCHER
        assert node.matcher == TypeMatcher(ValueKind.STRING)

    def test_value_kind_not_treated_as_string_literal(self, builder: TemplateBuilder) -> None:
        node = builder.build({"name": ValueKind.ANY})
        assert node.properties["name"].kind == NodeKind.MATCHER

    def test_compiled_pattern_becomes_regex_matcher(self, builder: TemplateBuilder) -> None:
        pattern = re.compile("^He")
        node = builder.build(pattern)
        assert node.kind == NodeKind.MATCHER
        assert isinstance(node.matcher, RegexMatcher)
        assert node.matcher.pattern is pattern

    def test_builtin_matcher_used_as_is(self, builder: TemplateBuilder) -> None:
        node = builder.build(INT)
        assert node.kind == NodeKind.MATCHER
        assert node.matcher is INT

    def test_custom_matcher_detected_structurally(self, builder: TemplateBuilder) -> None:
        matcher = AlwaysFails()
        node = builder.build({"x": matcher})
        assert node.properties["x"].matcher is matcher

    def test_existing_node_passed_through(self, builder: TemplateBuilder) -> None:
        existing = ExpectedNode.of_literal(3)
        assert builder.build(existing) is existing

    def test_arbitrary_object_rejected(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError, match="Unsupported template value type"):
            builder.build(object())

    def test_set_rejected(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError):
            builder.build({1, 2})


# ---------------------------------------------------------------------------
# Roots and JSON text
# ---------------------------------------------------------------------------


class TestRootsAndJsonText:
    def test_build_root_accepts_object(self, builder: TemplateBuilder) -> None:
        assert builder.build_root({"a": 1}).kind == NodeKind.OBJECT

    def test_build_root_rejects_array(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError, match="must be an object"):
            builder.build_root([1])

    def test_build_root_rejects_scalar(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError):
            builder.build_root("x")

    def test_from_json_keeps_source_order(self, builder: TemplateBuilder) -> None:
        node = builder.from_json('{"b": 1, "a": {"d": [1, 2], "c": null}}')
        assert list(node.properties) == ["b", "a"]
        assert list(node.properties["a"].properties) == ["d", "c"]

    def test_from_json_accepts_bytes(self, builder: TemplateBuilder) -> None:
        node = builder.from_json(b'{"id": 1}')
        assert node.properties["id"].value == 1

    def test_from_json_preserves_number_types(self, builder: TemplateBuilder) -> None:
        node = builder.from_json('{"i": 1, "f": 1.0}')
        assert type(node.properties["i"].value) is int
        assert type(node.properties["f"].value) is float

    def test_from_json_invalid_text(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError, match="not valid JSON"):
            builder.from_json("{not json")

    def test_from_json_non_object_root(self, builder: TemplateBuilder) -> None:
        with pytest.raises(UnsupportedValueError, match="must be an object"):
            builder.from_json("[1, 2]")

    def test_unsupported_value_error_is_type_error(self, builder: TemplateBuilder) -> None:
        with pytest.raises(TypeError):
            builder.build(object())
