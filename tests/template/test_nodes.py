"""Tests for ExpectedNode and NodeKind.

Covers:
- NodeKind has exactly four lowercase string members
- Factory classmethods set kind and payload fields
- Nodes are frozen, properties are read-only, nodes are hashable
- Default payload containers are independent per instance
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_expect.matchers import STRING
from json_expect.template.nodes import ExpectedNode, NodeKind

# ---------------------------------------------------------------------------
# NodeKind
# ---------------------------------------------------------------------------


class TestNodeKind:
    def test_has_exactly_four_members(self) -> None:
        assert len(list(NodeKind)) == 4

    def test_values_are_lowercase_names(self) -> None:
        assert NodeKind.LITERAL == "literal"
        assert NodeKind.OBJECT == "object"
        assert NodeKind.ARRAY == "array"
        assert NodeKind.MATCHER == "matcher"

    def test_is_str_subclass(self) -> None:
        assert isinstance(NodeKind.OBJECT, str)


# ---------------------------------------------------------------------------
# ExpectedNode factories
# ---------------------------------------------------------------------------


class TestExpectedNodeFactories:
    def test_of_literal(self) -> None:
        node = ExpectedNode.of_literal(5)
        assert node.kind == NodeKind.LITERAL
        assert node.value == 5
        assert node.properties == {}
        assert node.items == ()
        assert node.matcher is None

    def test_of_literal_none(self) -> None:
        node = ExpectedNode.of_literal(None)
        assert node.kind == NodeKind.LITERAL
        assert node.value is None

    def test_of_object_keeps_declaration_order(self) -> None:
        props = {
            "b": ExpectedNode.of_literal(1),
            "a": ExpectedNode.of_literal(2),
        }
        node = ExpectedNode.of_object(props)
        assert node.kind == NodeKind.OBJECT
        assert list(node.properties) == ["b", "a"]

    def test_of_object_copies_mapping(self) -> None:
        props = {"a": ExpectedNode.of_literal(1)}
        node = ExpectedNode.of_object(props)
        props["b"] = ExpectedNode.of_literal(2)
        assert list(node.properties) == ["a"]

    def test_of_array_stores_tuple(self) -> None:
        node = ExpectedNode.of_array([ExpectedNode.of_literal(1), ExpectedNode.of_literal(2)])
        assert node.kind == NodeKind.ARRAY
        assert isinstance(node.items, tuple)
        assert [item.value for item in node.items] == [1, 2]

    def test_of_matcher(self) -> None:
        node = ExpectedNode.of_matcher(STRING)
        assert node.kind == NodeKind.MATCHER
        assert node.matcher is STRING


class TestExpectedNodeImmutability:
    def test_frozen(self) -> None:
        node = ExpectedNode.of_literal(1)
        with pytest.raises(FrozenInstanceError):
            node.value = 2  # type: ignore[misc]

    def test_default_properties_independent(self) -> None:
        a = ExpectedNode(kind=NodeKind.OBJECT)
        b = ExpectedNode(kind=NodeKind.OBJECT)
        assert a.properties is not b.properties

    def test_properties_read_only(self) -> None:
        node = ExpectedNode.of_object({"a": ExpectedNode.of_literal(1)})
        with pytest.raises(TypeError):
            node.properties["b"] = ExpectedNode.of_literal(2)  # type: ignore[index]
        assert list(node.properties) == ["a"]

    def test_properties_read_only_when_constructed_directly(self) -> None:
        node = ExpectedNode(kind=NodeKind.OBJECT, properties={"a": ExpectedNode.of_literal(1)})
        with pytest.raises(TypeError):
            del node.properties["a"]  # type: ignore[attr-defined]

    def test_object_node_is_hashable(self) -> None:
        node = ExpectedNode.of_object({"a": ExpectedNode.of_literal(1)})
        assert isinstance(hash(node), int)
        assert node in {node}
