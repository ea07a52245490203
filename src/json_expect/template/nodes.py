"""ExpectedNode dataclass and NodeKind StrEnum for expected-value templates.

An expected template is converted once into a tree of ExpectedNode objects
before any comparison runs.  The Verifier dispatches on ``NodeKind`` only,
it never inspects the Python type of a template value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_expect.protocols import Matcher


class NodeKind(StrEnum):
    """The four kinds of expected value.

    - LITERAL -> "literal" : a scalar compared by value (str, int, float, bool, None)
    - OBJECT  -> "object"  : ordered mapping of property name to ExpectedNode
    - ARRAY   -> "array"   : ordered sequence of ExpectedNode, compared by position
    - MATCHER -> "matcher" : a Matcher that replaces literal comparison
    """

    LITERAL = auto()
    OBJECT = auto()
    ARRAY = auto()
    MATCHER = auto()


@dataclass(frozen=True, slots=True, eq=False)
class ExpectedNode:
    """A node in an expected-value template.

    Attributes:
        kind:       Which variant this node is (see NodeKind).
        value:      The literal value for LITERAL nodes; None otherwise.
        properties: Read-only property name -> child node mapping for
                    OBJECT nodes, in declaration order.
        items:      Child nodes for ARRAY nodes, in index order.
        matcher:    The Matcher for MATCHER nodes.
    """

    kind: NodeKind
    value: Any = None
    properties: Mapping[str, ExpectedNode] = field(default_factory=dict)
    items: tuple[ExpectedNode, ...] = ()
    matcher: Matcher | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def of_literal(cls, value: Any) -> ExpectedNode:
        return cls(kind=NodeKind.LITERAL, value=value)

    @classmethod
    def of_object(cls, properties: Mapping[str, ExpectedNode]) -> ExpectedNode:
        return cls(kind=NodeKind.OBJECT, properties=properties)

    @classmethod
    def of_array(cls, items: list[ExpectedNode] | tuple[ExpectedNode, ...]) -> ExpectedNode:
        return cls(kind=NodeKind.ARRAY, items=tuple(items))

    @classmethod
    def of_matcher(cls, matcher: Matcher) -> ExpectedNode:
        return cls(kind=NodeKind.MATCHER, matcher=matcher)
