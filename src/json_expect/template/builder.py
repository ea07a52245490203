"""TemplateBuilder: converts a caller-supplied template into an ExpectedNode tree.

Uses recursive dispatch to convert dicts, lists, scalar literals and matcher
placeholders into typed ExpectedNode objects.  Property order follows the
template's own declaration order (dict insertion order, or JSON source order
for templates given as JSON text).

Placeholders are normalised here so the Verifier only ever sees MATCHER
nodes:
- a ``ValueKind`` member becomes a ``TypeMatcher``
- a compiled ``re.Pattern`` becomes a ``RegexMatcher``
- any object satisfying the ``Matcher`` Protocol is used as-is
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any

from json_expect.exceptions import UnsupportedValueError
from json_expect.matchers import RegexMatcher, TypeMatcher, ValueKind
from json_expect.protocols import Matcher
from json_expect.template.nodes import ExpectedNode, NodeKind

__all__ = ["TemplateBuilder"]


@dataclass
class TemplateBuilder:
    """Converts template values into ExpectedNode trees.

    The dispatch order is critical:
    - ValueKind MUST be checked before str because it is a StrEnum.
    - bool MUST be checked before int because bool subclasses int.
    - Placeholders MUST be checked before the Matcher Protocol because
      ``re.Pattern`` has a ``match`` method of its own.

    Example::
        builder = TemplateBuilder()
        node = builder.build({"id": 1, "name": matchers.STRING})
        # node: OBJECT -> {"id": LITERAL(1), "name": MATCHER(TypeMatcher(string))}
    """

    def build(self, value: Any) -> ExpectedNode:
        """Convert a template value to an ExpectedNode tree.

        Args:
            value: A dict, list, tuple, str, int, float, bool, None, ValueKind,
                compiled pattern, Matcher, or an existing ExpectedNode.

        Returns:
            The ExpectedNode for value.

        Raises:
            UnsupportedValueError: If value (or anything nested in it) cannot
                be part of a template.
        """
        if isinstance(value, ExpectedNode):
            return value

        if isinstance(value, ValueKind):
            return ExpectedNode.of_matcher(TypeMatcher(value))

        if isinstance(value, re.Pattern):
            return ExpectedNode.of_matcher(RegexMatcher(value))

        if isinstance(value, bool):
            return ExpectedNode.of_literal(value)

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return ExpectedNode.of_array([self.build(item) for item in value])

        if isinstance(value, (str, int)) or value is None:
            return ExpectedNode.of_literal(value)

        if isinstance(value, float):
            if not math.isfinite(value):
                msg = f"Non-finite float {value!r} cannot be represented in JSON"
                raise UnsupportedValueError(msg)
            return ExpectedNode.of_literal(value)

        if isinstance(value, Matcher):
            return ExpectedNode.of_matcher(value)

        msg = f"Unsupported template value type: {type(value)!r}"
        raise UnsupportedValueError(msg)

    def build_root(self, value: Any) -> ExpectedNode:
        """Build a template whose root must be an object.

        Raises:
            UnsupportedValueError: If the built root is not an OBJECT node.
        """
        node = self.build(value)
        if node.kind != NodeKind.OBJECT:
            msg = f"The expected template must be an object, got a {node.kind} node"
            raise UnsupportedValueError(msg)
        return node

    def from_json(self, text: str | bytes) -> ExpectedNode:
        """Parse a JSON text template and build its root object node.

        Raises:
            UnsupportedValueError: If text is not valid JSON or its root is not
                a JSON object.
        """
        try:
            value = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            msg = f"The expected template is not valid JSON: {exc}"
            raise UnsupportedValueError(msg) from exc
        return self.build_root(value)

    def _build_object(self, obj: dict[Any, Any]) -> ExpectedNode:
        properties: dict[str, ExpectedNode] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                msg = f"Template property names must be strings, got {key!r}"
                raise UnsupportedValueError(msg)
            properties[key] = self.build(val)
        return ExpectedNode.of_object(properties)
