"""Verifier: recursive comparison of an expected template against a JSON document.

Walks the ExpectedNode tree in declaration order and compares each node with
the actual value at the same position.  Every discrepancy is appended to a
``Diagnostics`` list; nothing is raised for response data.

Abort policy (collect-all, abort-only-locally):
- A missing or ambiguous property stops descent into that property only.
- An array length mismatch stops element comparison for that array only.
- An expected array compared against a non-array stops that branch only.
Sibling properties and the rest of the document are always compared, so
one run reports every independent mismatch.

Each run owns a fresh ``PropertyPath`` and ``Diagnostics``.  A Verifier
instance holds only its immutable config and can be shared freely.
"""

from __future__ import annotations

import logging
from typing import Any

from json_expect.diagnostics import Diagnostics
from json_expect.engine.config import AssertConfig
from json_expect.engine.lookup import find_property
from json_expect.engine.path import PropertyPath, index_segment
from json_expect.exceptions import CoercionError, UnsupportedValueError
from json_expect.jsontypes import JsonType, coerce, json_type_of, render_value
from json_expect.protocols import PropertyDescriptor
from json_expect.template.nodes import ExpectedNode, NodeKind

__all__ = ["Verifier"]

logger = logging.getLogger(__name__)


class Verifier:
    """Compares ExpectedNode trees against parsed JSON documents.

    Example::

        from json_expect.engine import Verifier
        from json_expect.template import TemplateBuilder

        template = TemplateBuilder().build_root({"id": 1, "tags": ["a", "b"]})
        Verifier().verify(template, {"id": 2, "tags": ["a"]})
        # ["The expected property 'id' does not have the same value ...",
        #  "The expected array property 'tags' is not of the same length ..."]
    """

    def __init__(self, config: AssertConfig | None = None) -> None:
        """Initialise the verifier.

        Args:
            config: Comparison options.  Defaults to ``AssertConfig()``
                (case-sensitive names, array lengths and types enforced).
        """
        self._config = config if config is not None else AssertConfig()

    @property
    def config(self) -> AssertConfig:
        return self._config

    def verify(self, expected: ExpectedNode, actual: Any) -> list[str]:
        """Compare an expected object template against an actual JSON value.

        Args:
            expected: Root ExpectedNode; must be an OBJECT node.
            actual:   The parsed actual document.

        Returns:
            Every mismatch message in traversal order; empty when the
            document satisfies the template.

        Raises:
            UnsupportedValueError: If expected is not an OBJECT node.
        """
        if expected.kind != NodeKind.OBJECT:
            msg = f"The expected template must be an object, got a {expected.kind} node"
            raise UnsupportedValueError(msg)

        run = _Run(self._config)
        run.verify_object(expected, actual)
        logger.debug(
            "Verified %d expected properties: %d mismatch(es)",
            len(expected.properties),
            len(run.diagnostics),
        )
        return run.diagnostics.messages

    def compare_arrays(self, name: str, expected: ExpectedNode, actual: Any) -> list[str]:
        """Compare one expected array against an actual value, outside any object.

        Messages are addressed relative to ``name``, e.g. ``items[2].id``.

        Raises:
            UnsupportedValueError: If expected is not an ARRAY node.
        """
        if expected.kind != NodeKind.ARRAY:
            msg = f"compare_arrays expects an array node, got a {expected.kind} node"
            raise UnsupportedValueError(msg)

        run = _Run(self._config)
        with run.path.descend(name):
            run.compare_array(expected, actual)
        return run.diagnostics.messages


class _Run:
    """State of a single comparison run: path stack plus collected errors."""

    def __init__(self, config: AssertConfig) -> None:
        self.config = config
        self.path = PropertyPath()
        self.diagnostics = Diagnostics()

    def verify_object(self, expected: ExpectedNode, actual: Any) -> None:
        for name, child in expected.properties.items():
            with self.path.descend(name):
                self._verify_property(name, child, actual)

    def _verify_property(self, name: str, expected: ExpectedNode, actual: Any) -> None:
        lookup = find_property(actual, name, self.config.property_comparison)
        if lookup.missing:
            self.diagnostics.missing(self.path.render())
            return
        if lookup.ambiguous:
            self.diagnostics.ambiguous(self.path.render(), lookup.names)
            return

        self._verify_value(name, expected, lookup.value)

    def _verify_value(self, name: str, expected: ExpectedNode, actual: Any) -> None:
        if expected.kind == NodeKind.MATCHER:
            self._apply_matcher(name, expected, actual)
        elif expected.kind == NodeKind.OBJECT:
            self.verify_object(expected, actual)
        elif expected.kind == NodeKind.ARRAY:
            self.compare_array(expected, actual)
        else:
            self._compare_literal(expected, actual)

    def _apply_matcher(self, name: str, expected: ExpectedNode, actual: Any) -> None:
        path = self.path.render()
        result = expected.matcher.match(PropertyDescriptor(name=name, path=path), actual)  # type: ignore[union-attr]
        if not result.success:
            self.diagnostics.matcher_failed(path, result.messages)

    def compare_array(self, expected: ExpectedNode, actual: Any) -> None:
        if isinstance(actual, list):
            actual_items = actual
        elif self.config.check_property_type:
            self.diagnostics.type_mismatch(
                self.path.render(), JsonType.ARRAY, json_type_of(actual)
            )
            return
        else:
            actual_items = []

        if self.config.match_length and len(expected.items) != len(actual_items):
            self.diagnostics.length_mismatch(
                self.path.render(), len(expected.items), len(actual_items)
            )
            return

        for index, item in enumerate(expected.items):
            if index >= len(actual_items):
                break
            segment = index_segment(index)
            with self.path.descend(segment):
                self._verify_value(segment, item, actual_items[index])

    def _compare_literal(self, expected: ExpectedNode, actual: Any) -> None:
        try:
            actual_value = coerce(actual, expected.value)
        except CoercionError:
            self.diagnostics.type_mismatch(
                self.path.render(), json_type_of(expected.value), json_type_of(actual)
            )
            return

        if actual_value != expected.value:
            self.diagnostics.value_mismatch(
                self.path.render(), render_value(expected.value), render_value(actual)
            )
