"""Public API functions for json-expect.

This module provides the user-facing functions: verify, check_json,
assert_json and compare_arrays.  Each call builds a fresh JsonAssert (or
Verifier), so calls never share run state.  Templates given as JSON text
are built once and served from a module-level TemplateCache afterwards.
"""

from __future__ import annotations

from typing import Any

from json_expect.asserter import JsonAssert
from json_expect.engine.config import AssertConfig
from json_expect.engine.verifier import Verifier
from json_expect.result import AssertionResult
from json_expect.template.builder import TemplateBuilder
from json_expect.template.cache import TemplateCache

__all__ = ["assert_json", "check_json", "compare_arrays", "verify"]

# JSON-text templates are parsed once and shared; matcher-bearing templates
# are built per call.
_template_cache = TemplateCache(max_size=128)


def _json_assert(expected: Any, config: AssertConfig | None) -> JsonAssert:
    if isinstance(expected, (str, bytes)):
        expected = _template_cache.get_or_build(expected)
    return JsonAssert(expected, config=config)


def verify(
    expected: Any,
    actual: Any,
    config: AssertConfig | None = None,
) -> list[str]:
    """Compare an already-parsed JSON document against an expected template.

    Args:
        expected: Expected template (dict, ExpectedNode, or JSON text).
        actual:   The parsed actual document.
        config:   Comparison options.  Defaults to ``AssertConfig()`` when None.

    Returns:
        Every mismatch message in traversal order; an empty list means the
        document satisfies the template.
    """
    return _json_assert(expected, config).verify(actual)


def check_json(
    body: Any,
    expected: Any,
    config: AssertConfig | None = None,
    content_type: str | None = None,
) -> AssertionResult:
    """Check a document body against an expected template.

    Args:
        body:         UTF-8 JSON bytes, JSON text, or a parsed JSON object.
        expected:     Expected template (dict, ExpectedNode, or JSON text).
        config:       Comparison options.  Defaults to ``AssertConfig()`` when None.
        content_type: Reported in the failure text when body is not JSON.

    Returns:
        An ``AssertionResult``; ``result.passed`` is True when the body
        satisfies the template.
    """
    return _json_assert(expected, config).check(body, content_type=content_type)


def assert_json(
    body: Any,
    expected: Any,
    config: AssertConfig | None = None,
    content_type: str | None = None,
) -> None:
    """Assert that a document body satisfies an expected template.

    Raises:
        JsonAssertionError: If the body is empty, is not a JSON object, or
            has any mismatch.  The message lists every diagnostic.
    """
    _json_assert(expected, config).assert_matches(body, content_type=content_type)


def compare_arrays(
    name: str,
    expected: Any,
    actual: Any,
    *,
    match_length: bool = True,
    check_property_type: bool = True,
) -> list[str]:
    """Compare one expected array against an actual JSON value.

    Useful for bodies whose top-level value is an array, which the
    object-rooted assertions reject.

    Args:
        name:                Name used as the root of every message path.
        expected:            Expected array template (list, tuple or ExpectedNode).
        actual:              The parsed actual value.
        match_length:        Require equal lengths before comparing elements.
        check_property_type: Require the actual value to be a JSON array.

    Returns:
        Every mismatch message in traversal order.

    Raises:
        UnsupportedValueError: If expected is not an array template.
    """
    config = AssertConfig(match_length=match_length, check_property_type=check_property_type)
    return Verifier(config).compare_arrays(name, TemplateBuilder().build(expected), actual)
