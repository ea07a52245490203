"""json-expect - structural JSON assertions against expected templates."""

from __future__ import annotations

from json_expect import matchers
from json_expect.api import assert_json, check_json, compare_arrays, verify
from json_expect.asserter import JsonAssert
from json_expect.engine.config import AssertConfig, PropertyComparison
from json_expect.exceptions import (
    EmptyBodyError,
    InvalidJsonError,
    JsonAssertionError,
    JsonExpectError,
    UnsupportedValueError,
)
from json_expect.matchers import RegexMatcher, TypeMatcher, ValueKind
from json_expect.protocols import Matcher, MatchResult, PropertyDescriptor
from json_expect.result import AssertionResult, FailureKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "AssertConfig",
    "AssertionResult",
    "EmptyBodyError",
    "FailureKind",
    "InvalidJsonError",
    "JsonAssert",
    "JsonAssertionError",
    "JsonExpectError",
    "MatchResult",
    "Matcher",
    "PropertyComparison",
    "PropertyDescriptor",
    "RegexMatcher",
    "TypeMatcher",
    "UnsupportedValueError",
    "ValueKind",
    "assert_json",
    "check_json",
    "compare_arrays",
    "matchers",
    "verify",
]
