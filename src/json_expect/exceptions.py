"""Exception hierarchy for json-expect.

Only structural input problems and malformed templates are raised.
Comparison mismatches are never raised; they are collected by
``json_expect.diagnostics.Diagnostics``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_expect.result import AssertionResult

__all__ = [
    "CoercionError",
    "EmptyBodyError",
    "InvalidJsonError",
    "JsonAssertionError",
    "JsonExpectError",
    "UnsupportedValueError",
]


class JsonExpectError(Exception):
    """Base class for every error raised by json-expect."""


class UnsupportedValueError(JsonExpectError, TypeError):
    """A template value cannot be represented as an expected node.

    Signals a malformed expected template (a programming error), never a
    problem with the document under test.
    """


class CoercionError(JsonExpectError, TypeError):
    """An actual JSON value cannot be converted to an expected literal's type."""


class EmptyBodyError(JsonExpectError, ValueError):
    """The document under test is empty."""


class InvalidJsonError(JsonExpectError, ValueError):
    """The document under test is not a JSON object.

    Attributes:
        content_type: The content type reported alongside the body, if any.
    """

    def __init__(self, message: str, content_type: str | None = None) -> None:
        super().__init__(message)
        self.content_type = content_type


class JsonAssertionError(JsonExpectError, AssertionError):
    """Raised by ``JsonAssert.assert_matches`` when a check does not pass.

    Attributes:
        result: The failed AssertionResult; ``result.messages`` holds every
            diagnostic message for mismatches.
    """

    def __init__(self, result: AssertionResult) -> None:
        super().__init__(str(result))
        self.result = result
