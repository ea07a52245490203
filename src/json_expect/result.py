"""AssertionResult dataclass for the outcome of one JSON assertion.

This module provides the result type returned by ``JsonAssert.check`` and
``check_json``.  A result is either passed, a structural failure (empty or
non-JSON body) or a mismatch failure carrying every diagnostic message.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = [
    "EMPTY_BODY_MESSAGE",
    "AssertionResult",
    "FailureKind",
    "invalid_json_message",
]

EMPTY_BODY_MESSAGE = "JsonAssert: Empty response body."


def invalid_json_message(content_type: str | None) -> str:
    """Failure text for a body that is not a JSON object."""
    return (
        "JsonAssert: Not a valid json response. "
        f"Actual content type: '{content_type or 'Unknown'}'"
    )


class FailureKind(StrEnum):
    """Why an assertion failed.

    - EMPTY_BODY:   the document had no content; nothing was compared.
    - INVALID_JSON: the document was not a JSON object; nothing was compared.
    - MISMATCH:     the document was compared and had at least one mismatch.
    """

    EMPTY_BODY = auto()
    INVALID_JSON = auto()
    MISMATCH = auto()


@dataclass(frozen=True, slots=True)
class AssertionResult:
    """Outcome of a JSON assertion.

    Attributes:
        kind: None when the assertion passed, otherwise the FailureKind.
        messages: Diagnostic messages for MISMATCH failures, in traversal
            order.  Always empty for passed and structural results.
        detail: Failure text: the newline-joined messages for MISMATCH,
            the structural error text otherwise, "" when passed.
    """

    kind: FailureKind | None = None
    messages: tuple[str, ...] = ()
    detail: str = ""

    @property
    def passed(self) -> bool:
        return self.kind is None

    @property
    def failed(self) -> bool:
        return self.kind is not None

    @property
    def summary(self) -> str:
        """One-line description of the outcome."""
        if self.kind is None:
            return "JSON assertion passed"
        if self.kind == FailureKind.MISMATCH:
            count = len(self.messages)
            noun = "message" if count == 1 else "messages"
            return f"JSON assertion failed with {count} diagnostic {noun}"
        return self.detail

    def __str__(self) -> str:
        if self.kind == FailureKind.MISMATCH:
            return f"{self.summary}:\n{self.detail}"
        return self.summary

    @classmethod
    def passed_result(cls) -> AssertionResult:
        return cls()

    @classmethod
    def mismatch(cls, messages: Sequence[str]) -> AssertionResult:
        """Create a MISMATCH failure; ``messages`` must not be empty."""
        if not messages:
            msg = "A mismatch result needs at least one diagnostic message"
            raise ValueError(msg)
        return cls(
            kind=FailureKind.MISMATCH,
            messages=tuple(messages),
            detail="\n".join(messages),
        )

    @classmethod
    def empty_body(cls) -> AssertionResult:
        return cls(kind=FailureKind.EMPTY_BODY, detail=EMPTY_BODY_MESSAGE)

    @classmethod
    def invalid_json(cls, content_type: str | None = None) -> AssertionResult:
        return cls(kind=FailureKind.INVALID_JSON, detail=invalid_json_message(content_type))
