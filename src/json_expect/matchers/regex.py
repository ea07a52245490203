"""RegexMatcher: succeeds when the actual value is a string matching a pattern."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from json_expect.exceptions import UnsupportedValueError
from json_expect.jsontypes import render_value
from json_expect.protocols import MatchResult

if TYPE_CHECKING:
    from json_expect.protocols import PropertyDescriptor

__all__ = ["RegexMatcher"]


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Matches strings in which ``pattern`` finds a match (``re.search``).

    Accepts either a pattern string or a compiled ``re.Pattern``.  Non-string
    actual values never match.

    Raises:
        UnsupportedValueError: If ``pattern`` is not a valid regular expression.
    """

    pattern: re.Pattern[str]

    def __post_init__(self) -> None:
        if isinstance(self.pattern, re.Pattern):
            return
        try:
            compiled = re.compile(self.pattern)
        except (re.error, TypeError) as exc:
            msg = f"Invalid regular expression {self.pattern!r}: {exc}"
            raise UnsupportedValueError(msg) from exc
        object.__setattr__(self, "pattern", compiled)

    def match(self, prop: PropertyDescriptor, actual: Any) -> MatchResult:
        if isinstance(actual, str) and self.pattern.search(actual) is not None:
            return MatchResult.ok()
        return MatchResult.failed(
            f"The RegexMatcher did not match the actual value: '{render_value(actual)}'."
        )
