"""Built-in matchers for json-expect templates.

Module-level constants are shared, stateless ``TypeMatcher`` instances that
can be reused for any number of properties::

    from json_expect import matchers

    template = {
        "id": matchers.INT,
        "name": matchers.STRING,
        "email": matchers.regex(r"@example\\.com$"),
        "tags": matchers.ARRAY,
        "createdAt": matchers.DATE,
    }

Custom matchers only need a ``match(prop, actual) -> MatchResult`` method
(see ``json_expect.protocols.Matcher``).
"""

from __future__ import annotations

import re

from json_expect.exceptions import UnsupportedValueError
from json_expect.matchers.regex import RegexMatcher
from json_expect.matchers.types import TypeMatcher, ValueKind

__all__ = [
    "ANY",
    "ARRAY",
    "BOOL",
    "DATE",
    "FLOAT",
    "INT",
    "NULL",
    "OBJECT",
    "STRING",
    "RegexMatcher",
    "TypeMatcher",
    "ValueKind",
    "regex",
]

ANY = TypeMatcher(ValueKind.ANY)
NULL = TypeMatcher(ValueKind.NULL)
STRING = TypeMatcher(ValueKind.STRING)
INT = TypeMatcher(ValueKind.INT)
BOOL = TypeMatcher(ValueKind.BOOL)
OBJECT = TypeMatcher(ValueKind.OBJECT)
ARRAY = TypeMatcher(ValueKind.ARRAY)
FLOAT = TypeMatcher(ValueKind.FLOAT)
DATE = TypeMatcher(ValueKind.DATE)


def regex(pattern: str | re.Pattern[str], flags: int = 0) -> RegexMatcher:
    """Return a RegexMatcher for ``pattern``, compiled with ``flags``.

    Raises:
        UnsupportedValueError: If pattern is invalid, or if ``flags`` is given
            with an already-compiled pattern (its flags are fixed).
    """
    if flags and isinstance(pattern, re.Pattern):
        msg = "Cannot apply flags to an already-compiled pattern; compile it with them"
        raise UnsupportedValueError(msg)
    if flags and isinstance(pattern, str):
        try:
            pattern = re.compile(pattern, flags)
        except re.error as exc:
            msg = f"Invalid regular expression {pattern!r}: {exc}"
            raise UnsupportedValueError(msg) from exc
    return RegexMatcher(pattern)  # type: ignore[arg-type]
