"""TypeMatcher: succeeds when the actual value has a given JSON type.

``ValueKind`` is the enumerated placeholder vocabulary.  A bare ``ValueKind``
member used in a template is converted into a ``TypeMatcher`` by the
template builder, so every failed type placeholder produces a diagnostic
message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

from json_expect.exceptions import UnsupportedValueError
from json_expect.jsontypes import JsonType, is_date_string, json_type_of
from json_expect.protocols import MatchResult

if TYPE_CHECKING:
    from json_expect.protocols import PropertyDescriptor

__all__ = ["TypeMatcher", "ValueKind"]


class ValueKind(StrEnum):
    """Placeholder kinds accepted by ``TypeMatcher``."""

    ANY = auto()
    NULL = auto()
    STRING = auto()
    INT = auto()
    BOOL = auto()
    OBJECT = auto()
    ARRAY = auto()
    FLOAT = auto()
    DATE = auto()


_EXPECTED_TYPES: dict[ValueKind, JsonType] = {
    ValueKind.NULL: JsonType.NULL,
    ValueKind.STRING: JsonType.STRING,
    ValueKind.INT: JsonType.INTEGER,
    ValueKind.BOOL: JsonType.BOOLEAN,
    ValueKind.OBJECT: JsonType.OBJECT,
    ValueKind.ARRAY: JsonType.ARRAY,
    ValueKind.FLOAT: JsonType.FLOAT,
    ValueKind.DATE: JsonType.DATE,
}


@dataclass(frozen=True, slots=True)
class TypeMatcher:
    """Matches any actual value whose JSON type equals ``kind``.

    ``ValueKind.ANY`` matches every value.  ``ValueKind.DATE`` matches
    strings that parse as ISO-8601 dates or date-times, since JSON itself
    has no date type.

    Example::

        TypeMatcher(ValueKind.INT).match(prop, 123).success      # True
        TypeMatcher("string").match(prop, 123).messages
        # ("Type mismatch. Expected: 'String', Actual: 'Integer'.",)

    Raises:
        UnsupportedValueError: If ``kind`` is not a ValueKind value.
    """

    kind: ValueKind

    def __post_init__(self) -> None:
        try:
            kind = ValueKind(self.kind)
        except ValueError:
            msg = f"The value kind: '{self.kind}' is not yet supported."
            raise UnsupportedValueError(msg) from None
        object.__setattr__(self, "kind", kind)

    def match(self, prop: PropertyDescriptor, actual: Any) -> MatchResult:
        if self.kind == ValueKind.ANY:
            return MatchResult.ok()

        expected = _EXPECTED_TYPES[self.kind]
        actual_type = json_type_of(actual)

        if expected == JsonType.DATE:
            if is_date_string(actual):
                return MatchResult.ok()
        elif actual_type == expected:
            return MatchResult.ok()

        return MatchResult.failed(
            f"Type mismatch. Expected: '{expected}', Actual: '{actual_type}'."
        )
