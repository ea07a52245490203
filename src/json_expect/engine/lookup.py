"""Property lookup: finds the actual property for an expected property name.

Lookups never raise for response data.  A lookup on an actual value that is
not a JSON object finds nothing, so every nested expected property is
reported as missing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_expect.engine.config import PropertyComparison

__all__ = ["LookupResult", "find_property"]


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of a property lookup.

    Attributes:
        names: Actual property names that matched, in document order.
            Empty when the property is missing; more than one entry means
            the case-insensitive lookup was ambiguous.
        value: The matched property's value when exactly one name matched.
    """

    names: tuple[str, ...] = field(default_factory=tuple)
    value: Any = None

    @property
    def found(self) -> bool:
        return len(self.names) == 1

    @property
    def missing(self) -> bool:
        return not self.names

    @property
    def ambiguous(self) -> bool:
        return len(self.names) > 1


def find_property(
    actual: Any,
    name: str,
    comparison: PropertyComparison = PropertyComparison.CASE_SENSITIVE,
) -> LookupResult:
    """Look up ``name`` in an actual JSON object.

    Args:
        actual:     The actual JSON value (any type).
        name:       The expected property name.
        comparison: Exact or case-insensitive matching.

    Returns:
        A LookupResult; see its attributes for the three possible outcomes.
    """
    if not isinstance(actual, dict):
        return LookupResult()

    if comparison == PropertyComparison.CASE_SENSITIVE:
        if name in actual:
            return LookupResult(names=(name,), value=actual[name])
        return LookupResult()

    # Per-character case mapping only; no Unicode folding such as "ß" -> "ss".
    lowered = name.lower()
    names = tuple(
        key for key in actual if isinstance(key, str) and key.lower() == lowered
    )
    if len(names) == 1:
        return LookupResult(names=names, value=actual[names[0]])
    return LookupResult(names=names)
