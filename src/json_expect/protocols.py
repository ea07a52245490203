"""Matcher Protocol for json-expect's placeholder extension point.

A matcher validates one actual JSON value without literal-equality
comparison.  Users can plug in custom matchers without inheriting from any
base class: any class with a conformant ``match`` method passes
``isinstance`` checks.

Example::

    from json_expect.protocols import Matcher, MatchResult

    class PositiveInt:
        def match(self, prop, actual):
            if isinstance(actual, int) and not isinstance(actual, bool) and actual > 0:
                return MatchResult.ok()
            return MatchResult.failed(f"Expected a positive integer, got '{actual}'.")

    assert isinstance(PositiveInt(), Matcher)  # True, structural conformance
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = ["MatchResult", "Matcher", "PropertyDescriptor"]


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """The expected property a matcher is being applied to.

    Attributes:
        name: The declared property name (or ``[i]`` for an array item).
        path: The rendered property path, e.g. ``user.tags[0]``.
    """

    name: str
    path: str


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a single ``Matcher.match`` call.

    Attributes:
        success:  True when the actual value satisfied the matcher.
        messages: Diagnostic messages, one aggregated error each on failure.
    """

    success: bool
    messages: tuple[str, ...] = ()

    @classmethod
    def ok(cls) -> MatchResult:
        return cls(success=True)

    @classmethod
    def failed(cls, *messages: str) -> MatchResult:
        return cls(success=False, messages=tuple(messages))


@runtime_checkable
class Matcher(Protocol):
    """Structural protocol for expected-value matchers.

    Any class implementing ``match(self, prop, actual) -> MatchResult``
    satisfies this protocol at runtime, no inheritance required.

    The ``match`` method must:
    - Treat ``actual`` as read-only.
    - Hold no mutable state shared between calls; a matcher may be reused
      for many properties and invoked from several threads at once.
    """

    def match(self, prop: PropertyDescriptor, actual: Any) -> MatchResult: ...
