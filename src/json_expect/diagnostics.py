"""Diagnostics: the append-only error list of one comparison run.

Every comparison mismatch becomes exactly one formatted, path-qualified
message.  Messages keep the order they were reported in, which is the
Verifier's traversal order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

__all__ = ["Diagnostics"]


class Diagnostics:
    """Collects human-readable mismatch descriptions.

    One instance belongs to exactly one comparison run; it is never shared
    between runs.

    Example::

        diagnostics = Diagnostics()
        diagnostics.missing("user.name")
        diagnostics.messages
        # ["The expected property 'user.name' was not present in the response."]
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    @property
    def messages(self) -> list[str]:
        """A copy of the collected messages, in report order."""
        return list(self._messages)

    def add(self, message: str) -> None:
        self._messages.append(message)

    def extend(self, messages: Iterable[str]) -> None:
        self._messages.extend(messages)

    def missing(self, path: str) -> None:
        self.add(f"The expected property '{path}' was not present in the response.")

    def ambiguous(self, path: str, names: Sequence[str]) -> None:
        candidates = ", ".join(f"'{name}'" for name in names)
        self.add(
            f"The expected property '{path}' matched more than one property "
            f"in the response: {candidates}."
        )

    def type_mismatch(self, path: str, expected_type: str, actual_type: str) -> None:
        self.add(
            f"The expected property '{path}' is not of the same type as the "
            f"property in the response. Expected type: '{expected_type}'. "
            f"Actual type: '{actual_type}'"
        )

    def value_mismatch(self, path: str, expected: str, actual: str) -> None:
        self.add(
            f"The expected property '{path}' does not have the same value as the "
            f"property in the response. Expected value: '{expected}'. "
            f"Actual value: '{actual}'"
        )

    def length_mismatch(self, path: str, expected_length: int, actual_length: int) -> None:
        self.add(
            f"The expected array property '{path}' is not of the same length as "
            f"the array in the response. Expected length: '{expected_length}'. "
            f"Actual length: '{actual_length}'"
        )

    def matcher_failed(self, path: str, messages: Sequence[str]) -> None:
        """Record a failed matcher: one message per matcher message, or a bare one."""
        prefix = f"The property '{path}' did not match the specified matcher."
        if not messages:
            self.add(prefix)
            return
        for message in messages:
            self.add(f"{prefix} Message: {message or ''}")
