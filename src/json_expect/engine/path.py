"""PropertyPath: the segment stack used to address nodes in diagnostics.

Segments are property names or ``[index]`` array positions.  The path is a
pure side-channel for error messages and carries no comparison state.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

__all__ = ["IndexSegment", "PropertyPath", "index_segment"]


class IndexSegment(str):
    """An array-position segment such as ``[3]``, rendered without a separator.

    Plain ``str`` segments are always property names, even ones that start
    with ``[``.
    """

    __slots__ = ()


def index_segment(index: int) -> IndexSegment:
    """Return the path segment for an array position, e.g. ``[3]``."""
    return IndexSegment(f"[{index}]")


class PropertyPath:
    """Ordered stack of path segments.

    Use ``descend`` rather than ``push``/``pop`` wherever possible: it pops
    on every exit path, so a segment can never leak into the messages of a
    sibling property.

    Example::

        path = PropertyPath()
        with path.descend("user"):
            with path.descend("addresses"):
                with path.descend(index_segment(0)):
                    with path.descend("city"):
                        path.render()   # "user.addresses[0].city"
        path.render()                   # ""
    """

    def __init__(self) -> None:
        self._segments: list[str] = []

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    @property
    def current(self) -> str:
        """The innermost segment, or "" at the root."""
        return self._segments[-1] if self._segments else ""

    def push(self, segment: str) -> None:
        self._segments.append(segment)

    def pop(self) -> str:
        if not self._segments:
            msg = "Cannot pop from an empty property path"
            raise IndexError(msg)
        return self._segments.pop()

    @contextmanager
    def descend(self, segment: str) -> Iterator[PropertyPath]:
        """Push ``segment`` for the duration of the ``with`` block."""
        self.push(segment)
        try:
            yield self
        finally:
            self.pop()

    def render(self) -> str:
        """Join segments: names with ``.``, IndexSegments with no separator."""
        parts: list[str] = []
        for segment in self._segments:
            if parts and not isinstance(segment, IndexSegment):
                parts.append(".")
            parts.append(segment)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"PropertyPath({self.render()!r})"
