"""TemplateCache: LRU cache of templates built from JSON text.

JSON-text templates can only hold literals, objects and arrays (no matcher
objects), so the ExpectedNode tree built for a given text is always the
same and can be reused across assertions.  LRU eviction occurs silently
when ``max_size`` is exceeded.

Each ``TemplateCache`` instance maintains its own ``LRUCache`` guarded by
its own lock, so independent assertions running on parallel threads can
share one cache safely.

Example::

    from json_expect.template.cache import TemplateCache

    cache = TemplateCache(max_size=128)
    node = cache.get_or_build('{"id": 1}')         # parsed and built
    node is cache.get_or_build('{"id": 1}')         # True, served from memory
"""

from __future__ import annotations

import threading

from cachetools import LRUCache

from json_expect.template.builder import TemplateBuilder
from json_expect.template.nodes import ExpectedNode

__all__ = ["TemplateCache"]


class TemplateCache:
    """LRU-backed cache of root ExpectedNode trees keyed by JSON text.

    Args:
        max_size: Maximum number of templates to hold in memory.  Defaults
            to 128.  When exceeded, the least-recently-used entry is
            silently evicted.
        builder: The TemplateBuilder used on cache misses.
    """

    def __init__(self, max_size: int = 128, builder: TemplateBuilder | None = None) -> None:
        self._builder = builder if builder is not None else TemplateBuilder()
        self._cache: LRUCache[str | bytes, ExpectedNode] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def get_or_build(self, text: str | bytes) -> ExpectedNode:
        """Return the root node for ``text``, building it on a cache miss.

        Raises:
            UnsupportedValueError: If text is not a JSON object template.
                Failed builds are not cached.
        """
        with self._lock:
            node = self._cache.get(text)
        if node is not None:
            return node

        node = self._builder.from_json(text)
        with self._lock:
            self._cache[text] = node
        return node

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
