"""Integrations subpackage for json-expect.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via the pytest11 entry point), providing
  the ``assert_json_matches`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
