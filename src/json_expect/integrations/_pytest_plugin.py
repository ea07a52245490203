"""pytest plugin for json-expect.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_expect import AssertConfig, JsonAssert


@pytest.fixture(scope="session")
def assert_json_matches() -> Any:
    """Fixture that returns a callable JSON template asserter.

    The fixture is session-scoped because the returned callable is stateless
    (builds a fresh JsonAssert per call).

    Usage in tests::

        def test_user(assert_json_matches):
            assert_json_matches(b'{"id": 1, "name": "a"}', {"id": 1, "name": "a"})

        def test_missing(assert_json_matches):
            with pytest.raises(AssertionError, match=r"was not present"):
                assert_json_matches({}, {"id": 1})

    Returns:
        A callable ``_assert(actual, expected, config=None, content_type=None) -> None``
        that raises ``AssertionError`` listing every diagnostic message when
        ``actual`` does not satisfy ``expected``.  ``actual`` may be JSON
        bytes, JSON text, a parsed JSON object, or a response object with
        ``content`` and ``headers`` attributes (e.g. ``httpx.Response``).
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: AssertConfig | None = None,
        content_type: str | None = None,
    ) -> None:
        """Assert that ``actual`` satisfies the ``expected`` template.

        Raises:
            JsonAssertionError: An ``AssertionError`` subclass, when the body is
                empty, is not a JSON object, or has mismatches.
        """
        json_assert = JsonAssert(expected, config=config)
        if hasattr(actual, "content") and hasattr(actual, "headers"):
            json_assert.assert_response_matches(actual)
        else:
            json_assert.assert_matches(actual, content_type=content_type)

    return _assert
