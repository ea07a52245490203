"""JSON type classification, literal coercion and value rendering.

``json_type_of`` classifies a parsed JSON value.  The dispatch order is
critical: bool MUST be checked before int because bool is a subclass of int
in Python (isinstance(True, int) is True).
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import StrEnum
from typing import Any

from json_expect.exceptions import CoercionError, UnsupportedValueError

__all__ = ["JsonType", "coerce", "is_date_string", "json_type_of", "render_value"]


class JsonType(StrEnum):
    """JSON value types, valued by the names used in diagnostic messages."""

    OBJECT = "Object"
    ARRAY = "Array"
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String"
    BOOLEAN = "Boolean"
    NULL = "Null"
    DATE = "Date"


def json_type_of(value: Any) -> JsonType:
    """Return the JSON type of a parsed JSON value.

    Strings are always ``STRING`` here; ``DATE`` is only produced by
    ``is_date_string`` checks in date matchers.

    Raises:
        UnsupportedValueError: If value is not a JSON-compatible Python value.
    """
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, int):
        return JsonType.INTEGER
    if isinstance(value, float):
        return JsonType.FLOAT
    if isinstance(value, str):
        return JsonType.STRING
    if value is None:
        return JsonType.NULL
    if isinstance(value, dict):
        return JsonType.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonType.ARRAY

    msg = f"Unsupported JSON value type: {type(value)!r}"
    raise UnsupportedValueError(msg)


def is_date_string(value: Any) -> bool:
    """Return True if value is a string holding an ISO-8601 date or date-time."""
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def coerce(actual: Any, expected: Any) -> Any:
    """Convert an actual JSON scalar to the Python type of an expected literal.

    Conversions allowed:
    - int and float actual values coerce to float.
    - a float with an integral value (e.g. ``2.0``) coerces to int.
    - every other type must already match exactly.

    Args:
        actual:   The actual JSON value.
        expected: The expected literal whose type is the coercion target.

    Returns:
        The converted actual value, ready for ``==`` comparison.

    Raises:
        CoercionError: If actual cannot be represented as expected's type.
    """
    if expected is None:
        if actual is None:
            return None
    elif isinstance(expected, bool):
        if isinstance(actual, bool):
            return actual
    elif isinstance(expected, int):
        if isinstance(actual, int) and not isinstance(actual, bool):
            return actual
        if isinstance(actual, float) and actual.is_integer():
            return int(actual)
    elif isinstance(expected, float):
        if isinstance(actual, (int, float)) and not isinstance(actual, bool):
            return float(actual)
    elif isinstance(expected, str):
        if isinstance(actual, str):
            return actual

    msg = f"Cannot convert {render_value(actual)!r} to {type(expected).__name__}"
    raise CoercionError(msg)


def render_value(value: Any) -> str:
    """Render a JSON value as text for diagnostic messages.

    Scalars use their JSON spelling (``null``, ``true``, ``false``); strings
    are rendered bare; containers are serialised as compact JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, dict)):
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            return repr(value)
    return str(value)
