"""JsonAssert: the assertion entry point wiring body parsing to the Verifier.

This is the contract boundary between the comparison engine and whatever
produced the document (an HTTP client, a fixture file, a test).  It:
- builds the expected template ONCE, at construction;
- fails fast on an empty body or a body that is not a JSON object, before
  any comparison runs;
- otherwise runs the Verifier once and turns the message list into a
  passed or failed ``AssertionResult``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from json_expect.engine.config import AssertConfig
from json_expect.engine.verifier import Verifier
from json_expect.exceptions import (
    EmptyBodyError,
    InvalidJsonError,
    JsonAssertionError,
)
from json_expect.result import (
    EMPTY_BODY_MESSAGE,
    AssertionResult,
    invalid_json_message,
)
from json_expect.template.builder import TemplateBuilder

__all__ = ["JsonAssert", "parse_body"]

logger = logging.getLogger(__name__)


def parse_body(body: Any, content_type: str | None = None) -> dict[str, Any]:
    """Parse a document body into a JSON object.

    Args:
        body: UTF-8 encoded JSON bytes, JSON text, or an already-parsed
            JSON value.
        content_type: The content type reported with the body; only used in
            the InvalidJsonError message.

    Returns:
        The parsed JSON object.

    Raises:
        EmptyBodyError: If body is None or has zero length.
        InvalidJsonError: If body is not valid JSON or its top-level value
            is not a JSON object.
    """
    if body is None or (isinstance(body, (bytes, bytearray, str)) and len(body) == 0):
        raise EmptyBodyError(EMPTY_BODY_MESSAGE)

    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidJsonError(invalid_json_message(content_type), content_type) from exc

    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as exc:
            raise InvalidJsonError(invalid_json_message(content_type), content_type) from exc

    if not isinstance(body, dict):
        raise InvalidJsonError(invalid_json_message(content_type), content_type)

    return body


class JsonAssert:
    """Asserts that JSON documents satisfy an expected template.

    The template is converted to an ExpectedNode tree once, so a single
    ``JsonAssert`` can check any number of documents.  Each check uses a
    fresh path stack and error list; instances hold no per-run state.

    Example::

        from json_expect import JsonAssert, matchers

        check = JsonAssert({"id": 1, "name": matchers.STRING})
        result = check.check(b'{"id": 1, "name": "Alice"}')
        result.passed   # True

        result = check.check(b'{"name": 7}')
        print(result)
        # JSON assertion failed with 2 diagnostic messages:
        # The expected property 'id' was not present in the response.
        # The property 'name' did not match the specified matcher. Message: ...
    """

    def __init__(self, expected: Any, config: AssertConfig | None = None) -> None:
        """Initialise the assertion.

        Args:
            expected: The expected template: a dict (optionally holding
                matchers), an ExpectedNode, or JSON text whose root is an
                object.
            config: Comparison options.  Defaults to ``AssertConfig()``.

        Raises:
            UnsupportedValueError: If expected cannot be built into an
                object template.
        """
        builder = TemplateBuilder()
        if isinstance(expected, (str, bytes)):
            self._template = builder.from_json(expected)
        else:
            self._template = builder.build_root(expected)
        self._verifier = Verifier(config)

    @property
    def config(self) -> AssertConfig:
        return self._verifier.config

    def verify(self, actual: Any) -> list[str]:
        """Compare an already-parsed document and return every mismatch message."""
        return self._verifier.verify(self._template, actual)

    def check(self, body: Any, content_type: str | None = None) -> AssertionResult:
        """Check a document body against the template.

        Args:
            body: UTF-8 JSON bytes, JSON text, or an already-parsed JSON object.
            content_type: Reported in the failure text when body is not JSON.

        Returns:
            A passed result, or a failed result of kind EMPTY_BODY,
            INVALID_JSON or MISMATCH.
        """
        try:
            actual = parse_body(body, content_type)
        except EmptyBodyError:
            logger.debug("JSON assertion failed: empty body")
            return AssertionResult.empty_body()
        except InvalidJsonError as exc:
            logger.debug("JSON assertion failed: invalid JSON (content type %r)", exc.content_type)
            return AssertionResult.invalid_json(exc.content_type)

        messages = self.verify(actual)
        if messages:
            logger.debug("JSON assertion failed with %d diagnostic message(s)", len(messages))
            return AssertionResult.mismatch(messages)
        return AssertionResult.passed_result()

    def check_response(self, response: Any) -> AssertionResult:
        """Check an HTTP response object such as ``httpx.Response``.

        Reads ``response.content`` and the ``content-type`` header.
        """
        headers = getattr(response, "headers", None)
        content_type = headers.get("content-type") if headers is not None else None
        return self.check(response.content, content_type=content_type)

    def assert_matches(self, body: Any, content_type: str | None = None) -> None:
        """Like ``check``, but raise on failure.

        Raises:
            JsonAssertionError: If the check did not pass.  The exception's
                ``result`` holds the failed AssertionResult.
        """
        result = self.check(body, content_type=content_type)
        if result.failed:
            raise JsonAssertionError(result)

    def assert_response_matches(self, response: Any) -> None:
        """Like ``check_response``, but raise on failure.

        Raises:
            JsonAssertionError: If the check did not pass.
        """
        result = self.check_response(response)
        if result.failed:
            raise JsonAssertionError(result)
