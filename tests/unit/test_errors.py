"""
Unit tests for parse error types.
"""

import pytest

from httpmessage.http.errors import (
    EmptyMessage,
    EmptyStatusLine,
    HTTPParseError,
    InvalidHeader,
    InvalidHttpVersion,
    InvalidRequestMethod,
    InvalidStatusCode,
)


class TestHTTPParseError:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("error, reason, status_code", [
        (EmptyMessage(), "empty_message", 400),
        (EmptyStatusLine(), "empty_status_line", 502),
        (InvalidRequestMethod("FETCH"), "invalid_request_method", 405),
        (InvalidHttpVersion("HTTP/3.9"), "invalid_http_version", 505),
        (InvalidStatusCode("600"), "invalid_status_code", 502),
        (InvalidHeader("bad"), "invalid_header", 400),
    ])
    def test_reason_and_status(self, error: HTTPParseError, reason: str, status_code: int):
        """Test the tag and HTTP status carried by each kind."""
        assert isinstance(error, HTTPParseError)
        assert error.reason == reason
        assert error.status_code == status_code

    def test_bare_errors_have_no_info(self):
        """Test errors that don't point at input."""
        assert EmptyMessage().info is None
        assert str(EmptyMessage()) == "empty_message"

    def test_message_includes_info(self):
        """Test that the offending fragment is in the message."""
        error = InvalidHeader("an-invalid-header")

        assert error.info == "an-invalid-header"
        assert str(error) == "invalid_header: 'an-invalid-header'"

    def test_equality(self):
        """Test that errors compare by kind and info."""
        assert InvalidHeader("x") == InvalidHeader("x")
        assert InvalidHeader("x") != InvalidHeader("y")
        assert InvalidHeader("x") != InvalidHttpVersion("x")
        assert EmptyMessage() == EmptyMessage()

    def test_hashable(self):
        """Test that equal errors hash the same."""
        assert len({InvalidHeader("x"), InvalidHeader("x"), EmptyMessage()}) == 2

    def test_repr(self):
        """Test the debug representation."""
        assert repr(InvalidRequestMethod("FETCH")) == "InvalidRequestMethod('FETCH')"
        assert repr(EmptyStatusLine()) == "EmptyStatusLine()"
