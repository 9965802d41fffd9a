"""
=============================================================================
PARSE ERRORS
=============================================================================

Every way a message can be rejected has its own exception class:

    ┌──────────────────────┬────────────────────────┬──────────┬────────┐
    │ Exception            │ reason                 │ info     │ status │
    ├──────────────────────┼────────────────────────┼──────────┼────────┤
    │ EmptyMessage         │ empty_message          │ -        │  400   │
    │ EmptyStatusLine      │ empty_status_line      │ -        │  502   │
    │ InvalidRequestMethod │ invalid_request_method │ token    │  405   │
    │ InvalidHttpVersion   │ invalid_http_version   │ token    │  505   │
    │ InvalidStatusCode    │ invalid_status_code    │ token    │  502   │
    │ InvalidHeader        │ invalid_header         │ line     │  400   │
    └──────────────────────┴────────────────────────┴──────────┴────────┘

reason is a stable machine-readable tag. info is the exact piece of input
that was rejected (None when there is nothing to point at). status_code is
what a server should answer with when it rejects the input: 4xx/505 for a
bad request from a client, 502 when an upstream sent a broken response.

All of them derive from HTTPParseError, so callers that don't care about
the specific kind only need one except clause:

    try:
        request = parse_request(text)
    except HTTPParseError as e:
        return error_response(e.status_code, str(e))

=============================================================================
"""

from typing import Optional


class HTTPParseError(Exception):
    """
    Raised when an HTTP message cannot be parsed.

    Two errors are equal when they are the same kind and point at the same
    input, which keeps assertions short:

        assert exc_info.value == InvalidHeader("bogus")
    """

    reason = "parse_error"
    status_code = 400

    def __init__(self, info: Optional[str] = None):
        self.info = info
        if info is None:
            super().__init__(self.reason)
        else:
            super().__init__(f"{self.reason}: {info!r}")

    def __eq__(self, other):
        if not isinstance(other, HTTPParseError):
            return NotImplemented
        return type(self) is type(other) and self.info == other.info

    def __hash__(self):
        return hash((type(self), self.info))

    def __reduce__(self):
        return (type(self), (self.info,))

    def __repr__(self) -> str:
        if self.info is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.info!r})"


class EmptyMessage(HTTPParseError):
    """The input text was empty."""

    reason = "empty_message"


class EmptyStatusLine(HTTPParseError):
    """A response had nothing before its first line break."""

    reason = "empty_status_line"
    status_code = 502


class InvalidRequestMethod(HTTPParseError):
    """The request line did not start with a supported method."""

    reason = "invalid_request_method"
    status_code = 405


class InvalidHttpVersion(HTTPParseError):
    """A version token was present (or required) but not recognized."""

    reason = "invalid_http_version"
    status_code = 505


class InvalidStatusCode(HTTPParseError):
    """The status token did not hold a recognized numeric code."""

    reason = "invalid_status_code"
    status_code = 502


class InvalidHeader(HTTPParseError):
    """A header line had no "name: value" separator."""

    reason = "invalid_header"
