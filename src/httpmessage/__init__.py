"""
=============================================================================
HTTPMESSAGE - Parse raw HTTP messages into structured records
=============================================================================

A small, pure parser for textual HTTP/1.x-style messages. Give it the text
of a request or a response; get back a frozen record, or an exception that
says exactly what was wrong and where.

    from httpmessage import parse_request, parse_response, HTTPParseError

    request = parse_request(
        "POST /users/3 HTTP/1.1\\n"
        "Connection: keep-alive\\n"
        "Accept: text/*\\n"
        "\\n"
        "first_name=john&last_name=doe"
    )
    request.method        # HTTPMethod.POST
    request.headers       # (("Connection", "keep-alive"), ("Accept", "text/*"))
    request.body          # "first_name=john&last_name=doe"

    response = parse_response("HTTP/0.9 200 OK")
    response.status_code  # 200

    try:
        parse_request("FETCH /users/6 HTTP/1.1")
    except HTTPParseError as e:
        e.reason          # "invalid_request_method"
        e.info            # "FETCH"

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpmessage/
    ├── __init__.py          # This file - public API
    ├── __main__.py          # CLI (python -m httpmessage)
    ├── config.py            # ParserConfig dataclass
    └── http/
        ├── tokenizer.py     # split_bounded
        ├── status_codes.py  # Status code table + HTTPStatus
        ├── version.py       # HTTPVersion
        ├── errors.py        # HTTPParseError hierarchy
        ├── message.py       # Header block / body / title line splitting
        ├── headers.py       # Header line parsing
        ├── request.py       # Request + RequestParser
        └── response.py      # Response + ResponseParser

No I/O happens outside __main__.py. Parsing is deterministic and
thread-safe: there is no shared mutable state.

=============================================================================
"""

__version__ = "1.0.0"

from .http import (
    parse_request,
    parse_response,
    Request,
    Response,
    HTTPMethod,
    HTTPVersion,
    HTTPStatus,
    HTTPParseError,
    EmptyMessage,
    EmptyStatusLine,
    InvalidRequestMethod,
    InvalidHttpVersion,
    InvalidStatusCode,
    InvalidHeader,
    split_bounded,
    is_valid,
)
from .config import ParserConfig

__all__ = [
    "parse_request",
    "parse_response",
    "Request",
    "Response",
    "HTTPMethod",
    "HTTPVersion",
    "HTTPStatus",
    "HTTPParseError",
    "EmptyMessage",
    "EmptyStatusLine",
    "InvalidRequestMethod",
    "InvalidHttpVersion",
    "InvalidStatusCode",
    "InvalidHeader",
    "split_bounded",
    "is_valid",
    "ParserConfig",
    "__version__",
]
