"""
=============================================================================
HTTP MESSAGE PROTOCOL LAYER
=============================================================================

Everything needed to turn raw message text into structured records.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         PARSING PIPELINE                            │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   raw text                                                           │
    │      │                                                               │
    │      ▼                                                               │
    │   message.py      segment_message / split_header_block               │
    │      │                                                               │
    │      ├──────────────────────────┬──────────────────────┐            │
    │      ▼                          ▼                      ▼            │
    │   request.py               response.py            headers.py        │
    │   request line             status line            header lines      │
    │   (version.py)             (status_codes.py)                        │
    │      │                          │                      │            │
    │      └──────────────┬───────────┴──────────────────────┘            │
    │                     ▼                                                │
    │          Request / Response (frozen dataclasses)                     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Shared helpers:
    tokenizer.py   split_bounded() - fixed-arity split with padding
    errors.py      HTTPParseError and one subclass per rejection reason

=============================================================================
"""

from .errors import (
    HTTPParseError,
    EmptyMessage,
    EmptyStatusLine,
    InvalidRequestMethod,
    InvalidHttpVersion,
    InvalidStatusCode,
    InvalidHeader,
)
from .headers import parse_headers, merge_headers
from .message import segment_message, split_header_block
from .request import HTTPMethod, Request, RequestParser, parse_request
from .response import Response, ResponseParser, parse_response
from .status_codes import HTTPStatus, STATUS_CODES, is_valid, is_valid_status
from .tokenizer import split_bounded
from .version import HTTPVersion

__all__ = [
    # Parsing entry points
    "parse_request",
    "parse_response",
    "RequestParser",
    "ResponseParser",

    # Records
    "Request",
    "Response",
    "HTTPMethod",
    "HTTPVersion",

    # Errors
    "HTTPParseError",
    "EmptyMessage",
    "EmptyStatusLine",
    "InvalidRequestMethod",
    "InvalidHttpVersion",
    "InvalidStatusCode",
    "InvalidHeader",

    # Building blocks
    "split_bounded",
    "segment_message",
    "split_header_block",
    "parse_headers",
    "merge_headers",

    # Status codes
    "HTTPStatus",
    "STATUS_CODES",
    "is_valid",
    "is_valid_status",
]
