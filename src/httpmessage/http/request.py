"""
=============================================================================
HTTP REQUEST PARSER
=============================================================================

Parses raw request text into immutable Request records.

=============================================================================
HTTP REQUEST ANATOMY
=============================================================================

    ┌─ REQUEST LINE ──────────────────────────────────────────────────┐
    │                                                                  │
    │    GET /users/6?format=json HTTP/1.1                             │
    │    ─┬─ ─────────┬──────────  ───┬───                             │
    │     │           │               │                                │
    │   Method      Target       Version (optional for requests)       │
    │                 │                                                │
    │        ┌────────┴────────┐                                       │
    │      Path          Query string → params {"format": "json"}      │
    │    /users/6        format=json                                   │
    │                                                                  │
    ├─ HEADERS ───────────────────────────────────────────────────────┤
    │    Connection: keep-alive                                        │
    │    Accept: text/*                                                │
    ├─ BLANK LINE ────────────────────────────────────────────────────┤
    │                                                                  │
    ├─ BODY ──────────────────────────────────────────────────────────┤
    │    first_name=john&last_name=doe                                 │
    └──────────────────────────────────────────────────────────────────┘

Lines are separated by a bare "\n". A message with CRLF endings should be
normalized by the caller before parsing (the CLI's --crlf flag does this).

=============================================================================
VALIDATION ORDER
=============================================================================

    1. Empty message?            → EmptyMessage
    2. Method one of the seven?  → InvalidRequestMethod("FETCH")
    3. Version recognized?       → InvalidHttpVersion("HTTP/3.9")
       ("" is fine: "POST /users/5" has no version and that's allowed)
    4. Every header has a colon? → InvalidHeader("an-invalid-header")

The first failure is raised. Nothing past it is looked at and no partial
Request is ever returned.

=============================================================================
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Optional
from urllib.parse import parse_qsl

from .errors import HTTPParseError, InvalidRequestMethod
from .headers import Headers, get_header, get_header_list, parse_headers
from .message import segment_message, split_header_block
from .tokenizer import split_bounded
from .version import HTTPVersion, parse_http_version


logger = logging.getLogger(__name__)

# "http://host" or "//host" in front of an absolute-form target
_AUTHORITY_PREFIX = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:)?//[^/]*")


class HTTPMethod(str, Enum):
    """
    Supported request methods.

    Matching is case-sensitive: "GET" is a method, "get" is not.

        ┌──────────┬────────────┬────────────┐
        │  Method  │ Idempotent │  Has Body  │
        ├──────────┼────────────┼────────────┤
        │  GET     │    Yes     │    No      │
        │  POST    │    No      │    Yes     │
        │  PUT     │    Yes     │    Yes     │
        │  PATCH   │    No      │    Yes     │
        │  DELETE  │    Yes     │  Optional  │
        │  OPTIONS │    Yes     │    No      │
        │  HEAD    │    Yes     │    No      │
        └──────────┴────────────┴────────────┘
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"

    def __str__(self) -> str:
        return self.value


def parse_method(token: str) -> HTTPMethod:
    """Validate a method token, raising InvalidRequestMethod if unknown."""
    try:
        return HTTPMethod(token)
    except ValueError:
        raise InvalidRequestMethod(token) from None


@dataclass(frozen=True)
class Request:
    """
    A parsed HTTP request.

    =========================================================================
    ATTRIBUTES
    =========================================================================

        method:        HTTPMethod member (compares equal to "GET", ...)

        path:          Target path WITHOUT the query string
                       "/users/6", never "/users/6?format=json"

        http_version:  HTTPVersion member, or None when the request line
                       had no third token

        headers:       Tuple of (name, value) pairs in input order.
                       Repeated names stay as separate entries.

        body:          Everything after the first blank line, verbatim

        params:        Read-only mapping of decoded query parameters
                       "?a=1&b=hello%20world" → {"a": "1", "b": "hello world"}

    =========================================================================

    Records are frozen. headers is stored as a tuple and params as a
    read-only mapping, so nothing can be changed after construction.
    """

    method: HTTPMethod
    path: str
    http_version: Optional[HTTPVersion] = None
    headers: Headers = ()
    body: str = ""
    # Excluded from hashing: the read-only mapping itself is unhashable.
    params: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "method", parse_method(self.method))
        if self.http_version is not None:
            object.__setattr__(
                self, "http_version", parse_http_version(self.http_version)
            )
        object.__setattr__(self, "headers", tuple(tuple(h) for h in self.headers))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the first value of a header.

        Lookup is an exact, case-sensitive match on the name as it appeared
        in the message.

        Example:
            request.get_header("Accept")        # "text/*"
            request.get_header("accept")        # None
        """
        return get_header(self.headers, name, default)

    def get_header_list(self, name: str) -> List[str]:
        """Get all values of a header, in the order they appeared."""
        return get_header_list(self.headers, name)

    def get_param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a decoded query parameter."""
        return self.params.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for JSON serialization."""
        return {
            "method": self.method.value,
            "path": self.path,
            "http_version": self.http_version.value if self.http_version else None,
            "headers": [[name, value] for name, value in self.headers],
            "body": self.body,
            "params": dict(self.params),
        }


class RequestLine(NamedTuple):
    method: HTTPMethod
    path: str
    params: Dict[str, str]
    version: Optional[HTTPVersion]


class RequestParser:
    """
    Parses raw request text into Request records.

    ==========================================================================
    PARSER PIPELINE
    ==========================================================================

        Raw request text
              │
              ▼
        ┌───────────────────────────────────────────────────────────────┐
        │  1. segment_message()      header block │ body                │
        │  2. split_header_block()   title line   │ header lines        │
        │  3. parse_request_line()   method, path, params, version      │
        │  4. parse_headers()        ((name, value), ...)               │
        │  5. Request(...)                                              │
        └───────────────────────────────────────────────────────────────┘
              │
              ▼
        Request (frozen dataclass)

    The parser keeps no state between calls. One instance can be shared
    by any number of threads.

    ==========================================================================
    """

    def parse(self, text: str) -> Request:
        """
        Parse a complete request message.

        Args:
            text: The raw message.

        Returns:
            The parsed Request.

        Raises:
            HTTPParseError: The first problem found in the message.
            TypeError: If text is not a str.
        """
        if not isinstance(text, str):
            raise TypeError(f"request must be str, not {type(text).__name__}")

        try:
            header_block, body = segment_message(text)
            title_line, header_lines = split_header_block(header_block)
            request_line = self.parse_request_line(title_line)
            headers = parse_headers(header_lines)
        except HTTPParseError as e:
            logger.debug(f"Rejected request: {e!r}")
            raise

        return Request(
            method=request_line.method,
            path=request_line.path,
            http_version=request_line.version,
            headers=headers,
            body=body,
            params=request_line.params,
        )

    def parse_request_line(self, line: str) -> RequestLine:
        """
        Parse the request line.

        =====================================================================
        REQUEST LINE FORMAT
        =====================================================================

            METHOD SP target [SP version]

            "GET /users/1 HTTP/1.1"  → (GET, "/users/1", {}, HTTP/1.1)
            "POST /users/5"          → (POST, "/users/5", {}, None)

        The line is cut into at most three tokens, so a stray fourth word
        ends up glued to the version ("HTTP/1.1 extra") and fails the
        version check.

        =====================================================================

        Raises:
            InvalidRequestMethod: Unknown method token.
            InvalidHttpVersion: Version token present but not recognized.
        """
        method_token, target, version_token = split_bounded(line, " ", 3)

        method = parse_method(method_token)
        path, params = self._parse_target(target)
        version = parse_http_version(version_token, optional=True)

        return RequestLine(method, path, params, version)

    def _parse_target(self, target: str) -> tuple[str, Dict[str, str]]:
        """
        Split the request target into path and decoded query parameters.

        The path is returned as written: no percent-decoding, and tabs or
        other odd characters are left in place. An absolute-form target
        only loses its scheme and authority. The query string is decoded
        with form rules: "%20" and "+" both become a space. A repeated key
        keeps its last value.
        """
        path, _, query = target.partition("#")[0].partition("?")

        # "http://example.com/users" → "/users"
        path = _AUTHORITY_PREFIX.sub("", path, count=1)

        params = dict(parse_qsl(query, keep_blank_values=True, separator="&"))
        return path, params


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def parse_request(text: str) -> Request:
    """
    Parse an HTTP request message.

    Example:
        >>> request = parse_request("GET /users/6?format=json")
        >>> request.path, dict(request.params)
        ('/users/6', {'format': 'json'})
    """
    return RequestParser().parse(text)
