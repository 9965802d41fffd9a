"""
=============================================================================
HTTP RESPONSE PARSER
=============================================================================

Parses raw response text into immutable Response records.

    HTTP/1.1 404 Not Found               ← status line
    ───┬──── ─┬─ ────┬────
       │      │      └── reason phrase (ignored, may be absent)
       │      └───────── status code   (must be in the status table)
       └──────────────── version       (REQUIRED for responses)
    Server: nginx/1.14.0 (Ubuntu)        ← headers
    Connection: close
                                         ← blank line
    {"ok": true}                         ← body

Unlike a request line, a status line must carry a version: "200 OK" on its
own is rejected because "200" is not a version.

=============================================================================
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional

from .errors import EmptyStatusLine, HTTPParseError, InvalidStatusCode
from .headers import Headers, get_header, get_header_list, parse_headers
from .message import segment_message, split_header_block
from .status_codes import HTTPStatus, is_valid, parse_status_code
from .tokenizer import split_bounded
from .version import HTTPVersion, parse_http_version


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    """
    A parsed HTTP response.

    status_code and http_version are required. Constructing a Response
    with an unrecognized status code raises InvalidStatusCode, so every
    Response in existence carries a code from the status table.
    """

    status_code: int
    http_version: HTTPVersion
    headers: Headers = ()
    body: str = ""

    def __post_init__(self):
        if isinstance(self.status_code, bool) or not isinstance(self.status_code, int):
            raise TypeError(
                f"status_code must be int, not {type(self.status_code).__name__}"
            )
        if not is_valid(self.status_code):
            raise InvalidStatusCode(str(self.status_code))
        if self.http_version is None:
            raise TypeError("http_version is required for a response")

        object.__setattr__(self, "status_code", int(self.status_code))
        object.__setattr__(self, "http_version", parse_http_version(self.http_version))
        object.__setattr__(self, "headers", tuple(tuple(h) for h in self.headers))

    @property
    def status(self) -> HTTPStatus:
        """The status code as an HTTPStatus member."""
        return HTTPStatus(self.status_code)

    @property
    def reason_phrase(self) -> str:
        """Standard reason phrase for the status code (not the one on the wire)."""
        return self.status.phrase

    @property
    def is_informational(self) -> bool:
        return self.status.is_informational

    @property
    def is_success(self) -> bool:
        return self.status.is_success

    @property
    def is_redirect(self) -> bool:
        return self.status.is_redirect

    @property
    def is_client_error(self) -> bool:
        return self.status.is_client_error

    @property
    def is_server_error(self) -> bool:
        return self.status.is_server_error

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the first value of a header (exact, case-sensitive name)."""
        return get_header(self.headers, name, default)

    def get_header_list(self, name: str) -> List[str]:
        """Get all values of a header, in order."""
        return get_header_list(self.headers, name)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for JSON serialization."""
        return {
            "status_code": self.status_code,
            "http_version": self.http_version.value,
            "headers": [[name, value] for name, value in self.headers],
            "body": self.body,
        }


class StatusLine(NamedTuple):
    version: HTTPVersion
    status_code: int


class ResponseParser:
    """
    Parses raw response text into Response records.

    Same pipeline as RequestParser, with the status line in place of the
    request line:

        segment_message → split_header_block → parse_status_line
                                             → parse_headers
                                             → Response(...)
    """

    def parse(self, text: str) -> Response:
        """
        Parse a complete response message.

        Raises:
            HTTPParseError: The first problem found in the message.
            TypeError: If text is not a str.
        """
        if not isinstance(text, str):
            raise TypeError(f"response must be str, not {type(text).__name__}")

        try:
            header_block, body = segment_message(text)
            title_line, header_lines = split_header_block(header_block)
            status_line = self.parse_status_line(title_line)
            headers = parse_headers(header_lines)
        except HTTPParseError as e:
            logger.debug(f"Rejected response: {e!r}")
            raise

        return Response(
            status_code=status_line.status_code,
            http_version=status_line.version,
            headers=headers,
            body=body,
        )

    def parse_status_line(self, line: str) -> StatusLine:
        """
        Parse the status line.

            "HTTP/0.9 200 OK"  → (HTTP/0.9, 200)
            "HTTP/1.1 200"     → (HTTP/1.1, 200)
            "HTTP/1.1 600 Eh"  → InvalidStatusCode("600 Eh")

        Raises:
            EmptyStatusLine: If the line is "".
            InvalidHttpVersion: Missing or unrecognized version.
            InvalidStatusCode: Status token is not a recognized code.
        """
        if line == "":
            raise EmptyStatusLine()

        version_token, status_token = split_bounded(line, " ", 2)
        version = parse_http_version(version_token)

        status_code = parse_status_code(status_token)
        if status_code is None:
            raise InvalidStatusCode(status_token)

        return StatusLine(version, status_code)


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def parse_response(text: str) -> Response:
    """
    Parse an HTTP response message.

    Example:
        >>> response = parse_response("HTTP/0.9 200 OK")
        >>> response.status_code, response.http_version.value
        (200, 'HTTP/0.9')
    """
    return ResponseParser().parse(text)
