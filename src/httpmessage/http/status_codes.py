"""
=============================================================================
RECOGNIZED HTTP STATUS CODES
=============================================================================

A response's status line is only accepted when its code is one we know.
The set of known codes lives in this module as plain constant data:

    ┌────────┬───────────────────────────────────────────────────────────┐
    │ Class  │ Recognized codes                                          │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  1xx   │ 100-102                                                   │
    │  2xx   │ 200-208, 226                                              │
    │  3xx   │ 300-305, 307-308                  (306 is unused)         │
    │  4xx   │ 400-418, 421-424, 426, 428-429, 431, 444, 451, 499        │
    │  5xx   │ 500-508, 510-511, 599                                     │
    └────────┴───────────────────────────────────────────────────────────┘

444, 499 and 599 are not in any RFC. They are extension codes emitted by
nginx and some proxies, and show up often enough in captured traffic that
rejecting them would be unhelpful.

=============================================================================
TOKEN VALIDATION
=============================================================================

The status token is everything after the version on the status line, so it
usually carries a reason phrase:

    HTTP/1.1 404 Not Found
             ────────────── status token
             ───            leading substring → must be a known integer

    "200"        → 200
    "200 OK"     → 200
    "200OK"      → rejected (leftover characters)
    "abc"        → rejected (not a number)
    "600 Weird"  → rejected (not in the table)

=============================================================================
"""

import re
from enum import IntEnum
from typing import Optional, Tuple, Union

from .tokenizer import split_bounded


# =============================================================================
# STATUS CODE TABLE
# =============================================================================
#
# Single codes and inclusive ranges. range() end is exclusive, hence +1.
#
STATUS_CODES: Tuple[Union[int, range], ...] = (
    range(100, 102 + 1),
    range(200, 208 + 1),
    226,
    range(300, 305 + 1),
    range(307, 308 + 1),
    range(400, 418 + 1),
    range(421, 424 + 1),
    426,
    range(428, 429 + 1),
    431,
    444,
    451,
    499,
    range(500, 508 + 1),
    range(510, 511 + 1),
    599,
)

# ASCII digits only; int() alone would also take "+200", " 200" or "2_00".
_CODE_PATTERN = re.compile(r"[0-9]+")


def is_valid(code: int) -> bool:
    """Check whether a numeric status code is in the recognized table."""
    for entry in STATUS_CODES:
        if isinstance(entry, range):
            if code in entry:
                return True
        elif code == entry:
            return True
    return False


def parse_status_code(token: str) -> Optional[int]:
    """
    Extract a recognized status code from a status token.

    The token is cut at its first space and the leading piece must be a
    base-10 integer with nothing left over. The integer must also be in
    the table.

    Args:
        token: Status token such as "200" or "404 Not Found".

    Returns:
        The status code, or None if the token is not acceptable.
    """
    candidate, _ = split_bounded(token, " ", 2)
    if not _CODE_PATTERN.fullmatch(candidate):
        return None

    code = int(candidate)
    return code if is_valid(code) else None


def is_valid_status(token: str) -> bool:
    """Check whether a status token (e.g. "200 OK") carries a recognized code."""
    return parse_status_code(token) is not None


class HTTPStatus(IntEnum):
    """
    Named status codes with reason phrases.

    Members cover exactly the codes accepted by STATUS_CODES, so any
    status_code on a parsed Response can be turned into a member:

        >>> HTTPStatus(404).phrase
        'Not Found'
        >>> HTTPStatus.OK == 200
        True
    """

    # 1xx Informational
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102

    # 2xx Success
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207
    ALREADY_REPORTED = 208
    IM_USED = 226

    # 3xx Redirection
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308

    # 4xx Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    IM_A_TEAPOT = 418
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    NO_RESPONSE = 444                    # nginx: connection closed, nothing sent
    UNAVAILABLE_FOR_LEGAL_REASONS = 451
    CLIENT_CLOSED_REQUEST = 499          # nginx: client went away

    # 5xx Server Errors
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    VARIANT_ALSO_NEGOTIATES = 506
    INSUFFICIENT_STORAGE = 507
    LOOP_DETECTED = 508
    NOT_EXTENDED = 510
    NETWORK_AUTHENTICATION_REQUIRED = 511
    NETWORK_CONNECT_TIMEOUT_ERROR = 599  # proxies: upstream connect timed out

    @property
    def phrase(self) -> str:
        """Reason phrase, e.g. "Not Found" for 404."""
        return _STATUS_PHRASES.get(self, "Unknown")

    @property
    def is_informational(self) -> bool:
        return 100 <= self < 200

    @property
    def is_success(self) -> bool:
        return 200 <= self < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self < 600


_STATUS_PHRASES = {
    HTTPStatus.CONTINUE: "Continue",
    HTTPStatus.SWITCHING_PROTOCOLS: "Switching Protocols",
    HTTPStatus.PROCESSING: "Processing",

    HTTPStatus.OK: "OK",
    HTTPStatus.CREATED: "Created",
    HTTPStatus.ACCEPTED: "Accepted",
    HTTPStatus.NON_AUTHORITATIVE_INFORMATION: "Non-Authoritative Information",
    HTTPStatus.NO_CONTENT: "No Content",
    HTTPStatus.RESET_CONTENT: "Reset Content",
    HTTPStatus.PARTIAL_CONTENT: "Partial Content",
    HTTPStatus.MULTI_STATUS: "Multi-Status",
    HTTPStatus.ALREADY_REPORTED: "Already Reported",
    HTTPStatus.IM_USED: "IM Used",

    HTTPStatus.MULTIPLE_CHOICES: "Multiple Choices",
    HTTPStatus.MOVED_PERMANENTLY: "Moved Permanently",
    HTTPStatus.FOUND: "Found",
    HTTPStatus.SEE_OTHER: "See Other",
    HTTPStatus.NOT_MODIFIED: "Not Modified",
    HTTPStatus.USE_PROXY: "Use Proxy",
    HTTPStatus.TEMPORARY_REDIRECT: "Temporary Redirect",
    HTTPStatus.PERMANENT_REDIRECT: "Permanent Redirect",

    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.PAYMENT_REQUIRED: "Payment Required",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.NOT_ACCEPTABLE: "Not Acceptable",
    HTTPStatus.PROXY_AUTHENTICATION_REQUIRED: "Proxy Authentication Required",
    HTTPStatus.REQUEST_TIMEOUT: "Request Timeout",
    HTTPStatus.CONFLICT: "Conflict",
    HTTPStatus.GONE: "Gone",
    HTTPStatus.LENGTH_REQUIRED: "Length Required",
    HTTPStatus.PRECONDITION_FAILED: "Precondition Failed",
    HTTPStatus.PAYLOAD_TOO_LARGE: "Payload Too Large",
    HTTPStatus.URI_TOO_LONG: "URI Too Long",
    HTTPStatus.UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    HTTPStatus.RANGE_NOT_SATISFIABLE: "Range Not Satisfiable",
    HTTPStatus.EXPECTATION_FAILED: "Expectation Failed",
    HTTPStatus.IM_A_TEAPOT: "I'm a teapot",
    HTTPStatus.MISDIRECTED_REQUEST: "Misdirected Request",
    HTTPStatus.UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    HTTPStatus.LOCKED: "Locked",
    HTTPStatus.FAILED_DEPENDENCY: "Failed Dependency",
    HTTPStatus.UPGRADE_REQUIRED: "Upgrade Required",
    HTTPStatus.PRECONDITION_REQUIRED: "Precondition Required",
    HTTPStatus.TOO_MANY_REQUESTS: "Too Many Requests",
    HTTPStatus.REQUEST_HEADER_FIELDS_TOO_LARGE: "Request Header Fields Too Large",
    HTTPStatus.NO_RESPONSE: "No Response",
    HTTPStatus.UNAVAILABLE_FOR_LEGAL_REASONS: "Unavailable For Legal Reasons",
    HTTPStatus.CLIENT_CLOSED_REQUEST: "Client Closed Request",

    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
    HTTPStatus.NOT_IMPLEMENTED: "Not Implemented",
    HTTPStatus.BAD_GATEWAY: "Bad Gateway",
    HTTPStatus.SERVICE_UNAVAILABLE: "Service Unavailable",
    HTTPStatus.GATEWAY_TIMEOUT: "Gateway Timeout",
    HTTPStatus.HTTP_VERSION_NOT_SUPPORTED: "HTTP Version Not Supported",
    HTTPStatus.VARIANT_ALSO_NEGOTIATES: "Variant Also Negotiates",
    HTTPStatus.INSUFFICIENT_STORAGE: "Insufficient Storage",
    HTTPStatus.LOOP_DETECTED: "Loop Detected",
    HTTPStatus.NOT_EXTENDED: "Not Extended",
    HTTPStatus.NETWORK_AUTHENTICATION_REQUIRED: "Network Authentication Required",
    HTTPStatus.NETWORK_CONNECT_TIMEOUT_ERROR: "Network Connect Timeout Error",
}
