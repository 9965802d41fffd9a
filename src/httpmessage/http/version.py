"""
Recognized HTTP protocol versions.

Only these four strings are ever accepted on a request or status line.
Anything else ("HTTP/3.9", "http/1.1", "HTTP/1.1 " with a trailing space)
is rejected with InvalidHttpVersion.
"""

from enum import Enum
from typing import Optional

from .errors import InvalidHttpVersion


class HTTPVersion(str, Enum):
    """
    Protocol version as written on the wire.

    Members are str subclasses, so they compare equal to their spelling:

        >>> HTTPVersion.HTTP_1_1 == "HTTP/1.1"
        True
    """

    HTTP_0_9 = "HTTP/0.9"
    HTTP_1_0 = "HTTP/1.0"
    HTTP_1_1 = "HTTP/1.1"
    HTTP_2_0 = "HTTP/2.0"

    def __str__(self) -> str:
        return self.value


def parse_http_version(token: str, optional: bool = False) -> Optional[HTTPVersion]:
    """
    Validate a version token.

    Args:
        token: The version token from a request or status line.
        optional: When True, "" means "no version given" and yields None.
                  Requests may omit the version; responses may not.

    Raises:
        InvalidHttpVersion: If the token is not a recognized version.
    """
    if token == "" and optional:
        return None

    try:
        return HTTPVersion(token)
    except ValueError:
        raise InvalidHttpVersion(token) from None
