"""
=============================================================================
MESSAGE SEGMENTATION
=============================================================================

The first two cuts through a raw message are the same for requests and
responses:

    POST /users/3 HTTP/1.1\n          ┐            ┐
    Connection: keep-alive\n          │ header     │ title line
    Accept: text/*\n                  │ block      ┘ ┐
                                      ┘              │ header lines
    \n                   ← first blank line          ┘
    first_name=john      ← body (everything after, kept verbatim)

1. segment_message()     - header block / body, on the first "\n\n"
2. split_header_block()  - title line / header lines, on the first "\n"

Neither step looks at what the lines contain. Validation happens later,
in the request, response and header parsers.

=============================================================================
"""

from typing import NamedTuple

from .errors import EmptyMessage
from .tokenizer import split_bounded


class MessageParts(NamedTuple):
    header_block: str
    body: str


class HeaderBlock(NamedTuple):
    title_line: str
    header_lines: str


def segment_message(message: str) -> MessageParts:
    """
    Split a raw message into its header block and body.

    When there is no blank line the whole message is the header block
    and the body is empty.

    Raises:
        EmptyMessage: If message is "".
    """
    if message == "":
        raise EmptyMessage()

    header_block, body = split_bounded(message, "\n\n", 2)
    return MessageParts(header_block, body)


def split_header_block(header_block: str) -> HeaderBlock:
    """Split a header block into the title line and the remaining header lines."""
    title_line, header_lines = split_bounded(header_block, "\n", 2)
    return HeaderBlock(title_line, header_lines)
