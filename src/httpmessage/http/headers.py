"""
=============================================================================
HEADER LIST PARSING
=============================================================================

Header lines are parsed into an ORDERED TUPLE OF PAIRS, not a dict:

    Accept: text/html                 (("Accept", "text/html"),
    Accept: application/json    →      ("Accept", "application/json"),
    Host:   github.com                 ("Host", "github.com"))

A dict keyed by name would silently drop the second Accept line, and it
would forget where each header appeared. Both matter to anyone re-emitting
or auditing a message, so every line is kept as its own entry.

=============================================================================
LINE FORMAT
=============================================================================

    header-line := key ":" SP* value

    " Spaced Key  :   val  "
     ─────┬──────  ─┬─ ──┬──
          │         │    └── value: trailing spaces kept
          │         └─────── separator: colon plus any run of spaces
          └───────────────── key: kept exactly, spaces included

Only the FIRST colon separates, so values may contain colons
("Date: Mon, 14 Dec 2020 12:40:51 GMT" keeps its time intact).

Names are not lower-cased or otherwise normalized. Lookups below are exact
matches.

=============================================================================
ALL OR NOTHING
=============================================================================

A single line without a colon rejects the whole header block with
InvalidHeader. There is no "skip the bad line and carry on" mode.

=============================================================================
"""

import re
from typing import Dict, List, Optional, Tuple

from .errors import InvalidHeader


Header = Tuple[str, str]
Headers = Tuple[Header, ...]

HEADER_SEPARATOR = re.compile(r": *")


def parse_headers(block: str) -> Headers:
    """
    Parse newline-separated header lines into ordered (name, value) pairs.

    Args:
        block: Header lines, without the title line. May be "".

    Returns:
        Tuple of (name, value) pairs in input order, duplicates kept.

    Raises:
        InvalidHeader: On the first line that has no colon.
    """
    if block == "":
        return ()

    headers: List[Header] = []
    for line in block.split("\n"):
        parts = HEADER_SEPARATOR.split(line, maxsplit=1)
        if len(parts) != 2:
            raise InvalidHeader(line)

        name, value = parts
        headers.append((name, value))

    return tuple(headers)


def get_header(headers: Headers, name: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value of the first header named exactly `name`."""
    for key, value in headers:
        if key == name:
            return value
    return default


def get_header_list(headers: Headers, name: str) -> List[str]:
    """Return every value of the headers named exactly `name`, in order."""
    return [value for key, value in headers if key == name]


def merge_headers(headers: Headers) -> Dict[str, str]:
    """
    Collapse headers into a dict, joining repeated names with ", ".

    This is the lossy view some consumers expect:

        (("A", "1"), ("B", "x"), ("A", "2"))  →  {"A": "1, 2", "B": "x"}

    Parsed records never store this form; call it explicitly when a
    mapping is what you need.
    """
    merged: Dict[str, str] = {}
    for name, value in headers:
        if name in merged:
            merged[name] += ", " + value
        else:
            merged[name] = value
    return merged
