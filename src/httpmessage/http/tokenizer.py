"""
=============================================================================
BOUNDED SPLIT TOKENIZER
=============================================================================

Every stage of the parser cuts a string into a FIXED number of pieces:

    message      → (header block, body)            on "\n\n"
    header block → (title line, header lines)      on "\n"
    request line → (method, target, version)       on " "
    status line  → (version, status token)         on " "

str.split(sep, maxsplit) gets us most of the way there, but it returns a
SHORTER list when the delimiter is missing:

    >>> "GET /users".split(" ", 2)
    ['GET', '/users']                 # only 2 parts, we wanted 3

Unpacking that into three names blows up with ValueError. Instead of a
length check at every call site, split_bounded() pads the missing tail
with empty strings:

    >>> split_bounded("GET /users", " ", 3)
    ('GET', '/users', '')

=============================================================================
"""

from typing import Tuple


def split_bounded(text: str, delimiter: str, n: int) -> Tuple[str, ...]:
    """
    Split text on delimiter into exactly n parts.

    Only the first n-1 delimiters are used, so the last part keeps any
    remaining delimiters. Missing trailing parts are filled with "".

    Args:
        text: String to split.
        delimiter: Non-empty separator.
        n: Number of parts to return (>= 1).

    Returns:
        Tuple of exactly n strings.

    Example:
        split_bounded("a b c d", " ", 3)  # ('a', 'b', 'c d')
        split_bounded("a", " ", 3)        # ('a', '', '')
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    parts = text.split(delimiter, n - 1)
    return tuple(parts) + ("",) * (n - len(parts))
