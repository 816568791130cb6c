"""Whitespace and comment skipping.

Trivia never fails: ``skip_trivia`` returns the first position that is
not whitespace or a complete comment.  Supported comment styles:

    - ``//`` and ``#`` single-line comments (run to end of line)
    - ``/* ... */`` block comments (may span multiple lines)

An unterminated block comment is not trivia, so the rule applied after
it reports its failure at the ``/*``.
"""
from __future__ import annotations

from typing import Final

from phpexpr.parser.cursor import Cursor

_WHITESPACE: Final[frozenset[int]] = frozenset(b" \t\r\n\x0b\x0c\x00")


def skip_trivia(cursor: Cursor) -> Cursor:
    """Return ``cursor`` advanced past any leading whitespace and comments."""
    source = cursor.source
    pos = cursor.offset
    end = len(source)
    while pos < end:
        byte = source[pos]
        if byte in _WHITESPACE:
            pos += 1
        elif source.startswith(b"//", pos) or byte == 0x23:  # '#'
            newline = source.find(b"\n", pos)
            pos = end if newline == -1 else newline
        elif source.startswith(b"/*", pos):
            close = source.find(b"*/", pos + 2)
            if close == -1:
                break
            pos = close + 2
        else:
            break
    if pos == cursor.offset:
        return cursor
    return cursor.moved_to(pos)
