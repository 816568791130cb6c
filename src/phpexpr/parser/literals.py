"""Literal leaf rule.

Recognized literals, tried in this order:

    - ``null``, ``true`` and ``false`` (case-insensitive)
    - reals: ``1.5``, ``.5``, ``1.``, ``1e3``, ``1.5E-3``
    - integers: decimal, ``0x`` hexadecimal, ``0b`` binary, and octal
      written ``0o17`` or ``017``
    - single- and double-quoted strings

Integers that do not fit a signed 64-bit value become reals.  Strings
are unescaped into an owned ``bytes`` value; double-quoted strings are
not interpolated, a ``$`` is kept as is.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from phpexpr.ast.nodes import BoolLit, IntegerLit, Literal, NullLit, RealLit, StringLit
from phpexpr.grammar.tokens import TokenType, is_identifier_continue
from phpexpr.parser.combinators import Done, Rule, choice, map_res, map_value, word
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.errors import ErrorKind, ParseError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

INTEGER_MAX: Final[int] = 2**63 - 1

_REAL: Final[re.Pattern[bytes]] = re.compile(
    rb"(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+"
)
_BINARY: Final[re.Pattern[bytes]] = re.compile(rb"0[bB]([01]+)")
_HEXADECIMAL: Final[re.Pattern[bytes]] = re.compile(rb"0[xX]([0-9a-fA-F]+)")
_OCTAL: Final[re.Pattern[bytes]] = re.compile(rb"0[oO]?([0-7]+)")
_DECIMAL: Final[re.Pattern[bytes]] = re.compile(rb"[1-9][0-9]*|0")

_SINGLE_QUOTED: Final[re.Pattern[bytes]] = re.compile(rb"'((?:[^'\\]|\\.)*)'", re.DOTALL)
_DOUBLE_QUOTED: Final[re.Pattern[bytes]] = re.compile(rb'"((?:[^"\\]|\\.)*)"', re.DOTALL)

_SINGLE_QUOTED_ESCAPE: Final[re.Pattern[bytes]] = re.compile(rb"\\([\\'])")
_DOUBLE_QUOTED_ESCAPE: Final[re.Pattern[bytes]] = re.compile(
    rb"\\(?:([nrtvef\\$\"])|([0-7]{1,3})|x([0-9A-Fa-f]{1,2})|u\{([0-9A-Fa-f]+)\})"
)

_ESCAPE_MAP: Final[dict[bytes, bytes]] = {
    b"n": b"\n",
    b"r": b"\r",
    b"t": b"\t",
    b"v": b"\x0b",
    b"e": b"\x1b",
    b"f": b"\x0c",
    b"\\": b"\\",
    b"$": b"$",
    b'"': b'"',
}


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def _number(pattern: re.Pattern[bytes], description: str) -> Rule[re.Match[bytes]]:
    """Build a rule matching ``pattern`` as a complete numeric token."""

    def rule(cursor: Cursor) -> Done[re.Match[bytes]]:
        match = pattern.match(cursor.source, cursor.offset)
        if match is None:
            raise ParseError(
                kind=ErrorKind.LITERAL,
                cursor=cursor,
                message=f"expected {description}",
            )
        end = match.end()
        if end < len(cursor.source) and is_identifier_continue(cursor.source[end]):
            raise ParseError(
                kind=ErrorKind.LITERAL,
                cursor=cursor,
                message=f"invalid numeric literal {cursor.source[cursor.offset:end + 1]!r}",
            )
        return Done(cursor.moved_to(end), match)

    rule.__name__ = description.replace(" ", "_")
    return rule


def _integer_value(value: int) -> IntegerLit | RealLit:
    if value > INTEGER_MAX:
        return RealLit(float(value))
    return IntegerLit(value)


def _radix_mapper(base: int) -> Callable[[re.Match[bytes]], IntegerLit | RealLit]:
    def mapper(match: re.Match[bytes]) -> IntegerLit | RealLit:
        return _integer_value(int(match.group(1), base))

    return mapper


def _decimal_mapper(match: re.Match[bytes]) -> IntegerLit | RealLit:
    return _integer_value(int(match.group(0)))


def _real_mapper(match: re.Match[bytes]) -> RealLit:
    return RealLit(float(match.group(0)))


real = map_value(_number(_REAL, "real number"), _real_mapper)

integer = choice(
    map_value(_number(_BINARY, "binary integer"), _radix_mapper(2)),
    map_value(_number(_HEXADECIMAL, "hexadecimal integer"), _radix_mapper(16)),
    map_value(_number(_OCTAL, "octal integer"), _radix_mapper(8)),
    map_value(_number(_DECIMAL, "decimal integer"), _decimal_mapper),
)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def _quoted(pattern: re.Pattern[bytes], quote: TokenType) -> Rule[bytes]:
    """Build a rule matching a string delimited by ``quote``."""

    def rule(cursor: Cursor) -> Done[bytes]:
        if not cursor.startswith(quote.value):
            raise ParseError(
                kind=ErrorKind.TAG,
                cursor=cursor,
                message=f"expected {quote.text!r}",
                expected=quote,
            )
        match = pattern.match(cursor.source, cursor.offset)
        if match is None:
            raise ParseError(
                kind=ErrorKind.LITERAL,
                cursor=cursor,
                message="unterminated string literal",
            )
        return Done(cursor.moved_to(match.end()), match.group(1))

    return rule


def _unescape_single_quoted(body: bytes) -> StringLit:
    return StringLit(_SINGLE_QUOTED_ESCAPE.sub(rb"\1", body))


def _double_quoted_replacement(match: re.Match[bytes]) -> bytes:
    simple, octal, hexadecimal, codepoint = match.groups()
    if simple is not None:
        return _ESCAPE_MAP[simple]
    if octal is not None:
        return bytes([int(octal, 8) & 0xFF])
    if hexadecimal is not None:
        return bytes([int(hexadecimal, 16)])
    value = int(codepoint, 16)
    if value > 0x10FFFF:
        raise ValueError(f"invalid UTF-8 codepoint escape \\u{{{codepoint.decode()}}}")
    try:
        return chr(value).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError(f"invalid UTF-8 codepoint escape \\u{{{codepoint.decode()}}}") from exc


def _unescape_double_quoted(body: bytes) -> StringLit:
    return StringLit(_DOUBLE_QUOTED_ESCAPE.sub(_double_quoted_replacement, body))


string = choice(
    map_value(_quoted(_SINGLE_QUOTED, TokenType.SINGLE_QUOTE), _unescape_single_quoted),
    map_res(_quoted(_DOUBLE_QUOTED, TokenType.DOUBLE_QUOTE), _unescape_double_quoted),
)


# ---------------------------------------------------------------------------
# Constants and the literal rule
# ---------------------------------------------------------------------------


null = map_value(word(TokenType.NULL), lambda _: NullLit())

boolean = choice(
    map_value(word(TokenType.TRUE), lambda _: BoolLit(True)),
    map_value(word(TokenType.FALSE), lambda _: BoolLit(False)),
)

literal: Rule[Literal] = choice(null, boolean, real, integer, string)


def parse_literal(source: bytes) -> Literal:
    """Parse ``source`` as exactly one literal, for convenience and tests."""
    done = literal(Cursor(source))
    if not done.remaining.at_end:
        raise ParseError(
            kind=ErrorKind.EOF,
            cursor=done.remaining,
            message="unexpected input after literal",
        )
    return done.value
