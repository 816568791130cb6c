"""Identifier leaf rules: variables and (qualified) names.

The values these rules produce are ``Slice`` views into the parsed
buffer; no identifier text is copied.
"""
from __future__ import annotations

from phpexpr.ast.nodes import Name, NameKind, Slice, Variable
from phpexpr.grammar.tokens import (
    RESERVED_WORDS,
    TokenType,
    is_identifier_continue,
    is_identifier_start,
)
from phpexpr.parser.combinators import (
    Done,
    fold_into_list,
    fold_many0,
    map_value,
    preceded,
    sequence,
    tag,
    word,
)
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.errors import ErrorKind, ParseError


def identifier(cursor: Cursor) -> Done[Slice]:
    """Match ``[A-Za-z_\\x80-\\xff][A-Za-z0-9_\\x80-\\xff]*``."""
    source = cursor.source
    start = cursor.offset
    if start >= len(source) or not is_identifier_start(source[start]):
        raise ParseError(
            kind=ErrorKind.IDENTIFIER,
            cursor=cursor,
            message="expected an identifier",
        )
    end = start + 1
    while end < len(source) and is_identifier_continue(source[end]):
        end += 1
    return Done(cursor.moved_to(end), Slice(source, start, end))


def variable(cursor: Cursor) -> Done[Variable]:
    """Match ``$name``."""
    after_sigil = _dollar(cursor).remaining
    done = identifier(after_sigil)
    return Done(done.remaining, Variable(done.value))


def name(cursor: Cursor) -> Done[Slice]:
    """Match an identifier that is not a reserved word."""
    done = identifier(cursor)
    if bytes(done.value).lower() in RESERVED_WORDS:
        raise ParseError(
            kind=ErrorKind.RESERVED,
            cursor=cursor,
            message=f"{done.value.decode(errors='replace')!r} is a reserved word",
        )
    return done


def qualified_name(cursor: Cursor) -> Done[Name]:
    """Match a name, optionally namespaced.

    ``Foo`` is unqualified, ``Foo\\Bar`` qualified, ``\\Foo`` fully
    qualified and ``namespace\\Foo`` relative to the current namespace.
    """
    kind = None
    try:
        cursor = _relative_prefix(cursor).remaining
        kind = NameKind.RELATIVE_QUALIFIED
    except ParseError:
        try:
            cursor = _separator(cursor).remaining
            kind = NameKind.FULLY_QUALIFIED
        except ParseError:
            pass
    done = _segments(cursor)
    parts = done.value
    if kind is None:
        kind = NameKind.UNQUALIFIED if len(parts) == 1 else NameKind.QUALIFIED
    return Done(done.remaining, Name(kind, parts))


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

_dollar = tag(TokenType.VARIABLE)
_separator = tag(TokenType.NAMESPACE_SEPARATOR)
_relative_prefix = sequence(word(TokenType.NAMESPACE), _separator)


def _join_segments(value: tuple[Slice, list[Slice]]) -> tuple[Slice, ...]:
    head, tail = value
    return (head, *tail)


_segments = map_value(
    sequence(name, fold_many0(preceded(_separator, name), list, fold_into_list)),
    _join_segments,
)
