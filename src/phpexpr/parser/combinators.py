"""Generic grammar combinators.

Every grammar rule is a function from a ``Cursor`` to a ``Done``
result, raising ``ParseError`` on failure.  Rules are built from a
handful of combinators:

    ``choice``      ordered alternation, first success wins
    ``sequence``    all rules in turn, values collected in a tuple
    ``fold_many0``  greedy repetition folding matches into an accumulator
    ``map_res``     fallible transformation of a successful value

plus the token primitives ``tag`` and ``keyword`` and the trivia
wrapper ``first``.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from phpexpr.grammar.tokens import TokenType, is_identifier_continue
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.errors import ErrorKind, ParseError
from phpexpr.parser.trivia import skip_trivia

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


@dataclass(frozen=True, slots=True)
class Done(Generic[T]):
    """A successful match: the unconsumed input and the produced value."""

    remaining: Cursor
    value: T


Rule = Callable[[Cursor], Done[T]]


# ---------------------------------------------------------------------------
# Token primitives
# ---------------------------------------------------------------------------


def tag(token: TokenType) -> Rule[bytes]:
    """Match ``token`` exactly at the cursor."""
    text = token.value

    def rule(cursor: Cursor) -> Done[bytes]:
        if not cursor.startswith(text):
            raise ParseError(
                kind=ErrorKind.TAG,
                cursor=cursor,
                message=f"expected {token.text!r}",
                expected=token,
            )
        return Done(cursor.advance(len(text)), text)

    rule.__name__ = f"tag_{token.name.lower()}"
    return rule


def word(token: TokenType) -> Rule[bytes]:
    """Match keyword ``token`` case-insensitively at the cursor.

    The keyword must not run on into an identifier, so ``echoed`` does
    not start with the ``echo`` keyword.  The matched spelling is
    returned as it appears in the source.
    """
    text = token.value
    size = len(text)

    def rule(cursor: Cursor) -> Done[bytes]:
        candidate = cursor.peek(size)
        following = cursor.byte(size)
        if candidate.lower() != text or (following is not None and is_identifier_continue(following)):
            raise ParseError(
                kind=ErrorKind.TAG,
                cursor=cursor,
                message=f"expected keyword {token.text!r}",
                expected=token,
            )
        return Done(cursor.advance(size), candidate)

    rule.__name__ = f"word_{token.name.lower()}"
    return rule


def keyword(token: TokenType) -> Rule[bytes]:
    """Skip trivia, then match keyword ``token`` like ``word`` does."""
    return first(word(token))


def first(inner: Rule[T]) -> Rule[T]:
    """Skip leading trivia, then apply ``inner``."""

    def rule(cursor: Cursor) -> Done[T]:
        return inner(skip_trivia(cursor))

    rule.__name__ = f"first_{getattr(inner, '__name__', 'rule')}"
    return rule


# ---------------------------------------------------------------------------
# Alternation and sequencing
# ---------------------------------------------------------------------------


def choice(*alternatives: Rule[T]) -> Rule[T]:
    """Try each alternative in order and return the first success.

    When every alternative fails, raise an ``ALT`` failure at the
    position where the choice was entered, with the failure of each
    branch attached as a cause.  A single alternative is returned as
    is: there is nothing to choose between, and its own failure is
    the most precise report.
    """
    if not alternatives:
        raise ValueError("choice() requires at least one alternative")
    if len(alternatives) == 1:
        return alternatives[0]

    def rule(cursor: Cursor) -> Done[T]:
        failures: list[ParseError] = []
        for alternative in alternatives:
            try:
                return alternative(cursor)
            except ParseError as exc:
                failures.append(exc)
        raise ParseError(
            kind=ErrorKind.ALT,
            cursor=cursor,
            message="no alternative matched",
            causes=tuple(failures),
        )

    return rule


def sequence(*rules: Rule[Any]) -> Rule[tuple[Any, ...]]:
    """Apply ``rules`` one after another, collecting their values."""

    def rule(cursor: Cursor) -> Done[tuple[Any, ...]]:
        values: list[Any] = []
        for step in rules:
            done = step(cursor)
            values.append(done.value)
            cursor = done.remaining
        return Done(cursor, tuple(values))

    return rule


def preceded(prefix: Rule[Any], inner: Rule[T]) -> Rule[T]:
    """Apply ``prefix`` then ``inner``, keeping the value of ``inner``."""

    def rule(cursor: Cursor) -> Done[T]:
        return inner(prefix(cursor).remaining)

    return rule


def terminated(inner: Rule[T], suffix: Rule[Any]) -> Rule[T]:
    """Apply ``inner`` then ``suffix``, keeping the value of ``inner``."""

    def rule(cursor: Cursor) -> Done[T]:
        done = inner(cursor)
        return Done(suffix(done.remaining).remaining, done.value)

    return rule


def delimited(opening: Rule[Any], inner: Rule[T], closing: Rule[Any]) -> Rule[T]:
    """Apply ``opening``, ``inner`` and ``closing``, keeping ``inner``."""
    return preceded(opening, terminated(inner, closing))


# ---------------------------------------------------------------------------
# Repetition
# ---------------------------------------------------------------------------


def fold_many0(
    inner: Rule[T],
    init: Callable[[], A],
    fold: Callable[[A, T], A],
) -> Rule[A]:
    """Apply ``inner`` as many times as it matches, folding each value.

    The repetition stops at the first ordinary failure and leaves that
    attempt unconsumed.  A committed failure is propagated instead.
    An attempt that succeeds without consuming input also ends the
    repetition.
    """

    def rule(cursor: Cursor) -> Done[A]:
        accumulator = init()
        while True:
            try:
                done = inner(cursor)
            except ParseError as exc:
                if exc.committed:
                    raise
                return Done(cursor, accumulator)
            if done.remaining.offset == cursor.offset:
                return Done(cursor, accumulator)
            accumulator = fold(accumulator, done.value)
            cursor = done.remaining

    return rule


def fold_into_list(accumulator: list[T], item: T) -> list[T]:
    """Fold function appending ``item`` to ``accumulator``."""
    accumulator.append(item)
    return accumulator


def cut(inner: Rule[T]) -> Rule[T]:
    """Mark any failure of ``inner`` as committed."""

    def rule(cursor: Cursor) -> Done[T]:
        try:
            return inner(cursor)
        except ParseError as exc:
            if exc.committed:
                raise
            raise dataclasses.replace(exc, committed=True) from exc

    return rule


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def map_value(inner: Rule[T], function: Callable[[T], U]) -> Rule[U]:
    """Transform the value of a successful match."""

    def rule(cursor: Cursor) -> Done[U]:
        done = inner(cursor)
        return Done(done.remaining, function(done.value))

    return rule


def map_res(inner: Rule[T], function: Callable[[T], U]) -> Rule[U]:
    """Transform the value of a successful match, allowing rejection.

    ``function`` rejects a value by raising ``ValueError``; the rule then
    fails with ``MAP_RES`` at the position it was applied to.
    """

    def rule(cursor: Cursor) -> Done[U]:
        done = inner(cursor)
        try:
            value = function(done.value)
        except ValueError as exc:
            raise ParseError(
                kind=ErrorKind.MAP_RES,
                cursor=cursor,
                message=str(exc) or "value rejected",
            ) from exc
        return Done(done.remaining, value)

    return rule


def into_list(item: T) -> list[T]:
    """Mapping function seeding an accumulator with its first item."""
    return [item]
