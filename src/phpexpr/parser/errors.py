"""Parse error types for the phpexpr grammar.

Two families of failure exist.  An *alternation* failure (``ALT``)
means that none of several candidate productions matched; it is
reported at the position where the alternation was entered.  Every
other kind is a *token-expectation* failure: a specific token or leaf
was required and was not found, reported at the exact position of the
mismatch.

An alternation keeps the failures of the branches it tried in
``causes``.  The top-level error therefore shows the collapsed view
(the position of the outermost alternation) while the nested chain
still records how far each branch got.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from phpexpr.grammar.tokens import TokenType
from phpexpr.parser.cursor import Cursor


class ErrorKind(Enum):
    """What went wrong at the reported position.

    ALT
        No alternative of an ordered choice matched.
    TAG
        A specific keyword or punctuation token was expected.
    IDENTIFIER
        An identifier was expected.
    RESERVED
        A reserved word appeared where a name was expected.
    LITERAL
        A literal was started but is malformed (unterminated string,
        bad digit).
    MAP_RES
        A value was recognized but could not be converted.
    EOF
        A complete expression was followed by unexpected input.
    DEPTH
        Intrinsics were nested deeper than the interpreter stack allows.
    """

    ALT = auto()
    TAG = auto()
    IDENTIFIER = auto()
    RESERVED = auto()
    LITERAL = auto()
    MAP_RES = auto()
    EOF = auto()
    DEPTH = auto()


@dataclass(frozen=True)
class ParseError(Exception):
    """A single positioned parse failure.

    Parameters
    ----------
    kind:
        The failure family, see ``ErrorKind``.
    cursor:
        The remaining input at the reported position.
    message:
        Human-readable description of the error.
    expected:
        The token that was required, for ``TAG`` failures.
    causes:
        Failures of the branches an alternation tried, in order.
    committed:
        True once the failure happened after a point of no return, so
        that repetitions propagate it instead of stopping quietly.
    """

    kind: ErrorKind
    cursor: Cursor
    message: str
    expected: TokenType | None = None
    causes: tuple["ParseError", ...] = ()
    committed: bool = False

    def __str__(self) -> str:
        return f"ParseError at {self.line}:{self.column}: {self.message}"

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically.
    # Line and column are only worked out by __str__, not on construction.
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (self.message,))

    @property
    def offset(self) -> int:
        """0-based offset of the reported position."""
        return self.cursor.offset

    @property
    def remaining(self) -> bytes:
        """The unconsumed input at the reported position."""
        return self.cursor.rest

    @property
    def line(self) -> int:
        return self.cursor.line

    @property
    def column(self) -> int:
        return self.cursor.column

    def furthest(self) -> "ParseError":
        """Return the recorded failure that got furthest into the input.

        Ties keep the outermost failure, which describes the position in
        terms of the production that was being attempted there.
        """
        best = self
        for cause in self.causes:
            candidate = cause.furthest()
            if candidate.offset > best.offset:
                best = candidate
        return best

    def walk(self, depth: int = 0) -> Iterator[tuple[int, "ParseError"]]:
        """Yield ``(depth, error)`` for this error and all nested causes."""
        yield depth, self
        for cause in self.causes:
            yield from cause.walk(depth + 1)
