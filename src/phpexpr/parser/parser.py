"""Entry points for parsing source buffers.

``parse`` requires the whole buffer to be a single expression, apart
from surrounding whitespace and comments.  ``parse_prefix`` parses one
expression from the start of the buffer and hands back the remainder,
for callers that continue with their own grammar afterwards.

Text sources are encoded as UTF-8 first.  The returned AST holds views
into the encoded buffer, which it keeps alive through its ``Slice``
values.
"""
from __future__ import annotations

import logging

from phpexpr.ast.nodes import Expression
from phpexpr.parser.combinators import Done
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.errors import ErrorKind, ParseError
from phpexpr.parser.expressions import expression
from phpexpr.parser.trivia import skip_trivia

logger = logging.getLogger(__name__)


def _to_buffer(source: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, bytes):
        return source
    raise TypeError(f"cannot parse source of type {type(source).__name__}")


def parse_prefix(source: bytes | bytearray | memoryview | str) -> Done[Expression]:
    """Parse one expression from the start of ``source``.

    Leading whitespace and comments are skipped.

    Returns
    -------
    Done[Expression]
        The expression and the cursor after it.

    Raises
    ------
    ParseError
        If no expression starts at the beginning of ``source``, or
        (``DEPTH`` kind) if intrinsics are nested too deeply to parse.
    """
    buffer = _to_buffer(source)
    logger.debug("Parsing expression prefix of a %d byte buffer", len(buffer))
    start = skip_trivia(Cursor(buffer))
    try:
        done = expression(start)
    except RecursionError:
        logger.debug("Recursion limit reached while parsing a %d byte buffer", len(buffer))
        raise ParseError(
            kind=ErrorKind.DEPTH,
            cursor=start,
            message="expression nested too deeply",
        ) from None
    logger.debug("Parsed %s, %d byte(s) left", type(done.value).__name__, len(buffer) - done.remaining.offset)
    return done


def parse(source: bytes | bytearray | memoryview | str) -> Expression:
    """Parse ``source`` as exactly one expression.

    Raises
    ------
    ParseError
        If ``source`` is not an expression, or if anything other than
        whitespace and comments follows the expression (``EOF`` kind),
        or if intrinsics are nested too deeply (``DEPTH`` kind).
    """
    done = parse_prefix(source)
    rest = skip_trivia(done.remaining)
    if not rest.at_end:
        error = ParseError(
            kind=ErrorKind.EOF,
            cursor=rest,
            message=f"unexpected input {rest.peek(16)!r} after expression",
        )
        logger.debug("Rejecting trailing input: %s", error)
        raise error
    return done.value
