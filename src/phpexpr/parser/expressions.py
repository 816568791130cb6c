"""General expression rule.

Operators (binary, unary, ternary, assignment) are not part of this
grammar, so the only production of ``expression`` is its base case,
``primary``.  The intrinsics call back into ``expression`` for their
operands.
"""
from __future__ import annotations

from phpexpr.ast.nodes import Expression
from phpexpr.parser.combinators import Done
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.primaries import primary


def expression(cursor: Cursor) -> Done[Expression]:
    """Parse one expression starting exactly at ``cursor``."""
    return primary(cursor)
