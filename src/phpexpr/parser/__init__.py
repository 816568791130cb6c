"""phpexpr parser module.

Exports the parse entry points, the rule result type and parse error
types.  Individual grammar rules live in the submodules ``primaries``,
``tokens``, ``literals`` and ``expressions``.
"""
from __future__ import annotations

from phpexpr.parser.combinators import Done
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.errors import ErrorKind, ParseError
from phpexpr.parser.parser import parse, parse_prefix

__all__ = [
    "parse",
    "parse_prefix",
    "Cursor",
    "Done",
    "ParseError",
    "ErrorKind",
]
