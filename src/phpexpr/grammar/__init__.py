"""phpexpr grammar module.

Exports token definitions and formal grammar constants.
"""
from __future__ import annotations

from phpexpr.grammar.grammar import (
    FULL_GRAMMAR,
    GRAMMAR_INTRINSIC,
    GRAMMAR_LITERALS,
    GRAMMAR_NAMES,
    GRAMMAR_PRIMARY,
    GRAMMAR_TERMINALS,
    INTRINSIC_CONSTRUCTS,
    INTRINSIC_OPERATORS,
    PRIMARY_ALTERNATIVES,
)
from phpexpr.grammar.tokens import KEYWORDS, RESERVED_WORDS, TokenType

__all__ = [
    # Token types
    "TokenType",
    "KEYWORDS",
    "RESERVED_WORDS",
    # Grammar constants
    "FULL_GRAMMAR",
    "GRAMMAR_PRIMARY",
    "GRAMMAR_INTRINSIC",
    "GRAMMAR_NAMES",
    "GRAMMAR_LITERALS",
    "GRAMMAR_TERMINALS",
    "PRIMARY_ALTERNATIVES",
    "INTRINSIC_CONSTRUCTS",
    "INTRINSIC_OPERATORS",
]
