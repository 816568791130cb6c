"""Token definitions for the phpexpr grammar.

Every keyword and punctuation mark the primary-expression grammar
recognizes is a member of the ``TokenType`` enum.  The member value is
the exact byte text of the token, so rules can match it directly
against the input buffer without a separate lexing pass.

Keywords are matched case-insensitively; the values below are the
canonical lowercase spellings.
"""
from __future__ import annotations

from enum import Enum
from typing import Final


class TokenType(Enum):
    """Keywords and punctuation recognized by the grammar."""

    # -----------------------------------------------------------------
    # Keywords: intrinsics
    # -----------------------------------------------------------------
    ECHO = b"echo"
    UNSET = b"unset"
    EMPTY = b"empty"

    # -----------------------------------------------------------------
    # Keywords: literal constants
    # -----------------------------------------------------------------
    NULL = b"null"
    TRUE = b"true"
    FALSE = b"false"

    # -----------------------------------------------------------------
    # Keywords: names
    # -----------------------------------------------------------------
    NAMESPACE = b"namespace"

    # -----------------------------------------------------------------
    # Punctuation
    # -----------------------------------------------------------------
    COMMA = b","
    LEFT_PARENTHESIS = b"("
    RIGHT_PARENTHESIS = b")"
    VARIABLE = b"$"
    NAMESPACE_SEPARATOR = b"\\"
    SINGLE_QUOTE = b"'"
    DOUBLE_QUOTE = b'"'

    @property
    def text(self) -> str:
        """Return the token spelling as text, for messages."""
        return self.value.decode("ascii")

    @property
    def is_keyword(self) -> bool:
        """Return True if this token is a word rather than punctuation."""
        return self.value.isalpha()


# Mapping from lowercase keyword text to its TokenType.
KEYWORDS: Final[dict[bytes, TokenType]] = {
    token.value: token for token in TokenType if token.is_keyword
}

# Words that may not be used as a name segment.  Matching is done on the
# lowercased segment.  Every keyword token is included, ``true``, ``false``
# and ``null`` among them, so the name rule leaves them to later rules.
RESERVED_WORDS: Final[frozenset[bytes]] = frozenset(
    {
        b"__halt_compiler",
        b"abstract",
        b"and",
        b"array",
        b"as",
        b"break",
        b"callable",
        b"case",
        b"catch",
        b"class",
        b"clone",
        b"const",
        b"continue",
        b"declare",
        b"default",
        b"die",
        b"do",
        b"else",
        b"elseif",
        b"enddeclare",
        b"endfor",
        b"endforeach",
        b"endif",
        b"endswitch",
        b"endwhile",
        b"eval",
        b"exit",
        b"extends",
        b"final",
        b"finally",
        b"fn",
        b"for",
        b"foreach",
        b"function",
        b"global",
        b"goto",
        b"if",
        b"implements",
        b"include",
        b"include_once",
        b"instanceof",
        b"insteadof",
        b"interface",
        b"isset",
        b"list",
        b"match",
        b"new",
        b"or",
        b"print",
        b"private",
        b"protected",
        b"public",
        b"readonly",
        b"require",
        b"require_once",
        b"return",
        b"static",
        b"switch",
        b"throw",
        b"trait",
        b"try",
        b"use",
        b"var",
        b"while",
        b"xor",
        b"yield",
    }
).union(KEYWORDS)


def is_identifier_start(byte: int) -> bool:
    """Return True if ``byte`` may begin an identifier."""
    return byte == 0x5F or 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A or byte >= 0x80


def is_identifier_continue(byte: int) -> bool:
    """Return True if ``byte`` may appear after the first identifier byte."""
    return is_identifier_start(byte) or 0x30 <= byte <= 0x39
