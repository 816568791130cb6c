"""Formal grammar rules for phpexpr primary expressions.

This module documents the grammar as EBNF-style string constants.  The
grammar is implemented by the combinator rules in ``phpexpr.parser``;
these constants serve as reference documentation and are printed by
``phpexpr grammar``.

Grammar notation used here:
    ``::=``     production rule
    ``|``       ordered alternation (first match wins)
    ``( )``     grouping
    ``[ ]``     optional (zero or one)
    ``{ }``     zero or more repetitions
    ``~``       trivia (whitespace and comments) may appear here
    ``!``       commit: failure after this point is not backtracked
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Primaries
# ---------------------------------------------------------------------------

GRAMMAR_PRIMARY = """
expression ::= primary

primary ::=
    variable
    | qualified_name
    | literal
    | intrinsic
"""

# ---------------------------------------------------------------------------
# Intrinsics
# ---------------------------------------------------------------------------

GRAMMAR_INTRINSIC = """
intrinsic           ::= intrinsic_construct | intrinsic_operator
intrinsic_construct ::= intrinsic_echo | intrinsic_unset
intrinsic_operator  ::= intrinsic_empty

intrinsic_echo  ::= ~ 'echo' ~ expression { ~ ',' ! ~ expression }
intrinsic_unset ::= ~ 'unset' ~ '(' ~ variable { ~ ',' ! ~ variable } ~ ')'
intrinsic_empty ::= ~ 'empty' ~ '(' ~ expression ~ ')'
"""

# ---------------------------------------------------------------------------
# Names and variables
# ---------------------------------------------------------------------------

GRAMMAR_NAMES = """
variable       ::= '$' IDENT
qualified_name ::= [ 'namespace' '\\' | '\\' ] name { '\\' name }
name           ::= IDENT - RESERVED_WORD
"""

# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

GRAMMAR_LITERALS = """
literal ::= 'null' | boolean | REAL | integer | string

boolean ::= 'true' | 'false'
integer ::= BINARY | HEXADECIMAL | OCTAL | DECIMAL
string  ::= SINGLE_QUOTED | DOUBLE_QUOTED
"""

# ---------------------------------------------------------------------------
# Terminals
# ---------------------------------------------------------------------------

GRAMMAR_TERMINALS = """
IDENT         ::= [A-Za-z_\\x80-\\xff] [A-Za-z0-9_\\x80-\\xff]*
REAL          ::= ( [0-9]+ '.' [0-9]* | '.' [0-9]+ ) [ [eE] [+-]? [0-9]+ ]
                  | [0-9]+ [eE] [+-]? [0-9]+
BINARY        ::= '0' [bB] [01]+
HEXADECIMAL   ::= '0' [xX] [0-9a-fA-F]+
OCTAL         ::= '0' [oO]? [0-7]+
DECIMAL       ::= [1-9] [0-9]* | '0'
SINGLE_QUOTED ::= "'" ( [^'\\\\] | '\\\\' ANY )* "'"
DOUBLE_QUOTED ::= '"' ( [^"\\\\] | '\\\\' ANY )* '"'
"""

# ---------------------------------------------------------------------------
# Full grammar as one string (for documentation / tooling consumers)
# ---------------------------------------------------------------------------

FULL_GRAMMAR: str = "\n".join([
    "# phpexpr Formal Grammar (EBNF-like notation)",
    "# ============================================",
    "",
    "# Primaries",
    GRAMMAR_PRIMARY,
    "# Intrinsics",
    GRAMMAR_INTRINSIC,
    "# Names and variables",
    GRAMMAR_NAMES,
    "# Literals",
    GRAMMAR_LITERALS,
    "# Terminals",
    GRAMMAR_TERMINALS,
])

# Order in which ``primary`` tries its alternatives.
PRIMARY_ALTERNATIVES: list[str] = [
    "variable",
    "qualified_name",
    "literal",
    "intrinsic",
]

# Intrinsic keywords, grouped by dispatch tier.
INTRINSIC_CONSTRUCTS: list[str] = ["echo", "unset"]
INTRINSIC_OPERATORS: list[str] = ["empty"]
