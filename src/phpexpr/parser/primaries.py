"""Primary expression rules.

Primaries are the most tightly bound expressions and the base case of
the general expression rule:

    primary             ::= variable | qualified_name | literal | intrinsic
    intrinsic           ::= intrinsic_construct | intrinsic_operator
    intrinsic_construct ::= intrinsic_echo | intrinsic_unset
    intrinsic_operator  ::= intrinsic_empty

Each alternation is ordered: the first alternative that matches wins.
An alternation that fails reports the position where it was entered,
so calling an outer rule gives a collapsed failure while calling the
inner rule directly gives the precise one.  ``intrinsic_operator`` has
a single member today and therefore reports that member's failure
unchanged.

``echo`` and ``empty`` take arbitrary expressions as operands, so this
module and ``phpexpr.parser.expressions`` are mutually recursive.
"""
from __future__ import annotations

from phpexpr.ast.nodes import Echo, Empty, Expression, Unset, Variable
from phpexpr.grammar.grammar import INTRINSIC_CONSTRUCTS, INTRINSIC_OPERATORS, PRIMARY_ALTERNATIVES
from phpexpr.grammar.tokens import TokenType
from phpexpr.parser.combinators import (
    Done,
    Rule,
    choice,
    cut,
    delimited,
    first,
    fold_into_list,
    fold_many0,
    into_list,
    keyword,
    map_res,
    preceded,
    tag,
    terminated,
)
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.literals import literal
from phpexpr.parser.tokens import qualified_name, variable


def _expression(cursor: Cursor) -> Done[Expression]:
    from phpexpr.parser.expressions import expression

    return expression(cursor)


_comma = first(tag(TokenType.COMMA))
_left_parenthesis = first(tag(TokenType.LEFT_PARENTHESIS))
_right_parenthesis = first(tag(TokenType.RIGHT_PARENTHESIS))


# ---------------------------------------------------------------------------
# echo
# ---------------------------------------------------------------------------

_echo_head = map_res(preceded(keyword(TokenType.ECHO), first(_expression)), into_list)
# Once a comma is read another expression is required.
_echo_item = preceded(_comma, cut(first(_expression)))


def intrinsic_echo(cursor: Cursor) -> Done[Expression]:
    """Parse ``echo e1, e2, ...``: one or more comma-separated expressions."""
    head = _echo_head(cursor)
    done = fold_many0(_echo_item, lambda: head.value, fold_into_list)(head.remaining)
    return Done(done.remaining, _echo_mapper(done.value))


def _echo_mapper(expressions: list[Expression]) -> Expression:
    return Echo(tuple(expressions))


# ---------------------------------------------------------------------------
# unset
# ---------------------------------------------------------------------------

_unset_head = map_res(
    preceded(keyword(TokenType.UNSET), preceded(_left_parenthesis, first(variable))),
    into_list,
)
_unset_item = preceded(_comma, cut(first(variable)))


def intrinsic_unset(cursor: Cursor) -> Done[Expression]:
    """Parse ``unset($a, $b, ...)``: one or more comma-separated variables.

    The closing parenthesis is only looked for once the variable list is
    complete, so ``unset()`` fails on the missing variable.
    """
    head = _unset_head(cursor)
    variables = terminated(
        fold_many0(_unset_item, lambda: head.value, fold_into_list),
        _right_parenthesis,
    )
    done = variables(head.remaining)
    return Done(done.remaining, _unset_mapper(done.value))


def _unset_mapper(variables: list[Variable]) -> Expression:
    return Unset(tuple(variables))


# ---------------------------------------------------------------------------
# empty
# ---------------------------------------------------------------------------


def _empty_mapper(expression: Expression) -> Expression:
    return Empty(expression)


intrinsic_empty = map_res(
    preceded(
        keyword(TokenType.EMPTY),
        delimited(_left_parenthesis, first(_expression), _right_parenthesis),
    ),
    _empty_mapper,
)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

# Intrinsic rules by keyword.  The dispatch tiers and the order of the
# primary alternatives come from the reference grammar in phpexpr.grammar.
INTRINSIC_RULES: dict[str, Rule[Expression]] = {
    "echo": intrinsic_echo,
    "unset": intrinsic_unset,
    "empty": intrinsic_empty,
}

intrinsic_construct = choice(*(INTRINSIC_RULES[key] for key in INTRINSIC_CONSTRUCTS))

# Extension point for further single-operand intrinsics (isset, print).
intrinsic_operator = choice(*(INTRINSIC_RULES[key] for key in INTRINSIC_OPERATORS))

intrinsic = choice(intrinsic_construct, intrinsic_operator)

PRIMARY_RULES: dict[str, Rule[Expression]] = {
    "variable": variable,
    "qualified_name": qualified_name,
    "literal": literal,
    "intrinsic": intrinsic,
}

primary = choice(*(PRIMARY_RULES[key] for key in PRIMARY_ALTERNATIVES))
