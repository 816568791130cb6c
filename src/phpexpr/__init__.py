"""phpexpr — primary-expression grammar for a PHP-like language.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import phpexpr

    # Parse a source buffer into an AST
    expr = phpexpr.parse(b"echo 'Hello', $name")

    # Parse one expression and keep the rest of the buffer
    done = phpexpr.parse_prefix(b"unset($a); echo 1;")
    done.remaining.rest   # b"; echo 1;"

    # Dump the AST as JSON or YAML
    text = phpexpr.dump(expr, output_format="yaml")

    phpexpr.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from phpexpr.ast.nodes import Expression
    from phpexpr.parser.combinators import Done


def parse(source: bytes | str) -> "Expression":
    """Parse ``source`` as exactly one expression.

    Parameters
    ----------
    source:
        The complete source buffer.  Text is encoded as UTF-8.

    Returns
    -------
    Expression
        The parsed expression.

    Raises
    ------
    phpexpr.parser.ParseError
        If the source is not a single well-formed expression.
    """
    from phpexpr.parser.parser import parse as _parse

    return _parse(source)


def parse_prefix(source: bytes | str) -> "Done[Expression]":
    """Parse one expression from the start of ``source``.

    Returns
    -------
    Done[Expression]
        The expression and the cursor over the unconsumed remainder.

    Raises
    ------
    phpexpr.parser.ParseError
        If no expression starts at the beginning of the source.
    """
    from phpexpr.parser.parser import parse_prefix as _parse_prefix

    return _parse_prefix(source)


def dump(expr: "Expression", output_format: str = "json") -> str:
    """Serialize an expression to ``"json"`` or ``"yaml"`` text."""
    from phpexpr.ast.serializer import AstSerializer

    serializer = AstSerializer()
    if output_format == "json":
        return serializer.to_json(expr)
    if output_format == "yaml":
        return serializer.to_yaml(expr)
    raise ValueError(f"Unknown output format: {output_format!r}")


__all__ = [
    "__version__",
    "parse",
    "parse_prefix",
    "dump",
]
