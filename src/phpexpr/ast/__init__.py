"""phpexpr AST module.

Exports all AST node types and the serializer for converting AST trees
to and from JSON/YAML.
"""
from __future__ import annotations

from phpexpr.ast.nodes import (
    LITERAL_TYPES,
    BoolLit,
    Echo,
    Empty,
    Expression,
    IntegerLit,
    Literal,
    Name,
    NameKind,
    NullLit,
    RealLit,
    Slice,
    StringLit,
    Unset,
    Variable,
)
from phpexpr.ast.serializer import AstSerializer

__all__ = [
    # Source views
    "Slice",
    # Enums
    "NameKind",
    # Expression types
    "Expression",
    "Variable",
    "Name",
    "Literal",
    "LITERAL_TYPES",
    "NullLit",
    "BoolLit",
    "IntegerLit",
    "RealLit",
    "StringLit",
    "Echo",
    "Unset",
    "Empty",
    # Serializer
    "AstSerializer",
]
