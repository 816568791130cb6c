"""AST node definitions for phpexpr.

Every node produced by the parser is a frozen dataclass so that AST
trees are immutable and hashable.  The ``Expression`` union type covers
all expression variants produced by the primary-expression grammar;
downstream code should use ``isinstance`` checks to dispatch.

Identifier-like leaves (``Variable`` and ``Name``) do not copy source
text.  They hold ``Slice`` views into the buffer that was parsed, so an
AST must not be used after its source buffer has been discarded.
String literals are the exception: they are unescaped into an owned
``bytes`` copy.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


# ---------------------------------------------------------------------------
# Source views
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, eq=False)
class Slice:
    """Half-open range ``[start, end)`` of an immutable source buffer.

    Equality and hashing are by content, so a ``Slice`` compares equal
    to another slice or to a ``bytes`` object spelling the same text.

    Parameters
    ----------
    buffer:
        The complete source buffer the slice points into.
    start:
        0-based offset of the first byte.
    end:
        0-based offset *past* the last byte.
    """

    buffer: bytes
    start: int
    end: int

    @classmethod
    def of(cls, data: bytes) -> "Slice":
        """Return a slice spanning the whole of ``data``."""
        return cls(buffer=data, start=0, end=len(data))

    def view(self) -> memoryview:
        """Return a zero-copy view of the referenced bytes."""
        return memoryview(self.buffer)[self.start:self.end]

    def __bytes__(self) -> bytes:
        return self.buffer[self.start:self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self.view() == other.view()
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.view() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(bytes(self))

    def __repr__(self) -> str:
        return f"Slice({bytes(self)!r})"

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        """Decode the referenced bytes to text."""
        return bytes(self).decode(encoding, errors)


# ---------------------------------------------------------------------------
# Enums shared across node types
# ---------------------------------------------------------------------------


class NameKind(Enum):
    """How a name is anchored in the namespace hierarchy."""

    UNQUALIFIED = auto()
    QUALIFIED = auto()
    RELATIVE_QUALIFIED = auto()
    FULLY_QUALIFIED = auto()


# ---------------------------------------------------------------------------
# Identifier leaves
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Variable:
    """A variable reference such as ``$foo``; ``name`` excludes the ``$``."""

    name: Slice


@dataclass(frozen=True, slots=True)
class Name:
    """A possibly namespaced name, e.g. ``Foo\\Bar`` or ``\\Foo``.

    ``parts`` holds the name segments in source order, without the
    separators or any ``namespace`` prefix.
    """

    kind: NameKind
    parts: tuple[Slice, ...]

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError("Name requires at least one segment")
        if self.kind is NameKind.UNQUALIFIED and len(self.parts) != 1:
            raise ValueError("an unqualified Name has exactly one segment")

    @property
    def last(self) -> Slice:
        """Return the rightmost segment."""
        return self.parts[-1]


# ---------------------------------------------------------------------------
# Literal sub-types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NullLit:
    """The ``null`` literal."""


@dataclass(frozen=True, slots=True)
class BoolLit:
    """A boolean literal (``true`` or ``false``)."""

    value: bool


@dataclass(frozen=True, slots=True)
class IntegerLit:
    """A signed 64-bit integer literal."""

    value: int


@dataclass(frozen=True, slots=True)
class RealLit:
    """A floating-point literal."""

    value: float


@dataclass(frozen=True, slots=True)
class StringLit:
    """A string literal; ``value`` is the unescaped, owned byte string."""

    value: bytes


Literal = Union[NullLit, BoolLit, IntegerLit, RealLit, StringLit]

# Forward reference: the intrinsics are recursive.
Expression = Union[
    "Variable",
    "Name",
    "NullLit",
    "BoolLit",
    "IntegerLit",
    "RealLit",
    "StringLit",
    "Echo",
    "Unset",
    "Empty",
]


# ---------------------------------------------------------------------------
# Intrinsics
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Echo:
    """``echo e1, e2, ...`` with the operands in source order."""

    expressions: tuple["Expression", ...]

    def __post_init__(self) -> None:
        if not self.expressions:
            raise ValueError("Echo requires at least one expression")


@dataclass(frozen=True, slots=True)
class Unset:
    """``unset($a, $b, ...)`` with the variables in source order."""

    variables: tuple[Variable, ...]

    def __post_init__(self) -> None:
        if not self.variables:
            raise ValueError("Unset requires at least one variable")


@dataclass(frozen=True, slots=True)
class Empty:
    """``empty(e)``; the node exclusively owns its single operand."""

    expression: "Expression"


LITERAL_TYPES: tuple[type, ...] = (NullLit, BoolLit, IntegerLit, RealLit, StringLit)
