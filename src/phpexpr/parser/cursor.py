"""Input position type shared by every grammar rule.

A ``Cursor`` is the "remaining input" a rule is applied to: the full,
immutable source buffer plus the offset where the remainder starts.
Advancing produces a new cursor, so a failed rule can never consume
input as seen by its caller.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position within a source buffer.

    Parameters
    ----------
    source:
        The complete source buffer.
    offset:
        0-based offset of the first unconsumed byte.
    """

    source: bytes
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= len(self.source):
            raise ValueError(
                f"offset {self.offset} is outside a buffer of {len(self.source)} bytes"
            )

    def __repr__(self) -> str:
        preview = self.source[self.offset:self.offset + 16]
        suffix = "..." if len(self.source) - self.offset > 16 else ""
        return f"Cursor({self.offset}, {preview!r}{suffix})"

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def rest(self) -> bytes:
        """Return a copy of the unconsumed bytes."""
        return self.source[self.offset:]

    def view(self) -> memoryview:
        """Return a zero-copy view of the unconsumed bytes."""
        return memoryview(self.source)[self.offset:]

    @property
    def at_end(self) -> bool:
        """Return True if no input remains."""
        return self.offset >= len(self.source)

    def peek(self, size: int = 1) -> bytes:
        """Return up to ``size`` bytes ahead without consuming them."""
        return self.source[self.offset:self.offset + size]

    def byte(self, index: int = 0) -> int | None:
        """Return the byte ``index`` positions ahead, or None past the end."""
        position = self.offset + index
        if position < len(self.source):
            return self.source[position]
        return None

    def startswith(self, prefix: bytes) -> bool:
        """Return True if the remainder begins with ``prefix``."""
        return self.source.startswith(prefix, self.offset)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def advance(self, count: int) -> "Cursor":
        """Return a cursor ``count`` bytes further on."""
        return Cursor(self.source, self.offset + count)

    def moved_to(self, offset: int) -> "Cursor":
        """Return a cursor over the same buffer at ``offset``."""
        return Cursor(self.source, offset)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    @property
    def line(self) -> int:
        """1-based line number of the cursor."""
        return self.source.count(b"\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        """1-based byte column of the cursor."""
        return self.offset - (self.source.rfind(b"\n", 0, self.offset) + 1) + 1
