"""Source span value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Exact position of a syntax node in source code.

    Attributes:
        start: Start byte offset (must be >= 0)
        end: End byte offset, exclusive (must be >= start)
        line: Line number (1-based, must be > 0)
        column: Column number in characters (0-based, must be >= 0)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def contains(self, other: Span) -> bool:
        """Check if other span lies inside this one (inclusive)."""
        return self.start <= other.start and other.end <= self.end

    def __str__(self) -> str:
        """Format as line:column."""
        return f"{self.line}:{self.column}"
