"""Line and column positions within a body of text."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True, init=False)
class Coordinate:
    """A text position ordered by line, then by column.

    With no arguments the coordinate is the invalid position ``(-1, -1)``.
    Explicit values are clamped so that neither is negative.
    """

    line: int = field(default=-1)
    column: int = field(default=-1)

    def __init__(self, line: int | None = None, column: int | None = None) -> None:
        if line is None and column is None:
            object.__setattr__(self, "line", -1)
            object.__setattr__(self, "column", -1)
            return
        if line is None or column is None:
            raise TypeError("Coordinate needs both a line and a column, or neither")
        object.__setattr__(self, "line", max(0, int(line)))
        object.__setattr__(self, "column", max(0, int(column)))

    def is_valid(self) -> bool:
        """True when both line and column are non-negative."""
        return self.line >= 0 and self.column >= 0