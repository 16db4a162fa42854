"""Screen rectangles for hit testing."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_COORD = 0xFFFF


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return min(self.x + self.width, _MAX_COORD)

    @property
    def bottom(self) -> int:
        return min(self.y + self.height, _MAX_COORD)

    def contains(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) lies inside the rectangle."""
        return self.x <= x < self.right and self.y <= y < self.bottom