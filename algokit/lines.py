"""Straight lines ``a*x + b*y = c`` and how pairs of them relate."""

from __future__ import annotations

from dataclasses import dataclass

SCALE_FACTOR = 12.5


@dataclass(frozen=True)
class Line:
    """The line of points satisfying ``a*x + b*y = c``."""

    a: float
    b: float
    c: float

    def is_vertical(self) -> bool:
        return self.b == 0

    def slope(self) -> float:
        """Return ``-a / b``; vertical lines have no slope."""
        if self.is_vertical():
            raise ValueError("a vertical line has no slope")
        return -self.a / self.b

    def coincides(self, other: Line) -> bool:
        """Return True if the coefficients are proportional."""
        return (
            self.a * other.b == self.b * other.a
            and self.a * other.c == self.c * other.a
        )

    def equals_scaled(self, other: Line) -> bool:
        """Return True if equal to ``other`` or to ``other`` scaled by 12.5."""
        if self == other:
            return True
        return (
            self.a == SCALE_FACTOR * other.a
            and self.b == SCALE_FACTOR * other.b
            and self.c == SCALE_FACTOR * other.c
        )

    def is_parallel(self, other: Line) -> bool:
        if self.is_vertical() or other.is_vertical():
            return self.is_vertical() and other.is_vertical()
        return self.slope() == other.slope()

    def is_perpendicular(self, other: Line) -> bool:
        if (self.a == 0 and other.b == 0) or (self.b == 0 and other.a == 0):
            return True
        if self.is_vertical() or other.is_vertical():
            return False
        return self.slope() * other.slope() == -1

    def intersection(self, other: Line) -> tuple[float, float] | None:
        """Return the crossing point, or None if the lines never cross once."""
        determinant = self.a * other.b - other.a * self.b
        if determinant == 0:
            return None
        x = (self.c * other.b - other.c * self.b) / determinant
        y = (self.a * other.c - other.a * self.c) / determinant
        return x, y