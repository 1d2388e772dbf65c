"""Integer 2D coordinates and grid directions (y grows downwards)."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Sized


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class XY(NamedTuple):
    """A point or vector on an integer grid."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_seq(cls, values: Sequence[int]) -> XY:
        """Build a coordinate from the first two items of a sequence."""
        return cls(values[0], values[1])

    def add(self, other: XY) -> XY:
        return XY(self.x + other.x, self.y + other.y)

    def mul_coord(self, other: XY) -> XY:
        return XY(self.x * other.x, self.y * other.y)

    def mul(self, factor: int) -> XY:
        return XY(self.x * factor, self.y * factor)

    def unit(self) -> XY:
        """The sign of each component."""
        return XY(_sign(self.x), _sign(self.y))

    def out_of_bounds(self, size: XY) -> bool:
        """True if outside the box spanning (0, 0) up to, but excluding, size."""
        return self.x < 0 or self.y < 0 or self.x >= size.x or self.y >= size.y

    def is_at_origin(self) -> bool:
        return self.x == 0 and self.y == 0

    def abs(self) -> XY:
        return XY(abs(self.x), abs(self.y))

    def manhattan_distance(self) -> int:
        return abs(self.x) + abs(self.y)

    def manhattan_distance_to(self, other: XY) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def rotate_unit_vector(self, n: int) -> XY:
        """Rotate a unit direction clockwise by n eighth turns (negative is counterclockwise)."""
        angle = n * math.pi / 4
        cos, sin = math.cos(angle), math.sin(angle)
        return XY(
            _round_half_away(self.x * cos - self.y * sin),
            _round_half_away(self.x * sin + self.y * cos),
        )

    def quadrant(self) -> int:
        """Quadrant index with -y as up: 3 0 on top, 2 1 below; -1 at the origin."""
        match self.unit():
            case XY(0, -1) | XY(1, -1):
                return 0
            case XY(1, 0) | XY(1, 1):
                return 1
            case XY(0, 1) | XY(-1, 1):
                return 2
            case XY(-1, 0) | XY(-1, -1):
                return 3
        return -1

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


UP = XY(0, -1)
DOWN = XY(0, 1)
LEFT = XY(-1, 0)
RIGHT = XY(1, 0)

DIAG_NE = XY(1, -1)
DIAG_SE = XY(1, 1)
DIAG_SW = XY(-1, 1)
DIAG_NW = XY(-1, -1)

DIRECT_DIRS = (UP, RIGHT, DOWN, LEFT)
DIAGONALS = (DIAG_NE, DIAG_SE, DIAG_SW, DIAG_NW)
ALL_DIRS = (UP, DIAG_NE, RIGHT, DIAG_SE, DOWN, DIAG_SW, LEFT, DIAG_NW)


def grid_size(rows: Sequence[Sized]) -> XY:
    """Width and height of a rectangular grid given as rows."""
    return XY(len(rows[0]), len(rows))