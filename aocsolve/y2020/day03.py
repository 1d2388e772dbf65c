"""Toboggan trajectory through a repeating tree map."""

from __future__ import annotations

import math
from itertools import count
from typing import Iterator

TREE = "#"

SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def sled_path(inp: str, slope_x: int, slope_y: int) -> Iterator[str]:
    """Yield the squares passed on a slope, excluding the starting square."""
    lines = inp.strip().split("\n")
    width = len(lines[0])
    for step in count(1):
        row = step * slope_y
        if row >= len(lines):
            return
        yield lines[row][(step * slope_x) % width]


def _trees(inp: str, slope_x: int, slope_y: int) -> int:
    return sum(square == TREE for square in sled_path(inp, slope_x, slope_y))


def solve1(inp: str) -> int:
    return _trees(inp, 3, 1)


def solve2(inp: str) -> int:
    return math.prod(_trees(inp, x, y) for x, y in SLOPES)