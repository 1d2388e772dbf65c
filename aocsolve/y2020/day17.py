"""Conway cubes in three or four dimensions."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from itertools import product

Coord = tuple[int, ...]


def surrounding_coords(coord: Coord) -> list[Coord]:
    """All neighbours of coord, differing by at most one in each axis."""
    return [
        tuple(c + d for c, d in zip(coord, delta))
        for delta in product((-1, 0, 1), repeat=len(coord))
        if any(delta)
    ]


@dataclass
class CubeMap:
    """The set of active cubes."""

    active: set[Coord] = field(default_factory=set)

    def count_active_around(self, coord: Coord) -> int:
        return sum(n in self.active for n in surrounding_coords(coord))

    def step(self) -> None:
        """Apply one cycle: active cubes with 2 or 3 neighbours stay, any cube with 3 turns on."""
        counts = Counter(n for c in self.active for n in surrounding_coords(c))
        self.active = {
            c for c, k in counts.items() if k == 3 or (k == 2 and c in self.active)
        }


def parse_input(inp: str, dimensions: int) -> CubeMap:
    if dimensions < 2:
        raise ValueError("at least two dimensions are needed")
    padding = (0,) * (dimensions - 2)
    return CubeMap(
        {
            (x, y, *padding)
            for y, line in enumerate(inp.split("\n"))
            for x, cell in enumerate(line)
            if cell == "#"
        }
    )


def _run(inp: str, dimensions: int) -> int:
    cubes = parse_input(inp, dimensions)
    for _ in range(6):
        cubes.step()
    return len(cubes.active)


def solve1(inp: str) -> int:
    return _run(inp, 3)


def solve2(inp: str) -> int:
    return _run(inp, 4)