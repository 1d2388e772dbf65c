"""Asteroid monitoring station and the vaporisation laser."""

from __future__ import annotations

import math

from aocsolve.xy import XY, grid_size


class _World:
    def __init__(self, inp: str) -> None:
        self.data = [list(line) for line in inp.split("\n")]
        self.size = grid_size(self.data)
        height, width = self.size.y, self.size.x
        self.slopes = list(
            dict.fromkeys(
                XY(x // math.gcd(x, y), y // math.gcd(x, y))
                for y in range(-height - 1, height + 1)
                for x in range(-width - 1, width + 1)
                if x or y
            )
        )

    def _is_asteroid(self, c: XY) -> bool:
        return self.data[c.y][c.x] == "#"

    def closest_in_dir(self, origin: XY, direction: XY) -> XY | None:
        pos = origin.add(direction)
        while not pos.out_of_bounds(self.size):
            if self._is_asteroid(pos):
                return pos
            pos = pos.add(direction)
        return None

    def count_from(self, origin: XY) -> int:
        return sum(self.closest_in_dir(origin, slope) is not None for slope in self.slopes)

    def best_place(self) -> tuple[int, XY]:
        best, best_coord = 0, XY()
        for y, row in enumerate(self.data):
            for x, cell in enumerate(row):
                if cell != "#":
                    continue
                coord = XY(x, y)
                seen = self.count_from(coord)
                if seen > best:
                    best, best_coord = seen, coord
        return best, best_coord


def _angle_key(slope: XY) -> tuple[int, float]:
    if slope.y == 0:
        ratio = -math.inf if slope.x > 0 else math.inf
    else:
        ratio = slope.x / -slope.y
    return slope.quadrant(), math.tanh(ratio)


def solve1(inp: str) -> int:
    """Most asteroids visible from a single asteroid."""
    return _World(inp).best_place()[0]


def solve2(inp: str) -> int:
    """100 * x + y of the 199th asteroid the rotating laser destroys."""
    world = _World(inp)
    _, station = world.best_place()
    order = sorted(world.slopes, key=_angle_key)

    destroyed = 0
    while True:
        destroyed_this_turn = 0
        for slope in order:
            hit = world.closest_in_dir(station, slope)
            if hit is None:
                continue
            destroyed += 1
            destroyed_this_turn += 1
            world.data[hit.y][hit.x] = "."
            if destroyed == 199:
                return hit.x * 100 + hit.y
        if not destroyed_this_turn:
            raise ValueError("fewer than 199 asteroids can be destroyed")