"""Lobby layout on a hexagonal tile floor."""

from __future__ import annotations

import re
from collections import Counter
from functools import reduce

from aocsolve.xy import XY

# Doubled-column hex coordinates: east and west move two columns.
STEPS = {
    "e": XY(2, 0),
    "w": XY(-2, 0),
    "ne": XY(1, -1),
    "nw": XY(-1, -1),
    "se": XY(1, 1),
    "sw": XY(-1, 1),
}
HEX_DIRS = (XY(-2, 0), XY(2, 0), XY(-1, -1), XY(1, -1), XY(-1, 1), XY(1, 1))

_STEP_RE = re.compile(r"[ns]?[ew]")


def parse_input(inp: str) -> list[list[XY]]:
    """Each line as a list of step vectors."""
    paths = []
    for line in inp.split("\n"):
        tokens = _STEP_RE.findall(line)
        if "".join(tokens) != line:
            raise ValueError(f"bad direction line {line!r}")
        paths.append([STEPS[token] for token in tokens])
    return paths


def do_dirs(dirs: list[XY]) -> XY:
    """Tile reached by following the steps from the origin."""
    return reduce(XY.add, dirs, XY())


def _initial_black(paths: list[list[XY]]) -> set[XY]:
    black: set[XY] = set()
    for path in paths:
        black ^= {do_dirs(path)}
    return black


def _play(black: set[XY], days: int) -> set[XY]:
    for _ in range(days):
        counts = Counter(tile.add(d) for tile in black for d in HEX_DIRS)
        black = {
            tile for tile, n in counts.items() if n == 2 or (n == 1 and tile in black)
        }
    return black


def solve1(inp: str) -> int:
    return len(_initial_black(parse_input(inp)))


def solve2(inp: str) -> int:
    return len(_play(_initial_black(parse_input(inp)), 100))