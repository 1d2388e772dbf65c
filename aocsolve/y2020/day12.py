"""Ship navigation instructions."""

from __future__ import annotations

_NEGATIVE = frozenset("SWL")
_HEADINGS = {0: "N", 90: "E", 180: "S", 270: "W"}


def _parse_line(line: str) -> tuple[str, int]:
    try:
        value = int(line[1:])
    except ValueError:
        value = 0
    return line[0], value


def _signed(instruction: str, value: int) -> int:
    return -value if instruction in _NEGATIVE else value


def solve1(inp: str) -> int:
    """Manhattan distance after steering the ship directly."""
    x = y = 0
    direction = 90
    for line in inp.split("\n"):
        ins, n = _parse_line(line)
        if ins == "F":
            ins = _HEADINGS.get(direction, "")
        n = _signed(ins, n)
        if ins in ("N", "S"):
            y += n
        elif ins in ("E", "W"):
            x += n
        else:
            direction = (direction + n) % 360
    return abs(x) + abs(y)


def solve2(inp: str) -> int:
    """Manhattan distance after steering by a waypoint."""
    boat_x = boat_y = 0
    wx, wy = 10, 1
    for line in inp.split("\n"):
        ins, n = _parse_line(line)
        n = _signed(ins, n)
        if ins == "F":
            boat_x += wx * n
            boat_y += wy * n
        elif ins in ("L", "R"):
            if n in (90, -270):
                wx, wy = wy, -wx
            elif n in (180, -180):
                wx, wy = -wx, -wy
            elif n in (270, -90):
                wx, wy = -wy, wx
        elif ins in ("N", "S"):
            wy += n
        elif ins in ("E", "W"):
            wx += n
        else:
            raise ValueError(f"unknown instruction {line!r}")
    return abs(boat_x) + abs(boat_y)