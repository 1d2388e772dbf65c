"""Crossed wires on a grid."""

from __future__ import annotations

from typing import Iterator

from aocsolve.parsing import parse_int
from aocsolve.xy import DOWN, LEFT, RIGHT, UP, XY

_DIRECTIONS = {"R": RIGHT, "L": LEFT, "U": UP, "D": DOWN}

_Wire = list[tuple[XY, int]]


def _parse_wire(line: str) -> _Wire:
    wire = []
    for step in line.split(","):
        try:
            direction = _DIRECTIONS[step[0]]
        except (KeyError, IndexError):
            raise ValueError(f"bad wire step {step!r}") from None
        wire.append((direction, parse_int(step[1:])))
    return wire


def _parse(inp: str) -> tuple[_Wire, _Wire]:
    first, second = inp.split("\n")
    return _parse_wire(first), _parse_wire(second)


def _walk(wire: _Wire) -> Iterator[XY]:
    pos = XY()
    for direction, amount in wire:
        for _ in range(amount):
            pos = pos.add(direction)
            yield pos


def solve1(inp: str) -> int:
    wire_a, wire_b = _parse(inp)
    visited = set(_walk(wire_a))
    visited.discard(XY())

    best = XY()
    for pos in _walk(wire_b):
        if pos in visited and (
            best.is_at_origin() or pos.manhattan_distance() < best.manhattan_distance()
        ):
            best = pos
    return best.manhattan_distance()


def solve2(inp: str) -> int:
    wire_a, wire_b = _parse(inp)
    first_step: dict[XY, int] = {}
    for steps, pos in enumerate(_walk(wire_a), 1):
        first_step.setdefault(pos, steps)

    best = 0
    for steps, pos in enumerate(_walk(wire_b), 1):
        if pos not in first_step:
            continue
        total = steps + first_step[pos]
        if best == 0 or total < best:
            best = total
    return best