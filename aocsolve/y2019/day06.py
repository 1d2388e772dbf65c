"""Universal orbit map."""

from __future__ import annotations

from collections import defaultdict


def _indirect_orbits(inp: str) -> dict[str, list[str]]:
    """Map each object to the objects it orbits, excluding its direct centre."""
    children: dict[str, list[str]] = defaultdict(list)
    indirect: dict[str, list[str]] = {}
    for line in inp.split("\n"):
        center, name, *_ = line.split(")")
        children[center].append(name)
        indirect[name] = []

    stack = [(child, ["COM"]) for child in children.get("COM", [])]
    while stack:
        name, path = stack.pop()
        indirect[name] = path[:-1]
        stack.extend((child, path + [name]) for child in children.get(name, []))
    return indirect


def solve1(inp: str) -> int:
    return sum(len(chain) + 1 for chain in _indirect_orbits(inp).values())


def solve2(inp: str) -> int:
    orbits = _indirect_orbits(inp)
    mine = orbits["YOU"]
    santa = orbits["SAN"]
    for i, name in reversed(list(enumerate(santa))):
        if name in mine:
            return len(mine) - mine.index(name) + len(santa) - i
    return 0