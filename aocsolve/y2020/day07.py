"""Nested luggage rules."""

from __future__ import annotations

from dataclasses import dataclass, field

TARGET = "shiny gold"


@dataclass
class Bag:
    """A bag colour, what it directly holds and, once resolved, all it holds."""

    name: str
    direct_deps: list[tuple[int, str]] = field(default_factory=list)
    resolved_deps: dict[str, int] | None = None


def _parse_bag(line: str) -> Bag:
    parts = line.split(" bags contain ", 1)
    if len(parts) != 2:
        raise ValueError(f"Bad parse of {line!r}")
    name, contents = parts
    if contents == "no other bags.":
        return Bag(name)

    deps = []
    for raw in contents[:-1].split(", "):
        words = raw.split(" ", 3)
        try:
            count = int(words[0])
        except ValueError:
            count = 0
        deps.append((count, f"{words[1]} {words[2]}"))
    return Bag(name, deps)


def _resolve(bags: dict[str, Bag], deps: list[tuple[int, str]]) -> dict[str, int]:
    totals: dict[str, int] = {}
    for count, name in deps:
        totals[name] = totals.get(name, 0) + count
        inner = bags.get(name)
        if inner is None:
            totals[name] += count
            continue
        if inner.resolved_deps is None:
            inner.resolved_deps = _resolve(bags, inner.direct_deps)
        for sub, sub_count in inner.resolved_deps.items():
            totals[sub] = totals.get(sub, 0) + sub_count * count
    return totals


def parse_input(inp: str) -> dict[str, Bag]:
    """Parse the rules and resolve every bag's full contents."""
    bags = {bag.name: bag for bag in map(_parse_bag, inp.split("\n"))}
    for bag in bags.values():
        bag.resolved_deps = _resolve(bags, bag.direct_deps)
    return bags


def solve1(inp: str) -> int:
    """Bag colours that eventually hold a shiny gold bag."""
    return sum(
        1 for bag in parse_input(inp).values() if (bag.resolved_deps or {}).get(TARGET, 0) >= 1
    )


def solve2(inp: str) -> int:
    """Total bags inside a shiny gold bag."""
    return sum(parse_input(inp)[TARGET].resolved_deps.values())