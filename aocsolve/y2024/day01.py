"""Historian hysteria: compare two location lists."""

from __future__ import annotations

from collections import Counter

from aocsolve.parsing import parse_int


def _columns(inp: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in inp.split("\n"):
        parts = line.split("   ")
        if len(parts) < 2:
            raise ValueError(f"bad line {line!r}")
        left.append(parse_int(parts[0]))
        right.append(parse_int(parts[1]))
    return left, right


def solve1(inp: str) -> int:
    """Total distance between the sorted columns."""
    left, right = _columns(inp)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def solve2(inp: str) -> int:
    """Similarity score: each left number times its count in the right column."""
    left, right = _columns(inp)
    counts = Counter(right)
    return sum(v * counts[v] for v in left)