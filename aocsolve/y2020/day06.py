"""Customs declaration forms answered by groups."""

from __future__ import annotations

from collections import Counter
from typing import Iterator


def _groups(inp: str) -> Iterator[tuple[Counter, int]]:
    """Yield each group's answer counts and the number of people in it."""
    for block in inp.split("\n\n"):
        people = block.count("\n") + 1
        yield Counter(block.replace("\n", "")), people


def solve1(inp: str) -> int:
    """Sum over groups of questions anyone answered."""
    return sum(len(counts) for counts, _ in _groups(inp))


def solve2(inp: str) -> int:
    """Sum over groups of questions everyone answered."""
    return sum(
        sum(1 for count in counts.values() if count == people)
        for counts, people in _groups(inp)
    )