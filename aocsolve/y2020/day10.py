"""Joltage adapter chains."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import combinations

from aocsolve.parsing import split_parse_int


def solve1(inp: str) -> int:
    """Count of 1-jolt differences times count of 3-jolt differences."""
    adapters = sorted(split_parse_int(inp, "\n"))
    diffs = Counter(b - a for a, b in zip([0] + adapters, adapters))
    diffs[3] += 1  # the final jump to the device
    return diffs[1] * diffs[3]


def possibility_counter(low: int, high: int, path: list[int]) -> int:
    """Subsets of path that, between low and high, keep every gap at most 3."""
    count = 0
    for size in range(len(path) + 1):
        for subset in combinations(path, size):
            chain = [low, *subset, high]
            if all(b - a <= 3 for a, b in zip(chain, chain[1:])):
                count += 1
    return count


@dataclass
class _Group:
    numbers: list[int]
    solid: bool


def _build_groups(adapters: list[int]) -> list[_Group]:
    groups = [_Group([0], True)]
    for v in adapters:
        last = groups[-1]
        if v - last.numbers[-1] == 3:
            if last.solid:
                if len(last.numbers) == 2:
                    last.numbers[1] = v
                else:
                    last.numbers.append(v)
            else:
                last_n = last.numbers.pop()
                if not last.numbers:
                    groups.pop()
                groups.append(_Group([last_n, v], True))
        elif last.solid:
            groups.append(_Group([v], False))
        else:
            last.numbers.append(v)
    return groups


def _merge_groups(groups: list[_Group]) -> list[_Group]:
    merged = [groups[0]]
    for g in groups[1:]:
        last = merged[-1]
        if last.solid and g.solid:
            if len(last.numbers) == 1:
                last.numbers.append(g.numbers[1])
            else:
                last.numbers[1] = g.numbers[1]
        else:
            merged.append(g)

    if not merged[-1].solid:
        tail = merged[-1]
        merged.append(_Group([tail.numbers.pop()], True))
    return merged


def solve2(inp: str) -> int:
    """Number of distinct adapter arrangements."""
    groups = _merge_groups(_build_groups(sorted(split_parse_int(inp, "\n"))))
    total = 1
    for i, g in enumerate(groups):
        if g.solid:
            continue
        total *= possibility_counter(groups[i - 1].numbers[-1], groups[i + 1].numbers[0], g.numbers)
    return total