"""Expense report entries that sum to 2020."""

from __future__ import annotations

from aocsolve.parsing import parse_int

TARGET = 2020


def _numbers(inp: str) -> list[int]:
    return [parse_int(line) for line in inp.split("\n") if line]


def solve1(inp: str) -> int | None:
    """Product of the two entries that sum to 2020."""
    numbers = _numbers(inp)
    for i, first in enumerate(numbers):
        for second in numbers[i + 1:]:
            if first + second == TARGET:
                return first * second
    return None


def solve2(inp: str) -> int | None:
    """Product of three entries that sum to 2020."""
    numbers = _numbers(inp)
    for i, first in enumerate(numbers):
        for j, second in enumerate(numbers[i:]):
            if first + second > TARGET:
                continue
            for third in numbers[i + j:]:
                if first + second + third == TARGET:
                    return first * second * third
    return None