"""XMAS cipher weakness."""

from __future__ import annotations

from itertools import combinations

from aocsolve.parsing import split_parse_int


def validate_input(preamble: list[int], value: int) -> bool:
    """True if two different entries of preamble sum to value."""
    return any(a + b == value for a, b in combinations(preamble, 2))


def _first_invalid(numbers: list[int], size: int) -> int:
    for i, value in enumerate(numbers[size:]):
        if not validate_input(numbers[i:i + size], value):
            return value
    return -1


def generic_solver1(inp: str, size: int) -> int:
    """First number not the sum of two of the size numbers before it, or -1."""
    return _first_invalid(split_parse_int(inp, "\n"), size)


def generic_solver2(numbers: list[int], bad_number: int) -> tuple[int, int]:
    """Start and end indices of a contiguous run summing to bad_number."""
    low, high = 0, 1
    total = numbers[0] + numbers[1]
    while True:
        if total == bad_number:
            return low, high
        if total > bad_number:
            total -= numbers[low]
            low += 1
        else:
            high += 1
            if high >= len(numbers):
                raise ValueError(f"no contiguous run sums to {bad_number}")
            total += numbers[high]


def solve1(inp: str) -> int:
    return generic_solver1(inp, 25)


def solve2(inp: str) -> int:
    numbers = split_parse_int(inp, "\n")
    low, high = generic_solver2(numbers, _first_invalid(numbers, 25))
    run = numbers[low:high + 1]
    return min(run) + max(run)