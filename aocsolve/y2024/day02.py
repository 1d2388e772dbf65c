"""Red-nosed reports: safe level sequences."""

from __future__ import annotations

from aocsolve.parsing import split_parse_int


def is_safe(report: list[int]) -> bool:
    """Strictly monotonic with every step between 1 and 3."""
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")
    increasing = report[0] < report[1]
    for prev, cur in zip(report, report[1:]):
        if (prev < cur) != increasing:
            return False
        if not 1 <= abs(prev - cur) <= 3:
            return False
    return True


def is_safe_without_one(report: list[int]) -> bool:
    """Safe after removing some single level."""
    return any(is_safe(report[:i] + report[i + 1:]) for i in range(len(report)))


def _reports(inp: str) -> list[list[int]]:
    return [split_parse_int(line, " ") for line in inp.split("\n")]


def solve1(inp: str) -> int:
    return sum(is_safe(r) for r in _reports(inp))


def solve2(inp: str) -> int:
    return sum(is_safe(r) or is_safe_without_one(r) for r in _reports(inp))