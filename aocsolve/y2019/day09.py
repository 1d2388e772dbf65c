"""Intcode BOOST program."""

from aocsolve.y2019.intcode import parse_intcode, quick_run


def solve1(inp: str) -> list[int]:
    return quick_run(parse_intcode(inp), [1])


def solve2(inp: str) -> list[int]:
    return quick_run(parse_intcode(inp), [2])