"""Intcode gravity assist: find noun and verb."""

from __future__ import annotations

from aocsolve.y2019.intcode import Computer, parse_intcode

TARGET = 19690720


def solve1(inp: str) -> int:
    code = parse_intcode(inp)
    code[1] = 12
    code[2] = 2
    Computer(code).run()
    return code[0]


def solve2(inp: str) -> int | None:
    """Return 100 * noun + verb for the pair that leaves TARGET at address 0."""
    code = parse_intcode(inp)
    for noun in range(100):
        for verb in range(100):
            attempt = dict(code)
            attempt[1] = noun
            attempt[2] = verb
            Computer(attempt).run()
            if attempt.get(0, 0) == TARGET:
                return noun * 100 + verb
    return None