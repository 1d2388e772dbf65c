"""Intcode diagnostic program."""

from aocsolve.y2019.intcode import Computer, parse_intcode


def diagnostic_code(system_id: int, inp: str) -> int:
    """Run with system_id as input and return the last non-zero output."""
    computer = Computer(parse_intcode(inp), [system_id])
    computer.run()
    code = 0
    for value in computer.outputs:
        if value != 0:
            code = value
    return code


def solve1(inp: str) -> int:
    return diagnostic_code(1, inp)


def solve2(inp: str) -> int:
    return diagnostic_code(5, inp)