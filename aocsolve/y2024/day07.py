"""Bridge repair: find operators that make equations true."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from aocsolve.parsing import parse_int, split_parse_int


class Op(enum.Enum):
    MUL = enum.auto()
    ADD = enum.auto()
    CONCAT = enum.auto()

    def apply(self, a: int, b: int) -> int:
        if self is Op.MUL:
            return a * b
        if self is Op.ADD:
            return a + b
        return a * 10 ** len(str(abs(b))) + b


@dataclass(frozen=True)
class Equation:
    result: int
    values: tuple[int, ...]

    def _possible(self, current: int, index: int, ops: list[Op]) -> bool:
        if index >= len(self.values):
            return current == self.result
        rhs = self.values[index]
        for op in ops:
            value = op.apply(current, rhs)
            if value > self.result:
                continue
            if self._possible(value, index + 1, ops):
                return True
        return False

    def can_be_possible(self, ops: list[Op]) -> bool:
        """True if the operators, applied left to right, can reach the result."""
        return self._possible(self.values[0], 1, list(ops))


def _parse(inp: str) -> list[Equation]:
    equations = []
    for line in inp.split("\n"):
        result, sep, values = line.partition(": ")
        if not sep:
            raise ValueError(f"bad equation {line!r}")
        equations.append(Equation(parse_int(result), tuple(split_parse_int(values, " "))))
    return equations


def generic_solve(inp: str, ops: list[Op]) -> int:
    """Sum of results of the equations that can be made true."""
    return sum(e.result for e in _parse(inp) if e.can_be_possible(ops))


def solve1(inp: str) -> int:
    return generic_solve(inp, [Op.MUL, Op.ADD])


def solve2(inp: str) -> int:
    return generic_solve(inp, [Op.MUL, Op.ADD, Op.CONCAT])