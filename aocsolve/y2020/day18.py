"""Arithmetic with unusual operator precedence."""

from __future__ import annotations

import re

_LEXEME = re.compile(r"\d+|\S")


def _lex(line: str) -> list[str]:
    symbols = _LEXEME.findall(line)
    for sym in symbols:
        if not sym.isdigit() and sym not in "+*()":
            raise ValueError(f"unexpected character {sym!r} in {line!r}")
    return symbols


class _Parser:
    def __init__(self, line: str, plus_first: bool) -> None:
        self.symbols = _lex(line)
        self.pos = 0
        self.plus_first = plus_first

    def _peek(self) -> str | None:
        return self.symbols[self.pos] if self.pos < len(self.symbols) else None

    def _take(self) -> str:
        sym = self._peek()
        if sym is None:
            raise ValueError("unexpected end of expression")
        self.pos += 1
        return sym

    def _operand(self) -> int:
        sym = self._take()
        if sym == "(":
            value = self._expr()
            if self._take() != ")":
                raise ValueError("missing closing bracket")
            return value
        if sym.isdigit():
            return int(sym)
        raise ValueError(f"unexpected symbol {sym!r}")

    def _sum(self) -> int:
        value = self._operand()
        while self._peek() == "+":
            self._take()
            value += self._operand()
        return value

    def _expr(self) -> int:
        if self.plus_first:
            value = self._sum()
            while self._peek() == "*":
                self._take()
                value *= self._sum()
            return value
        value = self._operand()
        while self._peek() in ("+", "*"):
            op = self._take()
            rhs = self._operand()
            value = value + rhs if op == "+" else value * rhs
        return value

    def evaluate(self) -> int:
        value = self._expr()
        if self.pos != len(self.symbols):
            raise ValueError(f"unexpected symbol {self.symbols[self.pos]!r}")
        return value


def do_math_ltr(line: str) -> int:
    """Evaluate with + and * of equal precedence, left to right."""
    return _Parser(line, plus_first=False).evaluate()


def do_math_plus(line: str) -> int:
    """Evaluate with + binding tighter than *."""
    return _Parser(line, plus_first=True).evaluate()


def solve1(inp: str) -> int:
    return sum(do_math_ltr(line) for line in inp.split("\n"))


def solve2(inp: str) -> int:
    return sum(do_math_plus(line) for line in inp.split("\n"))