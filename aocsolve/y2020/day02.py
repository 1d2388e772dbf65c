"""Password policy checks."""

from __future__ import annotations

from dataclasses import dataclass

from aocsolve.parsing import parse_int


@dataclass(frozen=True)
class PasswordPolicy:
    low: int
    high: int
    letter: str

    def is_valid_count(self, password: str) -> bool:
        """The letter occurs between low and high times."""
        return self.low <= password.count(self.letter) <= self.high

    def is_valid_position(self, password: str) -> bool:
        """Exactly one of the 1-based positions low and high holds the letter."""
        if len(password) < self.low:
            return False
        first = password[self.low - 1] == self.letter
        if len(password) < self.high:
            return first
        return first != (password[self.high - 1] == self.letter)


def _parse(inp: str) -> list[tuple[PasswordPolicy, str]]:
    entries = []
    for line in inp.split("\n"):
        if not line:
            continue
        parts = line.split(": ")
        if len(parts) != 2:
            raise ValueError(f"Bad split of line {line!r}")
        rule, password = parts
        low, _, high = rule[:-2].partition("-")
        entries.append((PasswordPolicy(parse_int(low), parse_int(high), rule[-1]), password))
    return entries


def solve1(inp: str) -> int:
    return sum(policy.is_valid_count(pw) for policy, pw in _parse(inp))


def solve2(inp: str) -> int:
    return sum(policy.is_valid_position(pw) for policy, pw in _parse(inp))