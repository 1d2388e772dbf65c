"""Monster messages matched against grammar rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from aocsolve.parsing import parse_int, split_parse_int2

RuleBody = Union[str, list[list[int]]]

LOOP_OVERRIDES = {
    8: "42 | 42 8",
    11: "42 31 | 42 11 31",
}


@dataclass
class RuleSet:
    """Rules by id: a literal character or alternatives of rule sequences."""

    rules: dict[int, RuleBody]

    def _ends(self, rule_id: int, message: str, pos: int) -> set[int]:
        body = self.rules[rule_id]
        if isinstance(body, str):
            return {pos + len(body)} if message.startswith(body, pos) else set()
        ends: set[int] = set()
        for sequence in body:
            current = {pos}
            for sub in sequence:
                current = {
                    end
                    for start in current
                    if start < len(message)
                    for end in self._ends(sub, message, start)
                }
                if not current:
                    break
            ends |= current
        return ends

    def is_good(self, message: str) -> bool:
        """True if rule 0 matches the whole message."""
        return len(message) in self._ends(0, message, 0)


def _parse(inp: str, overrides: dict[int, str]) -> tuple[RuleSet, list[str]]:
    rules_text, _, messages = inp.partition("\n\n")
    rules: dict[int, RuleBody] = {}
    for line in rules_text.split("\n"):
        raw_id, sep, expr = line.partition(": ")
        if not sep:
            raise ValueError(f"bad rule {line!r}")
        rule_id = parse_int(raw_id)
        expr = overrides.get(rule_id, expr)
        rules[rule_id] = expr[1] if expr.startswith('"') else split_parse_int2(expr, " | ", " ")
    return RuleSet(rules), messages.split("\n")


def _count(inp: str, overrides: dict[int, str]) -> int:
    rule_set, messages = _parse(inp, overrides)
    return sum(rule_set.is_good(m) for m in messages)


def solve1(inp: str) -> int:
    return _count(inp, {})


def solve2(inp: str) -> int:
    """Count with rules 8 and 11 replaced by their looping forms."""
    return _count(inp, LOOP_OVERRIDES)