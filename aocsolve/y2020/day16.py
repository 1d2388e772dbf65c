"""Ticket field translation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from aocsolve.parsing import parse_int, split_parse_int


@dataclass(frozen=True)
class Rule:
    """A named field valid for values inside any of its inclusive ranges."""

    name: str
    ranges: tuple[tuple[int, int], ...]

    def check(self, value: int) -> bool:
        return any(low <= value <= high for low, high in self.ranges)


def _parse_rule(line: str) -> Rule:
    name, sep, spec = line.partition(": ")
    if not sep:
        raise ValueError(f"bad rule {line!r}")
    ranges = []
    for part in spec.split(" or "):
        low, _, high = part.partition("-")
        ranges.append((parse_int(low), parse_int(high)))
    return Rule(name, tuple(ranges))


def _parse(inp: str) -> tuple[list[Rule], list[int], list[list[int]]]:
    sections = inp.split("\n\n")
    if len(sections) < 3:
        raise ValueError("expected rules, your ticket and nearby tickets")
    rules = [_parse_rule(line) for line in sections[0].split("\n")]
    own = split_parse_int(sections[1].split("\n")[1], ",")
    nearby = [split_parse_int(line, ",") for line in sections[2].split("\n")[1:]]
    return rules, own, nearby


def validate_ticket(rules: list[Rule], values: list[int], on_bad: Callable[[int], bool]) -> bool:
    """True if every value fits some rule.

    on_bad is called with each invalid value; returning True stops the check.
    """
    ok = True
    for value in values:
        if not any(rule.check(value) for rule in rules):
            if on_bad(value):
                return False
            ok = False
    return ok


def solve1(inp: str) -> int:
    """Sum of nearby ticket values that fit no rule."""
    rules, _, nearby = _parse(inp)
    invalid: list[int] = []

    def collect(value: int) -> bool:
        invalid.append(value)
        return False

    for ticket in nearby:
        validate_ticket(rules, ticket, collect)
    return sum(invalid)


def _assign_fields(rules: list[Rule], tickets: list[list[int]], field_count: int) -> dict[int, int]:
    columns = [[ticket[i] for ticket in tickets] for i in range(field_count)]
    candidates = [
        {ri for ri, rule in enumerate(rules) if all(rule.check(v) for v in column)}
        for column in columns
    ]
    assigned: dict[int, int] = {}
    while len(assigned) < len(rules):
        progress = False
        taken_fields = set(assigned.values())
        for fi, cand in enumerate(candidates):
            if fi in taken_fields:
                continue
            remaining = cand - assigned.keys()
            if len(remaining) == 1:
                assigned[remaining.pop()] = fi
                taken_fields.add(fi)
                progress = True
        if not progress:
            raise ValueError("Making no progress")
    return assigned


def solve2(inp: str) -> int:
    """Product of your ticket's fields whose names start with 'departure '."""
    rules, own, nearby = _parse(inp)
    valid = [t for t in nearby if validate_ticket(rules, t, lambda _: True)]
    assigned = _assign_fields(rules, valid + [own], len(own))
    return math.prod(
        own[assigned[ri]] for ri, rule in enumerate(rules) if rule.name.startswith("departure ")
    )