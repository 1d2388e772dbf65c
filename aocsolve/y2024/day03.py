"""Mull it over: scan corrupted memory for multiplications."""

from __future__ import annotations

import re

from aocsolve.parsing import parse_int

_MUL = r"mul\((-?[0-9]{1,3}),(-?[0-9]{1,3})\)"
MUL_RE = re.compile(_MUL)
LOGIC_RE = re.compile(rf"(?:{_MUL})|(?:do\(\))|(?:don't\(\))")


def _mult(a: str, b: str) -> int:
    return parse_int(a) * parse_int(b)


def solve1(inp: str) -> int:
    """Sum of every mul(a,b)."""
    return sum(_mult(m.group(1), m.group(2)) for m in MUL_RE.finditer(inp))


def solve2(inp: str) -> int:
    """Sum of mul(a,b) while enabled; do() enables and don't() disables."""
    enabled = True
    total = 0
    for m in LOGIC_RE.finditer(inp):
        kind = m.group(0)[:3]
        if kind == "do(":
            enabled = True
        elif kind == "don":
            enabled = False
        elif enabled:
            total += _mult(m.group(1), m.group(2))
    return total