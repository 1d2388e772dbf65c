"""Fuel needed for rocket modules."""

from aocsolve.parsing import split_parse_int


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def fuel_requirement(mass: int) -> int:
    return _trunc_div(mass, 3) - 2


def total_fuel_requirement(mass: int) -> int:
    """Fuel for the mass, plus fuel for that fuel, until no more is needed."""
    total = 0
    fuel = fuel_requirement(mass)
    while fuel > 0:
        total += fuel
        fuel = fuel_requirement(fuel)
    return total


def solve1(inp: str) -> int:
    return sum(fuel_requirement(m) for m in split_parse_int(inp, "\n"))


def solve2(inp: str) -> int:
    return sum(total_fuel_requirement(m) for m in split_parse_int(inp, "\n"))