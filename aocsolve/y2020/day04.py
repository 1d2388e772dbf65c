"""Passport field validation."""

from __future__ import annotations

from typing import Callable

from aocsolve.parsing import parse_int

_HEX_DIGITS = frozenset("0123456789abcdef")
_DIGITS = frozenset("0123456789")
_EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})


def _int_between(value: str, low: int, high: int) -> bool:
    try:
        number = parse_int(value)
    except ValueError:
        return False
    return low <= number <= high


def _valid_height(value: str) -> bool:
    if len(value) <= 2:
        return False
    number, unit = value[:-2], value[-2:]
    if unit == "cm":
        return _int_between(number, 150, 193)
    if unit == "in":
        return _int_between(number, 59, 76)
    return False


def _valid_hair(value: str) -> bool:
    return len(value) == 7 and value[0] == "#" and set(value[1:]) <= _HEX_DIGITS


def _valid_pid(value: str) -> bool:
    return len(value) == 9 and set(value) <= _DIGITS


FIELD_VALIDATORS: dict[str, Callable[[str], bool]] = {
    "byr": lambda v: _int_between(v, 1920, 2002),
    "iyr": lambda v: _int_between(v, 2010, 2020),
    "eyr": lambda v: _int_between(v, 2020, 2030),
    "hgt": _valid_height,
    "hcl": _valid_hair,
    "ecl": lambda v: v in _EYE_COLOURS,
    "pid": _valid_pid,
}


def _passports(inp: str) -> list[dict[str, str]]:
    return [
        dict(entry.partition(":")[::2] for entry in block.split())
        for block in inp.split("\n\n")
    ]


def solve1(inp: str) -> int:
    """Passports holding every required field."""
    return sum(
        all(name in passport for name in FIELD_VALIDATORS) for passport in _passports(inp)
    )


def solve2(inp: str) -> int:
    """Passports whose required fields are all present and valid."""
    return sum(
        all(name in passport and valid(passport[name]) for name, valid in FIELD_VALIDATORS.items())
        for passport in _passports(inp)
    )