"""Shuttle bus schedules and the Chinese remainder theorem."""

from __future__ import annotations

import math


def inverse_modulo(a: int, m: int) -> int:
    """Multiplicative inverse of a modulo m (0 when m is 1)."""
    if m == 1:
        return 0
    m0, x0, x1 = m, 0, 1
    while a > 1:
        q = a // m
        m, a = a % m, m
        x0, x1 = x1 - q * x0, x0
    if x1 < 0:
        x1 += m0
    return x1


def generic_cra(nums: list[int], rems: list[int], prod: int) -> int:
    """Smallest x with x % nums[i] == rems[i] for pairwise coprime nums."""
    total = 0
    for n, rem in zip(nums, rems):
        portion = prod // n
        total += rem * inverse_modulo(portion, n) * portion
    return total % prod


def product(nums: list[int]) -> int:
    return math.prod(nums)


def solve1(inp: str) -> int:
    """Earliest bus ID times minutes to wait for it."""
    lines = inp.split("\n")
    depart = int(lines[0])
    min_wait, min_id = depart, 0
    for raw in lines[1].split(","):
        if raw == "x":
            continue
        bus = int(raw)
        wait = bus - depart % bus
        if wait < min_wait:
            min_wait, min_id = wait, bus
    return min_id * min_wait


def solve2(inp: str) -> int:
    """Earliest time at which each bus departs at its list offset."""
    nums: list[int] = []
    rems: list[int] = []
    for i, raw in enumerate(inp.split("\n")[1].split(",")):
        if raw == "x":
            continue
        bus = int(raw)
        nums.append(bus)
        rem = bus - i
        if rem < 0:
            rem %= bus
        rems.append(rem)
    return generic_cra(nums, rems, product(nums))