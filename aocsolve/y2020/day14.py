"""Docking program bitmasks applied to values or addresses."""

from __future__ import annotations

from itertools import product
from typing import Callable

WORD_BITS = 36

_Writer = Callable[[str, dict[int, int], int, int], None]


def _to_bin(value: int) -> str:
    if not 0 <= value < 2**WORD_BITS:
        raise ValueError(f"{value} does not fit in {WORD_BITS} bits")
    return format(value, f"0{WORD_BITS}b")


def _run(inp: str, write: _Writer) -> int:
    mask = ""
    memory: dict[int, int] = {}
    for line in inp.split("\n"):
        target, _, value = line.partition(" = ")
        kind = target[:3]
        if kind == "mas":
            mask = value
        elif kind == "mem":
            write(mask, memory, int(target[4:-1]), int(value))
    return sum(memory.values())


def _write_masked_value(mask: str, memory: dict[int, int], addr: int, value: int) -> None:
    bits = list(_to_bin(value))
    for i, ch in enumerate(mask):
        if ch != "X":
            bits[i] = ch
    memory[addr] = int("".join(bits), 2)


def all_addresses(base: str, mask: str) -> list[str]:
    """Every binary address made by setting the mask's X positions of base to 0 or 1."""
    floating = [i for i, ch in enumerate(mask) if ch == "X"]
    addresses = []
    for choice in product("01", repeat=len(floating)):
        bits = list(base)
        for i, bit in zip(floating, choice):
            bits[i] = bit
        addresses.append("".join(bits))
    return addresses


def _write_floating(mask: str, memory: dict[int, int], addr: int, value: int) -> None:
    bits = list(_to_bin(addr))
    for i, ch in enumerate(mask):
        if ch == "1":
            bits[i] = "1"
    for address in all_addresses("".join(bits), mask):
        memory[int(address, 2)] = value


def solve1(inp: str) -> int:
    """Sum of memory after masking every written value."""
    return _run(inp, _write_masked_value)


def solve2(inp: str) -> int:
    """Sum of memory after writing to every floating address."""
    return _run(inp, _write_floating)