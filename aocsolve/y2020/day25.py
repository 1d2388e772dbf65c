"""Combo breaker: derive the door's encryption key."""

from __future__ import annotations

from aocsolve.parsing import split_parse_int

MODULUS = 20201227
SUBJECT = 7


def _transform_once(value: int, subject: int) -> int:
    return (value * subject) % MODULUS


def _public_keys(inp: str) -> tuple[int, int]:
    keys = split_parse_int(inp, "\n")
    if len(keys) < 2:
        raise ValueError("expected two public keys")
    return keys[0], keys[1]


def find_loop_size(public_key: int) -> int:
    """Number of transforms of subject 7 needed to reach public_key."""
    value = 1
    loops = 0
    while True:
        value = _transform_once(value, SUBJECT)
        loops += 1
        if value == public_key:
            return loops


def solve1(inp: str) -> int:
    """Encryption key from the card's and the door's public keys."""
    card, door = _public_keys(inp)
    return pow(door, find_loop_size(card), MODULUS)


def solve2(inp: str) -> None:
    """The last day has no second puzzle; the input is only checked."""
    _public_keys(inp)
    return None