"""Elves' memory game."""

from __future__ import annotations

from aocsolve.parsing import split_parse_int


def play_game(inp: str, turns: int) -> int:
    """The number spoken on the given turn, starting from comma separated numbers."""
    starting = split_parse_int(inp, ",")
    if turns < len(starting):
        raise ValueError(f"cannot stop at turn {turns} before the {len(starting)} starting numbers")

    size = max(turns, max(starting) + 1)
    last_seen = [0] * size
    for turn, value in enumerate(starting[:-1], 1):
        last_seen[value] = turn

    current = starting[-1]
    for turn in range(len(starting), turns):
        previous = last_seen[current]
        last_seen[current] = turn
        current = turn - previous if previous else 0
    return current


def solve1(inp: str) -> int:
    return play_game(inp, 2020)


def solve2(inp: str) -> int:
    return play_game(inp, 30000000)