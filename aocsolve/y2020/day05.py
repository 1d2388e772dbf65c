"""Binary boarding passes."""

from __future__ import annotations

ROW_COUNT = 128
COL_COUNT = 8


def _search(low: int, high: int, instructions: str, lower: str) -> int:
    for step in instructions:
        half = (high - low + 1) // 2
        if step == lower:
            high -= half
        else:
            low += half
    return low


def parse_row(code: str) -> tuple[int, int]:
    """Decode a boarding pass into (row, column)."""
    if len(code) < 7:
        raise ValueError(f"boarding pass {code!r} is too short")
    return (
        _search(0, ROW_COUNT - 1, code[:7], "F"),
        _search(0, COL_COUNT - 1, code[7:], "L"),
    )


def seat_id(seat: tuple[int, int]) -> int:
    row, col = seat
    return row * 8 + col


def solve1(inp: str) -> int:
    return max((seat_id(parse_row(code)) for code in inp.split("\n")), default=0)


def solve2(inp: str) -> int | None:
    """First free seat whose row neighbours on both sides are taken."""
    taken = {parse_row(code) for code in inp.split("\n")}
    for row in range(ROW_COUNT):
        for col in range(COL_COUNT):
            if (row, col) in taken:
                continue
            if col + 1 < COL_COUNT and (row, col + 1) not in taken:
                continue
            if col > 0 and (row, col - 1) not in taken:
                continue
            return seat_id((row, col))
    return None