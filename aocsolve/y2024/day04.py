"""Ceres search: word search for XMAS."""

from __future__ import annotations

TARGET_WORD = "XMAS"

ALL_DIRS = ((0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1))


def _cross_checks() -> tuple[dict[tuple[int, int], str], ...]:
    check = {(-1, -1): "M", (1, -1): "M", (-1, 1): "S", (1, 1): "S"}
    checks = [check]
    for _ in range(3):
        check = {
            ((-dx, dy) if dx == dy else (dx, dx)): ch for (dx, dy), ch in check.items()
        }
        checks.append(check)
    return tuple(checks)


CROSS_CHECKS = _cross_checks()


def _at(board: list[str], x: int, y: int, ch: str) -> bool:
    return 0 <= y < len(board) and 0 <= x < len(board[y]) and board[y][x] == ch


def _word_in_dir(board: list[str], x: int, y: int, dx: int, dy: int) -> bool:
    return all(
        _at(board, x + dx * i, y + dy * i, TARGET_WORD[i]) for i in range(1, len(TARGET_WORD))
    )


def solve1(inp: str) -> int:
    """Occurrences of XMAS in any of eight directions."""
    board = inp.split("\n")
    return sum(
        _word_in_dir(board, x, y, dx, dy)
        for y, row in enumerate(board)
        for x, ch in enumerate(row)
        if ch == TARGET_WORD[0]
        for dx, dy in ALL_DIRS
    )


def solve2(inp: str) -> int:
    """Occurrences of two MAS words crossing in an X."""
    board = inp.split("\n")
    return sum(
        any(
            all(_at(board, x + dx, y + dy, ch) for (dx, dy), ch in check.items())
            for check in CROSS_CHECKS
        )
        for y, row in enumerate(board)
        for x, cell in enumerate(row)
        if cell == "A"
    )