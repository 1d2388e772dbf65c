"""Rotations and flips of square grids given as lists of strings."""

from __future__ import annotations


def rotate_lines(lines: list[str], n: int) -> list[str]:
    """Rotate a square grid clockwise by n quarter turns (negative turns go counterclockwise)."""
    size = len(lines)
    if any(len(line) != size for line in lines):
        raise ValueError("only square grids can be rotated")
    rotated = list(lines)
    for _ in range(n % 4):
        rotated = ["".join(column) for column in zip(*reversed(rotated))]
    return rotated


def flip_x(lines: list[str]) -> list[str]:
    """Mirror every row left to right."""
    return [line[::-1] for line in lines]


def flip_y(lines: list[str]) -> list[str]:
    """Mirror the grid top to bottom."""
    return list(reversed(lines))