"""Hoof it: hiking trails on a topographic map."""

from __future__ import annotations

DIRS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _count_paths(lines: list[str], x: int, y: int, seen: set[tuple[int, int]] | None) -> int:
    current = lines[y][x]
    if current == "9":
        if seen is not None:
            if (x, y) in seen:
                return 0
            seen.add((x, y))
        return 1

    width, height = len(lines[0]), len(lines)
    total = 0
    for dx, dy in DIRS:
        nx, ny = x + dx, y + dy
        if not (0 <= nx < width and 0 <= ny < height):
            continue
        nxt = lines[ny][nx]
        if nxt != "." and ord(nxt) == ord(current) + 1:
            total += _count_paths(lines, nx, ny, seen)
    return total


def _count_all(inp: str, rating: bool) -> int:
    lines = inp.split("\n")
    return sum(
        _count_paths(lines, x, y, None if rating else set())
        for y, line in enumerate(lines)
        for x, ch in enumerate(line)
        if ch == "0"
    )


def solve1(inp: str) -> int:
    """Sum of trailhead scores: distinct peaks reachable from each trailhead."""
    return _count_all(inp, rating=False)


def solve2(inp: str) -> int:
    """Sum of trailhead ratings: distinct trails from each trailhead."""
    return _count_all(inp, rating=True)