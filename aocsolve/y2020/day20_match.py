"""Find a fixed pattern of '#' cells inside a grid."""

from __future__ import annotations

from dataclasses import dataclass

from aocsolve.xy import XY, grid_size


@dataclass(frozen=True)
class PatternMatcher:
    """Cells that must all be '#' for the pattern to match, relative to its corner."""

    coords: tuple[XY, ...]
    max_x: int

    @classmethod
    def from_pattern(cls, raw: str) -> PatternMatcher:
        """Read a pattern whose rows are wrapped in '|' and whose blanks are spaces."""
        coords: list[XY] = []
        max_x = 0
        for y, line in enumerate(raw.strip().split("\n")):
            row = line[1:-1]
            max_x = max(max_x, len(row) - 1)
            coords.extend(XY(x, y) for x, ch in enumerate(row) if ch != " ")
        return cls(tuple(coords), max_x)

    def _fits(self, offset: XY, lines: list[str], size: XY) -> bool:
        for coord in self.coords:
            pos = coord.add(offset)
            if pos.out_of_bounds(size) or lines[pos.y][pos.x] != "#":
                return False
        return True

    def match(self, text: str) -> set[XY]:
        """Every grid cell covered by some occurrence of the pattern."""
        lines = text.split("\n")
        size = grid_size(lines)
        matched: set[XY] = set()
        for y in range(len(lines)):
            for x in range(len(lines[0]) - self.max_x):
                offset = XY(x, y)
                if self._fits(offset, lines, size):
                    matched.update(coord.add(offset) for coord in self.coords)
        return matched