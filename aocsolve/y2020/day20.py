"""Jurassic jigsaw: assemble image tiles and count rough water."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from dataclasses import dataclass

from aocsolve.parsing import parse_int
from aocsolve.y2020.day20_match import PatternMatcher
from aocsolve.y2020.day20_transform import flip_x, flip_y, rotate_lines

SEA_MONSTER = """
|                  # |
|#    ##    ##    ###|
| #  #  #  #  #  #   |
"""

TOP, RIGHT, BOTTOM, LEFT = range(4)


@dataclass
class Tile:
    id: int
    data: list[str]


@dataclass(frozen=True)
class BorderInfo:
    """Where a border string occurs: tile, side (0 top .. 3 left) and whether reversed."""

    tile_id: int
    border_pos: int
    border_flipped: bool


Borders = dict[str, list[BorderInfo]]


def _border(lines: list[str], pos: int) -> str:
    if pos == TOP:
        return lines[0]
    if pos == BOTTOM:
        return lines[-1]
    if pos == RIGHT:
        return "".join(line[-1] for line in lines)
    if pos == LEFT:
        return "".join(line[0] for line in lines)
    raise ValueError(f"bad border position {pos}")


def parse_input(inp: str) -> tuple[Borders, dict[int, Tile]]:
    """Index every tile border, read both ways, and collect the tiles by id."""
    borders: dict[str, list[BorderInfo]] = defaultdict(list)
    tiles: dict[int, Tile] = {}
    for raw in inp.split("\n\n"):
        header, _, body = raw.partition("\n")
        if not header.startswith("Tile ") or not header.endswith(":"):
            raise ValueError(f"bad tile header {header!r}")
        tile_id = parse_int(header[5:-1])
        data = body.split("\n")
        for pos in (TOP, BOTTOM, LEFT, RIGHT):
            edge = _border(data, pos)
            borders[edge].append(BorderInfo(tile_id, pos, False))
            borders[edge[::-1]].append(BorderInfo(tile_id, pos, True))
        tiles[tile_id] = Tile(tile_id, data)
    return dict(borders), tiles


def _match_count(borders: Borders) -> Counter:
    counts: Counter = Counter()
    for info in borders.values():
        if len(info) != 1:
            counts.update(b.tile_id for b in info)
    return counts


@dataclass
class BuildState:
    """A partly assembled image, laid out row by row from its top-left corner."""

    built: list[list[Tile]]
    borders: Borders
    tiles: dict[int, Tile]
    corners: dict[int, list[BorderInfo]]

    def _last_tile(self, x: int, y: int) -> tuple[Tile | None, int]:
        if x == 0:
            tx, ty, pos = 0, y - 1, BOTTOM
        else:
            tx, ty, pos = x - 1, y, RIGHT
        if ty >= len(self.built) or tx >= len(self.built[ty]):
            return None, pos
        return self.built[ty][tx], pos

    def _draw(self) -> str:
        rows: list[str] = []
        for row in self.built:
            height = len(row[0].data)
            lines = ["".join(tile.data[i][1:-1] for tile in row) for i in range(height)]
            rows.extend(lines[1:-1])
        return "\n".join(rows)

    def build(self) -> str | None:
        """Place the remaining tiles; the image without tile borders, or None if this start fails."""
        x, y, corner_count = 1, 0, 1
        while True:
            last, last_pos = self._last_tile(x, y)
            if last is None:
                return None

            edge = _border(last.data, last_pos)
            try:
                info = self.borders[edge]
            except KeyError:
                raise ValueError(f"Unknown border {edge!r}") from None

            if len(info) == 1:
                y += 1
                x = 0
                self.built.append([])
                continue

            nxt = next((b for b in info if b.tile_id != last.id), None)
            if nxt is None:
                raise ValueError(f"border {edge!r} has no neighbouring tile")

            target = (last_pos + 2) % 4
            lines = self.tiles[nxt.tile_id].data
            if nxt.border_flipped != (abs(nxt.border_pos - target) >= 2):
                lines = flip_x(lines) if nxt.border_pos in (TOP, BOTTOM) else flip_y(lines)
            lines = rotate_lines(lines, target - nxt.border_pos)

            placed = Tile(nxt.tile_id, lines)
            self.built[y].append(placed)

            if y and x:
                if x >= len(self.built[y - 1]):
                    return None
                above = _border(self.built[y - 1][x].data, BOTTOM)
                if _border(lines, TOP) != above:
                    if _border(lines, BOTTOM) != above:
                        return None
                    placed.data = flip_y(lines)

            x += 1
            if nxt.tile_id in self.corners:
                corner_count += 1
                if corner_count == 4:
                    return self._draw()


def _new_build_state(
    corner_id: int,
    fx: bool,
    fy: bool,
    corners: dict[int, list[BorderInfo]],
    tiles: dict[int, Tile],
    borders: Borders,
) -> BuildState:
    unmatched = {b.border_pos for b in corners[corner_id]}
    rot = 0
    for i in range(4):
        if i in unmatched and (i + 1) % 4 in unmatched:
            rot = i - 2
            break

    lines = rotate_lines(tiles[corner_id].data, rot)
    if fy:
        lines = flip_y(lines)
    if fx:
        lines = flip_x(lines)
    return BuildState([[Tile(corner_id, lines)]], borders, tiles, corners)


def make_board(borders: Borders, tiles: dict[int, Tile]) -> str:
    """Assemble the whole image, trying each corner and orientation in turn."""
    counts = _match_count(borders)
    corners: dict[int, list[BorderInfo]] = {tid: [] for tid, c in counts.items() if c == 4}
    for info in borders.values():
        if len(info) == 1 and info[0].tile_id in corners:
            corners[info[0].tile_id].append(info[0])

    for corner_id in corners:
        for fy in (True, False):
            for fx in (True, False):
                board = _new_build_state(corner_id, fx, fy, corners, tiles, borders).build()
                if board is not None:
                    return board
    raise ValueError("the tiles cannot be assembled into an image")


def solve1(inp: str) -> int:
    """Product of the ids of the four corner tiles."""
    borders, _ = parse_input(inp)
    return math.prod(tid for tid, count in _match_count(borders).items() if count == 4)


def solve2(inp: str) -> int | None:
    """Number of '#' cells that are not part of any sea monster."""
    board = make_board(*parse_input(inp))
    rough = board.count("#")
    matcher = PatternMatcher.from_pattern(SEA_MONSTER)
    lines = board.split("\n")
    for rot in range(4):
        rotated = rotate_lines(lines, rot)
        for fx in (True, False):
            for fy in (True, False):
                view = rotated
                if fx:
                    view = flip_x(view)
                if fy:
                    view = flip_y(view)
                matched = matcher.match("\n".join(view))
                if matched:
                    return rough - len(matched)
    return None