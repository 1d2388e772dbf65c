"""Seating system cellular automaton."""

from __future__ import annotations

from dataclasses import dataclass, field

FLOOR = "."
OCCUPIED = "#"
EMPTY = "L"

SURROUND_DIRECTIONS = ((0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1))


@dataclass
class SeatState:
    """The seat layout as newline-separated text, with the previous layout."""

    current: str
    width: int
    rows: int
    previous: str = field(default="")

    def _index(self, x: int, y: int) -> int:
        return y * (self.width + 1) + x

    def _first_seen(self, x: int, y: int, dx: int, dy: int, max_visibility: int) -> str:
        for distance in range(1, max_visibility + 1):
            nx, ny = x + dx * distance, y + dy * distance
            if nx < 0 or ny < 0 or nx >= self.width or ny >= self.rows:
                break
            seat = self.current[self._index(nx, ny)]
            if seat != FLOOR:
                return seat
        return ""

    def step(self, max_visibility: int, tolerance: int) -> None:
        """Apply one round of the seating rules."""
        self.previous = self.current
        new_state = []
        for i, seat in enumerate(self.current):
            if seat in (FLOOR, "\n"):
                new_state.append(seat)
                continue

            x, y = i % (self.width + 1), i // (self.width + 1)
            limit = 1 if seat == EMPTY else tolerance
            occupied = 0
            for dx, dy in SURROUND_DIRECTIONS:
                if self._first_seen(x, y, dx, dy, max_visibility) == OCCUPIED:
                    occupied += 1
                    if occupied >= limit:
                        break

            if seat == EMPTY and occupied == 0:
                new_state.append(OCCUPIED)
            elif seat != EMPTY and occupied >= limit:
                new_state.append(EMPTY)
            else:
                new_state.append(seat)
        self.current = "".join(new_state)


def parse_input(inp: str) -> SeatState:
    width = inp.find("\n")
    if width == -1:
        width = len(inp)
    return SeatState(inp, width, inp.count("\n") + 1)


def _settle(state: SeatState, max_visibility: int, tolerance: int) -> int:
    while True:
        state.step(max_visibility, tolerance)
        if state.current == state.previous:
            return state.current.count(OCCUPIED)


def solve1(inp: str) -> int:
    return _settle(parse_input(inp), 1, 4)


def solve2(inp: str) -> int:
    state = parse_input(inp)
    return _settle(state, state.width * state.rows, 5)