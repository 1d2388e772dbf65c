import pytest

from aocsolve.y2020.day11 import parse_input, solve1, solve2


def _grid(*rows):
    return "\n".join(rows)


INPUT = _grid(
    "L.LL.LL.LL", "LLLLLLL.LL", "L.L.L..L..", "LLLL.LL.LL", "L.LL.LL.LL",
    "L.LLLLL.LL", "..L.L.....", "LLLLLLLLLL", "L.LLLLLL.L", "L.LLLLL.LL",
)

STATE_P1_R1 = _grid(
    "#.##.##.##", "#######.##", "#.#.#..#..", "####.##.##", "#.##.##.##",
    "#.#####.##", "..#.#.....", "##########", "#.######.#", "#.#####.##",
)

STATE_P1_R2 = _grid(
    "#.LL.L#.##", "#LLLLLL.L#", "L.L.L..L..", "#LLL.LL.L#", "#.LL.LL.LL",
    "#.LLLL#.##", "..L.L.....", "#LLLLLLLL#", "#.LLLLLL.L", "#.#LLLL.##",
)

STATE_P1_R3 = _grid(
    "#.##.L#.##", "#L###LL.L#", "L.#.#..#..", "#L##.##.L#", "#.##.LL.LL",
    "#.###L#.##", "..#.#.....", "#L######L#", "#.LL###L.L", "#.#L###.##",
)

STATE_P2_R1 = STATE_P1_R1

STATE_P2_R2 = _grid(
    "#.LL.LL.L#", "#LLLLLL.LL", "L.L.L..L..", "LLLL.LL.LL", "L.LL.LL.LL",
    "L.LLLLL.LL", "..L.L.....", "LLLLLLLLL#", "#.LLLLLL.L", "#.LLLLL.L#",
)

STATE_P2_R3 = _grid(
    "#.L#.##.L#", "#L#####.LL", "L.#.#..#..", "##L#.##.##", "#.##.#L.##",
    "#.#####.#L", "..#.#.....", "LLL####LL#", "#.L#####.L", "#.L####.L#",
)


@pytest.mark.parametrize(
    "visibility, tolerance, expected",
    [
        (1, 4, [STATE_P1_R1, STATE_P1_R2, STATE_P1_R3]),
        (9999, 5, [STATE_P2_R1, STATE_P2_R2, STATE_P2_R3]),
    ],
)
def test_step(visibility, tolerance, expected):
    state = parse_input(INPUT)
    for exp in expected:
        state.step(visibility, tolerance)
        assert state.current == exp


def test_solve2():
    assert solve2(INPUT) == 26


def test_solve1():
    assert solve1(INPUT) == 37


def test_step_keeps_previous_state():
    state = parse_input(INPUT)
    state.step(1, 4)
    assert state.previous == INPUT