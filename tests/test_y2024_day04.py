import pytest

from aocsolve.y2024.day04 import solve1, solve2

INPUT = """
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
""".strip()


def test_solve1_example():
    assert solve1(INPUT) == 18


def test_solve2_example():
    assert solve2(INPUT) == 9


@pytest.mark.parametrize(
    "grid",
    [
        "M.M\n.A.\nS.S",
        "S.M\n.A.\nS.M",
        "S.S\n.A.\nM.M",
        "M.S\n.A.\nM.S",
    ],
)
def test_each_cross_orientation_counts_once(grid):
    assert solve2(grid) == 1


def test_non_cross_is_not_counted():
    assert solve2("M.M\n.A.\nM.M") == 0


def test_single_cross():
    assert solve2("M.S\n.A.\nM.S") == 1


def test_word_reversed_counts_once_each_way():
    assert solve1("XMAS") == 1
    assert solve1("SAMX") == 1