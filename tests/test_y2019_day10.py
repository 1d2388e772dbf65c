import pytest

from aocsolve.y2019 import day10

INPUT_1 = """
.#..#
.....
#####
....#
...##
"""

INPUT_2 = """
......#.#.
#..#.#....
..#######.
.#.#.###..
.#..#.....
..#....#.#
#..#....#.
.##.#..###
##...#..#.
.#....####
"""

INPUT_3 = """
#.#...#.#.
.###....#.
.#....#...
##.#.#.#.#
....#.#.#.
.##..###.#
..#...##..
..##....##
......#...
.####.###.
"""

INPUT_4 = """
.#..#..###
####.###.#
....###.#.
..###.##.#
##.##.#.#.
....###..#
..#.#..#.#
#..#.#.###
.##...##.#
.....#.#..
"""

INPUT_5 = """
.#..##.###...#######
##.############..##.
.#.######.########.#
.###.#######.####.#.
#####.##.#.##.###.##
..#####..#.#########
####################
#.####....###.#.#.##
##.#################
#####.##.###..####..
..######..##.#######
####.##.####...##..#
.#####..#.######.###
##...#.##########...
#.##########.#######
.####.#.###.###.#.##
....##.##.###..#####
.#.#.###########.###
#.#.#.#####.####.###
###.##.####.##.#..##
"""


@pytest.mark.parametrize(
    ("grid", "expected"),
    [(INPUT_1, 8), (INPUT_2, 33), (INPUT_3, 35), (INPUT_4, 41), (INPUT_5, 210)],
)
def test_solve1(grid, expected):
    assert day10.solve1(grid.strip()) == expected


def test_solve2():
    assert day10.solve2(INPUT_5.strip()) == 802


def test_solve2_too_few_asteroids():
    with pytest.raises(ValueError):
        day10.solve2(INPUT_1.strip())