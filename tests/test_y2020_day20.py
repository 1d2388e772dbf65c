import pytest

from aocsolve.y2020.day20 import (
    BorderInfo,
    TOP,
    make_board,
    parse_input,
    solve1,
    solve2,
)

INPUT = """
Tile 2311:
..##.#..#.
##..#.....
#...##..#.
####.#...#
##.##.###.
##...#.###
.#.#.#..##
..#....#..
###...#.#.
..###..###

Tile 1951:
#.##...##.
#.####...#
.....#..##
#...######
.##.#....#
.###.#####
###.##.##.
.###....#.
..#.#..#.#
#...##.#..

Tile 1171:
####...##.
#..##.#..#
##.#..#.#.
.###.####.
..###.####
.##....##.
.#...####.
#.##.####.
####..#...
.....##...

Tile 1427:
###.##.#..
.#..#.##..
.#.##.#..#
#.#.#.##.#
....#...##
...##..##.
...#.#####
.#.####.#.
..#..###.#
..##.#..#.

Tile 1489:
##.#.#....
..##...#..
.##..##...
..#...#...
#####...#.
#..#.#.#.#
...#.#.#..
##.#...##.
..##.##.##
###.##.#..

Tile 2473:
#....####.
#..#.##...
#.##..#...
######.#.#
.#...#.#.#
.#########
.###.#..#.
########.#
##...##.#.
..###.#.#.

Tile 2971:
..#.#....#
#...###...
#.#.###...
##.##..#..
.#####..##
.#..####.#
#..#.#..#.
..####.###
..#.#.###.
...#.#.#.#

Tile 2729:
...#.#.#.#
####.#....
..#.#.....
....#..#.#
.##..##.#.
.#.####...
####.#.#..
##.####...
##..#.##..
#.##...##.

Tile 3079:
#.#.#####.
.#..######
..#.......
######....
####.#..#.
.#...#.##.
#.#####.##
..#.###...
..#.......
..#.###...
""".strip()


def test_solve1():
    assert solve1(INPUT) == 20899048083289


def test_solve2():
    assert solve2(INPUT) == 273


def test_parse_input_indexes_borders_both_ways():
    borders, tiles = parse_input(INPUT)
    assert len(tiles) == 9
    for tile in tiles.values():
        top = tile.data[0]
        assert BorderInfo(tile.id, TOP, False) in borders[top]
        assert BorderInfo(tile.id, TOP, True) in borders[top[::-1]]


def test_make_board_is_square_and_keeps_cells():
    borders, tiles = parse_input(INPUT)
    board = make_board(borders, tiles)
    lines = board.split("\n")
    assert all(len(line) == len(lines) for line in lines)
    inner = sum(
        "".join(row[1:-1] for row in tile.data[1:-1]).count("#") for tile in tiles.values()
    )
    assert board.count("#") == inner


def test_make_board_single_tile_raises():
    single = INPUT.split("\n\n")[0]
    with pytest.raises(ValueError):
        make_board(*parse_input(single))


def test_bad_header_raises():
    with pytest.raises(ValueError):
        parse_input("Tyle 1:\n#.\n.#")