import pytest

from aocsolve.y2024.day01 import solve1, solve2

INPUT = """
3   4
4   3
2   5
1   3
3   9
3   3
""".strip()


def _swap(inp):
    return "\n".join("   ".join(reversed(line.split("   "))) for line in inp.split("\n"))


def test_solve1_example():
    assert solve1(INPUT) == 11


def test_solve2_example():
    assert solve2(INPUT) == 31


def test_solve1_identical_columns():
    inp = "5   5\n1   1\n7   7"
    assert solve1(inp) == 0


def test_solve1_symmetric():
    assert solve1(_swap(INPUT)) == solve1(INPUT)


def test_solve2_identical_distinct_columns_sum_values():
    inp = "5   5\n1   1\n7   7"
    assert solve2(inp) == 5 + 1 + 7


def test_bad_line():
    with pytest.raises(ValueError):
        solve1("3 4")