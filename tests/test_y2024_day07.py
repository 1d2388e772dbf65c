import pytest

from aocsolve.y2024.day07 import Equation, Op, generic_solve, solve1, solve2

INPUT = """
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
""".strip()


def test_solve1_example():
    assert solve1(INPUT) == 3749


def test_solve2_example():
    assert solve2(INPUT) == 11387


def test_concat_apply():
    assert Op.CONCAT.apply(12, 345) == 12345
    assert Op.ADD.apply(12, 345) == 357
    assert Op.MUL.apply(3, 4) == 12


def test_concat_needed():
    eq = Equation(156, (15, 6))
    assert eq.can_be_possible([Op.MUL, Op.ADD]) is False
    assert eq.can_be_possible([Op.MUL, Op.ADD, Op.CONCAT]) is True


def test_generic_solve_matches_solve1():
    assert generic_solve(INPUT, [Op.MUL, Op.ADD]) == solve1(INPUT)


def test_bad_line():
    with pytest.raises(ValueError):
        solve1("190 10 19")