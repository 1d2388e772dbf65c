import pytest

from aocsolve.y2024.day02 import is_safe, is_safe_without_one, solve1, solve2

CASES = [
    ([7, 6, 4, 2, 1], True),
    ([1, 2, 7, 8, 9], False),
    ([9, 7, 6, 2, 1], False),
    ([1, 3, 2, 4, 5], True),
    ([8, 6, 4, 4, 1], True),
    ([1, 3, 6, 7, 9], True),
]

INPUT = "\n".join(" ".join(map(str, r)) for r, _ in CASES)


@pytest.mark.parametrize("report,expected", CASES)
def test_is_safe_without_one(report, expected):
    assert is_safe_without_one(report) is expected


def test_is_safe_strict():
    assert is_safe([7, 6, 4, 2, 1]) is True
    assert is_safe([1, 3, 2, 4, 5]) is False
    assert is_safe([8, 6, 4, 4, 1]) is False


def test_solve1_example():
    assert solve1(INPUT) == 2


def test_solve2_example():
    assert solve2(INPUT) == 4


def test_is_safe_too_short():
    with pytest.raises(ValueError):
        is_safe([1])