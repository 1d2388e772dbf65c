import pytest

from aocsolve.y2019.day06 import solve1, solve2

INPUT = """
COM)B
B)C
C)D
D)E
E)F
B)G
G)H
D)I
E)J
J)K
K)L
""".strip()

INPUT_2 = """
COM)B
B)C
C)D
D)E
E)F
B)G
G)H
D)I
E)J
J)K
K)L
K)YOU
I)SAN
""".strip()


def test_solve1():
    assert solve1(INPUT) == 42


def test_solve2():
    assert solve2(INPUT_2) == 4


def test_solve2_needs_you_and_santa():
    with pytest.raises(KeyError):
        solve2(INPUT)