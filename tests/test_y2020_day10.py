import pytest

from aocsolve.y2020.day10 import possibility_counter, solve1, solve2

INPUT_1 = """
16
10
15
5
1
11
7
19
6
12
4
""".strip()

INPUT_2 = """
1
2
3
4
7
8
9
10
11
14
17
18
19
20
23
24
25
28
31
33
32
34
35
38
39
42
45
46
47
48
49
""".strip()


@pytest.mark.parametrize("inp, expected", [(INPUT_1, 8), (INPUT_2, 19208)])
def test_solve2(inp, expected):
    assert solve2(inp) == expected


@pytest.mark.parametrize("inp, expected", [(INPUT_1, 35), (INPUT_2, 220)])
def test_solve1(inp, expected):
    assert solve1(inp) == expected


def test_possibility_counter_no_valid_chain():
    assert possibility_counter(0, 5, [1]) == 0


def test_possibility_counter_counts_all_when_gap_small():
    path = [1, 2]
    assert possibility_counter(0, 3, path) == 2 ** len(path)