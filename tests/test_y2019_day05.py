from aocsolve.y2019.day05 import diagnostic_code, solve1, solve2

ECHO = "3,0,4,0,99"


def test_echo_program_returns_input():
    assert diagnostic_code(7, ECHO) == 7


def test_system_ids():
    assert solve1(ECHO) == 1
    assert solve2(ECHO) == 5


def test_zero_outputs_are_skipped():
    assert diagnostic_code(1, "104,0,104,0,104,42,99") == 42


def test_only_zero_outputs():
    assert diagnostic_code(9, "104,0,99") == 0