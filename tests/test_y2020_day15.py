import pytest

from aocsolve.y2020.day15 import play_game, solve1


@pytest.mark.parametrize(
    ("inp", "expected"),
    [
        ("1,3,2", 1),
        ("2,1,3", 10),
        ("1,2,3", 27),
        ("2,3,1", 78),
        ("3,2,1", 438),
        ("3,1,2", 1836),
    ],
)
def test_solve1(inp, expected):
    assert solve1(inp) == expected


def test_play_game_stops_at_last_starting_number():
    assert play_game("1,3,2", 3) == 2


def test_play_game_new_number_is_zero():
    assert play_game("1,3,2", 4) == 0


def test_play_game_repeated_start():
    assert play_game("0,0", 3) == 1


def test_play_game_too_few_turns():
    with pytest.raises(ValueError):
        play_game("1,3,2", 2)