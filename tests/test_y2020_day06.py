from aocsolve.y2020.day06 import solve1, solve2

EXAMPLE = "abc\n\na\nb\nc\n\nab\nac\n\na\na\na\na\n\nb"


def test_solve1_example():
    assert solve1(EXAMPLE) == 11


def test_solve2_example():
    assert solve2(EXAMPLE) == 6


def test_single_person_answers_count_in_both_parts():
    assert solve1("abc") == len("abc")
    assert solve2("abc") == len("abc")


def test_everyone_is_never_more_than_anyone():
    inp = "xyz\nxy\n\nq\nqr\nqrs"
    assert solve2(inp) <= solve1(inp)


def test_disjoint_answers_give_no_common_question():
    assert solve2("a\nb") == 0
    assert solve1("a\nb") == len({"a", "b"})