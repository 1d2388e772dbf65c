import pytest

from aocsolve.y2020.day16 import Rule, solve1, solve2, validate_ticket

EXAMPLE_1 = """class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12"""

EXAMPLE_2 = """departure class: 0-1 or 4-19
row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9"""

RULES = [Rule("a", ((1, 3), (5, 7))), Rule("b", ((6, 11),))]


def test_rule_check_inclusive_bounds():
    rule = RULES[0]
    assert rule.check(1) and rule.check(3) and rule.check(5) and rule.check(7)
    assert not rule.check(4)
    assert not rule.check(0)
    assert not rule.check(8)


def test_validate_ticket_collects_all_bad_values():
    bad = []
    result = validate_ticket(RULES, [2, 4, 9, 20], lambda v: bad.append(v) or False)
    assert result is False
    assert bad == [4, 20]


def test_validate_ticket_stops_early():
    bad = []

    def stop(value):
        bad.append(value)
        return True

    assert validate_ticket(RULES, [4, 20], stop) is False
    assert bad == [4]


def test_validate_ticket_all_good():
    assert validate_ticket(RULES, [1, 6, 11], lambda v: True) is True


def test_solve1_example():
    assert solve1(EXAMPLE_1) == 71


def test_solve2_picks_departure_field():
    assert solve2(EXAMPLE_2) == 12


def test_solve2_without_departure_fields_is_empty_product():
    inp = EXAMPLE_2.replace("departure class", "class")
    assert solve2(inp) == 1


def test_solve2_ambiguous_fields_raise():
    inp = "departure a: 0-50\nb: 0-50\n\nyour ticket:\n1,2\n\nnearby tickets:\n3,4"
    with pytest.raises(ValueError):
        solve2(inp)