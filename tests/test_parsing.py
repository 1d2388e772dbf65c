import json

import pytest

from aocsolve.parsing import (
    parse_int,
    split_parse,
    split_parse_int,
    split_parse_int2,
    to_json,
)


@pytest.mark.parametrize("text, expected", [("42", 42), ("-7", -7), ("+3", 3), ("007", 7)])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "abc", "1.5", "--1"])
def test_parse_int_rejects(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_split_parse_int():
    assert split_parse_int("1,2,3", ",") == [1, 2, 3]
    assert split_parse_int("10\n-20", "\n") == [10, -20]


def test_split_parse_int_bad_piece():
    with pytest.raises(ValueError):
        split_parse_int("1,,3", ",")


def test_split_parse_int2():
    assert split_parse_int2("1 2|3 4", "|", " ") == [[1, 2], [3, 4]]


def test_split_parse_generic():
    assert split_parse("ab-cd", "-", str.upper) == ["AB", "CD"]


def test_to_json_round_trip():
    value = {"a": [1, 2], "b": "x"}
    text = to_json(value)
    assert json.loads(text) == value
    assert "\n\t" in text