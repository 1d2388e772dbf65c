import pytest

from aocsolve.y2020.day07 import parse_input, solve1, solve2


def _rules(spec):
    lines = []
    for outer, contents in spec:
        if not contents:
            lines.append(f"{outer} bags contain no other bags.")
            continue
        parts = ", ".join(
            f"{count} {inner} bag{'' if count == 1 else 's'}"
            for count, inner in contents
        )
        lines.append(f"{outer} bags contain {parts}.")
    return "\n".join(lines)


INPUT = _rules(
    [
        ("light red", [(1, "bright white"), (2, "muted yellow")]),
        ("dark orange", [(3, "bright white"), (4, "muted yellow")]),
        ("bright white", [(1, "shiny gold")]),
        ("muted yellow", [(2, "shiny gold"), (9, "faded blue")]),
        ("shiny gold", [(1, "dark olive"), (2, "vibrant plum")]),
        ("dark olive", [(3, "faded blue"), (4, "dotted black")]),
        ("vibrant plum", [(5, "faded blue"), (6, "dotted black")]),
        ("faded blue", []),
        ("dotted black", []),
    ]
)

_CHAIN = ["shiny gold", "dark red", "dark orange", "dark yellow",
          "dark green", "dark blue", "dark violet"]

INPUT_2 = _rules(
    [(outer, [(2, inner)]) for outer, inner in zip(_CHAIN, _CHAIN[1:])]
    + [(_CHAIN[-1], [])]
)


def test_solve1():
    assert solve1(INPUT) == 4


def test_solve2():
    assert solve2(INPUT_2) == 126


def test_parse_input_resolves_direct_contents():
    bags = parse_input(INPUT_2)
    assert bags["shiny gold"].direct_deps == [(2, "dark red")]
    assert bags["shiny gold"].resolved_deps["dark red"] == 2
    assert bags["dark violet"].resolved_deps == {}


def test_bad_rule_raises():
    with pytest.raises(ValueError):
        parse_input("this is not a rule")