"""Count passwords in a range that meet digit rules."""

from aocsolve.parsing import split_parse_int


def verify_number(n: int, no_big: bool) -> bool:
    """Digits never decrease and some adjacent pair repeats.

    With no_big the pair must not be part of a longer run.
    """
    digits = str(n)
    double_found = False
    for i, (left, right) in enumerate(zip(digits, digits[1:])):
        if right < left:
            return False
        if left == right:
            if no_big:
                if i > 0 and digits[i - 1] == right:
                    continue
                if i < len(digits) - 2 and digits[i + 2] == right:
                    continue
            double_found = True
    return double_found


def _count(inp: str, no_big: bool) -> int:
    low, high = split_parse_int(inp, "-")[:2]
    return sum(verify_number(n, no_big) for n in range(low, high + 1))


def solve1(inp: str) -> int:
    return _count(inp, False)


def solve2(inp: str) -> int:
    return _count(inp, True)