"""Command line entry point: fetch a day's input and run its solver."""

from __future__ import annotations

import argparse
import os
import time
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Callable

from aocsolve.y2019 import day01 as d19_01
from aocsolve.y2019 import day02 as d19_02
from aocsolve.y2019 import day03 as d19_03
from aocsolve.y2019 import day04 as d19_04
from aocsolve.y2019 import day05 as d19_05
from aocsolve.y2019 import day06 as d19_06
from aocsolve.y2019 import day07 as d19_07
from aocsolve.y2019 import day08 as d19_08
from aocsolve.y2019 import day09 as d19_09
from aocsolve.y2019 import day10 as d19_10
from aocsolve.y2019 import day11 as d19_11
from aocsolve.y2020 import day01 as d20_01
from aocsolve.y2020 import day02 as d20_02
from aocsolve.y2020 import day03 as d20_03
from aocsolve.y2020 import day04 as d20_04
from aocsolve.y2020 import day05 as d20_05
from aocsolve.y2020 import day06 as d20_06
from aocsolve.y2020 import day07 as d20_07
from aocsolve.y2020 import day08 as d20_08
from aocsolve.y2020 import day09 as d20_09
from aocsolve.y2020 import day10 as d20_10
from aocsolve.y2020 import day11 as d20_11
from aocsolve.y2020 import day12 as d20_12
from aocsolve.y2020 import day13 as d20_13
from aocsolve.y2020 import day14 as d20_14
from aocsolve.y2020 import day15 as d20_15
from aocsolve.y2020 import day16 as d20_16
from aocsolve.y2020 import day17 as d20_17
from aocsolve.y2020 import day18 as d20_18
from aocsolve.y2020 import day19 as d20_19
from aocsolve.y2020 import day20 as d20_20
from aocsolve.y2020 import day21 as d20_21
from aocsolve.y2020 import day22 as d20_22
from aocsolve.y2020 import day24 as d20_24
from aocsolve.y2020 import day25 as d20_25
from aocsolve.y2024 import day01 as d24_01
from aocsolve.y2024 import day02 as d24_02
from aocsolve.y2024 import day03 as d24_03
from aocsolve.y2024 import day04 as d24_04
from aocsolve.y2024 import day05 as d24_05
from aocsolve.y2024 import day07 as d24_07
from aocsolve.y2024 import day09 as d24_09
from aocsolve.y2024 import day10 as d24_10

Solver = Callable[[str], Any]

BASE_URL = "https://adventofcode.com"
DEFAULT_YEAR = 2024
INPUT_FILE = "cur_day"
COOKIE_FILE = Path(".conf") / ".cookie"

_MODULES = {
    2019: {
        1: d19_01, 2: d19_02, 3: d19_03, 4: d19_04, 5: d19_05, 6: d19_06,
        7: d19_07, 8: d19_08, 9: d19_09, 10: d19_10, 11: d19_11,
    },
    2020: {
        1: d20_01, 2: d20_02, 3: d20_03, 4: d20_04, 5: d20_05, 6: d20_06,
        7: d20_07, 8: d20_08, 9: d20_09, 10: d20_10, 11: d20_11, 12: d20_12,
        13: d20_13, 14: d20_14, 15: d20_15, 16: d20_16, 17: d20_17, 18: d20_18,
        19: d20_19, 20: d20_20, 21: d20_21, 22: d20_22, 24: d20_24, 25: d20_25,
    },
    2024: {
        1: d24_01, 2: d24_02, 3: d24_03, 4: d24_04, 5: d24_05, 7: d24_07,
        9: d24_09, 10: d24_10,
    },
}

# Parts that have no puzzle of their own.
_EMPTY_PARTS = {(2020, 25, 2)}

SOLVERS: dict[int, dict[str, Solver]] = {
    year: {
        f"{day}-{part}": solver
        for day, module in modules.items()
        for part, solver in enumerate((module.solve1, module.solve2), 1)
        if (year, day, part) not in _EMPTY_PARTS
    }
    for year, modules in _MODULES.items()
}


def get_solver(year: int, day: int, part: int) -> Solver:
    """The solver for a year, day and part; LookupError if there is none."""
    try:
        return SOLVERS[year][f"{day}-{part}"]
    except KeyError:
        raise LookupError(f"no solver for {year} day {day} part {part}") from None


def fetch_input(year: int, day: int, cookie: str) -> str:
    """Download a day's puzzle input using the session cookie."""
    request = urllib.request.Request(f"{BASE_URL}/{year}/day/{day}/input")
    request.add_header("Cookie", "session=" + cookie)
    try:
        with urllib.request.urlopen(request) as response:
            status = response.status
            body = response.read().decode()
    except urllib.error.HTTPError as exc:
        raise RuntimeError(
            f"Failed to fetch input (status {exc.code}): {exc.read().decode(errors='replace')}"
        ) from None
    except urllib.error.URLError as exc:
        raise RuntimeError(f"Failed to fetch input (err): {exc.reason}") from None
    if status != 200:
        raise RuntimeError(f"Failed to fetch input (status {status}): {body}")
    return body


def _read_cookie() -> str:
    cookie = os.environ.get("COOKIE", "")
    if cookie:
        return cookie
    try:
        return COOKIE_FILE.read_text().strip()
    except FileNotFoundError:
        raise SystemExit("No session cookie: set COOKIE or put it in .conf/.cookie") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aocsolve", description="Solve one puzzle part.")
    parser.add_argument(
        "-o", "--offline", action="store_true", help=f"read the input from the {INPUT_FILE} file"
    )
    parser.add_argument("-y", "--year", type=int, default=DEFAULT_YEAR, help="puzzle year")
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, nargs="?", default=1, choices=(1, 2), help="puzzle part")
    args = parser.parse_args(argv)

    cookie = "" if args.offline else _read_cookie()

    try:
        solve = get_solver(args.year, args.day, args.part)
    except LookupError as exc:
        raise SystemExit(f"That day isn't created yet: {exc}") from None

    print("(1/2) Fetching Input...")
    if args.offline:
        inp = Path(INPUT_FILE).read_text()
    else:
        inp = fetch_input(args.year, args.day, cookie)
    print("---> Fetched")

    print("(2/2) Solving...")
    start = time.perf_counter()
    answer = solve(inp.strip())
    elapsed = time.perf_counter() - start

    print(f"---> Solved ({elapsed:.6f}s)")
    print("<===================================>")
    print(answer)
    return 0