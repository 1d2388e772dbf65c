# aocsolve

Solvers for a selection of Advent of Code puzzles from the 2019, 2020 and
2024 events, plus a command that fetches a day's input, runs the solver and
prints the answer.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Which days are covered

| Year | Days |
|------|------|
| 2019 | 1 to 11 |
| 2020 | 1 to 22, 24, 25 (day 25 has only part 1) |
| 2024 | 1, 2, 3, 4, 5, 7, 9, 10 |

Days not listed have no solver; asking the command for one of them exits
with an error.

## Using the solvers from Python

Every day lives in its own module, `aocsolve.y2019.dayNN`,
`aocsolve.y2020.dayNN` or `aocsolve.y2024.dayNN` (two-digit day number,
for example `aocsolve.y2020.day07`). Each module has `solve1(inp)` and
`solve2(inp)`, which take the puzzle input as a string with surrounding
whitespace already trimmed and return the answer. Most answers are
integers; a few are strings (for example the rendered images of 2019
days 8 and 11), 2019 day 9 returns the list of program outputs, and
2020 day 25 `solve2` returns `None`.

```python
from aocsolve.y2020 import day15

print(day15.solve1("0,3,6"))
```

Some days also expose their building blocks. The Intcode machine shared
by the 2019 puzzles is in `aocsolve.y2019.intcode`:

```python
from aocsolve.y2019.intcode import Computer, parse_intcode, quick_run

print(quick_run(parse_intcode("104,1125899906842624,99"), []))

computer = Computer(parse_intcode("3,9,8,9,10,9,4,9,99,-1,8"), [8])
computer.run()          # True once the program has halted
print(computer.outputs)
```

`Computer.run()` stops either when the program halts (returning `True`)
or when it needs input that has not been supplied (returning `False`), so
more input can be appended to `computer.inputs` and `run()` called again.

Shared helpers:

- `aocsolve.xy` has `XY`, an integer grid coordinate with `add`, `mul`,
  `unit`, `out_of_bounds`, Manhattan distances, `rotate_unit_vector`
  (eighth turns, clockwise with y growing downwards) and `quadrant`, plus
  direction constants such as `UP`, `RIGHT` and `ALL_DIRS`, and
  `grid_size(rows)`.
- `aocsolve.parsing` has `parse_int`, `split_parse`, `split_parse_int`,
  `split_parse_int2` and `to_json`.

Malformed input raises `ValueError` (or `RuntimeError` for an Intcode
program that misbehaves in 2019 day 11).

## Using the command

```
aocsolve --help
aocsolve 5          # 2024 day 5, part 1
aocsolve -y 2020 13 2
aocsolve -o 7 2     # read the input from ./cur_day
```

Arguments are the day and, optionally, the part (1 or 2, default 1).
`-y`/`--year` chooses the year and defaults to 2024.

The command prints its progress, times the solver and prints the answer.

Fetching the input needs your Advent of Code session cookie. It is read
from the `COOKIE` environment variable or, failing that, from the file
`.conf/.cookie` in the current directory; without either the command
exits with an error. With `-o`/`--offline` no cookie is needed and the
input is read from a file named `cur_day` in the current directory.

The command does not save fetched input anywhere and does not submit
answers.