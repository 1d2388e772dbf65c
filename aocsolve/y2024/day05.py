"""Print queue: page ordering rules."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from aocsolve.parsing import split_parse_int, split_parse_int2


@dataclass
class Config:
    """For each page, the pages that must come before it, and the updates to check."""

    num_deps: dict[int, list[int]] = field(default_factory=dict)
    lists: list[list[int]] = field(default_factory=list)

    def _meets_deps(self, n: int, present: set[int], used: set[int]) -> bool:
        return all(d in used for d in self.num_deps.get(n, ()) if d in present)

    def is_list_right(self, pages: list[int]) -> bool:
        """True if every page comes after all its present dependencies."""
        present = set(pages)
        used: set[int] = set()
        for n in pages:
            if not self._meets_deps(n, present, used):
                return False
            used.add(n)
        return True

    def make_list_right(self, pages: list[int]) -> list[int]:
        """Reorder pages so the rules hold, deferring pages until they may be placed."""
        present = set(pages)
        used: set[int] = set()
        waiting: list[int] = []
        ordered: list[int] = []

        def drain() -> None:
            nonlocal waiting
            while True:
                still: list[int] = []
                for r in waiting:
                    if self._meets_deps(r, present, used):
                        used.add(r)
                        ordered.append(r)
                    else:
                        still.append(r)
                if len(still) == len(waiting):
                    return
                waiting = still

        for n in pages:
            drain()
            if not self._meets_deps(n, present, used):
                waiting.append(n)
                continue
            used.add(n)
            ordered.append(n)

        drain()
        if waiting:
            raise ValueError(f"pages {waiting} cannot be ordered")
        return ordered


def _parse_input(inp: str) -> Config:
    rules, sep, updates = inp.partition("\n\n")
    if not sep:
        raise ValueError("expected rules and updates separated by a blank line")
    deps: dict[int, list[int]] = defaultdict(list)
    for line in rules.split("\n"):
        before, after = split_parse_int(line, "|")
        deps[after].append(before)
    return Config(dict(deps), split_parse_int2(updates, "\n", ","))


def solve1(inp: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    cfg = _parse_input(inp)
    return sum(p[len(p) // 2] for p in cfg.lists if cfg.is_list_right(p))


def solve2(inp: str) -> int:
    """Sum of middle pages of the wrongly ordered updates after fixing them."""
    cfg = _parse_input(inp)
    total = 0
    for pages in cfg.lists:
        if cfg.is_list_right(pages):
            continue
        fixed = cfg.make_list_right(pages)
        total += fixed[len(fixed) // 2]
    return total