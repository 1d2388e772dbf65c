"""Handheld console boot code."""

from __future__ import annotations

from dataclasses import dataclass, field


def _argument(instruction: str) -> int:
    try:
        return int(instruction[4:])
    except ValueError:
        return 0


@dataclass
class Machine:
    """Executes acc/jmp/nop instructions, remembering visited lines."""

    instructions: list[str]
    acc: int = field(default=0, init=False)
    index: int = field(default=0, init=False)
    last_index: int = field(default=0, init=False)
    history: set[int] = field(default_factory=set, init=False)

    def reset(self) -> None:
        self.acc = 0
        self.index = 0
        self.last_index = 0
        self.history = set()

    def step(self) -> None:
        """Execute the current instruction."""
        self.history.add(self.index)
        current = self.instructions[self.index]
        n = _argument(current)
        self.last_index = self.index
        self.index += 1
        op = current[:3]
        if op == "acc":
            self.acc += n
        elif op == "jmp":
            self.index += n - 1

    def run_until_loop(self) -> bool:
        """Run until an instruction repeats (True) or the program ends (False)."""
        while True:
            self.step()
            if self.index in self.history:
                return True
            if self.index >= len(self.instructions):
                return False


def _flip(machine: Machine, i: int) -> None:
    old = machine.instructions[i]
    op = old[:3]
    if op == "jmp":
        new = "nop"
    elif op == "nop":
        new = "jmp"
    else:
        raise ValueError("Somehow last instruction was acc")
    machine.instructions[i] = new + old[3:]


def solve1(inp: str) -> int:
    """Accumulator value just before any instruction runs twice."""
    machine = Machine(inp.split("\n"))
    machine.run_until_loop()
    return machine.acc


def solve2(inp: str) -> int:
    """Accumulator after fixing the one jmp/nop that makes the program end."""
    machine = Machine(inp.split("\n"))
    machine.run_until_loop()
    candidates = sorted(
        h for h in machine.history if machine.instructions[h][:3] != "acc"
    )
    for candidate in candidates:
        machine.reset()
        _flip(machine, candidate)
        if not machine.run_until_loop():
            return machine.acc
        _flip(machine, candidate)
    raise ValueError("no single jmp/nop change lets the program end")