"""Intcode virtual machine."""

from __future__ import annotations

from dataclasses import dataclass, field

from aocsolve.parsing import split_parse_int

# opcode -> number of parameters
PARAM_COUNTS = {1: 3, 2: 3, 3: 1, 4: 1, 5: 2, 6: 2, 7: 3, 8: 3, 9: 1}
# opcodes whose last parameter is an address to write to
WRITE_OPS = frozenset({1, 2, 3, 7, 8})


def parse_intcode(inp: str) -> dict[int, int]:
    """Parse comma separated integers into address -> value memory."""
    return dict(enumerate(split_parse_int(inp, ",")))


@dataclass
class Computer:
    """An Intcode machine with sparse memory and input/output queues."""

    code: dict[int, int]
    inputs: list[int] = field(default_factory=list)
    outputs: list[int] = field(default_factory=list)
    _cur: int = field(default=0, init=False, repr=False)
    _relative_base: int = field(default=0, init=False, repr=False)

    def _read(self, addr: int) -> int:
        return self.code.get(addr, 0)

    def _params(self, opcode: int, instruction: int, count: int) -> list[int]:
        params = []
        for i in range(count):
            mode = instruction // 10 ** (i + 2) % 10
            raw = self._read(self._cur + i + 1)
            if opcode in WRITE_OPS and i == count - 1:
                if mode == 2:
                    raw += self._relative_base
                mode = 1
            if mode == 0:
                params.append(self._read(raw))
            elif mode == 1:
                params.append(raw)
            elif mode == 2:
                params.append(self._read(raw + self._relative_base))
            else:
                raise ValueError(f"Unknown parameter mode {mode}")
        return params

    def _step(self) -> bool:
        instruction = self._read(self._cur)
        opcode = instruction % 100
        count = PARAM_COUNTS.get(opcode, 0)
        p = self._params(opcode, instruction, count)

        match opcode:
            case 1:
                self.code[p[2]] = p[0] + p[1]
            case 2:
                self.code[p[2]] = p[0] * p[1]
            case 3:
                if not self.inputs:
                    return False
                self.code[p[0]] = self.inputs.pop(0)
            case 4:
                self.outputs.append(p[0])
            case 5:
                if p[0] != 0:
                    self._cur = p[1]
                    return True
            case 6:
                if p[0] == 0:
                    self._cur = p[1]
                    return True
            case 7:
                self.code[p[2]] = int(p[0] < p[1])
            case 8:
                self.code[p[2]] = int(p[0] == p[1])
            case 9:
                self._relative_base += p[0]
            case 99:
                return False
            case _:
                raise ValueError(f"Unknown op! {opcode}")

        self._cur += count + 1
        return True

    def run(self) -> bool:
        """Run until halted or starved of input; True if the program halted."""
        while self._step():
            pass
        return self._read(self._cur) == 99


def quick_run(code: dict[int, int], inputs: list[int]) -> list[int]:
    """Run a copy of code with the given inputs and return its outputs."""
    computer = Computer(dict(code), list(inputs))
    computer.run()
    return computer.outputs