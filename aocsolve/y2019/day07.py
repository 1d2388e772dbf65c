"""Amplifier chains driven by Intcode."""

from __future__ import annotations

from itertools import permutations

from aocsolve.y2019.intcode import Computer, parse_intcode, quick_run


def _keep_best(best: int, signal: int) -> int:
    return signal if best == 0 or signal > best else best


def solve1(inp: str) -> int:
    """Highest signal from a straight chain of five amplifiers."""
    code = parse_intcode(inp)
    best = 0
    for setup in permutations((4, 3, 2, 1, 0)):
        signal = 0
        for phase in setup:
            signal = quick_run(code, [phase, signal])[0]
        best = _keep_best(best, signal)
    return best


def _run_feedback(amps: list[Computer]) -> int:
    signal = 0
    while True:
        halted = False
        for amp in amps:
            amp.inputs.append(signal)
            halted = amp.run()
            signal = amp.outputs[0]
            amp.outputs.clear()
        if halted:
            return signal


def solve2(inp: str) -> int:
    """Highest signal from five amplifiers wired in a feedback loop."""
    code = parse_intcode(inp)
    best = 0
    for setup in permutations((5, 6, 7, 8, 9)):
        amps = [Computer(dict(code), [phase]) for phase in setup]
        best = _keep_best(best, _run_feedback(amps))
    return best