"""Hull painting robot driven by Intcode."""

from __future__ import annotations

from dataclasses import dataclass, field

from aocsolve.xy import UP, XY
from aocsolve.y2019.intcode import Computer, parse_intcode

PAINTED = "█"


@dataclass
class Robot:
    """A robot that reads the panel under it and paints, turns and moves."""

    computer: Computer
    direction: XY = UP
    pos: XY = field(default_factory=XY)

    def run_once(self, world: dict[XY, int]) -> bool:
        """Process one paint/turn cycle; True once the program has halted."""
        self.computer.inputs.append(world.get(self.pos, 0))
        halted = self.computer.run()
        if len(self.computer.outputs) < 2:
            raise RuntimeError("robot program did not produce a colour and a turn")
        colour, turn, *rest = self.computer.outputs
        self.computer.outputs = rest
        world[self.pos] = colour
        self.direction = self.direction.rotate_unit_vector(2 if turn == 1 else -2)
        self.pos = self.pos.add(self.direction)
        return halted


def _paint(inp: str, world: dict[XY, int]) -> dict[XY, int]:
    robot = Robot(Computer(parse_intcode(inp)))
    while not robot.run_once(world):
        pass
    return world


def solve1(inp: str) -> int:
    """Number of panels painted at least once."""
    return len(_paint(inp, {}))


def solve2(inp: str) -> str:
    """Render the hull after starting on a white panel."""
    world = _paint(inp, {XY(): 1})
    low = XY(min(p.x for p in world), min(p.y for p in world))
    high = XY(max(p.x for p in world), max(p.y for p in world))
    shift = low.mul(-1)
    return "\n".join(
        "".join(
            PAINTED if world.get(XY(x, y).add(shift), 0) else " "
            for x in range(high.x - low.x + 1)
        )
        for y in range(high.y - low.y + 1)
    )