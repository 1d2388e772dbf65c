"""Disk fragmenter: compact files on a disk map."""

from __future__ import annotations

from aocsolve.parsing import parse_int

FREE = -1


def parse_disk(inp: str) -> list[int]:
    """Expand the dense disk map into blocks holding file ids, FREE for gaps."""
    disk: list[int] = []
    for i, ch in enumerate(inp):
        size = parse_int(ch)
        disk.extend([i // 2 if i % 2 == 0 else FREE] * size)
    return disk


def disk_checksum(disk: list[int]) -> int:
    return sum(i * v for i, v in enumerate(disk) if v != FREE)


def solve1(inp: str) -> int:
    """Checksum after moving blocks one at a time into the leftmost gap."""
    disk = parse_disk(inp)
    free = 0
    for i in range(len(disk) - 1, -1, -1):
        while free < len(disk) and disk[free] != FREE:
            free += 1
        if free >= len(disk) or free >= i:
            break
        disk[free], disk[i] = disk[i], FREE
    return disk_checksum(disk)


def _run_length(disk: list[int], start: int, value: int, step: int) -> int:
    length = 0
    i = start
    while 0 <= i < len(disk) and disk[i] == value:
        length += 1
        i += step
    return length


def solve2(inp: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits them."""
    disk = parse_disk(inp)
    i = len(disk) - 1
    while i >= 0:
        if disk[i] == FREE:
            i -= 1
            continue
        block = _run_length(disk, i, disk[i], -1)
        for j in range(min(len(disk), i)):
            if disk[j] != FREE:
                continue
            if _run_length(disk, j, FREE, 1) < block:
                continue
            for k in range(block):
                disk[j + k] = disk[i - k]
                disk[i - k] = FREE
            break
        i -= block
    return disk_checksum(disk)