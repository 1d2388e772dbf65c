"""Helpers for splitting and parsing puzzle input."""

from __future__ import annotations

import json
import re
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int:
    """Parse a plain decimal integer, with an optional sign and nothing else."""
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"parsing {value!r} as int: invalid syntax")
    return int(value)


def split_parse(inp: str, delim: str, func: Callable[[str], T]) -> list[T]:
    """Split inp on delim and apply func to every piece."""
    return [func(piece) for piece in inp.split(delim)]


def split_parse_int(inp: str, delim: str) -> list[int]:
    return split_parse(inp, delim, parse_int)


def split_parse_int2(inp: str, outer: str, inner: str) -> list[list[int]]:
    """Split on outer, then split each part on inner and parse the integers."""
    return split_parse(inp, outer, lambda part: split_parse_int(part, inner))


def to_json(value: Any) -> str:
    """Tab-indented JSON text of value."""
    return json.dumps(value, indent="\t")