"""Space image format: layered digit images."""

from __future__ import annotations

from collections import Counter

TRANSPARENT = 2


def parse_image(inp: str, width: int, height: int) -> tuple[list[list[list[int]]], list[Counter]]:
    """Split digits into layers.

    Returns the image as rows of pixels, each pixel listing its value in every
    layer from front to back, and a digit count for each layer.
    """
    size = width * height
    if size <= 0 or len(inp) % size:
        raise ValueError(f"input of length {len(inp)} is not a whole number of {width}x{height} layers")
    digits = [int(char) for char in inp]
    layers = [digits[start:start + size] for start in range(0, len(digits), size)]
    board = [
        [[layer[row * width + col] for layer in layers] for col in range(width)]
        for row in range(height)
    ]
    return board, [Counter(layer) for layer in layers]


def generic_solve1(inp: str, width: int, height: int) -> int:
    """Ones times twos in the layer with the fewest zeros."""
    _, counts = parse_image(inp, width, height)
    if not counts:
        raise ValueError("image has no layers")
    layer = min(counts, key=lambda c: c[0])
    return layer[1] * layer[2]


def solve1(inp: str) -> int:
    return generic_solve1(inp, 25, 6)


def _visible(pixel: list[int]) -> str:
    value = next((v for v in pixel if v != TRANSPARENT), None)
    return "" if value is None else str(value)


def solve2(inp: str) -> str:
    """Render the image using the first non-transparent layer of each pixel."""
    board, _ = parse_image(inp, 25, 6)
    return "\n".join("".join(_visible(pixel) for pixel in row) for row in board)