"""Allergen assessment of food ingredient lists."""

from __future__ import annotations

from collections import Counter

_MARKER = " (contains "


def _parse(inp: str) -> tuple[dict[str, set[str]], Counter]:
    """Possible ingredients for each allergen and how often each ingredient appears."""
    candidates: dict[str, set[str]] = {}
    counts: Counter = Counter()
    for line in inp.split("\n"):
        if not line.endswith(")") or _MARKER not in line:
            raise ValueError(f"bad food line {line!r}")
        ingredient_text, _, allergen_text = line[:-1].partition(_MARKER)
        ingredients = ingredient_text.split(" ")
        counts.update(ingredients)
        for allergen in allergen_text.split(", "):
            if allergen in candidates:
                candidates[allergen] &= set(ingredients)
            else:
                candidates[allergen] = set(ingredients)
    return candidates, counts


def solve1(inp: str) -> int:
    """Occurrences of ingredients that cannot contain any allergen."""
    candidates, counts = _parse(inp)
    suspicious = set().union(*candidates.values())
    return sum(count for name, count in counts.items() if name not in suspicious)


def solve2(inp: str) -> str:
    """Dangerous ingredients, comma separated, ordered by their allergen."""
    candidates, _ = _parse(inp)
    resolved: dict[str, str] = {}
    while candidates:
        progress = False
        taken = set(resolved.values())
        for allergen, ingredients in list(candidates.items()):
            ingredients -= taken
            if len(ingredients) == 1:
                ingredient = ingredients.pop()
                resolved[allergen] = ingredient
                taken.add(ingredient)
                del candidates[allergen]
                progress = True
        if not progress:
            raise ValueError("allergens cannot be resolved")
    return ",".join(resolved[a] for a in sorted(resolved))