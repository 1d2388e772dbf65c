"""Crab Combat card games."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice

from aocsolve.parsing import parse_int


@dataclass
class Game:
    """Two players' decks, top card first."""

    decks: list[deque]

    def __post_init__(self) -> None:
        self.decks = [deque(deck) for deck in self.decks]

    def _winner(self) -> int | None:
        if not self.decks[0]:
            return 2
        if not self.decks[1]:
            return 1
        return None

    def _award(self, player: int) -> None:
        winner, loser = self.decks[player - 1], self.decks[2 - player]
        winner.append(winner.popleft())
        winner.append(loser.popleft())

    def _regular_round(self) -> None:
        self._award(1 if self.decks[0][0] > self.decks[1][0] else 2)

    def _can_recurse(self) -> bool:
        return all(deck[0] < len(deck) for deck in self.decks)

    def combat(self) -> int:
        """Play plain Combat to the end; returns the winning player (1 or 2)."""
        while (winner := self._winner()) is None:
            self._regular_round()
        return winner

    def recursive_combat(self) -> int:
        """Play Recursive Combat to the end; returns the winning player (1 or 2)."""
        seen: set[tuple[tuple[int, ...], tuple[int, ...]]] = set()
        while (winner := self._winner()) is None:
            state = (tuple(self.decks[0]), tuple(self.decks[1]))
            if state in seen:
                return 1
            seen.add(state)
            if self._can_recurse():
                sub = Game([list(islice(deck, 1, deck[0] + 1)) for deck in self.decks])
                self._award(sub.recursive_combat())
            else:
                self._regular_round()
        return winner

    def score(self, winner: int) -> int:
        """Score of the given player's deck: each card times its position from the bottom."""
        deck = self.decks[winner - 1]
        return sum(card * position for position, card in enumerate(reversed(deck), 1))


def _parse(inp: str) -> Game:
    blocks = inp.split("\n\n")
    if len(blocks) != 2:
        raise ValueError("expected two players")
    return Game([[parse_int(line) for line in block.split("\n")[1:]] for block in blocks])


def solve1(inp: str) -> int:
    game = _parse(inp)
    return game.score(game.combat())


def solve2(inp: str) -> int:
    game = _parse(inp)
    return game.score(game.recursive_combat())