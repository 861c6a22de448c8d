"""Deterministic stand-ins for the random sources used by the engine."""

from __future__ import annotations

from typing import List

from invader_deck.cards import Card


class IdentityShuffle:
    """Leaves every tier in its printed order."""

    def shuffle(self, seq: List[Card]) -> None:
        return None


class ReverseShuffle:
    def shuffle(self, seq: List[Card]) -> None:
        seq.reverse()


class FrontShuffle:
    """Moves ``card`` to the front of whichever tier holds it."""

    def __init__(self, card: Card) -> None:
        self.card = card

    def shuffle(self, seq: List[Card]) -> None:
        if self.card in seq:
            seq.remove(self.card)
            seq.insert(0, self.card)


class FixedRandom:
    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value
