"""Invader deck construction for every adversary and level."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any

from .cards import TIER_ONE, TIER_THREE, TIER_TWO, Card, Nation, NationConfig

logger = logging.getLogger(__name__)

__all__ = ["DeckLayout", "build_deck"]

HABSBURG_SLOT = 4
MINING_SLOT = 1


@dataclass(slots=True)
class DeckLayout:
    """Result of building a deck.

    ``explore`` is ordered bottom to top: the last element is the next card to
    be drawn. ``set_aside`` holds the cards removed from the second and third
    tier, in that order, for adversaries that bring them back later.
    """

    explore: list[Card]
    set_aside: tuple[Card, Card]
    tier1_removed: Card
    pre_discarded: list[Card] = field(default_factory=list)

    @property
    def tier2_removed(self) -> Card:
        return self.set_aside[0]

    @property
    def tier3_removed(self) -> Card:
        return self.set_aside[1]


def _stack(first: list[Card], second: list[Card], third: list[Card]) -> list[Card]:
    return [*first, *second, *third]


def _interleave(first: list[Card], second: list[Card], third: list[Card]) -> list[Card]:
    """Stack tier one, then alternate tier two and tier three cards."""

    deck = list(first)
    for index, card in enumerate(second):
        deck.append(card)
        deck.append(third[index])
    deck.append(third[-1])
    return deck


def build_deck(config: NationConfig, rng: Any = None) -> DeckLayout:
    """Shuffle the three tiers and assemble the explore pile for ``config``.

    ``rng`` only needs a ``shuffle(list)`` method; a fresh ``random.Random``
    is used when omitted.
    """

    if rng is None:
        rng = random.Random()

    first = list(TIER_ONE)
    second = list(TIER_TWO)
    third = list(TIER_THREE)
    rng.shuffle(first)
    rng.shuffle(second)
    rng.shuffle(third)

    first_removed = first.pop(0)
    second_removed = second.pop(0)
    third_removed = third.pop(0)

    match config.nation, config.level:
        case Nation.BRANDENBURG, level if level > 1:
            first.append(third.pop(0))
            if level >= 3:
                first.pop(0)
            if level >= 4:
                second.pop(0)
            if level >= 5:
                first.pop(0)
            if level >= 6:
                first.pop(0)
            deck = _stack(first, second, third)
        case Nation.RUSSLAND, level if level >= 4:
            deck = _interleave(first, second, third)
        case Nation.HABSBURG, level if level >= 3:
            first.pop(0)
            deck = _stack(first, second, third)
            if level >= 5:
                deck.insert(HABSBURG_SLOT, Card.HABSBURG)
        case Nation.HABSBURG_MINING, level if level >= 4:
            second = [second_removed if card == Card.COAST else card for card in second]
            second[MINING_SLOT] = Card.HABSBURG_MINING
            deck = _stack(first, second, third)
        case _:
            deck = _stack(first, second, third)

    explore = list(reversed(deck))
    pre_discarded: list[Card] = []
    if config.plays(Nation.SCHWEDEN, 4):
        pre_discarded.append(explore.pop())

    logger.debug(
        "built %s deck: %d explore card(s), set aside %s/%s",
        config.label(),
        len(explore),
        second_removed.value,
        third_removed.value,
    )
    return DeckLayout(
        explore=explore,
        set_aside=(second_removed, third_removed),
        tier1_removed=first_removed,
        pre_discarded=pre_discarded,
    )
