"""Event cards that rearrange the explore pile."""

from __future__ import annotations

import logging
import random
from typing import Any

from .cards import Card, Nation
from .rules import PileInvariantError
from .state import InvaderState

logger = logging.getLogger(__name__)

__all__ = [
    "fractured_days_split_the_sky",
    "hard_working_settlers",
    "rising_interest_in_the_island",
    "visions_of_a_shifting_future",
    "rising_interest_depth",
]

SWAP_PROBABILITY = 0.5


def _require_explore(state: InvaderState, event: str) -> None:
    if not state.explore:
        raise PileInvariantError(f"{event} needs at least one explore card")


def fractured_days_split_the_sky(state: InvaderState, card: Card) -> None:
    """Swap ``card`` from the discard pile with the top explore card.

    The explore card goes underneath the discard pile and ``card`` becomes
    the next card to be explored.
    """

    _require_explore(state, "fractured days split the sky")
    if card not in state.discard:
        raise PileInvariantError(f"{card.value} is not in the discard pile")

    state.discard.remove(card)
    state.discard.insert(0, state.explore.pop())
    state.explore.append(card)
    state.explore_revealed = False
    logger.debug("fractured days: %s returned to explore, %s discarded", card.value, state.discard[0].value)


def _remove_first_of_generation(state: InvaderState, generation: int) -> Card | None:
    for index, card in enumerate(state.explore):
        if card.generation == generation:
            return state.explore.pop(index)
    return None


def hard_working_settlers(state: InvaderState) -> list[Card]:
    """Remove the lowest stage II and the lowest stage III card from explore."""

    removed: list[Card] = []
    for generation in (2, 3):
        card = _remove_first_of_generation(state, generation)
        if card is not None:
            removed.append(card)
    state.removed.extend(removed)
    logger.debug("hard working settlers removed %s", [card.value for card in removed])
    return removed


def rising_interest_depth(state: InvaderState) -> int:
    """Return which card from the top (1 = top) Rising Interest removes."""

    _require_explore(state, "rising interest in the island")
    config = state.config
    top = state.explore[-1]
    below = state.explore[:-1]
    stage_two_left = any(card.generation == 2 for card in below)

    match config.nation:
        case Nation.SCHOTTLAND if config.level >= 2:
            if top == Card.COAST:
                return 2
            if top.generation == 1:
                return 3
            if top.generation == 3 and stage_two_left:
                return 3
            return 1
        case Nation.HABSBURG_MINING:
            return 2 if top == Card.HABSBURG_MINING else 1
        case Nation.BRANDENBURG:
            return 2 if top.generation == 3 and stage_two_left else 1
        case _:
            return 1


def rising_interest_in_the_island(state: InvaderState) -> Card:
    """Remove a card near the top of explore, honouring adversary protections.

    When the pile is shallower than the lookback the deepest card goes.
    """

    depth = min(rising_interest_depth(state), len(state.explore))
    card = state.explore.pop(len(state.explore) - depth)
    if depth == 1:
        state.explore_revealed = False
    state.removed.append(card)
    logger.debug("rising interest removed %s (depth %d)", card.value, depth)
    return card


def visions_of_a_shifting_future(state: InvaderState, rng: Any = None) -> bool:
    """Swap the two top explore cards half of the time.

    ``rng`` only needs a ``random()`` method. Returns ``True`` on a swap.
    """

    if len(state.explore) < 2:
        return False
    if rng is None:
        rng = random.Random()
    if rng.random() >= SWAP_PROBABILITY:
        return False
    state.explore[-1], state.explore[-2] = state.explore[-2], state.explore[-1]
    state.explore_revealed = False
    logger.debug("visions swapped explore top to %s", state.explore[-1].value)
    return True
