"""Pile transitions for the Invader deck."""

from __future__ import annotations

import logging
from collections import Counter
from typing import List

from .cards import Card, Nation
from .state import SEARCH_ORDER, InvaderState, PileName, immigration_open

logger = logging.getLogger(__name__)

__all__ = [
    "PileInvariantError",
    "ravage_target",
    "explore",
    "locate",
    "take",
    "relocate",
    "reveal_russia",
    "check_invariants",
]


class PileInvariantError(RuntimeError):
    """Raised when a caller references a card or position that does not exist."""


def ravage_target(state: InvaderState) -> PileName:
    """Return the pile that receives the ravage cohort on the next explore."""

    if immigration_open(state.config, state.ravage):
        return PileName.IMMIGRATION
    return PileName.RAVAGE


def _drain(source: List[Card], destination: List[Card], *, keep: Card | None = None) -> None:
    """Append every card of ``source`` to ``destination`` except ``keep``."""

    moving = [card for card in source if card != keep]
    source[:] = [card for card in source if card == keep]
    destination.extend(moving)


def explore(state: InvaderState) -> bool:
    """Handle a tap on the explore pile.

    The first tap reveals the top card. The next tap advances every cohort by
    one slot, oldest first, so no card can skip a pile. Returns ``True`` when
    the piles moved.
    """

    if not state.explore_revealed:
        state.explore_revealed = True
        logger.debug("explore top revealed: %s", state.explore[-1].value if state.explore else "-")
        return False
    if not state.explore:
        return False

    target = ravage_target(state)
    if target == PileName.RAVAGE:
        _drain(state.ravage, state.discard, keep=Card.HABSBURG_MINING)
    else:
        _drain(state.immigration, state.discard)
        _drain(state.ravage, state.immigration)
    _drain(state.building, state.ravage)
    drawn = state.explore.pop()
    state.building.append(drawn)
    state.explore_revealed = False

    logger.debug(
        "explored %s via %s: building=%d ravage=%d immigration=%d discard=%d",
        drawn.value,
        target.value,
        len(state.building),
        len(state.ravage),
        len(state.immigration),
        len(state.discard),
    )
    return True


def locate(state: InvaderState, card: Card) -> PileName:
    """Return the pile holding ``card``."""

    for name in SEARCH_ORDER:
        if card in state.pile(name):
            return name
    raise PileInvariantError(f"{card.value} is not in any pile")


def take(state: InvaderState, card: Card) -> PileName:
    """Lift ``card`` out of its pile and return where it came from."""

    source = locate(state, card)
    state.pile(source).remove(card)
    if source == PileName.EXPLORE:
        state.explore_revealed = False
    elif source == PileName.RUSSIA_HIDDEN:
        state.russia_revealed = False
    return source


def relocate(state: InvaderState, card: Card, destination: PileName) -> PileName:
    """Move ``card`` from wherever it lies onto the top of ``destination``."""

    source = take(state, card)
    state.pile(destination).append(card)
    logger.debug("moved %s from %s to %s", card.value, source.value, destination.value)

    if (
        state.config.nation == Nation.ENGLAND
        and state.config.level == 3
        and any(entry.generation == 2 for entry in state.immigration)
    ):
        logger.debug("stage II card reached immigration; flushing %d card(s)", len(state.immigration))
        _drain(state.immigration, state.discard)
    return source


def reveal_russia(state: InvaderState) -> bool:
    """Flip the top card of the Russian pile face up or back down."""

    state.russia_revealed = not state.russia_revealed
    return state.russia_revealed


def check_invariants(state: InvaderState, expected_total: int | None = None) -> None:
    """Raise ``PileInvariantError`` if a card is duplicated or cards went missing.

    ``expected_total`` counts cards in piles plus cards removed from the game.
    """

    seen: Counter[Card] = Counter()
    for _, cards in state.iter_piles():
        seen.update(cards)
    seen.update(state.removed)
    duplicates = sorted(card.value for card, count in seen.items() if count > 1)
    if duplicates:
        raise PileInvariantError(f"cards present more than once: {', '.join(duplicates)}")
    if expected_total is not None:
        total = state.total_cards() + len(state.removed)
        if total != expected_total:
            raise PileInvariantError(f"expected {expected_total} card(s), found {total}")
