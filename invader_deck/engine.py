"""Serialised entry point used by user interfaces."""

from __future__ import annotations

import logging
import random
import threading
from typing import Any

from . import events, rules
from .cards import Card, NationConfig
from .state import InvaderState, PileName, TableSnapshot, deal_new_game

logger = logging.getLogger(__name__)

__all__ = ["InvaderEngine"]


class InvaderEngine:
    """Own one game's piles and apply every mutation under a single lock.

    Each public call returns a fresh :class:`TableSnapshot` so callers can
    re-render without touching the live lists.
    """

    def __init__(self, config: NationConfig | None = None, *, seed: int | None = None, rng: Any = None) -> None:
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self._lock = threading.RLock()
        self._state = deal_new_game(config or NationConfig(), self.rng)
        self._dealt = self._state.total_cards()

    @property
    def config(self) -> NationConfig:
        return self._state.config

    @property
    def dealt(self) -> int:
        """Number of cards placed into piles when the current game started."""

        return self._dealt

    def new_game(self, config: NationConfig | None = None) -> TableSnapshot:
        """Rebuild the deck, keeping the current config when none is given."""

        with self._lock:
            self._state = deal_new_game(config or self._state.config, self.rng)
            self._dealt = self._state.total_cards()
            return self._state.snapshot()

    def snapshot(self) -> TableSnapshot:
        with self._lock:
            return self._state.snapshot()

    def explore(self) -> TableSnapshot:
        with self._lock:
            rules.explore(self._state)
            return self._state.snapshot()

    def relocate(self, card: Card, destination: PileName) -> TableSnapshot:
        with self._lock:
            rules.relocate(self._state, card, destination)
            return self._state.snapshot()

    def reveal_russia(self) -> TableSnapshot:
        with self._lock:
            rules.reveal_russia(self._state)
            return self._state.snapshot()

    def fractured_days_split_the_sky(self, card: Card) -> TableSnapshot:
        with self._lock:
            events.fractured_days_split_the_sky(self._state, card)
            return self._state.snapshot()

    def hard_working_settlers(self) -> tuple[list[Card], TableSnapshot]:
        with self._lock:
            removed = events.hard_working_settlers(self._state)
            return removed, self._state.snapshot()

    def rising_interest_in_the_island(self) -> tuple[Card, TableSnapshot]:
        with self._lock:
            card = events.rising_interest_in_the_island(self._state)
            return card, self._state.snapshot()

    def visions_of_a_shifting_future(self) -> tuple[bool, TableSnapshot]:
        with self._lock:
            swapped = events.visions_of_a_shifting_future(self._state, self.rng)
            return swapped, self._state.snapshot()

    def check(self) -> None:
        """Verify that no card was duplicated or lost since the deal."""

        with self._lock:
            rules.check_invariants(self._state, self._dealt)

    def state_copy(self) -> InvaderState:
        with self._lock:
            return self._state.clone_shallow()
