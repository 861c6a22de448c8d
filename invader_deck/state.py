"""Pile state and read model for the Invader deck."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Sequence

from .cards import Card, Nation, NationConfig
from .deck import build_deck

logger = logging.getLogger(__name__)


class PileName(str, Enum):
    """Named piles on the Invader board."""

    EXPLORE = "explore"
    BUILDING = "building"
    RAVAGE = "ravage"
    DISCARD = "discard"
    IMMIGRATION = "immigration"
    RUSSIA_HIDDEN = "russia_hidden"


def immigration_open(config: NationConfig, ravage: Sequence[Card]) -> bool:
    """Return ``True`` when the ravage cohort should slide into immigration.

    England 4+ always detours. At England 3 the detour stays open only while
    the card leaving ravage is a stage I card (or ravage is empty).
    """

    if config.plays(Nation.ENGLAND, 4):
        return True
    if config.nation == Nation.ENGLAND and config.level == 3:
        return not ravage or ravage[-1].generation <= 1
    return False


# Order in which piles are searched when a card is picked up.
SEARCH_ORDER: tuple[PileName, ...] = (
    PileName.RAVAGE,
    PileName.EXPLORE,
    PileName.IMMIGRATION,
    PileName.DISCARD,
    PileName.BUILDING,
    PileName.RUSSIA_HIDDEN,
)


@dataclass(frozen=True, slots=True)
class TableSnapshot:
    """Immutable view of the board handed to renderers after every call."""

    config: NationConfig
    explore: tuple[Card, ...]
    building: tuple[Card, ...]
    ravage: tuple[Card, ...]
    discard: tuple[Card, ...]
    immigration: tuple[Card, ...]
    russia_hidden: tuple[Card, ...]
    explore_revealed: bool
    russia_revealed: bool
    removed: tuple[Card, ...] = ()

    def pile(self, name: PileName) -> tuple[Card, ...]:
        return getattr(self, name.value)

    @property
    def explore_top(self) -> Card | None:
        """Return the face-up explore card, or ``None`` while it is hidden."""

        if not self.explore_revealed or not self.explore:
            return None
        return self.explore[-1]

    @property
    def explore_top_generation(self) -> int | None:
        """Return the stage printed on the back of the next explore card."""

        if not self.explore:
            return None
        return self.explore[-1].generation

    @property
    def russia_top(self) -> Card | None:
        if not self.russia_revealed or not self.russia_hidden:
            return None
        return self.russia_hidden[-1]

    @property
    def immigration_visible(self) -> bool:
        """Return ``True`` while England's immigration slot is on the board."""

        return immigration_open(self.config, self.ravage)

    @property
    def russia_visible(self) -> bool:
        return self.config.plays(Nation.RUSSLAND, 5)

    def total_cards(self) -> int:
        return sum(len(self.pile(name)) for name in PileName)


@dataclass(slots=True)
class InvaderState:
    """Mutable board state: six ordered piles plus the two reveal flags.

    Every pile is stored bottom to top, so ``pile[-1]`` is the visible card.
    """

    config: NationConfig = field(default_factory=NationConfig)
    explore: List[Card] = field(default_factory=list)
    building: List[Card] = field(default_factory=list)
    ravage: List[Card] = field(default_factory=list)
    discard: List[Card] = field(default_factory=list)
    immigration: List[Card] = field(default_factory=list)
    russia_hidden: List[Card] = field(default_factory=list)
    explore_revealed: bool = False
    russia_revealed: bool = False
    removed: List[Card] = field(default_factory=list)

    def pile(self, name: PileName) -> List[Card]:
        """Return the live list backing ``name``."""

        return getattr(self, name.value)

    def iter_piles(self) -> Iterator[tuple[PileName, List[Card]]]:
        for name in PileName:
            yield name, self.pile(name)

    def total_cards(self) -> int:
        """Return the number of cards currently in any pile."""

        return sum(len(cards) for _, cards in self.iter_piles())

    def snapshot(self) -> TableSnapshot:
        return TableSnapshot(
            config=self.config,
            explore=tuple(self.explore),
            building=tuple(self.building),
            ravage=tuple(self.ravage),
            discard=tuple(self.discard),
            immigration=tuple(self.immigration),
            russia_hidden=tuple(self.russia_hidden),
            explore_revealed=self.explore_revealed,
            russia_revealed=self.russia_revealed,
            removed=tuple(self.removed),
        )

    def clone_shallow(self) -> "InvaderState":
        """Return a copy whose piles can be mutated independently."""

        return InvaderState(
            config=self.config,
            explore=list(self.explore),
            building=list(self.building),
            ravage=list(self.ravage),
            discard=list(self.discard),
            immigration=list(self.immigration),
            russia_hidden=list(self.russia_hidden),
            explore_revealed=self.explore_revealed,
            russia_revealed=self.russia_revealed,
            removed=list(self.removed),
        )


def deal_new_game(config: NationConfig, rng: Any = None) -> InvaderState:
    """Build a deck for ``config`` and return freshly seeded piles."""

    layout = build_deck(config, rng)
    game_state = InvaderState(
        config=config,
        explore=list(layout.explore),
        discard=list(layout.pre_discarded),
    )
    if config.plays(Nation.RUSSLAND, 5):
        game_state.russia_hidden = [layout.tier3_removed, layout.tier2_removed]

    logger.info(
        "new game %s: %d card(s) dealt, %d in explore",
        config.label(),
        game_state.total_cards(),
        len(game_state.explore),
    )
    return game_state


def dealt_card_count(config: NationConfig) -> int:
    """Return how many cards a new game places into piles for ``config``."""

    return deal_new_game(config).total_cards()
