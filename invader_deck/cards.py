"""Card, nation and configuration primitives for the Invader deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

MIN_LEVEL: Final[int] = 1
MAX_LEVEL: Final[int] = 6


class Terrain(str, Enum):
    """Land types printed on Invader cards."""

    SWAMP = "swamp"
    DESERT = "desert"
    JUNGLE = "jungle"
    MOUNTAIN = "mountain"
    COAST = "coast"


class Card(str, Enum):
    """Every physical card that can appear in an Invader pile."""

    SWAMP = "SWAMP"
    JUNGLE = "JUNGLE"
    MOUNTAIN = "MOUNTAIN"
    DESERT = "DESERT"
    COAST = "COAST"
    SWAMP_NATION = "SWAMP_NATION"
    JUNGLE_NATION = "JUNGLE_NATION"
    MOUNTAIN_NATION = "MOUNTAIN_NATION"
    DESERT_NATION = "DESERT_NATION"
    MOUNTAIN_DESERT = "MOUNTAIN_DESERT"
    SWAMP_JUNGLE = "SWAMP_JUNGLE"
    DESERT_JUNGLE = "DESERT_JUNGLE"
    MOUNTAIN_JUNGLE = "MOUNTAIN_JUNGLE"
    DESERT_SWAMP = "DESERT_SWAMP"
    MOUNTAIN_SWAMP = "MOUNTAIN_SWAMP"
    FINISH = "FINISH"
    EMPTY = "EMPTY"
    HABSBURG = "HABSBURG"
    HABSBURG_MINING = "HABSBURG_MINING"

    @property
    def generation(self) -> int:
        """Return the invader stage (1-3), or ``0`` for sentinel cards."""

        return _GENERATIONS[self]

    @property
    def terrains(self) -> tuple[Terrain, ...]:
        """Return the lands explored by this card (empty for sentinels)."""

        return _TERRAINS.get(self, ())

    @property
    def is_sentinel(self) -> bool:
        return self.generation == 0

    @property
    def is_escalation(self) -> bool:
        """Return ``True`` for stage II cards carrying the adversary escalation."""

        return self in _ESCALATION

    def label(self) -> str:
        """Create a short display label, e.g. ``"II Mountain*"``."""

        if self.is_sentinel:
            return self.value.replace("_", " ").title()
        stage = "I" * self.generation
        lands = "/".join(terrain.value.title() for terrain in self.terrains)
        marker = "*" if self.is_escalation else ""
        return f"{stage} {lands}{marker}"


_GENERATIONS: Final[dict[Card, int]] = {
    Card.SWAMP: 1,
    Card.JUNGLE: 1,
    Card.MOUNTAIN: 1,
    Card.DESERT: 1,
    Card.COAST: 2,
    Card.SWAMP_NATION: 2,
    Card.JUNGLE_NATION: 2,
    Card.MOUNTAIN_NATION: 2,
    Card.DESERT_NATION: 2,
    Card.MOUNTAIN_DESERT: 3,
    Card.SWAMP_JUNGLE: 3,
    Card.DESERT_JUNGLE: 3,
    Card.MOUNTAIN_JUNGLE: 3,
    Card.DESERT_SWAMP: 3,
    Card.MOUNTAIN_SWAMP: 3,
    Card.FINISH: 0,
    Card.EMPTY: 0,
    Card.HABSBURG: 0,
    Card.HABSBURG_MINING: 0,
}

_TERRAINS: Final[dict[Card, tuple[Terrain, ...]]] = {
    Card.SWAMP: (Terrain.SWAMP,),
    Card.JUNGLE: (Terrain.JUNGLE,),
    Card.MOUNTAIN: (Terrain.MOUNTAIN,),
    Card.DESERT: (Terrain.DESERT,),
    Card.COAST: (Terrain.COAST,),
    Card.SWAMP_NATION: (Terrain.SWAMP,),
    Card.JUNGLE_NATION: (Terrain.JUNGLE,),
    Card.MOUNTAIN_NATION: (Terrain.MOUNTAIN,),
    Card.DESERT_NATION: (Terrain.DESERT,),
    Card.MOUNTAIN_DESERT: (Terrain.MOUNTAIN, Terrain.DESERT),
    Card.SWAMP_JUNGLE: (Terrain.SWAMP, Terrain.JUNGLE),
    Card.DESERT_JUNGLE: (Terrain.DESERT, Terrain.JUNGLE),
    Card.MOUNTAIN_JUNGLE: (Terrain.MOUNTAIN, Terrain.JUNGLE),
    Card.DESERT_SWAMP: (Terrain.DESERT, Terrain.SWAMP),
    Card.MOUNTAIN_SWAMP: (Terrain.MOUNTAIN, Terrain.SWAMP),
}

_ESCALATION: Final[frozenset[Card]] = frozenset(
    {Card.SWAMP_NATION, Card.JUNGLE_NATION, Card.MOUNTAIN_NATION, Card.DESERT_NATION}
)

TIER_ONE: Final[tuple[Card, ...]] = (Card.SWAMP, Card.JUNGLE, Card.MOUNTAIN, Card.DESERT)
TIER_TWO: Final[tuple[Card, ...]] = (
    Card.SWAMP_NATION,
    Card.JUNGLE_NATION,
    Card.DESERT_NATION,
    Card.COAST,
    Card.MOUNTAIN_NATION,
)
TIER_THREE: Final[tuple[Card, ...]] = (
    Card.MOUNTAIN_DESERT,
    Card.SWAMP_JUNGLE,
    Card.DESERT_JUNGLE,
    Card.MOUNTAIN_JUNGLE,
    Card.DESERT_SWAMP,
    Card.MOUNTAIN_SWAMP,
)


class Nation(str, Enum):
    """Adversaries that alter the Invader deck."""

    NONE = "none"
    BRANDENBURG = "brandenburg"
    ENGLAND = "england"
    SCHWEDEN = "schweden"
    RUSSLAND = "russland"
    FRANCE = "france"
    HABSBURG = "habsburg"
    SCHOTTLAND = "schottland"
    HABSBURG_MINING = "habsburg_mining"


@dataclass(frozen=True, slots=True)
class NationConfig:
    """Adversary and difficulty level chosen for a game."""

    nation: Nation = Nation.NONE
    level: int = MIN_LEVEL

    def __post_init__(self) -> None:
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(f"level must be within [{MIN_LEVEL}, {MAX_LEVEL}], got {self.level}")

    @classmethod
    def clamped(cls, nation: Nation, level: int) -> "NationConfig":
        """Return a config with ``level`` forced into the supported range."""

        return cls(nation=nation, level=max(MIN_LEVEL, min(level, MAX_LEVEL)))

    def plays(self, nation: Nation, min_level: int = MIN_LEVEL) -> bool:
        """Return ``True`` when playing ``nation`` at ``min_level`` or above."""

        return self.nation == nation and self.level >= min_level

    def label(self) -> str:
        return f"{self.nation.value.replace('_', ' ').title()} {self.level}"
