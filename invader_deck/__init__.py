"""Top-level package for the Invader deck engine."""

from . import cards, deck, engine, events, rules, state

__all__ = [
    "cards",
    "deck",
    "engine",
    "events",
    "rules",
    "state",
]
