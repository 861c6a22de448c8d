"""Tests covering deck construction for every adversary branch."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from helpers import FrontShuffle, IdentityShuffle, ReverseShuffle
from invader_deck.cards import Card, Nation, NationConfig
from invader_deck.deck import build_deck

C = Card

DEFAULT_STACK = [
    C.JUNGLE, C.MOUNTAIN, C.DESERT,
    C.JUNGLE_NATION, C.DESERT_NATION, C.COAST, C.MOUNTAIN_NATION,
    C.SWAMP_JUNGLE, C.DESERT_JUNGLE, C.MOUNTAIN_JUNGLE, C.DESERT_SWAMP, C.MOUNTAIN_SWAMP,
]


def _stack(nation: Nation, level: int, rng: object | None = None) -> list[Card]:
    """Return the built deck in draw order (first element is drawn first)."""

    layout = build_deck(NationConfig(nation, level), rng or IdentityShuffle())
    return list(reversed(layout.explore))


def test_default_deck_draws_tiers_in_order() -> None:
    layout = build_deck(NationConfig(), IdentityShuffle())

    assert layout.explore == list(reversed(DEFAULT_STACK))
    assert layout.explore[-1] == C.JUNGLE
    assert layout.explore[0] == C.MOUNTAIN_SWAMP
    assert layout.tier1_removed == C.SWAMP
    assert layout.set_aside == (C.SWAMP_NATION, C.MOUNTAIN_DESERT)
    assert layout.tier2_removed == C.SWAMP_NATION
    assert layout.tier3_removed == C.MOUNTAIN_DESERT
    assert layout.pre_discarded == []


@pytest.mark.parametrize(
    "nation",
    [Nation.NONE, Nation.ENGLAND, Nation.FRANCE, Nation.SCHOTTLAND, Nation.SCHWEDEN],
)
@pytest.mark.parametrize("level", [1, 2, 3])
def test_unmodified_adversaries_use_default_stack(nation: Nation, level: int) -> None:
    assert _stack(nation, level) == DEFAULT_STACK


def test_low_levels_of_modifying_adversaries_use_default_stack() -> None:
    assert _stack(Nation.BRANDENBURG, 1) == DEFAULT_STACK
    assert _stack(Nation.RUSSLAND, 3) == DEFAULT_STACK
    assert _stack(Nation.HABSBURG, 2) == DEFAULT_STACK
    assert _stack(Nation.HABSBURG_MINING, 3) == DEFAULT_STACK


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (2, [C.JUNGLE, C.MOUNTAIN, C.DESERT, C.SWAMP_JUNGLE,
             C.JUNGLE_NATION, C.DESERT_NATION, C.COAST, C.MOUNTAIN_NATION,
             C.DESERT_JUNGLE, C.MOUNTAIN_JUNGLE, C.DESERT_SWAMP, C.MOUNTAIN_SWAMP]),
        (3, [C.MOUNTAIN, C.DESERT, C.SWAMP_JUNGLE,
             C.JUNGLE_NATION, C.DESERT_NATION, C.COAST, C.MOUNTAIN_NATION,
             C.DESERT_JUNGLE, C.MOUNTAIN_JUNGLE, C.DESERT_SWAMP, C.MOUNTAIN_SWAMP]),
        (4, [C.MOUNTAIN, C.DESERT, C.SWAMP_JUNGLE,
             C.DESERT_NATION, C.COAST, C.MOUNTAIN_NATION,
             C.DESERT_JUNGLE, C.MOUNTAIN_JUNGLE, C.DESERT_SWAMP, C.MOUNTAIN_SWAMP]),
        (5, [C.DESERT, C.SWAMP_JUNGLE,
             C.DESERT_NATION, C.COAST, C.MOUNTAIN_NATION,
             C.DESERT_JUNGLE, C.MOUNTAIN_JUNGLE, C.DESERT_SWAMP, C.MOUNTAIN_SWAMP]),
        (6, [C.SWAMP_JUNGLE,
             C.DESERT_NATION, C.COAST, C.MOUNTAIN_NATION,
             C.DESERT_JUNGLE, C.MOUNTAIN_JUNGLE, C.DESERT_SWAMP, C.MOUNTAIN_SWAMP]),
    ],
)
def test_brandenburg_moves_a_stage_three_card_forward(level: int, expected: list[Card]) -> None:
    assert _stack(Nation.BRANDENBURG, level) == expected


def test_brandenburg_keeps_set_aside_cards_out_of_the_deck() -> None:
    layout = build_deck(NationConfig(Nation.BRANDENBURG, 2), IdentityShuffle())

    assert layout.tier3_removed == C.MOUNTAIN_DESERT
    assert C.MOUNTAIN_DESERT not in layout.explore
    assert C.SWAMP_JUNGLE in layout.explore


@pytest.mark.parametrize("level", [4, 5, 6])
def test_russland_interleaves_stage_two_and_three(level: int) -> None:
    expected = [
        C.JUNGLE, C.MOUNTAIN, C.DESERT,
        C.JUNGLE_NATION, C.SWAMP_JUNGLE,
        C.DESERT_NATION, C.DESERT_JUNGLE,
        C.COAST, C.MOUNTAIN_JUNGLE,
        C.MOUNTAIN_NATION, C.DESERT_SWAMP,
        C.MOUNTAIN_SWAMP,
    ]
    assert _stack(Nation.RUSSLAND, level) == expected


def test_russland_generation_pattern_with_random_shuffle() -> None:
    layout = build_deck(NationConfig(Nation.RUSSLAND, 4), random.Random(99))
    generations = [card.generation for card in reversed(layout.explore)]

    assert generations == [1, 1, 1, 2, 3, 2, 3, 2, 3, 2, 3, 3]


@pytest.mark.parametrize("level", [3, 4])
def test_habsburg_drops_a_stage_one_card(level: int) -> None:
    assert _stack(Nation.HABSBURG, level) == DEFAULT_STACK[1:]


@pytest.mark.parametrize("level", [5, 6])
def test_habsburg_inserts_its_card_at_slot_four(level: int) -> None:
    stack = _stack(Nation.HABSBURG, level)

    assert len(stack) == 12
    assert stack[4] == C.HABSBURG
    assert stack[:4] == [C.MOUNTAIN, C.DESERT, C.JUNGLE_NATION, C.DESERT_NATION]
    assert stack[5:] == DEFAULT_STACK[5:]


def test_habsburg_mining_restores_the_set_aside_stage_two_card() -> None:
    stack = _stack(Nation.HABSBURG_MINING, 4)

    assert stack == [
        C.JUNGLE, C.MOUNTAIN, C.DESERT,
        C.JUNGLE_NATION, C.HABSBURG_MINING, C.SWAMP_NATION, C.MOUNTAIN_NATION,
        C.SWAMP_JUNGLE, C.DESERT_JUNGLE, C.MOUNTAIN_JUNGLE, C.DESERT_SWAMP, C.MOUNTAIN_SWAMP,
    ]
    assert C.COAST not in stack


def test_habsburg_mining_with_reversed_tiers() -> None:
    layout = build_deck(NationConfig(Nation.HABSBURG_MINING, 5), ReverseShuffle())
    stack = list(reversed(layout.explore))

    assert layout.tier2_removed == C.MOUNTAIN_NATION
    assert stack[3:7] == [C.MOUNTAIN_NATION, C.HABSBURG_MINING, C.JUNGLE_NATION, C.SWAMP_NATION]


def test_habsburg_mining_when_coast_was_set_aside() -> None:
    layout = build_deck(NationConfig(Nation.HABSBURG_MINING, 4), FrontShuffle(C.COAST))
    stack = list(reversed(layout.explore))

    assert layout.tier2_removed == C.COAST
    assert stack[3:7] == [C.SWAMP_NATION, C.HABSBURG_MINING, C.DESERT_NATION, C.MOUNTAIN_NATION]
    assert C.COAST not in stack


def test_schweden_pre_reveals_the_first_card() -> None:
    layout = build_deck(NationConfig(Nation.SCHWEDEN, 4), IdentityShuffle())

    assert layout.pre_discarded == [C.JUNGLE]
    assert len(layout.explore) == 11
    assert layout.explore[-1] == C.MOUNTAIN


@pytest.mark.parametrize("nation", list(Nation))
@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
def test_random_decks_never_repeat_a_card(nation: Nation, level: int) -> None:
    layout = build_deck(NationConfig(nation, level), random.Random(level * 31 + len(nation.value)))
    pool = layout.explore + layout.pre_discarded

    counts = Counter(pool)
    assert max(counts.values()) == 1
    assert C.EMPTY not in pool
    assert C.FINISH not in pool


def test_default_generation_mix() -> None:
    layout = build_deck(NationConfig(Nation.FRANCE, 6), random.Random(5))
    mix = Counter(card.generation for card in layout.explore)

    assert mix == {1: 3, 2: 4, 3: 5}
    assert [card.generation for card in reversed(layout.explore)] == sorted(mix.elements())
