"""Tests for versatility scoring, combinations and closet rankings."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.versatility import (
    ScoredGarment,
    calculate_potential_combinations,
    calculate_versatility_score,
    get_top_versatile_items,
    get_versatility_badge_color,
    get_versatility_label,
    get_versatility_tier,
)
from models.garment import Garment
from models.taxonomy import ScoringVocabulary


def _garment(item_id: str, category: str, color: str = "rojo", vibes=(), seasons=()) -> Garment:
    return Garment(item_id=item_id, category=category, color_primary=color, vibe_tags=vibes, seasons=seasons)


def _white_tee() -> Garment:
    return Garment(
        item_id="tee",
        category="top",
        color_primary="blanco",
        vibe_tags=("casual", "minimalista", "basico"),
        seasons=("Primavera", "Verano", "Todo el año"),
    )


def _closet(tops: int = 0, bottoms: int = 0, shoes: int = 0) -> List[Garment]:
    closet = [_garment(f"top-{i}", "top") for i in range(tops)]
    closet += [_garment(f"bottom-{i}", "bottom") for i in range(bottoms)]
    closet += [_garment(f"shoes-{i}", "shoes") for i in range(shoes)]
    return closet


def test_white_tee_scores_47_with_two_bottoms_and_two_shoes() -> None:
    tee = _white_tee()
    closet = [tee] + _closet(bottoms=2, shoes=2)

    assert calculate_versatility_score(tee, closet) == 47


def test_empty_closet_gets_static_bonuses_only() -> None:
    tee = _white_tee()

    assert calculate_versatility_score(tee, []) == 45
    assert calculate_versatility_score(_garment("x", "shoes"), []) == 20


def test_missing_collections_are_treated_as_empty() -> None:
    item = Garment(item_id="x", category="top", color_primary=None, vibe_tags=None, seasons=None)

    assert calculate_versatility_score(item, None) == 25
    assert calculate_potential_combinations(item, None) == 0


def test_score_is_deterministic_and_does_not_mutate_closet() -> None:
    closet = [_white_tee()] + _closet(tops=3, bottoms=4, shoes=5)
    snapshot = list(closet)

    first = [calculate_versatility_score(item, closet) for item in closet]
    second = [calculate_versatility_score(item, closet) for item in closet]

    assert first == second
    assert closet == snapshot


def test_score_stays_within_bounds_for_large_closets() -> None:
    vocabulary = ScoringVocabulary(versatile_categories=("top", "bottom", "shoes", "accessory"))
    item = _garment("bag", "accessory", "negro", ("classic",), ("a", "b", "c", "d"))
    closet = [item] + _closet(tops=20, bottoms=20, shoes=20)

    score = calculate_versatility_score(item, closet, vocabulary)

    assert 0 <= score <= 100
    assert score == 20 + 10 + 5 + 5 + 30 + 5


def test_neutral_color_adds_ten_points_once() -> None:
    closet = _closet(bottoms=1, shoes=1)
    negro = _garment("a", "top", "Negro")
    rojo = _garment("a", "top", "Rojo")
    compound = _garment("a", "top", "Azul marino grisáceo")

    assert calculate_versatility_score(negro, closet) - calculate_versatility_score(rojo, closet) == 10
    assert calculate_versatility_score(compound, closet) == calculate_versatility_score(negro, closet)


def test_basic_vibe_matches_substrings_case_insensitively() -> None:
    plain = _garment("a", "shoes", vibes=("romántico",))
    basic = _garment("a", "shoes", vibes=("Estilo CLÁSICO",))
    many = _garment("a", "shoes", vibes=("casual", "timeless", "essential"))

    assert calculate_versatility_score(basic, []) - calculate_versatility_score(plain, []) == 5
    assert calculate_versatility_score(many, []) == calculate_versatility_score(basic, [])


def test_multi_season_bonus_requires_three_entries() -> None:
    two = _garment("a", "shoes", seasons=("verano", "invierno"))
    three = _garment("a", "shoes", seasons=("verano", "invierno", "otoño"))

    assert calculate_versatility_score(two, []) == 20
    assert calculate_versatility_score(three, []) == 25


@pytest.mark.parametrize(
    "category, expected",
    [
        ("top", 4 * 5),
        ("bottom", 3 * 5),
        ("shoes", 3 * 4),
        ("one-piece", 5),
        ("accessory", 3 * 4 * 5),
        ("outerwear", 3 * 4 * 5),
        ("swimwear", 0),
    ],
)
def test_potential_combinations_by_category(category: str, expected: int) -> None:
    closet = _closet(tops=3, bottoms=4, shoes=5)
    item = _garment("candidate", category)

    assert calculate_potential_combinations(item, closet) == expected


def test_potential_combinations_skip_the_item_itself() -> None:
    closet = _closet(tops=2, bottoms=3, shoes=2)
    first_top = closet[0]

    assert calculate_potential_combinations(first_top, closet) == 3 * 2


def test_combination_bonus_is_monotonic_and_capped() -> None:
    tee = _garment("tee", "top")
    scores = []
    for count in range(0, 12):
        closet = [tee] + _closet(bottoms=count, shoes=count)
        scores.append(calculate_versatility_score(tee, closet))

    assert scores == sorted(scores)
    assert scores[-1] == 20 + 5 + 30


def test_custom_vocabulary_replaces_defaults() -> None:
    vocabulary = ScoringVocabulary(neutral_colors=("rojo",), basic_vibes=(), versatile_categories=("shoes",))
    item = _garment("a", "shoes", "Rojo", ("casual",))

    assert calculate_versatility_score(item, [], vocabulary) == 20 + 10 + 5


def test_top_versatile_items_sorted_and_truncated() -> None:
    tee = _white_tee()
    closet = [tee] + _closet(tops=2, bottoms=3, shoes=2)

    ranked = get_top_versatile_items(closet, 4)

    assert len(ranked) == 4
    assert all(isinstance(entry, ScoredGarment) for entry in ranked)
    scores = [entry.versatility_score for entry in ranked]
    assert scores == sorted(scores, reverse=True)
    for entry in ranked:
        assert entry.versatility_score == calculate_versatility_score(entry.garment, closet)
    assert ranked[0].garment.item_id == "tee"


def test_top_versatile_items_handles_short_and_empty_closets() -> None:
    closet = _closet(tops=1, shoes=1)

    assert len(get_top_versatile_items(closet)) == 2
    assert get_top_versatile_items([], 5) == []
    assert get_top_versatile_items(closet, 0) == []


def test_top_versatile_items_ties_keep_closet_order() -> None:
    closet = [_garment(f"shoe-{i}", "shoes") for i in range(4)]

    ranked = get_top_versatile_items(closet, 3)

    assert [entry.garment.item_id for entry in ranked] == ["shoe-0", "shoe-1", "shoe-2"]


@pytest.mark.parametrize(
    "score, tier, color, label",
    [
        (100, "very_versatile", "green", "Muy versátil"),
        (80, "very_versatile", "green", "Muy versátil"),
        (79, "versatile", "blue", "Versátil"),
        (60, "versatile", "blue", "Versátil"),
        (40, "moderate", "yellow", "Moderado"),
        (39, "limited", "gray", "Limitado"),
        (0, "limited", "gray", "Limitado"),
    ],
)
def test_badge_and_label_thresholds(score: int, tier: str, color: str, label: str) -> None:
    assert get_versatility_tier(score) == tier
    assert get_versatility_badge_color(score) == color
    assert get_versatility_label(score) == label


def test_garments_sharing_an_id_are_not_counted_against_each_other() -> None:
    dress = _garment("dup", "one_piece")
    twin_shoes = _garment("dup", "shoes")
    closet = [dress, twin_shoes, _garment("s2", "shoes"), _garment("top-0", "top")]

    assert calculate_potential_combinations(dress, closet) == 1
    assert calculate_potential_combinations(twin_shoes, closet) == 0

    ranked = get_top_versatile_items(closet)
    assert [(entry.garment.item_id, entry.garment.category) for entry in ranked if entry.garment.item_id == "dup"] == [
        ("dup", "one-piece"),
        ("dup", "shoes"),
    ]
    assert len(ranked) == 4
