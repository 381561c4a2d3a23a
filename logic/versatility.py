"""Deterministic versatility scoring for closet garments.

A garment's versatility score is a 0-100 heuristic for how easily it combines
with the rest of the closet. It is the sum of a base score, static bonuses
(neutral color, basic vibe, versatile category, multi-season) and a bonus
derived from the number of top/bottom/shoes outfits the garment could join.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from models.garment import Garment
from models.taxonomy import (
    ACCESSORY,
    BOTTOM,
    DEFAULT_VOCABULARY,
    ONE_PIECE,
    OUTERWEAR,
    SHOES,
    TOP,
    ScoringVocabulary,
)

logger = logging.getLogger(__name__)

BASE_SCORE = 20
NEUTRAL_COLOR_BONUS = 10
BASIC_VIBE_BONUS = 5
VERSATILE_CATEGORY_BONUS = 5
MULTI_SEASON_BONUS = 5
MULTI_SEASON_MIN = 3
COMBINATION_BONUS_CAP = 30
MAX_SCORE = 100

VERY_VERSATILE = "very_versatile"
VERSATILE = "versatile"
MODERATE = "moderate"
LIMITED = "limited"

_TIER_THRESHOLDS = ((80, VERY_VERSATILE), (60, VERSATILE), (40, MODERATE))

BADGE_COLORS: Dict[str, str] = {
    VERY_VERSATILE: "green",
    VERSATILE: "blue",
    MODERATE: "yellow",
    LIMITED: "gray",
}

LABELS: Dict[str, str] = {
    VERY_VERSATILE: "Muy versátil",
    VERSATILE: "Versátil",
    MODERATE: "Moderado",
    LIMITED: "Limitado",
}


@dataclass(frozen=True)
class ScoredGarment:
    """A garment paired with its versatility score within a closet."""

    garment: Garment
    versatility_score: int

    def to_dict(self) -> Dict[str, object]:
        return {**self.garment.to_dict(), "versatility_score": self.versatility_score}


def _clamp(value: int) -> int:
    return max(0, min(MAX_SCORE, value))


def calculate_potential_combinations(item: Garment, all_items: Optional[Sequence[Garment]]) -> int:
    """Count the top/bottom/shoes outfits ``item`` could be part of.

    This is a coarse approximation: every other top, bottom and shoe in the
    closet is assumed to combine, with no compatibility filtering.
    """

    counts = {TOP: 0, BOTTOM: 0, SHOES: 0}
    for other in all_items or ():
        if other.item_id == item.item_id:
            continue
        if other.category in counts:
            counts[other.category] += 1

    tops, bottoms, shoes = counts[TOP], counts[BOTTOM], counts[SHOES]
    category = item.category
    if category == TOP:
        return bottoms * shoes
    if category == BOTTOM:
        return tops * shoes
    if category == SHOES:
        return tops * bottoms
    if category == ONE_PIECE:
        return shoes
    if category in (ACCESSORY, OUTERWEAR):
        return tops * bottoms * shoes
    return 0


def calculate_versatility_score(
    item: Garment,
    all_items: Optional[Sequence[Garment]],
    vocabulary: ScoringVocabulary | None = None,
) -> int:
    """Return the versatility score of ``item`` within ``all_items``."""

    vocab = vocabulary or DEFAULT_VOCABULARY
    score = BASE_SCORE

    if vocab.is_neutral_color(item.color_primary):
        score += NEUTRAL_COLOR_BONUS
    if vocab.has_basic_vibe(item.vibe_tags):
        score += BASIC_VIBE_BONUS
    if vocab.is_versatile_category(item.category):
        score += VERSATILE_CATEGORY_BONUS

    combinations = calculate_potential_combinations(item, all_items)
    score += min(COMBINATION_BONUS_CAP, combinations // 2)

    if len(item.seasons or ()) >= MULTI_SEASON_MIN:
        score += MULTI_SEASON_BONUS

    result = _clamp(score)
    logger.debug("versatility %s -> %s (combinations=%s)", item.item_id, result, combinations)
    return result


def get_top_versatile_items(
    items: Optional[Sequence[Garment]],
    limit: int = 10,
    vocabulary: ScoringVocabulary | None = None,
) -> List[ScoredGarment]:
    """Score every item against the whole closet and return the best ``limit``.

    Ties keep closet order.
    """

    closet = list(items or ())
    if limit <= 0:
        return []
    scored = [
        ScoredGarment(garment=item, versatility_score=calculate_versatility_score(item, closet, vocabulary))
        for item in closet
    ]
    scored.sort(key=lambda entry: entry.versatility_score, reverse=True)
    return scored[:limit]


def get_versatility_tier(score: int) -> str:
    for threshold, tier in _TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return LIMITED


def get_versatility_badge_color(score: int) -> str:
    return BADGE_COLORS[get_versatility_tier(score)]


def get_versatility_label(score: int) -> str:
    return LABELS[get_versatility_tier(score)]


__all__ = [
    "BADGE_COLORS",
    "LABELS",
    "ScoredGarment",
    "calculate_potential_combinations",
    "calculate_versatility_score",
    "get_top_versatile_items",
    "get_versatility_badge_color",
    "get_versatility_label",
    "get_versatility_tier",
]
