"""Closet-wide versatility aggregates, filters and sorting."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

from logic.versatility import ScoredGarment, calculate_versatility_score
from models.garment import Garment
from models.taxonomy import ScoringVocabulary, normalize_category

MIN_SCORE = 0
MAX_SCORE = 100
MOST_VERSATILE_LIMIT = 10
CATEGORY_TOP_LIMIT = 5
HIGH_VERSATILITY_AVERAGE = 70
LOW_VERSATILITY_AVERAGE = 40


def score_closet(
    items: Optional[Sequence[Garment]], vocabulary: ScoringVocabulary | None = None
) -> List[ScoredGarment]:
    """Score every garment against the full closet, keeping closet order."""

    closet = list(items or ())
    return [
        ScoredGarment(garment=item, versatility_score=calculate_versatility_score(item, closet, vocabulary))
        for item in closet
    ]


def mean_score(scored: Sequence[ScoredGarment]) -> int:
    """Rounded mean of already computed scores, 0 for an empty closet."""

    if not scored:
        return 0
    total = sum(entry.versatility_score for entry in scored)
    return int(math.floor(total / len(scored) + 0.5))


def rank_scored(
    scored: Sequence[ScoredGarment], limit: int | None = None, descending: bool = True
) -> List[ScoredGarment]:
    """Stable sort by score; ties keep closet order."""

    ranked = sorted(scored, key=lambda entry: entry.versatility_score, reverse=descending)
    if limit is None:
        return ranked
    return ranked[: max(0, limit)]


def average_versatility(
    items: Optional[Sequence[Garment]], vocabulary: ScoringVocabulary | None = None
) -> int:
    return mean_score(score_closet(items, vocabulary))


def most_versatile_items(
    items: Optional[Sequence[Garment]],
    limit: int = MOST_VERSATILE_LIMIT,
    vocabulary: ScoringVocabulary | None = None,
) -> List[Garment]:
    return [entry.garment for entry in rank_scored(score_closet(items, vocabulary), limit)]


def item_versatility_score(item_id: str, scored: Sequence[ScoredGarment]) -> int:
    """Score of the first closet entry with ``item_id``, 0 when it is unknown."""

    for entry in scored:
        if entry.garment.item_id == item_id:
            return entry.versatility_score
    return 0


def top_items_by_category(
    scored: Sequence[ScoredGarment], category: str, limit: int = CATEGORY_TOP_LIMIT
) -> List[ScoredGarment]:
    wanted = normalize_category(category)
    return rank_scored([entry for entry in scored if entry.garment.category == wanted], limit)


def versatility_insight(average: int) -> Optional[str]:
    if average > HIGH_VERSATILITY_AVERAGE:
        return "Tu armario es muy versátil para combinar"
    if average < LOW_VERSATILITY_AVERAGE:
        return "Podrías mejorar la versatilidad de tu armario"
    return None


def validate_versatility_range(minimum: int, maximum: int) -> List[str]:
    """Return human readable problems with a versatility filter range."""

    errors: List[str] = []
    if minimum < MIN_SCORE or minimum > MAX_SCORE:
        errors.append("Versatility min must be between 0 and 100")
    if maximum < MIN_SCORE or maximum > MAX_SCORE:
        errors.append("Versatility max must be between 0 and 100")
    if minimum > maximum:
        errors.append("Versatility min cannot be greater than max")
    return errors


def within_range(scored: Sequence[ScoredGarment], minimum: int, maximum: int) -> List[ScoredGarment]:
    return [entry for entry in scored if minimum <= entry.versatility_score <= maximum]


def filter_by_versatility(
    items: Optional[Sequence[Garment]],
    minimum: int = MIN_SCORE,
    maximum: int = MAX_SCORE,
    vocabulary: ScoringVocabulary | None = None,
) -> List[ScoredGarment]:
    """Keep garments whose score lies in ``[minimum, maximum]``, in closet order."""

    return within_range(score_closet(items, vocabulary), minimum, maximum)


def sort_by_versatility(
    items: Optional[Sequence[Garment]],
    descending: bool = True,
    vocabulary: ScoringVocabulary | None = None,
) -> List[ScoredGarment]:
    return rank_scored(score_closet(items, vocabulary), descending=descending)


def summarize_scores(
    scored: Sequence[ScoredGarment],
    minimum: int = MIN_SCORE,
    maximum: int = MAX_SCORE,
    limit: int = MOST_VERSATILE_LIMIT,
) -> Dict[str, object]:
    """Closet statistics over a precomputed, closet-ordered score list."""

    average = mean_score(scored)
    insight = versatility_insight(average) if scored else None
    return {
        "total_items": len(scored),
        "average_versatility": average,
        "most_versatile": [entry.to_dict() for entry in rank_scored(scored, limit)],
        "in_range_ids": [entry.garment.item_id for entry in within_range(scored, minimum, maximum)],
        "range": {"min": minimum, "max": maximum},
        "insights": [insight] if insight else [],
    }


__all__ = [
    "average_versatility",
    "filter_by_versatility",
    "item_versatility_score",
    "mean_score",
    "most_versatile_items",
    "rank_scored",
    "score_closet",
    "sort_by_versatility",
    "summarize_scores",
    "top_items_by_category",
    "validate_versatility_range",
    "versatility_insight",
    "within_range",
]
