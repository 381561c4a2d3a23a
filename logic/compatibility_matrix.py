"""Read-only queries and aggregates over a capsule compatibility matrix."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Union

from models.capsule import CapsuleWardrobe, CompatibilityPair

logger = logging.getLogger(__name__)

SELF_MATCH_SCORE = 100
HIGH_COMPATIBILITY_THRESHOLD = 80
TOP_PAIRS_LIMIT = 5

_LABEL_THRESHOLDS = ((90, "Perfecta"), (80, "Muy buena"), (70, "Buena"), (60, "Aceptable"))
_COLOR_THRESHOLDS = ((90, "green-strong"), (80, "green"), (70, "yellow"), (60, "orange"))

Matrix = Optional[Sequence[CompatibilityPair]]


@dataclass(frozen=True)
class GridCell:
    row_id: str
    col_id: str
    score: Optional[float]
    is_diagonal: bool


def _pairs(matrix: Matrix) -> Sequence[CompatibilityPair]:
    return matrix or ()


def get_compatibility_pair(item1_id: str, item2_id: str, matrix: Matrix) -> Optional[CompatibilityPair]:
    """Return the record for the unordered pair, or ``None`` when absent.

    A garment has no record against itself, so self-pairs return ``None``.
    """

    if item1_id == item2_id:
        return None
    for pair in _pairs(matrix):
        if pair.matches(item1_id, item2_id):
            return pair
    return None


def get_compatibility_score(item1_id: str, item2_id: str, matrix: Matrix) -> Optional[float]:
    """Return the pair's score, 100 for a self-match or ``None`` when unknown.

    ``None`` means "not computed" and must not be read as zero.
    """

    if item1_id == item2_id:
        return SELF_MATCH_SCORE
    pair = get_compatibility_pair(item1_id, item2_id, matrix)
    return pair.compatibility_score if pair else None


def get_score_label(score: Optional[float]) -> str:
    if score is None:
        return "N/A"
    for threshold, label in _LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return "No recomendado"


def get_score_color(score: Optional[float]) -> str:
    """Heat-map tier used when rendering a matrix cell."""

    if score is None:
        return "none"
    for threshold, color in _COLOR_THRESHOLDS:
        if score >= threshold:
            return color
    return "red"


def compute_average_compatibility(matrix: Matrix) -> int:
    """Rounded mean score of the matrix, ``0`` when it is empty."""

    scores = [pair.compatibility_score for pair in _pairs(matrix)]
    if not scores:
        return 0
    return int(math.floor(sum(scores) / len(scores) + 0.5))


def count_high_compatibility_pairs(matrix: Matrix, threshold: int = HIGH_COMPATIBILITY_THRESHOLD) -> int:
    return sum(1 for pair in _pairs(matrix) if pair.compatibility_score >= threshold)


def get_top_compatible_pairs(
    matrix: Matrix, threshold: int = HIGH_COMPATIBILITY_THRESHOLD, limit: int = TOP_PAIRS_LIMIT
) -> List[CompatibilityPair]:
    """Pairs scoring at least ``threshold``, best first, ties in matrix order."""

    if limit <= 0:
        return []
    qualifying = [pair for pair in _pairs(matrix) if pair.compatibility_score >= threshold]
    qualifying.sort(key=lambda pair: pair.compatibility_score, reverse=True)
    return qualifying[:limit]


def build_compatibility_grid(item_ids: Iterable[str], matrix: Matrix) -> List[List[GridCell]]:
    """Expand the matrix into a square grid over ``item_ids``."""

    ids = list(item_ids)
    return [
        [
            GridCell(
                row_id=row_id,
                col_id=col_id,
                score=get_compatibility_score(row_id, col_id, matrix),
                is_diagonal=row_id == col_id,
            )
            for col_id in ids
        ]
        for row_id in ids
    ]


def summarize_capsule(
    capsule: CapsuleWardrobe,
    threshold: int = HIGH_COMPATIBILITY_THRESHOLD,
    limit: int = TOP_PAIRS_LIMIT,
) -> Dict[str, object]:
    matrix = capsule.compatibility_matrix
    summary = {
        "name": capsule.name,
        "item_count": len(capsule.items),
        "pair_count": len(matrix),
        "total_combinations": capsule.total_combinations,
        "average_compatibility": compute_average_compatibility(matrix),
        "high_compatibility_pairs": count_high_compatibility_pairs(matrix, threshold),
        "threshold": threshold,
        "top_pairs": [pair.to_dict() for pair in get_top_compatible_pairs(matrix, threshold, limit)],
    }
    logger.debug("capsule summary %s", summary)
    return summary


class CompatibilityMatrixService:
    """Query facade bound to a single capsule's compatibility matrix."""

    def __init__(
        self,
        source: Union[CapsuleWardrobe, Sequence[CompatibilityPair], None] = None,
        threshold: int = HIGH_COMPATIBILITY_THRESHOLD,
        limit: int = TOP_PAIRS_LIMIT,
    ) -> None:
        if isinstance(source, CapsuleWardrobe):
            self.capsule: Optional[CapsuleWardrobe] = source
            self.matrix: Sequence[CompatibilityPair] = source.compatibility_matrix
        else:
            self.capsule = None
            self.matrix = tuple(source or ())
        self.threshold = threshold
        self.limit = limit

    def score(self, item1_id: str, item2_id: str) -> Optional[float]:
        return get_compatibility_score(item1_id, item2_id, self.matrix)

    def pair(self, item1_id: str, item2_id: str) -> Optional[CompatibilityPair]:
        return get_compatibility_pair(item1_id, item2_id, self.matrix)

    def label(self, item1_id: str, item2_id: str) -> str:
        return get_score_label(self.score(item1_id, item2_id))

    def average(self) -> int:
        return compute_average_compatibility(self.matrix)

    def high_pair_count(self, threshold: int | None = None) -> int:
        return count_high_compatibility_pairs(self.matrix, self.threshold if threshold is None else threshold)

    def top_pairs(self, threshold: int | None = None, limit: int | None = None) -> List[CompatibilityPair]:
        return get_top_compatible_pairs(
            self.matrix,
            self.threshold if threshold is None else threshold,
            self.limit if limit is None else limit,
        )

    def grid(self, item_ids: Iterable[str] | None = None) -> List[List[GridCell]]:
        if item_ids is None:
            item_ids = self.capsule.item_ids if self.capsule else []
        return build_compatibility_grid(item_ids, self.matrix)

    def summary(self) -> Dict[str, object]:
        capsule = self.capsule or CapsuleWardrobe(compatibility_matrix=tuple(self.matrix))
        return summarize_capsule(capsule, self.threshold, self.limit)


__all__ = [
    "CompatibilityMatrixService",
    "GridCell",
    "build_compatibility_grid",
    "compute_average_compatibility",
    "count_high_compatibility_pairs",
    "get_compatibility_pair",
    "get_compatibility_score",
    "get_score_color",
    "get_score_label",
    "get_top_compatible_pairs",
    "summarize_capsule",
]
