"""Capsule wardrobe and compatibility matrix schemas."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.taxonomy import BOTTOM, SHOES, TOP, normalize_category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompatibilityPair:
    """Scored assessment of how well two garments combine.

    Pairs are produced upstream by the capsule generator. ``(a, b)`` and
    ``(b, a)`` describe the same pair.
    """

    item1_id: str
    item2_id: str
    compatibility_score: float
    reasoning: str = ""

    def matches(self, item1_id: str, item2_id: str) -> bool:
        return (self.item1_id == item1_id and self.item2_id == item2_id) or (
            self.item1_id == item2_id and self.item2_id == item1_id
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item1_id": self.item1_id,
            "item2_id": self.item2_id,
            "compatibility_score": self.compatibility_score,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class CapsuleItem:
    """Reference to a closet garment selected into a capsule."""

    item_id: str
    category: str = ""
    score: Optional[int] = None
    reasoning: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", normalize_category(self.category))


@dataclass(frozen=True)
class CapsuleWardrobe:
    """Curated subset of a closet annotated with its compatibility matrix."""

    items: Tuple[CapsuleItem, ...] = field(default_factory=tuple)
    compatibility_matrix: Tuple[CompatibilityPair, ...] = field(default_factory=tuple)
    name: Optional[str] = None
    theme: Optional[str] = None
    season: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items or ()))
        object.__setattr__(self, "compatibility_matrix", tuple(self.compatibility_matrix or ()))

    @property
    def item_ids(self) -> List[str]:
        return [item.item_id for item in self.items]

    @property
    def total_combinations(self) -> int:
        """Number of top/bottom/shoes outfits the capsule can produce."""

        categories = [item.category for item in self.items]
        return categories.count(TOP) * categories.count(BOTTOM) * categories.count(SHOES)


def _coerce_score(score: Any) -> float:
    """Keep the generator's score as given; ints stay ints."""

    if isinstance(score, bool):
        raise ValueError("compatibility_score must be a number")
    value = score if isinstance(score, (int, float)) else float(score)
    if not math.isfinite(value):
        raise ValueError(f"compatibility_score must be finite, got {score!r}")
    return value


def pair_from_raw(raw: Dict[str, Any]) -> CompatibilityPair:
    """Build a :class:`CompatibilityPair` from a loose generator record."""

    item1_id = raw.get("item1_id")
    item2_id = raw.get("item2_id")
    score = raw.get("compatibility_score")
    if not item1_id or not item2_id or score is None:
        raise ValueError("Missing required fields for CompatibilityPair: item1_id/item2_id/compatibility_score")
    return CompatibilityPair(
        item1_id=str(item1_id),
        item2_id=str(item2_id),
        compatibility_score=_coerce_score(score),
        reasoning=str(raw.get("reasoning") or ""),
    )


def pairs_from_raw(records: Iterable[Dict[str, Any]]) -> List[CompatibilityPair]:
    pairs: List[CompatibilityPair] = []
    for raw in records or []:
        try:
            pairs.append(pair_from_raw(raw))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping compatibility entry due to validation error: %s", exc)
    return pairs


def capsule_from_raw(raw: Dict[str, Any]) -> CapsuleWardrobe:
    """Build a :class:`CapsuleWardrobe` from the generator's JSON payload."""

    items: List[CapsuleItem] = []
    for entry in raw.get("items") or raw.get("selected_items") or []:
        item_id = entry.get("item_id") or entry.get("id")
        if not item_id:
            logger.warning("Skipping capsule item without an id")
            continue
        score = entry.get("score")
        items.append(
            CapsuleItem(
                item_id=str(item_id),
                category=str(entry.get("category") or ""),
                score=int(score) if score is not None else None,
                reasoning=entry.get("reasoning"),
            )
        )
    return CapsuleWardrobe(
        items=tuple(items),
        compatibility_matrix=tuple(pairs_from_raw(raw.get("compatibility_matrix") or [])),
        name=raw.get("name"),
        theme=raw.get("theme"),
        season=raw.get("season"),
    )


__all__ = [
    "CapsuleItem",
    "CapsuleWardrobe",
    "CompatibilityPair",
    "capsule_from_raw",
    "pair_from_raw",
    "pairs_from_raw",
]
