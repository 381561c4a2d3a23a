"""Garment data model and helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.taxonomy import normalize_category

logger = logging.getLogger(__name__)


def _ensure_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce a scalar or iterable into a tuple of non-empty strings."""

    if value is None:
        return ()
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(str(v) for v in value if v is not None and str(v).strip())
    text = str(value)
    return (text,) if text.strip() else ()


@dataclass(frozen=True)
class Garment:
    """A single clothing item as seen by the scoring engine.

    Instances are immutable; the scorers never mutate a garment or the closet
    sequence they are handed.
    """

    item_id: str
    category: str
    color_primary: str = ""
    vibe_tags: Tuple[str, ...] = field(default_factory=tuple)
    seasons: Tuple[str, ...] = field(default_factory=tuple)
    name: Optional[str] = None
    subcategory: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "item_id", str(self.item_id))
        object.__setattr__(self, "category", normalize_category(self.category))
        object.__setattr__(self, "color_primary", str(self.color_primary or ""))
        object.__setattr__(self, "vibe_tags", _ensure_tuple(self.vibe_tags))
        object.__setattr__(self, "seasons", _ensure_tuple(self.seasons))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "category": self.category,
            "color_primary": self.color_primary,
            "vibe_tags": list(self.vibe_tags),
            "seasons": list(self.seasons),
            "name": self.name,
            "subcategory": self.subcategory,
            "image_url": self.image_url,
        }


def from_raw_metadata(raw: Dict[str, Any]) -> Garment:
    """Factory to build a :class:`Garment` from a loose closet record.

    Accepts the flat shape (``{"item_id": ..., "category": ...}``) as well as
    the stored closet shape where attributes live under ``metadata`` and the
    identifier is ``id``.
    """

    metadata = raw.get("metadata") or {}
    merged: Dict[str, Any] = {**metadata, **{k: v for k, v in raw.items() if k != "metadata"}}

    item_id = merged.get("item_id") or merged.get("id")
    if not item_id:
        raise ValueError("Missing required field for Garment: item_id")

    return Garment(
        item_id=str(item_id),
        category=str(merged.get("category") or ""),
        color_primary=str(merged.get("color_primary") or ""),
        vibe_tags=_ensure_tuple(merged.get("vibe_tags")),
        seasons=_ensure_tuple(merged.get("seasons")),
        name=merged.get("name"),
        subcategory=merged.get("subcategory"),
        image_url=merged.get("image_url"),
    )


def garments_from_raw(records: Iterable[Dict[str, Any]]) -> List[Garment]:
    """Coerce loose records into garments, skipping the ones that cannot be read."""

    garments: List[Garment] = []
    for raw in records or []:
        try:
            garments.append(from_raw_metadata(raw))
        except ValueError as exc:
            logger.warning("Skipping closet entry due to validation error: %s", exc)
    return garments


__all__ = ["Garment", "from_raw_metadata", "garments_from_raw"]
