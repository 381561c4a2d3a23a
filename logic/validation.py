"""Pydantic schemas and helpers for validating closet and capsule payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from models.capsule import CapsuleItem, CapsuleWardrobe, CompatibilityPair
from models.garment import Garment


class GarmentPayload(BaseModel):
    """Input contract for a closet garment."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    item_id: str = Field(min_length=1, alias="id")
    category: str = ""
    color_primary: str = ""
    vibe_tags: List[str] = Field(default_factory=list)
    seasons: List[str] = Field(default_factory=list)
    name: Optional[str] = None
    subcategory: Optional[str] = None
    image_url: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_metadata(cls, data: Any) -> Any:
        """Accept the stored ``{"id", "metadata": {...}}`` shape and null collections."""

        if not isinstance(data, dict):
            return data
        if isinstance(data.get("metadata"), dict):
            data = {**data["metadata"], **{k: v for k, v in data.items() if k != "metadata"}}
        else:
            data = dict(data)
        for key in ("vibe_tags", "seasons"):
            if data.get(key) is None:
                data[key] = []
        if data.get("color_primary") is None:
            data["color_primary"] = ""
        return data

    def to_model(self) -> Garment:
        return Garment(
            item_id=self.item_id,
            category=self.category,
            color_primary=self.color_primary,
            vibe_tags=tuple(self.vibe_tags),
            seasons=tuple(self.seasons),
            name=self.name,
            subcategory=self.subcategory,
            image_url=self.image_url,
        )


class CompatibilityPairPayload(BaseModel):
    """Input contract for one compatibility matrix entry."""

    item1_id: str = Field(min_length=1)
    item2_id: str = Field(min_length=1)
    compatibility_score: float = Field(ge=0, le=100, allow_inf_nan=False)
    reasoning: str = ""

    def to_model(self) -> CompatibilityPair:
        return CompatibilityPair(
            item1_id=self.item1_id,
            item2_id=self.item2_id,
            compatibility_score=self.compatibility_score,
            reasoning=self.reasoning,
        )


class CapsuleItemPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    item_id: str = Field(min_length=1, alias="id")
    category: str = ""
    score: Optional[int] = None
    reasoning: Optional[str] = None

    def to_model(self) -> CapsuleItem:
        return CapsuleItem(
            item_id=self.item_id, category=self.category, score=self.score, reasoning=self.reasoning
        )


class CapsulePayload(BaseModel):
    """Input contract for a generated capsule wardrobe."""

    model_config = ConfigDict(extra="ignore")

    items: List[CapsuleItemPayload] = Field(default_factory=list)
    compatibility_matrix: List[CompatibilityPairPayload] = Field(default_factory=list)
    name: Optional[str] = None
    theme: Optional[str] = None
    season: Optional[str] = None

    def to_model(self) -> CapsuleWardrobe:
        return CapsuleWardrobe(
            items=tuple(item.to_model() for item in self.items),
            compatibility_matrix=tuple(pair.to_model() for pair in self.compatibility_matrix),
            name=self.name,
            theme=self.theme,
            season=self.season,
        )


class VersatilityRangeFilter(BaseModel):
    """Inclusive versatility score range used to filter a closet."""

    min: int = Field(default=0, ge=0, le=100)
    max: int = Field(default=100, ge=0, le=100)

    @model_validator(mode="after")
    def _validate_range(self) -> "VersatilityRangeFilter":
        if self.min > self.max:
            raise ValueError("Versatility min cannot be greater than max")
        return self


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: str = "invalid"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [{"loc": list(error.get("loc", ())), "msg": error.get("msg", "")} for error in exc.errors()]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "CapsuleItemPayload",
    "CapsulePayload",
    "CompatibilityPairPayload",
    "GarmentPayload",
    "ValidationResult",
    "VersatilityRangeFilter",
    "validation_failure",
]
