"""Pydantic payload schema tests."""

from pathlib import Path
import sys

import pytest
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.validation import (
    CapsulePayload,
    CompatibilityPairPayload,
    GarmentPayload,
    VersatilityRangeFilter,
    validation_failure,
)


def test_garment_payload_accepts_flat_and_nested_shapes() -> None:
    flat = GarmentPayload.model_validate(
        {"item_id": "a", "category": "top", "color_primary": "negro", "vibe_tags": None}
    )
    nested = GarmentPayload.model_validate(
        {"id": "b", "metadata": {"category": "bottom", "color_primary": "gris", "seasons": ["verano"]}}
    )

    assert flat.to_model().vibe_tags == ()
    assert nested.to_model().item_id == "b"
    assert nested.to_model().seasons == ("verano",)


def test_garment_payload_requires_identifier() -> None:
    with pytest.raises(ValidationError):
        GarmentPayload.model_validate({"category": "top"})


def test_pair_payload_bounds_score() -> None:
    with pytest.raises(ValidationError):
        CompatibilityPairPayload.model_validate({"item1_id": "a", "item2_id": "b", "compatibility_score": 120})

    pair = CompatibilityPairPayload.model_validate({"item1_id": "a", "item2_id": "b", "compatibility_score": 75})
    assert pair.to_model().reasoning == ""


def test_capsule_payload_to_model() -> None:
    payload = CapsulePayload.model_validate(
        {
            "name": "Cápsula",
            "items": [{"id": "t1", "category": "top"}, {"item_id": "b1", "category": "bottom"}],
            "compatibility_matrix": [{"item1_id": "t1", "item2_id": "b1", "compatibility_score": 90}],
        }
    )

    capsule = payload.to_model()

    assert capsule.item_ids == ["t1", "b1"]
    assert capsule.compatibility_matrix[0].compatibility_score == 90


def test_versatility_range_filter_rules() -> None:
    assert VersatilityRangeFilter().max == 100
    with pytest.raises(ValidationError):
        VersatilityRangeFilter(min=80, max=20)
    with pytest.raises(ValidationError):
        VersatilityRangeFilter(min=-5, max=20)


def test_validation_failure_payload() -> None:
    try:
        VersatilityRangeFilter(min=90, max=10)
    except ValidationError as exc:
        payload = validation_failure("Invalid range", exc)
    else:  # pragma: no cover
        pytest.fail("expected a validation error")

    assert payload["status"] == "invalid"
    assert payload["message"] == "Invalid range"
    assert payload["details"]
