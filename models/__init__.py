"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.capsule import CapsuleItem, CapsuleWardrobe, CompatibilityPair, capsule_from_raw
from models.garment import Garment, from_raw_metadata, garments_from_raw

__all__ = [
    "CapsuleItem",
    "CapsuleWardrobe",
    "CompatibilityPair",
    "Garment",
    "capsule_from_raw",
    "from_raw_metadata",
    "garments_from_raw",
]
