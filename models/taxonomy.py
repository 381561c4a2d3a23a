"""Canonical taxonomy and scoring vocabulary for closet garments.

This module centralises the category labels and the fixed vocabularies that
grant versatility bonuses. Matching against the vocabularies is a
case-insensitive substring test, so ``"Azul marino oscuro"`` counts as a
neutral color. That fuzziness is intentional; it can false-positive on
compound descriptors, and a bonus is applied at most once per garment no
matter how many terms match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

TOP = "top"
BOTTOM = "bottom"
SHOES = "shoes"
ACCESSORY = "accessory"
OUTERWEAR = "outerwear"
ONE_PIECE = "one-piece"

CATEGORIES: Tuple[str, ...] = (TOP, BOTTOM, SHOES, ACCESSORY, OUTERWEAR, ONE_PIECE)

_CATEGORY_ALIASES = {
    "one_piece": ONE_PIECE,
    "one piece": ONE_PIECE,
    "onepiece": ONE_PIECE,
    "accessories": ACCESSORY,
    "tops": TOP,
    "bottoms": BOTTOM,
    "shoe": SHOES,
}

NEUTRAL_COLORS: Tuple[str, ...] = (
    "negro",
    "black",
    "blanco",
    "white",
    "gris",
    "gray",
    "grey",
    "beige",
    "camel",
    "navy",
    "azul marino",
    "navy blue",
    "crema",
    "cream",
)

BASIC_VIBES: Tuple[str, ...] = (
    "minimalist",
    "minimalista",
    "basic",
    "básico",
    "basico",
    "classic",
    "clásico",
    "clasico",
    "casual",
    "essential",
    "esencial",
    "timeless",
    "atemporal",
)

VERSATILE_CATEGORIES: Tuple[str, ...] = (TOP, BOTTOM)


def normalize_category(value: Optional[str]) -> str:
    """Lowercase a category and fold common aliases onto the canonical label.

    Unknown categories are returned as-is (normalised) rather than rejected;
    the scorer treats them as combining with nothing.
    """

    key = (value or "").strip().lower()
    return _CATEGORY_ALIASES.get(key, key)


def _normalise_terms(values: Iterable[str]) -> Tuple[str, ...]:
    terms = []
    seen = set()
    for value in values or ():
        key = str(value).strip().lower()
        if key and key not in seen:
            terms.append(key)
            seen.add(key)
    return tuple(terms)


def contains_any(text: Optional[str], terms: Iterable[str]) -> bool:
    """Return True when ``text`` contains any of ``terms`` case-insensitively."""

    if not text:
        return False
    lowered = str(text).lower()
    return any(term in lowered for term in terms)


@dataclass(frozen=True)
class ScoringVocabulary:
    """Vocabulary lists that drive the static versatility bonuses."""

    neutral_colors: Tuple[str, ...] = NEUTRAL_COLORS
    basic_vibes: Tuple[str, ...] = BASIC_VIBES
    versatile_categories: Tuple[str, ...] = VERSATILE_CATEGORIES

    def __post_init__(self) -> None:
        object.__setattr__(self, "neutral_colors", _normalise_terms(self.neutral_colors))
        object.__setattr__(self, "basic_vibes", _normalise_terms(self.basic_vibes))
        object.__setattr__(
            self,
            "versatile_categories",
            tuple(normalize_category(value) for value in _normalise_terms(self.versatile_categories)),
        )

    def is_neutral_color(self, color: Optional[str]) -> bool:
        return contains_any(color, self.neutral_colors)

    def has_basic_vibe(self, vibe_tags: Optional[Iterable[str]]) -> bool:
        return any(contains_any(tag, self.basic_vibes) for tag in vibe_tags or ())

    def is_versatile_category(self, category: Optional[str]) -> bool:
        return normalize_category(category) in self.versatile_categories


DEFAULT_VOCABULARY = ScoringVocabulary()


__all__ = [
    "TOP",
    "BOTTOM",
    "SHOES",
    "ACCESSORY",
    "OUTERWEAR",
    "ONE_PIECE",
    "CATEGORIES",
    "NEUTRAL_COLORS",
    "BASIC_VIBES",
    "VERSATILE_CATEGORIES",
    "DEFAULT_VOCABULARY",
    "ScoringVocabulary",
    "contains_any",
    "normalize_category",
]
