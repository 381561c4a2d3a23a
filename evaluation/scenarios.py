"""Evaluation scenarios exercising versatility scoring and capsule matrices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class EvaluationScenario:
    name: str
    description: str
    closet: List[Dict[str, object]]
    expectations: Dict[str, object]
    capsule: Optional[Dict[str, object]] = None
    tags: List[str] = field(default_factory=list)


def _item(item_id: str, category: str, color: str = "", vibes=None, seasons=None) -> Dict[str, object]:
    return {
        "item_id": item_id,
        "category": category,
        "color_primary": color,
        "vibe_tags": list(vibes or []),
        "seasons": list(seasons or []),
    }


def _white_tee_closet() -> List[Dict[str, object]]:
    return [
        _item(
            "camiseta_blanca",
            "top",
            "blanco",
            ["casual", "minimalista", "basico"],
            ["Primavera", "Verano", "Todo el año"],
        ),
        _item("jean_azul", "bottom", "azul", ["urbano"]),
        _item("falda_roja", "bottom", "rojo", ["romántico"]),
        _item("zapatillas", "shoes", "verde", ["deportivo"]),
        _item("botines", "shoes", "marrón", ["rockero"]),
    ]


def _saturated_closet() -> List[Dict[str, object]]:
    closet = [_item("remera_roja", "top", "rojo")]
    closet += [_item(f"pantalon_{i}", "bottom", "verde") for i in range(10)]
    closet += [_item(f"zapato_{i}", "shoes", "violeta") for i in range(10)]
    return closet


def _accessory_closet() -> List[Dict[str, object]]:
    return [
        _item("cinturon", "accessory", "dorado"),
        _item("top_a", "top", "rosa"),
        _item("top_b", "top", "lila"),
        _item("bottom_a", "bottom", "verde"),
        _item("bottom_b", "bottom", "rojo"),
        _item("shoes_a", "shoes", "rojo"),
        _item("shoes_b", "shoes", "azul"),
    ]


def _capsule_matrix() -> Dict[str, object]:
    scores = [95, 88, 72, 81, 60, 99]
    return {
        "name": "Cápsula Minimalista",
        "items": [
            {"item_id": "t1", "category": "top"},
            {"item_id": "t2", "category": "top"},
            {"item_id": "b1", "category": "bottom"},
            {"item_id": "s1", "category": "shoes"},
        ],
        "compatibility_matrix": [
            {"item1_id": f"a{i}", "item2_id": f"b{i}", "compatibility_score": score, "reasoning": "ok"}
            for i, score in enumerate(scores)
        ],
    }


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="white_tee",
        description="Neutral basic multi-season top with two bottoms and two shoes",
        closet=_white_tee_closet(),
        expectations={"scores": {"camiseta_blanca": 47, "jean_azul": 26, "zapatillas": 21}},
        tags=["versatility"],
    ),
    EvaluationScenario(
        name="lonely_coat",
        description="Static bonuses only when the closet holds nothing else",
        closet=[
            _item("abrigo", "outerwear", "Azul marino", ["Clásico"], ["Otoño", "Invierno", "Primavera"])
        ],
        expectations={"scores": {"abrigo": 40}},
        tags=["versatility"],
    ),
    EvaluationScenario(
        name="combination_cap",
        description="Combination bonus saturates at thirty points",
        closet=_saturated_closet(),
        expectations={"scores": {"remera_roja": 55}},
        tags=["versatility"],
    ),
    EvaluationScenario(
        name="universal_accessory",
        description="Accessories combine with every complete base outfit",
        closet=_accessory_closet(),
        expectations={"scores": {"cinturon": 24}},
        tags=["versatility"],
    ),
    EvaluationScenario(
        name="one_piece_with_shoes",
        description="One-piece garments only need shoes",
        closet=[
            _item("vestido", "one-piece", "verde"),
            _item("sandalias", "shoes", "dorado"),
            _item("stilettos", "shoes", "rojo"),
            _item("mocasines", "shoes", "marrón"),
        ],
        expectations={"scores": {"vestido": 21}},
        tags=["versatility"],
    ),
    EvaluationScenario(
        name="capsule_top_pairs",
        description="Top compatible pairs respect threshold and ordering",
        closet=[],
        capsule=_capsule_matrix(),
        expectations={
            "top_pair_scores": [99, 95, 88, 81],
            "average_compatibility": 83,
            "high_compatibility_pairs": 4,
            "total_combinations": 2,
        },
        tags=["compatibility"],
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
