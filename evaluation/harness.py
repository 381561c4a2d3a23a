"""Lightweight evaluation harness for deterministic scoring scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.versatility import calculate_versatility_score
from models.capsule import capsule_from_raw
from models.garment import garments_from_raw
from wardrobe_app.app import ClosetScoringApp
from wardrobe_app.config import ScoringConfig


def _check_scores(scenario: EvaluationScenario, app: ClosetScoringApp) -> Dict[str, bool]:
    closet = garments_from_raw(scenario.closet)
    by_id = {item.item_id: item for item in closet}
    checks: Dict[str, bool] = {}
    for item_id, expected in dict(scenario.expectations.get("scores", {})).items():
        item = by_id.get(item_id)
        actual = calculate_versatility_score(item, closet, app.vocabulary) if item else None
        checks[f"score:{item_id}"] = actual == expected
    return checks


def _check_capsule(scenario: EvaluationScenario, app: ClosetScoringApp) -> Dict[str, bool]:
    if not scenario.capsule:
        return {}
    summary = app.capsule_summary(capsule_from_raw(scenario.capsule))
    expectations = scenario.expectations
    checks: Dict[str, bool] = {}
    if "top_pair_scores" in expectations:
        actual = [pair["compatibility_score"] for pair in summary["top_pairs"]]
        checks["top_pair_scores"] = actual == expectations["top_pair_scores"]
    for key in ("average_compatibility", "high_compatibility_pairs", "total_combinations"):
        if key in expectations:
            checks[key] = summary[key] == expectations[key]
    return checks


def run_scenario(scenario: EvaluationScenario, app: ClosetScoringApp | None = None) -> Dict[str, object]:
    app = app or ClosetScoringApp(config=ScoringConfig())
    checks = {**_check_scores(scenario, app), **_check_capsule(scenario, app)}
    return {
        "scenario": scenario.name,
        "passed": bool(checks) and all(checks.values()),
        "checks": checks,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    app = ClosetScoringApp(config=ScoringConfig())
    return [run_scenario(scenario, app) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
