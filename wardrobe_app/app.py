"""Application facade wiring configuration, caching and the scoring engine."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from logic.closet_stats import rank_scored, score_closet, summarize_scores, validate_versatility_range
from logic.compatibility_matrix import CompatibilityMatrixService, get_score_color
from logic.versatility import (
    ScoredGarment,
    calculate_potential_combinations,
    calculate_versatility_score,
    get_versatility_badge_color,
    get_versatility_label,
    get_versatility_tier,
)
from memory.score_cache import ClosetScoreCache
from models.capsule import CapsuleWardrobe
from models.garment import Garment
from tools.observability import instrument_operation
from wardrobe_app.config import ScoringConfig
from wardrobe_app.logging_config import get_logger, log_event, operation_context

LOGGER = get_logger(__name__)


class ClosetScoringApp:
    """Entry point used by the HTTP service and the CLI.

    Closet-wide results are memoised per ``closet_id`` when one is given; the
    underlying scorers stay pure and cache-free.
    """

    def __init__(self, config: ScoringConfig | None = None, cache: ClosetScoreCache | None = None) -> None:
        self.config = config or ScoringConfig.from_env()
        self.vocabulary = self.config.vocabulary()
        self.score_cache = cache or ClosetScoreCache()

    def _scored(self, closet: Sequence[Garment], closet_id: str | None) -> List[ScoredGarment]:
        if closet_id:
            return self.score_cache.scores_for(closet_id, closet, self.vocabulary)
        return score_closet(closet, self.vocabulary)

    @instrument_operation("score_item")
    def score_item(self, item: Garment, closet: Sequence[Garment]) -> Dict[str, object]:
        score = calculate_versatility_score(item, closet, self.vocabulary)
        return {
            "item_id": item.item_id,
            "versatility_score": score,
            "combinations": calculate_potential_combinations(item, closet),
            "tier": get_versatility_tier(score),
            "label": get_versatility_label(score),
            "badge_color": get_versatility_badge_color(score),
        }

    @instrument_operation("top_versatile_items")
    def top_versatile_items(
        self, closet: Sequence[Garment], limit: int | None = None, closet_id: str | None = None
    ) -> List[ScoredGarment]:
        effective_limit = self.config.top_items_limit if limit is None else limit
        return rank_scored(self._scored(closet, closet_id), effective_limit)

    @instrument_operation("closet_stats")
    def closet_stats(
        self,
        closet: Sequence[Garment],
        closet_id: str | None = None,
        minimum: int = 0,
        maximum: int = 100,
    ) -> Dict[str, object]:
        errors = validate_versatility_range(minimum, maximum)
        if errors:
            log_event(LOGGER, logging.WARNING, "closet_stats_invalid_range", errors=errors)
            raise ValueError("; ".join(errors))
        with operation_context("app:closet_stats") as correlation_id:
            stats = summarize_scores(
                self._scored(closet, closet_id), minimum, maximum, self.config.top_items_limit
            )
            log_event(
                LOGGER,
                logging.INFO,
                "closet_stats_computed",
                correlation_id=correlation_id,
                total_items=stats["total_items"],
                average_versatility=stats["average_versatility"],
                cached=bool(closet_id),
            )
            return stats

    def invalidate_closet(self, closet_id: str) -> bool:
        dropped = self.score_cache.invalidate(closet_id)
        log_event(LOGGER, logging.INFO, "closet_cache_invalidated", closet_id=closet_id, dropped=dropped)
        return dropped

    def _matrix_service(self, capsule: CapsuleWardrobe) -> CompatibilityMatrixService:
        return CompatibilityMatrixService(
            capsule, threshold=self.config.high_compatibility_threshold, limit=self.config.top_pairs_limit
        )

    @instrument_operation("compatibility_lookup")
    def compatibility_lookup(self, capsule: CapsuleWardrobe, item1_id: str, item2_id: str) -> Dict[str, object]:
        service = self._matrix_service(capsule)
        score = service.score(item1_id, item2_id)
        pair = service.pair(item1_id, item2_id)
        return {
            "item1_id": item1_id,
            "item2_id": item2_id,
            "compatibility_score": score,
            "label": service.label(item1_id, item2_id),
            "color": get_score_color(score),
            "pair": pair.to_dict() if pair else None,
        }

    @instrument_operation("capsule_summary")
    def capsule_summary(
        self, capsule: CapsuleWardrobe, threshold: Optional[int] = None, limit: Optional[int] = None
    ) -> Dict[str, object]:
        service = self._matrix_service(capsule)
        if threshold is not None:
            service.threshold = threshold
        if limit is not None:
            service.limit = limit
        summary = service.summary()
        log_event(LOGGER, logging.DEBUG, "capsule_summarised", capsule=capsule.name, top_pairs=summary["top_pairs"])
        return summary


__all__ = ["ClosetScoringApp"]
