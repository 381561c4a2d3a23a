"""Caller-side memoization of closet versatility scores.

The scorers are pure and recompute on every call. Presentation layers that
render the same closet repeatedly keep results here, keyed by closet id and a
fingerprint of every scoring-relevant field, so any closet edit or vocabulary
change misses the cache.
"""
from __future__ import annotations

import hashlib
import json
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from logic.closet_stats import score_closet
from logic.versatility import ScoredGarment
from models.garment import Garment
from models.taxonomy import DEFAULT_VOCABULARY, ScoringVocabulary


@dataclass
class CacheEntry:
    """Scores for one closet snapshot, aligned with the closet order."""

    fingerprint: str
    scores: Tuple[int, ...]
    created_at: float = field(default_factory=lambda: time.time())


def closet_fingerprint(items: Sequence[Garment], vocabulary: ScoringVocabulary | None = None) -> str:
    """Hash the fields that influence scoring, in closet order."""

    vocab = vocabulary or DEFAULT_VOCABULARY
    payload = {
        "items": [
            [item.item_id, item.category, item.color_primary, list(item.vibe_tags), list(item.seasons)]
            for item in items
        ],
        "vocabulary": [
            list(vocab.neutral_colors),
            list(vocab.basic_vibes),
            list(vocab.versatile_categories),
        ],
    }
    encoded = json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")
    return hashlib.sha256(encoded).hexdigest()


class ClosetScoreCache:
    """Bounded in-memory LRU of per-closet scores."""

    def __init__(self, max_closets: int = 256) -> None:
        self.max_closets = max_closets
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, closet_id: str, fingerprint: str) -> Optional[CacheEntry]:
        with self._lock:
            entry = self._entries.get(closet_id)
            if entry is None or entry.fingerprint != fingerprint:
                self.misses += 1
                return None
            self._entries.move_to_end(closet_id)
            self.hits += 1
            return entry

    def put(self, closet_id: str, entry: CacheEntry) -> None:
        with self._lock:
            self._entries[closet_id] = entry
            self._entries.move_to_end(closet_id)
            while len(self._entries) > self.max_closets:
                self._entries.popitem(last=False)

    def scores_for(
        self,
        closet_id: str,
        items: Sequence[Garment],
        vocabulary: ScoringVocabulary | None = None,
    ) -> List[ScoredGarment]:
        """Return closet-ordered scores, computing them on a miss."""

        closet = list(items)
        fingerprint = closet_fingerprint(closet, vocabulary)
        entry = self.get(closet_id, fingerprint)
        if entry is not None:
            return [
                ScoredGarment(garment=item, versatility_score=score)
                for item, score in zip(closet, entry.scores)
            ]
        scored = score_closet(closet, vocabulary)
        self.put(
            closet_id,
            CacheEntry(fingerprint=fingerprint, scores=tuple(result.versatility_score for result in scored)),
        )
        return scored

    def invalidate(self, closet_id: str) -> bool:
        with self._lock:
            return self._entries.pop(closet_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> Dict[str, int]:
        return {"closets": len(self._entries), "hits": self.hits, "misses": self.misses}


__all__ = ["CacheEntry", "ClosetScoreCache", "closet_fingerprint"]
