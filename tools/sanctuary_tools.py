"""Tool wrappers exposing the styling engine over loose dict payloads."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from logic.outfit_builder import compose_outfit, generate_daily_outfits
from logic.outfit_scoring import curated_outfit_confidence, pairwise_harmony
from logic.random_source import IdFactory, RandomSource, new_outfit_id
from logic.validation import (
    CuratedOutfitInput,
    DailyOutfitsInput,
    OutfitGenerationInput,
    WardrobeAnalysisInput,
    WardrobeStatsInput,
    validation_failure,
)
from logic.wardrobe_analytics import RECENCY_WINDOW_DAYS, compute_stats
from logic.wardrobe_insights import generate_insights
from models.clothing_item import ClothingItem, from_raw_metadata, utc_now
from tools.observability import instrument_tool

logger = logging.getLogger(__name__)


def to_payload(value: Any) -> Any:
    """Convert engine dataclasses into JSON-ready primitives."""

    if is_dataclass(value) and not isinstance(value, type):
        return to_payload(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(to_payload(key)): to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


def coerce_wardrobe(
    raw_items: Iterable[Dict[str, Any]], now: Optional[datetime] = None
) -> Tuple[List[ClothingItem], List[str]]:
    """Build clothing items from raw records, skipping malformed ones.

    Records without a creation time are stamped with ``now``.
    """

    items: List[ClothingItem] = []
    skipped: List[str] = []
    for index, raw in enumerate(raw_items or []):
        try:
            items.append(from_raw_metadata(raw, default_created_at=now))
        except (TypeError, ValueError) as exc:
            reference = str(raw.get("item_id") or raw.get("id") or f"#{index}")
            skipped.append(reference)
            logger.warning("Skipping wardrobe entry %s due to validation error: %s", reference, exc)
    return items, skipped


def _review(message: str) -> Callable:
    return lambda exc: validation_failure(message, exc)


class SanctuaryTools:
    """Thin wrapper to expose styling engine operations as tools."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Callable[[], datetime]] = None,
        recency_days: int = RECENCY_WINDOW_DAYS,
    ) -> None:
        self.rng = rng or random.SystemRandom()
        self.id_factory = id_factory or new_outfit_id
        self.clock = clock or utc_now
        self.recency_days = recency_days

    def _rng_for(self, seed: Optional[int]) -> RandomSource:
        return random.Random(seed) if seed is not None else self.rng

    @instrument_tool(
        "generate_outfit",
        input_model=OutfitGenerationInput,
        on_validation_error=_review("Outfit request failed validation"),
    )
    def generate_outfit(self, wardrobe: List[Dict[str, Any]], mood: str, seed: Optional[int] = None) -> Dict[str, Any]:
        current = self.clock()
        items, skipped = coerce_wardrobe(wardrobe, now=current)
        outfit = compose_outfit(items, mood, self._rng_for(seed), id_factory=self.id_factory, now=current)
        return {
            "status": "ok" if outfit else "empty",
            "outfit": to_payload(outfit) if outfit else None,
            "skipped": skipped,
        }

    @instrument_tool(
        "generate_daily_outfits",
        input_model=DailyOutfitsInput,
        on_validation_error=_review("Daily outfit request failed validation"),
    )
    def generate_daily_outfits(
        self,
        wardrobe: List[Dict[str, Any]],
        count: int = 3,
        moods: Optional[List[str]] = None,
        seed: Optional[int] = None,
    ) -> Dict[str, Any]:
        current = self.clock()
        items, skipped = coerce_wardrobe(wardrobe, now=current)
        outfits = generate_daily_outfits(
            items,
            self._rng_for(seed),
            count=count,
            moods=moods,
            id_factory=self.id_factory,
            now=current,
        )
        return {"status": "ok" if outfits else "empty", "outfits": to_payload(outfits), "skipped": skipped}

    @instrument_tool(
        "wardrobe_stats",
        input_model=WardrobeStatsInput,
        on_validation_error=_review("Wardrobe stats request failed validation"),
    )
    def wardrobe_stats(self, wardrobe: List[Dict[str, Any]], now: Optional[datetime] = None) -> Dict[str, Any]:
        current = now or self.clock()
        items, skipped = coerce_wardrobe(wardrobe, now=current)
        stats = compute_stats(items, current, window_days=self.recency_days)
        return {"status": "ok", "stats": to_payload(stats), "skipped": skipped}

    @instrument_tool(
        "wardrobe_insights",
        input_model=WardrobeAnalysisInput,
        on_validation_error=_review("Wardrobe insight request failed validation"),
    )
    def wardrobe_insights(
        self, wardrobe: List[Dict[str, Any]], now: Optional[datetime] = None, seed: Optional[int] = None
    ) -> Dict[str, Any]:
        current = now or self.clock()
        items, skipped = coerce_wardrobe(wardrobe, now=current)
        stats = compute_stats(items, current, window_days=self.recency_days)
        insights = generate_insights(
            items, stats, current, self._rng_for(seed), window_days=self.recency_days
        )
        return {
            "status": "ok",
            "stats": to_payload(stats),
            "insights": to_payload(insights),
            "skipped": skipped,
        }

    @instrument_tool(
        "score_curated_outfit",
        input_model=CuratedOutfitInput,
        on_validation_error=_review("Curated outfit failed validation"),
    )
    def score_curated_outfit(self, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        clothing, skipped = coerce_wardrobe(items, now=self.clock())
        return {
            "status": "ok" if clothing else "empty",
            "confidence_score": curated_outfit_confidence(clothing),
            "harmony": pairwise_harmony(clothing),
            "skipped": skipped,
        }


__all__ = ["SanctuaryTools", "coerce_wardrobe", "to_payload"]
