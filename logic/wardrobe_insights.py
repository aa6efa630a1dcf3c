"""Rule-based wardrobe insights for the insights surface.

Each rule is independent and contributes at most one insight, so a wardrobe
yields between zero and three. Insights are advisory text only.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from logic.random_source import RandomSource, pick
from logic.wardrobe_analytics import RECENCY_WINDOW_DAYS, recency_cutoff, worn_since
from models.clothing_item import ClothingItem
from models.wardrobe import Insight, InsightKind, WardrobeStats

logger = logging.getLogger(__name__)

HIGH_CONFIDENCE_THRESHOLD = 8.0


def _forgotten_treasure(
    wardrobe: Sequence[ClothingItem], now: datetime, rng: RandomSource, window_days: int
) -> Optional[Insight]:
    cutoff = recency_cutoff(now, window_days)
    forgotten = [item for item in wardrobe if not worn_since(item, cutoff)]
    if not forgotten:
        return None
    item = pick(rng, forgotten)
    return Insight(
        insight_id=f"forgotten-{item.item_id}",
        kind=InsightKind.FORGOTTEN_TREASURE,
        title="Rediscover a Hidden Gem",
        message=(
            f"Your {item.name} is waiting to shine again. "
            "Sometimes the pieces we forget hold the most magic."
        ),
        actionable=True,
        related_item_ids=[item.item_id],
    )


def _color_harmony(stats: WardrobeStats) -> Optional[Insight]:
    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(stats.color_distribution.items(), key=lambda kv: -kv[1])
    dominant = [color for color, count in ranked if count >= 1][:2]
    if len(dominant) < 2:
        return None
    first, second = dominant
    return Insight(
        insight_id=f"color-harmony-{first}-{second}",
        kind=InsightKind.COLOR_HARMONY,
        title="Your Color Story",
        message=(
            f"{first.title()} and {second.title()} create beautiful harmony in your wardrobe. "
            "These colors reflect your sophisticated taste."
        ),
        actionable=False,
    )


def _confidence_boost(wardrobe: Sequence[ClothingItem]) -> Optional[Insight]:
    power_pieces = [item for item in wardrobe if item.confidence_score >= HIGH_CONFIDENCE_THRESHOLD]
    if not power_pieces:
        return None
    return Insight(
        insight_id=f"confidence-boost-{len(power_pieces)}",
        kind=InsightKind.CONFIDENCE_BOOST,
        title="Your Power Pieces",
        message=(
            f"You have {len(power_pieces)} pieces that make you feel absolutely radiant. "
            "Trust in their magic."
        ),
        actionable=True,
        related_item_ids=[item.item_id for item in power_pieces],
    )


def generate_insights(
    wardrobe: Sequence[ClothingItem],
    stats: WardrobeStats,
    now: datetime,
    rng: RandomSource,
    window_days: int = RECENCY_WINDOW_DAYS,
) -> List[Insight]:
    candidates = [
        _forgotten_treasure(wardrobe, now, rng, window_days),
        _color_harmony(stats),
        _confidence_boost(wardrobe),
    ]
    insights = [insight for insight in candidates if insight is not None]
    logger.info("Generated %s insights: %s", len(insights), [insight.kind.value for insight in insights])
    return insights


__all__ = ["generate_insights", "HIGH_CONFIDENCE_THRESHOLD"]
