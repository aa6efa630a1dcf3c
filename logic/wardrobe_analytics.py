"""Aggregate statistics over a wardrobe snapshot."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Optional, Sequence

from models.clothing_item import ClothingItem, as_utc
from models.wardrobe import WardrobeStats

RECENCY_WINDOW_DAYS = 30


def recency_cutoff(now: datetime, window_days: int = RECENCY_WINDOW_DAYS) -> datetime:
    return as_utc(now) - timedelta(days=window_days)


def worn_since(item: ClothingItem, cutoff: datetime) -> bool:
    """True when the item was last worn on or after ``cutoff``."""

    return item.last_worn is not None and item.last_worn >= cutoff


def compute_stats(
    wardrobe: Sequence[ClothingItem], now: datetime, window_days: Optional[int] = None
) -> WardrobeStats:
    """Single-pass statistics; an empty wardrobe yields zeroed rates."""

    cutoff = recency_cutoff(now, RECENCY_WINDOW_DAYS if window_days is None else window_days)
    category_counts: Dict[str, int] = {}
    color_distribution: Dict[str, int] = {}
    recently_worn = 0
    confidence_sum = 0.0
    wear_total = 0

    for item in wardrobe:
        category_counts[item.category.value] = category_counts.get(item.category.value, 0) + 1
        for color in item.colors:
            color_distribution[color] = color_distribution.get(color, 0) + 1
        if worn_since(item, cutoff):
            recently_worn += 1
        confidence_sum += item.confidence_score
        wear_total += item.wear_count

    total = len(wardrobe)
    return WardrobeStats(
        total_items=total,
        category_counts=category_counts,
        color_distribution=color_distribution,
        utilization_rate=(recently_worn / total * 100) if total else 0.0,
        average_confidence=(confidence_sum / total) if total else 0.0,
        total_wear_count=wear_total,
    )


__all__ = ["RECENCY_WINDOW_DAYS", "compute_stats", "recency_cutoff", "worn_since"]
