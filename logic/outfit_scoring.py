"""Deterministic compatibility and confidence scoring for outfits."""

from __future__ import annotations

from itertools import combinations
from typing import Dict, Sequence

from logic.random_source import RandomSource
from models.clothing_item import ClothingItem
from models.compatibility import best_color_pairing, category_compatibility, color_compatibility
from models.outfit import clamp_confidence

WEIGHTS = {
    "color": 0.7,
    "category": 0.3,
}

FULL_OUTFIT_SIZE = 4
MAX_COMPLETENESS_BONUS = 2.0
EMPTY_OUTFIT_CONFIDENCE = 5.0


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def item_score(candidate: ClothingItem, outfit_so_far: Sequence[ClothingItem], rng: RandomSource) -> float:
    """Score how well ``candidate`` fits the pieces already chosen.

    Any candidate is an equally valid opening piece, so an empty outfit yields a
    uniform draw from ``rng``. Otherwise the score is the mean, over existing
    items, of the weighted best colour pairing and category compatibility.
    """

    if not outfit_so_far:
        return rng.random()
    total = 0.0
    for existing in outfit_so_far:
        color_val = best_color_pairing(candidate.colors, existing.colors)
        category_val = category_compatibility(candidate.category, existing.category)
        total += color_val * WEIGHTS["color"] + category_val * WEIGHTS["category"]
    return _clamp(total / len(outfit_so_far))


def completeness_bonus(item_count: int) -> float:
    return min(item_count / FULL_OUTFIT_SIZE, 1.0) * MAX_COMPLETENESS_BONUS


def _mean_confidence(items: Sequence[ClothingItem]) -> float:
    return sum(item.confidence_score for item in items) / len(items)


def outfit_confidence(items: Sequence[ClothingItem]) -> float:
    """Average item confidence plus a completeness bonus, clamped to ``[0, 10]``."""

    if not items:
        return EMPTY_OUTFIT_CONFIDENCE
    return clamp_confidence(_mean_confidence(items) + completeness_bonus(len(items)))


def pairwise_harmony(items: Sequence[ClothingItem]) -> Dict[str, float]:
    """Average colour and category compatibility across every unordered item pair."""

    pairs = list(combinations(items, 2))
    if not pairs:
        return {"color": 0.0, "category": 0.0, "pairs": 0}
    color_total = sum(best_color_pairing(first.colors, second.colors) for first, second in pairs)
    category_total = sum(category_compatibility(first.category, second.category) for first, second in pairs)
    return {
        "color": color_total / len(pairs),
        "category": category_total / len(pairs),
        "pairs": len(pairs),
    }


def curated_outfit_confidence(items: Sequence[ClothingItem]) -> float:
    """Confidence for hand-assembled outfits.

    Mean item confidence, plus up to one point each for average pairwise colour
    harmony and category compatibility, clamped to ``[0, 10]``.
    """

    if not items:
        return EMPTY_OUTFIT_CONFIDENCE
    harmony = pairwise_harmony(items)
    return clamp_confidence(_mean_confidence(items) + harmony["color"] + harmony["category"])


__all__ = [
    "WEIGHTS",
    "item_score",
    "outfit_confidence",
    "curated_outfit_confidence",
    "completeness_bonus",
    "pairwise_harmony",
    "color_compatibility",
    "category_compatibility",
]
