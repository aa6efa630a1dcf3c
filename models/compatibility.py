"""Static colour and category compatibility tables.

Both tables are keyed by unordered pairs so lookups are symmetric by
construction. Anything outside the canonical vocabularies scores ``0.0``.
"""
from __future__ import annotations

import logging
from itertools import combinations_with_replacement
from typing import Dict, FrozenSet, Iterable, Tuple

from models.taxonomy import (
    COLORS,
    METALLIC_COLORS,
    NEUTRAL_COLORS,
    Category,
    normalize_color_name,
    parse_category,
)

logger = logging.getLogger(__name__)

IDENTICAL_COLOR_SCORE = 1.0
NEUTRAL_PAIR_SCORE = 0.9
NEUTRAL_ACCENT_SCORE = 0.8
METALLIC_NEUTRAL_SCORE = 0.85
DEFAULT_COLOR_SCORE = 0.3
UNKNOWN_SCORE = 0.0

_Pair = FrozenSet[str]

_COLOR_PAIRS: Dict[Tuple[str, str], float] = {
    # complementary
    ("blue", "orange"): 0.75,
    ("purple", "yellow"): 0.7,
    ("red", "green"): 0.5,
    ("pink", "green"): 0.65,
    # analogous
    ("red", "orange"): 0.7,
    ("orange", "yellow"): 0.7,
    ("yellow", "green"): 0.65,
    ("green", "blue"): 0.7,
    ("blue", "purple"): 0.7,
    ("purple", "pink"): 0.75,
    ("pink", "red"): 0.65,
    # earthy and metallic accents
    ("brown", "green"): 0.75,
    ("brown", "orange"): 0.7,
    ("brown", "beige"): 0.9,
    ("brown", "cream"): 0.85,
    ("gold", "red"): 0.7,
    ("gold", "brown"): 0.75,
    ("silver", "blue"): 0.75,
    ("silver", "purple"): 0.65,
    ("gold", "silver"): 0.5,
}

_CATEGORY_PAIRS: Dict[Tuple[Category, Category], float] = {
    (Category.TOPS, Category.TOPS): 0.1,
    (Category.TOPS, Category.BOTTOMS): 1.0,
    (Category.TOPS, Category.DRESSES): 0.2,
    (Category.TOPS, Category.OUTERWEAR): 0.8,
    (Category.TOPS, Category.SHOES): 0.9,
    (Category.TOPS, Category.ACCESSORIES): 0.8,
    (Category.TOPS, Category.INTIMATES): 0.3,
    (Category.BOTTOMS, Category.BOTTOMS): 0.1,
    (Category.BOTTOMS, Category.DRESSES): 0.1,
    (Category.BOTTOMS, Category.OUTERWEAR): 0.8,
    (Category.BOTTOMS, Category.SHOES): 0.9,
    (Category.BOTTOMS, Category.ACCESSORIES): 0.7,
    (Category.BOTTOMS, Category.INTIMATES): 0.3,
    (Category.DRESSES, Category.DRESSES): 0.0,
    (Category.DRESSES, Category.OUTERWEAR): 0.8,
    (Category.DRESSES, Category.SHOES): 0.9,
    (Category.DRESSES, Category.ACCESSORIES): 0.9,
    (Category.DRESSES, Category.INTIMATES): 0.3,
    (Category.OUTERWEAR, Category.OUTERWEAR): 0.2,
    (Category.OUTERWEAR, Category.SHOES): 0.8,
    (Category.OUTERWEAR, Category.ACCESSORIES): 0.7,
    (Category.OUTERWEAR, Category.INTIMATES): 0.1,
    (Category.SHOES, Category.SHOES): 0.1,
    (Category.SHOES, Category.ACCESSORIES): 0.8,
    (Category.SHOES, Category.INTIMATES): 0.5,
    (Category.ACCESSORIES, Category.ACCESSORIES): 0.6,
    (Category.ACCESSORIES, Category.INTIMATES): 0.4,
    (Category.INTIMATES, Category.INTIMATES): 0.2,
}


def _base_color_score(first: str, second: str) -> float:
    if first == second:
        return IDENTICAL_COLOR_SCORE
    if first in NEUTRAL_COLORS and second in NEUTRAL_COLORS:
        return NEUTRAL_PAIR_SCORE
    if {first, second} & METALLIC_COLORS and {first, second} & NEUTRAL_COLORS:
        return METALLIC_NEUTRAL_SCORE
    if first in NEUTRAL_COLORS or second in NEUTRAL_COLORS:
        return NEUTRAL_ACCENT_SCORE
    return DEFAULT_COLOR_SCORE


def _build_color_table(pairs: Dict[Tuple[str, str], float]) -> Dict[_Pair, float]:
    table: Dict[_Pair, float] = {}
    for first, second in combinations_with_replacement(COLORS, 2):
        table[frozenset((first, second))] = _base_color_score(first, second)
    for (first, second), score in pairs.items():
        table[frozenset((first, second))] = score
    return table


def _build_category_table(pairs: Dict[Tuple[Category, Category], float]) -> Dict[FrozenSet[Category], float]:
    table = {frozenset(pair): score for pair, score in pairs.items()}
    missing = [
        (first.value, second.value)
        for first, second in combinations_with_replacement(Category, 2)
        if frozenset((first, second)) not in table
    ]
    if missing:
        raise ValueError(f"Category compatibility table is missing pairs: {missing}")
    return table


COLOR_COMPATIBILITY = _build_color_table(_COLOR_PAIRS)
CATEGORY_COMPATIBILITY = _build_category_table(_CATEGORY_PAIRS)


def color_compatibility(color_a: str, color_b: str) -> float:
    """Return how well two colours pair, in ``[0, 1]``."""

    if not isinstance(color_a, str) or not isinstance(color_b, str):
        return UNKNOWN_SCORE
    key = frozenset((normalize_color_name(color_a), normalize_color_name(color_b)))
    return COLOR_COMPATIBILITY.get(key, UNKNOWN_SCORE)


def category_compatibility(category_a: Category | str, category_b: Category | str) -> float:
    """Return how naturally two categories co-occur in one outfit, in ``[0, 1]``."""

    first, second = parse_category(category_a), parse_category(category_b)
    if first is None or second is None:
        logger.debug("Unknown category pair (%s, %s) scored as incompatible", category_a, category_b)
        return UNKNOWN_SCORE
    return CATEGORY_COMPATIBILITY[frozenset((first, second))]


def best_color_pairing(colors_a: Iterable[str], colors_b: Iterable[str]) -> float:
    """Maximum colour compatibility over the cross product of two colour lists."""

    second = list(colors_b)
    return max(
        (color_compatibility(first, other) for first in colors_a for other in second),
        default=UNKNOWN_SCORE,
    )


__all__ = [
    "COLOR_COMPATIBILITY",
    "CATEGORY_COMPATIBILITY",
    "color_compatibility",
    "category_compatibility",
    "best_color_pairing",
]
