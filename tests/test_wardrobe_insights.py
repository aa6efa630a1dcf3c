"""Tests for wardrobe statistics and rule-based insights."""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.wardrobe_analytics import compute_stats
from logic.wardrobe_insights import generate_insights
from models.clothing_item import ClothingItem
from models.wardrobe import InsightKind

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _item(item_id: str, category: str, colors, confidence: float = 6, last_worn=None, wear_count: int = 0):
    return ClothingItem(
        item_id=item_id,
        name=item_id.replace("_", " ").title(),
        category=category,
        colors=colors,
        confidence_score=confidence,
        last_worn=last_worn,
        wear_count=wear_count,
    )


def test_empty_wardrobe_has_zeroed_stats_and_no_insights():
    stats = compute_stats([], NOW)
    assert stats.total_items == 0
    assert stats.utilization_rate == 0.0
    assert stats.average_confidence == 0.0
    assert stats.category_counts == {}
    assert generate_insights([], stats, NOW, random.Random(1)) == []


def test_stats_count_categories_colors_and_utilization():
    wardrobe = [
        _item("tee", "Tops", ["white", "navy"], confidence=6, last_worn=NOW - timedelta(days=3), wear_count=4),
        _item("jeans", "Bottoms", ["denim"], confidence=8, last_worn=NOW - timedelta(days=45), wear_count=10),
        _item("blouse", "Tops", ["white"], confidence=7, last_worn=NOW - timedelta(days=10)),
        _item("boots", "Shoes", ["brown"], confidence=9),
    ]

    stats = compute_stats(wardrobe, NOW)

    assert stats.total_items == 4
    assert stats.category_counts == {"Tops": 2, "Bottoms": 1, "Shoes": 1}
    assert stats.color_distribution == {"white": 2, "navy": 1, "blue": 1, "brown": 1}
    assert stats.utilization_rate == pytest.approx(50.0)
    assert stats.average_confidence == pytest.approx(7.5)
    assert stats.total_wear_count == 14


def test_recency_cutoff_is_inclusive():
    wardrobe = [_item("coat", "Outerwear", ["black"], last_worn=NOW - timedelta(days=30))]
    assert compute_stats(wardrobe, NOW).utilization_rate == pytest.approx(100.0)
    assert compute_stats(wardrobe, NOW + timedelta(seconds=1)).utilization_rate == 0.0


def test_naive_now_is_treated_as_utc():
    wardrobe = [_item("coat", "Outerwear", ["black"], last_worn=NOW - timedelta(days=2))]
    stats = compute_stats(wardrobe, NOW.replace(tzinfo=None))
    assert stats.utilization_rate == pytest.approx(100.0)


def test_custom_window_changes_utilization():
    wardrobe = [_item("coat", "Outerwear", ["black"], last_worn=NOW - timedelta(days=10))]
    assert compute_stats(wardrobe, NOW, window_days=7).utilization_rate == 0.0
    assert compute_stats(wardrobe, NOW, window_days=14).utilization_rate == pytest.approx(100.0)


def test_unworn_wardrobe_yields_one_forgotten_treasure_and_no_boost():
    wardrobe = [_item(f"piece_{index}", "Tops", ["white"], confidence=5) for index in range(10)]
    stats = compute_stats(wardrobe, NOW)

    insights = generate_insights(wardrobe, stats, NOW, random.Random(3))

    assert stats.utilization_rate == 0.0
    kinds = [insight.kind for insight in insights]
    assert kinds.count(InsightKind.FORGOTTEN_TREASURE) == 1
    assert InsightKind.CONFIDENCE_BOOST not in kinds
    assert InsightKind.COLOR_HARMONY not in kinds
    forgotten = insights[0]
    assert forgotten.actionable is True
    assert forgotten.insight_id == f"forgotten-{forgotten.related_item_ids[0]}"
    assert forgotten.related_item_ids[0] in {item.item_id for item in wardrobe}


def test_wardrobe_unworn_for_sixty_days_yields_one_forgotten_treasure():
    wardrobe = [
        _item(f"piece_{index}", "Tops", ["white"], confidence=5, last_worn=NOW - timedelta(days=60))
        for index in range(10)
    ]
    stats = compute_stats(wardrobe, NOW)

    insights = generate_insights(wardrobe, stats, NOW, random.Random(9))

    assert stats.utilization_rate == 0.0
    forgotten = [insight for insight in insights if insight.kind is InsightKind.FORGOTTEN_TREASURE]
    assert len(forgotten) == 1
    assert forgotten[0].related_item_ids[0] in {item.item_id for item in wardrobe}
    assert InsightKind.CONFIDENCE_BOOST not in [insight.kind for insight in insights]


def test_forgotten_treasure_skipped_when_everything_is_recent():
    wardrobe = [
        _item("tee", "Tops", ["white"], last_worn=NOW - timedelta(days=1)),
        _item("jeans", "Bottoms", ["blue"], last_worn=NOW - timedelta(days=2)),
    ]
    insights = generate_insights(wardrobe, compute_stats(wardrobe, NOW), NOW, random.Random(1))
    assert InsightKind.FORGOTTEN_TREASURE not in [insight.kind for insight in insights]


def test_color_harmony_names_two_most_common_colors():
    wardrobe = [
        _item("tee", "Tops", ["navy", "white"], last_worn=NOW),
        _item("shirt", "Tops", ["white"], last_worn=NOW),
        _item("chinos", "Bottoms", ["navy"], last_worn=NOW),
        _item("scarf", "Accessories", ["red"], last_worn=NOW),
    ]
    stats = compute_stats(wardrobe, NOW)

    insights = generate_insights(wardrobe, stats, NOW, random.Random(1))

    harmony = [insight for insight in insights if insight.kind is InsightKind.COLOR_HARMONY]
    assert len(harmony) == 1
    assert harmony[0].insight_id == "color-harmony-navy-white"
    assert harmony[0].message.startswith("Navy and White create beautiful harmony")
    assert harmony[0].actionable is False


def test_confidence_boost_counts_power_pieces():
    wardrobe = [
        _item("blazer", "Outerwear", ["black"], confidence=9, last_worn=NOW),
        _item("dress", "Dresses", ["red"], confidence=8, last_worn=NOW),
        _item("tee", "Tops", ["white"], confidence=7.9, last_worn=NOW),
    ]
    insights = generate_insights(wardrobe, compute_stats(wardrobe, NOW), NOW, random.Random(1))

    boost = [insight for insight in insights if insight.kind is InsightKind.CONFIDENCE_BOOST]
    assert len(boost) == 1
    assert boost[0].insight_id == "confidence-boost-2"
    assert boost[0].related_item_ids == ["blazer", "dress"]
    assert "You have 2 pieces" in boost[0].message


def test_insights_never_exceed_three():
    rng = random.Random(17)
    wardrobe = [
        _item(f"piece_{index}", "Tops", [rng.choice(["white", "black", "red"])], confidence=rng.randint(1, 10))
        for index in range(12)
    ]
    insights = generate_insights(wardrobe, compute_stats(wardrobe, NOW), NOW, rng)
    assert len(insights) <= 3
    assert len({insight.kind for insight in insights}) == len(insights)
