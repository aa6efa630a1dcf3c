"""Tests for the clothing item model and its storage-boundary adapter."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.clothing_item import ClothingItem, from_raw_metadata
from models.taxonomy import Category, normalize_color_name, validate_category


def test_item_normalises_category_and_colors():
    item = ClothingItem(item_id="coat", name="Camel Coat", category="outerwear", colors=["Camel", "tan", "Grey"])
    assert item.category is Category.OUTERWEAR
    assert item.colors == ["beige", "gray"]
    assert item.confidence_score == 5.0
    assert item.created_at.tzinfo is not None


@pytest.mark.parametrize("confidence", [0, 10.5, "high", None])
def test_item_rejects_out_of_range_confidence(confidence):
    with pytest.raises(ValueError):
        ClothingItem(item_id="tee", name="Tee", category="Tops", colors=["white"], confidence_score=confidence)


def test_item_rejects_unknown_category_and_missing_colors():
    with pytest.raises(ValueError, match="Unsupported category"):
        ClothingItem(item_id="suit", name="Wetsuit", category="Swimwear", colors=["black"])
    with pytest.raises(ValueError, match="at least one color"):
        ClothingItem(item_id="tee", name="Tee", category="Tops", colors=[])


def test_item_rejects_negative_wear_count():
    with pytest.raises(ValueError, match="wear_count"):
        ClothingItem(item_id="tee", name="Tee", category="Tops", colors=["white"], wear_count=-1)


def test_naive_timestamps_become_utc():
    worn = datetime(2024, 5, 1, 8, 0)
    item = ClothingItem(item_id="tee", name="Tee", category="Tops", colors=["white"], last_worn=worn)
    assert item.last_worn == worn.replace(tzinfo=timezone.utc)


def test_from_raw_metadata_accepts_legacy_keys():
    record = {
        "id": "dress-7",
        "name": "Red Midi Dress",
        "category": "dress",
        "color": "burgundy",
        "confidenceScore": 9,
        "wearCount": 3,
        "lastWorn": "2024-05-20T18:30:00Z",
        "createdAt": "2023-11-02T09:00:00+02:00",
        "isFavorite": True,
        "userNotes": "wedding guest",
        "seasonTag": "summer",
    }

    item = from_raw_metadata(record)

    assert item.item_id == "dress-7"
    assert item.category is Category.DRESSES
    assert item.colors == ["red"]
    assert item.confidence_score == 9.0
    assert item.wear_count == 3
    assert item.last_worn == datetime(2024, 5, 20, 18, 30, tzinfo=timezone.utc)
    assert item.created_at == datetime(2023, 11, 2, 7, 0, tzinfo=timezone.utc)
    assert item.is_favorite is True
    assert item.notes == "wedding guest"
    assert item.season == "summer"


def test_from_raw_metadata_defaults_missing_confidence():
    item = from_raw_metadata({"item_id": "tee", "name": "Tee", "category": "Tops", "colors": ["white"]})
    assert item.confidence_score == 5.0
    assert item.last_worn is None
    assert datetime.now(timezone.utc) - item.created_at < timedelta(minutes=1)


def test_from_raw_metadata_reports_missing_fields():
    with pytest.raises(ValueError, match="colors"):
        from_raw_metadata({"item_id": "tee", "name": "Tee", "category": "Tops"})


def test_from_raw_metadata_rejects_bad_timestamp():
    with pytest.raises(ValueError, match="Invalid timestamp"):
        from_raw_metadata(
            {"item_id": "tee", "name": "Tee", "category": "Tops", "colors": ["white"], "lastWorn": "yesterday"}
        )


def test_taxonomy_helpers():
    assert validate_category("Shoe") is Category.SHOES
    assert normalize_color_name("  Navy-Blue ") == "navy"
    assert normalize_color_name("Chartreuse") == "chartreuse"
