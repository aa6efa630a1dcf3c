"""Tests for mood configuration totality and palette filtering."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.mood_filtering import filter_by_mood, matches_mood
from models.clothing_item import ClothingItem
from models.mood_styles import (
    MoodTag,
    _MOOD_STYLES,
    get_mood_style,
    parse_mood,
    validate_mood_profiles,
)
from models.taxonomy import COLORS


def _item(item_id: str, category: str, colors) -> ClothingItem:
    return ClothingItem(item_id=item_id, name=item_id, category=category, colors=colors, confidence_score=6)


def test_every_mood_has_complete_profile():
    for mood in MoodTag:
        profile = get_mood_style(mood)
        assert profile.mood is mood
        assert len(profile.palette) == 5
        assert len(profile.adjectives) == 4
        assert len(profile.whispers) == 5
        assert set(profile.palette).issubset(COLORS)


def test_validate_mood_profiles_rejects_missing_mood():
    partial = {mood: profile for mood, profile in _MOOD_STYLES.items() if mood is not MoodTag.BOLD}
    with pytest.raises(ValueError, match="Bold & Adventurous"):
        validate_mood_profiles(partial)


def test_validate_mood_profiles_rejects_empty_bank():
    broken = dict(_MOOD_STYLES)
    broken[MoodTag.JOYFUL] = replace(broken[MoodTag.JOYFUL], whispers=())
    with pytest.raises(ValueError, match="whispers"):
        validate_mood_profiles(broken)


def test_parse_mood_accepts_value_name_and_member():
    assert parse_mood("Elegant & Refined") is MoodTag.ELEGANT
    assert parse_mood("elegant & refined") is MoodTag.ELEGANT
    assert parse_mood("bold") is MoodTag.BOLD
    assert parse_mood(MoodTag.SERENE) is MoodTag.SERENE
    with pytest.raises(ValueError):
        parse_mood("Melancholy")


def test_filter_by_mood_keeps_palette_matches_in_order():
    wardrobe = [
        _item("red_tee", "Tops", ["red"]),
        _item("white_blouse", "Tops", ["white"]),
        _item("black_skirt", "Bottoms", ["black"]),
        _item("purple_scarf", "Accessories", ["lilac", "gold"]),
    ]
    snapshot = list(wardrobe)
    result = filter_by_mood(wardrobe, MoodTag.BOLD)
    assert [item.item_id for item in result] == ["red_tee", "black_skirt", "purple_scarf"]
    assert wardrobe == snapshot


def test_matches_mood_requires_one_shared_color():
    assert matches_mood(_item("camel_coat", "Outerwear", ["camel"]), "Serene & Grounded")
    assert not matches_mood(_item("pink_tee", "Tops", ["pink"]), "Elegant & Refined")
