"""Mood-driven palette filtering of wardrobe items."""

from __future__ import annotations

from typing import Iterable, List

from models.clothing_item import ClothingItem
from models.mood_styles import MoodStyleProfile, MoodTag, get_mood_style


def _profile(mood: MoodTag | str | MoodStyleProfile) -> MoodStyleProfile:
    return mood if isinstance(mood, MoodStyleProfile) else get_mood_style(mood)


def matches_mood(item: ClothingItem, mood: MoodTag | str | MoodStyleProfile) -> bool:
    """Return True when any of the item's colours is in the mood palette."""

    palette = _profile(mood).palette
    return any(color in palette for color in item.colors)


def filter_by_mood(wardrobe: Iterable[ClothingItem], mood: MoodTag | str | MoodStyleProfile) -> List[ClothingItem]:
    """Keep the items sharing at least one colour with the mood palette, in input order."""

    profile = _profile(mood)
    return [item for item in wardrobe if matches_mood(item, profile)]


__all__ = ["filter_by_mood", "matches_mood"]
