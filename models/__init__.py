"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.clothing_item import ClothingItem, from_raw_metadata
from models.mood_styles import MoodStyleProfile, MoodTag, get_mood_style, parse_mood
from models.outfit import Outfit
from models.wardrobe import Insight, InsightKind, WardrobeStats

__all__ = [
    "ClothingItem",
    "from_raw_metadata",
    "MoodStyleProfile",
    "MoodTag",
    "get_mood_style",
    "parse_mood",
    "Outfit",
    "Insight",
    "InsightKind",
    "WardrobeStats",
]
