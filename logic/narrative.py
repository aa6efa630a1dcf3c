"""Outfit names and whisper phrases keyed by mood."""

from __future__ import annotations

from typing import Sequence

from logic.random_source import RandomSource, pick
from models.clothing_item import ClothingItem
from models.mood_styles import MoodTag, get_mood_style

FALLBACK_NOUN = "Signature"


def outfit_name(items: Sequence[ClothingItem], mood: MoodTag | str, rng: RandomSource) -> str:
    adjective = pick(rng, get_mood_style(mood).adjectives)
    noun = items[0].category.value if items else FALLBACK_NOUN
    return f"{adjective} {noun} Look"


def whisper(mood: MoodTag | str, rng: RandomSource) -> str:
    return pick(rng, get_mood_style(mood).whispers)


__all__ = ["outfit_name", "whisper"]
