"""Mappings between mood tags and stylistic guidance."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Tuple

from models.taxonomy import normalize_color_name

logger = logging.getLogger(__name__)


class MoodTag(str, Enum):
    """Closed set of moods that drive colour and narrative selection."""

    SERENE = "Serene & Grounded"
    LUMINOUS = "Luminous & Confident"
    CREATIVE = "Creative & Inspired"
    JOYFUL = "Joyful & Playful"
    ELEGANT = "Elegant & Refined"
    BOLD = "Bold & Adventurous"


@dataclass(frozen=True)
class MoodStyleProfile:
    """Represents styling preferences for a given mood."""

    mood: MoodTag
    palette: Tuple[str, ...]
    adjectives: Tuple[str, ...]
    whispers: Tuple[str, ...]


_MOOD_STYLES: Dict[MoodTag, MoodStyleProfile] = {
    MoodTag.SERENE: MoodStyleProfile(
        mood=MoodTag.SERENE,
        palette=("beige", "white", "gray", "brown", "green"),
        adjectives=("Peaceful", "Calm", "Zen", "Tranquil"),
        whispers=(
            "Today calls for your inner peace to shine through.",
            "Let your calm confidence speak volumes.",
            "Embrace the quiet strength within you.",
            "Your grounded energy is your superpower.",
            "Find beauty in simplicity today.",
        ),
    ),
    MoodTag.LUMINOUS: MoodStyleProfile(
        mood=MoodTag.LUMINOUS,
        palette=("white", "gold", "silver", "navy", "red"),
        adjectives=("Radiant", "Brilliant", "Glowing", "Luminous"),
        whispers=(
            "You are radiant, inside and out.",
            "Step into your power with grace.",
            "Your confidence lights up every room.",
            "Shine bright, beautiful soul.",
            "Today is your moment to dazzle.",
        ),
    ),
    MoodTag.CREATIVE: MoodStyleProfile(
        mood=MoodTag.CREATIVE,
        palette=("purple", "orange", "yellow", "green", "pink"),
        adjectives=("Artistic", "Imaginative", "Expressive", "Inspired"),
        whispers=(
            "Your creativity knows no bounds.",
            "Express your unique vision boldly.",
            "Art flows through everything you touch.",
            "Let your imagination lead the way.",
            "Your creative spirit is infectious.",
        ),
    ),
    MoodTag.JOYFUL: MoodStyleProfile(
        mood=MoodTag.JOYFUL,
        palette=("pink", "yellow", "orange", "blue", "red"),
        adjectives=("Cheerful", "Vibrant", "Playful", "Bright"),
        whispers=(
            "Life is meant to be celebrated.",
            "Your joy is contagious and beautiful.",
            "Play with fashion, play with life.",
            "Embrace the lightness of being.",
            "Your smile is your best accessory.",
        ),
    ),
    MoodTag.ELEGANT: MoodStyleProfile(
        mood=MoodTag.ELEGANT,
        palette=("black", "white", "navy", "gray", "beige"),
        adjectives=("Sophisticated", "Graceful", "Polished", "Refined"),
        whispers=(
            "Grace is your natural state.",
            "Sophistication flows through you effortlessly.",
            "Timeless beauty never goes out of style.",
            "Your elegance speaks before you do.",
            "Refined taste is your signature.",
        ),
    ),
    MoodTag.BOLD: MoodStyleProfile(
        mood=MoodTag.BOLD,
        palette=("red", "black", "purple", "orange", "green"),
        adjectives=("Daring", "Fearless", "Bold", "Adventurous"),
        whispers=(
            "Adventure awaits your fearless spirit.",
            "Break boundaries with style.",
            "Your boldness inspires others.",
            "Take risks, make statements.",
            "Courage looks beautiful on you.",
        ),
    ),
}


def validate_mood_profiles(profiles: Mapping[MoodTag, MoodStyleProfile]) -> None:
    """Check that every mood has a complete profile.

    Raises a :class:`ValueError` naming the first gap found.
    """

    missing = [mood.value for mood in MoodTag if mood not in profiles]
    if missing:
        raise ValueError(f"Mood profiles missing for: {missing}")
    for mood, profile in profiles.items():
        if profile.mood is not mood:
            raise ValueError(f"Profile registered under '{mood.value}' describes '{profile.mood.value}'")
        for bank in ("palette", "adjectives", "whispers"):
            if not getattr(profile, bank):
                raise ValueError(f"Mood '{mood.value}' has an empty {bank} bank")
        unnormalised = [color for color in profile.palette if normalize_color_name(color) != color]
        if unnormalised:
            raise ValueError(f"Mood '{mood.value}' palette uses non-canonical colors {unnormalised}")


validate_mood_profiles(_MOOD_STYLES)


def parse_mood(mood: MoodTag | str) -> MoodTag:
    """Return the :class:`MoodTag` for an enum member, its value or its name."""

    if isinstance(mood, MoodTag):
        return mood
    key = str(mood or "").strip().lower()
    for member in MoodTag:
        if key in (member.value.lower(), member.name.lower()):
            return member
    raise ValueError(f"Unknown mood '{mood}'. Allowed: {[member.value for member in MoodTag]}")


def get_mood_style(mood: MoodTag | str) -> MoodStyleProfile:
    """Return the :class:`MoodStyleProfile` for the given mood."""

    profile = _MOOD_STYLES[parse_mood(mood)]
    logger.debug("Resolved mood %s -> palette %s", mood, profile.palette)
    return profile


__all__ = ["MoodTag", "MoodStyleProfile", "get_mood_style", "parse_mood", "validate_mood_profiles"]
