"""Outfit schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from models.clothing_item import ClothingItem, as_utc, utc_now
from models.mood_styles import MoodTag, parse_mood

MIN_OUTFIT_CONFIDENCE = 0.0
MAX_OUTFIT_CONFIDENCE = 10.0


def clamp_confidence(value: float) -> float:
    return max(MIN_OUTFIT_CONFIDENCE, min(MAX_OUTFIT_CONFIDENCE, float(value)))


@dataclass
class Outfit:
    """A generated or curated combination of borrowed wardrobe items."""

    outfit_id: str
    name: str
    items: List[ClothingItem]
    mood: MoodTag
    whisper: str
    confidence_score: float
    created_at: datetime = field(default_factory=utc_now)
    last_worn: Optional[datetime] = None
    is_favorite: bool = False
    tags: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = list(self.items)
        self.mood = parse_mood(self.mood)
        self.confidence_score = clamp_confidence(self.confidence_score)
        self.created_at = as_utc(self.created_at)
        if self.last_worn is not None:
            self.last_worn = as_utc(self.last_worn)

    @property
    def item_ids(self) -> List[str]:
        return [item.item_id for item in self.items]


__all__ = ["Outfit", "clamp_confidence"]
