"""Derived wardrobe aggregates and insight records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


@dataclass(frozen=True)
class WardrobeStats:
    """Statistics recomputed from a wardrobe snapshot on every request."""

    total_items: int = 0
    category_counts: Dict[str, int] = field(default_factory=dict)
    color_distribution: Dict[str, int] = field(default_factory=dict)
    utilization_rate: float = 0.0
    average_confidence: float = 0.0
    total_wear_count: int = 0


class InsightKind(str, Enum):
    FORGOTTEN_TREASURE = "forgotten_treasure"
    COLOR_HARMONY = "color_harmony"
    CONFIDENCE_BOOST = "confidence_boost"


@dataclass(frozen=True)
class Insight:
    """An advisory observation about the wardrobe for the insights surface."""

    insight_id: str
    kind: InsightKind
    title: str
    message: str
    actionable: bool
    related_item_ids: List[str] = field(default_factory=list)
