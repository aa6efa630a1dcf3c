"""Greedy, category-ordered outfit assembly with transparent diagnostics."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from logic.mood_filtering import filter_by_mood, matches_mood
from logic.narrative import outfit_name, whisper
from logic.outfit_scoring import item_score, outfit_confidence
from logic.random_source import IdFactory, RandomSource, new_outfit_id, pick
from models.clothing_item import ClothingItem, utc_now
from models.mood_styles import MoodStyleProfile, MoodTag, get_mood_style
from models.outfit import Outfit
from models.taxonomy import Category

logger = logging.getLogger(__name__)

CATEGORY_PRIORITY = (
    Category.TOPS,
    Category.BOTTOMS,
    Category.DRESSES,
    Category.OUTERWEAR,
    Category.SHOES,
    Category.ACCESSORIES,
)
MIN_OUTFIT_ITEMS = 2
MAX_OUTFIT_ITEMS = 4
MOOD_AFFINITY_BONUS = 0.05
DAILY_MOOD_ROTATION = (
    MoodTag.SERENE,
    MoodTag.LUMINOUS,
    MoodTag.CREATIVE,
    MoodTag.JOYFUL,
    MoodTag.ELEGANT,
    MoodTag.BOLD,
)


@dataclass(frozen=True)
class CandidateSelectionResult:
    items: List[ClothingItem]
    diagnostics: Dict[str, object]


@dataclass(frozen=True)
class OutfitBuildResult:
    items: List[ClothingItem]
    diagnostics: Dict[str, object]


def select_candidates_for_mood(
    wardrobe: Sequence[ClothingItem], mood: MoodTag | str
) -> CandidateSelectionResult:
    """Filter the wardrobe by mood palette, falling back to every item when too few match."""

    profile = get_mood_style(mood)
    matching = filter_by_mood(wardrobe, profile)
    fallback = len(matching) < MIN_OUTFIT_ITEMS
    diagnostics: Dict[str, object] = {
        "mood": profile.mood.value,
        "initial_count": len(wardrobe),
        "palette_filtered_count": len(matching),
        "fallback": fallback,
    }
    if fallback:
        logger.info(
            "Only %s items match the %s palette, using the full wardrobe", len(matching), profile.mood.value
        )
        return CandidateSelectionResult(items=list(wardrobe), diagnostics=diagnostics)
    logger.info("Filtered to %s items matching mood palette %s", len(matching), profile.palette)
    return CandidateSelectionResult(items=matching, diagnostics=diagnostics)


def _is_selected(item: ClothingItem, selected: Sequence[ClothingItem]) -> bool:
    return any(item is chosen for chosen in selected)


def _rank(
    candidate: ClothingItem,
    selected: Sequence[ClothingItem],
    rng: RandomSource,
    preferred: Optional[MoodStyleProfile],
) -> float:
    score = item_score(candidate, selected, rng)
    if preferred is not None and matches_mood(candidate, preferred):
        score = min(1.0, score + MOOD_AFFINITY_BONUS)
    return score


def build_outfit(
    candidates: Sequence[ClothingItem],
    rng: RandomSource,
    preferred: Optional[MoodStyleProfile] = None,
) -> OutfitBuildResult:
    """Pick at most one item per priority category, best-scoring first.

    ``preferred`` gives mood-matching items a small bonus; it is only set when
    the hard mood filter was bypassed.
    """

    selected: List[ClothingItem] = []
    diagnostics: Dict[str, object] = {"scored": 0, "ties_broken": 0, "padded": 0}

    for category in CATEGORY_PRIORITY:
        if len(selected) >= MAX_OUTFIT_ITEMS:
            break
        pool = [item for item in candidates if item.category is category and not _is_selected(item, selected)]
        if not pool:
            continue
        scores = [_rank(item, selected, rng, preferred) for item in pool]
        diagnostics["scored"] = int(diagnostics["scored"]) + len(pool)
        best = max(scores)
        leaders = [item for item, score in zip(pool, scores) if score == best]
        if len(leaders) > 1:
            diagnostics["ties_broken"] = int(diagnostics["ties_broken"]) + 1
        choice = pick(rng, leaders) if len(leaders) > 1 else leaders[0]
        logger.debug("Picked %s for %s with score %.3f", choice.item_id, category.value, best)
        selected.append(choice)

    for item in candidates:
        if len(selected) >= MIN_OUTFIT_ITEMS:
            break
        if not _is_selected(item, selected):
            selected.append(item)
            diagnostics["padded"] = int(diagnostics["padded"]) + 1
            logger.info("Added %s to reach the minimum outfit size", item.item_id)

    diagnostics["chosen_ids"] = [item.item_id for item in selected]
    return OutfitBuildResult(items=selected, diagnostics=diagnostics)


def compose_outfit(
    wardrobe: Sequence[ClothingItem],
    mood: MoodTag | str,
    rng: RandomSource,
    id_factory: Optional[IdFactory] = None,
    now: Optional[datetime] = None,
) -> Optional[Outfit]:
    """Compose a named, scored outfit for ``mood`` or return ``None`` for tiny wardrobes."""

    profile = get_mood_style(mood)
    if len(wardrobe) < MIN_OUTFIT_ITEMS:
        logger.info("Wardrobe has %s items, no outfit generated", len(wardrobe))
        return None

    selection = select_candidates_for_mood(wardrobe, profile.mood)
    preferred = profile if selection.diagnostics["fallback"] else None
    built = build_outfit(selection.items, rng, preferred=preferred)

    outfit = Outfit(
        outfit_id=(id_factory or new_outfit_id)(),
        name=outfit_name(built.items, profile.mood, rng),
        items=built.items,
        mood=profile.mood,
        whisper=whisper(profile.mood, rng),
        confidence_score=outfit_confidence(built.items),
        created_at=now or utc_now(),
    )
    logger.info(
        "Composed outfit %s for %s with items %s (confidence %.2f)",
        outfit.outfit_id,
        profile.mood.value,
        built.diagnostics["chosen_ids"],
        outfit.confidence_score,
    )
    return outfit


def generate_daily_outfits(
    wardrobe: Sequence[ClothingItem],
    rng: RandomSource,
    count: int = 3,
    moods: Optional[Sequence[MoodTag | str]] = None,
    id_factory: Optional[IdFactory] = None,
    now: Optional[datetime] = None,
) -> List[Outfit]:
    """One outfit per mood for the first ``count`` moods of the rotation."""

    rotation = list(moods) if moods is not None else list(DAILY_MOOD_ROTATION)
    outfits: List[Outfit] = []
    for mood in rotation[: max(0, count)]:
        outfit = compose_outfit(wardrobe, mood, rng, id_factory=id_factory, now=now)
        if outfit is not None:
            outfits.append(outfit)
    return outfits


__all__ = [
    "CATEGORY_PRIORITY",
    "select_candidates_for_mood",
    "build_outfit",
    "compose_outfit",
    "generate_daily_outfits",
    "CandidateSelectionResult",
    "OutfitBuildResult",
]
