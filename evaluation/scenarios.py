"""Evaluation scenarios exercising moods, fallbacks and sparse wardrobes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    mood: str
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    seed: int = 7


def _wardrobe_fixtures() -> List[Dict[str, object]]:
    return [
        {
            "item_id": "top_silk_blouse",
            "name": "Silk Blouse",
            "category": "Tops",
            "colors": ["white"],
            "confidence_score": 9,
            "wear_count": 12,
        },
        {
            "item_id": "top_striped_tee",
            "name": "Striped Tee",
            "category": "Tops",
            "colors": ["navy", "white"],
            "confidence_score": 6,
        },
        {
            "item_id": "top_mustard_knit",
            "name": "Mustard Knit",
            "category": "Tops",
            "colors": ["mustard"],
            "confidence_score": 7,
        },
        {
            "item_id": "bottom_black_trousers",
            "name": "Black Trousers",
            "category": "Bottoms",
            "colors": ["black"],
            "confidence_score": 8,
        },
        {
            "item_id": "bottom_denim",
            "name": "Wide Leg Denim",
            "category": "Bottoms",
            "colors": ["denim"],
            "confidence_score": 7,
        },
        {
            "item_id": "dress_red_midi",
            "name": "Red Midi Dress",
            "category": "Dresses",
            "colors": ["burgundy"],
            "confidence_score": 9,
        },
        {
            "item_id": "outer_camel_coat",
            "name": "Camel Coat",
            "category": "Outerwear",
            "colors": ["camel"],
            "confidence_score": 8,
        },
        {
            "item_id": "shoes_loafers",
            "name": "Leather Loafers",
            "category": "Shoes",
            "colors": ["brown"],
            "confidence_score": 7,
        },
        {
            "item_id": "shoes_pink_sneakers",
            "name": "Pink Sneakers",
            "category": "Shoes",
            "colors": ["pink", "white"],
            "confidence_score": 6,
        },
        {
            "item_id": "acc_gold_hoops",
            "name": "Gold Hoops",
            "category": "Accessories",
            "colors": ["gold"],
            "confidence_score": 8,
        },
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="elegant_full_wardrobe",
        description="Neutral palette with tops and bottoms available yields a structured look.",
        mood="Elegant & Refined",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_items": 3, "requires_categories": ["Tops", "Bottoms"], "palette_only": True},
    ),
    EvaluationScenario(
        name="joyful_full_wardrobe",
        description="Bright palette pulls colourful pieces while still covering the basics.",
        mood="Joyful & Playful",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_items": 2, "palette_only": True},
    ),
    EvaluationScenario(
        name="creative_fallback",
        description="A wardrobe with almost nothing in the creative palette falls back to every item.",
        mood="Creative & Inspired",
        wardrobe_items=[
            item
            for item in _wardrobe_fixtures()
            if item["item_id"] in {"top_silk_blouse", "bottom_black_trousers", "shoes_loafers"}
        ],
        expectations={"min_items": 2, "requires_categories": ["Tops", "Bottoms"]},
    ),
    EvaluationScenario(
        name="single_item",
        description="One piece is not enough material for an outfit.",
        mood="Bold & Adventurous",
        wardrobe_items=_wardrobe_fixtures()[:1],
        expectations={"expect_empty": True},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
