"""Canonical taxonomy definitions for wardrobe items.

This module centralises the closed category enumeration and the colour
vocabulary. Helper functions keep validation logic consistent across the
scoring engine, tools and data models.
"""

from enum import Enum
from typing import Dict, List, Optional


class Category(str, Enum):
    """Closed set of garment categories."""

    TOPS = "Tops"
    BOTTOMS = "Bottoms"
    DRESSES = "Dresses"
    OUTERWEAR = "Outerwear"
    SHOES = "Shoes"
    ACCESSORIES = "Accessories"
    INTIMATES = "Intimates"


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace("_", " ")


_CATEGORY_KEYS: Dict[str, Category] = {
    "tops": Category.TOPS,
    "top": Category.TOPS,
    "bottoms": Category.BOTTOMS,
    "bottom": Category.BOTTOMS,
    "dresses": Category.DRESSES,
    "dress": Category.DRESSES,
    "outerwear": Category.OUTERWEAR,
    "shoes": Category.SHOES,
    "shoe": Category.SHOES,
    "accessories": Category.ACCESSORIES,
    "accessory": Category.ACCESSORIES,
    "intimates": Category.INTIMATES,
    "intimate": Category.INTIMATES,
}

COLORS: List[str] = [
    "white",
    "black",
    "gray",
    "navy",
    "beige",
    "cream",
    "brown",
    "red",
    "orange",
    "yellow",
    "green",
    "blue",
    "purple",
    "pink",
    "gold",
    "silver",
]

NEUTRAL_COLORS = frozenset({"white", "black", "gray", "navy", "beige", "cream"})
METALLIC_COLORS = frozenset({"gold", "silver"})

COLOR_MAP = {
    "navy blue": "navy",
    "dark blue": "navy",
    "light blue": "blue",
    "sky blue": "blue",
    "denim": "blue",
    "grey": "gray",
    "charcoal": "gray",
    "off white": "white",
    "ivory": "cream",
    "tan": "beige",
    "camel": "beige",
    "khaki": "beige",
    "taupe": "beige",
    "olive": "green",
    "mint": "green",
    "burgundy": "red",
    "maroon": "red",
    "coral": "orange",
    "mustard": "yellow",
    "lilac": "purple",
    "lavender": "purple",
    "violet": "purple",
    "blush": "pink",
    "fuchsia": "pink",
    "chocolate": "brown",
}


def validate_category(value: "Category | str") -> Category:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    category = parse_category(value)
    if category is None:
        raise ValueError(
            f"Unsupported category '{value}'. Allowed: {[member.value for member in Category]}"
        )
    return category


def parse_category(value: "Category | str | None") -> Optional[Category]:
    """Return the matching :class:`Category` or ``None`` for unknown input."""

    if isinstance(value, Category):
        return value
    if not isinstance(value, str):
        return None
    return _CATEGORY_KEYS.get(_normalize_key(value))


def normalize_color_name(raw_string: str) -> str:
    """Map a raw color string to a canonical color name."""

    key = " ".join(str(raw_string).strip().lower().replace("-", " ").split())
    return COLOR_MAP.get(key, key)


__all__ = [
    "Category",
    "COLORS",
    "COLOR_MAP",
    "NEUTRAL_COLORS",
    "METALLIC_COLORS",
    "validate_category",
    "parse_category",
    "normalize_color_name",
]
