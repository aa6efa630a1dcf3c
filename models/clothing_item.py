"""Clothing item data model and storage-boundary helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from models.taxonomy import Category, normalize_color_name, validate_category

MIN_ITEM_CONFIDENCE = 1.0
MAX_ITEM_CONFIDENCE = 10.0

# Legacy camelCase keys still produced by older wardrobe records.
_LEGACY_KEYS = {
    "id": "item_id",
    "confidenceScore": "confidence_score",
    "wearCount": "wear_count",
    "lastWorn": "last_worn",
    "createdAt": "created_at",
    "isArchived": "is_archived",
    "isFavorite": "is_favorite",
    "userNotes": "notes",
    "seasonTag": "season",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime, assuming UTC for naive input."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _normalise_colors(values: Iterable[str]) -> List[str]:
    """Normalise color names using the canonical taxonomy mapping."""

    normalised = []
    seen = set()
    for value in values:
        key = normalize_color_name(str(value))
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError as exc:
        raise ValueError(f"Invalid timestamp '{value}'") from exc


@dataclass
class ClothingItem:
    """A single wardrobe piece, passed read-only into the styling engine."""

    item_id: str
    name: str
    category: Category
    colors: List[str]
    confidence_score: float = 5.0
    wear_count: int = 0
    last_worn: Optional[datetime] = None
    created_at: datetime = field(default_factory=utc_now)
    brand: Optional[str] = None
    notes: Optional[str] = None
    season: Optional[str] = None
    is_archived: bool = False
    is_favorite: bool = False

    def __post_init__(self) -> None:
        self.category = validate_category(self.category)
        self.colors = _normalise_colors(_ensure_list(self.colors))
        if not self.colors:
            raise ValueError(f"Clothing item '{self.item_id}' needs at least one color")
        try:
            self.confidence_score = float(self.confidence_score)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"confidence_score must be numeric, got {self.confidence_score!r}") from exc
        if not MIN_ITEM_CONFIDENCE <= self.confidence_score <= MAX_ITEM_CONFIDENCE:
            raise ValueError(
                f"confidence_score must be within [{MIN_ITEM_CONFIDENCE:g}, {MAX_ITEM_CONFIDENCE:g}], "
                f"got {self.confidence_score}"
            )
        try:
            self.wear_count = int(self.wear_count)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"wear_count must be a whole number, got {self.wear_count!r}") from exc
        if self.wear_count < 0:
            raise ValueError(f"wear_count cannot be negative, got {self.wear_count}")
        if self.last_worn is not None:
            self.last_worn = as_utc(self.last_worn)
        self.created_at = as_utc(self.created_at)


def from_raw_metadata(metadata: Dict[str, Any], default_created_at: Optional[datetime] = None) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from a loose storage record.

    Both the snake_case shape and the legacy camelCase shape are accepted, so
    the scoring engine only ever sees one item type. Records without a creation
    time are stamped with ``default_created_at``, or the current time.
    """

    data = {_LEGACY_KEYS.get(key, key): value for key, value in metadata.items()}
    if "colors" not in data and "color" in data:
        data["colors"] = data["color"]

    required_fields = ["item_id", "name", "category", "colors"]
    missing = [field for field in required_fields if not data.get(field)]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    created_at = _parse_timestamp(data.get("created_at"))
    return ClothingItem(
        item_id=str(data["item_id"]),
        name=str(data["name"]),
        category=data["category"],
        colors=_ensure_list(data["colors"]),
        confidence_score=5.0 if data.get("confidence_score") is None else data["confidence_score"],
        wear_count=data.get("wear_count") or 0,
        last_worn=_parse_timestamp(data.get("last_worn")),
        created_at=created_at or default_created_at or utc_now(),
        brand=data.get("brand"),
        notes=data.get("notes"),
        season=data.get("season"),
        is_archived=bool(data.get("is_archived", False)),
        is_favorite=bool(data.get("is_favorite", False)),
    )


__all__ = ["ClothingItem", "from_raw_metadata", "as_utc", "utc_now"]
