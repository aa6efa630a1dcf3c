"""Pydantic schemas and helpers for validating tool and API payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.mood_styles import parse_mood


def _known_mood(value: str) -> str:
    return parse_mood(value).value


class WardrobeSnapshot(BaseModel):
    """Envelope shared by every request that carries a wardrobe snapshot."""

    wardrobe: List[Dict[str, Any]] = Field(default_factory=list)


class WardrobePayload(WardrobeSnapshot):
    """Wardrobe snapshot for operations that draw from a random source."""

    seed: Optional[int] = None


class OutfitGenerationInput(WardrobePayload):
    """Input contract for a single mood-driven outfit."""

    mood: str = Field(min_length=2)

    @field_validator("mood")
    @classmethod
    def _validate_mood(cls, value: str) -> str:
        return _known_mood(value)


class DailyOutfitsInput(WardrobePayload):
    """Input contract for the daily outfit rotation."""

    count: int = Field(default=3, ge=0, le=6)
    moods: Optional[List[str]] = None

    @field_validator("moods")
    @classmethod
    def _validate_moods(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return None
        return [_known_mood(mood) for mood in value]


class WardrobeStatsInput(WardrobeSnapshot):
    """Input contract for statistics; ``now`` pins the recency clock."""

    now: Optional[datetime] = None


class WardrobeAnalysisInput(WardrobePayload):
    """Input contract for insights; ``now`` pins the recency clock."""

    now: Optional[datetime] = None


class CuratedOutfitInput(BaseModel):
    """Input contract for scoring a hand-assembled outfit."""

    items: List[Dict[str, Any]] = Field(min_length=1)


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "WardrobeSnapshot",
    "WardrobePayload",
    "WardrobeStatsInput",
    "OutfitGenerationInput",
    "DailyOutfitsInput",
    "WardrobeAnalysisInput",
    "CuratedOutfitInput",
    "ValidationResult",
    "validation_failure",
]
