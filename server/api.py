"""FastAPI server exposing the styling engine for deployment."""

from datetime import datetime
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from sanctuary_app.app import SanctuaryApp
from sanctuary_app.logging_config import configure_logging

configure_logging()

sanctuary_app = SanctuaryApp()
app = FastAPI(title="Wardrobe Sanctuary", version="0.1.0")


class WardrobeRequest(BaseModel):
    """Request payload carrying a wardrobe snapshot."""

    wardrobe: List[Dict[str, Any]] = Field(default_factory=list, description="Clothing item records")
    seed: int | None = Field(None, description="Optional seed for reproducible picks")


class OutfitRequest(WardrobeRequest):
    mood: str


class DailyOutfitsRequest(WardrobeRequest):
    count: int | None = None
    moods: List[str] | None = None


class StatsRequest(BaseModel):
    wardrobe: List[Dict[str, Any]] = Field(default_factory=list, description="Clothing item records")
    now: datetime | None = Field(None, description="Clock used for the 30-day recency window")


class AnalysisRequest(WardrobeRequest):
    now: datetime | None = Field(None, description="Clock used for the 30-day recency window")


class CuratedOutfitRequest(BaseModel):
    items: List[Dict[str, Any]]


def _ensure_ok(response: Dict[str, Any], fallback: str) -> Dict[str, Any]:
    if response.get("status") == "needs_review":
        raise HTTPException(status_code=400, detail=response.get("details") or fallback)
    return response


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "wardrobe-sanctuary",
        "environment": sanctuary_app.config.environment or "local",
    }


@app.post("/outfits/generate")
def generate_outfit(request: OutfitRequest) -> dict:
    """Compose one outfit; an undersized wardrobe yields ``status: empty``."""

    response = sanctuary_app.tools.generate_outfit(wardrobe=request.wardrobe, mood=request.mood, seed=request.seed)
    return _ensure_ok(response, "outfit request failed validation")


@app.post("/outfits/daily")
def daily_outfits(request: DailyOutfitsRequest) -> dict:
    count = request.count if request.count is not None else sanctuary_app.config.daily_outfit_count
    response = sanctuary_app.tools.generate_daily_outfits(
        wardrobe=request.wardrobe, count=count, moods=request.moods, seed=request.seed
    )
    return _ensure_ok(response, "daily outfit request failed validation")


@app.post("/outfits/score")
def score_outfit(request: CuratedOutfitRequest) -> dict:
    """Score a hand-assembled outfit consistently with generated ones."""

    response = sanctuary_app.tools.score_curated_outfit(items=request.items)
    return _ensure_ok(response, "curated outfit failed validation")


@app.post("/wardrobe/stats")
def wardrobe_stats(request: StatsRequest) -> dict:
    response = sanctuary_app.tools.wardrobe_stats(wardrobe=request.wardrobe, now=request.now)
    return _ensure_ok(response, "stats request failed validation")


@app.post("/wardrobe/insights")
def wardrobe_insights(request: AnalysisRequest) -> dict:
    response = sanctuary_app.tools.wardrobe_insights(
        wardrobe=request.wardrobe, now=request.now, seed=request.seed
    )
    return _ensure_ok(response, "insight request failed validation")


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.api:app",
        host=sanctuary_app.config.host,
        port=sanctuary_app.config.port,
        reload=False,
    )
