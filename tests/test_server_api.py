"""HTTP-level tests for the FastAPI adapter."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from evaluation.scenarios import SCENARIOS
from server.api import app, get_app

client = TestClient(app)
WARDROBE = SCENARIOS[0].wardrobe_items


def test_healthcheck():
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_outfit_endpoint():
    response = client.post("/outfits/generate", json={"wardrobe": WARDROBE, "mood": "Elegant & Refined", "seed": 4})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert 2 <= len(body["outfit"]["items"]) <= 4


def test_generate_outfit_is_reproducible_with_seed():
    payload = {"wardrobe": WARDROBE, "mood": "bold", "seed": 8}
    first = client.post("/outfits/generate", json=payload).json()["outfit"]
    second = client.post("/outfits/generate", json=payload).json()["outfit"]
    assert [item["item_id"] for item in first["items"]] == [item["item_id"] for item in second["items"]]
    assert first["name"] == second["name"]
    assert first["whisper"] == second["whisper"]


def test_unknown_mood_is_bad_request():
    response = client.post("/outfits/generate", json={"wardrobe": WARDROBE, "mood": "Sleepy"})
    assert response.status_code == 400


def test_tiny_wardrobe_returns_empty_status():
    response = client.post("/outfits/generate", json={"wardrobe": WARDROBE[:1], "mood": "Serene & Grounded"})
    assert response.status_code == 200
    assert response.json()["outfit"] is None


def test_daily_outfits_endpoint():
    response = client.post("/outfits/daily", json={"wardrobe": WARDROBE, "count": 2, "seed": 1})
    assert response.status_code == 200
    assert len(response.json()["outfits"]) == 2


def test_score_endpoint():
    response = client.post("/outfits/score", json={"items": WARDROBE[:2]})
    assert response.status_code == 200
    assert 0.0 <= response.json()["confidence_score"] <= 10.0
    assert client.post("/outfits/score", json={"items": []}).status_code == 400


def test_stats_and_insights_endpoints():
    payload = {"wardrobe": WARDROBE, "now": "2024-06-01T12:00:00Z", "seed": 2}
    stats = client.post("/wardrobe/stats", json=payload)
    insights = client.post("/wardrobe/insights", json=payload)
    assert stats.status_code == 200
    assert stats.json()["stats"]["total_items"] == len(WARDROBE)
    assert insights.status_code == 200
    assert 1 <= len(insights.json()["insights"]) <= 3


def test_get_app_exposes_asgi_instance():
    assert get_app() is app


def test_overflowing_wear_count_is_reported_as_skipped():
    body = json.dumps({"wardrobe": WARDROBE[1:4], "mood": "Elegant & Refined", "seed": 1})
    broken = '{"item_id": "huge", "name": "Huge", "category": "Tops", "colors": ["white"], "wear_count": 1e400}'
    body = body.replace('"wardrobe": [', '"wardrobe": [' + broken + ", ", 1)

    response = client.post("/outfits/generate", content=body, headers={"content-type": "application/json"})

    assert response.status_code == 200
    assert response.json()["skipped"] == ["huge"]
