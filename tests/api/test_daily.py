"""Tests for the daily schedule endpoint."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


async def test_packs_shortest_first(test_app: FastAPI) -> None:
    body = {
        "movies": [
            {"id": "1", "title": "Long", "duration": 150},
            {"id": "2", "title": "Short", "duration": 90},
            {"id": "3", "title": "Epic", "duration": 500},
        ],
        "start_time": "2026-10-19T09:00:00",
        "max_duration": 720,
    }

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.post("/api/daily-schedule", json=body)

    assert response.status_code == 200
    data = response.json()
    assert [item["movie"]["id"] for item in data["items"]] == ["2", "1"]
    assert data["items"][0]["start_time"] == "2026-10-19T09:00:00"
    assert data["items"][1]["end_time"] == "2026-10-19T13:00:00"
    assert data["total_duration"] == 240
    assert data["total_duration_label"] == "4h 0m"


async def test_empty_movie_list(test_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.post("/api/daily-schedule", json={"movies": []})

    assert response.status_code == 200
    data = response.json()
    assert data["items"] == []
    assert data["total_duration"] == 0


async def test_negative_duration_returns_422(test_app: FastAPI) -> None:
    body = {"movies": [{"id": "1", "duration": -10}]}

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.post("/api/daily-schedule", json=body)

    assert response.status_code == 422
