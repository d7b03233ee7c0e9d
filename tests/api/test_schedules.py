"""Tests for the mock schedules endpoint."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


async def test_returns_one_set_per_default_venue(test_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get(
            "/api/schedules?title=Perfect%20Days&date=2026-10-19&duration=124&seed=1"
        )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Perfect Days"
    assert data["date"] == "2026-10-19"
    assert len(data["schedules"]) == 5
    assert data["schedules"][0]["movie"] == {"title": "Perfect Days", "duration": 124}
    assert data["schedules"][0]["showings"][0]["time"] == "09:00"


async def test_same_seed_is_reproducible(test_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        first = await client.get("/api/schedules?title=X&date=2026-10-19&seed=9")
        second = await client.get("/api/schedules?title=X&date=2026-10-19&seed=9")

    assert first.json() == second.json()


async def test_missing_title_returns_422(test_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/schedules")

    assert response.status_code == 422
