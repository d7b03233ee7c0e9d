"""Tests for the pairings API endpoint."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cinepair.api.dependencies import get_pairing_engine
from cinepair.services.pairing import PairingEngine


# ---------------------------------------------------------------------------
# Test data helpers
# ---------------------------------------------------------------------------


def showing_set(venue_id: str, title: str, duration: int, times: list[str]) -> dict:
    return {
        "movie": {"title": title, "duration": duration},
        "venue": {"id": venue_id, "name": venue_id.title(), "address": f"{venue_id} street"},
        "showings": [{"time": t, "available": True} for t in times],
    }


async def post_pairings(app: FastAPI, body: dict):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.post("/api/pairings", json=body)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


async def test_manual_showings_are_paired_both_ways(test_app: FastAPI, travel_provider) -> None:
    travel_provider.minutes[("venue-1", "venue-2")] = 20
    test_app.dependency_overrides[get_pairing_engine] = lambda: PairingEngine(travel_provider)
    try:
        response = await post_pairings(
            test_app,
            {
                "date": "2026-10-19",
                "showings_a": [showing_set("venue-1", "Movie A", 120, ["10:00"])],
                "showings_b": [showing_set("venue-2", "Movie B", 100, ["12:30"])],
            },
        )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2026-10-19"
    assert data["total_pairings"] == 2
    assert data["feasible_pairings"] == 1

    best = data["pairings"][0]
    assert best["id"] == 1
    assert best["feasible"] is True
    assert best["travel_time"] == 20
    assert best["buffer"] == 10
    assert best["total_time"] == 250
    assert best["movie_a"]["title"] == "Movie A"
    assert best["movie_a"]["end_time"] == "12:00"
    assert best["movie_b"]["venue"]["id"] == "venue-2"


async def test_mock_listings_for_titles(test_app: FastAPI, travel_provider) -> None:
    test_app.dependency_overrides[get_pairing_engine] = lambda: PairingEngine(travel_provider)
    try:
        response = await post_pairings(
            test_app,
            {"movie_a": "Movie A", "movie_b": "Movie B", "date": "2026-10-19", "seed": 3},
        )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["total_pairings"] == 20
    assert [p["id"] for p in data["pairings"]] == list(range(1, 21))
    assert {p["movie_a"]["title"] for p in data["pairings"]} <= {"Movie A", "Movie B"}


async def test_missing_titles_returns_400(test_app: FastAPI, travel_provider) -> None:
    test_app.dependency_overrides[get_pairing_engine] = lambda: PairingEngine(travel_provider)
    try:
        response = await post_pairings(test_app, {"movie_a": "Movie A"})
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 400


async def test_no_showings_returns_404(test_app: FastAPI, travel_provider) -> None:
    test_app.dependency_overrides[get_pairing_engine] = lambda: PairingEngine(travel_provider)
    try:
        response = await post_pairings(
            test_app,
            {
                "showings_a": [],
                "showings_b": [showing_set("venue-2", "Movie B", 100, ["12:30"])],
            },
        )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 404
    assert travel_provider.calls == []


async def test_malformed_time_returns_422(test_app: FastAPI, travel_provider) -> None:
    test_app.dependency_overrides[get_pairing_engine] = lambda: PairingEngine(travel_provider)
    try:
        response = await post_pairings(
            test_app,
            {
                "showings_a": [showing_set("venue-1", "Movie A", 120, ["ten o'clock"])],
                "showings_b": [showing_set("venue-2", "Movie B", 100, ["12:30"])],
            },
        )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 422


async def test_only_unavailable_showings_returns_empty_list(
    test_app: FastAPI, travel_provider
) -> None:
    sold_out = showing_set("venue-2", "Movie B", 100, ["12:30"])
    sold_out["showings"][0]["available"] = False

    test_app.dependency_overrides[get_pairing_engine] = lambda: PairingEngine(travel_provider)
    try:
        response = await post_pairings(
            test_app,
            {
                "showings_a": [showing_set("venue-1", "Movie A", 120, ["10:00"])],
                "showings_b": [sold_out],
            },
        )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json()["pairings"] == []
