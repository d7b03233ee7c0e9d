"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from cinepair.api.routes import daily, health, pairings, schedules, travel, venues
from cinepair.schemas import Venue
from cinepair.services.travel_time import TravelTimeProvider


class FakeTravelProvider(TravelTimeProvider):
    """Travel provider answering from a fixed table and recording calls."""

    def __init__(self, default: int = 20) -> None:
        super().__init__([], default_minutes=default, batch_delay=0)
        self.minutes: dict[tuple[str, str], int] = {}
        self.calls: list[tuple[str, str]] = []

    async def lookup(self, origin: Venue, destination: Venue) -> int:
        self.calls.append((origin.id, destination.id))
        if origin.id == destination.id:
            return 0
        return self.minutes.get((origin.id, destination.id), self.default_minutes)


class InMemoryVenueRepository:
    """VenueRepository stand-in that keeps venues in a dict."""

    def __init__(self) -> None:
        self.venues: dict[str, Venue] = {}

    async def list_venues(self) -> list[Venue]:
        return sorted(self.venues.values(), key=lambda v: v.name)

    async def get_venue(self, venue_id: str) -> Venue | None:
        return self.venues.get(venue_id)

    async def add_venue(self, venue: Venue) -> Venue:
        self.venues[venue.id] = venue
        return venue

    async def remove_venue(self, venue_id: str) -> bool:
        return self.venues.pop(venue_id, None) is not None

    async def clear(self) -> None:
        self.venues.clear()


@pytest.fixture
def travel_provider() -> FakeTravelProvider:
    return FakeTravelProvider()


@pytest.fixture
def venue_repository() -> InMemoryVenueRepository:
    return InMemoryVenueRepository()


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app with every router, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(pairings.router, prefix="/api")
    app.include_router(schedules.router, prefix="/api")
    app.include_router(daily.router, prefix="/api")
    app.include_router(venues.router, prefix="/api")
    app.include_router(travel.router, prefix="/api")
    return app
