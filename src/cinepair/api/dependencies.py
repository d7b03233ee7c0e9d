"""FastAPI dependencies shared by the route modules."""

from functools import lru_cache
from typing import Any

from fastapi import Depends
from redis import asyncio as aioredis
from sqlalchemy.ext.asyncio import AsyncSession

from cinepair.config import settings
from cinepair.database import get_db
from cinepair.services.pairing import PairingEngine
from cinepair.services.travel_time import TravelTimeProvider, build_travel_time_provider
from cinepair.services.venue_repository import SqlAlchemyVenueRepository, VenueRepository


@lru_cache
def get_redis_client() -> Any | None:
    """Redis client for the travel-time cache, or None when caching is off."""
    if not settings.travel_cache_enabled:
        return None
    return aioredis.from_url(settings.redis_url, decode_responses=True)


def get_travel_time_provider() -> TravelTimeProvider:
    return build_travel_time_provider(settings, redis_client=get_redis_client())


def get_pairing_engine(
    provider: TravelTimeProvider = Depends(get_travel_time_provider),
) -> PairingEngine:
    return PairingEngine(provider)


async def get_venue_repository(db: AsyncSession = Depends(get_db)) -> VenueRepository:
    return SqlAlchemyVenueRepository(db)
