"""Google Maps Distance Matrix client for venue-to-venue travel times."""

import json
import logging
import math
from typing import Any

import httpx

from cinepair.config import settings
from cinepair.schemas.venue import Venue

logger = logging.getLogger(__name__)


class GoogleMapsClient:
    """
    Client for the Google Maps Distance Matrix API with optional Redis caching.

    Looks up door-to-door journey times between two venue addresses. Every
    failure mode (missing key, HTTP error, no route) is reported as ``None``
    so callers can fall back to an estimate.
    """

    BASE_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"

    def __init__(
        self,
        api_key: str | None = None,
        mode: str | None = None,
        language: str | None = None,
        redis_client: Any | None = None,
    ) -> None:
        """
        Initialize the Distance Matrix client.

        Args:
            api_key: Google Maps API key (uses settings if not provided)
            mode: Travel mode passed to the API ("transit", "walking", ...)
            language: Language code for the response
            redis_client: Optional async Redis client for caching results
        """
        self.api_key = api_key if api_key is not None else settings.google_maps_api_key
        self.mode = mode or settings.google_maps_mode
        self.language = language or settings.google_maps_language
        self.redis = redis_client
        if not self.api_key:
            logger.warning("Google Maps API key not configured")

    async def get_travel_minutes(self, origin: Venue, destination: Venue) -> int | None:
        """
        Get the journey time between two venues.

        Returns:
            Journey time in whole minutes (rounded up), or None if the
            API is unavailable or has no route
        """
        if not self.api_key:
            return None

        cache_key = self._build_cache_key(origin, destination)
        cached = await self._get_from_cache(cache_key)
        if cached is not None:
            logger.debug(f"Distance Matrix cache hit for {cache_key}")
            return cached

        minutes = await self._fetch_from_api(origin, destination)
        if minutes is not None:
            await self._store_in_cache(cache_key, minutes, ttl=86400)
        return minutes

    async def _fetch_from_api(self, origin: Venue, destination: Venue) -> int | None:
        params = {
            "origins": origin.address,
            "destinations": destination.address,
            "mode": self.mode,
            "language": self.language,
            "key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(settings.travel_request_timeout)
            ) as client:
                response = await client.get(self.BASE_URL, params=params)
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException:
            logger.error(f"Distance Matrix timeout for {origin.name} -> {destination.name}")
            return None

        except Exception as e:
            logger.error(f"Distance Matrix request failed: {e}")
            return None

        minutes = self._parse_response(data)
        if minutes is None:
            logger.warning(
                f"Distance Matrix returned no route for {origin.name} -> {destination.name}"
            )
        return minutes

    def _parse_response(self, data: dict[str, Any]) -> int | None:
        """
        Extract the journey time from a Distance Matrix payload.

        Both the top-level status and the single element status must be
        "OK"; the duration is reported in seconds.
        """
        if data.get("status") != "OK":
            return None

        try:
            element = data["rows"][0]["elements"][0]
            if element.get("status") != "OK":
                return None
            seconds = element["duration"]["value"]
            return math.ceil(seconds / 60)

        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Failed to parse Distance Matrix response: {e}")
            return None

    def _build_cache_key(self, origin: Venue, destination: Venue) -> str:
        return f"gmaps:{self.mode}:{origin.id}:{destination.id}"

    async def _get_from_cache(self, key: str) -> int | None:
        if not self.redis:
            return None

        try:
            cached = await self.redis.get(key)
            if cached:
                return json.loads(cached)["duration_minutes"]
        except Exception as e:
            logger.warning(f"Redis cache get failed: {e}")

        return None

    async def _store_in_cache(self, key: str, minutes: int, ttl: int = 86400) -> None:
        if not self.redis:
            return

        try:
            await self.redis.setex(key, ttl, json.dumps({"duration_minutes": minutes}))
        except Exception as e:
            logger.warning(f"Redis cache set failed: {e}")
