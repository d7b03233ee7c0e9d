"""Travel-time resolution between venues.

Travel time is looked up through an ordered chain of strategies. Each
strategy either answers with a number of minutes or returns ``None``; the
first concrete answer wins. Callers of :class:`TravelTimeProvider` always
receive a non-negative integer.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from cinepair.config import Settings, settings
from cinepair.schemas.venue import Venue
from cinepair.services.maps_client import GoogleMapsClient
from cinepair.utils.geo import estimate_transit_minutes, haversine_km

logger = logging.getLogger(__name__)


class TravelTimeStrategy(ABC):
    """One way of answering "how long from venue A to venue B?"."""

    name: str = "strategy"

    # Strategies that call an external service are spaced out during
    # batch lookups.
    is_external: bool = False

    @abstractmethod
    async def estimate(self, origin: Venue, destination: Venue) -> int | None:
        """
        Estimate travel time in minutes.

        Returns:
            Minutes, or None when this strategy has no answer

        Raises:
            Should NOT raise. The provider tolerates it, but logs an error.
        """


class GoogleMapsStrategy(TravelTimeStrategy):
    name = "google_maps"
    is_external = True

    def __init__(self, client: GoogleMapsClient) -> None:
        self.client = client

    async def estimate(self, origin: Venue, destination: Venue) -> int | None:
        return await self.client.get_travel_minutes(origin, destination)


class HaversineStrategy(TravelTimeStrategy):
    """Straight-line distance converted to an approximate train journey."""

    name = "haversine"

    def __init__(self, speed_kmh: float = 30.0, overhead_minutes: int = 15) -> None:
        self.speed_kmh = speed_kmh
        self.overhead_minutes = overhead_minutes

    async def estimate(self, origin: Venue, destination: Venue) -> int | None:
        if not (origin.has_coordinates and destination.has_coordinates):
            return None

        distance = haversine_km(
            origin.latitude, origin.longitude, destination.latitude, destination.longitude
        )
        return estimate_transit_minutes(distance, self.speed_kmh, self.overhead_minutes)


class FixedStrategy(TravelTimeStrategy):
    name = "fixed"

    def __init__(self, minutes: int = 30) -> None:
        self.minutes = minutes

    async def estimate(self, origin: Venue, destination: Venue) -> int | None:
        return self.minutes


class TravelTimeProvider:
    """
    Resolves travel minutes between venues through a strategy chain.

    Lookups never fail: strategy errors and negative answers are logged and
    treated as "no answer", and if the whole chain is silent the configured
    default is returned.
    """

    def __init__(
        self,
        strategies: Sequence[TravelTimeStrategy],
        default_minutes: int = 30,
        batch_delay: float = 1.0,
    ) -> None:
        self.strategies = list(strategies)
        self.default_minutes = default_minutes
        self.batch_delay = batch_delay

    async def lookup(self, origin: Venue, destination: Venue) -> int:
        minutes, _ = await self._resolve(origin, destination)
        return minutes

    async def _resolve(self, origin: Venue, destination: Venue) -> tuple[int, bool]:
        """Return the travel time and whether an external service was asked."""
        if origin.id == destination.id:
            return 0, False

        called_external = False
        for strategy in self.strategies:
            called_external = called_external or strategy.is_external
            try:
                minutes = await strategy.estimate(origin, destination)
            except Exception as e:
                logger.error(
                    f"Travel strategy {strategy.name} failed for "
                    f"{origin.id} -> {destination.id}: {e}",
                    exc_info=True,
                )
                continue

            if minutes is None:
                continue
            if minutes < 0:
                logger.warning(
                    f"Travel strategy {strategy.name} returned {minutes} min for "
                    f"{origin.id} -> {destination.id}, ignoring"
                )
                continue

            logger.debug(
                f"Travel {origin.id} -> {destination.id}: {minutes} min via {strategy.name}"
            )
            return int(minutes), called_external

        logger.warning(
            f"No travel strategy answered for {origin.id} -> {destination.id}, "
            f"using default of {self.default_minutes} min"
        )
        return self.default_minutes, called_external

    async def batch_lookup(self, venues: Sequence[Venue]) -> dict[str, dict[str, int]]:
        """
        Compute the full pairwise travel-time matrix for ``venues``.

        Lookups run one after another. After each lookup that reached an
        external service the provider sleeps for ``batch_delay`` seconds so
        the upstream API is not hammered.

        Returns:
            ``{origin_id: {destination_id: minutes}}`` with 0 on the diagonal
        """
        matrix: dict[str, dict[str, int]] = {}

        for origin in venues:
            row: dict[str, int] = {}
            for destination in venues:
                if origin.id == destination.id:
                    row[destination.id] = 0
                    continue

                minutes, called_external = await self._resolve(origin, destination)
                row[destination.id] = minutes

                if called_external and self.batch_delay > 0:
                    await asyncio.sleep(self.batch_delay)

            matrix[origin.id] = row

        return matrix


def build_travel_time_provider(
    config: Settings | None = None,
    redis_client: Any | None = None,
) -> TravelTimeProvider:
    """
    Wire the default chain: Google Maps, then haversine, then a fixed value.

    The Google Maps step is skipped entirely when no API key is configured.
    """
    config = config or settings

    strategies: list[TravelTimeStrategy] = []
    if config.google_maps_api_key:
        client = GoogleMapsClient(
            api_key=config.google_maps_api_key,
            mode=config.google_maps_mode,
            language=config.google_maps_language,
            redis_client=redis_client,
        )
        strategies.append(GoogleMapsStrategy(client))
    else:
        logger.info("Google Maps API key not set, using estimated travel times")

    strategies.append(
        HaversineStrategy(
            speed_kmh=config.transit_speed_kmh,
            overhead_minutes=config.transfer_overhead_minutes,
        )
    )
    strategies.append(FixedStrategy(config.default_travel_minutes))

    return TravelTimeProvider(
        strategies,
        default_minutes=config.default_travel_minutes,
        batch_delay=config.travel_batch_delay,
    )
