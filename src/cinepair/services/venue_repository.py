"""Storage for user-added venues."""

import logging
from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cinepair.models.venue import CustomVenue
from cinepair.schemas.venue import Venue

logger = logging.getLogger(__name__)


class VenueRepository(Protocol):
    """Persistence interface for venues registered by users."""

    async def list_venues(self) -> list[Venue]: ...

    async def get_venue(self, venue_id: str) -> Venue | None: ...

    async def add_venue(self, venue: Venue) -> Venue: ...

    async def remove_venue(self, venue_id: str) -> bool: ...

    async def clear(self) -> None: ...


class SqlAlchemyVenueRepository:
    """VenueRepository backed by the ``custom_venues`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_venues(self) -> list[Venue]:
        result = await self.session.execute(select(CustomVenue).order_by(CustomVenue.name))
        return [row.to_schema() for row in result.scalars().all()]

    async def get_venue(self, venue_id: str) -> Venue | None:
        row = await self.session.get(CustomVenue, venue_id)
        return row.to_schema() if row else None

    async def add_venue(self, venue: Venue) -> Venue:
        self.session.add(CustomVenue.from_schema(venue))
        await self.session.flush()
        logger.info(f"Added custom venue {venue.id} ({venue.name})")
        return venue

    async def remove_venue(self, venue_id: str) -> bool:
        row = await self.session.get(CustomVenue, venue_id)
        if row is None:
            return False

        await self.session.delete(row)
        await self.session.flush()
        logger.info(f"Removed custom venue {venue_id}")
        return True

    async def clear(self) -> None:
        await self.session.execute(delete(CustomVenue))
        logger.info("Cleared all custom venues")
