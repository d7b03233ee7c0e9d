"""Seed script to create the venue table and add sample user venues."""

import asyncio
import logging

from cinepair.database import AsyncSessionLocal, engine
from cinepair.models import Base
from cinepair.schemas.venue import Venue
from cinepair.services.venue_repository import SqlAlchemyVenueRepository

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)

SAMPLE_VENUES = [
    Venue(
        id="custom-shinjuku-wald9",
        name="Shinjuku Wald 9",
        area="Shinjuku",
        address="3-1-26 Shinjuku, Shinjuku-ku, Tokyo",
        latitude=35.6913,
        longitude=139.7048,
    ),
    Venue(
        id="custom-cinema-qualite",
        name="Cinema Qualite",
        area="Shinjuku",
        address="3-14-20 Shinjuku, Shinjuku-ku, Tokyo",
        latitude=35.6910,
        longitude=139.7046,
    ),
]


async def seed_venues() -> None:
    """Create tables if needed and insert the sample venues that are missing."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        repository = SqlAlchemyVenueRepository(session)
        for venue in SAMPLE_VENUES:
            if await repository.get_venue(venue.id):
                logger.info(f"Venue {venue.id} already exists, skipping")
                continue
            await repository.add_venue(venue)

        await session.commit()
        logger.info("Venue seeding complete")


if __name__ == "__main__":
    asyncio.run(seed_venues())
