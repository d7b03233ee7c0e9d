"""Venue API endpoints."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response

from cinepair.api.dependencies import get_venue_repository
from cinepair.schemas.venue import Venue, VenueCreate, VenueListResponse
from cinepair.services.mock_schedules import DEFAULT_VENUES
from cinepair.services.venue_repository import VenueRepository

logger = logging.getLogger(__name__)
router = APIRouter()


async def list_all_venues(repository: VenueRepository) -> list[Venue]:
    """Built-in venues followed by user-added ones."""
    return [*DEFAULT_VENUES, *await repository.list_venues()]


@router.get("/venues", response_model=VenueListResponse)
async def get_venues(
    repository: VenueRepository = Depends(get_venue_repository),
) -> VenueListResponse:
    venues = await list_all_venues(repository)
    return VenueListResponse(venues=venues, total=len(venues))


@router.post("/venues", response_model=Venue, status_code=201)
async def create_venue(
    payload: VenueCreate,
    repository: VenueRepository = Depends(get_venue_repository),
) -> Venue:
    """
    Register a user venue.

    An id of the form ``custom-<hex>`` is generated when none is supplied.
    Ids must not clash with built-in or existing user venues.
    """
    venue_id = payload.id or f"custom-{uuid.uuid4().hex[:12]}"

    if any(v.id == venue_id for v in DEFAULT_VENUES) or await repository.get_venue(venue_id):
        raise HTTPException(status_code=409, detail=f"Venue {venue_id} already exists")

    venue = Venue(**payload.model_dump(exclude={"id"}), id=venue_id)
    return await repository.add_venue(venue)


@router.delete("/venues/{venue_id}", status_code=204)
async def delete_venue(
    venue_id: str,
    repository: VenueRepository = Depends(get_venue_repository),
) -> Response:
    if not await repository.remove_venue(venue_id):
        raise HTTPException(status_code=404, detail=f"Venue {venue_id} not found")
    return Response(status_code=204)
