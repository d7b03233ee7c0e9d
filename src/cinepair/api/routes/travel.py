"""Travel-time matrix endpoint."""

from fastapi import APIRouter, Depends, HTTPException

from cinepair.api.dependencies import get_travel_time_provider, get_venue_repository
from cinepair.api.routes.venues import list_all_venues
from cinepair.schemas.travel import TravelMatrixRequest, TravelMatrixResponse
from cinepair.services.travel_time import TravelTimeProvider
from cinepair.services.venue_repository import VenueRepository

router = APIRouter()


@router.post("/travel-times", response_model=TravelMatrixResponse)
async def get_travel_times(
    request: TravelMatrixRequest,
    provider: TravelTimeProvider = Depends(get_travel_time_provider),
    repository: VenueRepository = Depends(get_venue_repository),
) -> TravelMatrixResponse:
    """
    Pairwise travel minutes between the requested venues.

    External lookups are spaced out, so large requests take a while.
    """
    known = {v.id: v for v in await list_all_venues(repository)}
    missing = [venue_id for venue_id in request.venue_ids if venue_id not in known]
    if missing:
        raise HTTPException(status_code=404, detail=f"Unknown venues: {', '.join(missing)}")

    venues = [known[venue_id] for venue_id in dict.fromkeys(request.venue_ids)]
    return TravelMatrixResponse(minutes=await provider.batch_lookup(venues))
