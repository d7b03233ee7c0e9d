"""Showtime pairing API endpoints."""

import logging
import random
from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from cinepair.api.dependencies import get_pairing_engine
from cinepair.schemas.pairing import PairingRequest, PairingResponse
from cinepair.services.mock_schedules import generate_mock_showing_sets
from cinepair.services.pairing import PairingEngine

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/pairings", response_model=PairingResponse)
async def create_pairings(
    request: PairingRequest,
    engine: PairingEngine = Depends(get_pairing_engine),
) -> PairingResponse:
    """
    Propose ways to watch two movies back to back.

    Manually entered showing sets are used as-is when both sides are
    given. Otherwise both movie titles are required and mock listings are
    generated for the default venues.
    """
    target_date = request.date or date.today()

    if request.showings_a is not None and request.showings_b is not None:
        showings_a = request.showings_a
        showings_b = request.showings_b
    elif not request.movie_a or not request.movie_b:
        raise HTTPException(status_code=400, detail="Both movie_a and movie_b are required")
    else:
        rng = random.Random(request.seed)
        showings_a = generate_mock_showing_sets(request.movie_a, target_date, rng=rng)
        showings_b = generate_mock_showing_sets(request.movie_b, target_date, rng=rng)

    if not showings_a or not showings_b:
        raise HTTPException(status_code=404, detail="No showings found for one or both movies")

    pairings = await engine.generate_all_pairings(showings_a, showings_b, target_date)

    return PairingResponse(
        pairings=pairings,
        total_pairings=len(pairings),
        feasible_pairings=sum(1 for p in pairings if p.feasible),
        date=target_date,
    )
