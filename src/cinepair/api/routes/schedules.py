"""Mock showtime listing endpoint."""

import random
from datetime import date

from fastapi import APIRouter, Query

from cinepair.schemas.showing import ScheduleListResponse
from cinepair.services.mock_schedules import DEFAULT_DURATION, generate_mock_showing_sets

router = APIRouter()


@router.get("/schedules", response_model=ScheduleListResponse)
async def get_schedules(
    title: str = Query(..., min_length=1, description="Movie title"),
    date_param: date | None = Query(None, alias="date", description="Date (YYYY-MM-DD)"),
    duration: int = Query(DEFAULT_DURATION, ge=1, description="Running time in minutes"),
    seed: int | None = Query(None, description="Seed for reproducible availability"),
) -> ScheduleListResponse:
    """Generate mock showing sets for one movie across the default venues."""
    target_date = date_param or date.today()
    schedules = generate_mock_showing_sets(
        title, target_date, duration=duration, rng=random.Random(seed)
    )
    return ScheduleListResponse(title=title, date=target_date, schedules=schedules)
