"""Single-day schedule endpoint."""

from fastapi import APIRouter

from cinepair.schemas.daily import DailyScheduleRequest, DailyScheduleResponse
from cinepair.services.daily_packer import pack
from cinepair.utils.timefmt import format_duration

router = APIRouter()


@router.post("/daily-schedule", response_model=DailyScheduleResponse)
async def create_daily_schedule(request: DailyScheduleRequest) -> DailyScheduleResponse:
    """Pack the requested movies into one day, shortest first."""
    schedule = pack(request.movies, request.start_time, request.max_duration)
    return DailyScheduleResponse(
        **schedule.model_dump(),
        total_duration_label=format_duration(schedule.total_duration),
    )
