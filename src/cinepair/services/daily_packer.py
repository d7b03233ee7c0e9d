"""Greedy single-day movie scheduler."""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from cinepair.config import settings
from cinepair.schemas.daily import DailySchedule, PackMovie, ScheduleItem

logger = logging.getLogger(__name__)

DEFAULT_START_HOUR = 9


def default_start_time() -> datetime:
    """Today at 09:00 local time."""
    return datetime.now().replace(hour=DEFAULT_START_HOUR, minute=0, second=0, microsecond=0)


def pack(
    movies: Sequence[PackMovie],
    start_time: datetime | None = None,
    max_duration: int | None = None,
) -> DailySchedule:
    """
    Fit as many movies as possible back to back into one day.

    Movies are taken shortest first (ties keep their input order). A movie
    that would push the running total past ``max_duration`` is dropped and
    the walk continues, so a later, shorter movie can still fit.

    This is a greedy heuristic, not an optimal knapsack: it maximises the
    count of short movies rather than the minutes watched.

    Args:
        movies: Candidate movies with running times in minutes
        start_time: When the first movie starts (default: today 09:00)
        max_duration: Viewing budget in minutes (default: 720)

    Returns:
        Schedule in shortest-first order with the total minutes watched
    """
    if start_time is None:
        start_time = default_start_time()
    if max_duration is None:
        max_duration = settings.daily_max_duration

    items: list[ScheduleItem] = []
    clock = start_time
    total_duration = 0

    for movie in sorted(movies, key=lambda m: m.duration):
        if total_duration + movie.duration > max_duration:
            logger.debug(f"Dropping {movie.id} ({movie.duration} min), budget exhausted")
            continue

        end_time = clock + timedelta(minutes=movie.duration)
        items.append(ScheduleItem(movie=movie, start_time=clock, end_time=end_time))
        clock = end_time
        total_duration += movie.duration

    return DailySchedule(date=start_time, items=items, total_duration=total_duration)
