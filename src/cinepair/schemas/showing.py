"""Pydantic schemas for showtime listings."""

import datetime
from datetime import date

from pydantic import BaseModel, Field

from cinepair.schemas.venue import Venue
from cinepair.utils.timefmt import TIME_PATTERN


class MovieInfo(BaseModel):
    """Title and running time of a movie."""

    title: str
    duration: int = Field(ge=0, description="Running time in minutes")


class Showing(BaseModel):
    """One screening time of a movie, with seat availability."""

    time: str = Field(pattern=TIME_PATTERN, description="Local start time (HH:MM)")
    available: bool = True


class ShowingSet(BaseModel):
    """All showings of one movie at one venue on one date."""

    movie: MovieInfo
    venue: Venue
    showings: list[Showing] = Field(default_factory=list)
    date: datetime.date | None = None

    def available_showings(self) -> list[Showing]:
        return [s for s in self.showings if s.available]


class ScheduleListResponse(BaseModel):
    """Response for the mock schedules endpoint."""

    title: str
    date: date
    schedules: list[ShowingSet]
