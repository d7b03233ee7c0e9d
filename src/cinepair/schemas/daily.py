"""Pydantic schemas for the single-day movie schedule."""

from datetime import datetime

from pydantic import BaseModel, Field


class PackMovie(BaseModel):
    """A movie the user wants to watch during the day."""

    id: str
    title: str = ""
    duration: int = Field(ge=0, description="Running time in minutes")
    genre: str | None = None


class ScheduleItem(BaseModel):
    movie: PackMovie
    start_time: datetime
    end_time: datetime


class DailySchedule(BaseModel):
    """Movies packed back to back, shortest first."""

    date: datetime
    items: list[ScheduleItem]
    total_duration: int


class DailyScheduleRequest(BaseModel):
    movies: list[PackMovie]
    start_time: datetime | None = None
    max_duration: int | None = Field(default=None, ge=0)


class DailyScheduleResponse(DailySchedule):
    total_duration_label: str
