"""Pydantic schemas for travel-time lookups."""

from pydantic import BaseModel, Field


class TravelMatrixRequest(BaseModel):
    venue_ids: list[str] = Field(min_length=1)


class TravelMatrixResponse(BaseModel):
    """Pairwise travel minutes keyed by origin id, then destination id."""

    minutes: dict[str, dict[str, int]]
