"""Pydantic schemas for venue data."""

from pydantic import BaseModel, ConfigDict, Field


class Venue(BaseModel):
    """
    A single physical screening location.

    Venues are immutable and compare equal when their ids match, regardless
    of the other fields.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    name: str
    area: str = ""
    address: str = ""
    latitude: float | None = None
    longitude: float | None = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Venue):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class VenueCreate(BaseModel):
    """Request body for registering a user venue."""

    id: str | None = None
    name: str = Field(min_length=1)
    area: str = ""
    address: str = Field(min_length=1)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class VenueListResponse(BaseModel):
    """Built-in venues followed by user-added ones."""

    venues: list[Venue]
    total: int
