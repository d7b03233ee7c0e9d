"""Custom venue model for user-added screening locations."""

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cinepair.models.base import Base, TimestampMixin
from cinepair.schemas.venue import Venue


class CustomVenue(Base, TimestampMixin):
    """
    A venue registered by a user on top of the built-in list.

    Rows convert to and from the immutable ``Venue`` schema used by the
    pairing engine.
    """

    __tablename__ = "custom_venues"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    area: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<CustomVenue(id={self.id!r}, name={self.name!r})>"

    @classmethod
    def from_schema(cls, venue: Venue) -> "CustomVenue":
        return cls(
            id=venue.id,
            name=venue.name,
            area=venue.area,
            address=venue.address,
            latitude=venue.latitude,
            longitude=venue.longitude,
        )

    def to_schema(self) -> Venue:
        return Venue.model_validate(self)
