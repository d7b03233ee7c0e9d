"""SQLAlchemy ORM models."""

from cinepair.models.base import Base
from cinepair.models.venue import CustomVenue

__all__ = ["Base", "CustomVenue"]
