"""Pydantic schemas for the domain and API requests/responses."""

from cinepair.schemas.daily import (
    DailySchedule,
    DailyScheduleRequest,
    DailyScheduleResponse,
    PackMovie,
    ScheduleItem,
)
from cinepair.schemas.pairing import (
    CandidatePairing,
    PairedShowing,
    PairingRequest,
    PairingResponse,
)
from cinepair.schemas.showing import MovieInfo, ScheduleListResponse, Showing, ShowingSet
from cinepair.schemas.travel import TravelMatrixRequest, TravelMatrixResponse
from cinepair.schemas.venue import Venue, VenueCreate, VenueListResponse

__all__ = [
    "CandidatePairing",
    "DailySchedule",
    "DailyScheduleRequest",
    "DailyScheduleResponse",
    "MovieInfo",
    "PackMovie",
    "PairedShowing",
    "PairingRequest",
    "PairingResponse",
    "ScheduleItem",
    "ScheduleListResponse",
    "Showing",
    "ShowingSet",
    "TravelMatrixRequest",
    "TravelMatrixResponse",
    "Venue",
    "VenueCreate",
    "VenueListResponse",
]
