"""Pydantic schemas for showtime pairings."""

import datetime
from datetime import date

from pydantic import BaseModel

from cinepair.schemas.showing import ShowingSet
from cinepair.schemas.venue import Venue


class PairedShowing(BaseModel):
    """One side of a pairing, resolved to concrete start and end times."""

    title: str
    venue: Venue
    start_time: str
    end_time: str


class CandidatePairing(BaseModel):
    """
    A proposed (movie A, movie B) combination.

    ``id`` is positional: it is the 1-based rank within the list it was
    returned in, not a persistent identifier. ``total_time`` is always
    B end minus A start, even for infeasible pairings.
    """

    id: int = 0
    movie_a: PairedShowing
    movie_b: PairedShowing
    travel_time: int
    total_time: int
    buffer: int
    feasible: bool


class PairingRequest(BaseModel):
    """
    Request body for pairing generation.

    Either both ``showings_a`` and ``showings_b`` are given (manual entry),
    or both movie titles are given and mock listings are generated.
    """

    movie_a: str | None = None
    movie_b: str | None = None
    date: datetime.date | None = None
    showings_a: list[ShowingSet] | None = None
    showings_b: list[ShowingSet] | None = None
    seed: int | None = None


class PairingResponse(BaseModel):
    """Response for pairing generation."""

    pairings: list[CandidatePairing]
    total_pairings: int
    feasible_pairings: int
    date: date
