"""Mock showtime listings for development and demos."""

import random
from collections.abc import Sequence
from datetime import date

from cinepair.schemas.showing import MovieInfo, Showing, ShowingSet
from cinepair.schemas.venue import Venue

DEFAULT_VENUES: tuple[Venue, ...] = (
    Venue(
        id="toho-shinjuku",
        name="TOHO Cinemas Shinjuku",
        area="Shinjuku",
        address="1-19-1 Kabukicho, Shinjuku-ku, Tokyo",
        latitude=35.6938,
        longitude=139.7006,
    ),
    Venue(
        id="toho-ikebukuro",
        name="TOHO Cinemas Ikebukuro",
        area="Ikebukuro",
        address="1-41-2 Higashi-Ikebukuro, Toshima-ku, Tokyo",
        latitude=35.7295,
        longitude=139.7174,
    ),
    Venue(
        id="toho-shibuya",
        name="TOHO Cinemas Shibuya",
        area="Shibuya",
        address="2-6-17 Dogenzaka, Shibuya-ku, Tokyo",
        latitude=35.6580,
        longitude=139.6982,
    ),
    Venue(
        id="toho-roppongi",
        name="TOHO Cinemas Roppongi Hills",
        area="Roppongi",
        address="6-10-2 Roppongi, Minato-ku, Tokyo",
        latitude=35.6604,
        longitude=139.7292,
    ),
    Venue(
        id="toho-hibiya",
        name="TOHO Cinemas Hibiya",
        area="Hibiya",
        address="1-1-3 Yurakucho, Chiyoda-ku, Tokyo",
        latitude=35.6748,
        longitude=139.7601,
    ),
)

# Typical weekday grid for a multiplex screen
MOCK_SHOWTIMES = (
    "09:00", "10:30", "11:00", "12:30", "13:00", "14:30", "15:00",
    "16:30", "17:00", "18:30", "19:00", "20:30", "21:00",
)

MOCK_AVAILABILITY = 0.8
DEFAULT_DURATION = 120


def generate_mock_showing_sets(
    title: str,
    on_date: date,
    duration: int = DEFAULT_DURATION,
    venues: Sequence[Venue] = DEFAULT_VENUES,
    rng: random.Random | None = None,
) -> list[ShowingSet]:
    """
    Build one showing set per venue with a realistic showtime grid.

    Each showing has an 80% chance of still having seats. Pass a seeded
    ``rng`` for reproducible listings.
    """
    rng = rng or random.Random()
    movie = MovieInfo(title=title, duration=duration)

    return [
        ShowingSet(
            movie=movie,
            venue=venue,
            showings=[
                Showing(time=time, available=rng.random() < MOCK_AVAILABILITY)
                for time in MOCK_SHOWTIMES
            ],
            date=on_date,
        )
        for venue in venues
    ]
