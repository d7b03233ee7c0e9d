"""Print back-to-back showing plans for two movies using mock listings."""

import argparse
import asyncio
import logging
import random
from datetime import date

from cinepair.config import settings
from cinepair.schemas.pairing import CandidatePairing
from cinepair.services.mock_schedules import generate_mock_showing_sets
from cinepair.services.pairing import PairingEngine
from cinepair.services.travel_time import build_travel_time_provider

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")


def format_pairing(pairing: CandidatePairing) -> str:
    """One-line summary, e.g. ``#1 OK  Movie A @ Shinjuku 10:00-12:00 -> ...``."""
    a, b = pairing.movie_a, pairing.movie_b
    status = "OK " if pairing.feasible else "-- "
    return (
        f"#{pairing.id:<3}{status}"
        f"{a.title} @ {a.venue.name} {a.start_time}-{a.end_time} "
        f"-> {pairing.travel_time} min -> "
        f"{b.title} @ {b.venue.name} {b.start_time}-{b.end_time} "
        f"(total {pairing.total_time} min, slack {pairing.buffer} min)"
    )


async def plan(movie_a: str, movie_b: str, on_date: date, seed: int | None) -> list[str]:
    rng = random.Random(seed)
    showings_a = generate_mock_showing_sets(movie_a, on_date, rng=rng)
    showings_b = generate_mock_showing_sets(movie_b, on_date, rng=rng)

    engine = PairingEngine(build_travel_time_provider(settings))
    pairings = await engine.generate_all_pairings(showings_a, showings_b, on_date)
    return [format_pairing(p) for p in pairings]


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("movie_a")
    parser.add_argument("movie_b")
    parser.add_argument("--date", type=date.fromisoformat, default=date.today())
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    for line in asyncio.run(plan(args.movie_a, args.movie_b, args.date, args.seed)):
        print(line)


if __name__ == "__main__":
    main()
