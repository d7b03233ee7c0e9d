"""Pairing engine: combines showings of two movies across venues.

Every available showing of movie A is paired with every available showing
of movie B. Each pair is labelled feasible when the slack between arriving
at B's venue (A's end plus travel) and B's start lies within a tolerance
window. Results are ranked feasible-first, then by total elapsed time.
"""

import asyncio
import logging
from collections.abc import Sequence
from datetime import date

from cinepair.config import settings
from cinepair.schemas.pairing import CandidatePairing, PairedShowing
from cinepair.schemas.showing import ShowingSet
from cinepair.services.travel_time import TravelTimeProvider
from cinepair.utils.timefmt import minutes_to_time, time_to_minutes

logger = logging.getLogger(__name__)

TravelTimes = dict[tuple[str, str], int]


def ranking_key(pairing: CandidatePairing) -> tuple[bool, int]:
    """Sort key: feasible pairings first, then shortest total time."""
    return (not pairing.feasible, pairing.total_time)


def rank_pairings(
    pairings: Sequence[CandidatePairing],
    limit: int,
) -> list[CandidatePairing]:
    """
    Stable-sort, truncate to ``limit`` and number the survivors 1..N.

    Ids are always reassigned, so ids from an earlier ranking never leak
    into the result.
    """
    ranked = sorted(pairings, key=ranking_key)[:limit]
    return [
        pairing.model_copy(update={"id": index})
        for index, pairing in enumerate(ranked, start=1)
    ]


class PairingEngine:
    """
    Enumerates and ranks (movie A, movie B) showtime combinations.

    Travel times are resolved once per distinct ordered venue pair within a
    single enumeration pass; nothing is cached between calls.
    """

    def __init__(
        self,
        travel_provider: TravelTimeProvider,
        max_results: int | None = None,
        min_buffer: int | None = None,
        max_buffer: int | None = None,
    ) -> None:
        self.travel_provider = travel_provider
        self.max_results = max_results if max_results is not None else settings.pairing_max_results
        self.min_buffer = min_buffer if min_buffer is not None else settings.pairing_min_buffer
        self.max_buffer = max_buffer if max_buffer is not None else settings.pairing_max_buffer

    def is_feasible(self, buffer: int) -> bool:
        return self.min_buffer <= buffer <= self.max_buffer

    async def generate_pairings(
        self,
        showings_a: Sequence[ShowingSet],
        showings_b: Sequence[ShowingSet],
    ) -> list[CandidatePairing]:
        """
        Pair movie A's showings with movie B's, A first.

        Args:
            showings_a: Showing sets of the movie watched first
            showings_b: Showing sets of the movie watched second

        Returns:
            At most ``max_results`` pairings, ranked and numbered from 1
        """
        candidates = await self._enumerate(showings_a, showings_b)
        return rank_pairings(candidates, self.max_results)

    async def generate_all_pairings(
        self,
        showings_a: Sequence[ShowingSet],
        showings_b: Sequence[ShowingSet],
        date: date | None = None,
    ) -> list[CandidatePairing]:
        """
        Pair the two movies in both orders and merge the results.

        The A-then-B and B-then-A passes are computed independently (travel
        times are not assumed symmetric), concatenated, re-ranked and capped
        once. ``date`` is only recorded in the logs; all arithmetic treats
        times as same-day minute offsets.
        """
        forward, backward = await asyncio.gather(
            self._enumerate(showings_a, showings_b),
            self._enumerate(showings_b, showings_a),
        )
        result = rank_pairings([*forward, *backward], self.max_results)

        logger.info(
            f"Generated {len(forward) + len(backward)} candidate pairings for {date or 'unspecified date'}, "
            f"returning {len(result)} ({sum(p.feasible for p in result)} feasible)"
        )
        return result

    async def _resolve_travel_times(
        self,
        showings_a: Sequence[ShowingSet],
        showings_b: Sequence[ShowingSet],
    ) -> TravelTimes:
        """Look up travel time for each distinct venue pair that can be paired."""
        pairs = {}
        for set_a in showings_a:
            if not set_a.available_showings():
                continue
            for set_b in showings_b:
                if not set_b.available_showings():
                    continue
                pairs.setdefault((set_a.venue.id, set_b.venue.id), (set_a.venue, set_b.venue))

        minutes = await asyncio.gather(
            *[self.travel_provider.lookup(origin, dest) for origin, dest in pairs.values()]
        )
        return dict(zip(pairs.keys(), minutes))

    async def _enumerate(
        self,
        showings_a: Sequence[ShowingSet],
        showings_b: Sequence[ShowingSet],
    ) -> list[CandidatePairing]:
        """Build the full, unranked cross product of available showings."""
        if not showings_a or not showings_b:
            return []

        travel_times = await self._resolve_travel_times(showings_a, showings_b)
        candidates: list[CandidatePairing] = []

        for set_a in showings_a:
            for showing_a in set_a.available_showings():
                start_a = time_to_minutes(showing_a.time)
                end_a = start_a + set_a.movie.duration
                side_a = PairedShowing(
                    title=set_a.movie.title,
                    venue=set_a.venue,
                    start_time=showing_a.time,
                    end_time=minutes_to_time(end_a),
                )

                for set_b in showings_b:
                    travel_time = travel_times.get((set_a.venue.id, set_b.venue.id))
                    if travel_time is None:
                        continue

                    for showing_b in set_b.available_showings():
                        start_b = time_to_minutes(showing_b.time)
                        end_b = start_b + set_b.movie.duration
                        buffer = start_b - (end_a + travel_time)

                        candidates.append(
                            CandidatePairing(
                                movie_a=side_a,
                                movie_b=PairedShowing(
                                    title=set_b.movie.title,
                                    venue=set_b.venue,
                                    start_time=showing_b.time,
                                    end_time=minutes_to_time(end_b),
                                ),
                                travel_time=travel_time,
                                total_time=end_b - start_a,
                                buffer=buffer,
                                feasible=self.is_feasible(buffer),
                            )
                        )

        return candidates
