"""Shortest-route search over the border graph."""

from __future__ import annotations

import heapq
import itertools
import logging

from .distances import DistanceTable
from .graph import BorderGraph
from .models import Leg, Route

LOGGER = logging.getLogger("roadtrip.pathfinder")

MISSING_LEG_SKIP = "skip"
MISSING_LEG_ZERO = "zero"
MISSING_LEG_POLICIES = frozenset({MISSING_LEG_SKIP, MISSING_LEG_ZERO})


def find_route(
    graph: BorderGraph,
    table: DistanceTable,
    source: str,
    target: str,
    *,
    missing_leg: str = MISSING_LEG_SKIP,
) -> Route | None:
    """Return the route with the lowest total tabulated distance, or None.

    Uniform-cost search: the frontier is ordered by accumulated kilometres,
    then by hop count, then by discovery order, so equal-cost routes resolve
    to the one with fewer legs and otherwise to adjacency order.

    A border with no tabulated distance is impassable under the "skip" policy
    and free under the "zero" policy.
    """
    if missing_leg not in MISSING_LEG_POLICIES:
        raise ValueError(
            "missing_leg must be one of: " + ", ".join(sorted(MISSING_LEG_POLICIES))
        )

    if source == target:
        return Route(countries=(source,), total_km=0)
    if source not in graph:
        LOGGER.debug("No adjacency record for %s", source)
        return None

    order = itertools.count()
    frontier: list[tuple[int, int, int, str, tuple[Leg, ...]]] = [
        (0, 0, next(order), source, ())
    ]
    settled: set[str] = set()

    while frontier:
        cost, hops, _, country, legs = heapq.heappop(frontier)
        if country in settled:
            continue
        if country == target:
            return Route(
                countries=(source, *(leg.destination for leg in legs)),
                total_km=cost,
                legs=legs,
            )
        settled.add(country)

        for neighbor in graph.neighbors_of(country):
            if neighbor in settled:
                continue
            km = table.lookup(country, neighbor)
            if km is None:
                if missing_leg == MISSING_LEG_SKIP:
                    LOGGER.debug("Skipping border %s-%s: no tabulated distance", country, neighbor)
                    continue
                km = 0
            heapq.heappush(
                frontier,
                (cost + km, hops + 1, next(order), neighbor, (*legs, Leg(country, neighbor, km))),
            )

    LOGGER.debug("Exhausted %d reachable countries without reaching %s", len(settled), target)
    return None
