"""Query façade: name resolution, direct distance, and route lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .distances import DistanceTable, build_distance_table
from .graph import BorderGraph, build_graph
from .models import BorderRecord, DistanceRecord, LoadReport, NameRecord, QueryResult
from .pathfinder import MISSING_LEG_SKIP, find_route
from .records import read_border_records, read_distance_records, read_name_records
from .registry import NameRegistry, build_registry

LOGGER = logging.getLogger("roadtrip.query")


class RoadTrip:
    """Answers two-country queries against fully loaded, read-only structures."""

    def __init__(
        self,
        registry: NameRegistry,
        graph: BorderGraph,
        table: DistanceTable,
        *,
        missing_leg: str = MISSING_LEG_SKIP,
        unit: str = "km",
    ) -> None:
        self.registry = registry
        self.graph = graph
        self.table = table
        self.missing_leg = missing_leg
        self.unit = unit
        self.load_reports: tuple[LoadReport, ...] = ()
        known = [
            *registry.ids(),
            *graph.countries(),
            *(neighbor for _, neighbor in graph.edges()),
            *table.countries(),
        ]
        self._exact_ids = frozenset(known)
        self._known_ids = _case_index(known)

    @classmethod
    def from_records(
        cls,
        name_records: Iterable[NameRecord],
        border_records: Iterable[BorderRecord],
        distance_records: Iterable[DistanceRecord],
        **kwargs: str,
    ) -> RoadTrip:
        return cls(
            build_registry(name_records),
            build_graph(border_records),
            build_distance_table(distance_records),
            **kwargs,
        )

    @classmethod
    def from_files(
        cls,
        borders: Path,
        capdist: Path,
        state_names: Path,
        **kwargs: str,
    ) -> RoadTrip:
        """Load all three input files; raises `InputFileError` if one is unavailable."""
        name_records, name_report = read_name_records(state_names)
        border_records, border_report = read_border_records(borders)
        distance_records, distance_report = read_distance_records(capdist)
        trip = cls.from_records(name_records, border_records, distance_records, **kwargs)
        trip.load_reports = (name_report, border_report, distance_report)
        return trip

    def resolve(self, name: str) -> str:
        """Resolve a user-entered name to a canonical id.

        Display names are matched first; anything else is matched against the
        known ids ignoring case and, failing that, upper-cased.
        """
        resolved = self.registry.resolve_to_id(name.strip())
        if resolved in self._exact_ids:
            return resolved
        return self._known_ids.get(resolved.casefold(), resolved.upper())

    def display_name(self, country_id: str) -> str:
        name = self.registry.name_of(country_id)
        return name if name is not None else country_id

    def query(self, name_a: str, name_b: str) -> QueryResult:
        source = self.resolve(name_a)
        target = self.resolve(name_b)
        LOGGER.debug("Resolved %r -> %s, %r -> %s", name_a, source, name_b, target)

        if source == target and source not in self._exact_ids:
            direct = None
            route = None
        else:
            direct = 0 if source == target else self.table.lookup(source, target)
            route = find_route(
                self.graph,
                self.table,
                source,
                target,
                missing_leg=self.missing_leg,
            )
        path = tuple(self.display_name(c) for c in route.countries) if route is not None else None

        return QueryResult(
            query_a=name_a,
            query_b=name_b,
            source_id=source,
            target_id=target,
            source_name=self.display_name(source),
            target_name=self.display_name(target),
            direct_distance=direct,
            route=route,
            path=path,
            unit=self.unit,
        )


def format_result_lines(result: QueryResult) -> Iterator[str]:
    """Yield the human-readable answer for one query."""
    unit = result.unit
    if result.direct_distance is not None:
        yield f"Distance from {result.source_name} to {result.target_name}: {result.direct_distance} {unit}"
    else:
        yield f"Distance from {result.source_name} to {result.target_name} is not tabulated"

    if result.route is None or result.path is None:
        yield f"No route found between {result.source_name} and {result.target_name}"
        return

    yield "Route:"
    if not result.route.legs:
        yield f"* {result.path[0]} (same country)"
    for idx, leg in enumerate(result.route.legs):
        yield f"* {result.path[idx]} --> {result.path[idx + 1]} ({leg.km} {unit})"
    yield f"Total distance along route: {result.route.total_km} {unit}"


def _case_index(ids: Iterable[str]) -> dict[str, str]:
    index: dict[str, str] = {}
    for country_id in ids:
        index.setdefault(country_id.casefold(), country_id)
    return index
