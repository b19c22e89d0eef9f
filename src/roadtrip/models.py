"""Domain models shared across the loader, graph, and query modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class NameRecord:
    """One `state_name.tsv` row: canonical id and its display name."""

    country_id: str
    name: str


@dataclass(frozen=True, slots=True)
class BorderRecord:
    """One `borders.txt` line: a country and the neighbours listed for it."""

    country_id: str
    neighbors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DistanceRecord:
    """One `capdist.csv` row: capital-to-capital distance in kilometres."""

    country_a: str
    country_b: str
    km: int


@dataclass(frozen=True, slots=True)
class Leg:
    origin: str
    destination: str
    km: int


@dataclass(frozen=True, slots=True)
class Route:
    """Ordered country ids from source to target and the accumulated distance."""

    countries: tuple[str, ...]
    total_km: int
    legs: tuple[Leg, ...] = ()

    @property
    def hops(self) -> int:
        return len(self.countries) - 1


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Answer to one two-country query.

    `direct_distance` and `path` are computed independently; either may be
    present without the other.
    """

    query_a: str
    query_b: str
    source_id: str
    target_id: str
    source_name: str
    target_name: str
    direct_distance: int | None
    route: Route | None
    path: tuple[str, ...] | None
    unit: str = "km"

    @property
    def total_distance(self) -> int | None:
        return self.route.total_km if self.route is not None else None

    @property
    def found_anything(self) -> bool:
        return self.direct_distance is not None or self.route is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": [self.query_a, self.query_b],
            "source": {"id": self.source_id, "name": self.source_name},
            "target": {"id": self.target_id, "name": self.target_name},
            "direct_distance": self.direct_distance,
            "path": list(self.path) if self.path is not None else None,
            "path_ids": list(self.route.countries) if self.route is not None else None,
            "total_distance": self.total_distance,
            "unit": self.unit,
        }


@dataclass(slots=True)
class LoadReport:
    """Counts for one input file: accepted records and skipped lines."""

    source: str
    accepted: int = 0
    skipped: list[str] = field(default_factory=list)

    def add_skipped(self, msg: str) -> None:
        self.skipped.append(msg)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
