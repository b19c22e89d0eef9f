"""Symmetric capital-to-capital distance table."""

from __future__ import annotations

from typing import Iterable, Iterator

from .models import DistanceRecord


class DistanceTable:
    def __init__(self) -> None:
        self._km: dict[tuple[str, str], int] = {}

    def record_distance(self, country_a: str, country_b: str, km: int) -> None:
        """Store `km` for both (a, b) and (b, a), replacing earlier values."""
        if km < 0:
            raise ValueError(f"Distance must be >= 0, got {km} for {country_a}-{country_b}")
        self._km[(country_a, country_b)] = km
        self._km[(country_b, country_a)] = km

    def lookup(self, country_a: str, country_b: str) -> int | None:
        return self._km.get((country_a, country_b))

    def countries(self) -> Iterator[str]:
        seen: set[str] = set()
        for country_a, _ in self._km:
            if country_a not in seen:
                seen.add(country_a)
                yield country_a


def build_distance_table(records: Iterable[DistanceRecord]) -> DistanceTable:
    table = DistanceTable()
    for record in records:
        table.record_distance(record.country_a, record.country_b, record.km)
    return table
