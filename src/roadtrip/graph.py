"""Land-border adjacency graph."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .models import BorderRecord


class BorderGraph:
    """Adjacency lists keyed by country id, stored exactly as read.

    A border listed only on one side stays one-directional; nothing is
    symmetrised.
    """

    def __init__(self) -> None:
        self._adjacency: dict[str, tuple[str, ...]] = {}

    def add_country(self, country_id: str, neighbors: Sequence[str]) -> None:
        # replaces any earlier neighbour list for the same id
        self._adjacency[country_id] = tuple(neighbors)

    def neighbors_of(self, country_id: str) -> tuple[str, ...]:
        return self._adjacency.get(country_id, ())

    def countries(self) -> Iterator[str]:
        return iter(self._adjacency)

    def edges(self) -> Iterator[tuple[str, str]]:
        for country_id, neighbors in self._adjacency.items():
            for neighbor in neighbors:
                yield (country_id, neighbor)

    def __contains__(self, country_id: object) -> bool:
        return country_id in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)


def build_graph(records: Iterable[BorderRecord]) -> BorderGraph:
    graph = BorderGraph()
    for record in records:
        graph.add_country(record.country_id, record.neighbors)
    return graph
