"""Country id <-> display name registry."""

from __future__ import annotations

from typing import Iterable, Iterator

from .models import NameRecord


class NameRegistry:
    """Maps canonical country ids to display names and back."""

    def __init__(self) -> None:
        self._names: dict[str, str] = {}

    def register(self, country_id: str, name: str) -> None:
        self._names[country_id] = name

    def resolve_to_id(self, query: str) -> str:
        """Return the id whose display name matches `query`, ignoring case.

        An unmatched query is handed back unchanged so callers can treat it as
        an id in its own right.
        """
        wanted = _fold(query)
        for country_id, name in self._names.items():
            if _fold(name) == wanted:
                return country_id
        return query

    def name_of(self, country_id: str) -> str | None:
        return self._names.get(country_id)

    def ids(self) -> Iterator[str]:
        return iter(self._names)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._names.items())

    def __contains__(self, country_id: object) -> bool:
        return country_id in self._names

    def __len__(self) -> int:
        return len(self._names)


def build_registry(records: Iterable[NameRecord]) -> NameRegistry:
    registry = NameRegistry()
    for record in records:
        registry.register(record.country_id, record.name)
    return registry


def _fold(value: str) -> str:
    return value.strip().casefold()
