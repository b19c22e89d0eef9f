"""Tests for the name registry."""

from roadtrip.models import NameRecord
from roadtrip.registry import NameRegistry, build_registry


class TestResolveToId:
    def test_case_insensitive(self):
        registry = NameRegistry()
        registry.register("FRA", "France")
        assert registry.resolve_to_id("france") == "FRA"
        assert registry.resolve_to_id("FRANCE") == "FRA"
        assert registry.resolve_to_id("France") == "FRA"

    def test_ignores_surrounding_whitespace(self):
        registry = NameRegistry()
        registry.register("FRA", "France")
        assert registry.resolve_to_id("  France ") == "FRA"

    def test_unregistered_name_returned_unchanged(self):
        registry = NameRegistry()
        registry.register("FRA", "France")
        assert registry.resolve_to_id("Atlantis") == "Atlantis"
        assert registry.resolve_to_id("fra") == "fra"

    def test_empty_registry(self):
        assert NameRegistry().resolve_to_id("Spain") == "Spain"


class TestRegister:
    def test_last_write_wins(self):
        registry = NameRegistry()
        registry.register("GFR", "German Federal Republic")
        registry.register("GFR", "Germany")
        assert registry.name_of("GFR") == "Germany"
        assert registry.resolve_to_id("Germany") == "GFR"
        assert registry.resolve_to_id("German Federal Republic") == "German Federal Republic"
        assert len(registry) == 1

    def test_name_of_unknown_is_none(self):
        assert NameRegistry().name_of("XXX") is None

    def test_contains(self):
        registry = build_registry([NameRecord("USA", "United States")])
        assert "USA" in registry
        assert "usa" not in registry


class TestBuildRegistry:
    def test_from_records(self):
        registry = build_registry(
            [
                NameRecord("USA", "United States"),
                NameRecord("CAN", "Canada"),
            ]
        )
        assert registry.name_of("CAN") == "Canada"
        assert registry.resolve_to_id("united states") == "USA"
        assert list(registry.ids()) == ["USA", "CAN"]
