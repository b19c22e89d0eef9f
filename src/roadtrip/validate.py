"""Validation layer for config and input datasets."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .config import AppConfig
from .distances import DistanceTable, build_distance_table
from .graph import BorderGraph, build_graph
from .models import LoadReport
from .records import InputFileError, read_border_records, read_distance_records, read_name_records
from .registry import NameRegistry, build_registry


@dataclass(slots=True)
class ValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def add_info(self, msg: str) -> None:
        self.infos.append(msg)


class Validator:
    """Loads the three input files and checks them against each other."""

    def __init__(self, cfg: AppConfig) -> None:
        self.cfg = cfg

    def run(self) -> ValidationReport:
        report = ValidationReport()
        paths = self.cfg.paths
        for name in paths.missing_inputs:
            report.add_error(f"No path configured for {name} input")
        if not report.ok:
            return report

        registry = self._load_registry(report, paths.state_names)
        graph = self._load_graph(report, paths.borders)
        table = self._load_table(report, paths.capdist)
        if registry is None or graph is None or table is None:
            return report

        self._check_names(report, registry=registry, graph=graph)
        self._check_border_distances(report, graph=graph, table=table)
        self._check_symmetry(report, graph=graph)
        return report

    def _load_registry(self, report: ValidationReport, path: Path | None) -> NameRegistry | None:
        if path is None:
            return None
        try:
            records, load_report = read_name_records(path)
        except InputFileError as exc:
            report.add_error(str(exc))
            return None
        self._add_load_report(report, load_report, label="state names")
        return build_registry(records)

    def _load_graph(self, report: ValidationReport, path: Path | None) -> BorderGraph | None:
        if path is None:
            return None
        try:
            records, load_report = read_border_records(path)
        except InputFileError as exc:
            report.add_error(str(exc))
            return None
        self._add_load_report(report, load_report, label="borders")
        return build_graph(records)

    def _load_table(self, report: ValidationReport, path: Path | None) -> DistanceTable | None:
        if path is None:
            return None
        try:
            records, load_report = read_distance_records(path)
        except InputFileError as exc:
            report.add_error(str(exc))
            return None
        self._add_load_report(report, load_report, label="capital distances")
        return build_distance_table(records)

    @staticmethod
    def _add_load_report(report: ValidationReport, load_report: LoadReport, *, label: str) -> None:
        if load_report.accepted == 0:
            report.add_error(f"No usable {label} records in {load_report.source}")
        else:
            report.add_info(f"Loaded {load_report.accepted} {label} records from {load_report.source}")
        if load_report.skipped:
            report.add_warning(
                f"Skipped {load_report.skipped_count} malformed {label} lines: "
                f"{_format_code_list(load_report.skipped, limit=3)}"
            )

    def _check_names(
        self,
        report: ValidationReport,
        *,
        registry: NameRegistry,
        graph: BorderGraph,
    ) -> None:
        mentioned = set(graph.countries()) | {c for edge in graph.edges() for c in edge}
        unnamed = [c for c in mentioned if c not in registry]
        if unnamed:
            report.add_warning(
                "Border countries with no display name (ids will be shown instead): "
                f"{_format_code_list(sorted(set(unnamed)))}"
            )

        by_name: dict[str, list[str]] = defaultdict(list)
        for country_id, name in registry.items():
            by_name[name.strip().casefold()].append(country_id)
        collisions = sorted(
            f"{name}({'/'.join(ids)})" for name, ids in by_name.items() if len(ids) > 1
        )
        if collisions:
            report.add_warning(
                "Display names shared by several ids; name lookups resolve to the first: "
                f"{_format_code_list(collisions)}"
            )

    def _check_border_distances(
        self,
        report: ValidationReport,
        *,
        graph: BorderGraph,
        table: DistanceTable,
    ) -> None:
        missing = sorted(
            f"{origin}-{destination}"
            for origin, destination in graph.edges()
            if table.lookup(origin, destination) is None
        )
        edge_count = sum(1 for _ in graph.edges())
        report.add_info(
            f"Border check summary: countries={len(graph)}, borders={edge_count}, "
            f"borders_without_distance={len(missing)}"
        )
        if missing:
            report.add_warning(
                f"Borders with no tabulated distance (impassable when query.missing_leg=skip, "
                f"currently '{self.cfg.query.missing_leg}'): {_format_code_list(missing)}"
            )

    @staticmethod
    def _check_symmetry(report: ValidationReport, *, graph: BorderGraph) -> None:
        one_sided = sorted(
            f"{origin}->{destination}"
            for origin, destination in graph.edges()
            if destination in graph and origin not in graph.neighbors_of(destination)
        )
        if one_sided:
            report.add_warning(
                "Borders listed on one side only (kept one-directional): "
                f"{_format_code_list(one_sided)}"
            )


def _format_code_list(values: list[str], limit: int = 12) -> str:
    if len(values) <= limit:
        return ", ".join(values)
    shown = ", ".join(values[:limit])
    return f"{shown}, ... (+{len(values) - limit} more)"


def format_report_lines(report: ValidationReport) -> Iterable[str]:
    if report.infos:
        for info in report.infos:
            yield f"[INFO] {info}"
    if report.warnings:
        for warning in report.warnings:
            yield f"[WARN] {warning}"
    if report.errors:
        for error in report.errors:
            yield f"[ERROR] {error}"
    if report.ok:
        yield "[OK] Validation completed with no errors."
