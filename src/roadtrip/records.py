"""Parsers for the borders, capital-distance, and state-name input files.

Each reader drains its file into a list of typed records before returning, so
a failure on one file never leaves a half-built structure behind. Lines that
do not have the expected shape are logged, counted in the returned
`LoadReport`, and skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .models import BorderRecord, DistanceRecord, LoadReport, NameRecord

LOGGER = logging.getLogger("roadtrip.records")

CAPDIST_FIELD_COUNT = 6
CAPDIST_ID_A = 1
CAPDIST_ID_B = 3
CAPDIST_KM = 4

STATE_NAME_MIN_FIELDS = 3
STATE_NAME_ID = 1
STATE_NAME_NAME = 2


class InputFileError(RuntimeError):
    """Raised when an input file is missing or cannot be read."""


def read_border_records(path: Path) -> tuple[list[BorderRecord], LoadReport]:
    """Parse `COUNTRY = NEIGHBOR 123 km; NEIGHBOR 45 km` lines."""
    report = LoadReport(source=str(path))
    records: list[BorderRecord] = []
    for line_no, line in _read_lines(path, label="borders"):
        if not line.strip():
            continue
        key, sep, rest = line.partition("=")
        country_id = key.strip()
        if not sep or not country_id:
            _skip(report, path, line_no, "expected 'COUNTRY = NEIGHBORS'", line)
            continue
        neighbors: list[str] = []
        for entry in rest.split(";"):
            tokens = entry.split()
            if tokens:
                neighbors.append(tokens[0])
        records.append(BorderRecord(country_id=country_id, neighbors=tuple(neighbors)))
    report.accepted = len(records)
    _log_summary(report)
    return records, report


def read_distance_records(path: Path) -> tuple[list[DistanceRecord], LoadReport]:
    """Parse capdist CSV rows; the header line is skipped."""
    report = LoadReport(source=str(path))
    records: list[DistanceRecord] = []
    for line_no, line in _read_lines(path, label="capdist", skip_header=True):
        if not line.strip():
            continue
        parts = line.split(",")
        if len(parts) != CAPDIST_FIELD_COUNT:
            _skip(report, path, line_no, f"expected {CAPDIST_FIELD_COUNT} fields, got {len(parts)}", line)
            continue
        country_a = parts[CAPDIST_ID_A].strip()
        country_b = parts[CAPDIST_ID_B].strip()
        km_raw = parts[CAPDIST_KM].strip()
        try:
            km = int(km_raw)
        except ValueError:
            _skip(report, path, line_no, f"non-numeric distance '{km_raw}'", line)
            continue
        if km < 0:
            _skip(report, path, line_no, f"negative distance {km}", line)
            continue
        if not country_a or not country_b:
            _skip(report, path, line_no, "empty country id", line)
            continue
        records.append(DistanceRecord(country_a=country_a, country_b=country_b, km=km))
    report.accepted = len(records)
    _log_summary(report)
    return records, report


def read_name_records(path: Path) -> tuple[list[NameRecord], LoadReport]:
    """Parse tab-separated state-name rows; the header line is skipped."""
    report = LoadReport(source=str(path))
    records: list[NameRecord] = []
    for line_no, line in _read_lines(path, label="state names", skip_header=True):
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < STATE_NAME_MIN_FIELDS:
            _skip(
                report,
                path,
                line_no,
                f"expected at least {STATE_NAME_MIN_FIELDS} tab-separated fields, got {len(parts)}",
                line,
            )
            continue
        country_id = parts[STATE_NAME_ID].strip()
        name = parts[STATE_NAME_NAME].strip()
        if not country_id or not name:
            _skip(report, path, line_no, "empty id or name", line)
            continue
        records.append(NameRecord(country_id=country_id, name=name))
    report.accepted = len(records)
    _log_summary(report)
    return records, report


def _read_lines(path: Path, *, label: str, skip_header: bool = False) -> Iterator[tuple[int, str]]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except FileNotFoundError as exc:
        raise InputFileError(f"{label} file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"Could not read {label} file {path}: {exc}") from exc

    start = 1 if skip_header else 0
    for idx in range(start, len(lines)):
        yield idx + 1, lines[idx]


def _skip(report: LoadReport, path: Path, line_no: int, reason: str, line: str) -> None:
    msg = f"{path.name}:{line_no}: {reason}: {line.strip()!r}"
    LOGGER.warning("Skipping malformed line %s", msg)
    report.add_skipped(msg)


def _log_summary(report: LoadReport) -> None:
    LOGGER.info(
        "Loaded %d records from %s (%d lines skipped)",
        report.accepted,
        report.source,
        report.skipped_count,
    )
