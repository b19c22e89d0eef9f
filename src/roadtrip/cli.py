"""CLI entrypoint for roadtrip."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .config import AppConfig, load_config
from .query import RoadTrip, format_result_lines
from .records import InputFileError
from .util import setup_logging, write_json
from .validate import Validator, format_report_lines

LOGGER = logging.getLogger("roadtrip.cli")

FIRST_PROMPT = "Enter the name of the first country (type '{quit}' to exit): "
SECOND_PROMPT = "Enter the name of the second country (type '{quit}' to exit): "


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadtrip",
        description="Capital distances and border-crossing routes between countries.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--config", default=None, help="Path to YAML config.")
        p.add_argument("--borders", type=Path, default=None, help="Path to borders.txt.")
        p.add_argument("--capdist", type=Path, default=None, help="Path to capdist.csv.")
        p.add_argument("--state-names", type=Path, default=None, help="Path to state_name.tsv.")
        p.add_argument("--verbose", action="store_true", help="Enable debug logs.")

    interactive_p = subparsers.add_parser("interactive", help="Ask for country pairs until 'quit'.")
    add_common(interactive_p)

    query_p = subparsers.add_parser("query", help="Answer a single country pair.")
    add_common(query_p)
    query_p.add_argument("country_a", help="First country name or id.")
    query_p.add_argument("country_b", help="Second country name or id.")
    query_p.add_argument("--json", type=Path, default=None, help="Also write the result as JSON.")

    validate_p = subparsers.add_parser("validate", help="Check the input files for consistency.")
    add_common(validate_p)

    return parser


def _load_and_setup(args: argparse.Namespace, parser: argparse.ArgumentParser) -> AppConfig:
    cfg = load_config(args.config) if args.config else AppConfig.default()
    cfg = cfg.with_paths(
        borders=args.borders,
        capdist=args.capdist,
        state_names=args.state_names,
    )
    setup_logging(cfg.paths.log_file, verbose=args.verbose)
    missing = cfg.paths.missing_inputs
    if missing:
        flags = ", ".join("--" + name.replace("_", "-") for name in missing)
        parser.error(f"missing input file paths: {flags} (or set them under 'paths' in --config)")
    return cfg


def _load_trip(cfg: AppConfig) -> RoadTrip:
    paths = cfg.paths
    if paths.borders is None or paths.capdist is None or paths.state_names is None:
        raise ValueError("Input file paths are not configured")
    trip = RoadTrip.from_files(
        paths.borders,
        paths.capdist,
        paths.state_names,
        missing_leg=cfg.query.missing_leg,
        unit=cfg.query.unit,
    )
    LOGGER.info(
        "Ready: %d named countries, %d with border records.",
        len(trip.registry),
        len(trip.graph),
    )
    return trip


def run_interactive(
    trip: RoadTrip,
    *,
    quit_token: str = "quit",
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Prompt for country pairs until the quit token or end of input.

    Returns the number of queries answered.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    def prompt(text: str) -> str | None:
        stdout.write(text.format(quit=quit_token))
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        value = line.rstrip("\r\n")
        return None if value.strip() == quit_token else value

    answered = 0
    while True:
        first = prompt(FIRST_PROMPT)
        if first is None:
            break
        second = prompt(SECOND_PROMPT)
        if second is None:
            break
        result = trip.query(first, second)
        for line in format_result_lines(result):
            stdout.write(line + "\n")
        answered += 1
    LOGGER.debug("Interactive session ended after %d queries.", answered)
    return answered


def _run_interactive(cfg: AppConfig) -> int:
    trip = _load_trip(cfg)
    run_interactive(trip, quit_token=cfg.query.quit_token)
    return 0


def _run_query(cfg: AppConfig, *, country_a: str, country_b: str, json_path: Path | None) -> int:
    trip = _load_trip(cfg)
    result = trip.query(country_a, country_b)
    for line in format_result_lines(result):
        print(line)
    if json_path is not None:
        write_json(json_path, result.to_dict())
        LOGGER.info("Query result written to %s", json_path)
    return 0 if result.found_anything else 1


def _run_validate(cfg: AppConfig) -> int:
    report = Validator(cfg).run()
    for line in format_report_lines(report):
        LOGGER.info(line)
    return 0 if report.ok else 1


def _dispatch(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        cfg = _load_and_setup(args, parser)
        command = str(args.command)
        if command == "interactive":
            return _run_interactive(cfg)
        if command == "query":
            return _run_query(
                cfg,
                country_a=str(args.country_a),
                country_b=str(args.country_b),
                json_path=args.json,
            )
        if command == "validate":
            return _run_validate(cfg)
    except (InputFileError, FileNotFoundError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 1
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _dispatch(args, parser)


if __name__ == "__main__":
    raise SystemExit(main())
