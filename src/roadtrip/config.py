"""Typed configuration loader for `roadtrip.yaml`."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from .pathfinder import MISSING_LEG_POLICIES, MISSING_LEG_SKIP


def _mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"Expected mapping for '{field_name}'")
    return cast(Mapping[str, Any], value)


def _str(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Expected non-empty string for '{field_name}'")
    return value.strip()


def _path_from_cfg(value: Any, field_name: str, root_dir: Path) -> Path:
    raw = _str(value, field_name)
    p = Path(raw)
    return p if p.is_absolute() else root_dir / p


def _optional_path(value: Any, field_name: str, root_dir: Path) -> Path | None:
    if value is None:
        return None
    return _path_from_cfg(value, field_name, root_dir)


@dataclass(frozen=True, slots=True)
class PathsConfig:
    borders: Path | None = None
    capdist: Path | None = None
    state_names: Path | None = None
    log_file: Path | None = None

    @property
    def input_files(self) -> dict[str, Path | None]:
        return {
            "borders": self.borders,
            "capdist": self.capdist,
            "state_names": self.state_names,
        }

    @property
    def missing_inputs(self) -> tuple[str, ...]:
        return tuple(name for name, path in self.input_files.items() if path is None)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], root_dir: Path) -> PathsConfig:
        return cls(
            borders=_optional_path(raw.get("borders"), "paths.borders", root_dir),
            capdist=_optional_path(raw.get("capdist"), "paths.capdist", root_dir),
            state_names=_optional_path(raw.get("state_names"), "paths.state_names", root_dir),
            log_file=_optional_path(raw.get("log_file"), "paths.log_file", root_dir),
        )


@dataclass(frozen=True, slots=True)
class QueryConfig:
    missing_leg: str = MISSING_LEG_SKIP
    quit_token: str = "quit"
    unit: str = "km"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> QueryConfig:
        missing_leg = _str(raw.get("missing_leg", MISSING_LEG_SKIP), "query.missing_leg").casefold()
        if missing_leg not in MISSING_LEG_POLICIES:
            raise ValueError(
                "query.missing_leg must be one of: "
                + ", ".join(sorted(MISSING_LEG_POLICIES))
            )
        return cls(
            missing_leg=missing_leg,
            quit_token=_str(raw.get("quit_token", "quit"), "query.quit_token"),
            unit=_str(raw.get("unit", "km"), "query.unit"),
        )


@dataclass(frozen=True, slots=True)
class AppConfig:
    source_path: Path | None
    paths: PathsConfig
    query: QueryConfig

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], source_path: Path) -> AppConfig:
        root_dir = source_path.parent.resolve()
        paths_raw = raw.get("paths")
        query_raw = raw.get("query")
        return cls(
            source_path=source_path.resolve(),
            paths=(
                PathsConfig()
                if paths_raw is None
                else PathsConfig.from_mapping(_mapping(paths_raw, "paths"), root_dir)
            ),
            query=(
                QueryConfig()
                if query_raw is None
                else QueryConfig.from_mapping(_mapping(query_raw, "query"))
            ),
        )

    @classmethod
    def default(cls) -> AppConfig:
        return cls(source_path=None, paths=PathsConfig(), query=QueryConfig())

    def with_paths(
        self,
        *,
        borders: Path | None = None,
        capdist: Path | None = None,
        state_names: Path | None = None,
    ) -> AppConfig:
        """Return a copy with any given input paths replacing the configured ones."""
        paths = replace(
            self.paths,
            borders=borders or self.paths.borders,
            capdist=capdist or self.paths.capdist,
            state_names=state_names or self.paths.state_names,
        )
        return replace(self, paths=paths)


def load_config(path: str | Path) -> AppConfig:
    """Load and validate the YAML config file into typed settings."""
    cfg_path = Path(path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("Top-level config must be a YAML mapping")
    return AppConfig.from_mapping(cast(Mapping[str, Any], raw), cfg_path)
