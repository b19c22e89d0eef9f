"""Tests for the YAML config loader."""

from pathlib import Path

import pytest

from roadtrip.config import AppConfig, QueryConfig, load_config


class TestLoadConfig:
    def test_relative_paths_resolve_against_config_dir(self, tmp_path):
        cfg_path = tmp_path / "roadtrip.yaml"
        cfg_path.write_text(
            "paths:\n"
            "  borders: data/borders.txt\n"
            "  capdist: /abs/capdist.csv\n"
            "  state_names: data/state_name.tsv\n"
            "query:\n"
            "  missing_leg: ZERO\n"
            "  quit_token: exit\n",
            encoding="utf-8",
        )
        cfg = load_config(cfg_path)
        assert cfg.paths.borders == tmp_path.resolve() / "data" / "borders.txt"
        assert cfg.paths.capdist == Path("/abs/capdist.csv")
        assert cfg.paths.log_file is None
        assert cfg.paths.missing_inputs == ()
        assert cfg.query.missing_leg == "zero"
        assert cfg.query.quit_token == "exit"
        assert cfg.query.unit == "km"

    def test_empty_file_uses_defaults(self, tmp_path):
        cfg_path = tmp_path / "roadtrip.yaml"
        cfg_path.write_text("", encoding="utf-8")
        cfg = load_config(cfg_path)
        assert cfg.query == QueryConfig()
        assert cfg.paths.missing_inputs == ("borders", "capdist", "state_names")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_top_level_must_be_mapping(self, tmp_path):
        cfg_path = tmp_path / "roadtrip.yaml"
        cfg_path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(cfg_path)

    def test_invalid_missing_leg(self, tmp_path):
        cfg_path = tmp_path / "roadtrip.yaml"
        cfg_path.write_text("query:\n  missing_leg: fail\n", encoding="utf-8")
        with pytest.raises(ValueError, match="query.missing_leg"):
            load_config(cfg_path)

    def test_invalid_path_value(self, tmp_path):
        cfg_path = tmp_path / "roadtrip.yaml"
        cfg_path.write_text("paths:\n  borders: 12\n", encoding="utf-8")
        with pytest.raises(ValueError, match="paths.borders"):
            load_config(cfg_path)


class TestWithPaths:
    def test_overrides_only_given_paths(self, tmp_path):
        cfg_path = tmp_path / "roadtrip.yaml"
        cfg_path.write_text("paths:\n  borders: b.txt\n  capdist: c.csv\n", encoding="utf-8")
        cfg = load_config(cfg_path).with_paths(capdist=Path("other.csv"), state_names=Path("s.tsv"))
        assert cfg.paths.borders == tmp_path.resolve() / "b.txt"
        assert cfg.paths.capdist == Path("other.csv")
        assert cfg.paths.state_names == Path("s.tsv")

    def test_default_has_no_inputs(self):
        cfg = AppConfig.default()
        assert cfg.source_path is None
        assert len(cfg.paths.missing_inputs) == 3
