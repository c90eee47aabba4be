"""Tests for styleforge.config helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import typer

from styleforge import config


def test_load_config_missing_file_returns_empty(tmp_path: Path) -> None:
    """Missing config should return empty config without error."""
    missing = tmp_path / "missing.json"
    data, malformed = config.load_config(str(missing))

    assert data == {}
    assert malformed is False


def test_load_config_directory_path_is_malformed(tmp_path: Path) -> None:
    """Directory path should be treated as malformed config."""
    config_dir = tmp_path / "cfgdir"
    config_dir.mkdir()
    data, malformed = config.load_config(str(config_dir))

    assert data == {}
    assert malformed is True


def test_load_config_non_dict_is_malformed(tmp_path: Path) -> None:
    """Non-object JSON should be marked malformed."""
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    data, malformed = config.load_config(str(config_path))

    assert data == {}
    assert malformed is True


def test_load_config_invalid_json_is_malformed(tmp_path: Path) -> None:
    """Broken JSON should be marked malformed."""
    config_path = tmp_path / "config.json"
    config_path.write_text("{", encoding="utf-8")

    assert config.load_config(str(config_path)) == ({}, True)


def test_parse_color_defaults_conflict() -> None:
    """Conflicting color flags should be rejected."""
    defaults, valid = config.parse_color_defaults({"--color": True, "--no-color": True})

    assert defaults == {}
    assert valid is False


def test_parse_color_defaults_no_color() -> None:
    """--no-color should set color_flag to False."""
    assert config.parse_color_defaults({"--no-color": True}) == ({"color_flag": False}, True)


def test_validate_int_option_rejects_bool_and_negative() -> None:
    """Booleans and values below the minimum should be rejected."""
    assert config.validate_int_option(True, 0) is None
    assert config.validate_int_option(-1, 0) is None
    assert config.validate_int_option(4, 0) == 4


def test_build_config_defaults_maps_option_names() -> None:
    """Known entries should map to command parameter names."""
    defaults = config.build_config_defaults(
        {"--indent": 4, "--out-theme": "monokai", "--verbose": True, "--color": True}
    )

    assert defaults == {"color_flag": True, "indent": 4, "out_theme": "monokai", "verbose": True}


def test_build_config_defaults_skips_invalid_entries(caplog: pytest.LogCaptureFixture) -> None:
    """Invalid entries should be dropped with a warning."""
    with caplog.at_level(logging.WARNING, logger="styleforge"):
        defaults = config.build_config_defaults({"--indent": "wide", "--unknown": 1})

    assert defaults == {}
    assert "--indent" in caplog.text
    assert "--unknown" in caplog.text


def test_parse_config_argument_forms() -> None:
    """--config should be read in both separate and inline forms."""
    assert config.parse_config_argument(["styleforge", "--config", "a.json"]) == "a.json"
    assert config.parse_config_argument(["styleforge", "--config=b.json"]) == "b.json"
    assert config.parse_config_argument(["styleforge", "examples"]) == config.DEFAULT_CONFIG_NAME


def test_load_cli_config_reads_file(tmp_path: Path) -> None:
    """load_cli_config should load defaults from the given path."""
    config_path = tmp_path / "custom.json"
    config_path.write_text(json.dumps({"--indent": 0}), encoding="utf-8")

    loaded = config.load_cli_config(["styleforge", "--config", str(config_path)])

    assert loaded.path == str(config_path)
    assert loaded.defaults == {"indent": 0}


def test_load_cli_config_malformed_raises(tmp_path: Path) -> None:
    """A malformed config file should raise BadParameter."""
    config_path = tmp_path / "broken.json"
    config_path.write_text("not json", encoding="utf-8")

    with pytest.raises(typer.BadParameter, match="Malformed config"):
        config.load_cli_config(["styleforge", "--config", str(config_path)])


def test_build_default_map_splits_per_command() -> None:
    """Defaults should only be given to commands that accept them."""
    default_map = config.build_default_map({"indent": 4, "color_flag": False})

    assert default_map == {
        "examples": {"indent": 4, "color_flag": False},
        "check": {"color_flag": False},
    }


def test_log_applied_config_defaults(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Applied defaults should be logged with their option names."""
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {"indent": 4, "out_theme": "monokai"})

    with caplog.at_level(logging.INFO, logger="styleforge"):
        config.log_applied_config_defaults("check")
        config.log_applied_config_defaults("examples")

    assert "check" not in caplog.text
    assert "Config default for examples: --indent = 4" in caplog.text
