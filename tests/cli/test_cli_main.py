"""Tests for styleforge.cli main entrypoint wiring."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
import typer

from styleforge import cli, config


def test_cli_main_builds_default_map(monkeypatch: pytest.MonkeyPatch) -> None:
    """main should load config defaults and pass default_map to Typer command."""
    recorded: dict[str, object] = {}

    class DummyCommand:
        def main(
            self, args: list[str], prog_name: str, standalone_mode: bool, default_map: object
        ) -> None:
            recorded["args"] = args
            recorded["prog_name"] = prog_name
            recorded["standalone_mode"] = standalone_mode
            recorded["default_map"] = default_map

    def fake_get_command(_app: object) -> DummyCommand:
        return DummyCommand()

    monkeypatch.setattr(
        config,
        "load_cli_config",
        lambda _argv: config.LoadedCliConfig(path="cfg.json", defaults={"indent": 4}),
    )
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {})
    monkeypatch.setattr(typer.main, "get_command", fake_get_command)
    monkeypatch.setattr(sys, "argv", ["styleforge", "examples", "--no-color", "math"])

    cli.main()

    assert recorded["args"] == ["examples", "--no-color", "math"]
    assert recorded["prog_name"] == "styleforge"
    assert recorded["standalone_mode"] is True
    assert recorded["default_map"] == {"examples": {"indent": 4}}


def test_cli_main_moves_verbose_out_of_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """main should keep verbose out of CONFIG_DEFAULTS and enable the global default."""
    monkeypatch.setattr(
        config,
        "load_cli_config",
        lambda _argv: config.LoadedCliConfig(
            path="cfg.json", defaults={"verbose": True, "color_flag": False}
        ),
    )
    monkeypatch.setattr(typer.main, "get_command", lambda _app: SimpleNamespace(main=lambda **_: None))
    monkeypatch.setattr(sys, "argv", ["styleforge", "check", "a.json"])
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {})
    monkeypatch.setitem(cli.DEFAULT_VERBOSE, "value", False)

    cli.main()

    assert cli.DEFAULT_VERBOSE["value"] is True
    assert config.CONFIG_DEFAULTS == {"color_flag": False}


def test_cli_main_malformed_config_exits(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A malformed config file should exit with a usage error code."""
    config_path = tmp_path / "broken.json"
    config_path.write_text("{", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["styleforge", "--config", str(config_path), "examples"])

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 2
    assert "Malformed config" in capsys.readouterr().err


def test_cli_main_applies_config_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Config defaults from the file should reach the command."""
    config_path = tmp_path / ".styleforge.json"
    config_path.write_text('{"--indent": 0, "--no-color": true}', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {})
    monkeypatch.setitem(cli.DEFAULT_VERBOSE, "value", False)
    monkeypatch.setattr(sys, "argv", ["styleforge", "examples", "--name", "zoom"])

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == '["zoom"]\n'
