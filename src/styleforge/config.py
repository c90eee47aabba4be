"""Configuration handling for the styleforge CLI."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import typer


DEFAULT_CONFIG_NAME = ".styleforge.json"

COMMAND_OPTION_NAMES = {
    "color_flag",
    "indent",
    "out_theme",
    "verbose",
}

INT_OPTIONS: dict[str, tuple[str, int | None]] = {
    "--indent": ("indent", 0),
}
STR_OPTIONS: dict[str, str] = {
    "--out-theme": "out_theme",
}
BOOL_OPTIONS: dict[str, str] = {
    "--verbose": "verbose",
}

DEST_TO_OPTION_NAME: dict[str, str] = {
    "color_flag": "--color/--no-color",
    "config": "--config",
    "indent": "--indent",
    "out_theme": "--out-theme",
    "verbose": "--verbose",
}

COMMAND_OPTIONS: dict[str, set[str]] = {
    "examples": {"color_flag", "indent", "out_theme"},
    "check": {"color_flag"},
}


CONFIG_DEFAULTS: dict[str, object] = {}


logger = logging.getLogger("styleforge")


@dataclass
class LoadedCliConfig:
    """Fully parsed CLI config payload."""

    path: str
    defaults: dict[str, object]


def load_config(filepath: str) -> tuple[dict[str, object], bool]:
    """Load config from JSON file.

    Args:
        filepath: Path to config file

    Returns:
        Tuple of (config dict, malformed flag)
    """
    try:
        with open(filepath, encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        return ({}, False)
    except PermissionError:
        return ({}, True)
    except OSError:
        return ({}, True)
    except json.JSONDecodeError:
        return ({}, True)

    if not isinstance(config, dict):
        return ({}, True)

    return (config, False)


def parse_color_defaults(config: dict[str, object]) -> tuple[dict[str, object], bool]:
    """Parse --color/--no-color config entries.

    Returns:
        Tuple of (defaults dict, valid flag)
    """
    defaults: dict[str, object] = {}
    color_value = config.get("--color")
    no_color_value = config.get("--no-color")

    if color_value is not None and not isinstance(color_value, bool):
        return ({}, False)
    if no_color_value is not None and not isinstance(no_color_value, bool):
        return ({}, False)
    if color_value is True and no_color_value is True:
        return ({}, False)

    if color_value is True:
        defaults["color_flag"] = True
    elif no_color_value is True:
        defaults["color_flag"] = False
    return (defaults, True)


def validate_int_option(value: object, min_value: int | None) -> int | None:
    """Return value when it is an int within bounds, else None."""
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    if min_value is not None and value < min_value:
        return None
    return value


def apply_config_entry(key: str, value: object, defaults: dict[str, object]) -> bool:
    """Apply one config entry to defaults.

    Returns:
        True if the entry was recognized and valid
    """
    if key in INT_OPTIONS:
        dest, min_value = INT_OPTIONS[key]
        int_value = validate_int_option(value, min_value)
        if int_value is None:
            return False
        defaults[dest] = int_value
        return True
    if key in STR_OPTIONS:
        if not isinstance(value, str) or not value.strip():
            return False
        defaults[STR_OPTIONS[key]] = value
        return True
    if key in BOOL_OPTIONS:
        if not isinstance(value, bool):
            return False
        defaults[BOOL_OPTIONS[key]] = value
        return True
    return False


def build_config_defaults(config: dict[str, object]) -> dict[str, object]:
    """Build command defaults from config entries, skipping invalid ones."""
    defaults, color_valid = parse_color_defaults(config)
    if not color_valid:
        logger.warning("Ignoring conflicting or invalid --color/--no-color config")

    for key, value in config.items():
        if key in ("--color", "--no-color"):
            continue
        if not apply_config_entry(key, value, defaults):
            logger.warning("Ignoring invalid config entry %s", key)

    return {key: value for key, value in defaults.items() if key in COMMAND_OPTION_NAMES}


def parse_config_argument(argv: list[str]) -> str:
    """Parse only the --config argument from argv."""
    for idx, arg in enumerate(argv[1:], start=1):
        if arg == "--config" and idx + 1 < len(argv):
            return argv[idx + 1]
        if arg.startswith("--config="):
            return arg.split("=", 1)[1]
    return DEFAULT_CONFIG_NAME


def load_cli_config(argv: list[str]) -> LoadedCliConfig:
    """Load config defaults from the configured file path.

    Raises:
        typer.BadParameter: If the config file exists but cannot be used
    """
    config_name = parse_config_argument(argv)
    config_path = Path(config_name)
    if not config_path.is_absolute():
        config_path = Path.cwd() / config_name
    config, load_error = load_config(str(config_path))

    if load_error:
        raise typer.BadParameter("Malformed config")

    return LoadedCliConfig(path=str(config_path), defaults=build_config_defaults(config))


def build_default_map(defaults: dict[str, object]) -> dict[str, object]:
    """Build Click default_map for Typer commands."""
    default_map: dict[str, object] = {}
    for command_name, option_names in COMMAND_OPTIONS.items():
        command_defaults = {
            key: value for key, value in defaults.items() if key in option_names
        }
        if command_defaults:
            default_map[command_name] = command_defaults
    return default_map


def log_applied_config_defaults(command_name: str) -> None:
    """Log config defaults that apply to a command."""
    option_names = COMMAND_OPTIONS.get(command_name, set())
    for key, value in CONFIG_DEFAULTS.items():
        if key not in option_names:
            continue
        option_name = DEST_TO_OPTION_NAME.get(key, key)
        logger.info("Config default for %s: %s = %s", command_name, option_name, value)
