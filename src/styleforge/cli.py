#!/usr/bin/env python
"""CLI interface for styleforge - MapLibre style expression builder."""

from __future__ import annotations

import sys

import typer

from styleforge import config, logging_config
from styleforge.commands import check, examples


app = typer.Typer(
    help="Forge MapLibre style expressions and check style JSON files.",
    no_args_is_help=True,
)


DEFAULT_VERBOSE: dict[str, bool] = {"value": False}


def _resolve_verbose(verbose: bool | None) -> bool:
    if verbose is None:
        return DEFAULT_VERBOSE["value"]
    return verbose


@app.callback()
def main_callback(
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging output",
    ),
) -> None:
    """Global CLI options."""
    logging_config.configure_logging(_resolve_verbose(verbose))


examples.register(app)
check.register(app)


def main() -> None:
    """Main CLI entry point."""
    try:
        loaded_config = config.load_cli_config(sys.argv)
    except typer.BadParameter as exc:
        exc.show()
        sys.exit(exc.exit_code)

    defaults = dict(loaded_config.defaults)
    DEFAULT_VERBOSE["value"] = bool(defaults.pop("verbose", False))
    config.CONFIG_DEFAULTS.clear()
    config.CONFIG_DEFAULTS.update(defaults)

    command = typer.main.get_command(app)
    default_map = config.build_default_map(defaults) if defaults else None
    command.main(
        args=sys.argv[1:],
        prog_name="styleforge",
        standalone_mode=True,
        default_map=default_map,
    )


if __name__ == "__main__":
    main()
