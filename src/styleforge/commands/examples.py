"""Examples command printing the forged example catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import typer
from colorama import init as colorama_init

from styleforge import config as config_module
from styleforge.color import should_use_color
from styleforge.examples import EXAMPLE_GROUPS, forge_examples
from styleforge.output_format import (
    DEFAULT_INDENT,
    DEFAULT_OUTPUT_THEME,
    OutputFormatError,
    build_console,
    prepare_json_output,
    print_prepared_output,
)


logger = logging.getLogger("styleforge")


@dataclass
class ExamplesArgs:
    """Arguments for the examples command."""

    group: str | None
    name: str | None
    config: str
    indent: int
    color_flag: bool | None
    out_theme: str


def select_examples(group: str | None, name: str | None) -> object:
    """Forge the requested part of the example catalog.

    Raises:
        typer.BadParameter: If the group or name is unknown
    """
    if group is not None and group not in EXAMPLE_GROUPS:
        available = ", ".join(EXAMPLE_GROUPS)
        raise typer.BadParameter(f"Unknown example group '{group}'. Available: {available}")

    forged = forge_examples(group)
    if name is None:
        return forged[group] if group is not None else forged

    for group_name, examples in forged.items():
        if name in examples:
            logger.info("Found example %s in group %s", name, group_name)
            return examples[name]
    raise typer.BadParameter(f"Unknown example '{name}'")


def run_examples(args: ExamplesArgs) -> None:
    """Run the examples command."""
    if args.indent < 0:
        raise typer.BadParameter("--indent must be non-negative")
    color_enabled = should_use_color(args.color_flag)

    if color_enabled:
        colorama_init(autoreset=True, strip=False)

    console = build_console(color_enabled)

    payload = select_examples(args.group, args.name)
    try:
        prepared_output = prepare_json_output(payload, args.indent, color_enabled, args.out_theme)
    except OutputFormatError as exc:
        raise typer.BadParameter(str(exc)) from exc

    print_prepared_output(console, prepared_output)


def register(app: typer.Typer) -> None:
    """Register the examples command."""

    @app.command("examples")
    def examples_command(  # noqa: PLR0913
        group: str | None = typer.Argument(
            None, metavar="GROUP", help="Example group to print (default: all groups)"
        ),
        name: str | None = typer.Option(
            None,
            "--name",
            metavar="NAME",
            help="Print a single example by name",
        ),
        config: str = typer.Option(
            config_module.DEFAULT_CONFIG_NAME,
            "--config",
            metavar="FILE",
            help="Config file name to load from current directory",
        ),
        indent: int = typer.Option(
            DEFAULT_INDENT,
            "--indent",
            metavar="N",
            help="JSON indentation width (0 for compact output)",
        ),
        color_flag: bool | None = typer.Option(
            None,
            "--color/--no-color",
            help="Force colored output",
        ),
        out_theme: str = typer.Option(
            DEFAULT_OUTPUT_THEME,
            "--out-theme",
            help="Syntax theme for highlighted output",
        ),
    ) -> None:
        """Print forged example expressions and layers as JSON."""
        args = ExamplesArgs(
            group=group,
            name=name,
            config=config,
            indent=indent,
            color_flag=color_flag,
            out_theme=out_theme,
        )
        config_module.log_applied_config_defaults("examples")
        run_examples(args)
