"""Check command for structural validation of style JSON files."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass

import typer
from colorama import init as colorama_init

from styleforge import config as config_module
from styleforge.color import ok_label, path_label, problem_text, should_use_color
from styleforge.output_format import build_console, prepare_lines, print_prepared_output
from styleforge.validation import ShapeError, find_layer_problems, validate_expression


logger = logging.getLogger("styleforge")


@dataclass
class CheckArgs:
    """Arguments for the check command."""

    files: list[str]
    config: str
    color_flag: bool | None


@dataclass(frozen=True)
class CheckResult:
    """Structural problems found in one file."""

    path: str
    problems: tuple[str, ...]


def load_json_file(filepath: str) -> object:
    """Load a JSON document.

    Raises:
        typer.BadParameter: If file cannot be read or JSON is invalid
    """
    try:
        with open(filepath, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as err:
        raise typer.BadParameter(f"File '{filepath}' not found") from err
    except PermissionError as err:
        raise typer.BadParameter(f"Permission denied for '{filepath}'") from err
    except json.JSONDecodeError as err:
        raise typer.BadParameter(f"Invalid JSON in '{filepath}': {err}") from err
    except OSError as err:
        raise typer.BadParameter(f"Cannot read '{filepath}': {err}") from err


def _layer_list_problems(layers: list[object], prefix: str) -> list[str]:
    problems: list[str] = []
    for idx, layer in enumerate(layers):
        problems.extend(f"{prefix}[{idx}]: {problem}" for problem in find_layer_problems(layer))
    return problems


def find_document_problems(document: object) -> list[str]:
    """Return structural problems of an expression, layer, layer list or style."""
    if isinstance(document, list):
        if document and isinstance(document[0], str):
            try:
                validate_expression(document)
            except ShapeError as exc:
                return [str(exc)]
            return []
        return _layer_list_problems(document, "layers")

    if isinstance(document, Mapping):
        if "layers" not in document:
            return find_layer_problems(document)
        layers = document["layers"]
        if not isinstance(layers, list):
            return ["Style 'layers' must be an array"]
        return _layer_list_problems(layers, "layers")

    return ["Document must be an expression, a layer, a list of layers or a style object"]


def check_files(files: list[str]) -> list[CheckResult]:
    """Check every file and collect its problems."""
    results: list[CheckResult] = []
    for filepath in files:
        logger.info("Checking %s", filepath)
        document = load_json_file(filepath)
        results.append(CheckResult(path=filepath, problems=tuple(find_document_problems(document))))
    return results


def format_check_results(results: list[CheckResult], color_enabled: bool) -> list[str]:
    """Format one line per problem, or one OK line per clean file."""
    lines: list[str] = []
    for result in results:
        if not result.problems:
            lines.append(f"{path_label(result.path, color_enabled)}: {ok_label(color_enabled)}")
            continue
        lines.extend(
            f"{path_label(result.path, color_enabled)}: {problem_text(problem, color_enabled)}"
            for problem in result.problems
        )
    return lines


def run_check(args: CheckArgs) -> int:
    """Run the check command and return the number of problems found."""
    color_enabled = should_use_color(args.color_flag)

    if color_enabled:
        colorama_init(autoreset=True, strip=False)

    console = build_console(color_enabled)

    results = check_files(args.files)
    lines = format_check_results(results, color_enabled)
    print_prepared_output(console, prepare_lines(lines, color_enabled))
    return sum(len(result.problems) for result in results)


def register(app: typer.Typer) -> None:
    """Register the check command."""

    @app.command("check")
    def check_command(
        files: list[str] = typer.Argument(  # noqa: B008
            ..., metavar="FILE", help="JSON files holding an expression, layer(s) or a style"
        ),
        config: str = typer.Option(
            config_module.DEFAULT_CONFIG_NAME,
            "--config",
            metavar="FILE",
            help="Config file name to load from current directory",
        ),
        color_flag: bool | None = typer.Option(
            None,
            "--color/--no-color",
            help="Force colored output",
        ),
    ) -> None:
        """Check the structural shape of style JSON files."""
        args = CheckArgs(files=files, config=config, color_flag=color_flag)
        config_module.log_applied_config_defaults("check")
        problem_count = run_check(args)
        if problem_count:
            raise typer.Exit(code=1)
