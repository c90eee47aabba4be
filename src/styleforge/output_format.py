"""Output preparation and rendering for CLI commands."""

from __future__ import annotations

import json
from dataclasses import dataclass

from rich.console import Console
from rich.syntax import Syntax


DEFAULT_OUTPUT_THEME = "github-dark"
DEFAULT_INDENT = 2


@dataclass(frozen=True)
class OutputOperation:
    """One prepared output operation."""

    kind: str
    text: str | None = None
    renderable: object | None = None
    markup: bool = False


@dataclass(frozen=True)
class PreparedOutput:
    """Prepared output operations ready for console rendering."""

    operations: tuple[OutputOperation, ...]


class OutputFormatError(RuntimeError):
    """Raised when output formatting fails."""


def build_console(color_enabled: bool) -> Console:
    """Build a console that only emits styling when color is enabled."""
    return Console(
        no_color=not color_enabled,
        force_terminal=color_enabled,
        highlight=False,
        soft_wrap=True,
    )


def _normalize_syntax_theme(out_theme: str) -> str:
    """Return a valid theme name for syntax rendering."""
    normalized_theme = out_theme.strip()
    if normalized_theme:
        return normalized_theme
    return DEFAULT_OUTPUT_THEME


def dump_json(payload: object, indent: int) -> str:
    """Serialize forged output as JSON text.

    Raises:
        OutputFormatError: If payload holds values JSON cannot represent
    """
    try:
        return json.dumps(payload, indent=indent if indent > 0 else None, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise OutputFormatError(f"Cannot serialize output as JSON: {exc}") from exc


def prepare_json_output(
    payload: object,
    indent: int,
    color_enabled: bool,
    out_theme: str,
) -> PreparedOutput:
    """Prepare JSON output, syntax highlighted when color is enabled."""
    text = dump_json(payload, indent)
    if color_enabled:
        return PreparedOutput(
            operations=(
                OutputOperation(
                    kind="console_print",
                    renderable=Syntax(
                        text,
                        "json",
                        theme=_normalize_syntax_theme(out_theme),
                        line_numbers=False,
                        word_wrap=True,
                    ),
                ),
            )
        )
    return PreparedOutput(operations=(OutputOperation(kind="plain_write", text=text),))


def prepare_lines(lines: list[str], markup: bool) -> PreparedOutput:
    """Prepare plain console lines."""
    return PreparedOutput(
        operations=tuple(
            OutputOperation(kind="console_print", text=line, markup=markup) for line in lines
        )
    )


def _write_plain_output(console: Console, text: str) -> None:
    """Write plain output directly to console stream."""
    console.file.write(f"{text}\n")
    console.file.flush()


def print_prepared_output(console: Console, prepared_output: PreparedOutput) -> None:
    """Print already prepared output operations."""
    for operation in prepared_output.operations:
        if operation.kind == "plain_write":
            if operation.text is not None:
                _write_plain_output(console, operation.text)
            continue
        if operation.renderable is not None:
            console.print(operation.renderable)
            continue
        console.print(operation.text if operation.text is not None else "", markup=operation.markup)
