"""Color support for CLI output using Rich markup."""

import sys

from rich.markup import escape


OK_STYLE = "bold green"
PROBLEM_STYLE = "bold red"
PATH_STYLE = "dim white"


def should_use_color(color_flag: bool | None) -> bool:
    """Determine if color should be used based on flag and TTY detection.

    Args:
        color_flag: Explicit color preference (True/False) or None for auto-detect

    Returns:
        True if colors should be used, False otherwise
    """
    if color_flag is None:
        return sys.stdout.isatty()
    return color_flag


def colorize(text: str, style: str, enabled: bool) -> str:
    """Wrap text in Rich markup for style when enabled.

    Text is escaped first so that brackets in file names or problem
    messages are printed literally.
    """
    if not enabled:
        return text
    return f"[{style}]{escape(text)}[/]"


def ok_label(enabled: bool) -> str:
    return colorize("OK", OK_STYLE, enabled)


def problem_text(text: str, enabled: bool) -> str:
    return colorize(text, PROBLEM_STYLE, enabled)


def path_label(path: str, enabled: bool) -> str:
    return colorize(path, PATH_STYLE, enabled)
