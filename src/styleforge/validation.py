"""Structural shape checks for forged expressions and layers.

Only the outer shape is checked: a known operation tag in first position,
and the presence and types of the top-level layer keys. Operand types and
arity are left to the renderer.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real

from styleforge.expressions.errors import StyleForgeError


KNOWN_OPERATORS = frozenset(
    {
        "get",
        "has",
        "zoom",
        "literal",
        "global-state",
        "elevation",
        "var",
        "let",
        "match",
        "case",
        "interpolate",
        "interpolate-hcl",
        "interpolate-lab",
        "step",
        "coalesce",
        "+",
        "-",
        "*",
        "/",
        "%",
        "^",
        "e",
        "pi",
        "ln2",
        "==",
        "!=",
        ">",
        ">=",
        "<",
        "<=",
        "all",
        "any",
        "!",
        "to-number",
        "to-string",
        "to-boolean",
        "to-color",
        "string",
        "number",
        "boolean",
        "array",
        "object",
        "typeof",
        "collator",
        "format",
        "concat",
        "downcase",
        "upcase",
        "sqrt",
        "log10",
        "image",
        "number-format",
        "resolved-locale",
        "is-supported-script",
        "length",
        "at",
        "slice",
        "in",
        "index-of",
        "distance",
        "within",
    }
)

REQUIRED_LAYER_KEYS = ("id", "type", "source")


class ShapeError(StyleForgeError):
    """Raised when forged output does not have the expected structure."""


def is_expression(value: object) -> bool:
    """Return whether value is a non-empty list led by a known operation tag."""
    if not isinstance(value, list) or not value:
        return False
    operator = value[0]
    return isinstance(operator, str) and operator in KNOWN_OPERATORS


def validate_expression(value: object) -> None:
    """Raise ShapeError unless value looks like a forged expression."""
    if not isinstance(value, list) or not value:
        raise ShapeError("Expression must be a non-empty array")
    if not isinstance(value[0], str):
        raise ShapeError("Expression must start with an operation name")
    if value[0] not in KNOWN_OPERATORS:
        raise ShapeError(f"Unknown expression operator '{value[0]}'")


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def find_layer_problems(record: object) -> list[str]:
    """Return a description of every structural problem in a layer record."""
    if not isinstance(record, Mapping):
        return ["Layer must be an object"]

    problems: list[str] = []
    for key in REQUIRED_LAYER_KEYS:
        if key not in record:
            problems.append(f"Layer is missing '{key}'")
        elif not isinstance(record[key], str):
            problems.append(f"Layer '{key}' must be a string")

    if "source-layer" in record and not isinstance(record["source-layer"], str):
        problems.append("Layer 'source-layer' must be a string")

    for section in ("paint", "layout"):
        if section in record and not isinstance(record[section], Mapping):
            problems.append(f"Layer '{section}' must be an object")

    for key in ("minzoom", "maxzoom"):
        if key in record and not _is_number(record[key]):
            problems.append(f"Layer '{key}' must be a number")

    if "filter" in record:
        try:
            validate_expression(record["filter"])
        except ShapeError as exc:
            problems.append(f"Layer 'filter' is invalid: {exc}")

    return problems


def validate_layer(record: object) -> None:
    """Raise ShapeError with the first structural problem of a layer record."""
    problems = find_layer_problems(record)
    if problems:
        raise ShapeError(problems[0])
