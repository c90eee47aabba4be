"""styleforge - Build MapLibre style expressions and layers in Python."""

from styleforge.expressions import (
    BindingsError,
    Expression,
    StyleForgeError,
    VarBindings,
    bind_var,
    case,
    get,
    has,
    let,
    literal,
    match,
    var,
    when,
    zoom,
)
from styleforge.layer import Layer, Property, Value
from styleforge.validation import ShapeError, validate_expression, validate_layer
from styleforge.cli import main


__version__ = "0.1.0"

__all__ = [
    "BindingsError",
    "Expression",
    "Layer",
    "Property",
    "ShapeError",
    "StyleForgeError",
    "Value",
    "VarBindings",
    "__version__",
    "bind_var",
    "case",
    "get",
    "has",
    "let",
    "literal",
    "main",
    "match",
    "validate_expression",
    "validate_layer",
    "var",
    "when",
    "zoom",
]
