"""Public API for building MapLibre style expressions."""

from styleforge.expressions.chains import (
    ConditionalBuilder,
    ConditionalThenBuilder,
    LetBuilder,
    MatchBuilder,
    MatchFallbackBuilder,
    VarBindings,
    normalize_match_key,
)
from styleforge.expressions.errors import BindingsError, StyleForgeError
from styleforge.expressions.expression import Expression, forge_value
from styleforge.expressions.functions import (
    add,
    and_,
    array,
    at,
    bind_var,
    boolean,
    case,
    coalesce,
    collator,
    concat,
    conditional,
    cubic_bezier,
    distance,
    divide,
    downcase,
    e,
    elevation,
    eq,
    exponential,
    format,
    get,
    global_state,
    gt,
    gte,
    has,
    image,
    in_,
    index_of,
    interpolate,
    interpolate_hcl,
    interpolate_lab,
    is_supported_script,
    length,
    let,
    linear,
    literal,
    ln2,
    log10,
    lt,
    lte,
    match,
    mod,
    multiply,
    neq,
    not_,
    number,
    number_format,
    object_,
    or_,
    pi,
    pow,
    resolved_locale,
    slice,
    sqrt,
    step,
    string,
    subtract,
    to_boolean,
    to_color,
    to_number,
    to_string,
    typeof,
    upcase,
    var,
    when,
    within,
    zoom,
)


__all__ = [
    "BindingsError",
    "ConditionalBuilder",
    "ConditionalThenBuilder",
    "Expression",
    "LetBuilder",
    "MatchBuilder",
    "MatchFallbackBuilder",
    "StyleForgeError",
    "VarBindings",
    "add",
    "and_",
    "array",
    "at",
    "bind_var",
    "boolean",
    "case",
    "coalesce",
    "collator",
    "concat",
    "conditional",
    "cubic_bezier",
    "distance",
    "divide",
    "downcase",
    "e",
    "elevation",
    "eq",
    "exponential",
    "forge_value",
    "format",
    "get",
    "global_state",
    "gt",
    "gte",
    "has",
    "image",
    "in_",
    "index_of",
    "interpolate",
    "interpolate_hcl",
    "interpolate_lab",
    "is_supported_script",
    "length",
    "let",
    "linear",
    "literal",
    "ln2",
    "log10",
    "lt",
    "lte",
    "match",
    "mod",
    "multiply",
    "neq",
    "normalize_match_key",
    "not_",
    "number",
    "number_format",
    "object_",
    "or_",
    "pi",
    "pow",
    "resolved_locale",
    "slice",
    "sqrt",
    "step",
    "string",
    "subtract",
    "to_boolean",
    "to_color",
    "to_number",
    "to_string",
    "typeof",
    "upcase",
    "var",
    "when",
    "within",
    "zoom",
]
