"""Module-level expression constructors.

Leaf expressions (``get``, ``zoom``, ...) and the chain entry points live
here, together with the static form of every ``Expression`` operation, where
all operands are passed explicitly.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import singledispatch

from styleforge.expressions.chains import (
    ConditionalBuilder,
    ConditionalThenBuilder,
    LetBuilder,
    LetCallback,
    MatchBuilder,
    MatchFallbackBuilder,
    VarBindings,
)
from styleforge.expressions.errors import BindingsError
from styleforge.expressions.expression import (
    Expression,
    forge_geometry,
    forge_value,
    operation,
    option_record,
)


_UNSET = object()

FORMAT_SECTION_KEYS = ("font-scale", "text-font", "text-color", "vertical-align")


# Leaves


def literal(value: object) -> Expression:
    return Expression(["literal", value])


def get(name: str) -> Expression:
    return Expression(["get", name])


def has(name: str) -> Expression:
    return Expression(["has", name])


def zoom() -> Expression:
    return Expression(["zoom"])


def global_state(key: str) -> Expression:
    return Expression(["global-state", key])


def elevation() -> Expression:
    return Expression(["elevation"])


def e() -> Expression:
    return Expression(["e"])


def pi() -> Expression:
    return Expression(["pi"])


def ln2() -> Expression:
    return Expression(["ln2"])


# Interpolation types


def linear() -> list[object]:
    return ["linear"]


def exponential(base: object) -> list[object]:
    return ["exponential", forge_value(base)]


def cubic_bezier(x1: object, y1: object, x2: object, y2: object) -> list[object]:
    return ["cubic-bezier", *(forge_value(value) for value in (x1, y1, x2, y2))]


# Chain entry points


def when(condition: object) -> ConditionalThenBuilder:
    """Start a ``case`` expression: ``when(c).then(a).else_(b)``."""
    return ConditionalBuilder().when(condition)


conditional = when


def case(*arguments: object) -> Expression:
    """Build a ``case`` expression from alternating conditions and results."""
    return operation("case", *arguments)


def match(
    subject: object,
    branches: Mapping[object, object] | None = None,
    fallback: object = _UNSET,
) -> MatchBuilder | MatchFallbackBuilder | Expression:
    """Start a ``match`` expression on ``subject``.

    With ``branches`` the fallback step is returned; with both ``branches``
    and ``fallback`` the finished expression is returned.
    """
    builder = MatchBuilder(subject)
    if branches is None:
        return builder
    with_branches = builder.branches(branches)
    if fallback is _UNSET:
        return with_branches
    return with_branches.fallback(fallback)


def let(bindings: Mapping[str, object], callback: LetCallback | None = None) -> LetBuilder | Expression:
    """Start a ``let`` expression.

    Without ``callback`` a builder is returned and the body is given through
    ``.in_(body)``. With ``callback`` the expression is forged immediately:
    the callback receives the initial bindings and returns ``var({...})``
    with further bindings, and the body references the last binding.
    """
    builder = LetBuilder(bindings)
    if callback is None:
        return builder
    return builder.forge_with(callback)


@singledispatch
def var(argument: object) -> Expression | VarBindings:
    """Reference a variable by name, or wrap a mapping of new bindings."""
    raise BindingsError(
        f"var() expects a variable name or a mapping of bindings, got {type(argument).__name__}"
    )


@var.register
def _var_reference(argument: str) -> Expression:
    return Expression(["var", argument])


@var.register(Mapping)
def _var_bindings(argument: Mapping[str, object]) -> VarBindings:
    return bind_var(argument)


def bind_var(bindings: Mapping[str, object]) -> VarBindings:
    """Wrap additional bindings for a functional ``let`` callback."""
    return VarBindings(dict(bindings))


# Arithmetic


def add(*values: object) -> Expression:
    return operation("+", *values)


def subtract(a: object, b: object) -> Expression:
    return operation("-", a, b)


def multiply(*values: object) -> Expression:
    return operation("*", *values)


def divide(a: object, b: object) -> Expression:
    return operation("/", a, b)


def mod(a: object, b: object) -> Expression:
    return operation("%", a, b)


def pow(base: object, exponent: object) -> Expression:  # noqa: A001
    return operation("^", base, exponent)


def sqrt(value: object) -> Expression:
    return operation("sqrt", value)


def log10(value: object) -> Expression:
    return operation("log10", value)


# Comparison


def eq(a: object, b: object) -> Expression:
    return operation("==", a, b)


def neq(a: object, b: object) -> Expression:
    return operation("!=", a, b)


def gt(a: object, b: object) -> Expression:
    return operation(">", a, b)


def gte(a: object, b: object) -> Expression:
    return operation(">=", a, b)


def lt(a: object, b: object) -> Expression:
    return operation("<", a, b)


def lte(a: object, b: object) -> Expression:
    return operation("<=", a, b)


# Logic


def and_(*conditions: object) -> Expression:
    return operation("all", *conditions)


def or_(*conditions: object) -> Expression:
    return operation("any", *conditions)


def not_(condition: object) -> Expression:
    return operation("!", condition)


# Types


def to_number(value: object) -> Expression:
    return operation("to-number", value)


def to_string(value: object) -> Expression:
    return operation("to-string", value)


def to_boolean(value: object) -> Expression:
    return operation("to-boolean", value)


def to_color(value: object) -> Expression:
    return operation("to-color", value)


def string(value: object) -> Expression:
    return operation("string", value)


def number(value: object) -> Expression:
    return operation("number", value)


def boolean(value: object) -> Expression:
    return operation("boolean", value)


def array(value: object, item_type: str | None = None, length: int | None = None) -> Expression:
    if not item_type:
        return operation("array", value)
    if length is None:
        return operation("array", item_type, value)
    return operation("array", item_type, length, value)


def object_(value: object) -> Expression:
    return operation("object", value)


def typeof(value: object) -> Expression:
    return operation("typeof", value)


def coalesce(*values: object) -> Expression:
    return operation("coalesce", *values)


def collator(
    case_sensitive: object | None = None,
    diacritic_sensitive: object | None = None,
    locale: object | None = None,
) -> Expression:
    """Build a collator; the option record is emitted when any option is set."""
    options = option_record(
        {
            "case-sensitive": case_sensitive,
            "diacritic-sensitive": diacritic_sensitive,
            "locale": locale,
        }
    )
    if not options:
        return operation("collator")
    return operation("collator", options)


def _format_section(section: object) -> object:
    if isinstance(section, Mapping):
        return option_record({key: section.get(key) for key in FORMAT_SECTION_KEYS})
    return forge_value(section)


def format(*sections: object) -> Expression:  # noqa: A001
    """Build formatted text from strings, expressions and style records.

    Style records keep only ``font-scale``, ``text-font``, ``text-color``
    and ``vertical-align`` and style the section before them.
    """
    return Expression(["format", *(_format_section(section) for section in sections)])


# Strings


def concat(*values: object) -> Expression:
    return operation("concat", *values)


def upcase(value: object) -> Expression:
    return operation("upcase", value)


def downcase(value: object) -> Expression:
    return operation("downcase", value)


def image(name: object) -> Expression:
    return operation("image", name)


def number_format(
    value: object,
    locale: object | None = None,
    currency: object | None = None,
    min_fraction_digits: object | None = None,
    max_fraction_digits: object | None = None,
) -> Expression:
    options = option_record(
        {
            "locale": locale,
            "currency": currency,
            "min-fraction-digits": min_fraction_digits,
            "max-fraction-digits": max_fraction_digits,
        }
    )
    if not options:
        return operation("number-format", value)
    return operation("number-format", value, options)


def resolved_locale(collator_value: object) -> Expression:
    return operation("resolved-locale", collator_value)


def is_supported_script(value: object) -> Expression:
    return operation("is-supported-script", value)


# Lookup


def length(value: object) -> Expression:
    return operation("length", value)


def at(index: object, value: object) -> Expression:
    return operation("at", index, value)


def slice(value: object, start: object, end: object | None = None) -> Expression:  # noqa: A001
    if end is None:
        return operation("slice", value, start)
    return operation("slice", value, start, end)


def in_(needle: object, haystack: object) -> Expression:
    return operation("in", needle, haystack)


def index_of(item: object, value: object, from_index: object | None = None) -> Expression:
    if from_index is None:
        return operation("index-of", item, value)
    return operation("index-of", item, value, from_index)


# Ramps


def interpolate(interpolation: object, input_value: object, *stops: object) -> Expression:
    return operation("interpolate", interpolation, input_value, *stops)


def interpolate_hcl(interpolation: object, input_value: object, *stops: object) -> Expression:
    return operation("interpolate-hcl", interpolation, input_value, *stops)


def interpolate_lab(interpolation: object, input_value: object, *stops: object) -> Expression:
    return operation("interpolate-lab", interpolation, input_value, *stops)


def step(input_value: object, base: object, *stops: object) -> Expression:
    return operation("step", input_value, base, *stops)


# Spatial


def distance(geometry: object) -> Expression:
    """Distance from the evaluated feature to ``geometry``."""
    return Expression(["distance", forge_geometry(geometry)])


def within(geometry: object) -> Expression:
    """Whether the evaluated feature lies within ``geometry``."""
    return Expression(["within", forge_geometry(geometry)])
