"""Expression value type for MapLibre style expressions.

An ``Expression`` wraps one forged expression array: a list whose first
element is the operation tag, followed by the operands in the order the
style grammar documents. Every operation builds a new list and wraps it, so
chaining never touches the receiver.

Operands are not checked against the grammar. Wrong arity or operand types
are forged exactly as given and surface only when the renderer evaluates the
result.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from functools import singledispatch
from typing import TYPE_CHECKING, TypeAlias


if TYPE_CHECKING:
    from styleforge.expressions.chains import MatchBuilder, MatchFallbackBuilder


Forged: TypeAlias = list[object]


def forge_value(value: object) -> object:
    """Return the forged form of an operand.

    Expressions are replaced by a copy of their forged list; everything
    else (primitives, raw forged lists, records) passes through unchanged.
    """
    if isinstance(value, Expression):
        return value.forge()
    return value


def operation(tag: str, *operands: object) -> Expression:
    """Build an expression from a tag and operands, forging each operand."""
    return Expression([tag, *(forge_value(operand) for operand in operands)])


def option_record(options: Mapping[str, object | None]) -> dict[str, object]:
    """Build an option record, dropping unset entries and forging the rest."""
    return {key: forge_value(value) for key, value in options.items() if value is not None}


@dataclass(frozen=True, slots=True)
class Expression:
    """One node of an expression tree.

    The forged list is copied on construction and ``forge()`` hands out a
    fresh copy, so a node never changes after construction, whatever the
    caller later does with its own operands. Expressions are not hashable.
    """

    forged: Forged

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "forged", copy.deepcopy(self.forged))

    def forge(self) -> Forged:
        """Return a copy of the forged expression array."""
        return copy.deepcopy(self.forged)

    def match(self, branches: Mapping[object, object] | None = None) -> MatchBuilder | MatchFallbackBuilder:
        """Start a match expression with this expression as the subject."""
        from styleforge.expressions.chains import MatchBuilder

        builder = MatchBuilder(self)
        if branches is None:
            return builder
        return builder.branches(branches)

    # Arithmetic

    def add(self, *values: object) -> Expression:
        return operation("+", self, *values)

    def subtract(self, value: object) -> Expression:
        return operation("-", self, value)

    def multiply(self, *values: object) -> Expression:
        return operation("*", self, *values)

    def divide(self, value: object) -> Expression:
        return operation("/", self, value)

    def mod(self, value: object) -> Expression:
        return operation("%", self, value)

    def pow(self, exponent: object) -> Expression:
        return operation("^", self, exponent)

    def sqrt(self) -> Expression:
        return operation("sqrt", self)

    def log10(self) -> Expression:
        return operation("log10", self)

    # Comparison

    def eq(self, value: object) -> Expression:
        return operation("==", self, value)

    def neq(self, value: object) -> Expression:
        return operation("!=", self, value)

    def gt(self, value: object) -> Expression:
        return operation(">", self, value)

    def gte(self, value: object) -> Expression:
        return operation(">=", self, value)

    def lt(self, value: object) -> Expression:
        return operation("<", self, value)

    def lte(self, value: object) -> Expression:
        return operation("<=", self, value)

    # Logic

    def and_(self, *conditions: object) -> Expression:
        """Combine this condition with others using ``all``."""
        return operation("all", self, *conditions)

    def or_(self, *conditions: object) -> Expression:
        """Combine this condition with others using ``any``."""
        return operation("any", self, *conditions)

    # Type conversion

    def to_number(self) -> Expression:
        return operation("to-number", self)

    def to_string(self) -> Expression:
        return operation("to-string", self)

    def to_boolean(self) -> Expression:
        return operation("to-boolean", self)

    def to_color(self) -> Expression:
        return operation("to-color", self)

    # Type assertions

    def string(self) -> Expression:
        return operation("string", self)

    def number(self) -> Expression:
        return operation("number", self)

    def boolean(self) -> Expression:
        return operation("boolean", self)

    def array(self, item_type: str | None = None, length: int | None = None) -> Expression:
        """Assert an array, optionally of ``item_type`` and fixed ``length``.

        ``length`` is only emitted together with ``item_type``.
        """
        if not item_type:
            return operation("array", self)
        if length is None:
            return operation("array", item_type, self)
        return operation("array", item_type, length, self)

    def object(self) -> Expression:
        return operation("object", self)

    def typeof(self) -> Expression:
        return operation("typeof", self)

    def coalesce(self, *values: object) -> Expression:
        return operation("coalesce", self, *values)

    # Strings

    def concat(self, *values: object) -> Expression:
        return operation("concat", self, *values)

    def upcase(self) -> Expression:
        return operation("upcase", self)

    def downcase(self) -> Expression:
        return operation("downcase", self)

    # Lookup

    def length(self) -> Expression:
        return operation("length", self)

    def at(self, index: object) -> Expression:
        """Item at ``index``; the receiver is the array operand, placed last."""
        return operation("at", index, self)

    def slice(self, start: object, end: object | None = None) -> Expression:
        if end is None:
            return operation("slice", self, start)
        return operation("slice", self, start, end)

    def in_(self, collection: object) -> Expression:
        """Test whether this value is contained in ``collection``."""
        return operation("in", self, collection)

    def index_of(self, item: object, from_index: object | None = None) -> Expression:
        """Position of ``item`` in this value; the receiver follows the item."""
        if from_index is None:
            return operation("index-of", item, self)
        return operation("index-of", item, self, from_index)

    # Ramps

    def interpolate(self, interpolation: object, *stops: object) -> Expression:
        return operation("interpolate", interpolation, self, *stops)

    def interpolate_hcl(self, interpolation: object, *stops: object) -> Expression:
        return operation("interpolate-hcl", interpolation, self, *stops)

    def interpolate_lab(self, interpolation: object, *stops: object) -> Expression:
        return operation("interpolate-lab", interpolation, self, *stops)

    def step(self, base: object, *stops: object) -> Expression:
        return operation("step", self, base, *stops)

    # Formatting and locale

    def image(self) -> Expression:
        return operation("image", self)

    def number_format(
        self,
        locale: object | None = None,
        currency: object | None = None,
        min_fraction_digits: object | None = None,
        max_fraction_digits: object | None = None,
    ) -> Expression:
        """Format this number, appending an option record when any option is set."""
        options = option_record(
            {
                "locale": locale,
                "currency": currency,
                "min-fraction-digits": min_fraction_digits,
                "max-fraction-digits": max_fraction_digits,
            }
        )
        if not options:
            return operation("number-format", self)
        return operation("number-format", self, options)

    def resolved_locale(self) -> Expression:
        return operation("resolved-locale", self)

    def is_supported_script(self) -> Expression:
        return operation("is-supported-script", self)

    # Spatial

    def distance(self, geometry: object) -> Expression:
        """Distance to ``geometry``; the receiver does not appear in the output."""
        return Expression(["distance", forge_geometry(geometry)])

    def within(self, geometry: object) -> Expression:
        """Containment in ``geometry``; the receiver does not appear in the output."""
        return Expression(["within", forge_geometry(geometry)])


@singledispatch
def forge_geometry(geometry: object) -> object:
    """Return the operand for a spatial operation.

    GeoJSON objects and raw forged arrays pass through; an Expression is
    forged. The geometry itself is never inspected.
    """
    return geometry


@forge_geometry.register
def _forge_geometry_expression(geometry: Expression) -> object:
    return geometry.forge()
