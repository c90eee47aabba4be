"""Layer records and property value wrappers."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import cast

from styleforge.expressions import functions
from styleforge.expressions.expression import Expression


@dataclass(frozen=True, slots=True)
class Property:
    """Value of a data-driven layer property.

    Holds a literal, a forged expression or a legacy function object.
    """

    value: object

    @classmethod
    def literal(cls, value: object) -> Property:
        return cls(value)

    @classmethod
    def expression(cls, expression: Expression) -> Property:
        return cls(expression.forge())

    @classmethod
    def camera_function(cls, function: Mapping[str, object]) -> Property:
        return cls(function)

    @classmethod
    def source_function(cls, function: Mapping[str, object]) -> Property:
        return cls(function)

    @classmethod
    def composite_function(cls, function: Mapping[str, object]) -> Property:
        return cls(function)

    @classmethod
    def interpolate(cls, interpolation: object, input_value: object, *stops: object) -> Property:
        return cls.expression(functions.interpolate(interpolation, input_value, *stops))

    @classmethod
    def step(cls, input_value: object, base: object, *stops: object) -> Property:
        return cls.expression(functions.step(input_value, base, *stops))

    @classmethod
    def match(
        cls, subject: object, branches: Mapping[object, object], fallback: object
    ) -> Property:
        expression = cast(Expression, functions.match(subject, branches, fallback))
        return cls.expression(expression)

    @classmethod
    def case(cls, *arguments: object) -> Property:
        return cls.expression(functions.case(*arguments))

    def forge(self) -> object:
        return copy.deepcopy(self.value)


@dataclass(frozen=True, slots=True)
class Value:
    """Value of a layer property that does not support data-driven styling."""

    value: object

    @classmethod
    def literal(cls, value: object) -> Value:
        return cls(value)

    @classmethod
    def expression(cls, expression: Expression) -> Value:
        return cls(expression.forge())

    @classmethod
    def camera_function(cls, function: Mapping[str, object]) -> Value:
        return cls(function)

    def forge(self) -> object:
        return copy.deepcopy(self.value)


def forge_property_value(value: object) -> object:
    """Forge expressions and wrappers; pass anything else through."""
    if isinstance(value, Expression | Property | Value):
        return value.forge()
    return value


class Layer:
    """Fluent builder for one style layer record.

    Setters write into the record in place and return the same layer, so
    calls can be chained. ``paint`` and ``layout`` are created on first use.
    The layer is not thread-safe; callers sharing one must serialize access.
    """

    def __init__(
        self,
        layer_type: str,
        layer_id: str,
        source: str,
        source_layer: str | None = None,
    ) -> None:
        self.layer: dict[str, object] = {"id": layer_id, "type": layer_type, "source": source}
        if source_layer:
            self.layer["source-layer"] = source_layer

    def _section(self, name: str) -> dict[str, object]:
        section = self.layer.get(name)
        if not isinstance(section, dict):
            section = {}
            self.layer[name] = section
        return section

    def set_paint_property(self, key: str, value: object) -> Layer:
        self._section("paint")[key] = forge_property_value(value)
        return self

    def set_layout_property(self, key: str, value: object) -> Layer:
        self._section("layout")[key] = forge_property_value(value)
        return self

    # Layout

    def visibility(self, visibility: str) -> Layer:
        """Set layout visibility, ``"visible"`` or ``"none"``."""
        return self.set_layout_property("visibility", visibility)

    def text_field(self, field: object) -> Layer:
        return self.set_layout_property("text-field", field)

    def text_size(self, size: object) -> Layer:
        return self.set_layout_property("text-size", size)

    # Paint

    def fill_color(self, color: object) -> Layer:
        return self.set_paint_property("fill-color", color)

    def fill_opacity(self, opacity: object) -> Layer:
        return self.set_paint_property("fill-opacity", opacity)

    def fill_outline_color(self, color: object) -> Layer:
        return self.set_paint_property("fill-outline-color", color)

    def line_color(self, color: object) -> Layer:
        return self.set_paint_property("line-color", color)

    def line_width(self, width: object) -> Layer:
        return self.set_paint_property("line-width", width)

    def circle_color(self, color: object) -> Layer:
        return self.set_paint_property("circle-color", color)

    def circle_radius(self, radius: object) -> Layer:
        return self.set_paint_property("circle-radius", radius)

    # Top level

    def metadata(self, metadata: object) -> Layer:
        self.layer["metadata"] = metadata
        return self

    def min_zoom(self, zoom: float) -> Layer:
        self.layer["minzoom"] = zoom
        return self

    def max_zoom(self, zoom: float) -> Layer:
        self.layer["maxzoom"] = zoom
        return self

    def filter(self, condition: object) -> Layer:
        self.layer["filter"] = forge_property_value(condition)
        return self

    def forge(self) -> dict[str, object]:
        """Return the layer record.

        The record is live: later setter calls show up in it.
        """
        return self.layer
