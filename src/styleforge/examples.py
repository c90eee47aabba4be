"""Catalog of example expressions, property values and layers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from styleforge.expressions import (
    Expression,
    and_,
    concat,
    cubic_bezier,
    distance,
    downcase,
    eq,
    exponential,
    format,
    get,
    gt,
    has,
    let,
    linear,
    literal,
    match,
    mod,
    not_,
    or_,
    step,
    to_boolean,
    to_number,
    to_string,
    upcase,
    var,
    when,
    within,
    zoom,
)
from styleforge.expressions.functions import add, divide, interpolate, multiply, pow, subtract
from styleforge.layer import Layer, Property, Value


Forgeable: TypeAlias = Expression | Property | Value | Layer
ExampleGroup: TypeAlias = dict[str, Forgeable]

PALETTE = {0: "#ff0000", 1: "#00ff00", 2: "#0000ff"}
CATEGORY_COLORS = {"residential": "#ffeb3b", "commercial": "#2196f3", "industrial": "#f44336"}
FALLBACK_COLOR = "#64748b"

HARBOUR_AREA = {
    "type": "Polygon",
    "coordinates": [[[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [1.0, 0.0], [0.0, 0.0]]],
}


def _basic() -> ExampleGroup:
    return {
        "get_id": get("id"),
        "has_id": has("id"),
        "zoom": zoom(),
        "literal_string": literal("hello"),
        "literal_number": literal(42),
    }


def _math() -> ExampleGroup:
    return {
        "add": add(1, 2, 3),
        "subtract": subtract(10, 3),
        "multiply": multiply(2, 3, 4),
        "divide": divide(10, 2),
        "modulo": mod(to_number(get("id")), 256),
        "power": pow(2, 8),
        "id_palette_index": get("id").to_number().mod(256).add(zoom()),
        "scaled_magnitude": get("magnitude").multiply(10).add(5).divide(2),
        "level_bonus": get("level").pow(2).add(get("bonus")),
    }


def _comparison() -> ExampleGroup:
    return {
        "id_equals_zero": get("id").eq(0),
        "zoom_above_10": zoom().gt(10),
        "zoom_at_most_15": zoom().lte(15),
        "type_is_polygon": eq(get("type"), "polygon"),
        "magnitude_range": get("magnitude").gte(5).and_(get("magnitude").lt(8)),
    }


def _logical() -> ExampleGroup:
    return {
        "has_id_and_visible": and_(has("id"), eq(get("visible"), True)),
        "polygon_or_line": or_(eq(get("type"), "polygon"), eq(get("type"), "line")),
        "not_hidden": not_(eq(get("status"), "hidden")),
        "important_above_8": and_(has("id"), gt(zoom(), 8), eq(get("category"), "important")),
    }


def _match() -> ExampleGroup:
    return {
        "category_palette": match(get("category")).branches(CATEGORY_COLORS).fallback("#9e9e9e"),
        "id_palette": get("id").to_number().mod(3).match(PALETTE).fallback(FALLBACK_COLOR),
        "incremental": match(get("kind"))
            .branch("park", "#4caf50")
            .branch("water", "#2196f3")
            .fallback("#9e9e9e"),
    }


def _conditional() -> ExampleGroup:
    return {
        "simple": when(has("id")).then("#ff0000").else_("#0000ff"),
        "zoom_bands": when(zoom().lt(5))
            .then("#ff0000")
            .when(zoom().lt(10))
            .then("#ffff00")
            .when(zoom().lt(15))
            .then("#00ff00")
            .else_("#0000ff"),
        "nested_match": when(has("id"))
            .then(get("id").to_number().mod(256).match(PALETTE).fallback(FALLBACK_COLOR))
            .else_(FALLBACK_COLOR),
        "zoom_ramp_when_identified": when(has("id").and_(zoom().gt(10)))
            .then(zoom().interpolate(linear(), 10, "#ff0000", 15, "#00ff00"))
            .else_(FALLBACK_COLOR),
    }


def _interpolation() -> ExampleGroup:
    return {
        "zoom_opacity": interpolate(linear(), zoom(), 0, 0.1, 10, 0.5, 20, 1.0),
        "exponential_size": interpolate(exponential(2), get("magnitude"), 0, 5, 10, 20),
        "smooth_color": interpolate(
            cubic_bezier(0.25, 0.46, 0.45, 0.94), zoom(), 0, "#ff0000", 20, "#0000ff"
        ),
        "temperature_hcl": get("temperature").interpolate_hcl(
            linear(), 0, "#0000ff", 50, "#ffff00", 100, "#ff0000"
        ),
        "temperature_lab": get("temperature").interpolate_lab(
            linear(), 0, "#0000ff", 100, "#ff0000"
        ),
    }


def _step() -> ExampleGroup:
    return {
        "zoom_line_width": step(zoom(), 1, 5, 2, 10, 3, 15, 4),
        "magnitude_radius": get("magnitude").step(3, 3, 5, 6, 8, 8, 12),
    }


def _conversion() -> ExampleGroup:
    return {
        "string_to_number": to_number(get("id")),
        "number_to_string": to_string(get("count")),
        "to_boolean": to_boolean(get("visible")),
        "tags_array": get("tags").array("string"),
        "price_label": get("price").number_format(currency="EUR", max_fraction_digits=2),
    }


def _string() -> ExampleGroup:
    return {
        "full_name": concat(get("firstName"), " ", get("lastName")),
        "uppercase": upcase(get("name")),
        "lowercase": downcase(get("name")),
        "rich_label": format(get("name"), {"font-scale": 1.2}, "\n", {}, get("ref")),
        "urgent_position": get("tags").index_of("urgent", 1),
    }


def _binding() -> ExampleGroup:
    return {
        "area_in_hectares": let({"area": get("area")}).in_(var("area").divide(10000)),
        "doubled": let({"a": get("x")}, lambda scope: var({"b": scope["a"].multiply(2)})),
    }


def _spatial() -> ExampleGroup:
    return {
        "distance_to_harbour": distance(HARBOUR_AREA),
        "within_harbour": within(HARBOUR_AREA),
    }


def _values() -> ExampleGroup:
    return {
        "visibility": Value.literal("visible"),
        "zoom_line_width": Value.expression(interpolate(linear(), zoom(), 10, 1, 20, 5)),
        "camera_size": Value.camera_function({"type": "exponential", "stops": [[0, 1], [20, 32]]}),
    }


def _properties() -> ExampleGroup:
    return {
        "fill_color": Property.match(mod(to_number(get("id")), 256), PALETTE, FALLBACK_COLOR),
        "fill_opacity": Property.interpolate(linear(), zoom(), 0, 0.1, 15, 0.8),
        "circle_radius": Property.step(get("magnitude"), 3, 5, 5, 8, 10),
        "text_size": Property.case(gt(zoom(), 12), 14, 10),
    }


def _layers() -> ExampleGroup:
    properties = _properties()
    return {
        "buildings_fill": Layer("fill", "buildings-fill", "buildings-source", "buildings")
        .fill_color(properties["fill_color"])
        .fill_opacity(properties["fill_opacity"])
        .visibility("visible")
        .min_zoom(0)
        .max_zoom(20),
        "points_circle": Layer("circle", "points-circle", "points-source")
        .circle_color("#ff0000")
        .circle_radius(properties["circle_radius"])
        .visibility("visible"),
        "roads_line": Layer("line", "roads-line", "roads-source", "roads")
        .line_color("#666666")
        .line_width(interpolate(linear(), zoom(), 0, 1, 20, 5))
        .visibility("visible"),
        "labels_symbol": Layer("symbol", "labels-symbol", "buildings-source", "buildings")
        .text_field(get("name"))
        .text_size(properties["text_size"])
        .min_zoom(10),
        "large_buildings": Layer("fill", "filtered-fill", "data-source", "layer")
        .fill_color(properties["fill_color"])
        .filter(and_(has("id"), gt(get("area"), 1000)))
        .visibility("visible"),
    }


EXAMPLE_GROUPS: dict[str, Callable[[], ExampleGroup]] = {
    "basic": _basic,
    "math": _math,
    "comparison": _comparison,
    "logical": _logical,
    "match": _match,
    "conditional": _conditional,
    "interpolation": _interpolation,
    "step": _step,
    "conversion": _conversion,
    "string": _string,
    "binding": _binding,
    "spatial": _spatial,
    "values": _values,
    "properties": _properties,
    "layers": _layers,
}


def build_examples(group: str | None = None) -> dict[str, ExampleGroup]:
    """Build example objects, for all groups or a single one.

    Raises:
        KeyError: If group is not a known example group
    """
    if group is None:
        return {name: factory() for name, factory in EXAMPLE_GROUPS.items()}
    return {group: EXAMPLE_GROUPS[group]()}


def forge_examples(group: str | None = None) -> dict[str, dict[str, object]]:
    """Forge example objects into plain data."""
    return {
        group_name: {name: example.forge() for name, example in examples.items()}
        for group_name, examples in build_examples(group).items()
    }
