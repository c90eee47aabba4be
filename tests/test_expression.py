"""Tests for the Expression value type and its chained operations."""

from __future__ import annotations

import dataclasses

import pytest

from styleforge.expressions import Expression, forge_value, get, has, literal, zoom


def test_literal_forges_tagged_value() -> None:
    """literal should wrap any value under the literal tag."""
    assert literal("hello").forge() == ["literal", "hello"]
    assert literal(42).forge() == ["literal", 42]
    assert literal([1, 2, 3]).forge() == ["literal", [1, 2, 3]]
    assert literal({"a": 1}).forge() == ["literal", {"a": 1}]


def test_get_and_has_forge_property_lookups() -> None:
    """get and has should forge property lookups by name."""
    assert get("magnitude").forge() == ["get", "magnitude"]
    assert has("id").forge() == ["has", "id"]


def test_chaining_nests_left_to_right() -> None:
    """Each chained call should wrap the previous expression as first operand."""
    expression = get("magnitude").multiply(10).add(5).divide(2)

    assert expression.forge() == ["/", ["+", ["*", ["get", "magnitude"], 10], 5], 2]


def test_forge_is_idempotent() -> None:
    """Forging twice should produce equal output."""
    expression = get("id").to_number().mod(256)

    assert expression.forge() == expression.forge()


def test_chaining_does_not_change_receiver() -> None:
    """Operations should return new expressions and keep the receiver intact."""
    base = get("level")
    base.pow(2)
    base.add(1)

    assert base.forge() == ["get", "level"]


def test_expression_is_frozen() -> None:
    """Expressions should not allow reassignment of their forged array."""
    expression = zoom()

    with pytest.raises(dataclasses.FrozenInstanceError):
        expression.forged = ["zoom"]  # type: ignore[misc]


def test_variadic_operations_keep_all_operands() -> None:
    """add, multiply and coalesce should accept any number of operands."""
    assert get("a").add(get("b"), 3).forge() == ["+", ["get", "a"], ["get", "b"], 3]
    assert get("a").multiply(2, 3).forge() == ["*", ["get", "a"], 2, 3]
    assert get("name").coalesce(get("ref"), "").forge() == [
        "coalesce",
        ["get", "name"],
        ["get", "ref"],
        "",
    ]


def test_comparison_operations() -> None:
    """Comparison methods should forge the matching operator tags."""
    value = get("rank")

    assert value.eq(1).forge() == ["==", ["get", "rank"], 1]
    assert value.neq(1).forge() == ["!=", ["get", "rank"], 1]
    assert value.gt(1).forge()[0] == ">"
    assert value.gte(1).forge()[0] == ">="
    assert value.lt(1).forge()[0] == "<"
    assert value.lte(1).forge()[0] == "<="


def test_logical_operations_use_all_and_any() -> None:
    """and_ and or_ should forge all and any with the receiver first."""
    condition = has("id").and_(zoom().gt(10), get("visible"))

    assert condition.forge() == ["all", ["has", "id"], [">", ["zoom"], 10], ["get", "visible"]]
    assert has("a").or_(has("b")).forge() == ["any", ["has", "a"], ["has", "b"]]


def test_unary_operations() -> None:
    """Single-operand operations should forge with the receiver as operand."""
    value = get("v")

    assert value.sqrt().forge() == ["sqrt", ["get", "v"]]
    assert value.log10().forge() == ["log10", ["get", "v"]]
    assert value.to_color().forge() == ["to-color", ["get", "v"]]
    assert value.typeof().forge() == ["typeof", ["get", "v"]]
    assert value.upcase().forge() == ["upcase", ["get", "v"]]
    assert value.length().forge() == ["length", ["get", "v"]]
    assert value.image().forge() == ["image", ["get", "v"]]


def test_array_assertion_variants() -> None:
    """array should emit item type and length only when given."""
    tags = get("tags")

    assert tags.array().forge() == ["array", ["get", "tags"]]
    assert tags.array("string").forge() == ["array", "string", ["get", "tags"]]
    assert tags.array("number", 3).forge() == ["array", "number", 3, ["get", "tags"]]


def test_at_places_receiver_last() -> None:
    """at should forge the index before the array operand."""
    assert get("names").at(0).forge() == ["at", 0, ["get", "names"]]


def test_index_of_places_receiver_after_item() -> None:
    """index_of should forge the item, then the receiver, then the start index."""
    assert get("tags").index_of("urgent", 1).forge() == ["index-of", "urgent", ["get", "tags"], 1]
    assert get("tags").index_of("urgent").forge() == ["index-of", "urgent", ["get", "tags"]]


def test_slice_and_in() -> None:
    """slice should omit the end when absent; in_ should test containment."""
    assert get("name").slice(1).forge() == ["slice", ["get", "name"], 1]
    assert get("name").slice(1, 4).forge() == ["slice", ["get", "name"], 1, 4]
    assert get("kind").in_(["literal", ["a", "b"]]).forge() == [
        "in",
        ["get", "kind"],
        ["literal", ["a", "b"]],
    ]


def test_interpolate_methods_put_interpolation_type_first() -> None:
    """Ramp methods should forge interpolation type, input, then stops."""
    assert zoom().interpolate(["linear"], 0, 1, 10, 2).forge() == [
        "interpolate",
        ["linear"],
        ["zoom"],
        0,
        1,
        10,
        2,
    ]
    assert get("t").interpolate_hcl(["linear"], 0, "#00f").forge()[:3] == [
        "interpolate-hcl",
        ["linear"],
        ["get", "t"],
    ]
    assert get("t").interpolate_lab(["linear"], 0, "#00f").forge()[0] == "interpolate-lab"


def test_step_method() -> None:
    """step should forge input, base output, then stop pairs."""
    assert zoom().step(1, 5, 2).forge() == ["step", ["zoom"], 1, 5, 2]


def test_number_format_omits_empty_options() -> None:
    """number_format should emit an option record only when options are set."""
    assert get("price").number_format().forge() == ["number-format", ["get", "price"]]
    assert get("price").number_format(currency="EUR", max_fraction_digits=2).forge() == [
        "number-format",
        ["get", "price"],
        {"currency": "EUR", "max-fraction-digits": 2},
    ]


def test_operands_are_not_validated() -> None:
    """Malformed operands should be forged as given."""
    assert get("a").add("not a number", None).forge() == ["+", ["get", "a"], "not a number", None]


def test_forge_value_passes_through_non_expressions() -> None:
    """forge_value should forge expressions and keep other values unchanged."""
    raw = ["get", "x"]

    assert forge_value(get("x")) == ["get", "x"]
    assert forge_value(raw) is raw
    assert forge_value(3) == 3


def test_expression_wraps_raw_forged_list() -> None:
    """An Expression built from a raw array should forge that array."""
    assert Expression(["zoom"]).forge() == zoom().forge()


def test_parent_output_does_not_alias_child() -> None:
    """Mutating a parent's forged output should leave the child node unchanged."""
    child = get("x")
    parent = child.add(1)

    parent.forge()[1][1] = "y"
    forged = parent.forge()
    forged[1].append("junk")

    assert child.forge() == ["get", "x"]
    assert parent.forge() == ["+", ["get", "x"], 1]


def test_literal_copies_caller_value() -> None:
    """Changing the wrapped value after construction should not change the literal."""
    values = [1, 2]
    expression = literal(values)

    values.append(3)

    assert expression.forge() == ["literal", [1, 2]]


def test_expression_is_not_hashable() -> None:
    """Expressions compare by value but cannot be hashed."""
    with pytest.raises(TypeError):
        hash(get("a"))
    assert get("a") == get("a")


def test_spatial_methods_ignore_receiver() -> None:
    """distance and within should forge only the geometry operand."""
    geometry = {"type": "Point", "coordinates": [0, 0]}

    assert get("g").distance(geometry).forge() == ["distance", geometry]
    assert zoom().within(get("area")).forge() == ["within", ["get", "area"]]
