from __future__ import annotations

import pytest

from json_schema_form import errors
from json_schema_form.coercion import is_nan
from json_schema_form.errors import FormDataError
from json_schema_form.reconstruct import coerce_value, reconstruct_form, reconstruct_form_strict


@pytest.fixture
def address_schema():
    return {
        "type": "object",
        "properties": {
            "address": {
                "type": "object",
                "properties": {"zip": {"type": "integer"}},
            },
        },
    }


@pytest.fixture
def profile_schema():
    return {
        "type": "object",
        "required": ["name"],
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "integer"},
            "height": {"type": "number"},
            "a": {
                "type": "object",
                "properties": {"x": {"type": "integer"}, "y": {"type": "number"}},
            },
            "contact": {
                "type": "object",
                "properties": {
                    "email": {"type": "string"},
                    "phone": {
                        "type": "object",
                        "properties": {"extension": {"type": "integer"}},
                    },
                },
            },
        },
    }


def test_nested_integer_is_coerced(address_schema):
    result = reconstruct_form(address_schema, {"address/zip": "94107"})

    assert result == {"address": {"zip": 94107}}
    assert isinstance(result["address"]["zip"], int)


def test_unparsable_integer_becomes_nan(address_schema):
    result = reconstruct_form(address_schema, {"address/zip": "abc"})

    assert is_nan(result["address"]["zip"])


def test_anchored_paths(address_schema):
    assert reconstruct_form(address_schema, {"#/address/zip/": "7"}) == {"address": {"zip": 7}}


def test_mixed_types(profile_schema):
    data = {
        "name": "Ada",
        "age": "36",
        "height": "1.65",
        "contact/email": "ada@example.com",
        "contact/phone/extension": "12 ",
    }

    assert reconstruct_form(profile_schema, data) == {
        "name": "Ada",
        "age": 36,
        "height": 1.65,
        "contact": {"email": "ada@example.com", "phone": {"extension": 12}},
    }


def test_siblings_share_parent_regardless_of_input_order(profile_schema):
    forward = reconstruct_form(profile_schema, {"a/x": "1", "a/y": "2"})
    backward = reconstruct_form(profile_schema, {"a/y": "2", "a/x": "1"})

    assert forward == backward == {"a": {"x": 1, "y": 2.0}}
    assert list(forward["a"]) == ["x", "y"]
    assert list(backward["a"]) == ["x", "y"]


def test_unknown_fields_pass_through(profile_schema):
    result = reconstruct_form(profile_schema, {"nickname": "ace", "extra/deep/value": "9"})

    assert result == {"extra": {"deep": {"value": "9"}}, "nickname": "ace"}


def test_children_of_scalar_fields_pass_through(profile_schema):
    result = reconstruct_form(profile_schema, {"age/years": "5"})

    assert result == {"age": {"years": "5"}}


def test_non_string_raw_values(profile_schema):
    result = reconstruct_form(profile_schema, {"age": 4.7, "name": None, "height": 3})

    assert result == {"age": 4, "height": 3.0, "name": None}


def test_empty_interior_segment_is_kept_as_key():
    assert reconstruct_form({}, {"a//b": "1"}) == {"a": {"": {"b": "1"}}}


def test_paths_without_segments_are_ignored(profile_schema):
    assert reconstruct_form(profile_schema, {"": "x", "#": "y", "name": "z"}) == {"name": "z"}


def test_earlier_leaf_wins_over_deeper_path():
    assert reconstruct_form({}, {"a": "leaf", "a/b": "deeper"}) == {"a": "leaf"}


def test_none_leaf_is_not_replaced_by_deeper_path():
    outcome = reconstruct_form_strict({}, {"a": None, "a/b": "x"})

    assert outcome.value == {"a": None}
    assert errors.PATH_CONFLICT in [d.kind for d in outcome.diagnostics]
    assert reconstruct_form({}, {"a": None, "a/b": "x"}) == {"a": None}


def test_untyped_container_schema_still_coerces():
    schema = {"address": {"type": "object", "properties": {"zip": {"type": "integer"}}}}

    assert reconstruct_form(schema, {"address/zip": "02134"}) == {"address": {"zip": 2134}}


def test_bare_properties_map_coerces_scalar_leaves():
    schema = {"zip": {"type": "integer"}, "ratio": {"type": "number"}, "name": {"type": "string"}}

    result = reconstruct_form(schema, {"zip": "94107", "ratio": "1.5", "name": "Ada"})

    assert result == {"zip": 94107, "ratio": 1.5, "name": "Ada"}
    assert isinstance(result["zip"], int)


def test_bare_properties_map_does_not_descend_into_scalars():
    outcome = reconstruct_form_strict({"zip": {"type": "integer"}}, {"zip/extra": "5"})

    assert outcome.value == {"zip": {"extra": "5"}}
    assert [d.kind for d in outcome.diagnostics] == [errors.UNKNOWN_FIELD]


def test_object_without_properties_passes_values_through():
    schema = {"type": "object", "properties": {"meta": {"type": "object"}}}

    assert reconstruct_form(schema, {"meta/count": "3"}) == {"meta": {"count": "3"}}


def test_empty_data_gives_empty_object(profile_schema):
    assert reconstruct_form(profile_schema, {}) == {}


def test_inputs_are_not_mutated(profile_schema):
    data = {"a/x": "1"}
    schema_before = repr(profile_schema)

    reconstruct_form(profile_schema, data)

    assert data == {"a/x": "1"}
    assert repr(profile_schema) == schema_before


def test_each_call_returns_fresh_object(address_schema):
    first = reconstruct_form(address_schema, {"address/zip": "1"})
    second = reconstruct_form(address_schema, {"address/zip": "1"})

    assert first == second
    assert first is not second
    assert first["address"] is not second["address"]


def test_round_trip_through_flattened_strings(profile_schema):
    from json_schema_form.schema_utils import flatten_form_object

    original = {"name": "Ada", "height": 1.5, "a": {"x": 3, "y": 0.25}}
    rebuilt = reconstruct_form(profile_schema, flatten_form_object(original))

    assert rebuilt == original


def test_coerce_value():
    assert coerce_value("5", {"type": "integer"}) == 5
    assert coerce_value("5", {"type": "number"}) == 5.0
    assert coerce_value("5", {"type": "string"}) == "5"
    assert coerce_value("5", None) == "5"


def test_strict_value_matches_lenient(profile_schema):
    data = {"age": "x", "nickname": "ace", "a/x": "2"}

    outcome = reconstruct_form_strict(profile_schema, data)

    assert outcome.value.keys() == reconstruct_form(profile_schema, data).keys()
    assert outcome.value["a"] == {"x": 2}


def test_strict_clean_data_has_no_diagnostics(profile_schema):
    outcome = reconstruct_form_strict(profile_schema, {"name": "Ada", "age": "3"})

    assert outcome.ok
    assert outcome.raise_for_diagnostics() == {"name": "Ada", "age": 3}


def test_strict_reports_each_problem_kind(profile_schema):
    data = {
        "": "empty",
        "a//x": "1",
        "age": "old",
        "age/years": "5",
        "nickname": "ace",
    }

    outcome = reconstruct_form_strict(profile_schema, data)
    kinds = {(d.path, d.kind) for d in outcome.diagnostics}

    assert ("", errors.EMPTY_PATH) in kinds
    assert ("a//x", errors.EMPTY_SEGMENT) in kinds
    assert ("age", errors.COERCION_FAILED) in kinds
    assert ("age/years", errors.PATH_CONFLICT) in kinds
    assert ("nickname", errors.UNKNOWN_FIELD) in kinds
    assert not outcome.ok


def test_strict_reports_descent_through_scalar(profile_schema):
    outcome = reconstruct_form_strict(profile_schema, {"name/first": "Ada"})

    assert [d.kind for d in outcome.diagnostics] == [errors.NOT_AN_OBJECT]
    assert outcome.value == {"name": {"first": "Ada"}}


def test_strict_reports_leaf_replacing_object():
    outcome = reconstruct_form_strict({}, {"#/a/b": "1", "a": "2"})

    assert outcome.value == {"a": "2"}
    assert errors.PATH_CONFLICT in [d.kind for d in outcome.diagnostics]


def test_raise_for_diagnostics(profile_schema):
    outcome = reconstruct_form_strict(profile_schema, {"age": "old"})

    with pytest.raises(FormDataError) as exc_info:
        outcome.raise_for_diagnostics()

    assert exc_info.value.diagnostics == outcome.diagnostics
    assert "age" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)
