"""Tests for the JSON-safe transform."""

import dataclasses
import datetime
import decimal
import json
from enum import Enum
from types import MappingProxyType

import pytest
from pydantic import BaseModel

from fetchclient.serialization import (
    CIRCULAR_REFERENCE,
    MAX_SAFE_INTEGER,
    ValueKind,
    classify,
    dumps,
    transform_for_serialization as serialize,
)


class Color(Enum):
    RED = "red"


@dataclasses.dataclass
class Event:
    name: str
    when: datetime.date


class User(BaseModel):
    name: str
    ids: list[int]


class TestClassify:
    """Test value-shape classification."""

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, ValueKind.PRIMITIVE),
            ("text", ValueKind.PRIMITIVE),
            (True, ValueKind.PRIMITIVE),
            (1.5, ValueKind.PRIMITIVE),
            (MAX_SAFE_INTEGER, ValueKind.PRIMITIVE),
            (-MAX_SAFE_INTEGER, ValueKind.PRIMITIVE),
            (MAX_SAFE_INTEGER + 1, ValueKind.BIG_NUMBER),
            (decimal.Decimal("1.10"), ValueKind.BIG_NUMBER),
            (datetime.datetime(2024, 1, 2), ValueKind.DATE_TIME),
            (datetime.time(3, 4), ValueKind.DATE_TIME),
            ({"a": 1}, ValueKind.KEYED),
            ({1: "a"}, ValueKind.MAP_LIKE),
            (MappingProxyType({"a": 1}), ValueKind.MAP_LIKE),
            ({1, 2}, ValueKind.SET_LIKE),
            ([1], ValueKind.SEQUENCE),
            ((1,), ValueKind.SEQUENCE),
            (b"raw", ValueKind.OPAQUE),
            (object(), ValueKind.OPAQUE),
            (Color.RED, ValueKind.PRIMITIVE),
        ],
    )
    def test_classify(self, value, kind):
        assert classify(value) is kind

    def test_dataclass_instance_is_keyed_but_class_is_not(self):
        assert classify(Event("x", datetime.date(2024, 1, 1))) is ValueKind.KEYED
        assert classify(Event) is ValueKind.OPAQUE


class TestScalars:
    """Test leaf values."""

    @pytest.mark.parametrize("value", ["a", "", 0, 42, -7, 3.25, True, False, None])
    def test_primitives_pass_through(self, value):
        assert serialize(value) == value
        assert type(serialize(value)) is type(value)

    @pytest.mark.parametrize("value", [2**64, -(2**60), MAX_SAFE_INTEGER + 1])
    def test_big_integers_become_decimal_strings(self, value):
        result = serialize(value)
        assert result == str(value)
        assert int(result) == value

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_become_null(self, value):
        assert serialize(value) is None
        assert serialize([value, 1.5]) == [None, 1.5]
        assert json.loads(dumps({"x": value})) == {"x": None}

    def test_dumps_emits_strict_json(self):
        encoded = dumps({"a": float("nan"), "b": [float("inf")], "c": {1: float("-inf")}})
        assert "NaN" not in encoded
        assert "Infinity" not in encoded
        assert json.loads(encoded, parse_constant=self._reject_constant) == {
            "a": None,
            "b": [None],
            "c": {"type": "Map", "value": [[1, None]]},
        }

    @staticmethod
    def _reject_constant(name):
        raise ValueError(f"non-standard JSON constant: {name}")

    def test_decimal_keeps_its_digits(self):
        assert serialize(decimal.Decimal("1.10")) == "1.10"

    def test_dates_become_iso_strings(self):
        aware = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)
        assert serialize(aware) == "2024-01-02T03:04:05+00:00"
        assert serialize(datetime.date(2024, 1, 2)) == "2024-01-02"
        assert serialize(datetime.time(3, 4, 5)) == "03:04:05"

    def test_enum_members_become_their_value(self):
        assert serialize(Color.RED) == "red"

    def test_opaque_values_are_left_for_json_to_reject(self):
        marker = object()
        assert serialize(marker) is marker
        with pytest.raises(TypeError):
            dumps({"x": marker})


class TestCollections:
    """Test map-like, set-like and plain composites."""

    def test_map_like_keeps_entry_order(self):
        proxy = MappingProxyType({"k1": 1, "k2": datetime.date(2024, 5, 6)})
        assert serialize(proxy) == {
            "type": "Map",
            "value": [["k1", 1], ["k2", "2024-05-06"]],
        }

    def test_dict_with_non_string_keys_is_map_like(self):
        value = {2**64: "big", 1: [1, 2]}
        assert serialize(value) == {
            "type": "Map",
            "value": [["18446744073709551616", "big"], [1, [1, 2]]],
        }

    def test_set_like_keeps_iteration_order(self):
        ordered = dict.fromkeys(["a", "b", "c"]).keys()
        assert serialize(ordered) == {"type": "Set", "value": ["a", "b", "c"]}

    def test_set_values_are_serialized(self):
        result = serialize({datetime.date(2024, 1, 1)})
        assert result == {"type": "Set", "value": ["2024-01-01"]}

    def test_sequences_keep_order_and_length(self):
        assert serialize((1, 2**64, "x")) == [1, "18446744073709551616", "x"]
        assert serialize([]) == []

    def test_keyed_composites_keep_key_set(self):
        value = {"a": 1, "b": {"c": datetime.date(2024, 1, 1)}}
        assert serialize(value) == {"a": 1, "b": {"c": "2024-01-01"}}

    def test_dataclass_fields(self):
        assert serialize(Event("launch", datetime.date(2024, 3, 1))) == {
            "name": "launch",
            "when": "2024-03-01",
        }

    def test_pydantic_model_fields(self):
        assert serialize(User(name="A", ids=[1, 2])) == {"name": "A", "ids": [1, 2]}

    def test_input_is_not_mutated(self):
        value = {"when": datetime.date(2024, 1, 1), "items": [1, 2]}
        serialize(value)
        assert value == {"when": datetime.date(2024, 1, 1), "items": [1, 2]}


class TestCycles:
    """Test circular reference detection."""

    def test_self_reference_is_marked(self):
        obj = {"name": "loop"}
        obj["self"] = obj

        result = serialize(obj)

        assert result == {"name": "loop", "self": CIRCULAR_REFERENCE}

    def test_list_containing_itself(self):
        items = [1]
        items.append(items)
        assert serialize(items) == [1, CIRCULAR_REFERENCE]

    def test_transitive_cycle(self):
        parent = {"child": {}}
        parent["child"]["parent"] = parent
        assert serialize(parent) == {"child": {"parent": CIRCULAR_REFERENCE}}

    def test_map_like_cycle(self):
        table = {1: None}
        table[1] = table
        assert serialize(table) == {"type": "Map", "value": [[1, CIRCULAR_REFERENCE]]}

    def test_shared_sibling_is_not_circular(self):
        shared = {"id": 1}
        assert serialize({"x": shared, "y": shared, "z": [shared, shared]}) == {
            "x": {"id": 1},
            "y": {"id": 1},
            "z": [{"id": 1}, {"id": 1}],
        }

    def test_equal_but_distinct_objects_are_not_circular(self):
        outer = {"inner": {"inner": {}}}
        assert serialize(outer) == {"inner": {"inner": {}}}

    def test_each_call_starts_with_a_fresh_path(self):
        obj = {"a": 1}
        assert serialize(obj) == {"a": 1}
        assert serialize(obj) == {"a": 1}


def test_everything_survives_a_json_round_trip():
    node = {
        "when": datetime.datetime(2024, 1, 2, 3, 4, 5),
        "big": 2**70,
        "map": {1: "one", (2, 3): "pair"},
        "set": {"only"},
        "items": [1, "two", None, True, 2.5],
    }
    node["self"] = node
    node["items"].append(node["items"])

    decoded = json.loads(json.dumps(serialize(node)))

    assert decoded["when"] == "2024-01-02T03:04:05"
    assert decoded["big"] == str(2**70)
    assert decoded["map"] == {"type": "Map", "value": [[1, "one"], [[2, 3], "pair"]]}
    assert decoded["set"] == {"type": "Set", "value": ["only"]}
    assert decoded["items"][-1] == CIRCULAR_REFERENCE
    assert decoded["self"] == CIRCULAR_REFERENCE


def test_dumps_encodes_transformed_value():
    assert json.loads(dumps({"when": datetime.date(2024, 1, 1)})) == {"when": "2024-01-01"}
