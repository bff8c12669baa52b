"""Tests for the raw value and node models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyzwnode.models.node import NodeMetadata, NodeStatus
from pyzwnode.models.value import RawValue, ValueGenre, ValueKey

# ------------------------------------------------------------------
# ValueKey
# ------------------------------------------------------------------


class TestValueKey:
    def test_string_form_matches_transport_value_id(self) -> None:
        assert str(ValueKey(3, 37, 1, 0)) == "3-37-1-0"

    def test_parse(self) -> None:
        assert ValueKey.parse("3-49-2-5") == ValueKey(3, 49, 2, 5)

    def test_equality_is_by_value(self) -> None:
        values = {ValueKey(3, 37, 1, 0): "a"}
        assert values[ValueKey.parse("3-37-1-0")] == "a"

    def test_no_collision_between_similar_addresses(self) -> None:
        # "3-31-1-0" vs "3-3-11-0" would collide under naive concatenation.
        assert ValueKey(3, 31, 1, 0) != ValueKey(3, 3, 11, 0)

    @pytest.mark.parametrize("text", ["3-37-1", "3-37-1-0-9", "a-b-c-d", ""])
    def test_parse_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            ValueKey.parse(text)

    def test_coerce_passes_keys_through(self) -> None:
        key = ValueKey(1, 2, 3, 4)
        assert ValueKey.coerce(key) is key
        assert ValueKey.coerce("1-2-3-4") == key

    def test_negative_parts_are_rejected(self) -> None:
        # "3-37-1--1" could not be parsed back.
        with pytest.raises(ValueError, match="index"):
            ValueKey(3, 37, 1, -1)
        with pytest.raises(ValueError):
            ValueKey.parse("3-37-1--1")


# ------------------------------------------------------------------
# RawValue
# ------------------------------------------------------------------


class TestRawValue:
    def test_openzwave_payload(self) -> None:
        value = RawValue.model_validate(
            {
                "value_id": "3-49-1-1",
                "node_id": 3,
                "class_id": 49,
                "type": "decimal",
                "genre": "user",
                "instance": 1,
                "index": 1,
                "label": "Temperature",
                "units": "C",
                "help": "",
                "read_only": True,
                "value": 21.5,
            }
        )
        assert value.value_key == ValueKey(3, 49, 1, 1)
        assert value.genre == ValueGenre.USER
        assert value.is_user
        assert value.read_only is True
        assert value.units_suffix == " C"
        assert value.raw["value_id"] == "3-49-1-1"

    def test_camel_case_payload(self) -> None:
        value = RawValue.model_validate({"nodeId": 4, "classId": 38, "instance": 1, "index": 0, "readOnly": False})
        assert value.value_key == ValueKey(4, 38, 1, 0)

    def test_unknown_genre_falls_back(self) -> None:
        value = RawValue.model_validate({"node_id": 3, "class_id": 112, "genre": "weird"})
        assert value.genre == ValueGenre.UNKNOWN
        assert not value.is_user

    def test_genre_is_case_insensitive(self) -> None:
        value = RawValue.model_validate({"node_id": 3, "class_id": 112, "genre": "Config"})
        assert value.genre == ValueGenre.CONFIG

    def test_none_fields_use_defaults(self) -> None:
        value = RawValue.model_validate({"node_id": 3, "class_id": 37, "units": None, "label": None})
        assert value.units == ""
        assert value.units_suffix == ""
        assert value.label == ""

    def test_missing_class_id_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RawValue.model_validate({"node_id": 3})

    def test_as_dict_excludes_raw(self) -> None:
        value = RawValue.model_validate({"node_id": 3, "class_id": 37, "genre": "user", "value": True})
        dumped = value.as_dict()
        assert "raw" not in dumped
        assert dumped["genre"] == "user"
        assert dumped["value"] is True


# ------------------------------------------------------------------
# Node models
# ------------------------------------------------------------------


class TestNodeModels:
    def test_metadata_defaults_are_empty(self) -> None:
        metadata = NodeMetadata(node_id=7)
        assert metadata.model_dump() == {
            "location": "",
            "node_id": 7,
            "manufacturer": "",
            "manufacturer_id": "",
            "product": "",
            "product_id": "",
            "product_type": "",
            "type": "",
        }

    def test_metadata_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            NodeMetadata(node_id=7, colour="red")  # type: ignore[call-arg]

    def test_status_values(self) -> None:
        assert [str(status) for status in NodeStatus] == [
            "constructed",
            "value-added",
            "value-changed",
            "value-removed",
        ]
