"""Tests for the wire value codec."""

import math

import pytest

from webdriver_exec import ElementReference, InvalidArgumentError, ValueCodec, decode, encode
from webdriver_exec.types import W3C_ELEMENT_KEY


class TestEncode:
    """Native -> wire."""

    def test_primitives_pass_through(self):
        for value in (None, True, False, 0, -3, 1.5, "", "text"):
            assert encode(value) == value

    def test_element_reference_becomes_tagged_object(self):
        assert encode(ElementReference(id="el-1")) == {"ELEMENT": "el-1"}

    def test_nested_structures_encode_elementwise(self):
        value = {
            "target": ElementReference(id="el-2"),
            "items": [1, ElementReference(id="el-3"), {"deep": True}],
        }
        assert encode(value) == {
            "target": {"ELEMENT": "el-2"},
            "items": [1, {"ELEMENT": "el-3"}, {"deep": True}],
        }

    def test_tuple_encodes_as_list(self):
        assert encode((1, 2)) == [1, 2]

    def test_function_is_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            encode(lambda: None)
        assert exc_info.value.details["type"] == "function"

    @pytest.mark.parametrize("value", [{1, 2}, b"raw", object()])
    def test_unsupported_types_are_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            encode(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_floats_are_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            encode(value)

    def test_non_string_keys_are_rejected(self):
        with pytest.raises(InvalidArgumentError):
            encode({1: "a"})

    def test_error_names_argument_position(self):
        codec = ValueCodec()
        with pytest.raises(InvalidArgumentError) as exc_info:
            codec.encode_args([1, {"cb": print}])
        assert exc_info.value.details["path"] == "args[1].cb"


class TestDecode:
    """Wire -> native."""

    def test_tagged_object_becomes_element_reference(self):
        assert decode({"ELEMENT": "el-1"}) == ElementReference(id="el-1")

    def test_tag_wins_over_other_fields(self):
        # Coincidental use of the reserved key is indistinguishable from a reference
        decoded = decode({"ELEMENT": "el-1", "name": "not really an element"})
        assert decoded == ElementReference(id="el-1")

    def test_nested_references_are_decoded(self):
        decoded = decode({"rows": [{"ELEMENT": "a"}, {"ELEMENT": "b"}], "count": 2})
        assert decoded == {
            "rows": [ElementReference(id="a"), ElementReference(id="b")],
            "count": 2,
        }

    def test_other_key_is_plain_data_for_default_codec(self):
        value = {W3C_ELEMENT_KEY: "el-1"}
        assert decode(value) == value


class TestRoundTrip:

    @pytest.mark.parametrize(
        "value",
        [
            None,
            42,
            "hello",
            [1, "two", [3.5, None]],
            {"a": {"b": [True, False]}, "c": ""},
        ],
    )
    def test_plain_values_round_trip(self, value):
        assert decode(encode(value)) == value

    def test_element_reference_round_trips_to_equal_handle(self):
        ref = ElementReference(id="el-9")
        decoded = decode(encode(ref))
        assert decoded == ref
        assert hash(decoded) == hash(ref)

    def test_w3c_codec_uses_its_own_key_both_ways(self):
        codec = ValueCodec(W3C_ELEMENT_KEY)
        ref = ElementReference(id="el-4")
        assert codec.encode(ref) == {W3C_ELEMENT_KEY: "el-4"}
        assert codec.decode({W3C_ELEMENT_KEY: "el-4"}) == ref
        assert codec.decode({"ELEMENT": "el-4"}) == {"ELEMENT": "el-4"}

    def test_empty_key_is_rejected(self):
        with pytest.raises(ValueError):
            ValueCodec("")
