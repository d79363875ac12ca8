"""Unit tests for canonical JSON serialization."""

from __future__ import annotations

import math
from collections import OrderedDict
from decimal import Decimal

import orjson
import pytest

from tms_sdk.transport.canonical_json import (
    UNSET,
    canonical_dumps,
    canonical_hash,
    dumps_body,
    format_number,
    strip_unset,
)


class TestScalars:
    def test_null_and_booleans(self):
        assert canonical_dumps(None) == "null"
        assert canonical_dumps(True) == "true"
        assert canonical_dumps(False) == "false"

    def test_top_level_unset(self):
        assert canonical_dumps(UNSET) == "undefined"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_numbers_collapse_to_null(self, value):
        assert canonical_dumps(value) == "null"

    def test_non_finite_inside_containers(self):
        assert canonical_dumps({"a": math.nan, "b": [math.inf]}) == '{"a":null,"b":[null]}'

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0"),
            (-0.0, "0"),
            (42, "42"),
            (-7, "-7"),
            (1.0, "1"),
            (100.0, "100"),
            (1.5, "1.5"),
            (-2.25, "-2.25"),
            (0.1, "0.1"),
            (123.456, "123.456"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-10, "1.5e-10"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (1.2345e25, "1.2345e+25"),
            (Decimal("1.10"), "1.1"),
            (Decimal("2500"), "2500"),
            (Decimal("NaN"), "null"),
            (Decimal("1.23456789012345678"), "1.2345678901234568"),
        ],
    )
    def test_number_rendering(self, value, expected):
        assert format_number(value) == expected
        assert canonical_dumps(value) == expected

    def test_string_escaping(self):
        assert canonical_dumps('say "hi"\n') == '"say \\"hi\\"\\n"'
        assert canonical_dumps("back\\slash") == '"back\\\\slash"'
        assert canonical_dumps("\x01") == '"\\u0001"'

    def test_non_ascii_is_not_escaped(self):
        assert canonical_dumps("กรุงเทพ") == '"กรุงเทพ"'

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            canonical_dumps(object())


class TestContainers:
    def test_empty_containers(self):
        assert canonical_dumps({}) == "{}"
        assert canonical_dumps([]) == "[]"

    def test_array_order_preserved(self):
        assert canonical_dumps([3, 1, 2]) == "[3,1,2]"
        assert canonical_dumps((True, None, "x")) == '[true,null,"x"]'

    def test_nested_sorting(self):
        value = {"b": {"y": 1, "x": 2}, "a": 1}
        assert canonical_dumps(value) == '{"a":1,"b":{"x":2,"y":1}}'

    def test_key_order_independence(self):
        first = OrderedDict([("z", 1), ("a", [{"q": 1, "p": 2}]), ("m", None)])
        second = {"m": None, "a": [{"p": 2, "q": 1}], "z": 1}
        assert canonical_dumps(first) == canonical_dumps(second)

    def test_unset_members_dropped(self):
        assert canonical_dumps({"a": 1, "b": UNSET}) == '{"a":1}'

    def test_unset_members_dropped_when_nested(self):
        value = {"outer": {"keep": 0, "drop": UNSET}, "list": [{"drop": UNSET}]}
        assert canonical_dumps(value) == '{"list":[{}],"outer":{"keep":0}}'

    def test_none_members_kept(self):
        assert canonical_dumps({"a": None}) == '{"a":null}'

    def test_unset_array_slot(self):
        assert canonical_dumps([1, UNSET]) == "[1,undefined]"

    def test_keys_sorted_by_code_unit_not_locale(self):
        value = {"b": 1, "B": 2, "a": 3, "_": 4, "10": 5, "9": 6}
        assert canonical_dumps(value) == '{"10":5,"9":6,"B":2,"_":4,"a":3,"b":1}'

    def test_astral_keys_sort_as_surrogate_pairs(self):
        # U+1F600 encodes as D83D DE00 and sorts before U+FF21
        value = {"Ａ": 1, "\U0001f600": 2}
        assert canonical_dumps(value) == '{"\U0001f600":2,"Ａ":1}'

    def test_no_whitespace(self):
        text = canonical_dumps({"a": [1, {"b": "c d"}], "e": {"f": None}})
        assert text == '{"a":[1,{"b":"c d"}],"e":{"f":null}}'

    def test_repeated_calls_are_identical(self):
        value = {"k": [1.5, {"x": "y"}], "j": False}
        assert canonical_dumps(value) == canonical_dumps(value)


class TestHelpers:
    def test_canonical_hash_is_hex_sha256(self):
        digest = canonical_hash({})
        assert digest == "44136fa355b3678a1146ad16f7e8649e94fb4fc21fe77e8310c060f61caaff8a"

    def test_strip_unset(self):
        value = {"a": UNSET, "b": [UNSET, 1], "c": {"d": UNSET}}
        assert strip_unset(value) == {"b": [None, 1], "c": {}}

    def test_dumps_body_drops_unset_and_handles_decimal(self):
        body = dumps_body({"amount": Decimal("12.5"), "skip": UNSET, "n": math.nan})
        assert body == b'{"amount":12.5,"n":null}'

    def test_decimal_wire_form_matches_canonical_form(self):
        value = Decimal("1.23456789012345678")
        assert dumps_body({"amount": value}) == b'{"amount":1.2345678901234568}'
        assert canonical_dumps(orjson.loads(dumps_body({"amount": value}))) == canonical_dumps({"amount": value})

    @pytest.mark.parametrize("value", [2**70, -(2**63) - 1, 2**64])
    def test_dumps_body_rejects_out_of_range_ints(self, value):
        with pytest.raises(ValueError, match="64-bit"):
            dumps_body({"items": [{"qty": value}]})

    @pytest.mark.parametrize("value", [-(2**63), 2**64 - 1])
    def test_dumps_body_accepts_64_bit_bounds(self, value):
        assert orjson.loads(dumps_body({"n": value})) == {"n": value}
