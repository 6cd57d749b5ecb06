"""Tests for shallow-kind and real-type classification."""

from __future__ import annotations

import math
import re
from collections import OrderedDict, UserString
from datetime import UTC, date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from typetag.domain.catalog import known_values
from typetag.domain.classify import (
    all_same_shallow_kind,
    all_unique_real_types,
    classify,
    classify_all,
    count_by_real_type,
    shallow_kind,
    shallow_kinds,
)
from typetag.domain.tags import RealType, ShallowKind
from typetag.domain.values import UNDEFINED, BigInt, FunctionRef, Symbol


def _noop() -> None:
    return None


class _Callable:
    def __call__(self) -> int:
        return 1


class TestShallowKind:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "boolean"),
            (123, "number"),
            ("whoo", "string"),
            ([], "object"),
            ({}, "object"),
            (_noop, "function"),
            (UNDEFINED, "undefined"),
            (None, "object"),
        ],
    )
    def test_basic_values(self, value: object, expected: str) -> None:
        assert shallow_kind(value) == expected

    def test_bool_is_not_a_number(self) -> None:
        assert shallow_kind(False) is ShallowKind.BOOLEAN

    def test_bigint_is_not_a_number(self) -> None:
        assert shallow_kind(BigInt(10)) is ShallowKind.BIGINT
        assert shallow_kind(10) is ShallowKind.NUMBER

    def test_floats_are_numbers(self) -> None:
        assert shallow_kind(1.5) is ShallowKind.NUMBER
        assert shallow_kind(math.nan) is ShallowKind.NUMBER
        assert shallow_kind(math.inf) is ShallowKind.NUMBER

    def test_callables_are_functions(self) -> None:
        assert shallow_kind(lambda: None) is ShallowKind.FUNCTION
        assert shallow_kind(_Callable()) is ShallowKind.FUNCTION
        assert shallow_kind(FunctionRef("f")) is ShallowKind.FUNCTION
        assert shallow_kind(dict) is ShallowKind.FUNCTION

    def test_string_wrapper_is_an_object(self) -> None:
        assert shallow_kind(UserString("12")) is ShallowKind.OBJECT

    def test_symbol(self) -> None:
        assert shallow_kind(Symbol("id")) is ShallowKind.SYMBOL


class TestClassify:
    def test_examples(self) -> None:
        assert classify(None) == "null"
        assert classify(math.nan) == "NaN"
        assert classify([]) == "array"
        assert classify({}) == "map"

    def test_numbers(self) -> None:
        assert classify(0) is RealType.NUMBER
        assert classify(-3.25) is RealType.NUMBER
        assert classify(float("inf")) is RealType.INFINITY
        assert classify(float("nan")) is RealType.NAN

    def test_negative_infinity_is_a_number(self) -> None:
        assert classify(-math.inf) is RealType.NUMBER

    def test_huge_int_does_not_overflow(self) -> None:
        assert classify(10**400) is RealType.NUMBER
        assert classify(BigInt(10**400)) is RealType.BIGINT

    def test_dates(self) -> None:
        assert classify(date(2024, 1, 31)) is RealType.DATE
        assert classify(datetime.now(UTC)) is RealType.DATE

    def test_regexp(self) -> None:
        assert classify(re.compile(r"\w+")) is RealType.REGEXP

    def test_sets(self) -> None:
        assert classify(set()) is RealType.SET
        assert classify(frozenset({1})) is RealType.SET

    def test_maps(self) -> None:
        assert classify({"a": 1}) is RealType.MAP
        assert classify(OrderedDict()) is RealType.MAP

    def test_arrays(self) -> None:
        assert classify([1, 2]) is RealType.ARRAY
        assert classify((1, 2)) is RealType.ARRAY

    def test_generic_objects(self) -> None:
        assert classify(object()) is RealType.OBJECT
        assert classify(SimpleNamespace(a=1)) is RealType.OBJECT
        assert classify(Decimal("1.5")) is RealType.OBJECT
        assert classify(b"bytes") is RealType.OBJECT
        assert classify(UserString("12")) is RealType.OBJECT

    def test_primitives_map_to_themselves(self) -> None:
        assert classify("") is RealType.STRING
        assert classify(False) is RealType.BOOLEAN
        assert classify(Symbol()) is RealType.SYMBOL
        assert classify(UNDEFINED) is RealType.UNDEFINED
        assert classify(_noop) is RealType.FUNCTION

    def test_deterministic(self) -> None:
        for _label, value in known_values():
            assert classify(value) is classify(value)

    def test_closed_set(self) -> None:
        odd_values = [object(), 1j, range(3), b"", bytearray(), memoryview(b""), iter([])]
        for value in odd_values:
            assert classify(value) in set(RealType)


class TestKnownValues:
    def test_shallow_kinds(self) -> None:
        values = [value for _label, value in known_values()]
        assert shallow_kinds(values) == [
            "object",
            "string",
            "boolean",
            "bigint",
            "symbol",
            "undefined",
            "number",
            "number",
            "number",
            "object",
            "function",
            "object",
            "object",
            "object",
            "object",
            "object",
        ]

    def test_real_types(self) -> None:
        values = [value for _label, value in known_values()]
        assert classify_all(values) == [
            "null",
            "string",
            "boolean",
            "bigint",
            "symbol",
            "undefined",
            "NaN",
            "Infinity",
            "number",
            "date",
            "function",
            "regexp",
            "set",
            "map",
            "array",
            "object",
        ]


class TestAllSameShallowKind:
    def test_all_numbers(self) -> None:
        assert all_same_shallow_kind([11, 12, 13]) is True

    def test_all_strings(self) -> None:
        assert all_same_shallow_kind(["11", "12", "13"]) is True

    def test_string_wrapper_breaks_homogeneity(self) -> None:
        assert all_same_shallow_kind(["11", UserString("12"), "13"]) is False

    def test_nan_and_infinity_are_numbers(self) -> None:
        assert all_same_shallow_kind([123, math.nan, math.inf]) is True

    def test_single_item(self) -> None:
        assert all_same_shallow_kind([{}]) is True

    def test_empty_is_vacuously_true(self) -> None:
        assert all_same_shallow_kind([]) is True

    def test_mixed(self) -> None:
        assert all_same_shallow_kind([1, "1"]) is False

    def test_accepts_iterators(self) -> None:
        assert all_same_shallow_kind(iter([1, 2.5])) is True


class TestAllUniqueRealTypes:
    def test_unique(self) -> None:
        assert all_unique_real_types([True, 123, "123"]) is True

    def test_repeated(self) -> None:
        assert all_unique_real_types([True, 123, "123" == 123]) is False

    def test_known_values_are_unique(self) -> None:
        assert all_unique_real_types(value for _label, value in known_values()) is True

    def test_empty(self) -> None:
        assert all_unique_real_types([]) is True

    def test_agrees_with_counts(self) -> None:
        samples = [
            [True, 123, "123"],
            [True, None, False],
            [None, UNDEFINED, math.nan, math.inf, -math.inf],
        ]
        for items in samples:
            counts = count_by_real_type(items)
            assert all_unique_real_types(items) == all(n == 1 for _tag, n in counts)


class TestCountByRealType:
    def test_counts_booleans(self) -> None:
        items = [True, None, not None, not not None, SimpleNamespace()]
        assert count_by_real_type(items) == [("boolean", 3), ("null", 1), ("object", 1)]

    def test_mixed_types(self) -> None:
        items = [_noop, None, datetime.now(UTC), BigInt(3123), "", "", 342343]
        assert count_by_real_type(items) == [
            ("bigint", 1),
            ("date", 1),
            ("function", 1),
            ("null", 1),
            ("number", 1),
            ("string", 2),
        ]

    def test_sorted_regardless_of_input_order(self) -> None:
        items = [object(), None, True, not None, not not None]
        assert count_by_real_type(items) == [("boolean", 3), ("null", 1), ("object", 1)]

    def test_containers_sorted(self) -> None:
        items = ["", None, {}, set(), UNDEFINED]
        assert count_by_real_type(items) == [
            ("map", 1),
            ("null", 1),
            ("set", 1),
            ("string", 1),
            ("undefined", 1),
        ]

    def test_capitalized_tags_sort_first(self) -> None:
        """Tag order is plain string order, so NaN and Infinity lead."""
        tags = [tag for tag, _n in count_by_real_type(["a", math.nan, 1, math.inf])]
        assert tags == ["Infinity", "NaN", "number", "string"]

    def test_sum_equals_length(self) -> None:
        items = [value for _label, value in known_values()] * 3
        counts = count_by_real_type(items)
        assert sum(n for _tag, n in counts) == len(items)
        assert [tag for tag, _n in counts] == sorted(tag for tag, _n in counts)

    def test_empty(self) -> None:
        assert count_by_real_type([]) == []
