"""Tests for structural conversions between container families."""

import logging
import pytest
from array import array
from collections import Counter, OrderedDict, deque

from container_bridge.conversion import (
    convert_map,
    convert_primitive_sequence,
    convert_sequence,
    convert_set,
    to_compact,
    to_std,
)
from container_bridge.conversion.core import size_hint
from container_bridge.models import (
    CaseInsensitiveSet,
    FloatList,
    IntList,
    IntSet,
    LongList,
    ObjectBag,
    ObjectList,
    ObjectMap,
    ObjectOrderedMap,
)


class TestCoreConversions:
    """Tests for the generic conversion functions."""

    def test_size_hint_for_sized_and_unsized_sources(self):
        assert size_hint([1, 2, 3]) == 3
        assert size_hint(iter([1, 2])) == 2
        assert size_hint(x for x in range(3)) == 0

    def test_convert_sequence_uses_capacity_hint(self):
        capacities = []

        def factory(capacity):
            capacities.append(capacity)
            return []

        result = convert_sequence(("a", "b"), factory, lambda target, item: target.append(item))

        assert result == ["a", "b"]
        assert capacities == [2]

    def test_convert_set_applies_target_equality(self):
        result = convert_set(["Time", "TIME", "time"], CaseInsensitiveSet, lambda t, i: t.add(i))

        assert len(result) == 1

    def test_convert_map_in_source_order(self):
        source = OrderedDict([("z", 1), ("a", 2)])
        result = convert_map(source, ObjectOrderedMap, lambda t, k, v: t.put(k, v))

        assert list(result.items()) == [("z", 1), ("a", 2)]

    def test_convert_primitive_sequence_requires_typecodes(self):
        with pytest.raises(ValueError):
            convert_primitive_sequence([1, 2], IntList, lambda t, v: t.add(v))

    def test_conversion_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="container_bridge.conversion.core"):
            convert_sequence([1], ObjectList, lambda t, i: t.add(i))

        assert "Converted sequence list -> ObjectList" in caplog.text


class TestToCompact:
    """Tests for general-purpose -> compact conversions."""

    def test_list_order_preserved(self):
        result = to_compact.to_object_list(["c", "a", "b", "a"])

        assert list(result) == ["c", "a", "b", "a"]

    def test_deque_order_preserved(self):
        result = to_compact.to_object_deque(deque([3, 1, 2]))

        assert list(result) == [3, 1, 2]
        assert result.peek_first() == 3

    def test_counter_expands_into_bag(self):
        result = to_compact.to_object_bag(Counter({"a": 2, "b": 1}))

        assert isinstance(result, ObjectBag)
        assert len(result) == 3
        assert result.count("a") == 2

    def test_list_into_bag_keeps_duplicates(self):
        result = to_compact.to_object_bag(["a", "a"])

        assert result.count("a") == 2

    def test_case_folding_collapses_only_in_case_insensitive_set(self):
        source = ["Time", "TIME", "time"]

        assert len(to_compact.to_case_insensitive_set(source)) == 1
        assert len(to_compact.to_case_insensitive_ordered_set(source)) == 1
        assert len(to_compact.to_object_set(source)) == 3
        assert len(to_compact.to_object_ordered_set(source)) == 3

    def test_ordered_set_keeps_source_order(self):
        result = to_compact.to_object_ordered_set(["b", "a", "c"])

        assert list(result) == ["b", "a", "c"]

    def test_long_list_preserves_64_bit_values(self, long_values):
        result = to_compact.to_long_list(long_values)

        assert list(result) == long_values

    def test_long_list_from_long_array(self, long_values):
        result = to_compact.to_long_list(array("q", long_values))

        assert isinstance(result, LongList)
        assert list(result) == long_values

    def test_int_list_refuses_narrowing(self, long_values):
        with pytest.raises(ValueError, match="narrowing"):
            to_compact.to_int_list(array("q", long_values))

    def test_int_list_from_plain_list_overflows(self, long_values):
        with pytest.raises(OverflowError):
            to_compact.to_int_list(long_values)

    def test_long_list_widens_int_array(self):
        result = to_compact.to_long_list(array("i", [1, -2]))

        assert list(result) == [1, -2]

    def test_float_list_refuses_double_array(self):
        with pytest.raises(ValueError):
            to_compact.to_float_list(array("d", [0.1]))

    def test_float_list_from_float_array(self):
        source = array("f", [1.5, 0.1])
        result = to_compact.to_float_list(source)

        assert list(result) == list(source)

    def test_primitive_deques(self, long_values):
        assert list(to_compact.to_int_deque([1, 2])) == [1, 2]
        assert list(to_compact.to_long_deque(long_values)) == long_values
        assert list(to_compact.to_float_deque([0.5])) == [0.5]

    def test_primitive_sets(self, long_values):
        assert set(to_compact.to_int_set({1, 2})) == {1, 2}
        assert list(to_compact.to_int_ordered_set([3, 1, 3])) == [3, 1]
        assert set(to_compact.to_long_set(long_values)) == set(long_values)
        assert list(to_compact.to_long_ordered_set(long_values)) == long_values

    def test_int_set_rejects_long_values(self, long_values):
        with pytest.raises(OverflowError):
            to_compact.to_int_set(long_values)

    def test_int_set_from_int_list(self):
        result = to_compact.to_int_set(IntList.with_items(1, 1, 2))

        assert isinstance(result, IntSet)
        assert len(result) == 2

    def test_maps(self):
        source = {"a": 1, "b": 2}

        assert to_compact.to_object_map(source) == ObjectMap.with_pairs(("a", 1), ("b", 2))
        assert list(to_compact.to_object_ordered_map(source).items()) == [("a", 1), ("b", 2)]
        assert to_compact.to_object_int_map(source)["b"] == 2
        assert to_compact.to_object_long_map({"big": 4200000000000000})["big"] == 4200000000000000
        assert to_compact.to_object_float_map({"half": 0.5})["half"] == 0.5
        assert to_compact.to_int_object_map({1: "one"})[1] == "one"
        assert to_compact.to_long_object_map({666666666666: "x"})[666666666666] == "x"

    def test_ordered_primitive_maps(self):
        source = OrderedDict([("b", 2), ("a", 1)])

        assert list(to_compact.to_object_int_ordered_map(source).items()) == [("b", 2), ("a", 1)]
        assert list(to_compact.to_object_long_ordered_map(source).items()) == [("b", 2), ("a", 1)]
        assert list(to_compact.to_object_float_ordered_map({"x": 0.5}).items()) == [("x", 0.5)]
        assert list(to_compact.to_int_object_ordered_map({2: "b", 1: "a"}).items()) == [(2, "b"), (1, "a")]
        assert list(to_compact.to_long_object_ordered_map({666666666666: None}).items()) == [(666666666666, None)]

    def test_primitive_to_primitive_maps(self):
        assert to_compact.to_int_int_map({1: 2})[1] == 2
        assert to_compact.to_int_long_map({1: 4200000000000000})[1] == 4200000000000000
        assert to_compact.to_int_float_map({1: 0.5})[1] == 0.5
        assert to_compact.to_long_int_map({666666666666: 2})[666666666666] == 2
        assert to_compact.to_long_long_map({666666666666: 666666666666})[666666666666] == 666666666666
        assert to_compact.to_long_float_map({666666666666: -1.5})[666666666666] == -1.5
        ordered = [
            to_compact.to_int_int_ordered_map({3: 1, 1: 3}),
            to_compact.to_int_long_ordered_map({3: 1, 1: 3}),
            to_compact.to_int_float_ordered_map({3: 1, 1: 3}),
            to_compact.to_long_int_ordered_map({3: 1, 1: 3}),
            to_compact.to_long_long_ordered_map({3: 1, 1: 3}),
            to_compact.to_long_float_ordered_map({3: 1, 1: 3}),
        ]
        assert all(list(mapping.items()) == [(3, 1), (1, 3)] for mapping in ordered)

    def test_int_int_map_rejects_long_values(self):
        with pytest.raises(OverflowError):
            to_compact.to_int_int_map({1: 4200000000000000})

    def test_case_insensitive_maps(self):
        source = {"Key": 1, "KEY": 2, "other": 3}

        assert len(to_compact.to_case_insensitive_map(source)) == 2
        result = to_compact.to_case_insensitive_ordered_map(source)
        assert list(result.items()) == [("KEY", 2), ("other", 3)]

    def test_source_not_modified(self):
        source = ["Time", "TIME"]
        to_compact.to_case_insensitive_set(source)

        assert source == ["Time", "TIME"]


class TestToStd:
    """Tests for compact -> general-purpose conversions."""

    def test_list_and_deque(self):
        source = ObjectList.with_items("x", "y", "x")

        assert to_std.to_list(source) == ["x", "y", "x"]
        assert to_std.to_deque(source) == deque(["x", "y", "x"])

    def test_set(self):
        assert to_std.to_set(to_compact.to_object_set(["a", "b", "a"])) == {"a", "b"}

    def test_counter_from_bag(self):
        bag = ObjectBag.with_items("a", "b", "a")

        assert to_std.to_counter(bag) == Counter({"a": 2, "b": 1})

    def test_dict_and_ordered_dict(self):
        source = ObjectOrderedMap.with_pairs(("z", 1), ("a", 2))

        assert to_std.to_dict(source) == {"z": 1, "a": 2}
        result = to_std.to_ordered_dict(source)
        assert isinstance(result, OrderedDict)
        assert list(result) == ["z", "a"]

    def test_long_array_from_int_list_widens(self):
        result = to_std.to_long_array(IntList.with_items(1, 2))

        assert result.typecode == "q"
        assert list(result) == [1, 2]

    def test_long_array_preserves_values(self, long_values):
        result = to_std.to_long_array(LongList.with_items(*long_values))

        assert list(result) == long_values

    def test_int_array_refuses_long_list(self, long_values):
        with pytest.raises(ValueError):
            to_std.to_int_array(LongList.with_items(*long_values))

    def test_double_array_widens_exactly(self):
        source = FloatList.with_items(0.1, 1.5)
        result = to_std.to_double_array(source)

        assert result.typecode == "d"
        assert list(result) == list(source)

    def test_float_array(self):
        result = to_std.to_float_array(FloatList.with_items(2.5))

        assert result == array("f", [2.5])

    def test_round_trip_through_both_families(self, long_values):
        compact = to_compact.to_long_list(long_values)

        assert list(to_std.to_long_array(compact)) == long_values
