"""Conversions from general-purpose containers into the compact family.

Each function takes one source container and returns a new compact
container; sources are only iterated, never retained.
"""

from typing import Any, Iterable, Mapping

from .. import models
from ..models import (
    CaseInsensitiveMap,
    CaseInsensitiveOrderedMap,
    CaseInsensitiveOrderedSet,
    CaseInsensitiveSet,
    FloatDeque,
    FloatList,
    IntDeque,
    IntList,
    IntObjectMap,
    IntOrderedSet,
    IntSet,
    LongDeque,
    LongList,
    LongObjectMap,
    LongOrderedSet,
    LongSet,
    ObjectBag,
    ObjectDeque,
    ObjectFloatMap,
    ObjectIntMap,
    ObjectList,
    ObjectLongMap,
    ObjectMap,
    ObjectOrderedMap,
    ObjectOrderedSet,
    ObjectSet,
)
from .core import convert_map, convert_primitive_sequence, convert_sequence, convert_set


def _add(target: Any, item: Any) -> None:
    target.add(item)


def _put(target: Any, key: Any, value: Any) -> None:
    target.put(key, value)


def _primitive(source: Iterable[Any], factory, fallback=convert_sequence):
    # Typed storage (array.array, compact primitive containers) gets the
    # width check; plain iterables of numbers are range-checked on insertion.
    if hasattr(source, "typecode"):
        return convert_primitive_sequence(source, factory, _add)
    return fallback(source, factory, _add)


# Object sequences

def to_object_list(source: Iterable[Any]) -> ObjectList:
    """
    Copy any iterable into an ObjectList.

    Args:
        source: Sequence, set or other iterable to copy

    Returns:
        ObjectList with the source elements in iteration order, duplicates kept
    """
    return convert_sequence(source, ObjectList, _add)


def to_object_deque(source: Iterable[Any]) -> ObjectDeque:
    """Copy an iterable into an ObjectDeque; the first element becomes the head."""
    return convert_sequence(source, ObjectDeque, _add)


def to_object_bag(source: Iterable[Any]) -> ObjectBag:
    """Copy elements into a bag; a ``Counter`` source contributes each element ``count`` times."""
    elements = getattr(source, "elements", None)
    if callable(elements):
        return convert_sequence(list(elements()), ObjectBag, _add)
    return convert_sequence(source, ObjectBag, _add)


# Object sets

def to_object_set(source: Iterable[Any]) -> ObjectSet:
    """Copy hashable elements into an ObjectSet."""
    return convert_set(source, ObjectSet, _add)


def to_object_ordered_set(source: Iterable[Any]) -> ObjectOrderedSet:
    """Copy hashable elements into an ObjectOrderedSet, keeping first-seen order."""
    return convert_set(source, ObjectOrderedSet, _add)


def to_case_insensitive_set(source: Iterable[str]) -> CaseInsensitiveSet:
    """
    Copy strings into a CaseInsensitiveSet.

    Strings that differ only by case collapse into one entry; the last one
    written is kept.

    Raises:
        TypeError: If an element is not a str
    """
    return convert_set(source, CaseInsensitiveSet, _add)


def to_case_insensitive_ordered_set(source: Iterable[str]) -> CaseInsensitiveOrderedSet:
    """Insertion-ordered variant of :func:`to_case_insensitive_set`."""
    return convert_set(source, CaseInsensitiveOrderedSet, _add)


# Primitive sequences

def to_int_list(source: Iterable[int]) -> IntList:
    """
    Copy 32-bit integers into an IntList.

    Raises:
        ValueError: If the source is typed storage wider than 32 bits
        OverflowError: If a plain source holds a value outside the int32 range
    """
    return _primitive(source, IntList)


def to_long_list(source: Iterable[int]) -> LongList:
    """Copy 32- or 64-bit integers into a LongList without loss."""
    return _primitive(source, LongList)


def to_float_list(source: Iterable[float]) -> FloatList:
    """Copy floats into a FloatList; typed 64-bit float storage is refused."""
    return _primitive(source, FloatList)


def to_int_deque(source: Iterable[int]) -> IntDeque:
    return _primitive(source, IntDeque)


def to_long_deque(source: Iterable[int]) -> LongDeque:
    return _primitive(source, LongDeque)


def to_float_deque(source: Iterable[float]) -> FloatDeque:
    return _primitive(source, FloatDeque)


# Primitive sets

def to_int_set(source: Iterable[int]) -> IntSet:
    """Copy 32-bit integers into an IntSet, dropping duplicates."""
    return _primitive(source, IntSet, convert_set)


def to_int_ordered_set(source: Iterable[int]) -> IntOrderedSet:
    return _primitive(source, IntOrderedSet, convert_set)


def to_long_set(source: Iterable[int]) -> LongSet:
    """Copy 32- or 64-bit integers into a LongSet, dropping duplicates."""
    return _primitive(source, LongSet, convert_set)


def to_long_ordered_set(source: Iterable[int]) -> LongOrderedSet:
    return _primitive(source, LongOrderedSet, convert_set)


# Maps

def to_object_map(source: Mapping[Any, Any]) -> ObjectMap:
    """
    Copy the pairs of any mapping into an ObjectMap.

    Args:
        source: Mapping exposing ``items()``

    Returns:
        ObjectMap holding every source key once
    """
    return convert_map(source, ObjectMap, _put)


def to_object_ordered_map(source: Mapping[Any, Any]) -> ObjectOrderedMap:
    """Copy pairs into an ObjectOrderedMap in the source's iteration order."""
    return convert_map(source, ObjectOrderedMap, _put)


def to_case_insensitive_map(source: Mapping[str, Any]) -> CaseInsensitiveMap:
    """Copy pairs with string keys; keys that differ only by case keep the last pair."""
    return convert_map(source, CaseInsensitiveMap, _put)


def to_case_insensitive_ordered_map(source: Mapping[str, Any]) -> CaseInsensitiveOrderedMap:
    return convert_map(source, CaseInsensitiveOrderedMap, _put)


def to_int_object_map(source: Mapping[int, Any]) -> IntObjectMap:
    """Copy pairs with 32-bit int keys; out-of-range keys raise ``OverflowError``."""
    return convert_map(source, IntObjectMap, _put)


def to_int_object_ordered_map(source: Mapping[int, Any]) -> models.IntObjectOrderedMap:
    return convert_map(source, models.IntObjectOrderedMap, _put)


def to_long_object_map(source: Mapping[int, Any]) -> LongObjectMap:
    """Copy pairs with 64-bit int keys."""
    return convert_map(source, LongObjectMap, _put)


def to_long_object_ordered_map(source: Mapping[int, Any]) -> models.LongObjectOrderedMap:
    return convert_map(source, models.LongObjectOrderedMap, _put)


def to_object_int_map(source: Mapping[Any, int]) -> ObjectIntMap:
    """Copy pairs with 32-bit int values; out-of-range values raise ``OverflowError``."""
    return convert_map(source, ObjectIntMap, _put)


def to_object_int_ordered_map(source: Mapping[Any, int]) -> models.ObjectIntOrderedMap:
    return convert_map(source, models.ObjectIntOrderedMap, _put)


def to_object_long_map(source: Mapping[Any, int]) -> ObjectLongMap:
    """Copy pairs with 64-bit int values."""
    return convert_map(source, ObjectLongMap, _put)


def to_object_long_ordered_map(source: Mapping[Any, int]) -> models.ObjectLongOrderedMap:
    return convert_map(source, models.ObjectLongOrderedMap, _put)


def to_object_float_map(source: Mapping[Any, float]) -> ObjectFloatMap:
    """Copy pairs with float values, rounded to 32-bit storage."""
    return convert_map(source, ObjectFloatMap, _put)


def to_object_float_ordered_map(source: Mapping[Any, float]) -> models.ObjectFloatOrderedMap:
    return convert_map(source, models.ObjectFloatOrderedMap, _put)


# Primitive keys to primitive values

def to_int_int_map(source: Mapping[int, int]) -> models.IntIntMap:
    """
    Copy pairs whose keys and values are both 32-bit integers.

    Raises:
        TypeError: If a key or value is not an int
        OverflowError: If a key or value is outside the int32 range
    """
    return convert_map(source, models.IntIntMap, _put)


def to_int_int_ordered_map(source: Mapping[int, int]) -> models.IntIntOrderedMap:
    return convert_map(source, models.IntIntOrderedMap, _put)


def to_int_long_map(source: Mapping[int, int]) -> models.IntLongMap:
    return convert_map(source, models.IntLongMap, _put)


def to_int_long_ordered_map(source: Mapping[int, int]) -> models.IntLongOrderedMap:
    return convert_map(source, models.IntLongOrderedMap, _put)


def to_int_float_map(source: Mapping[int, float]) -> models.IntFloatMap:
    return convert_map(source, models.IntFloatMap, _put)


def to_int_float_ordered_map(source: Mapping[int, float]) -> models.IntFloatOrderedMap:
    return convert_map(source, models.IntFloatOrderedMap, _put)


def to_long_int_map(source: Mapping[int, int]) -> models.LongIntMap:
    return convert_map(source, models.LongIntMap, _put)


def to_long_int_ordered_map(source: Mapping[int, int]) -> models.LongIntOrderedMap:
    return convert_map(source, models.LongIntOrderedMap, _put)


def to_long_long_map(source: Mapping[int, int]) -> models.LongLongMap:
    """Copy pairs whose keys and values are both 64-bit integers."""
    return convert_map(source, models.LongLongMap, _put)


def to_long_long_ordered_map(source: Mapping[int, int]) -> models.LongLongOrderedMap:
    return convert_map(source, models.LongLongOrderedMap, _put)


def to_long_float_map(source: Mapping[int, float]) -> models.LongFloatMap:
    return convert_map(source, models.LongFloatMap, _put)


def to_long_float_ordered_map(source: Mapping[int, float]) -> models.LongFloatOrderedMap:
    return convert_map(source, models.LongFloatOrderedMap, _put)
