"""Conversions from the compact family into general-purpose Python containers."""

from array import array
from collections import Counter, OrderedDict, deque
from typing import Any, Dict, Iterable, List, Mapping, Set

from .core import convert_map, convert_primitive_sequence, convert_sequence, convert_set


def _append(target: Any, item: Any) -> None:
    target.append(item)


def _set_add(target: Set[Any], item: Any) -> None:
    target.add(item)


def _count(target: Counter, item: Any) -> None:
    target[item] += 1


def _store(target: Dict[Any, Any], key: Any, value: Any) -> None:
    target[key] = value


def _typed_array(typecode: str):
    def factory(_capacity: int) -> array:
        return array(typecode)
    return factory


def to_list(source: Iterable[Any]) -> List[Any]:
    return convert_sequence(source, lambda _capacity: [], _append)


def to_deque(source: Iterable[Any]) -> deque:
    return convert_sequence(source, lambda _capacity: deque(), _append)


def to_set(source: Iterable[Any]) -> Set[Any]:
    return convert_set(source, lambda _capacity: set(), _set_add)


def to_counter(source: Iterable[Any]) -> Counter:
    """Count each element of a bag-like source."""
    return convert_sequence(source, lambda _capacity: Counter(), _count)


def to_dict(source: Mapping[Any, Any]) -> Dict[Any, Any]:
    return convert_map(source, lambda _capacity: {}, _store)


def to_ordered_dict(source: Mapping[Any, Any]) -> "OrderedDict[Any, Any]":
    return convert_map(source, lambda _capacity: OrderedDict(), _store)


def to_int_array(source: Iterable[int]) -> array:
    """Copy 32-bit integers into ``array('i')``."""
    return convert_primitive_sequence(source, _typed_array("i"), _append)


def to_long_array(source: Iterable[int]) -> array:
    """Copy 32- or 64-bit integers into ``array('q')``."""
    return convert_primitive_sequence(source, _typed_array("q"), _append)


def to_float_array(source: Iterable[float]) -> array:
    """Copy 32-bit floats into ``array('f')``."""
    return convert_primitive_sequence(source, _typed_array("f"), _append)


def to_double_array(source: Iterable[float]) -> array:
    """Widen 32- or 64-bit floats into ``array('d')``; widening is exact."""
    return convert_primitive_sequence(source, _typed_array("d"), _append)
