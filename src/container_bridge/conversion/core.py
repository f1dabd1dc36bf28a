"""Generic single-pass conversions shared by both conversion directions."""

import logging
import operator
from typing import Any, Callable, Iterable, Mapping, TypeVar

from ..utils.numeric import is_widening

T = TypeVar("T")

logger = logging.getLogger(__name__)


def size_hint(source: Iterable[Any]) -> int:
    """Reported element count of a source, used as the target capacity."""
    try:
        return len(source)  # type: ignore[arg-type]
    except TypeError:
        return operator.length_hint(source)


def convert_sequence(source: Iterable[Any], factory: Callable[[int], T],
                     add: Callable[[T, Any], Any]) -> T:
    """
    Copy every element of ``source`` into a new target, in iteration order.

    Args:
        source: Container to copy from
        factory: Builds an empty target from a capacity hint
        add: Appends one element to the target

    Returns:
        The new target, holding the same elements including duplicates
    """
    target = factory(size_hint(source))
    for item in source:
        add(target, item)
    logger.debug(f"Converted sequence {type(source).__name__} -> {type(target).__name__}")
    return target


def convert_set(source: Iterable[Any], factory: Callable[[int], T],
                add: Callable[[T, Any], Any]) -> T:
    """
    Copy the elements of ``source`` into a new set-like target.

    When the target's equality is coarser than the source's (for example
    case-insensitive), elements that collide are resolved by the target's own
    insertion rule; the compact sets keep the last one written.
    """
    target = factory(size_hint(source))
    for item in source:
        add(target, item)
    logger.debug(f"Converted set {type(source).__name__} -> {type(target).__name__} "
                 f"({size_hint(source)} -> {size_hint(target)} elements)")
    return target


def convert_map(source: Mapping[Any, Any], factory: Callable[[int], T],
                put: Callable[[T, Any, Any], Any]) -> T:
    """
    Copy the key/value pairs of ``source`` into a new map-like target.

    Pairs are inserted in the source's iteration order, so an ordered target
    replicates the source order.
    """
    target = factory(size_hint(source))
    for key, value in source.items():
        put(target, key, value)
    logger.debug(f"Converted map {type(source).__name__} -> {type(target).__name__}")
    return target


def convert_primitive_sequence(source: Iterable[Any], factory: Callable[[int], T],
                               add: Callable[[T, Any], Any]) -> T:
    """
    Copy a primitive-specialized sequence into primitive storage.

    Both sides must expose a ``typecode``; the target width must be equal to
    or wider than the source width, so every value is copied bit-exactly.

    Raises:
        ValueError: If the target storage would narrow the source values
    """
    target = factory(size_hint(source))
    source_code = getattr(source, "typecode", None)
    target_code = getattr(target, "typecode", None)
    if source_code is None or target_code is None:
        raise ValueError(f"Primitive conversion needs typed storage on both sides, got "
                         f"{type(source).__name__} -> {type(target).__name__}")
    if not is_widening(source_code, target_code):
        raise ValueError(f"Refusing narrowing conversion from '{source_code}' to '{target_code}' storage")
    for value in source:
        add(target, value)
    logger.debug(f"Converted primitive sequence '{source_code}' -> '{target_code}' "
                 f"({size_hint(target)} values)")
    return target
