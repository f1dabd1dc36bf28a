"""Map containers of the compact family."""

from typing import Any, Dict, Hashable, Iterator, Optional, Tuple

from ..utils.numeric import fits_int32, fits_int64, to_float32
from .sequences import _check_capacity
from .sets import fold_case


def _int32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if not fits_int32(value):
        raise OverflowError(f"{value} does not fit in 32 bits")
    return value


def _int64(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if not fits_int64(value):
        raise OverflowError(f"{value} does not fit in 64 bits")
    return value


def _float32(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected float, got {type(value).__name__}")
    return to_float32(float(value))


class ObjectMap:
    """
    Hash map from objects to objects.

    Entries are stored as ``equality key -> (key, value)``. Putting a key
    whose equality key already exists replaces both the stored key and the
    value, keeping the entry's original position.
    """

    ordered = False
    check_key = None
    check_value = None

    def __init__(self, capacity: int = 0):
        _check_capacity(capacity)
        self._entries: Dict[Hashable, Tuple[Any, Any]] = {}

    @classmethod
    def with_pairs(cls, *pairs: Tuple[Any, Any]):
        result = cls(len(pairs))
        for key, value in pairs:
            result.put(key, value)
        return result

    @staticmethod
    def key_of(key: Any) -> Hashable:
        return key

    def put(self, key: Any, value: Any) -> Optional[Any]:
        """Associate ``value`` with ``key``; return the previous value or None."""
        if self.check_key is not None:
            key = self.check_key(key)
        if self.check_value is not None:
            value = self.check_value(value)
        folded = self.key_of(key)
        previous = self._entries.get(folded)
        self._entries[folded] = (key, value)
        return previous[1] if previous is not None else None

    def get(self, key: Any, default: Any = None) -> Any:
        """Value stored under ``key``, or ``default`` when the key is absent."""
        entry = self._entries.get(self.key_of(key))
        return entry[1] if entry is not None else default

    def remove(self, key: Any) -> Optional[Any]:
        """Remove ``key`` and return its value, or None when the key is absent."""
        entry = self._entries.pop(self.key_of(key), None)
        return entry[1] if entry is not None else None

    def keys(self) -> Iterator[Any]:
        return (key for key, _ in list(self._entries.values()))

    def values(self) -> Iterator[Any]:
        return (value for _, value in list(self._entries.values()))

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Stored ``(key, value)`` pairs; keys are returned as last written."""
        return iter(list(self._entries.values()))

    def __getitem__(self, key: Any) -> Any:
        entry = self._entries.get(self.key_of(key))
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __contains__(self, key: Any) -> bool:
        try:
            return self.key_of(key) in self._entries
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectMap):
            return NotImplemented
        if type(self).key_of is not type(other).key_of:
            return False
        mine = {folded: entry[1] for folded, entry in self._entries.items()}
        theirs = {folded: entry[1] for folded, entry in other._entries.items()}
        return mine == theirs

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{body}}})"


class ObjectOrderedMap(ObjectMap):
    """Object map that iterates in first-insertion order."""

    ordered = True


class CaseInsensitiveMap(ObjectMap):
    """Map with string keys compared with ``str.casefold``."""

    key_of = staticmethod(fold_case)


class CaseInsensitiveOrderedMap(ObjectOrderedMap):
    """Insertion-ordered map with string keys compared with ``str.casefold``."""

    key_of = staticmethod(fold_case)


class IntObjectMap(ObjectMap):
    """Map from 32-bit int keys to objects."""

    check_key = staticmethod(_int32)


class IntObjectOrderedMap(IntObjectMap):
    ordered = True


class LongObjectMap(ObjectMap):
    """Map from 64-bit int keys to objects."""

    check_key = staticmethod(_int64)


class LongObjectOrderedMap(LongObjectMap):
    ordered = True


class ObjectIntMap(ObjectMap):
    """Map from objects to 32-bit int values."""

    check_value = staticmethod(_int32)


class ObjectIntOrderedMap(ObjectIntMap):
    ordered = True


class ObjectLongMap(ObjectMap):
    """Map from objects to 64-bit int values."""

    check_value = staticmethod(_int64)


class ObjectLongOrderedMap(ObjectLongMap):
    ordered = True


class ObjectFloatMap(ObjectMap):
    """Map from objects to 32-bit float values; values are rounded on insertion."""

    check_value = staticmethod(_float32)


class ObjectFloatOrderedMap(ObjectFloatMap):
    ordered = True


# Primitive keys to primitive values

class IntIntMap(ObjectMap):
    check_key = staticmethod(_int32)
    check_value = staticmethod(_int32)


class IntIntOrderedMap(IntIntMap):
    ordered = True


class IntLongMap(ObjectMap):
    check_key = staticmethod(_int32)
    check_value = staticmethod(_int64)


class IntLongOrderedMap(IntLongMap):
    ordered = True


class IntFloatMap(ObjectMap):
    check_key = staticmethod(_int32)
    check_value = staticmethod(_float32)


class IntFloatOrderedMap(IntFloatMap):
    ordered = True


class LongIntMap(ObjectMap):
    check_key = staticmethod(_int64)
    check_value = staticmethod(_int32)


class LongIntOrderedMap(LongIntMap):
    ordered = True


class LongLongMap(ObjectMap):
    check_key = staticmethod(_int64)
    check_value = staticmethod(_int64)


class LongLongOrderedMap(LongLongMap):
    ordered = True


class LongFloatMap(ObjectMap):
    check_key = staticmethod(_int64)
    check_value = staticmethod(_float32)


class LongFloatOrderedMap(LongFloatMap):
    ordered = True
