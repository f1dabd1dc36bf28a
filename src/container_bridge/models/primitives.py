"""Primitive-specialized containers of the compact family.

Values are stored unboxed in ``array.array`` buffers (sequences) or checked
against the storage width before insertion (sets), so a 64-bit long never
passes through a narrower representation.
"""

from array import array
from typing import Dict, Iterable, Iterator, Set, Union

from ..utils.numeric import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from .sequences import _check_capacity

Number = Union[int, float]


class PrimitiveList:
    """Ordered list backed by an ``array.array`` of a fixed typecode."""

    TYPECODE = "q"

    def __init__(self, capacity: int = 0):
        _check_capacity(capacity)
        self._items = array(self.TYPECODE)

    @classmethod
    def with_items(cls, *items: Number):
        result = cls(len(items))
        result.add_all(items)
        return result

    @property
    def typecode(self) -> str:
        return self.TYPECODE

    def add(self, value: Number) -> None:
        """
        Append a value to the end of the list.

        Raises:
            OverflowError: If an integer does not fit the storage width
            TypeError: If the value is not a number
        """
        self._items.append(value)

    def add_all(self, values: Iterable[Number]) -> None:
        for value in values:
            self.add(value)

    def to_array(self) -> array:
        """Copy of the backing storage as an ``array.array`` of the same typecode."""
        return array(self.TYPECODE, self._items)

    def __getitem__(self, index: int) -> Number:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveList):
            return NotImplemented
        return self.TYPECODE == other.TYPECODE and self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items.tolist()!r})"


class IntList(PrimitiveList):
    """List of 32-bit signed integers."""

    TYPECODE = "i"


class LongList(PrimitiveList):
    """List of 64-bit signed integers."""

    TYPECODE = "q"


class FloatList(PrimitiveList):
    """List of 32-bit floats; values are rounded to float32 on insertion."""

    TYPECODE = "f"


class PrimitiveDeque(PrimitiveList):
    """Double-ended queue over primitive storage; iteration runs head to tail."""

    def add(self, value: Number) -> None:
        self.add_last(value)

    def add_first(self, value: Number) -> None:
        self._items.insert(0, value)

    def add_last(self, value: Number) -> None:
        self._items.append(value)

    def remove_first(self) -> Number:
        if not self._items:
            raise IndexError("remove_first from an empty deque")
        return self._items.pop(0)

    def remove_last(self) -> Number:
        if not self._items:
            raise IndexError("remove_last from an empty deque")
        return self._items.pop()

    def peek_first(self) -> Number:
        if not self._items:
            raise IndexError("peek_first on an empty deque")
        return self._items[0]

    def peek_last(self) -> Number:
        if not self._items:
            raise IndexError("peek_last on an empty deque")
        return self._items[-1]


class IntDeque(PrimitiveDeque):
    """Deque of 32-bit signed integers."""

    TYPECODE = "i"


class LongDeque(PrimitiveDeque):
    """Deque of 64-bit signed integers."""

    TYPECODE = "q"


class FloatDeque(PrimitiveDeque):
    """Deque of 32-bit floats."""

    TYPECODE = "f"


class PrimitiveSet:
    """Set of integers limited to the range of its storage width."""

    TYPECODE = "q"
    MIN_VALUE = INT64_MIN
    MAX_VALUE = INT64_MAX
    ordered = False

    def __init__(self, capacity: int = 0):
        _check_capacity(capacity)
        self._items: Union[Set[int], Dict[int, None]] = {} if self.ordered else set()

    @classmethod
    def with_items(cls, *items: int):
        result = cls(len(items))
        result.add_all(items)
        return result

    @property
    def typecode(self) -> str:
        return self.TYPECODE

    def _check(self, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{type(self).__name__} only holds int, got {type(value).__name__}")
        if not self.MIN_VALUE <= value <= self.MAX_VALUE:
            raise OverflowError(f"{value} does not fit in {type(self).__name__}")
        return value

    def add(self, value: int) -> bool:
        """
        Add an integer to the set.

        Returns:
            True if the value was not present yet

        Raises:
            TypeError: If the value is not an int (bools are rejected)
            OverflowError: If the value is outside the storage range
        """
        value = self._check(value)
        if value in self._items:
            return False
        if self.ordered:
            self._items[value] = None
        else:
            self._items.add(value)
        return True

    def add_all(self, values: Iterable[int]) -> None:
        for value in values:
            self.add(value)

    def remove(self, value: int) -> bool:
        """Remove an integer; return True if it was present."""
        if value not in self._items:
            return False
        if self.ordered:
            del self._items[value]
        else:
            self._items.discard(value)
        return True

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveSet):
            return NotImplemented
        return set(self._items) == set(other._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class IntSet(PrimitiveSet):
    """Set of 32-bit signed integers."""

    TYPECODE = "i"
    MIN_VALUE = INT32_MIN
    MAX_VALUE = INT32_MAX


class IntOrderedSet(IntSet):
    """IntSet that iterates in first-insertion order."""

    ordered = True


class LongSet(PrimitiveSet):
    """Set of 64-bit signed integers."""

    TYPECODE = "q"
    MIN_VALUE = INT64_MIN
    MAX_VALUE = INT64_MAX


class LongOrderedSet(LongSet):
    """LongSet that iterates in first-insertion order."""

    ordered = True
