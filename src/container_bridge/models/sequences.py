"""Object sequence containers of the compact family."""

from collections import Counter, deque
from typing import Any, Iterable, Iterator, List


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")


class ObjectList:
    """
    Ordered, index-addressable list of arbitrary objects.

    The capacity argument is only a sizing hint; the list grows as needed.
    """

    def __init__(self, capacity: int = 0):
        _check_capacity(capacity)
        self._items: List[Any] = []

    @classmethod
    def with_items(cls, *items: Any) -> "ObjectList":
        result = cls(len(items))
        result.add_all(items)
        return result

    def add(self, item: Any) -> None:
        self._items.append(item)

    def add_all(self, items: Iterable[Any]) -> None:
        for item in items:
            self.add(item)

    def insert(self, index: int, item: Any) -> None:
        """Insert an item before ``index``, shifting later items right."""
        self._items.insert(index, item)

    def remove_at(self, index: int) -> Any:
        """
        Remove and return the item at ``index``.

        Raises:
            IndexError: If the index is out of range
        """
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class ObjectDeque:
    """Double-ended queue of arbitrary objects; iteration runs head to tail."""

    def __init__(self, capacity: int = 0):
        _check_capacity(capacity)
        self._items: deque = deque()

    @classmethod
    def with_items(cls, *items: Any) -> "ObjectDeque":
        result = cls(len(items))
        for item in items:
            result.add_last(item)
        return result

    def add(self, item: Any) -> None:
        self.add_last(item)

    def add_first(self, item: Any) -> None:
        self._items.appendleft(item)

    def add_last(self, item: Any) -> None:
        self._items.append(item)

    def remove_first(self) -> Any:
        if not self._items:
            raise IndexError("remove_first from an empty deque")
        return self._items.popleft()

    def remove_last(self) -> Any:
        if not self._items:
            raise IndexError("remove_last from an empty deque")
        return self._items.pop()

    def peek_first(self) -> Any:
        if not self._items:
            raise IndexError("peek_first on an empty deque")
        return self._items[0]

    def peek_last(self) -> Any:
        if not self._items:
            raise IndexError("peek_last on an empty deque")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectDeque):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class ObjectBag:
    """
    Unordered collection of objects that keeps duplicates.

    Removal moves the last item into the freed slot, so iteration order is
    only stable between mutations. Equality compares element multiplicities.
    """

    def __init__(self, capacity: int = 0):
        _check_capacity(capacity)
        self._items: List[Any] = []

    @classmethod
    def with_items(cls, *items: Any) -> "ObjectBag":
        result = cls(len(items))
        for item in items:
            result.add(item)
        return result

    def add(self, item: Any) -> None:
        self._items.append(item)

    def remove(self, item: Any) -> bool:
        """
        Remove one occurrence of ``item``.

        The last item moves into the freed slot.

        Returns:
            True if an occurrence was found and removed
        """
        for index, existing in enumerate(self._items):
            if existing == item:
                last = self._items.pop()
                if index < len(self._items):
                    self._items[index] = last
                return True
        return False

    def count(self, item: Any) -> int:
        """Number of occurrences of ``item`` in the bag."""
        return sum(1 for existing in self._items if existing == item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectBag):
            return NotImplemented
        return Counter(self._items) == Counter(other._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
