"""Object set containers of the compact family."""

from typing import Any, Dict, Hashable, Iterable, Iterator

from .sequences import _check_capacity

_MISSING = object()


def fold_case(item: Any) -> str:
    """Equality key used by the case-insensitive containers."""
    if not isinstance(item, str):
        raise TypeError(f"case-insensitive containers only hold str, got {type(item).__name__}")
    return item.casefold()


class ObjectSet:
    """
    Hash set of arbitrary hashable objects.

    Entries are kept as ``equality key -> stored item``. Adding an item whose
    key is already present replaces the stored item (last write wins), which
    only becomes visible when the equality key is coarser than ``==``.
    """

    ordered = False

    def __init__(self, capacity: int = 0):
        _check_capacity(capacity)
        self._entries: Dict[Hashable, Any] = {}

    @classmethod
    def with_items(cls, *items: Any):
        result = cls(len(items))
        result.add_all(items)
        return result

    @staticmethod
    def key_of(item: Any) -> Hashable:
        return item

    def add(self, item: Any) -> bool:
        """Add an item; return True if its equality key was not present yet."""
        key = self.key_of(item)
        is_new = key not in self._entries
        self._entries[key] = item
        return is_new

    def add_all(self, items: Iterable[Any]) -> None:
        for item in items:
            self.add(item)

    def remove(self, item: Any) -> bool:
        """Remove the entry whose equality key matches ``item``; return True if one existed."""
        return self._entries.pop(self.key_of(item), _MISSING) is not _MISSING

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, item: Any) -> bool:
        try:
            return self.key_of(item) in self._entries
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._entries.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectSet):
            return NotImplemented
        if type(self).key_of is not type(other).key_of:
            return False
        return self._entries.keys() == other._entries.keys()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._entries.values())!r})"


class ObjectOrderedSet(ObjectSet):
    """Object set that iterates in first-insertion order."""

    ordered = True

    def first(self) -> Any:
        """
        Earliest inserted item still in the set.

        Raises:
            IndexError: If the set is empty
        """
        if not self._entries:
            raise IndexError("first() on an empty set")
        return next(iter(self._entries.values()))

    def __getitem__(self, index: int) -> Any:
        return list(self._entries.values())[index]


class CaseInsensitiveSet(ObjectSet):
    """Set of strings compared with ``str.casefold``."""

    key_of = staticmethod(fold_case)


class CaseInsensitiveOrderedSet(ObjectOrderedSet):
    """Insertion-ordered set of strings compared with ``str.casefold``."""

    key_of = staticmethod(fold_case)
