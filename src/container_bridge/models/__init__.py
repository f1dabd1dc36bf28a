"""Compact container family used on the performance side of the bridge."""

from .sequences import ObjectList, ObjectDeque, ObjectBag
from .sets import ObjectSet, ObjectOrderedSet, CaseInsensitiveSet, CaseInsensitiveOrderedSet
from .primitives import (
    IntList, LongList, FloatList,
    IntDeque, LongDeque, FloatDeque,
    IntSet, IntOrderedSet, LongSet, LongOrderedSet,
)
from .maps import (
    ObjectMap, ObjectOrderedMap,
    CaseInsensitiveMap, CaseInsensitiveOrderedMap,
    IntObjectMap, IntObjectOrderedMap, LongObjectMap, LongObjectOrderedMap,
    ObjectIntMap, ObjectIntOrderedMap, ObjectLongMap, ObjectLongOrderedMap,
    ObjectFloatMap, ObjectFloatOrderedMap,
    IntIntMap, IntIntOrderedMap, IntLongMap, IntLongOrderedMap,
    IntFloatMap, IntFloatOrderedMap, LongIntMap, LongIntOrderedMap,
    LongLongMap, LongLongOrderedMap, LongFloatMap, LongFloatOrderedMap,
)

__all__ = [
    "ObjectList", "ObjectDeque", "ObjectBag",
    "ObjectSet", "ObjectOrderedSet", "CaseInsensitiveSet", "CaseInsensitiveOrderedSet",
    "IntList", "LongList", "FloatList",
    "IntDeque", "LongDeque", "FloatDeque",
    "IntSet", "IntOrderedSet", "LongSet", "LongOrderedSet",
    "ObjectMap", "ObjectOrderedMap",
    "CaseInsensitiveMap", "CaseInsensitiveOrderedMap",
    "IntObjectMap", "IntObjectOrderedMap", "LongObjectMap", "LongObjectOrderedMap",
    "ObjectIntMap", "ObjectIntOrderedMap", "ObjectLongMap", "ObjectLongOrderedMap",
    "ObjectFloatMap", "ObjectFloatOrderedMap",
    "IntIntMap", "IntIntOrderedMap", "IntLongMap", "IntLongOrderedMap",
    "IntFloatMap", "IntFloatOrderedMap", "LongIntMap", "LongIntOrderedMap",
    "LongLongMap", "LongLongOrderedMap", "LongFloatMap", "LongFloatOrderedMap",
]
