"""Built-in (write, read) handlers for every container kind.

Every kind is written as an array node. Sequences and sets hold one child per
element; maps hold interleaved ``key, value`` children.
"""

import logging
from array import array
from collections import Counter, OrderedDict, deque
from typing import Any, Callable, Dict, Iterable, List, Optional

from .. import models
from ..types import (
    ContainerKind,
    ElementShape,
    KindHandler,
    ShapeHint,
    ShapeMismatchError,
)
from .context import CodecConfig, CodecContext, describe_node

Factory = Callable[[int], Any]

logger = logging.getLogger(__name__)

I32 = ElementShape.INT32
I64 = ElementShape.INT64
F32 = ElementShape.FLOAT32
F64 = ElementShape.FLOAT64
STR = ElementShape.STRING
ANY = ElementShape.TAGGED


def expect_array(node: Any, kind: ContainerKind) -> List[Any]:
    if not isinstance(node, list):
        raise ShapeMismatchError(f"{kind.value} expects an array node, got {describe_node(node)}",
                                 context={"kind": kind.value, "node": describe_node(node)})
    return node


def write_elements(context: CodecContext, container: Iterable[Any], shapes: ShapeHint) -> List[Any]:
    return [context.write_leaf(item, shapes.value) for item in container]


def write_pairs(context: CodecContext, container: Any, shapes: ShapeHint) -> List[Any]:
    node = []
    for key, value in container.items():
        node.append(context.write_leaf(key, shapes.key))
        node.append(context.write_leaf(value, shapes.value))
    return node


def write_counter(context: CodecContext, container: Counter, shapes: ShapeHint) -> List[Any]:
    """Bags are written with each element repeated ``count`` times."""
    return write_elements(context, container.elements(), shapes)


def sequence_reader(kind: ContainerKind, factory: Factory,
                    add: Callable[[Any, Any], Any]) -> Callable[[CodecContext, Any, ShapeHint], Any]:
    """Build a reader that inserts one element per child node."""

    def read(context: CodecContext, node: Any, shapes: ShapeHint) -> Any:
        if node is None:
            return None
        children = expect_array(node, kind)
        elements = [context.read_leaf(child, shapes.value) for child in children]
        target = factory(len(elements))
        for element in elements:
            add(target, element)
        return target

    return read


def map_reader(kind: ContainerKind, factory: Factory,
               put: Callable[[Any, Any, Any], Any]) -> Callable[[CodecContext, Any, ShapeHint], Any]:
    """
    Build a reader that consumes children two at a time (key, then value).

    An unpaired final child is dropped with a warning instead of failing, so
    truncated input from permissive writers still loads.
    """

    def read(context: CodecContext, node: Any, shapes: ShapeHint) -> Any:
        if node is None:
            return None
        children = expect_array(node, kind)
        if len(children) % 2:
            context.logger.warning(f"Discarding unpaired trailing child of {kind.value} node "
                                   f"({len(children)} children)")
            children = children[:-1]
        pairs = [
            (context.read_leaf(children[index], shapes.key),
             context.read_leaf(children[index + 1], shapes.value))
            for index in range(0, len(children), 2)
        ]
        target = factory(len(pairs))
        for key, value in pairs:
            put(target, key, value)
        return target

    return read


def _add(target: Any, item: Any) -> None:
    target.add(item)


def _append(target: Any, item: Any) -> None:
    target.append(item)


def _count(target: Counter, item: Any) -> None:
    target[item] += 1


def _put(target: Any, key: Any, value: Any) -> None:
    target.put(key, value)


def _store(target: Dict[Any, Any], key: Any, value: Any) -> None:
    target[key] = value


def _typed_array(typecode: str) -> Factory:
    def factory(_capacity: int) -> array:
        return array(typecode)
    return factory


def sequence_handler(kind: ContainerKind, container_type: type, tag: str, shape: ElementShape,
                     factory: Factory, add: Callable[[Any, Any], Any] = _add,
                     write: Callable[..., Any] = write_elements,
                     typecode: Optional[str] = None) -> KindHandler:
    return KindHandler(kind=kind, container_type=container_type, short_tag=tag,
                       shapes=ShapeHint(shape), write=write,
                       read=sequence_reader(kind, factory, add), typecode=typecode)


def map_handler(kind: ContainerKind, container_type: type, tag: str,
                key_shape: ElementShape, value_shape: ElementShape,
                factory: Factory, put: Callable[[Any, Any, Any], Any] = _put) -> KindHandler:
    return KindHandler(kind=kind, container_type=container_type, short_tag=tag,
                       shapes=ShapeHint(value_shape, key_shape), write=write_pairs,
                       read=map_reader(kind, factory, put))


def _array_handler(kind: ContainerKind, tag: str, shape: ElementShape, typecode: str) -> KindHandler:
    return sequence_handler(kind, array, tag, shape, _typed_array(typecode), _append, typecode=typecode)


K = ContainerKind

COMPACT_HANDLERS = [
    sequence_handler(K.OBJECT_LIST, models.ObjectList, "oL", ANY, models.ObjectList),
    sequence_handler(K.OBJECT_DEQUE, models.ObjectDeque, "oQ", ANY, models.ObjectDeque),
    sequence_handler(K.OBJECT_BAG, models.ObjectBag, "oB", ANY, models.ObjectBag),
    sequence_handler(K.OBJECT_SET, models.ObjectSet, "oS", ANY, models.ObjectSet),
    sequence_handler(K.OBJECT_ORDERED_SET, models.ObjectOrderedSet, "oOS", ANY, models.ObjectOrderedSet),
    sequence_handler(K.CASE_INSENSITIVE_SET, models.CaseInsensitiveSet, "oCS", STR,
                     models.CaseInsensitiveSet),
    sequence_handler(K.CASE_INSENSITIVE_ORDERED_SET, models.CaseInsensitiveOrderedSet, "oCOS", STR,
                     models.CaseInsensitiveOrderedSet),
    sequence_handler(K.INT_LIST, models.IntList, "iL", I32, models.IntList),
    sequence_handler(K.LONG_LIST, models.LongList, "lL", I64, models.LongList),
    sequence_handler(K.FLOAT_LIST, models.FloatList, "fL", F32, models.FloatList),
    sequence_handler(K.INT_DEQUE, models.IntDeque, "iQ", I32, models.IntDeque),
    sequence_handler(K.LONG_DEQUE, models.LongDeque, "lQ", I64, models.LongDeque),
    sequence_handler(K.FLOAT_DEQUE, models.FloatDeque, "fQ", F32, models.FloatDeque),
    sequence_handler(K.INT_SET, models.IntSet, "iS", I32, models.IntSet),
    sequence_handler(K.INT_ORDERED_SET, models.IntOrderedSet, "iOS", I32, models.IntOrderedSet),
    sequence_handler(K.LONG_SET, models.LongSet, "lS", I64, models.LongSet),
    sequence_handler(K.LONG_ORDERED_SET, models.LongOrderedSet, "lOS", I64, models.LongOrderedSet),
    map_handler(K.OBJECT_MAP, models.ObjectMap, "ooM", ANY, ANY, models.ObjectMap),
    map_handler(K.OBJECT_ORDERED_MAP, models.ObjectOrderedMap, "ooOM", ANY, ANY, models.ObjectOrderedMap),
    map_handler(K.CASE_INSENSITIVE_MAP, models.CaseInsensitiveMap, "ooCM", STR, ANY,
                models.CaseInsensitiveMap),
    map_handler(K.CASE_INSENSITIVE_ORDERED_MAP, models.CaseInsensitiveOrderedMap, "ooCOM", STR, ANY,
                models.CaseInsensitiveOrderedMap),
    map_handler(K.INT_OBJECT_MAP, models.IntObjectMap, "ioM", I32, ANY, models.IntObjectMap),
    map_handler(K.LONG_OBJECT_MAP, models.LongObjectMap, "loM", I64, ANY, models.LongObjectMap),
    map_handler(K.OBJECT_INT_MAP, models.ObjectIntMap, "oiM", ANY, I32, models.ObjectIntMap),
    map_handler(K.OBJECT_LONG_MAP, models.ObjectLongMap, "olM", ANY, I64, models.ObjectLongMap),
    map_handler(K.OBJECT_FLOAT_MAP, models.ObjectFloatMap, "ofM", ANY, F32, models.ObjectFloatMap),
    map_handler(K.INT_OBJECT_ORDERED_MAP, models.IntObjectOrderedMap, "ioOM", I32, ANY,
                models.IntObjectOrderedMap),
    map_handler(K.LONG_OBJECT_ORDERED_MAP, models.LongObjectOrderedMap, "loOM", I64, ANY,
                models.LongObjectOrderedMap),
    map_handler(K.OBJECT_INT_ORDERED_MAP, models.ObjectIntOrderedMap, "oiOM", ANY, I32,
                models.ObjectIntOrderedMap),
    map_handler(K.OBJECT_LONG_ORDERED_MAP, models.ObjectLongOrderedMap, "olOM", ANY, I64,
                models.ObjectLongOrderedMap),
    map_handler(K.OBJECT_FLOAT_ORDERED_MAP, models.ObjectFloatOrderedMap, "ofOM", ANY, F32,
                models.ObjectFloatOrderedMap),
    map_handler(K.INT_INT_MAP, models.IntIntMap, "iiM", I32, I32, models.IntIntMap),
    map_handler(K.INT_INT_ORDERED_MAP, models.IntIntOrderedMap, "iiOM", I32, I32, models.IntIntOrderedMap),
    map_handler(K.INT_LONG_MAP, models.IntLongMap, "ilM", I32, I64, models.IntLongMap),
    map_handler(K.INT_LONG_ORDERED_MAP, models.IntLongOrderedMap, "ilOM", I32, I64, models.IntLongOrderedMap),
    map_handler(K.INT_FLOAT_MAP, models.IntFloatMap, "ifM", I32, F32, models.IntFloatMap),
    map_handler(K.INT_FLOAT_ORDERED_MAP, models.IntFloatOrderedMap, "ifOM", I32, F32,
                models.IntFloatOrderedMap),
    map_handler(K.LONG_INT_MAP, models.LongIntMap, "liM", I64, I32, models.LongIntMap),
    map_handler(K.LONG_INT_ORDERED_MAP, models.LongIntOrderedMap, "liOM", I64, I32, models.LongIntOrderedMap),
    map_handler(K.LONG_LONG_MAP, models.LongLongMap, "llM", I64, I64, models.LongLongMap),
    map_handler(K.LONG_LONG_ORDERED_MAP, models.LongLongOrderedMap, "llOM", I64, I64,
                models.LongLongOrderedMap),
    map_handler(K.LONG_FLOAT_MAP, models.LongFloatMap, "lfM", I64, F32, models.LongFloatMap),
    map_handler(K.LONG_FLOAT_ORDERED_MAP, models.LongFloatOrderedMap, "lfOM", I64, F32,
                models.LongFloatOrderedMap),
]

STD_HANDLERS = [
    sequence_handler(K.LIST, list, "jL", ANY, lambda _capacity: [], _append),
    sequence_handler(K.DEQUE, deque, "jD", ANY, lambda _capacity: deque(), _append),
    sequence_handler(K.SET, set, "jS", ANY, lambda _capacity: set()),
    sequence_handler(K.COUNTER, Counter, "jB", ANY, lambda _capacity: Counter(), _count,
                     write=write_counter),
    map_handler(K.DICT, dict, "jM", ANY, ANY, lambda _capacity: {}, _store),
    map_handler(K.ORDERED_DICT, OrderedDict, "jOM", ANY, ANY, lambda _capacity: OrderedDict(), _store),
    _array_handler(K.INT_ARRAY, "jiA", I32, "i"),
    _array_handler(K.LONG_ARRAY, "jlA", I64, "q"),
    _array_handler(K.FLOAT_ARRAY, "jfA", F32, "f"),
    _array_handler(K.DOUBLE_ARRAY, "jdA", F64, "d"),
]

BUILTIN_HANDLERS: Dict[ContainerKind, KindHandler] = {
    handler.kind: handler for handler in COMPACT_HANDLERS + STD_HANDLERS
}


def register_kind(context: CodecContext, kind: ContainerKind) -> None:
    """Install the built-in handler for one kind."""
    context.register(BUILTIN_HANDLERS[kind])


def register_compact_kinds(context: CodecContext) -> None:
    for handler in COMPACT_HANDLERS:
        context.register(handler)


def register_std_kinds(context: CodecContext) -> None:
    for handler in STD_HANDLERS:
        context.register(handler)


def register_all(context: CodecContext) -> None:
    """Install the built-in handlers for every container kind."""
    register_compact_kinds(context)
    register_std_kinds(context)
    logger.debug(f"Registered {len(BUILTIN_HANDLERS)} built-in container kinds")


def create_context(config: Optional[CodecConfig] = None,
                   kinds: Optional[Iterable[ContainerKind]] = None,
                   logger: Optional[logging.Logger] = None) -> CodecContext:
    """
    Build a codec context with built-in handlers installed.

    Args:
        config: Optional CodecConfig for the new context
        kinds: Kinds to register; every built-in kind when omitted
        logger: Optional logger instance

    Returns:
        A new, unfrozen CodecContext
    """
    context = CodecContext(config, logger)
    if kinds is None:
        register_all(context)
    else:
        for kind in kinds:
            register_kind(context, kind)
    return context
