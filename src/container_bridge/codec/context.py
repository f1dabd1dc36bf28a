"""Codec context: registration table, configuration and element encoding."""

import json
import logging
from array import array
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..error_handler import ErrorHandler
from ..types import (
    CodecError,
    ContainerCodecInterface,
    ContainerKind,
    ElementShape,
    ErrorType,
    KindHandler,
    ShapeHint,
    ShapeMismatchError,
    UnregisteredKindError,
    ValueTypeHandler,
)
from ..utils.numeric import (
    float32_bits,
    float32_from_bits,
    float64_bits,
    float64_from_bits,
    fits_int32,
    fits_int64,
    to_float32,
)
from .numeral import BASE10, NumeralBase

TypeKey = Tuple[type, Optional[str]]

_SCALARS = (bool, int, float, str)


@dataclass(frozen=True)
class CodecConfig:
    """
    Settings shared by every write and read call of one codec context.

    Attributes:
        numeral_base: Radix used for integer leaves (and compact float bits)
        legible_floats: Write floats as JSON numbers; when False, write their
            IEEE-754 bit pattern through the numeral base
        add_class_tags: Use short type tags in tagged nodes; when False, use
            the full kind name
    """
    numeral_base: NumeralBase = field(default=BASE10)
    legible_floats: bool = True
    add_class_tags: bool = True


def type_key(value: Any) -> TypeKey:
    """Exact lookup key of a container: its type, plus typecode for ``array.array``."""
    value_type = type(value)
    if value_type is array:
        return value_type, value.typecode
    return value_type, None


def describe_node(node: Any) -> str:
    if node is None:
        return "null"
    if isinstance(node, list):
        return "array"
    if isinstance(node, dict):
        return "object"
    return type(node).__name__


class CodecContext(ContainerCodecInterface):
    """
    Scoped registration table plus configuration for container serialization.

    Handlers are looked up by exact container kind. Writing resolves the kind
    from the exact container type; there is no fallback through base classes
    or between kinds.
    """

    TAG_KEY = "class"
    VALUE_KEY = "value"

    def __init__(self, config: Optional[CodecConfig] = None,
                 logger: Optional[logging.Logger] = None,
                 error_handler: Optional[ErrorHandler] = None):
        """
        Initialize an empty codec context.

        Args:
            config: Optional CodecConfig; defaults to base 10, legible floats, short tags
            logger: Optional logger instance
            error_handler: Optional ErrorHandler used to validate JSON text
        """
        self.config = config or CodecConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
        self._handlers: Dict[ContainerKind, KindHandler] = {}
        self._kinds_by_type: Dict[TypeKey, ContainerKind] = {}
        self._kinds_by_tag: Dict[str, ContainerKind] = {}
        self._value_types: Dict[type, ValueTypeHandler] = {}
        self._value_types_by_tag: Dict[str, ValueTypeHandler] = {}
        self._frozen = False

    # Registration

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, handler: KindHandler) -> None:
        """
        Install the (write, read) pair for one container kind.

        Re-registering a kind replaces its previous handler.

        Raises:
            CodecError: If the table is frozen or a tag is already taken
        """
        self._check_mutable()
        for tag in (handler.short_tag, handler.kind.value):
            owner = self._kinds_by_tag.get(tag)
            if (owner is not None and owner is not handler.kind) or tag in self._value_types_by_tag:
                raise CodecError(f"Tag '{tag}' is already registered", ErrorType.REGISTRATION,
                                 context={"tag": tag, "kind": handler.kind.value})

        previous = self._handlers.get(handler.kind)
        if previous is not None:
            self.logger.debug(f"Replacing handler for {handler.kind.value}")
            self._kinds_by_type.pop((previous.container_type, previous.typecode), None)
            self._kinds_by_tag.pop(previous.short_tag, None)

        self._handlers[handler.kind] = handler
        self._kinds_by_type[(handler.container_type, handler.typecode)] = handler.kind
        self._kinds_by_tag[handler.short_tag] = handler.kind
        self._kinds_by_tag[handler.kind.value] = handler.kind
        self.logger.debug(f"Registered {handler.kind.value} with tag '{handler.short_tag}'")

    def register_type(self, tag: str, value_type: type,
                      to_node: Callable[[Any], Any],
                      from_node: Callable[[Any], Any]) -> None:
        """
        Install a tagged payload type that may appear inside dynamic slots.

        Args:
            tag: Type tag embedded in written nodes
            value_type: Exact class of the payload
            to_node: Converts a payload into a node tree
            from_node: Rebuilds a payload from its node tree
        """
        self._check_mutable()
        if tag in self._kinds_by_tag or tag in self._value_types_by_tag:
            raise CodecError(f"Tag '{tag}' is already registered", ErrorType.REGISTRATION,
                             context={"tag": tag, "type": value_type.__name__})
        handler = ValueTypeHandler(tag=tag, value_type=value_type, to_node=to_node, from_node=from_node)
        self._value_types[value_type] = handler
        self._value_types_by_tag[tag] = handler
        self.logger.debug(f"Registered value type {value_type.__name__} with tag '{tag}'")

    def freeze(self) -> "CodecContext":
        """Turn the registration table into an immutable snapshot, safe to share across threads."""
        if not self._frozen:
            self._handlers = MappingProxyType(dict(self._handlers))
            self._kinds_by_type = MappingProxyType(dict(self._kinds_by_type))
            self._kinds_by_tag = MappingProxyType(dict(self._kinds_by_tag))
            self._value_types = MappingProxyType(dict(self._value_types))
            self._value_types_by_tag = MappingProxyType(dict(self._value_types_by_tag))
            self._frozen = True
        return self

    def with_config(self, config: CodecConfig) -> "CodecContext":
        """Create an unfrozen context with a copy of this table and another configuration."""
        other = CodecContext(config, self.logger, self.error_handler)
        other._handlers = dict(self._handlers)
        other._kinds_by_type = dict(self._kinds_by_type)
        other._kinds_by_tag = dict(self._kinds_by_tag)
        other._value_types = dict(self._value_types)
        other._value_types_by_tag = dict(self._value_types_by_tag)
        return other

    def _check_mutable(self) -> None:
        if self._frozen:
            raise CodecError("Codec context is frozen; registration is closed",
                             ErrorType.REGISTRATION)

    def is_registered(self, kind: ContainerKind) -> bool:
        return kind in self._handlers

    def registered_kinds(self) -> List[ContainerKind]:
        return list(self._handlers)

    def handler_for(self, kind: ContainerKind) -> KindHandler:
        handler = self._handlers.get(kind)
        if handler is None:
            raise UnregisteredKindError(f"No handler registered for kind {kind.value}",
                                        context={"kind": kind.value})
        return handler

    def kind_of(self, container: Any) -> ContainerKind:
        kind = self._kinds_by_type.get(type_key(container))
        if kind is None:
            raise UnregisteredKindError(f"No kind registered for type {type(container).__name__}",
                                        context={"type": type(container).__name__})
        return kind

    def tag_for(self, handler: KindHandler) -> str:
        return handler.short_tag if self.config.add_class_tags else handler.kind.value

    # Containers

    def write(self, container: Any, kind: Optional[ContainerKind] = None,
              shapes: Optional[ShapeHint] = None) -> Any:
        """
        Serialize a container into a node tree.

        Args:
            container: Container to write, or None
            kind: Kind to write it as; resolved from the container type when omitted
            shapes: Element shapes overriding the kind's defaults

        Returns:
            None for a None container, otherwise an array node
        """
        if container is None:
            if kind is not None:
                self.handler_for(kind)
            return None
        handler = self.handler_for(kind if kind is not None else self.kind_of(container))
        return handler.write(self, container, self._shapes(handler, shapes))

    def read(self, node: Any, kind: ContainerKind,
             shapes: Optional[ShapeHint] = None) -> Any:
        """
        Rebuild a container of ``kind`` from a node tree.

        Args:
            node: Node produced by ``write`` (or parsed JSON)
            kind: Kind of container to build
            shapes: Element shapes overriding the kind's defaults

        Returns:
            None for a null node, otherwise a fully populated container

        Raises:
            UnregisteredKindError: If ``kind`` (or a nested tag) has no handler
            ShapeMismatchError: If the node does not fit the requested kind
        """
        handler = self.handler_for(kind)
        if node is None:
            return None
        return handler.read(self, node, self._shapes(handler, shapes))

    def _shapes(self, handler: KindHandler, shapes: Optional[ShapeHint]) -> ShapeHint:
        if shapes is None:
            return handler.shapes
        if shapes.is_map != handler.shapes.is_map:
            raise CodecError(f"Shape hint {shapes} does not fit kind {handler.kind.value}",
                             ErrorType.CONFIGURATION, context={"kind": handler.kind.value})
        return shapes

    # Elements

    def write_leaf(self, value: Any, shape: ElementShape) -> Any:
        """Write one element according to its expected shape."""
        if shape is ElementShape.TAGGED:
            return self.write_value(value)
        if shape is ElementShape.STRING:
            if value is not None and not isinstance(value, str):
                raise ShapeMismatchError(f"Expected str element, got {type(value).__name__}")
            return value
        if shape is ElementShape.BOOLEAN:
            if not isinstance(value, bool):
                raise ShapeMismatchError(f"Expected bool element, got {type(value).__name__}")
            return value
        if shape.is_integral:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ShapeMismatchError(f"Expected int element, got {type(value).__name__}")
            self._check_range(value, shape)
            return self.config.numeral_base.emit(value)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ShapeMismatchError(f"Expected float element, got {type(value).__name__}")
        value = self._to_float(value)
        if self.config.legible_floats:
            return value
        if shape is ElementShape.FLOAT32:
            return self.config.numeral_base.emit(float32_bits(value))
        return self.config.numeral_base.emit(float64_bits(value))

    def read_leaf(self, node: Any, shape: ElementShape) -> Any:
        """Read one element node according to its expected shape."""
        if shape is ElementShape.TAGGED:
            return self.read_value(node)
        if shape is ElementShape.STRING:
            if node is not None and not isinstance(node, str):
                raise ShapeMismatchError(f"Expected string node, got {describe_node(node)}")
            return node
        if shape is ElementShape.BOOLEAN:
            if not isinstance(node, bool):
                raise ShapeMismatchError(f"Expected boolean node, got {describe_node(node)}")
            return node
        if shape.is_integral:
            value = self._read_int(node, shape)
            self._check_range(value, shape)
            return value
        if self.config.legible_floats:
            if isinstance(node, bool) or not isinstance(node, (int, float)):
                raise ShapeMismatchError(f"Expected number node, got {describe_node(node)}")
            value = self._to_float(node)
            return to_float32(value) if shape is ElementShape.FLOAT32 else value
        if shape is ElementShape.FLOAT32:
            bits = self._read_int(node, ElementShape.INT32)
            self._check_range(bits, ElementShape.INT32)
            return float32_from_bits(bits)
        bits = self._read_int(node, ElementShape.INT64)
        self._check_range(bits, ElementShape.INT64)
        return float64_from_bits(bits)

    def _read_int(self, node: Any, shape: ElementShape) -> int:
        try:
            return self.config.numeral_base.read_int(node)
        except ValueError as e:
            raise ShapeMismatchError(f"Expected {shape.value} node, got {describe_node(node)}: {e}") from e

    @staticmethod
    def _to_float(value: Any) -> float:
        try:
            return float(value)
        except OverflowError as e:
            raise ShapeMismatchError(f"Integer {value} is out of range for a float element") from e

    @staticmethod
    def _check_range(value: int, shape: ElementShape) -> None:
        fits = fits_int32(value) if shape is ElementShape.INT32 else fits_int64(value)
        if not fits:
            raise ShapeMismatchError(f"Value {value} does not fit in {shape.value}")

    def write_value(self, value: Any) -> Any:
        """
        Write a dynamically typed element.

        Scalars are written as they are; anything else is wrapped as
        ``{"class": tag, "value": node}`` so it can be rebuilt without
        static type information.
        """
        if value is None or isinstance(value, _SCALARS):
            return value
        kind = self._kinds_by_type.get(type_key(value))
        if kind is not None:
            handler = self._handlers[kind]
            return {self.TAG_KEY: self.tag_for(handler),
                    self.VALUE_KEY: handler.write(self, value, handler.shapes)}
        value_handler = self._value_types.get(type(value))
        if value_handler is not None:
            return {self.TAG_KEY: value_handler.tag,
                    self.VALUE_KEY: value_handler.to_node(value)}
        raise UnregisteredKindError(f"No kind or value type registered for {type(value).__name__}",
                                    context={"type": type(value).__name__})

    def read_value(self, node: Any) -> Any:
        """Read a dynamically typed element, following its embedded type tag."""
        if node is None or isinstance(node, _SCALARS):
            return node
        if not isinstance(node, dict):
            raise ShapeMismatchError(f"Untagged {describe_node(node)} node in a dynamic slot")
        tag = node.get(self.TAG_KEY)
        if not isinstance(tag, str) or self.VALUE_KEY not in node:
            raise ShapeMismatchError(f"Tagged node needs '{self.TAG_KEY}' and '{self.VALUE_KEY}' entries")
        kind = self._kinds_by_tag.get(tag)
        if kind is not None:
            handler = self._handlers[kind]
            return handler.read(self, node[self.VALUE_KEY], handler.shapes)
        value_handler = self._value_types_by_tag.get(tag)
        if value_handler is not None:
            return value_handler.from_node(node[self.VALUE_KEY])
        raise UnregisteredKindError(f"Unknown type tag '{tag}'", context={"tag": tag})

    # JSON text

    def to_json(self, container: Any, kind: Optional[ContainerKind] = None,
                shapes: Optional[ShapeHint] = None, indent: Optional[int] = None) -> str:
        return json.dumps(self.write(container, kind, shapes), ensure_ascii=False, indent=indent)

    def from_json(self, json_string: str, kind: ContainerKind,
                  shapes: Optional[ShapeHint] = None) -> Any:
        """
        Parse JSON text and read it as ``kind``.

        Raises:
            CodecError: If the text is not valid JSON or has an unsupported root
        """
        validation = self.error_handler.validate_input(json_string)
        if not validation.is_valid:
            error_messages = [error.message for error in validation.errors]
            raise CodecError(f"Invalid JSON input: {'; '.join(error_messages)}",
                             validation.errors[0].type, context=validation)
        for warning in validation.warnings:
            self.logger.warning(warning)
        return self.read(json.loads(json_string), kind, shapes)
