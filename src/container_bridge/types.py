"""Core type definitions for the container bridge."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class ContainerKind(Enum):
    """Closed enumeration of every container kind the bridge knows about."""
    # Compact (performance-oriented) family
    OBJECT_LIST = "ObjectList"
    OBJECT_DEQUE = "ObjectDeque"
    OBJECT_BAG = "ObjectBag"
    OBJECT_SET = "ObjectSet"
    OBJECT_ORDERED_SET = "ObjectOrderedSet"
    CASE_INSENSITIVE_SET = "CaseInsensitiveSet"
    CASE_INSENSITIVE_ORDERED_SET = "CaseInsensitiveOrderedSet"
    INT_LIST = "IntList"
    LONG_LIST = "LongList"
    FLOAT_LIST = "FloatList"
    INT_DEQUE = "IntDeque"
    LONG_DEQUE = "LongDeque"
    FLOAT_DEQUE = "FloatDeque"
    INT_SET = "IntSet"
    INT_ORDERED_SET = "IntOrderedSet"
    LONG_SET = "LongSet"
    LONG_ORDERED_SET = "LongOrderedSet"
    OBJECT_MAP = "ObjectMap"
    OBJECT_ORDERED_MAP = "ObjectOrderedMap"
    CASE_INSENSITIVE_MAP = "CaseInsensitiveMap"
    CASE_INSENSITIVE_ORDERED_MAP = "CaseInsensitiveOrderedMap"
    INT_OBJECT_MAP = "IntObjectMap"
    LONG_OBJECT_MAP = "LongObjectMap"
    OBJECT_INT_MAP = "ObjectIntMap"
    OBJECT_LONG_MAP = "ObjectLongMap"
    INT_OBJECT_ORDERED_MAP = "IntObjectOrderedMap"
    LONG_OBJECT_ORDERED_MAP = "LongObjectOrderedMap"
    OBJECT_FLOAT_MAP = "ObjectFloatMap"
    OBJECT_INT_ORDERED_MAP = "ObjectIntOrderedMap"
    OBJECT_LONG_ORDERED_MAP = "ObjectLongOrderedMap"
    OBJECT_FLOAT_ORDERED_MAP = "ObjectFloatOrderedMap"
    INT_INT_MAP = "IntIntMap"
    INT_INT_ORDERED_MAP = "IntIntOrderedMap"
    INT_LONG_MAP = "IntLongMap"
    INT_LONG_ORDERED_MAP = "IntLongOrderedMap"
    INT_FLOAT_MAP = "IntFloatMap"
    INT_FLOAT_ORDERED_MAP = "IntFloatOrderedMap"
    LONG_INT_MAP = "LongIntMap"
    LONG_INT_ORDERED_MAP = "LongIntOrderedMap"
    LONG_LONG_MAP = "LongLongMap"
    LONG_LONG_ORDERED_MAP = "LongLongOrderedMap"
    LONG_FLOAT_MAP = "LongFloatMap"
    LONG_FLOAT_ORDERED_MAP = "LongFloatOrderedMap"

    # Standard library (general-purpose) family
    LIST = "list"
    DEQUE = "deque"
    SET = "set"
    COUNTER = "Counter"
    DICT = "dict"
    ORDERED_DICT = "OrderedDict"
    INT_ARRAY = "array[i]"
    LONG_ARRAY = "array[q]"
    FLOAT_ARRAY = "array[f]"
    DOUBLE_ARRAY = "array[d]"


class ElementShape(Enum):
    """Expected shape of a single element node, resolved before decoding."""
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"
    STRING = "string"
    TAGGED = "tagged"

    @property
    def is_integral(self) -> bool:
        return self in (ElementShape.INT32, ElementShape.INT64)

    @property
    def is_floating(self) -> bool:
        return self in (ElementShape.FLOAT32, ElementShape.FLOAT64)


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    UNREGISTERED_KIND = "unregistered-kind"
    SHAPE_MISMATCH = "shape-mismatch"
    REGISTRATION = "registration"
    CONFIGURATION = "configuration"


@dataclass(frozen=True)
class ShapeHint:
    """Element shapes used for one container: values, and keys for maps."""
    value: ElementShape
    key: Optional[ElementShape] = None

    @property
    def is_map(self) -> bool:
        return self.key is not None


@dataclass(frozen=True)
class KindHandler:
    """Registration record binding a container kind to its (write, read) pair."""
    kind: ContainerKind
    container_type: type
    short_tag: str
    shapes: ShapeHint
    write: Callable[..., Any]
    read: Callable[..., Any]
    typecode: Optional[str] = None


@dataclass(frozen=True)
class ValueTypeHandler:
    """Registration record for a tagged, non-container payload type."""
    tag: str
    value_type: type
    to_node: Callable[[Any], Any]
    from_node: Callable[[Any], Any]


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    details: Optional[Any] = None


class CodecError(Exception):
    """Base exception for codec failures."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class UnregisteredKindError(CodecError):
    """Raised when a kind or tag has no handler in the active codec context."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.UNREGISTERED_KIND, context)


class ShapeMismatchError(CodecError):
    """Raised when a node does not have the shape the requested reader expects."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.SHAPE_MISMATCH, context)


# Abstract base classes for interfaces

class ContainerCodecInterface(ABC):
    """Abstract interface for a container codec."""

    @abstractmethod
    def write(self, container: Any, kind: Optional[ContainerKind] = None,
              shapes: Optional[ShapeHint] = None) -> Any:
        """Serialize a container into a node tree."""
        pass

    @abstractmethod
    def read(self, node: Any, kind: ContainerKind,
             shapes: Optional[ShapeHint] = None) -> Any:
        """Rebuild a container of the requested kind from a node tree."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_codec_error(self, error: CodecError) -> ErrorResponse:
        """Handle codec errors."""
        pass
