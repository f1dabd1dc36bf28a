"""
Container Bridge - lossless interop between container families.

Converts between general-purpose Python containers and the compact,
primitive-specialized container family, and serializes either family to
JSON without static element type information.
"""

from .codec import CodecConfig, CodecContext, NumeralBase, create_context, register_all
from .types import (
    CodecError,
    ContainerKind,
    ElementShape,
    ShapeHint,
    ShapeMismatchError,
    UnregisteredKindError,
)

__version__ = "1.0.0"
__all__ = [
    "CodecConfig",
    "CodecContext",
    "NumeralBase",
    "create_context",
    "register_all",
    "CodecError",
    "ContainerKind",
    "ElementShape",
    "ShapeHint",
    "ShapeMismatchError",
    "UnregisteredKindError",
]
