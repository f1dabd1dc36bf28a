"""Structural conversions between the general-purpose and compact container families."""

from .core import (
    convert_map,
    convert_primitive_sequence,
    convert_sequence,
    convert_set,
)
from . import to_compact, to_std

__all__ = [
    "convert_sequence",
    "convert_set",
    "convert_map",
    "convert_primitive_sequence",
    "to_compact",
    "to_std",
]
