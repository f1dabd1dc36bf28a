"""Type-erased round-trip codec for container values."""

from .context import CodecConfig, CodecContext
from .numeral import BASE2, BASE8, BASE10, BASE16, BASE36, NumeralBase
from .handlers import (
    BUILTIN_HANDLERS,
    create_context,
    map_handler,
    register_all,
    register_compact_kinds,
    register_kind,
    register_std_kinds,
    sequence_handler,
)

__all__ = [
    "CodecConfig",
    "CodecContext",
    "NumeralBase",
    "BASE2",
    "BASE8",
    "BASE10",
    "BASE16",
    "BASE36",
    "BUILTIN_HANDLERS",
    "create_context",
    "register_kind",
    "register_compact_kinds",
    "register_std_kinds",
    "register_all",
    "sequence_handler",
    "map_handler",
]
