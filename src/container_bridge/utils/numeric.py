"""Fixed-width numeric helpers shared by primitive containers and the codec."""

import struct
from array import array

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# array.array typecode -> storage width in bytes
TYPECODE_WIDTHS = {"i": 4, "q": 8, "f": 4, "d": 8}
INTEGRAL_TYPECODES = frozenset("iq")
FLOATING_TYPECODES = frozenset("fd")


def fits_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def to_float32(value: float) -> float:
    """
    Round a Python float to the nearest 32-bit float.

    Magnitudes beyond the float32 range become signed infinity, matching what
    ``array('f')`` storage does on insertion.
    """
    return array("f", [value])[0]


def float32_bits(value: float) -> int:
    """Signed 32-bit IEEE-754 bit pattern of a float32 value."""
    return struct.unpack("<i", struct.pack("<f", to_float32(value)))[0]


def float32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<i", bits))[0]


def float64_bits(value: float) -> int:
    """Signed 64-bit IEEE-754 bit pattern of a float64 value."""
    return struct.unpack("<q", struct.pack("<d", value))[0]


def float64_from_bits(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<q", bits))[0]


def is_widening(source_typecode: str, target_typecode: str) -> bool:
    """
    Check that every value of the source storage is exactly representable
    in the target storage.

    Integral storage only widens into integral storage and floating storage
    only into floating storage.
    """
    if source_typecode in INTEGRAL_TYPECODES and target_typecode not in INTEGRAL_TYPECODES:
        return False
    if source_typecode in FLOATING_TYPECODES and target_typecode not in FLOATING_TYPECODES:
        return False
    return TYPECODE_WIDTHS[source_typecode] <= TYPECODE_WIDTHS[target_typecode]
