"""Tests for numeral bases and fixed-width numeric helpers."""

import pytest

from container_bridge.codec.numeral import BASE2, BASE10, BASE16, BASE36, NumeralBase
from container_bridge.utils.numeric import (
    INT32_MAX,
    INT64_MIN,
    fits_int32,
    fits_int64,
    float32_bits,
    float32_from_bits,
    float64_bits,
    float64_from_bits,
    is_widening,
    to_float32,
)


class TestNumeralBase:
    """Tests for NumeralBase."""

    def test_base10_emits_numbers(self):
        assert BASE10.emit(255) == 255
        assert BASE10.emit(-7) == -7

    def test_other_bases_emit_signed_strings(self):
        assert BASE16.emit(255) == "ff"
        assert BASE16.emit(-255) == "-ff"
        assert BASE2.emit(5) == "101"
        assert BASE36.emit(35) == "z"
        assert BASE16.emit(0) == "0"

    def test_read_int_accepts_numbers_and_strings(self):
        assert BASE16.read_int("-ff") == -255
        assert BASE16.read_int("FF") == 255
        assert BASE16.read_int(12) == 12
        assert BASE10.read_int(3.0) == 3

    def test_read_int_handles_64_bit_extremes(self):
        assert BASE36.read_int(BASE36.emit(INT64_MIN)) == INT64_MIN

    def test_read_int_rejects_invalid_leaves(self):
        with pytest.raises(ValueError):
            BASE10.read_int(True)
        with pytest.raises(ValueError):
            BASE10.read_int(1.5)
        with pytest.raises(ValueError):
            BASE10.read_int("+1")
        with pytest.raises(ValueError):
            BASE10.read_int("ff")
        with pytest.raises(ValueError):
            BASE10.read_int([1])

    def test_invalid_radix(self):
        with pytest.raises(ValueError):
            NumeralBase(1)
        with pytest.raises(ValueError):
            NumeralBase(37)
        with pytest.raises(TypeError):
            NumeralBase(True)

    def test_equal_bases_compare_equal(self):
        assert NumeralBase(16) == BASE16
        assert NumeralBase() == BASE10


class TestNumericHelpers:
    """Tests for fixed-width numeric helpers."""

    def test_range_checks(self):
        assert fits_int32(INT32_MAX)
        assert not fits_int32(INT32_MAX + 1)
        assert fits_int64(4200000000000000)
        assert not fits_int64(INT64_MIN - 1)

    def test_float32_rounding(self):
        assert to_float32(1.5) == 1.5
        assert to_float32(0.1) != 0.1

    def test_float32_saturates_beyond_range(self):
        assert to_float32(1e300) == float("inf")
        assert to_float32(-1e300) == float("-inf")
        assert float32_bits(1e300) == 0x7F800000

    def test_float_bit_patterns(self):
        assert float32_bits(1.5) == 0x3FC00000
        assert float32_from_bits(0x3FC00000) == 1.5
        assert float32_bits(-2.0) < 0
        assert float64_from_bits(float64_bits(0.1)) == 0.1

    def test_widening_rules(self):
        assert is_widening("i", "q")
        assert is_widening("f", "d")
        assert is_widening("q", "q")
        assert not is_widening("q", "i")
        assert not is_widening("d", "f")
        assert not is_widening("i", "d")
