"""Tests for value transformation helpers."""

import pytest

from modbus_meter.domain.helpers import (
    combine_words,
    convert_to_signed_int16,
    convert_to_signed_int32,
    registers_from_bytes,
    split_words,
)
from modbus_meter.domain.value_objects import WordOrder


class TestSignedConversion:
    """Test two's complement conversions."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(0x0000, 0), (0x7FFF, 32767), (0x8000, -32768), (0xFFCE, -50), (0xFFFF, -1)],
    )
    def test_int16(self, raw, expected):
        assert convert_to_signed_int16(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (0x000003E8, 1000),
            (0x7FFFFFFF, 2147483647),
            (0x80000000, -2147483648),
            (0xFFFFFFFF, -1),
        ],
    )
    def test_int32(self, raw, expected):
        assert convert_to_signed_int32(raw) == expected


class TestRegistersFromBytes:
    """Test splitting raw bytes into registers."""

    def test_big_endian_split(self):
        """Test each pair of bytes is one register, high byte first."""
        assert registers_from_bytes(bytes.fromhex("000003E8C568")) == [0, 1000, 0xC568]

    def test_empty(self):
        assert registers_from_bytes(b"") == []

    def test_odd_length_raises_error(self):
        """Test a half register is rejected."""
        with pytest.raises(ValueError, match="even length"):
            registers_from_bytes(b"\x00\x01\x02")


class TestWordOrder:
    """Test combining and splitting 32-bit values."""

    def test_combine_high_word_first(self):
        assert combine_words(0x0001, 0x0002) == 0x00010002

    def test_combine_low_word_first(self):
        assert combine_words(0x0002, 0x0001, WordOrder.LSW_MSW) == 0x00010002

    def test_split_high_word_first(self):
        assert split_words(0x00010002) == [0x0001, 0x0002]

    def test_split_low_word_first(self):
        assert split_words(0x00010002, WordOrder.LSW_MSW) == [0x0002, 0x0001]

    def test_split_negative_uses_twos_complement(self):
        """Test negative values are masked to 32 bits."""
        assert split_words(-1) == [0xFFFF, 0xFFFF]
