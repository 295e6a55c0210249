"""Tests for address format helpers."""

import pytest

from modbus_meter.domain.helpers import (
    calculate_register_count,
    format_address,
    parse_address,
)


class TestParseAddress:
    """Test parse_address function."""

    def test_parse_int(self):
        assert parse_address(0xC568) == 0xC568

    def test_parse_hex_prefixed(self):
        assert parse_address("0xC568") == 0xC568
        assert parse_address("0Xc568") == 0xC568

    def test_parse_bare_digits_are_decimal(self):
        """Test strings without the 0x prefix are read as decimal."""
        assert parse_address("100") == 100
        assert parse_address("50536") == 0xC568

    def test_parse_bare_hex_rejected(self):
        """Test hex digits need the 0x prefix."""
        with pytest.raises(ValueError, match="Invalid address format"):
            parse_address("C568")

    def test_parse_strips_whitespace(self):
        assert parse_address("  0xC652 ") == 0xC652

    def test_parse_invalid_string(self):
        with pytest.raises(ValueError, match="Invalid address format"):
            parse_address("xyz")

    @pytest.mark.parametrize("value", [True, 1.5, None])
    def test_parse_wrong_type(self, value):
        with pytest.raises(ValueError, match="must be str or int"):
            parse_address(value)


class TestFormatAddress:
    """Test format_address function."""

    def test_format_with_prefix(self):
        assert format_address(0xC568) == "0xC568"

    def test_format_without_prefix(self):
        assert format_address(0xC568, prefix=False) == "C568"

    def test_format_pads_to_four_digits(self):
        assert format_address(0x10) == "0x0010"


class TestCalculateRegisterCount:
    """Test calculate_register_count function."""

    def test_inclusive_range(self):
        assert calculate_register_count(0xC56E, 0xC56F) == 2

    def test_single_register(self):
        assert calculate_register_count(0xC568, 0xC568) == 1
