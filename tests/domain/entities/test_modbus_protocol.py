"""Tests for ModbusProtocol entity."""

import pytest

from modbus_meter.domain.elements import SignedDoublewordElement, UnsignedWordElement
from modbus_meter.domain.entities import Channel, ModbusProtocol, RegisterRange
from modbus_meter.domain.exceptions import ConfigurationError


def _word_range(address, name):
    return RegisterRange(address, UnsignedWordElement(address, Channel(name)))


class TestModbusProtocolCreation:
    """Test protocol validation."""

    def test_valid_protocol(self):
        """Test ranges kept in declaration order."""
        first = _word_range(0xC652, "Energy")
        second = _word_range(0xC568, "Power")

        protocol = ModbusProtocol(first, second)

        assert protocol.ranges() == (first, second)
        assert len(protocol) == 2
        assert list(protocol) == [first, second]
        assert protocol.total_registers == 2

    def test_empty_protocol_rejected(self):
        """Test that a device must define at least one range."""
        with pytest.raises(ConfigurationError, match="at least one range"):
            ModbusProtocol()

    def test_duplicate_channel_name_rejected(self):
        """Test same channel name in two ranges."""
        with pytest.raises(ConfigurationError, match="Duplicate channel name 'Power'"):
            ModbusProtocol(_word_range(0x0100, "Power"), _word_range(0x0200, "Power"))

    def test_overlapping_ranges_rejected(self):
        """Test ranges sharing a register."""
        wide = RegisterRange(
            0x0100, SignedDoublewordElement(0x0100, Channel("Wide"))
        )
        narrow = _word_range(0x0101, "Narrow")
        with pytest.raises(ConfigurationError, match="overlaps"):
            ModbusProtocol(wide, narrow)

    def test_adjacent_ranges_allowed(self):
        """Test back-to-back ranges do not overlap."""
        protocol = ModbusProtocol(_word_range(0x0100, "A"), _word_range(0x0101, "B"))
        assert len(protocol) == 2


class TestModbusProtocolLookup:
    """Test channel and range lookup."""

    @pytest.fixture
    def protocol(self):
        return ModbusProtocol(_word_range(0x0100, "A"), _word_range(0x0200, "B"))

    def test_channels(self, protocol):
        channels = protocol.channels()
        assert set(channels) == {"A", "B"}
        channels.clear()
        assert len(protocol.channels()) == 2

    def test_channel_lookup(self, protocol):
        assert protocol.channel("A").name == "A"
        assert protocol.channel("missing") is None

    def test_range_for(self, protocol):
        assert protocol.range_for(0x0200) is protocol.ranges()[1]
        assert protocol.range_for(0x0150) is None
