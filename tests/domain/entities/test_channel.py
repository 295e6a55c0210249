"""Tests for Channel entity."""

import pytest

from modbus_meter.domain.entities import Channel
from modbus_meter.domain.exceptions import ConfigurationError


class TestChannelCreation:
    """Test Channel construction."""

    def test_create_basic_channel(self):
        """Test creating channel with defaults."""
        channel = Channel("ActivePower")
        assert channel.name == "ActivePower"
        assert channel.unit == ""
        assert channel.multiplier == 1

    def test_create_channel_with_unit_and_multiplier(self):
        """Test creating channel with unit and multiplier."""
        channel = Channel("ActivePower", unit="W", multiplier=10)
        assert channel.unit == "W"
        assert channel.multiplier == 10

    def test_empty_name_raises_error(self):
        """Test that an empty name is a configuration error."""
        with pytest.raises(ConfigurationError, match="name cannot be empty"):
            Channel("")

    @pytest.mark.parametrize("multiplier", [0, 0.1, "10", True])
    def test_invalid_multiplier_raises_error(self, multiplier):
        """Test that the multiplier must be a non-zero integer."""
        with pytest.raises(ConfigurationError, match="multiplier"):
            Channel("ActivePower", multiplier=multiplier)


class TestChannelValue:
    """Test Channel value handling."""

    def test_value_absent_before_first_decode(self):
        """Test that a fresh channel reports no data instead of zero."""
        channel = Channel("ActivePower", "W", 10)
        assert channel.get() is None
        assert channel.has_value is False
        assert channel.last_update is None

    def test_set_raw_applies_multiplier(self):
        """Test that stored value is raw value times multiplier."""
        channel = Channel("ActivePower", "W", 10)
        channel.set_raw(1000)
        assert channel.get() == 10000
        assert channel.has_value is True
        assert channel.last_update is not None

    def test_set_raw_negative_value(self):
        """Test that negative raw values are scaled too."""
        channel = Channel("ReactivePower", "var", 10)
        channel.set_raw(-25)
        assert channel.get() == -250

    def test_set_raw_overwrites_previous_value(self):
        """Test that each decode replaces the last value."""
        channel = Channel("ApparentEnergy", "kVAh")
        channel.set_raw(1)
        channel.set_raw(2)
        assert channel.get() == 2

    def test_no_range_validation(self):
        """Test that any integer is accepted."""
        channel = Channel("ActivePositiveEnergy", "kWh")
        channel.set_raw(0xFFFFFFFF)
        assert channel.get() == 4294967295


class TestChannelRepresentation:
    """Test Channel conversions."""

    def test_to_dict(self):
        """Test dictionary representation."""
        channel = Channel("ActivePower", "W", 10)
        channel.set_raw(5)
        data = channel.to_dict()
        assert data["name"] == "ActivePower"
        assert data["unit"] == "W"
        assert data["multiplier"] == 10
        assert data["value"] == 50
        assert data["last_update"] is not None

    def test_str_without_value(self):
        """Test string shows missing data."""
        assert str(Channel("ActivePower", "W")) == "ActivePower: n/a W"

    def test_str_with_value(self):
        """Test string shows value and unit."""
        channel = Channel("ActivePower", "W", 10)
        channel.set_raw(3)
        assert str(channel) == "ActivePower: 30 W"
