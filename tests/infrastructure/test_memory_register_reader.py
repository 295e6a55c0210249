"""Tests for MemoryRegisterReader."""

import pytest

from modbus_meter.domain.exceptions import ConfigurationError, TransportError
from modbus_meter.domain.value_objects import WordOrder
from modbus_meter.infrastructure import MemoryRegisterReader


class TestMemoryRegisterReader:
    """Test the in-memory register image."""

    @pytest.mark.asyncio
    async def test_read_big_endian(self):
        reader = MemoryRegisterReader({0xC568: 0x0000, 0xC569: 0x03E8})
        assert await reader.read_registers(0xC568, 2) == bytes.fromhex("000003E8")

    @pytest.mark.asyncio
    async def test_unset_registers_read_zero(self):
        reader = MemoryRegisterReader()
        assert await reader.read_registers(0x0100, 3) == bytes(6)

    @pytest.mark.asyncio
    async def test_set_doubleword_negative(self):
        reader = MemoryRegisterReader()
        reader.set_doubleword(0xC56A, -1)
        assert await reader.read_registers(0xC56A, 2) == bytes.fromhex("FFFFFFFF")

    @pytest.mark.asyncio
    async def test_set_doubleword_low_word_first(self):
        reader = MemoryRegisterReader()
        reader.set_doubleword(0x0000, 0x00010002, WordOrder.LSW_MSW)
        assert await reader.read_registers(0x0000, 2) == bytes.fromhex("00020001")

    @pytest.mark.asyncio
    async def test_records_calls(self):
        reader = MemoryRegisterReader()
        await reader.read_registers(0xC568, 20)
        assert reader.calls == [(0xC568, 20)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, 126])
    async def test_count_out_of_limits(self, count):
        reader = MemoryRegisterReader()
        with pytest.raises(TransportError, match="Register count"):
            await reader.read_registers(0x0000, count)

    @pytest.mark.asyncio
    async def test_fail_on_covered_address(self):
        """Test a failing address only affects reads covering it."""
        reader = MemoryRegisterReader()
        reader.fail_on(0xC56E)

        with pytest.raises(TransportError, match="failing 0xC56E"):
            await reader.read_registers(0xC568, 20)
        assert await reader.read_registers(0xC652, 10) == bytes(20)

        reader.reset_failures()
        assert await reader.read_registers(0xC568, 20) == bytes(40)

    @pytest.mark.asyncio
    async def test_truncate_reads(self):
        reader = MemoryRegisterReader()
        reader.truncate_reads_at(0xC568, 8)
        assert len(await reader.read_registers(0xC568, 5)) == 8

    def test_register_value_out_of_range(self):
        reader = MemoryRegisterReader()
        with pytest.raises(ValueError, match="0-65535"):
            reader.set_register(0x0000, 0x10000)

    def test_register_address_out_of_range(self):
        reader = MemoryRegisterReader()
        with pytest.raises(ConfigurationError):
            reader.set_register(0x10000, 1)
