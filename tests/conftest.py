"""Pytest configuration and fixtures for Modbus meter tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import modbus_meter
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from modbus_meter.devices import SocomecMeter
from modbus_meter.infrastructure import MemoryRegisterReader


@pytest.fixture
def socomec_meter() -> SocomecMeter:
    """Return a freshly built Socomec meter."""
    return SocomecMeter("meter0")


@pytest.fixture
def memory_reader() -> MemoryRegisterReader:
    """Return an empty in-memory register reader."""
    return MemoryRegisterReader()


@pytest.fixture
def socomec_registers(memory_reader) -> MemoryRegisterReader:
    """Reader holding a plausible Socomec register image.

    Power registers are in 10 W steps: 1000 -> 10000 W.
    """
    memory_reader.set_doubleword(0xC568, 1000)  # ActivePower
    memory_reader.set_doubleword(0xC56A, -250)  # ReactivePower
    memory_reader.set_doubleword(0xC56C, 1031)  # ApparentPower
    memory_reader.set_registers(0xC56E, [0xDEAD, 0xBEEF])  # reserved
    memory_reader.set_doubleword(0xC570, 300)
    memory_reader.set_doubleword(0xC572, 350)
    memory_reader.set_doubleword(0xC574, 350)
    memory_reader.set_doubleword(0xC576, -80)
    memory_reader.set_doubleword(0xC578, -90)
    memory_reader.set_doubleword(0xC57A, -80)

    memory_reader.set_doubleword(0xC652, 123456)  # ActivePositiveEnergy
    memory_reader.set_doubleword(0xC654, 2345)
    memory_reader.set_doubleword(0xC656, 130000)
    memory_reader.set_doubleword(0xC658, 42)
    memory_reader.set_doubleword(0xC65A, 7)
    return memory_reader
