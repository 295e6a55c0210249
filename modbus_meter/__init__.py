"""Register mapping and decoding engine for Modbus energy meters.

Turns a flat address space of 16-bit registers into named, typed,
unit-scaled channels, grouped into contiguous read ranges.
"""

from .domain.elements import (
    DummyElement,
    SignedDoublewordElement,
    SignedWordElement,
    UnsignedDoublewordElement,
    UnsignedWordElement,
)
from .domain.entities import Channel, ModbusProtocol, RegisterRange
from .domain.exceptions import (
    ConfigurationError,
    FormatError,
    MeterError,
    TransportError,
)
from .domain.interfaces import IRegisterReader, MeterNature
from .devices import ConfiguredMeter, ModbusDeviceNature, SocomecMeter

__all__ = [
    "Channel",
    "ConfigurationError",
    "ConfiguredMeter",
    "DummyElement",
    "FormatError",
    "IRegisterReader",
    "MeterError",
    "MeterNature",
    "ModbusDeviceNature",
    "ModbusProtocol",
    "RegisterRange",
    "SignedDoublewordElement",
    "SignedWordElement",
    "SocomecMeter",
    "TransportError",
    "UnsignedDoublewordElement",
    "UnsignedWordElement",
]
