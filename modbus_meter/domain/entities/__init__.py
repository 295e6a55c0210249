"""Domain entities for the Modbus meter library.

Entities are domain objects with identity and mutable state:
- Channel: named measurement slot written by decoding
- RegisterRange: contiguous span of elements read in one request
- ModbusProtocol: validated set of ranges for one device
"""

from .channel import Channel
from .register_range import RegisterRange
from .modbus_protocol import ModbusProtocol

__all__ = [
    "Channel",
    "RegisterRange",
    "ModbusProtocol",
]
