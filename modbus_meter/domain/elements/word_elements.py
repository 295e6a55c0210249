"""Single-register (16-bit) elements."""

from ...const import WORD_LENGTH
from ..helpers.transformations import convert_to_signed_int16
from .modbus_element import ModbusElement


class UnsignedWordElement(ModbusElement):
    """Unsigned 16-bit value in one register (0 to 65535)."""

    @property
    def length(self) -> int:
        return WORD_LENGTH

    def _decode(self, data: bytes) -> int:
        return int.from_bytes(data, byteorder="big")


class SignedWordElement(ModbusElement):
    """Signed 16-bit value in one register (two's complement)."""

    @property
    def length(self) -> int:
        return WORD_LENGTH

    def _decode(self, data: bytes) -> int:
        return convert_to_signed_int16(int.from_bytes(data, byteorder="big"))
