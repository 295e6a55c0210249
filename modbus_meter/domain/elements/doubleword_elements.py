"""Two-register (32-bit) elements."""

from __future__ import annotations

from typing import Optional, Union

from ...const import DOUBLEWORD_LENGTH
from ..entities.channel import Channel
from ..helpers.transformations import (
    combine_words,
    convert_to_signed_int32,
    registers_from_bytes,
)
from ..value_objects import RegisterAddress, WordOrder
from .modbus_element import ModbusElement


class _DoublewordElement(ModbusElement):
    """Shared word handling for 32-bit elements."""

    def __init__(
        self,
        address: Union[RegisterAddress, int, str],
        channel: Optional[Channel] = None,
        word_order: WordOrder = WordOrder.MSW_LSW,
    ) -> None:
        super().__init__(address, channel)
        self._word_order = word_order

    @property
    def length(self) -> int:
        return DOUBLEWORD_LENGTH

    @property
    def word_order(self) -> WordOrder:
        return self._word_order

    def _unsigned(self, data: bytes) -> int:
        first, second = registers_from_bytes(data)
        return combine_words(first, second, self._word_order)


class UnsignedDoublewordElement(_DoublewordElement):
    """Unsigned 32-bit value in two registers (0 to 4294967295).

    Example:
        >>> element = UnsignedDoublewordElement(0xC652)
        >>> element.decode(bytes.fromhex("FFFFFFFF"))
        4294967295
    """

    def _decode(self, data: bytes) -> int:
        return self._unsigned(data)


class SignedDoublewordElement(_DoublewordElement):
    """Signed 32-bit value in two registers (two's complement).

    Example:
        >>> element = SignedDoublewordElement(0xC568)
        >>> element.decode(bytes.fromhex("FFFFFFFF"))
        -1
    """

    def _decode(self, data: bytes) -> int:
        return convert_to_signed_int32(self._unsigned(data))
