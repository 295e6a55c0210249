"""Padding element for reserved or unused registers."""

from __future__ import annotations

from typing import Union

from ..exceptions import ConfigurationError
from ..helpers.address_helpers import calculate_register_count
from ..value_objects import RegisterAddress
from .modbus_element import ModbusElement


class DummyElement(ModbusElement):
    """Consumes registers without producing a value.

    Keeps the following elements of a range aligned with the device's real
    register map when intervening registers are reserved. A dummy never
    binds a channel.

    Example:
        >>> gap = DummyElement.between(0xC56E, 0xC56F)
        >>> assert gap.length == 2
        >>> assert gap.decode(b"\\x00" * 4) is None
    """

    def __init__(self, address: Union[RegisterAddress, int, str], length: int = 1) -> None:
        super().__init__(address, channel=None)
        if not isinstance(length, int) or isinstance(length, bool) or length < 1:
            raise ConfigurationError(
                f"Dummy element at {self.address.to_hex()} needs a positive "
                f"length, got {length!r}"
            )
        self._length = length

    @classmethod
    def between(
        cls,
        from_address: Union[RegisterAddress, int, str],
        to_address: Union[RegisterAddress, int, str],
    ) -> "DummyElement":
        """Create padding covering an inclusive address pair.

        Raises:
            ConfigurationError: If to_address precedes from_address
        """
        start = RegisterAddress.of(from_address)
        end = RegisterAddress.of(to_address)
        if end < start:
            raise ConfigurationError(
                f"Dummy element end {end.to_hex()} precedes start {start.to_hex()}"
            )
        return cls(start, calculate_register_count(int(start), int(end)))

    @property
    def length(self) -> int:
        return self._length

    @property
    def is_dummy(self) -> bool:
        return True

    def _decode(self, data: bytes) -> None:
        return None
