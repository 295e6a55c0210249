"""Base class for register decode rules using the Strategy pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from ...const import REGISTER_BYTES
from ..entities.channel import Channel
from ..exceptions import FormatError
from ..value_objects import RegisterAddress


class ModbusElement(ABC):
    """Abstract decode rule for a fixed-width span of registers.

    An element covers ``length`` consecutive registers starting at
    ``address``. Concrete elements turn the raw bytes of that span into an
    integer; dummy elements only keep the following addresses aligned.

    Elements never write to their channel themselves. The enclosing range
    decodes every element first and commits all values together.
    """

    def __init__(
        self,
        address: Union[RegisterAddress, int, str],
        channel: Optional[Channel] = None,
    ) -> None:
        self._address = RegisterAddress.of(address)
        self._channel = channel

    @property
    def address(self) -> RegisterAddress:
        return self._address

    @property
    def channel(self) -> Optional[Channel]:
        return self._channel

    @property
    @abstractmethod
    def length(self) -> int:
        """Width of the element in registers."""

    @property
    def byte_length(self) -> int:
        return self.length * REGISTER_BYTES

    @property
    def next_address(self) -> int:
        """First address after this element (may equal 0x10000)."""
        return int(self._address) + self.length

    @property
    def is_dummy(self) -> bool:
        return False

    def decode(self, data: bytes) -> Optional[int]:
        """Decode the raw bytes of this element's span.

        Args:
            data: Exactly ``byte_length`` big-endian bytes

        Returns:
            Raw integer before channel multiplier, None for dummies

        Raises:
            FormatError: If data does not match the element width
        """
        if len(data) != self.byte_length:
            raise FormatError(
                f"{type(self).__name__} at {self._address.to_hex()} expects "
                f"{self.byte_length} bytes, got {len(data)}"
            )
        return self._decode(bytes(data))

    @abstractmethod
    def _decode(self, data: bytes) -> Optional[int]:
        """Decode a span already checked for length."""

    def __repr__(self) -> str:
        """Developer representation."""
        channel = self._channel.name if self._channel else None
        return (
            f"{type(self).__name__}(address={self._address.to_hex()}, "
            f"length={self.length}, channel={channel!r})"
        )
