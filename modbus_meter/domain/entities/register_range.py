"""RegisterRange entity for contiguous register reads.

A RegisterRange is an ordered, gap-free span of elements that is fetched
from the device in a single read request and decoded all-or-nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union

from ...const import MAX_REGISTERS_PER_READ, REGISTER_BYTES
from ..exceptions import ConfigurationError, FormatError
from ..value_objects import RegisterAddress
from .channel import Channel

if TYPE_CHECKING:
    from ..elements import ModbusElement

_LOGGER = logging.getLogger(__name__)


class RegisterRange:
    """Domain entity representing one bulk read of consecutive registers.

    Invariants, checked at construction:
    - the first element starts at ``start_address``
    - ``element[i + 1].address == element[i].address + element[i].length``
    - total length fits into a single Modbus read (125 registers)
    - at least one element binds a channel, and no channel is bound twice

    Attributes:
        start_address: First register of the range
        elements: Ordered elements covering the range

    Example:
        >>> active_power = Channel("ActivePower", "W", 10)
        >>> rng = RegisterRange(
        ...     0xC568,
        ...     SignedDoublewordElement(0xC568, active_power),
        ...     DummyElement(0xC56A, 2),
        ... )
        >>> assert rng.length == 4
        >>> rng.decode(bytes.fromhex("000003E8" "00000000"))
        {'ActivePower': 10000}
    """

    def __init__(
        self,
        start_address: Union[RegisterAddress, int, str],
        *elements: "ModbusElement",
    ) -> None:
        """Initialize and validate a register range.

        Raises:
            ConfigurationError: If the elements violate the range invariants
        """
        self._start_address = RegisterAddress.of(start_address)
        self._elements: Tuple["ModbusElement", ...] = tuple(elements)
        self._validate()
        self._length = sum(element.length for element in self._elements)

    def _validate(self) -> None:
        start_hex = self._start_address.to_hex()

        if not self._elements:
            raise ConfigurationError(f"Range {start_hex} has no elements")

        expected = int(self._start_address)
        seen_channels: set[int] = set()
        for index, element in enumerate(self._elements):
            if int(element.address) != expected:
                raise ConfigurationError(
                    f"Range {start_hex}: element #{index} starts at "
                    f"{element.address.to_hex()}, expected 0x{expected:04X} "
                    "(elements must be contiguous)"
                )
            channel = element.channel
            if channel is not None:
                if id(channel) in seen_channels:
                    raise ConfigurationError(
                        f"Range {start_hex}: channel {channel.name} is bound "
                        "to more than one element"
                    )
                seen_channels.add(id(channel))
            expected = element.next_address

        total = expected - int(self._start_address)
        if total > MAX_REGISTERS_PER_READ:
            raise ConfigurationError(
                f"Range {start_hex} spans {total} registers, exceeds Modbus "
                f"limit of {MAX_REGISTERS_PER_READ}"
            )
        if expected - 1 > RegisterAddress.MAX_ADDRESS:
            raise ConfigurationError(
                f"Range {start_hex} runs past the end of the address space"
            )
        if not seen_channels:
            raise ConfigurationError(
                f"Range {start_hex} contains only dummy elements"
            )

    @property
    def start_address(self) -> RegisterAddress:
        return self._start_address

    @property
    def end_address(self) -> RegisterAddress:
        """Last register address in the range (inclusive)."""
        return self._start_address + (self._length - 1)

    @property
    def length(self) -> int:
        """Total register count the caller must request from the device."""
        return self._length

    @property
    def byte_length(self) -> int:
        return self._length * REGISTER_BYTES

    @property
    def elements(self) -> Tuple["ModbusElement", ...]:
        return self._elements

    @property
    def channels(self) -> List[Channel]:
        """Channels bound by this range's elements, in register order."""
        return [e.channel for e in self._elements if e.channel is not None]

    def contains_address(self, address: int) -> bool:
        """Check if address is within this range."""
        return int(self._start_address) <= int(address) <= int(self.end_address)

    def overlaps(self, other: "RegisterRange") -> bool:
        """Check if two ranges share at least one register."""
        return not (
            int(self.end_address) < int(other.start_address)
            or int(other.end_address) < int(self._start_address)
        )

    def decode(self, data: bytes) -> Dict[str, int]:
        """Decode a full read of this range into its channels.

        Every element is decoded before any channel is written, so a
        failure leaves all channels of the range with their previous values.

        Args:
            data: Exactly ``byte_length`` bytes as returned by the device

        Returns:
            Mapping of channel name to the stored (scaled) value

        Raises:
            FormatError: If data length differs from ``byte_length`` or an
                element rejects its span
        """
        if len(data) != self.byte_length:
            raise FormatError(
                f"Range {self._start_address.to_hex()} expects "
                f"{self.byte_length} bytes ({self._length} registers), "
                f"got {len(data)}"
            )

        pending: List[Tuple[Channel, int]] = []
        offset = 0
        for element in self._elements:
            span = data[offset : offset + element.byte_length]
            offset += element.byte_length
            raw_value: Optional[int] = element.decode(span)
            if element.channel is not None and raw_value is not None:
                pending.append((element.channel, raw_value))

        result = {}
        for channel, raw_value in pending:
            channel.set_raw(raw_value)
            result[channel.name] = channel.get()

        _LOGGER.debug(
            "Decoded range %s-%s: %d channels updated",
            self._start_address.to_hex(),
            self.end_address.to_hex(),
            len(result),
        )
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert range to dictionary representation."""
        return {
            "start_address": int(self._start_address),
            "start_address_hex": self._start_address.to_hex(),
            "end_address_hex": self.end_address.to_hex(),
            "length": self._length,
            "channels": [channel.name for channel in self.channels],
        }

    def __str__(self) -> str:
        """String representation for logging."""
        return (
            f"RegisterRange({self._start_address.to_hex()}-"
            f"{self.end_address.to_hex()}, length={self._length})"
        )

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"RegisterRange(start_address={self._start_address!r}, "
            f"elements={len(self._elements)}, length={self._length})"
        )
