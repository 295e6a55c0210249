"""ModbusProtocol entity: the complete set of ranges a device needs polled."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from ..exceptions import ConfigurationError
from .channel import Channel
from .register_range import RegisterRange

_LOGGER = logging.getLogger(__name__)


class ModbusProtocol:
    """Ordered, validated collection of register ranges.

    Construction is a declarative assembly step. Malformed device
    definitions are rejected here, at startup, never during live polling:
    - at least one range is required
    - channel names are unique across the whole device
    - ranges never overlap

    Ranges keep their declaration order so poll scheduling is reproducible.

    Example:
        >>> protocol = ModbusProtocol(
        ...     RegisterRange(0xC568, SignedDoublewordElement(0xC568, Channel("P"))),
        ... )
        >>> [str(r) for r in protocol.ranges()]
        ['RegisterRange(0xC568-0xC569, length=2)']
    """

    def __init__(self, *ranges: RegisterRange) -> None:
        """Initialize and validate protocol.

        Raises:
            ConfigurationError: If the ranges do not form a valid device map
        """
        self._ranges: Tuple[RegisterRange, ...] = tuple(ranges)
        self._channels: Dict[str, Channel] = {}

        if not self._ranges:
            raise ConfigurationError("Protocol must define at least one range")

        for index, register_range in enumerate(self._ranges):
            for other in self._ranges[:index]:
                if register_range.overlaps(other):
                    raise ConfigurationError(
                        f"{register_range} overlaps {other}"
                    )
            for channel in register_range.channels:
                if channel.name in self._channels:
                    raise ConfigurationError(
                        f"Duplicate channel name '{channel.name}' in "
                        f"{register_range}"
                    )
                self._channels[channel.name] = channel

        _LOGGER.debug(
            "Built protocol: %d ranges, %d registers, %d channels",
            len(self._ranges),
            self.total_registers,
            len(self._channels),
        )

    def ranges(self) -> Tuple[RegisterRange, ...]:
        """Return the ranges a polling driver must read, in order."""
        return self._ranges

    def channels(self) -> Dict[str, Channel]:
        """Return a name -> channel mapping of every bound channel."""
        return dict(self._channels)

    def channel(self, name: str) -> Optional[Channel]:
        """Look up a channel by name, None if the device has no such channel."""
        return self._channels.get(name)

    def range_for(self, address: int) -> Optional[RegisterRange]:
        """Return the range containing ``address``, if any."""
        for register_range in self._ranges:
            if register_range.contains_address(address):
                return register_range
        return None

    @property
    def total_registers(self) -> int:
        return sum(register_range.length for register_range in self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self):
        return iter(self._ranges)

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"ModbusProtocol(ranges={len(self._ranges)}, "
            f"channels={len(self._channels)})"
        )
