"""Base class for devices whose channels are read over Modbus."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..domain.entities import Channel, ModbusProtocol
from ..domain.exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)


class ModbusDeviceNature(ABC):
    """A device owning the channels of one Modbus register map.

    Subclasses describe their register map in ``define_modbus_protocol``.
    The protocol is built and validated in the constructor, so a malformed
    register map prevents the device from being created at all.

    Channels are reachable by name through ``channel``; subclasses expose
    them through role accessors (see MeterNature) instead of public fields.

    Attributes:
        thing_id: Identifier of the device instance
        poll_lock: Serializes poll cycles so channels that belong together
            (e.g. active, reactive and apparent power) are never torn
    """

    def __init__(self, thing_id: str) -> None:
        """Initialize device and build its protocol.

        Raises:
            ConfigurationError: If thing_id is empty or the register map
                is invalid
        """
        if not thing_id:
            raise ConfigurationError("Device thing_id cannot be empty")

        self._thing_id = thing_id
        self.poll_lock = asyncio.Lock()

        protocol = self.define_modbus_protocol()
        if not isinstance(protocol, ModbusProtocol):
            raise ConfigurationError(
                f"{type(self).__name__}.define_modbus_protocol() must return "
                f"a ModbusProtocol, got {type(protocol).__name__}"
            )
        self._protocol = protocol

        _LOGGER.info(
            "Activated %s '%s': %d ranges, %d channels",
            type(self).__name__,
            thing_id,
            len(protocol),
            len(protocol.channels()),
        )

    @abstractmethod
    def define_modbus_protocol(self) -> ModbusProtocol:
        """Build the register map of this device.

        Create each channel first, bind it to an element, then hand all
        ranges to ModbusProtocol, which validates the whole map.
        """

    @property
    def thing_id(self) -> str:
        return self._thing_id

    @property
    def protocol(self) -> ModbusProtocol:
        return self._protocol

    def channels(self) -> Dict[str, Channel]:
        """Return all channels of this device by name."""
        return self._protocol.channels()

    def channel(self, name: str) -> Optional[Channel]:
        """Return the channel named ``name``, None if the device lacks it."""
        return self._protocol.channel(name)

    def snapshot(self) -> Dict[str, Optional[int]]:
        """Return current channel values by name (None = no data yet)."""
        return {name: channel.get() for name, channel in self.channels().items()}

    def __repr__(self) -> str:
        """Developer representation."""
        return f"{type(self).__name__}(thing_id={self._thing_id!r})"
