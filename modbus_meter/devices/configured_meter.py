"""Meter whose register map comes from a device profile."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..domain.elements import ElementFactory, ModbusElement
from ..domain.entities import Channel, ModbusProtocol, RegisterRange
from ..domain.exceptions import ConfigurationError
from ..domain.interfaces import MeterNature
from ..domain.value_objects import MeterRole, WordOrder
from .modbus_device_nature import ModbusDeviceNature

_LOGGER = logging.getLogger(__name__)


class ConfiguredMeter(ModbusDeviceNature, MeterNature):
    """Generic meter built from a validated device profile.

    The profile lists ranges of elements and maps meter roles to channel
    names. Roles the profile leaves out are reported as unsupported (None).

    Use ``config_loader.load_meter`` to build one from a YAML file.

    Attributes:
        manufacturer: Manufacturer named in the profile
        model: Model named in the profile
    """

    def __init__(self, thing_id: str, profile: Dict[str, Any]) -> None:
        """Initialize meter from a validated profile.

        Raises:
            ConfigurationError: If the register map is invalid or a role
                refers to a channel the profile does not define
        """
        self._profile = profile
        device = profile.get("device", {})
        self.manufacturer: str = device.get("manufacturer", "")
        self.model: str = device.get("model", "")
        self._roles: Dict[MeterRole, str] = {
            MeterRole(role): name for role, name in profile.get("roles", {}).items()
        }

        super().__init__(thing_id)

        for role, name in self._roles.items():
            if self.channel(name) is None:
                raise ConfigurationError(
                    f"Role '{role.value}' refers to unknown channel '{name}'"
                )

        missing = [role.value for role in MeterRole if role not in self._roles]
        if missing:
            _LOGGER.debug(
                "Meter '%s' (%s %s) does not support roles: %s",
                thing_id,
                self.manufacturer,
                self.model,
                missing,
            )

    def define_modbus_protocol(self) -> ModbusProtocol:
        ranges = []
        for range_def in self._profile["ranges"]:
            start = range_def["start"]
            address = start
            elements = []
            for element_def in range_def["elements"]:
                element = self._build_element(element_def, address)
                elements.append(element)
                address = element.next_address
            ranges.append(RegisterRange(start, *elements))
        return ModbusProtocol(*ranges)

    @staticmethod
    def _build_element(element_def: Dict[str, Any], address: int) -> ModbusElement:
        # An explicit address that breaks contiguity is reported by RegisterRange
        address = element_def.get("address", address)
        channel = None
        if "channel" in element_def:
            channel = Channel(
                element_def["channel"],
                element_def.get("unit", ""),
                element_def.get("multiplier", 1),
            )
        return ElementFactory.create(
            element_def["type"],
            address,
            channel,
            word_order=WordOrder(element_def.get("word_order", WordOrder.MSW_LSW.value)),
            length=element_def.get("length", 1),
        )

    def role(self, role: MeterRole) -> Optional[Channel]:
        """Return the channel filling ``role``, None if unsupported."""
        name = self._roles.get(role)
        if name is None:
            return None
        return self.channel(name)

    def active_power(self) -> Optional[Channel]:
        return self.role(MeterRole.ACTIVE_POWER)

    def reactive_power(self) -> Optional[Channel]:
        return self.role(MeterRole.REACTIVE_POWER)

    def apparent_power(self) -> Optional[Channel]:
        return self.role(MeterRole.APPARENT_POWER)

    def active_positive_energy(self) -> Optional[Channel]:
        return self.role(MeterRole.ACTIVE_POSITIVE_ENERGY)

    def active_negative_energy(self) -> Optional[Channel]:
        return self.role(MeterRole.ACTIVE_NEGATIVE_ENERGY)

    def reactive_positive_energy(self) -> Optional[Channel]:
        return self.role(MeterRole.REACTIVE_POSITIVE_ENERGY)

    def reactive_negative_energy(self) -> Optional[Channel]:
        return self.role(MeterRole.REACTIVE_NEGATIVE_ENERGY)

    def apparent_energy(self) -> Optional[Channel]:
        return self.role(MeterRole.APPARENT_ENERGY)
