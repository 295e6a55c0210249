"""Socomec DIRIS / COUNTIS energy meter."""

from __future__ import annotations

from typing import Optional

from ...domain.elements import (
    DummyElement,
    SignedDoublewordElement,
    UnsignedDoublewordElement,
)
from ...domain.entities import Channel, ModbusProtocol, RegisterRange
from ...domain.interfaces import MeterNature
from ..modbus_device_nature import ModbusDeviceNature

PHASES = (1, 2, 3)


class SocomecMeter(ModbusDeviceNature, MeterNature):
    """Socomec meter register map.

    Power values are signed 32-bit in units of 10 W / 10 var / 10 VA.
    Energy counters are unsigned 32-bit.

    Example:
        >>> meter = SocomecMeter("meter0")
        >>> [r.start_address.to_hex() for r in meter.protocol.ranges()]
        ['0xC568', '0xC652']
    """

    def define_modbus_protocol(self) -> ModbusProtocol:
        active_power = Channel("ActivePower", "W", 10)
        reactive_power = Channel("ReactivePower", "var", 10)
        apparent_power = Channel("ApparentPower", "VA", 10)
        phase_active = [Channel(f"ActivePowerPhase{p}", "W", 10) for p in PHASES]
        phase_reactive = [
            Channel(f"ReactivePowerPhase{p}", "var", 10) for p in PHASES
        ]

        active_positive_energy = Channel("ActivePositiveEnergy", "kWh")
        reactive_positive_energy = Channel("ReactivePositiveEnergy", "kvarh")
        apparent_energy = Channel("ApparentEnergy", "kVAh")
        active_negative_energy = Channel("ActiveNegativeEnergy", "kWh")
        reactive_negative_energy = Channel("ReactiveNegativeEnergy", "kvarh")

        return ModbusProtocol(
            RegisterRange(
                0xC568,
                SignedDoublewordElement(0xC568, active_power),
                SignedDoublewordElement(0xC56A, reactive_power),
                SignedDoublewordElement(0xC56C, apparent_power),
                DummyElement.between(0xC56E, 0xC56F),
                SignedDoublewordElement(0xC570, phase_active[0]),
                SignedDoublewordElement(0xC572, phase_active[1]),
                SignedDoublewordElement(0xC574, phase_active[2]),
                SignedDoublewordElement(0xC576, phase_reactive[0]),
                SignedDoublewordElement(0xC578, phase_reactive[1]),
                SignedDoublewordElement(0xC57A, phase_reactive[2]),
            ),
            RegisterRange(
                0xC652,
                UnsignedDoublewordElement(0xC652, active_positive_energy),
                UnsignedDoublewordElement(0xC654, reactive_positive_energy),
                UnsignedDoublewordElement(0xC656, apparent_energy),
                UnsignedDoublewordElement(0xC658, active_negative_energy),
                UnsignedDoublewordElement(0xC65A, reactive_negative_energy),
            ),
        )

    # Meter roles

    def active_power(self) -> Optional[Channel]:
        return self.channel("ActivePower")

    def reactive_power(self) -> Optional[Channel]:
        return self.channel("ReactivePower")

    def apparent_power(self) -> Optional[Channel]:
        return self.channel("ApparentPower")

    def active_positive_energy(self) -> Optional[Channel]:
        return self.channel("ActivePositiveEnergy")

    def active_negative_energy(self) -> Optional[Channel]:
        return self.channel("ActiveNegativeEnergy")

    def reactive_positive_energy(self) -> Optional[Channel]:
        return self.channel("ReactivePositiveEnergy")

    def reactive_negative_energy(self) -> Optional[Channel]:
        return self.channel("ReactiveNegativeEnergy")

    def apparent_energy(self) -> Optional[Channel]:
        return self.channel("ApparentEnergy")

    # Device specific

    def active_power_phase(self, phase: int) -> Optional[Channel]:
        """Active power of one phase (1-3).

        Raises:
            ValueError: If phase is not 1, 2 or 3
        """
        return self.channel(f"ActivePowerPhase{self._check_phase(phase)}")

    def reactive_power_phase(self, phase: int) -> Optional[Channel]:
        """Reactive power of one phase (1-3)."""
        return self.channel(f"ReactivePowerPhase{self._check_phase(phase)}")

    @staticmethod
    def _check_phase(phase: int) -> int:
        if phase not in PHASES:
            raise ValueError(f"Phase must be one of {PHASES}, got {phase!r}")
        return phase
