"""MeterNature interface for the generic meter capability.

Any device that can report power and energy implements this contract,
whatever its register layout. No behavior is inherited from it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.channel import Channel


class MeterNature(ABC):
    """Interface listing the fixed roles of a meter.

    Each accessor returns the channel filling that role. A meter whose
    register map lacks a role returns None; callers must treat None as
    "unsupported metric", not as an error.

    Example:
        >>> meter = SocomecMeter("meter0")
        >>> power = meter.active_power()
        >>> assert power.unit == "W"
    """

    @abstractmethod
    def active_power(self) -> Optional[Channel]:
        """Total active power (W)."""

    @abstractmethod
    def reactive_power(self) -> Optional[Channel]:
        """Total reactive power (var)."""

    @abstractmethod
    def apparent_power(self) -> Optional[Channel]:
        """Total apparent power (VA)."""

    @abstractmethod
    def active_positive_energy(self) -> Optional[Channel]:
        """Imported active energy counter."""

    @abstractmethod
    def active_negative_energy(self) -> Optional[Channel]:
        """Exported active energy counter."""

    @abstractmethod
    def reactive_positive_energy(self) -> Optional[Channel]:
        """Imported reactive energy counter."""

    @abstractmethod
    def reactive_negative_energy(self) -> Optional[Channel]:
        """Exported reactive energy counter."""

    @abstractmethod
    def apparent_energy(self) -> Optional[Channel]:
        """Apparent energy counter."""
