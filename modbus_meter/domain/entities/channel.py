"""Channel entity holding one decoded measurement.

A Channel is the leaf value sink of the decoding engine: exactly one element
writes into it, any number of readers (role accessors, consumers) read it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ...const import DEFAULT_MULTIPLIER
from ..exceptions import ConfigurationError


class Channel:
    """Named, unit-tagged, scaled measurement slot.

    The multiplier is fixed at construction and applied to every raw value
    before it is stored. A channel that was never decoded holds ``None``;
    callers must treat that as "no data yet", not as zero.

    Attributes:
        name: Channel name, unique within a device
        unit: Unit of measurement (e.g., "W", "var", "kWh")
        multiplier: Integer scale factor applied to raw values

    Example:
        >>> power = Channel("ActivePower", unit="W", multiplier=10)
        >>> assert power.get() is None
        >>> power.set_raw(1000)
        >>> assert power.get() == 10000
    """

    __slots__ = ("_name", "_unit", "_multiplier", "_value", "_last_update")

    def __init__(
        self,
        name: str,
        unit: str = "",
        multiplier: int = DEFAULT_MULTIPLIER,
    ) -> None:
        """Initialize channel.

        Raises:
            ConfigurationError: If name is empty or multiplier is not a
                non-zero integer
        """
        if not name or not isinstance(name, str):
            raise ConfigurationError("Channel name cannot be empty")
        if (
            not isinstance(multiplier, int)
            or isinstance(multiplier, bool)
            or multiplier == 0
        ):
            raise ConfigurationError(
                f"Channel {name}: multiplier must be a non-zero integer, "
                f"got {multiplier!r}"
            )

        self._name = name
        self._unit = unit or ""
        self._multiplier = multiplier
        self._value: Optional[int] = None
        self._last_update: Optional[datetime] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def last_update(self) -> Optional[datetime]:
        """UTC time of the last successful write, None if never decoded."""
        return self._last_update

    @property
    def has_value(self) -> bool:
        return self._value is not None

    def set_raw(self, raw_value: int) -> None:
        """Store ``raw_value * multiplier`` as the current value.

        No range validation is performed; any integer representable in
        the source register width is accepted.
        """
        self._value = raw_value * self._multiplier
        self._last_update = datetime.now(timezone.utc)

    def get(self) -> Optional[int]:
        """Return the last stored value, or None if never decoded."""
        return self._value

    def to_dict(self) -> Dict[str, Any]:
        """Convert channel to dictionary representation."""
        return {
            "name": self._name,
            "unit": self._unit,
            "multiplier": self._multiplier,
            "value": self._value,
            "last_update": (
                self._last_update.isoformat() if self._last_update else None
            ),
        }

    def __str__(self) -> str:
        """String representation for logging."""
        value = "n/a" if self._value is None else self._value
        return f"{self._name}: {value} {self._unit}".rstrip()

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"Channel(name={self._name!r}, unit={self._unit!r}, "
            f"multiplier={self._multiplier}, value={self._value!r})"
        )
