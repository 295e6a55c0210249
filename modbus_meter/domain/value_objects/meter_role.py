"""MeterRole value object.

Names the semantic roles of the generic meter contract, independent of any
manufacturer's register layout.
"""

from enum import Enum


class MeterRole(Enum):
    """Semantic roles a meter may fill with one of its channels."""

    ACTIVE_POWER = "active_power"
    REACTIVE_POWER = "reactive_power"
    APPARENT_POWER = "apparent_power"
    ACTIVE_POSITIVE_ENERGY = "active_positive_energy"
    ACTIVE_NEGATIVE_ENERGY = "active_negative_energy"
    REACTIVE_POSITIVE_ENERGY = "reactive_positive_energy"
    REACTIVE_NEGATIVE_ENERGY = "reactive_negative_energy"
    APPARENT_ENERGY = "apparent_energy"

    @classmethod
    def values(cls) -> list[str]:
        """Return the role identifiers accepted by device profiles."""
        return [role.value for role in cls]
