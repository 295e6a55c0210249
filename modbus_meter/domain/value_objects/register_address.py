"""RegisterAddress value object.

Represents a Modbus register address (0x0000 - 0xFFFF).
Encapsulates validation and conversion logic.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from ... import const
from ..exceptions import ConfigurationError
from ..helpers.address_helpers import format_address, parse_address


@dataclass(frozen=True)
class RegisterAddress:
    """Immutable Modbus register address.

    Modbus register addresses are 16-bit unsigned integers (0-65535).
    This value object ensures addresses are always valid.

    Attributes:
        value: Register address as integer (0x0000 - 0xFFFF)

    Example:
        >>> addr = RegisterAddress(0xC568)
        >>> assert addr.value == 50536
        >>> assert addr.to_hex() == "0xC568"

    Raises:
        ConfigurationError: If address is outside valid range
    """

    value: int

    MIN_ADDRESS: ClassVar[int] = const.MIN_ADDRESS
    MAX_ADDRESS: ClassVar[int] = const.MAX_ADDRESS

    def __post_init__(self) -> None:
        """Validate address is in valid range.

        Raises:
            ConfigurationError: If address is not an int, < 0 or > 0xFFFF
        """
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ConfigurationError(
                f"Address must be int, got {type(self.value).__name__}"
            )

        if self.value < self.MIN_ADDRESS or self.value > self.MAX_ADDRESS:
            raise ConfigurationError(
                f"Register address must be between {self.MIN_ADDRESS:#06x} "
                f"and {self.MAX_ADDRESS:#06x}, got {self.value:#06x}"
            )

    @classmethod
    def of(cls, address: Union["RegisterAddress", int, str]) -> "RegisterAddress":
        """Coerce an int, hex string or RegisterAddress into a RegisterAddress.

        Example:
            >>> RegisterAddress.of("0xC568") == RegisterAddress.of(0xC568)
            True
        """
        if isinstance(address, RegisterAddress):
            return address
        try:
            return cls(parse_address(address))
        except ConfigurationError:
            raise
        except ValueError as err:
            raise ConfigurationError(str(err)) from err

    def to_hex(self) -> str:
        """Format address as hex string.

        Returns:
            Address formatted as "0xXXXX" (4 hex digits)

        Example:
            >>> RegisterAddress(0xC56E).to_hex()
            '0xC56E'
        """
        return format_address(self.value)

    def __str__(self) -> str:
        """String representation for logging."""
        return f"RegisterAddress({self.to_hex()})"

    def __repr__(self) -> str:
        """Developer representation."""
        return f"RegisterAddress(value={self.value:#06x})"

    def __int__(self) -> int:
        """Allow casting to int."""
        return self.value

    def __index__(self) -> int:
        """Allow use in range() and slicing."""
        return self.value

    def __add__(self, other: int) -> "RegisterAddress":
        """Add offset to address.

        Raises:
            ConfigurationError: If result is outside valid range

        Example:
            >>> (RegisterAddress(0xC568) + 2).to_hex()
            '0xC56A'
        """
        return RegisterAddress(self.value + int(other))

    def __sub__(self, other: int) -> "RegisterAddress":
        """Subtract offset from address."""
        return RegisterAddress(self.value - int(other))

    def __lt__(self, other: "RegisterAddress") -> bool:
        if not isinstance(other, RegisterAddress):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "RegisterAddress") -> bool:
        if not isinstance(other, RegisterAddress):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: "RegisterAddress") -> bool:
        if not isinstance(other, RegisterAddress):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: "RegisterAddress") -> bool:
        if not isinstance(other, RegisterAddress):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def from_hex(cls, hex_str: str) -> "RegisterAddress":
        """Create RegisterAddress from hex string.

        The 0x prefix is optional here, unlike in ``of()``.

        Example:
            >>> RegisterAddress.from_hex("C652").value == 0xC652
            True
        """
        try:
            value = int(hex_str, 16)
        except (TypeError, ValueError) as err:
            raise ConfigurationError(f"Invalid hex address: {hex_str!r}") from err
        return cls(value)
