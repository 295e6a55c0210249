"""Address format helper functions.

This module provides utilities for parsing, formatting, and counting
register addresses in various formats (hex strings, decimal, integers).
"""

from typing import Union


def parse_address(address: Union[str, int]) -> int:
    """Parse address from string or int to int.

    Supports hex strings with a 0x prefix (0xC568), decimal strings and
    integers. Strings without the prefix are always decimal.

    Args:
        address: Address in any supported format

    Returns:
        Integer address

    Raises:
        ValueError: If address format is invalid

    Examples:
        >>> parse_address("0xC568")
        50536
        >>> parse_address("50536")
        50536
        >>> parse_address(4660)
        4660
    """
    if isinstance(address, bool):
        raise ValueError(f"Address must be str or int, got {type(address)}")

    if isinstance(address, int):
        return address

    if isinstance(address, str):
        address = address.strip()
        try:
            if address.startswith(("0x", "0X")):
                return int(address, 16)
            return int(address, 10)
        except ValueError as err:
            raise ValueError(f"Invalid address format: '{address}'") from err

    raise ValueError(f"Address must be str or int, got {type(address)}")


def format_address(address: int, prefix: bool = True) -> str:
    """Format address as hex string.

    Args:
        address: Integer address
        prefix: Whether to include '0x' prefix

    Returns:
        Formatted hex string (e.g., "0xC568" or "C568")

    Examples:
        >>> format_address(50536)
        '0xC568'
        >>> format_address(50536, prefix=False)
        'C568'
    """
    if prefix:
        return f"0x{address:04X}"
    return f"{address:04X}"


def calculate_register_count(start: int, end: int) -> int:
    """Calculate number of registers in range.

    Args:
        start: Starting address
        end: Ending address (inclusive)

    Returns:
        Number of registers

    Examples:
        >>> calculate_register_count(0xC56E, 0xC56F)
        2
    """
    return end - start + 1
