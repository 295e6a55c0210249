"""Value transformation helper functions.

This module provides utilities for turning raw register bytes into integers:
splitting a byte buffer into 16-bit registers, combining register pairs into
32-bit doublewords and signed (two's complement) conversions.
"""

from typing import List

from ..value_objects.word_order import WordOrder


def convert_to_signed_int16(value: int) -> int:
    """Convert unsigned 16-bit to signed 16-bit.

    Uses two's complement representation. Values >= 0x8000 are negative.

    Args:
        value: Unsigned 16-bit integer (0-65535)

    Returns:
        Signed 16-bit integer (-32768 to 32767)

    Examples:
        >>> convert_to_signed_int16(0x0000)
        0
        >>> convert_to_signed_int16(0x7FFF)
        32767
        >>> convert_to_signed_int16(0x8000)
        -32768
        >>> convert_to_signed_int16(0xFFFF)
        -1
    """
    if value >= 0x8000:
        return value - 0x10000
    return value


def convert_to_signed_int32(value: int) -> int:
    """Convert unsigned 32-bit to signed 32-bit.

    Args:
        value: Unsigned 32-bit value (0-4294967295)

    Returns:
        Signed interpretation (-2147483648 to 2147483647)

    Examples:
        >>> convert_to_signed_int32(0x000003E8)
        1000
        >>> convert_to_signed_int32(0xFFFFFFFF)
        -1
        >>> convert_to_signed_int32(0x80000000)
        -2147483648
    """
    if value > 0x7FFFFFFF:
        return value - 0x100000000
    return value


def registers_from_bytes(data: bytes) -> List[int]:
    """Split a big-endian byte buffer into 16-bit register values.

    Args:
        data: Raw bytes, two per register

    Returns:
        List of unsigned register values

    Raises:
        ValueError: If data has an odd number of bytes

    Examples:
        >>> registers_from_bytes(b"\\x00\\x00\\x03\\xe8")
        [0, 1000]
    """
    if len(data) % 2:
        raise ValueError(f"Register data must have an even length, got {len(data)}")
    return [
        int.from_bytes(data[i : i + 2], byteorder="big")
        for i in range(0, len(data), 2)
    ]


def combine_words(
    first: int, second: int, word_order: WordOrder = WordOrder.MSW_LSW
) -> int:
    """Combine two registers into one unsigned 32-bit value.

    Args:
        first: Register at the lower address
        second: Register at the higher address
        word_order: Which of the two carries the high word

    Returns:
        Unsigned 32-bit value

    Examples:
        >>> combine_words(0x0001, 0x0002)
        65538
        >>> combine_words(0x0002, 0x0001, WordOrder.LSW_MSW)
        65538
    """
    if word_order is WordOrder.LSW_MSW:
        first, second = second, first
    return ((first & 0xFFFF) << 16) | (second & 0xFFFF)


def split_words(value: int, word_order: WordOrder = WordOrder.MSW_LSW) -> List[int]:
    """Split an unsigned 32-bit value into two registers.

    Inverse of combine_words. Used by register simulators.

    Examples:
        >>> split_words(65538)
        [1, 2]
        >>> split_words(65538, WordOrder.LSW_MSW)
        [2, 1]
    """
    value &= 0xFFFFFFFF
    words = [(value >> 16) & 0xFFFF, value & 0xFFFF]
    if word_order is WordOrder.LSW_MSW:
        words.reverse()
    return words
