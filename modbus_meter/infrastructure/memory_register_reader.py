"""In-memory register reader for simulations and tests.

Implements IRegisterReader over a sparse register image, so devices can be
polled without any serial or TCP hardware.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..const import MAX_REGISTERS_PER_READ
from ..domain.exceptions import TransportError
from ..domain.helpers.transformations import split_words
from ..domain.interfaces import IRegisterReader
from ..domain.value_objects import RegisterAddress, WordOrder

_LOGGER = logging.getLogger(__name__)


class MemoryRegisterReader(IRegisterReader):
    """Register reader backed by a dictionary of register values.

    Unset registers read as zero. Reads touching an address registered with
    ``fail_on`` raise TransportError, which lets tests simulate a device
    rejecting one range while answering the others.

    Attributes:
        calls: History of (start_address, count) reads

    Example:
        >>> reader = MemoryRegisterReader()
        >>> reader.set_doubleword(0xC568, 1000)
        >>> await reader.read_registers(0xC568, 2)
        b'\\x00\\x00\\x03\\xe8'
    """

    def __init__(self, registers: Optional[Dict[int, int]] = None) -> None:
        self._registers: Dict[int, int] = {}
        self._failing: Set[int] = set()
        self._truncate: Dict[int, int] = {}
        self.calls: List[Tuple[int, int]] = []
        if registers:
            for address, value in registers.items():
                self.set_register(address, value)

    def set_register(self, address: int, value: int) -> None:
        """Store one raw 16-bit register value."""
        RegisterAddress(address)  # validates range
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"Register value must be 0-65535, got {value}")
        self._registers[address] = value

    def set_registers(self, start_address: int, values: Iterable[int]) -> None:
        """Store consecutive raw register values."""
        for offset, value in enumerate(values):
            self.set_register(start_address + offset, value)

    def set_doubleword(
        self,
        address: int,
        value: int,
        word_order: WordOrder = WordOrder.MSW_LSW,
    ) -> None:
        """Store a 32-bit value (negative values as two's complement)."""
        self.set_registers(address, split_words(value, word_order))

    def fail_on(self, address: int) -> None:
        """Make every read covering ``address`` raise TransportError."""
        self._failing.add(address)

    def truncate_reads_at(self, start_address: int, byte_count: int) -> None:
        """Answer reads starting at ``start_address`` with only ``byte_count`` bytes."""
        self._truncate[start_address] = byte_count

    def reset_failures(self) -> None:
        self._failing.clear()
        self._truncate.clear()

    async def read_registers(self, start_address: int, count: int) -> bytes:
        """Read registers from the in-memory image.

        Raises:
            TransportError: If the read covers a failing address or the
                request is out of Modbus limits
        """
        self.calls.append((start_address, count))

        if count < 1 or count > MAX_REGISTERS_PER_READ:
            raise TransportError(
                f"Register count must be 1-{MAX_REGISTERS_PER_READ}, got {count}"
            )

        addresses = range(start_address, start_address + count)
        failing = self._failing.intersection(addresses)
        if failing:
            raise TransportError(
                f"Device rejected read at 0x{start_address:04X} "
                f"(count={count}, failing 0x{min(failing):04X})"
            )

        data = b"".join(
            self._registers.get(address, 0).to_bytes(2, byteorder="big")
            for address in addresses
        )
        if start_address in self._truncate:
            data = data[: self._truncate[start_address]]

        _LOGGER.debug(
            "Read 0x%04X (count=%d): %s", start_address, count, data.hex()
        )
        return data
