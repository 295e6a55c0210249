"""IRegisterReader interface for register fetch implementations.

The reader owns the wire: framing, serial/TCP transport, retries and
timeouts. The decoding core only ever sees the raw register bytes it returns.
"""

from abc import ABC, abstractmethod


class IRegisterReader(ABC):
    """Interface for the register-fetch primitive used by the poller.

    Example:
        >>> reader = MemoryRegisterReader()
        >>> reader.set_registers(0xC568, [0x0000, 0x03E8])
        >>> data = await reader.read_registers(0xC568, 2)
        >>> assert data == b"\\x00\\x00\\x03\\xe8"
    """

    @abstractmethod
    async def read_registers(self, start_address: int, count: int) -> bytes:
        """Read ``count`` consecutive registers starting at ``start_address``.

        Args:
            start_address: First register address (0x0000 - 0xFFFF)
            count: Number of registers (1-125)

        Returns:
            Raw register bytes, big-endian, two per register. The poller
            hands them to the range unchanged, so a short answer shows up
            as a FormatError.

        Raises:
            TransportError: If the device cannot be reached or rejects the read
            asyncio.TimeoutError: If no answer arrives in time
        """
