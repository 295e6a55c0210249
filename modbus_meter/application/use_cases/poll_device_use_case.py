"""PollDeviceUseCase for Modbus meter polling.

This use case orchestrates one poll cycle of a device:
1. Take the device's poll lock
2. Read each register range through the register reader
3. Decode the bytes into the range's channels
4. Record per-range failures and keep going

A failed range leaves its channels untouched; other ranges and other
devices are unaffected.
"""

import asyncio
import logging
import time
from typing import Dict, Mapping, Optional, Sequence

from ...const import READ_TIMEOUT
from ...devices.modbus_device_nature import ModbusDeviceNature
from ...domain.entities import RegisterRange
from ...domain.exceptions import FormatError, TransportError
from ...domain.interfaces import IRegisterReader
from ...infrastructure.decorators import handle_read_errors
from .poll_result import PollResult

_LOGGER = logging.getLogger(__name__)


class PollDeviceUseCase:
    """Use case for polling the register ranges of a device.

    Responsibilities:
    - Serialize poll cycles per device (``device.poll_lock``)
    - Request exactly ``range.length`` registers per range
    - Apply the read timeout
    - Turn range failures into PollResult entries

    Dependencies (injected):
    - reader: Register fetch primitive for the device's bus

    Example:
        >>> use_case = PollDeviceUseCase(reader)
        >>> result = await use_case.execute(meter)
        >>> if result.success:
        ...     print(f"Read {len(result.data)} channels in {result.duration:.2f}s")
    """

    def __init__(
        self,
        reader: Optional[IRegisterReader] = None,
        read_timeout: Optional[float] = READ_TIMEOUT,
    ):
        """Initialize use case with dependencies.

        Args:
            reader: Default register reader
            read_timeout: Seconds per range read, None to wait forever
        """
        self._reader = reader
        self._read_timeout = read_timeout
        self._total_polls = 0

    @property
    def total_polls(self) -> int:
        return self._total_polls

    async def execute(
        self,
        device: ModbusDeviceNature,
        reader: Optional[IRegisterReader] = None,
    ) -> PollResult:
        """Execute one poll cycle.

        Args:
            device: Device whose ranges are read
            reader: Reader to use instead of the default one

        Returns:
            PollResult with decoded values and failed ranges

        Raises:
            ValueError: If no reader is available
            Exception: Propagates unexpected errors (bugs, not bus trouble)
        """
        reader = self._resolve_reader(device, reader)

        ranges = device.protocol.ranges()
        result = PollResult(thing_id=device.thing_id)
        start_time = time.monotonic()

        async with device.poll_lock:
            for i, register_range in enumerate(ranges, 1):
                _LOGGER.debug(
                    "%s: reading range %d/%d: %s-%s (%d registers)",
                    device.thing_id,
                    i,
                    len(ranges),
                    register_range.start_address.to_hex(),
                    register_range.end_address.to_hex(),
                    register_range.length,
                )
                try:
                    values = await self._read_range(reader, register_range)
                except (asyncio.TimeoutError, TransportError, FormatError) as err:
                    result.failed_ranges[int(register_range.start_address)] = (
                        str(err) or type(err).__name__
                    )
                    continue

                result.data.update(values)
                result.ranges_read += 1

        result.duration = time.monotonic() - start_time
        self._total_polls += 1

        if result.success:
            _LOGGER.debug(
                "%s: polled %d channels from %d ranges in %.3fs",
                device.thing_id,
                len(result.data),
                result.ranges_read,
                result.duration,
            )
        else:
            _LOGGER.warning(
                "%s: %d of %d ranges failed: %s",
                device.thing_id,
                len(result.failed_ranges),
                len(ranges),
                [f"0x{address:04X}" for address in result.failed_ranges],
            )

        return result

    async def execute_all(
        self,
        devices: Sequence[ModbusDeviceNature],
        readers: Optional[Mapping[str, IRegisterReader]] = None,
    ) -> Dict[str, PollResult]:
        """Poll several devices concurrently.

        Devices share no state, so their cycles run in parallel; each one
        still holds its own poll lock. Readers and thing_ids are checked
        before any device is polled. An unexpected error in one cycle does
        not cancel the others: every cycle runs to completion first, then
        the first error is raised.

        Args:
            devices: Devices to poll
            readers: Reader per thing_id; devices without one use the default

        Returns:
            Mapping of thing_id -> PollResult

        Raises:
            ValueError: If a thing_id appears twice or a device has no reader
            Exception: The first unexpected error of any cycle
        """
        readers = readers or {}
        seen = set()
        resolved = []
        for device in devices:
            if device.thing_id in seen:
                raise ValueError(f"Duplicate device thing_id {device.thing_id}")
            seen.add(device.thing_id)
            resolved.append(
                (device, self._resolve_reader(device, readers.get(device.thing_id)))
            )

        outcomes = await asyncio.gather(
            *(self.execute(device, reader) for device, reader in resolved),
            return_exceptions=True,
        )

        results: Dict[str, PollResult] = {}
        errors = []
        for (device, _), outcome in zip(resolved, outcomes):
            if isinstance(outcome, BaseException):
                _LOGGER.error(
                    "%s: poll cycle aborted: %s", device.thing_id, outcome
                )
                errors.append(outcome)
            else:
                results[device.thing_id] = outcome
        if errors:
            raise errors[0]
        return results

    def _resolve_reader(
        self, device: ModbusDeviceNature, reader: Optional[IRegisterReader]
    ) -> IRegisterReader:
        reader = reader or self._reader
        if reader is None:
            raise ValueError(f"No register reader for device {device.thing_id}")
        return reader

    @handle_read_errors("Range read")
    async def _read_range(
        self, reader: IRegisterReader, register_range: RegisterRange
    ) -> Dict[str, int]:
        """Fetch and decode one range.

        Raises:
            asyncio.TimeoutError: If the read exceeds the timeout
            TransportError: If the reader fails
            FormatError: If the returned bytes do not fit the range
        """
        read = reader.read_registers(
            int(register_range.start_address), register_range.length
        )
        if self._read_timeout is not None:
            data = await asyncio.wait_for(read, timeout=self._read_timeout)
        else:
            data = await read
        return register_range.decode(data)
