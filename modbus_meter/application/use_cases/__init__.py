"""Use cases for the Modbus meter application layer.

Use cases orchestrate the flow of data between register readers and
device natures. Each has a single public entry point and returns a DTO.
One class per file.
"""

from .poll_result import PollResult
from .poll_device_use_case import PollDeviceUseCase

__all__ = [
    "PollResult",
    "PollDeviceUseCase",
]
