"""Domain interfaces for the Modbus meter library.

This module defines the contracts that device natures and infrastructure
implementations must fulfill:
- MeterNature: semantic roles exposed by any meter
- IRegisterReader: register fetch primitive used by the poller
"""

from .meter_nature import MeterNature
from .i_register_reader import IRegisterReader

__all__ = [
    "MeterNature",
    "IRegisterReader",
]
