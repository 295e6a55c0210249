"""Device natures: manufacturer register maps behind generic role contracts."""

from .modbus_device_nature import ModbusDeviceNature
from .configured_meter import ConfiguredMeter
from .socomec import SocomecMeter

__all__ = [
    "ModbusDeviceNature",
    "ConfiguredMeter",
    "SocomecMeter",
]
