"""Configuration loader for device profiles.

A device profile is a YAML file describing the register ranges of a meter
and which channels fill the generic meter roles:

    version: "1.0"
    device:
      manufacturer: Socomec
      model: DIRIS A40
    defaults:
      word_order: msw_lsw
    ranges:
      - start: 0xC568
        elements:
          - {type: int32, channel: ActivePower, unit: W, multiplier: 10}
          - {type: dummy, length: 2}
    roles:
      active_power: ActivePower
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Union

import voluptuous as vol
import yaml

from . import const
from .devices.configured_meter import ConfiguredMeter
from .domain.elements import ElementFactory
from .domain.exceptions import ConfigurationError
from .domain.helpers.address_helpers import parse_address
from .domain.value_objects import MeterRole, WordOrder

_LOGGER = logging.getLogger(__name__)


def _address(value: Any) -> int:
    """Coerce an int or hex/decimal string into a register address."""
    try:
        address = parse_address(value)
    except ValueError as err:
        raise vol.Invalid(str(err)) from err
    if not const.MIN_ADDRESS <= address <= const.MAX_ADDRESS:
        raise vol.Invalid(f"address 0x{address:X} out of range 0x0000-0xFFFF")
    return address


def _non_zero(value: int) -> int:
    if value == 0:
        raise vol.Invalid("multiplier must not be 0")
    return value


ADDRESS = vol.All(vol.Any(int, str), _address)

ELEMENT_SCHEMA = vol.Schema(
    {
        vol.Required("type"): vol.All(
            str, vol.Lower, vol.In(ElementFactory.get_supported_types())
        ),
        vol.Optional("address"): ADDRESS,
        vol.Optional("channel"): vol.All(str, vol.Length(min=1)),
        vol.Optional("unit", default=""): str,
        vol.Optional("multiplier", default=const.DEFAULT_MULTIPLIER): vol.All(
            int, _non_zero
        ),
        vol.Optional("length", default=1): vol.All(
            int, vol.Range(min=1, max=const.MAX_REGISTERS_PER_READ)
        ),
        vol.Optional("word_order", default=WordOrder.MSW_LSW.value): vol.In(
            [order.value for order in WordOrder]
        ),
    }
)

RANGE_SCHEMA = vol.Schema(
    {
        vol.Required("start"): ADDRESS,
        vol.Required("elements"): vol.All([ELEMENT_SCHEMA], vol.Length(min=1)),
    }
)

PROFILE_SCHEMA = vol.Schema(
    {
        vol.Required("version"): vol.Coerce(str),
        vol.Optional("device", default={}): {
            vol.Optional("manufacturer", default=""): str,
            vol.Optional("model", default=""): str,
            vol.Optional("description", default=""): str,
        },
        vol.Optional("defaults", default={}): {
            vol.Optional("unit"): str,
            vol.Optional("multiplier"): int,
            vol.Optional("word_order"): str,
        },
        vol.Required("ranges"): vol.All([RANGE_SCHEMA], vol.Length(min=1)),
        vol.Optional("roles", default={}): {
            vol.In(MeterRole.values()): vol.All(str, vol.Length(min=1))
        },
    }
)


def validate_device_profile(config: dict[str, Any]) -> dict[str, Any]:
    """Validate a device profile and fill in defaults.

    Args:
        config: Raw profile dict, as parsed from YAML

    Returns:
        Validated profile dict

    Raises:
        ConfigurationError: If the profile is invalid
    """
    if not config or not isinstance(config, dict):
        raise ConfigurationError("Device profile is empty")

    if "version" not in config:
        raise ConfigurationError("Device profile missing required 'version' field")

    version = str(config["version"])
    if not version.startswith(const.PROFILE_VERSION_PREFIX):
        raise ConfigurationError(
            f"Device profile version {version} not supported. "
            f"Only version {const.PROFILE_VERSION_PREFIX}x is supported."
        )

    config = copy.deepcopy(config)
    _apply_defaults(config)

    try:
        profile = PROFILE_SCHEMA(config)
    except vol.Invalid as err:
        raise ConfigurationError(f"Invalid device profile: {err}") from err

    _validate_element_bindings(profile)
    return profile


def _apply_defaults(config: dict[str, Any]) -> None:
    """Copy the profile's defaults into elements that bind a channel."""
    defaults = config.get("defaults") or {}
    if not isinstance(defaults, dict):
        return
    for range_def in config.get("ranges") or []:
        if not isinstance(range_def, dict):
            continue
        for element in range_def.get("elements") or []:
            if not isinstance(element, dict) or "channel" not in element:
                continue
            for key, value in defaults.items():
                if key not in element:
                    element[key] = value


def _validate_element_bindings(profile: dict[str, Any]) -> None:
    """Check channel bindings fit the element types.

    Raises:
        ConfigurationError: If a dummy binds a channel or a value element
            does not
    """
    for range_idx, range_def in enumerate(profile["ranges"]):
        for idx, element in enumerate(range_def["elements"]):
            location = f"Range #{range_idx} (0x{range_def['start']:04X}) element #{idx}"
            if element["type"] == const.DATA_TYPE_DUMMY:
                if "channel" in element:
                    raise ConfigurationError(
                        f"{location}: dummy elements cannot bind a channel"
                    )
            elif "channel" not in element:
                raise ConfigurationError(
                    f"{location}: {element['type']} element requires 'channel'"
                )


def load_device_profile(path: Union[str, Path]) -> dict[str, Any]:
    """Load and validate a device profile from YAML.

    Args:
        path: Profile file path

    Returns:
        Validated profile dict

    Raises:
        FileNotFoundError: If the profile file does not exist
        ConfigurationError: If the profile is invalid
    """
    profile_file = Path(path)
    if not profile_file.exists():
        raise FileNotFoundError(f"Device profile not found: {profile_file}")

    try:
        config = yaml.safe_load(profile_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Invalid YAML in {profile_file}: {err}") from err

    profile = validate_device_profile(config)

    _LOGGER.info(
        "Loaded device profile %s: %s %s, %d ranges, %d roles",
        profile_file.name,
        profile["device"]["manufacturer"],
        profile["device"]["model"],
        len(profile["ranges"]),
        len(profile["roles"]),
    )
    return profile


def bundled_profile_path(name: str) -> Path:
    """Return the path of a profile shipped with this package.

    Example:
        >>> bundled_profile_path("socomec_diris").name
        'socomec_diris.yaml'
    """
    return Path(__file__).parent / const.PROFILE_DIRECTORY / f"{name}.yaml"


def load_meter(path: Union[str, Path], thing_id: str) -> ConfiguredMeter:
    """Load a profile and build the meter it describes.

    Raises:
        FileNotFoundError: If the profile file does not exist
        ConfigurationError: If the profile or its register map is invalid
    """
    return ConfiguredMeter(thing_id, load_device_profile(path))
