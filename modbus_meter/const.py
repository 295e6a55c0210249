"""Constants for the Modbus meter decoding library.

This file contains only essential constants needed by the decoding code.
Register maps live in device classes or YAML profile files.
"""

from __future__ import annotations

# Register address space
MIN_ADDRESS = 0x0000
MAX_ADDRESS = 0xFFFF

# Each Modbus register carries 16 bits, transmitted as 2 bytes
REGISTER_BYTES = 2
WORD_LENGTH = 1  # Registers per 16-bit value
DOUBLEWORD_LENGTH = 2  # Registers per 32-bit value

# Modbus function 0x03 (read holding registers) returns at most 125 registers
MAX_REGISTERS_PER_READ = 125

# Channel defaults
DEFAULT_MULTIPLIER = 1

# Device profiles
PROFILE_VERSION_PREFIX = "1."
PROFILE_DIRECTORY = "profiles"

# Data type identifiers used by device profiles
DATA_TYPE_UINT16 = "uint16"
DATA_TYPE_INT16 = "int16"
DATA_TYPE_UINT32 = "uint32"
DATA_TYPE_INT32 = "int32"
DATA_TYPE_DUMMY = "dummy"

# Polling
READ_TIMEOUT = 5.0  # Seconds to wait for one range read
