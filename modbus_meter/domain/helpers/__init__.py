"""Domain helper functions."""

from .address_helpers import (
    calculate_register_count,
    format_address,
    parse_address,
)
from .transformations import (
    combine_words,
    convert_to_signed_int16,
    convert_to_signed_int32,
    registers_from_bytes,
    split_words,
)

__all__ = [
    # Address helpers
    "parse_address",
    "format_address",
    "calculate_register_count",
    # Transformations
    "convert_to_signed_int16",
    "convert_to_signed_int32",
    "registers_from_bytes",
    "combine_words",
    "split_words",
]
