"""Custom exceptions for the Modbus meter library.

This module defines domain-specific exceptions that represent expected
error conditions while building a device register map and while decoding
the bytes read from it.
"""


class MeterError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(MeterError, ValueError):
    """Device definition is malformed (static, build-time error).

    Raised while a protocol is assembled, before any register is polled:
    duplicate channel names, non-contiguous elements inside a range,
    overlapping ranges, an empty protocol or an invalid device profile.

    A device raising this error cannot be activated.

    Example:
        >>> raise ConfigurationError("Duplicate channel name 'ActivePower'")
    """


class FormatError(MeterError, ValueError):
    """Byte buffer does not match the declared register span (decode-time).

    Raised when a range or element receives a buffer whose length differs
    from its declared width. The affected range keeps its previous channel
    values; other ranges and devices are unaffected.

    This exception should be logged without a stack trace since it represents
    an expected condition of a single poll cycle, not a bug.

    Example:
        >>> raise FormatError("Range 0xC568 expects 10 bytes, got 8")
    """


class TransportError(MeterError):
    """Register fetch failed in the transport layer.

    Never raised by the decoding core itself. Register readers raise it and
    the polling use case treats it like a FormatError for the affected range.
    """
