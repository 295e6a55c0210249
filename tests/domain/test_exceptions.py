"""Tests for the exception hierarchy."""

import pytest

from modbus_meter.domain.exceptions import (
    ConfigurationError,
    FormatError,
    MeterError,
    TransportError,
)


class TestExceptionHierarchy:
    """Test how callers can catch library errors."""

    @pytest.mark.parametrize("error_cls", [ConfigurationError, FormatError, TransportError])
    def test_all_errors_are_meter_errors(self, error_cls):
        assert issubclass(error_cls, MeterError)

    def test_build_and_decode_errors_are_value_errors(self):
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(FormatError, ValueError)

    def test_configuration_and_format_errors_are_distinct(self):
        """Test build-time and decode-time errors can be told apart."""
        assert not issubclass(ConfigurationError, FormatError)
        assert not issubclass(FormatError, ConfigurationError)

    def test_transport_error_is_not_value_error(self):
        assert not issubclass(TransportError, ValueError)
