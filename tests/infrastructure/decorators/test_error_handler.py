"""Tests for error handling decorator."""

import asyncio
import logging

import pytest

from modbus_meter.domain.exceptions import FormatError, TransportError
from modbus_meter.infrastructure.decorators import handle_read_errors


class TestHandleReadErrors:
    """Test error handling decorator."""

    @pytest.mark.asyncio
    async def test_successful_async_execution(self):
        """Test decorator with successful async function."""

        @handle_read_errors("test operation")
        async def test_func():
            return "success"

        assert await test_func() == "success"

    @pytest.mark.asyncio
    async def test_timeout_error_reraised(self):
        """Test timeout error is re-raised after logging."""

        @handle_read_errors("test operation")
        async def test_func():
            raise asyncio.TimeoutError("timeout")

        with pytest.raises(asyncio.TimeoutError):
            await test_func()

    @pytest.mark.asyncio
    async def test_transport_error_logged_as_warning(self, caplog):
        """Test transport errors are warnings without traceback."""

        @handle_read_errors("Range read")
        async def test_func():
            raise TransportError("no response")

        with caplog.at_level(logging.WARNING):
            with pytest.raises(TransportError):
                await test_func()

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "Range read transport error: no response" in record.getMessage()
        assert record.exc_info is None

    @pytest.mark.asyncio
    async def test_format_error_logged_as_warning(self, caplog):
        """Test format errors are warnings."""

        @handle_read_errors("Range read")
        async def test_func():
            raise FormatError("short buffer")

        with caplog.at_level(logging.WARNING):
            with pytest.raises(FormatError):
                await test_func()

        assert "Range read format error: short buffer" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_error_logged_with_traceback(self, caplog):
        """Test other errors are logged as errors with exc_info."""

        @handle_read_errors("Range read")
        async def test_func():
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(RuntimeError):
                await test_func()

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None

    @pytest.mark.asyncio
    async def test_custom_logger(self, caplog):
        """Test decorator logs to the given logger."""
        logger = logging.getLogger("custom.meter")

        @handle_read_errors("op", logger=logger)
        async def test_func():
            raise TransportError("down")

        with caplog.at_level(logging.WARNING, logger="custom.meter"):
            with pytest.raises(TransportError):
                await test_func()

        assert caplog.records[-1].name == "custom.meter"

    @pytest.mark.asyncio
    async def test_preserves_function_name(self):
        """Test wraps keeps the decorated coroutine's metadata."""

        @handle_read_errors("Range read")
        async def read_range():
            return None

        assert read_range.__name__ == "read_range"
        assert await read_range() is None
