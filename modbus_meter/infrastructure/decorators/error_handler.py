"""Error handling decorators for standardized exception handling."""

import asyncio
import logging
from functools import wraps
from typing import Callable, Optional

from ...domain.exceptions import FormatError, TransportError


def handle_read_errors(operation_name: str, logger: Optional[logging.Logger] = None):
    """Decorator for standardized register read error logging.

    Expected poll-cycle failures (timeouts, transport errors, malformed
    buffers) are logged as warnings without a stack trace. Anything else
    is logged with its traceback. Every error is re-raised so the caller
    decides how the cycle continues.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)

    Example:
        @handle_read_errors("Range read")
        async def _read_range(self, reader, register_range):
            data = await reader.read_registers(start, count)
            return register_range.decode(data)
    """

    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except asyncio.TimeoutError as err:
                log.warning("%s timed out: %s", operation_name, err)
                raise
            except TransportError as err:
                log.warning("%s transport error: %s", operation_name, err)
                raise
            except FormatError as err:
                log.warning("%s format error: %s", operation_name, err)
                raise
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                raise

        return wrapper

    return decorator
