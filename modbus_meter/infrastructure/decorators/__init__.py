"""Infrastructure layer decorators."""

from .error_handler import handle_read_errors

__all__ = [
    "handle_read_errors",
]
