"""Infrastructure layer for the Modbus meter library.

Concrete implementations of domain interfaces and cross-cutting helpers.
"""

from .memory_register_reader import MemoryRegisterReader

__all__ = [
    "MemoryRegisterReader",
]
