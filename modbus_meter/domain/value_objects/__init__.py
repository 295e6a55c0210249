"""Value Objects for the Modbus meter domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Validate their invariants at construction
"""

from .word_order import WordOrder
from .meter_role import MeterRole
from .register_address import RegisterAddress

__all__ = [
    "MeterRole",
    "RegisterAddress",
    "WordOrder",
]
