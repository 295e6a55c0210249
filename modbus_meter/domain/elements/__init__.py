"""Register decode rules (elements)."""

from .modbus_element import ModbusElement
from .word_elements import SignedWordElement, UnsignedWordElement
from .doubleword_elements import SignedDoublewordElement, UnsignedDoublewordElement
from .dummy_element import DummyElement
from .element_factory import ElementFactory

__all__ = [
    "ModbusElement",
    "UnsignedWordElement",
    "SignedWordElement",
    "UnsignedDoublewordElement",
    "SignedDoublewordElement",
    "DummyElement",
    "ElementFactory",
]
