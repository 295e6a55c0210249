"""Factory mapping profile data types to element classes."""

from __future__ import annotations

from typing import Dict, Optional, Type, Union

from ... import const
from ..entities.channel import Channel
from ..exceptions import ConfigurationError
from ..value_objects import RegisterAddress, WordOrder
from .doubleword_elements import SignedDoublewordElement, UnsignedDoublewordElement
from .dummy_element import DummyElement
from .modbus_element import ModbusElement
from .word_elements import SignedWordElement, UnsignedWordElement


class ElementFactory:
    """Factory for creating the element matching a data type string."""

    _elements: Dict[str, Type[ModbusElement]] = {
        const.DATA_TYPE_UINT16: UnsignedWordElement,
        const.DATA_TYPE_INT16: SignedWordElement,
        const.DATA_TYPE_UINT32: UnsignedDoublewordElement,
        const.DATA_TYPE_INT32: SignedDoublewordElement,
    }

    @classmethod
    def create(
        cls,
        data_type: str,
        address: Union[RegisterAddress, int, str],
        channel: Optional[Channel] = None,
        word_order: WordOrder = WordOrder.MSW_LSW,
        length: int = 1,
    ) -> ModbusElement:
        """Create element for data type.

        Args:
            data_type: One of uint16, int16, uint32, int32, dummy
            address: Start register of the element
            channel: Channel to bind (must be None for dummy)
            word_order: Word order for 32-bit types
            length: Register count, only used for dummy

        Returns:
            Element instance

        Raises:
            ConfigurationError: If data type is unknown or the channel
                binding does not fit the type

        Example:
            >>> element = ElementFactory.create("int32", 0xC568, Channel("P"))
            >>> type(element).__name__
            'SignedDoublewordElement'
        """
        data_type = data_type.lower()

        if data_type == const.DATA_TYPE_DUMMY:
            if channel is not None:
                raise ConfigurationError(
                    f"Dummy element at {RegisterAddress.of(address).to_hex()} "
                    f"cannot bind channel {channel.name}"
                )
            return DummyElement(address, length)

        element_cls = cls._elements.get(data_type)
        if element_cls is None:
            raise ConfigurationError(f"Unknown data type: {data_type}")
        if channel is None:
            raise ConfigurationError(
                f"{data_type} element at {RegisterAddress.of(address).to_hex()} "
                "requires a channel"
            )

        if issubclass(element_cls, (SignedDoublewordElement, UnsignedDoublewordElement)):
            return element_cls(address, channel, word_order)
        return element_cls(address, channel)

    @classmethod
    def get_supported_types(cls) -> list[str]:
        """Get list of supported data types."""
        return [*cls._elements.keys(), const.DATA_TYPE_DUMMY]
