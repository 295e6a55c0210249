"""WordOrder value object."""

from enum import Enum


class WordOrder(Enum):
    """Order of the two registers that make up a 32-bit doubleword.

    Bytes inside each register are always big-endian; meters only disagree
    on which register carries the most significant word.
    """

    MSW_LSW = "msw_lsw"  # High word at the lower address (Modbus default)
    LSW_MSW = "lsw_msw"  # Low word at the lower address
