"""Poll Result DTO.

Data Transfer Object representing the result of polling one device.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class PollResult:
    """Result of one poll cycle of a device.

    Attributes:
        thing_id: Device that was polled
        data: Channel name -> stored value for every range decoded this cycle
        failed_ranges: Range start address -> error message for ranges whose
            read or decode failed; their channels kept their previous values
        ranges_read: Number of ranges decoded successfully
        duration: Time taken for the cycle (seconds)
    """

    thing_id: str
    data: Dict[str, Optional[int]] = field(default_factory=dict)
    failed_ranges: Dict[int, str] = field(default_factory=dict)
    ranges_read: int = 0
    duration: float = 0.0

    @property
    def success(self) -> bool:
        """True when every range was read and decoded."""
        return not self.failed_ranges
