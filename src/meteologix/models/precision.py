"""
Resolution tier of a station or forecast model.
"""

from enum import Enum
from typing import Any


class Precision(Enum):
    """Data resolution tier."""

    SUPER_HIGH = "SUPER_HIGH"  # <= 4 km
    HIGH = "HIGH"  # 4-10 km
    STANDARD = "STANDARD"  # >= 10 km
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_string(cls, value: Any) -> "Precision":
        """Parse a wire value case-insensitively; null and unknown strings become UNKNOWN."""
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value
