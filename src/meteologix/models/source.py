"""
Provenance of a weather value.
"""

from enum import Enum


class Source(Enum):
    """Where a weather value originates from."""

    OBSERVATION = "observation"  # weather station (high precision)
    ANALYSIS = "analysis"  # analysis model (medium precision)
    FORECAST = "forecast"
    MIXED = "mixed"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: str) -> "Source":
        """
        Convert a wire string into a Source (case-insensitive).

        Unrecognized or non-string values map to Source.UNKNOWN.
        """
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value.capitalize()
