"""
Weather condition vocabulary.

The API reports the weather symbol as a free string; the known values are
mapped onto ConditionType, anything else becomes ConditionType.UNKNOWN so
new server-side labels do not break decoding.
"""

from enum import Enum


class ConditionType(Enum):
    """Closed set of weather condition tags."""

    CLOUDY = "cloudy"
    FOG = "fog"
    FREEZING_RAIN = "freezingrain"
    OVERCAST = "overcast"
    PARTLY_CLOUDY = "partlycloudy"
    # Rain falls steadily, lasts for hours and is widespread
    RAIN = "rain"
    RAIN_HEAVY = "rainheavy"
    # Showers are lighter, shorter and more scattered than rain
    SHOWERS = "showers"
    SHOWERS_HEAVY = "showersheavy"
    SNOW = "snow"
    SNOW_HEAVY = "snowheavy"
    SNOW_RAIN = "snowrain"
    SUNSHINE = "sunshine"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: str) -> "ConditionType":
        """Map a wire string onto a ConditionType; unknown values become UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def label(self) -> str:
        """Human readable label."""
        return CONDITION_LABELS[self]

    def __str__(self) -> str:
        return self.label


CONDITION_LABELS = {
    ConditionType.CLOUDY: "Cloudy",
    ConditionType.FOG: "Fog",
    ConditionType.FREEZING_RAIN: "Freezing rain",
    ConditionType.OVERCAST: "Overcast",
    ConditionType.PARTLY_CLOUDY: "Partly cloudy",
    ConditionType.RAIN: "Rain",
    ConditionType.RAIN_HEAVY: "Heavy rain",
    ConditionType.SHOWERS: "Showers",
    ConditionType.SHOWERS_HEAVY: "Heavy showers",
    ConditionType.SNOW: "Snow",
    ConditionType.SNOW_HEAVY: "Heavy snow",
    ConditionType.SNOW_RAIN: "Sleet",
    ConditionType.SUNSHINE: "Clear sky",
    ConditionType.THUNDERSTORM: "Thunderstorm",
    ConditionType.UNKNOWN: "Unknown",
}
