"""
Quantity views over a Measurement.

Each view is a read-only projection of one Measurement that adds the unit
conversions and formatting rules of a physical quantity. A view refuses
measurements of fields it does not describe, so a wind speed can never be
read as a temperature.

Availability law: when a measurement is not available, numeric readers
return NaN, symbolic readers return DATA_UNAVAILABLE and DateTime returns
the zero instant.
"""

import math
from datetime import datetime, timedelta
from typing import FrozenSet, Optional

from ..core.constants import (
    DATA_UNAVAILABLE,
    MS_TO_KMH,
    MS_TO_KNOTS,
    MS_TO_MPH,
    UNSUPPORTED_DIRECTION,
)
from ..core.date_utils import ZERO_TIME, DateUtils
from ..core.exceptions import UnsupportedDirectionError
from .condition import ConditionType
from .direction import WIND_DIR_ABBR, WIND_DIR_FULL, find_direction
from .measurement import INSTANT_FIELDS, Fieldname, Measurement
from .source import Source

# Returned by Duration.duration when the value is not available
DURATION_UNAVAILABLE = timedelta.min

COVERAGE_BANDS = (
    (10, "Clear sky"),
    (30, "Mostly clear"),
    (50, "Partly cloudy"),
    (70, "Mostly cloudy"),
    (90, "Overcast"),
    (100, "Very cloudy"),
)


def coverage_description(percent: float) -> str:
    """
    Describe a cloud coverage percentage.

    Bands are closed on the right: 10 is "Clear sky", 10.0001 is
    "Mostly clear". Values outside [0, 100] and NaN are "Unknown".
    """
    if not percent >= 0:
        return "Unknown"
    for upper, label in COVERAGE_BANDS:
        if percent <= upper:
            return label
    return "Unknown"


class WeatherValue:
    """Base view: availability, timestamp and provenance of a Measurement."""

    # Fields this view may project; empty means any
    FIELDS: FrozenSet[Fieldname] = frozenset()

    __slots__ = ("_measurement",)

    def __init__(self, measurement: Optional[Measurement] = None):
        if measurement is None:
            measurement = Measurement.unavailable()
        if (measurement.available and self.FIELDS
                and measurement.field not in self.FIELDS):
            raise ValueError(
                f"{type(self).__name__} cannot hold a {measurement.field} measurement"
            )
        self._measurement = measurement

    @classmethod
    def unavailable(cls, field: Optional[Fieldname] = None):
        """Create a not-available view."""
        return cls(Measurement.unavailable(field))

    @property
    def measurement(self) -> Measurement:
        return self._measurement

    @property
    def field(self) -> Optional[Fieldname]:
        return self._measurement.field

    @property
    def is_available(self) -> bool:
        return self._measurement.available

    @property
    def date_time(self) -> datetime:
        return self._measurement.date_time

    @property
    def source(self) -> Source:
        return self._measurement.source

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._measurement == other._measurement

    def __hash__(self) -> int:
        return hash((type(self), self._measurement))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class FloatValue(WeatherValue):
    """View of a numeric Measurement."""

    FORMAT = "%.1f"

    __slots__ = ()

    @property
    def value(self) -> float:
        if not self.is_available:
            return math.nan
        return self._measurement.float_value

    def _format(self, fmt: str, value: float) -> str:
        if not self.is_available:
            return DATA_UNAVAILABLE
        return fmt % value

    def __str__(self) -> str:
        return self._format(self.FORMAT, self.value)


class Temperature(FloatValue):
    """Temperature in degrees Celsius."""

    FIELDS = frozenset({
        Fieldname.DEWPOINT, Fieldname.DEWPOINT_MEAN,
        Fieldname.TEMPERATURE, Fieldname.TEMPERATURE_AT_GROUND,
        Fieldname.TEMPERATURE_AT_GROUND_MIN, Fieldname.TEMPERATURE_MAX,
        Fieldname.TEMPERATURE_MEAN, Fieldname.TEMPERATURE_MIN,
    })
    FORMAT = "%.1f°C"

    __slots__ = ()

    @property
    def celsius(self) -> float:
        return self.value

    @property
    def celsius_string(self) -> str:
        return str(self)

    @property
    def fahrenheit(self) -> float:
        return self.value * 9 / 5 + 32

    @property
    def fahrenheit_string(self) -> str:
        return self._format("%.1f°F", self.fahrenheit)


class Pressure(FloatValue):
    """Air pressure in hPa."""

    FIELDS = frozenset({Fieldname.PRESSURE_MSL, Fieldname.PRESSURE_QFE})
    FORMAT = "%.1fhPa"

    __slots__ = ()


class Speed(FloatValue):
    """Speed in m/s."""

    FIELDS = frozenset({Fieldname.WIND_SPEED, Fieldname.WIND_GUST, Fieldname.WIND_GUST_3H})
    FORMAT = "%.1fm/s"

    __slots__ = ()

    @property
    def knots(self) -> float:
        return self.value * MS_TO_KNOTS

    @property
    def knots_string(self) -> str:
        return self._format("%.0fkn", self.knots)

    @property
    def kmh(self) -> float:
        return self.value * MS_TO_KMH

    @property
    def kmh_string(self) -> str:
        return self._format("%.1fkm/h", self.kmh)

    @property
    def mph(self) -> float:
        return self.value * MS_TO_MPH

    @property
    def mph_string(self) -> str:
        return self._format("%.1fmi/h", self.mph)


class Direction(FloatValue):
    """Bearing in degrees (0 = North, clockwise)."""

    FIELDS = frozenset({Fieldname.WIND_DIRECTION})
    FORMAT = "%.0f°"

    __slots__ = ()

    def _name(self, table) -> str:
        if not self.is_available:
            return DATA_UNAVAILABLE
        try:
            return find_direction(self.value, table)
        except UnsupportedDirectionError:
            return UNSUPPORTED_DIRECTION

    @property
    def direction(self) -> str:
        """Abbreviated compass point, e.g. "NbE"."""
        return self._name(WIND_DIR_ABBR)

    @property
    def direction_full(self) -> str:
        """Long-form compass point, e.g. "North by East"."""
        return self._name(WIND_DIR_FULL)


class Precipitation(FloatValue):
    """Precipitation amount in mm."""

    FIELDS = frozenset({
        Fieldname.PRECIPITATION, Fieldname.PRECIPITATION_10M,
        Fieldname.PRECIPITATION_1H, Fieldname.PRECIPITATION_24H,
    })
    FORMAT = "%.1fmm"

    __slots__ = ()


class Percentage(FloatValue):
    """Generic percentage (0-100)."""

    FIELDS = frozenset({
        Fieldname.HUMIDITY_RELATIVE, Fieldname.CLOUD_COVERAGE, Fieldname.MOON_ILLUMINATION,
    })
    FORMAT = "%.1f%%"

    __slots__ = ()


class Humidity(Percentage):
    """Relative humidity in percent."""

    FIELDS = frozenset({Fieldname.HUMIDITY_RELATIVE})

    __slots__ = ()


class Coverage(Percentage):
    """Cloud coverage in percent."""

    FIELDS = frozenset({Fieldname.CLOUD_COVERAGE})
    FORMAT = "%.0f%%"

    __slots__ = ()

    @property
    def description(self) -> str:
        """Descriptive label; "Unknown" when not available or out of range."""
        return coverage_description(self.value)


class Height(FloatValue):
    """Height in metres."""

    FIELDS = frozenset({Fieldname.SNOW_HEIGHT})
    FORMAT = "%.3fm"

    __slots__ = ()

    @property
    def meter(self) -> float:
        return self.value

    @property
    def meter_string(self) -> str:
        return str(self)

    @property
    def centimeter(self) -> float:
        return self.value * 100

    @property
    def centimeter_string(self) -> str:
        return self._format("%.3fcm", self.centimeter)

    @property
    def millimeter(self) -> float:
        return self.value * 1000

    @property
    def millimeter_string(self) -> str:
        return self._format("%.3fmm", self.millimeter)


class Density(FloatValue):
    """Density in kg/m³."""

    FIELDS = frozenset({Fieldname.SNOW_AMOUNT})
    FORMAT = "%.1fkg/m³"

    __slots__ = ()


class Duration(FloatValue):
    """Duration in hours."""

    FIELDS = frozenset({Fieldname.SUNHOURS})
    FORMAT = "%.2fh"

    __slots__ = ()

    @property
    def duration(self) -> timedelta:
        """The value as timedelta; DURATION_UNAVAILABLE when not available."""
        if not self.is_available:
            return DURATION_UNAVAILABLE
        return timedelta(hours=self.value)


class Radiation(FloatValue):
    """Global radiation in kJ/m²."""

    FIELDS = frozenset({
        Fieldname.GLOBAL_RADIATION_10M, Fieldname.GLOBAL_RADIATION_1H,
        Fieldname.GLOBAL_RADIATION_24H,
    })
    FORMAT = "%.0fkJ/m²"

    __slots__ = ()


class Condition(WeatherValue):
    """Weather condition as reported by the weather symbol."""

    FIELDS = frozenset({Fieldname.WEATHER_SYMBOL})

    __slots__ = ()

    @property
    def value(self) -> str:
        """Raw wire string, or DATA_UNAVAILABLE."""
        if not self.is_available:
            return DATA_UNAVAILABLE
        return self._measurement.string_value

    @property
    def condition(self) -> ConditionType:
        if not self.is_available:
            return ConditionType.UNKNOWN
        return ConditionType.from_string(self._measurement.string_value)

    def __str__(self) -> str:
        return self.condition.label


class DateTime(WeatherValue):
    """A point in time, e.g. a sunset."""

    FIELDS = INSTANT_FIELDS

    __slots__ = ()

    @property
    def value(self) -> datetime:
        """The instant, or the zero instant when not available."""
        if not self.is_available or self._measurement.instant_value is None:
            return ZERO_TIME
        return self._measurement.instant_value

    def __str__(self) -> str:
        return DateUtils.format_rfc3339(self.value)


# Most specific first: Humidity and Coverage before the generic Percentage
VIEW_CLASSES = (
    Temperature, Pressure, Speed, Direction, Precipitation, Humidity,
    Coverage, Percentage, Height, Density, Duration, Radiation, Condition,
    DateTime,
)


def view_for_field(field: Fieldname) -> type:
    """Return the view class that projects measurements of the given field."""
    for view_cls in VIEW_CLASSES:
        if field in view_cls.FIELDS:
            return view_cls
    raise ValueError(f"no quantity view for field {field}")
