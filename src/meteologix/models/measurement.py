"""
Measurement record shared by all quantity views.

A Measurement holds one weather value with its timestamp, provenance and
availability. Exactly one of float_value, string_value or instant_value
carries the payload, depending on the field it describes.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from ..core.date_utils import ZERO_TIME, DateUtils
from ..core.exceptions import DecodeError, TimespanUnsupportedError
from .nullable import parse_float
from .source import Source


class Fieldname(Enum):
    """Names the physical quantity a Measurement describes."""

    CLOUD_COVERAGE = "cloudCoverage"
    DEWPOINT = "dewpoint"
    DEWPOINT_MEAN = "dewpointMean"
    GLOBAL_RADIATION_10M = "globalRadiation10m"
    GLOBAL_RADIATION_1H = "globalRadiation1h"
    GLOBAL_RADIATION_24H = "globalRadiation24h"
    HUMIDITY_RELATIVE = "humidityRelative"
    PRECIPITATION = "prec"
    PRECIPITATION_10M = "prec10m"
    PRECIPITATION_1H = "prec1h"
    PRECIPITATION_24H = "prec24h"
    PRESSURE_MSL = "pressureMsl"
    PRESSURE_QFE = "pressure"
    SNOW_AMOUNT = "snowAmount"
    SNOW_HEIGHT = "snowHeight"
    SUNHOURS = "sunHours"
    TEMPERATURE = "temp"
    TEMPERATURE_AT_GROUND = "temp5cm"
    TEMPERATURE_AT_GROUND_MIN = "temp5cmMin"
    TEMPERATURE_MAX = "tempMax"
    TEMPERATURE_MEAN = "tempMean"
    TEMPERATURE_MIN = "tempMin"
    WEATHER_SYMBOL = "weatherSymbol"
    WIND_DIRECTION = "windDirection"
    WIND_GUST = "windGust"
    WIND_GUST_3H = "windGust3h"
    WIND_SPEED = "windSpeed"
    # Astronomical events
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    TRANSIT = "transit"
    CIVIL_DAWN = "civilDawn"
    CIVIL_DUSK = "civilDusk"
    NAUTICAL_DAWN = "nauticalDawn"
    NAUTICAL_DUSK = "nauticalDusk"
    ASTRONOMICAL_DAWN = "astronomicalDawn"
    ASTRONOMICAL_DUSK = "astronomicalDusk"
    MOONRISE = "moonRise"
    MOONSET = "moonSet"
    MOON_ILLUMINATION = "moonIllumination"


class Timespan(Enum):
    """
    Time window of a value or step size of a forecast.

    Precipitation and radiation windows use CURRENT, TEN_MINUTES, ONE_HOUR
    and TWENTY_FOUR_HOURS; forecasts accept ONE_HOUR, THREE_HOURS and
    SIX_HOURS as step sizes.
    """

    CURRENT = "current"
    TEN_MINUTES = "10m"
    ONE_HOUR = "1h"
    THREE_HOURS = "3h"
    SIX_HOURS = "6h"
    TWENTY_FOUR_HOURS = "24h"

    @property
    def forecast_steps(self) -> str:
        """
        Forecast step path segment for this timespan.

        Raises:
            TimespanUnsupportedError: For timespans that are not forecast steps
        """
        if self not in (Timespan.ONE_HOUR, Timespan.THREE_HOURS, Timespan.SIX_HOURS):
            raise TimespanUnsupportedError(self)
        return self.value


PRECIPITATION_FIELDS = {
    Timespan.CURRENT: Fieldname.PRECIPITATION,
    Timespan.TEN_MINUTES: Fieldname.PRECIPITATION_10M,
    Timespan.ONE_HOUR: Fieldname.PRECIPITATION_1H,
    Timespan.TWENTY_FOUR_HOURS: Fieldname.PRECIPITATION_24H,
}

GLOBAL_RADIATION_FIELDS = {
    Timespan.TEN_MINUTES: Fieldname.GLOBAL_RADIATION_10M,
    Timespan.ONE_HOUR: Fieldname.GLOBAL_RADIATION_1H,
    Timespan.TWENTY_FOUR_HOURS: Fieldname.GLOBAL_RADIATION_24H,
}

# Fields whose payload is a string or an instant; everything else is a float
STRING_FIELDS = frozenset({Fieldname.WEATHER_SYMBOL})
INSTANT_FIELDS = frozenset({
    Fieldname.SUNRISE, Fieldname.SUNSET, Fieldname.TRANSIT,
    Fieldname.CIVIL_DAWN, Fieldname.CIVIL_DUSK,
    Fieldname.NAUTICAL_DAWN, Fieldname.NAUTICAL_DUSK,
    Fieldname.ASTRONOMICAL_DAWN, Fieldname.ASTRONOMICAL_DUSK,
    Fieldname.MOONRISE, Fieldname.MOONSET,
})


@dataclass(frozen=True)
class APIValue:
    """A single per-field wire value: {"dateTime": ..., "source": ..., "value": ...}."""

    date_time: datetime
    value: Any
    source: Optional[str] = None

    @classmethod
    def from_dict(
        cls,
        payload: Mapping[str, Any],
        parser: Callable[[Any], Any] = parse_float
    ) -> "APIValue":
        """
        Decode a wire value object.

        Raises:
            DecodeError: If the object is malformed
        """
        if not isinstance(payload, Mapping):
            raise DecodeError(f"expected value object, got {type(payload).__name__}")
        try:
            value = parser(payload.get("value"))
        except (TypeError, ValueError) as e:
            raise DecodeError(f"invalid value: {e}") from e

        source = payload.get("source")
        return cls(
            date_time=DateUtils.parse_datetime(payload.get("dateTime")),
            value=value,
            source=source if isinstance(source, str) else None,
        )


@dataclass(frozen=True)
class Measurement:
    """Timestamped, sourced weather value with explicit availability."""

    date_time: datetime = ZERO_TIME
    field: Optional[Fieldname] = None
    source: Source = Source.UNKNOWN
    float_value: float = math.nan
    string_value: str = ""
    instant_value: Optional[datetime] = None
    available: bool = True

    @classmethod
    def unavailable(cls, field: Optional[Fieldname] = None) -> "Measurement":
        """Create the not-available sentinel for a field."""
        return cls(field=field, available=False)

    @classmethod
    def of(
        cls,
        field: Fieldname,
        value: Any,
        date_time: datetime,
        source: Source = Source.UNKNOWN
    ) -> "Measurement":
        """Create an available Measurement, routing value into the payload slot for field."""
        if field in STRING_FIELDS:
            return cls(date_time=date_time, field=field, source=source, string_value=value)
        if field in INSTANT_FIELDS:
            return cls(date_time=date_time, field=field, source=source, instant_value=value)
        return cls(date_time=date_time, field=field, source=source, float_value=float(value))

    @classmethod
    def from_api_value(
        cls,
        field: Fieldname,
        api_value: Optional[APIValue],
        default_source: Source = Source.UNKNOWN
    ) -> "Measurement":
        """Lift a wire value into a Measurement; None yields the not-available sentinel."""
        if api_value is None:
            return cls.unavailable(field)
        source = default_source
        if api_value.source is not None:
            source = Source.from_string(api_value.source)
        return cls.of(field, api_value.value, api_value.date_time, source)


def decode_values(payload: Any, fields: Mapping[Fieldname, Callable[[Any], Any]]) -> dict:
    """
    Decode the per-field value objects of a "data" block.

    Args:
        payload: Decoded "data" object (None is treated as empty)
        fields: Fieldname -> value parser; the wire key is the Fieldname value

    Returns:
        Mapping of Fieldname to APIValue for every non-null field present

    Raises:
        DecodeError: If the block or one of its values is malformed
    """
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise DecodeError(f"expected data object, got {type(payload).__name__}")

    values = {}
    for field, parser in fields.items():
        raw = payload.get(field.value)
        # A value object with a null value counts as missing
        if raw is None or (isinstance(raw, Mapping) and raw.get("value") is None):
            continue
        try:
            values[field] = APIValue.from_dict(raw, parser)
        except DecodeError as e:
            raise DecodeError(f"failed to decode '{field.value}': {e}") from e
    return values
