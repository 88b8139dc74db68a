"""
Weather forecast response and nearest-point lookup.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import pytz

from ..core.date_utils import ZERO_TIME, DateUtils
from ..core.exceptions import DecodeError
from .measurement import Fieldname, Measurement
from .nullable import Nullable, parse_bool, parse_float, parse_int, parse_str, require_float
from .precision import Precision
from .quantities import (
    Condition,
    Coverage,
    Direction,
    Duration,
    Humidity,
    Pressure,
    Speed,
    Temperature,
)
from .source import Source


class ForecastDetails(Enum):
    """Level of detail of a forecast request."""

    STANDARD = "standard"
    ADVANCED = "advanced"


# Fieldname -> (wire key, parser) for the optional datapoint values
FORECAST_FIELDS = {
    Fieldname.CLOUD_COVERAGE: ("cloudCoverage", parse_float),
    Fieldname.DEWPOINT: ("dewpoint", parse_float),
    Fieldname.HUMIDITY_RELATIVE: ("humidityRelative", parse_float),
    Fieldname.PRESSURE_MSL: ("pressureMsl", parse_float),
    Fieldname.SUNHOURS: ("sunHours", parse_float),
    Fieldname.WEATHER_SYMBOL: ("weatherSymbol", parse_str),
    Fieldname.WIND_DIRECTION: ("windDirection", parse_float),
    Fieldname.WIND_GUST: ("windGust", parse_float),
    Fieldname.WIND_GUST_3H: ("windGust3h", parse_float),
    Fieldname.WIND_SPEED: ("windspeed", parse_float),
}


class ForecastDatapoint:
    """
    A single forecast step.

    The temperature is always present on the wire; every other value is
    optional and reported as not available when the server omits it. An
    unavailable datapoint (returned for an empty forecast) reports every
    value as not available.
    """

    def __init__(
        self,
        date_time: datetime = ZERO_TIME,
        temperature: float = float("nan"),
        is_day: bool = False,
        values: Optional[Dict[Fieldname, Nullable]] = None,
        available: bool = True
    ):
        self.date_time = date_time
        self.is_day = is_day
        self.available = available
        self._temperature = temperature
        self._values = dict(values or {})

    @classmethod
    def unavailable(cls) -> "ForecastDatapoint":
        return cls(available=False)

    @classmethod
    def from_dict(cls, payload: Any) -> "ForecastDatapoint":
        """
        Decode one element of the forecast "data" array.

        Raises:
            DecodeError: If the element is malformed
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("forecast datapoint is not a JSON object")

        values = {
            name: Nullable.from_json(payload, key, parser)
            for name, (key, parser) in FORECAST_FIELDS.items()
        }
        is_day = Nullable.from_json(payload, "isDay", parse_bool)

        return cls(
            date_time=DateUtils.parse_datetime(payload.get("dateTime")),
            temperature=require_float(payload, "temp"),
            is_day=is_day.get_or(False),
            values=values,
        )

    def _measurement(self, name: Fieldname) -> Measurement:
        value = self._values.get(name)
        if not self.available or value is None or value.is_absent():
            return Measurement.unavailable(name)
        return Measurement.of(name, value.get(), self.date_time, Source.FORECAST)

    def temperature(self) -> Temperature:
        if not self.available:
            return Temperature.unavailable(Fieldname.TEMPERATURE)
        return Temperature(Measurement.of(
            Fieldname.TEMPERATURE, self._temperature, self.date_time, Source.FORECAST
        ))

    def cloud_coverage(self) -> Coverage:
        return Coverage(self._measurement(Fieldname.CLOUD_COVERAGE))

    def dewpoint(self) -> Temperature:
        return Temperature(self._measurement(Fieldname.DEWPOINT))

    def humidity_relative(self) -> Humidity:
        return Humidity(self._measurement(Fieldname.HUMIDITY_RELATIVE))

    def pressure_msl(self) -> Pressure:
        return Pressure(self._measurement(Fieldname.PRESSURE_MSL))

    def sun_hours(self) -> Duration:
        """Hours of sunshine within the step."""
        return Duration(self._measurement(Fieldname.SUNHOURS))

    def weather_symbol(self) -> Condition:
        return Condition(self._measurement(Fieldname.WEATHER_SYMBOL))

    def wind_direction(self) -> Direction:
        return Direction(self._measurement(Fieldname.WIND_DIRECTION))

    def wind_gust(self) -> Speed:
        return Speed(self._measurement(Fieldname.WIND_GUST))

    def wind_gust_3h(self) -> Speed:
        """Maximum wind gust within the last three hours."""
        return Speed(self._measurement(Fieldname.WIND_GUST_3H))

    def wind_speed(self) -> Speed:
        return Speed(self._measurement(Fieldname.WIND_SPEED))

    def __repr__(self) -> str:
        if not self.available:
            return "ForecastDatapoint(unavailable)"
        return f"ForecastDatapoint({DateUtils.format_rfc3339(self.date_time)})"


def find_closest_datapoint(
    datapoints: List[ForecastDatapoint],
    target: datetime
) -> ForecastDatapoint:
    """
    Find the datapoint closest in time to target.

    Ties go to the earliest entry in the list.

    Args:
        datapoints: Forecast steps
        target: Point in time; naive values are interpreted as UTC

    Returns:
        The closest datapoint, or an unavailable datapoint if the list is empty
    """
    if not datapoints:
        return ForecastDatapoint.unavailable()
    if target.tzinfo is None:
        target = pytz.UTC.localize(target)

    closest = datapoints[0]
    min_diff = abs(closest.date_time - target)
    for datapoint in datapoints[1:]:
        diff = abs(datapoint.date_time - target)
        if diff < min_diff:
            closest, min_diff = datapoint, diff
    return closest


@dataclass(frozen=True)
class WeatherForecast:
    """Forecast for a coordinate, as a time-ordered list of datapoints."""

    latitude: float
    longitude: float
    altitude: Optional[int] = None
    data: List[ForecastDatapoint] = field(default_factory=list)
    precision: Precision = Precision.UNKNOWN
    run: datetime = ZERO_TIME
    timezone: str = ""
    unit_system: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "WeatherForecast":
        """
        Decode a forecast response body.

        Raises:
            DecodeError: If the body is malformed
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("forecast response is not a JSON object")

        raw_data = payload.get("data") or []
        if not isinstance(raw_data, list):
            raise DecodeError("forecast 'data' is not a JSON array")
        data = [ForecastDatapoint.from_dict(item) for item in raw_data]
        data.sort(key=lambda dp: dp.date_time)

        run = payload.get("run")
        return cls(
            latitude=require_float(payload, "lat"),
            longitude=require_float(payload, "lon"),
            altitude=Nullable.from_json(payload, "alt", parse_int).get(),
            data=data,
            precision=Precision.from_string(payload.get("resolution")),
            run=DateUtils.parse_datetime(run) if run is not None else ZERO_TIME,
            timezone=payload.get("timeZone") or "",
            unit_system=payload.get("systemOfUnits") or "",
        )

    def at(self, target: datetime) -> ForecastDatapoint:
        """Return the datapoint closest to target (see find_closest_datapoint)."""
        return find_closest_datapoint(self.data, target)

    def all(self) -> List[ForecastDatapoint]:
        """Return all datapoints in time order."""
        return list(self.data)
