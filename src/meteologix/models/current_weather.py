"""
Current weather response.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..core.exceptions import DecodeError
from .measurement import (
    GLOBAL_RADIATION_FIELDS,
    PRECIPITATION_FIELDS,
    APIValue,
    Fieldname,
    Measurement,
    Timespan,
    decode_values,
)
from .nullable import parse_bool, parse_float, parse_str, require_float
from .quantities import (
    Condition,
    Coverage,
    Density,
    Direction,
    Height,
    Humidity,
    Precipitation,
    Pressure,
    Radiation,
    Speed,
    Temperature,
)

CURRENT_WEATHER_FIELDS = {
    Fieldname.CLOUD_COVERAGE: parse_float,
    Fieldname.DEWPOINT: parse_float,
    Fieldname.GLOBAL_RADIATION_10M: parse_float,
    Fieldname.GLOBAL_RADIATION_1H: parse_float,
    Fieldname.GLOBAL_RADIATION_24H: parse_float,
    Fieldname.HUMIDITY_RELATIVE: parse_float,
    Fieldname.PRECIPITATION: parse_float,
    Fieldname.PRECIPITATION_10M: parse_float,
    Fieldname.PRECIPITATION_1H: parse_float,
    Fieldname.PRECIPITATION_24H: parse_float,
    Fieldname.PRESSURE_MSL: parse_float,
    Fieldname.PRESSURE_QFE: parse_float,
    Fieldname.SNOW_AMOUNT: parse_float,
    Fieldname.SNOW_HEIGHT: parse_float,
    Fieldname.TEMPERATURE: parse_float,
    Fieldname.WEATHER_SYMBOL: parse_str,
    Fieldname.WIND_DIRECTION: parse_float,
    Fieldname.WIND_GUST: parse_float,
    Fieldname.WIND_SPEED: parse_float,
}


@dataclass(frozen=True)
class CurrentWeather:
    """
    Current weather at a coordinate.

    Different station types deliver different values, so every accessor
    returns a view that may be not available.
    """

    latitude: float
    longitude: float
    unit_system: str = ""
    values: Dict[Fieldname, APIValue] = field(default_factory=dict)
    day: Optional[APIValue] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "CurrentWeather":
        """
        Decode a current weather response body.

        Raises:
            DecodeError: If the body is malformed
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("current weather response is not a JSON object")

        data = payload.get("data")
        day = None
        if isinstance(data, Mapping) and data.get("isDay") is not None:
            day = APIValue.from_dict(data["isDay"], parse_bool)

        return cls(
            latitude=require_float(payload, "lat"),
            longitude=require_float(payload, "lon"),
            unit_system=payload.get("systemOfUnits") or "",
            values=decode_values(data, CURRENT_WEATHER_FIELDS),
            day=day,
        )

    def _measurement(self, name: Fieldname) -> Measurement:
        return Measurement.from_api_value(name, self.values.get(name))

    def cloud_coverage(self) -> Coverage:
        """Effective cloud coverage in %."""
        return Coverage(self._measurement(Fieldname.CLOUD_COVERAGE))

    def dewpoint(self) -> Temperature:
        return Temperature(self._measurement(Fieldname.DEWPOINT))

    def global_radiation(self, timespan: Timespan) -> Radiation:
        """Global radiation over the last 10 minutes, hour or 24 hours."""
        name = GLOBAL_RADIATION_FIELDS.get(timespan)
        if name is None:
            return Radiation.unavailable()
        return Radiation(self._measurement(name))

    def humidity_relative(self) -> Humidity:
        return Humidity(self._measurement(Fieldname.HUMIDITY_RELATIVE))

    def is_day(self) -> bool:
        """True if it is currently daytime at the location; False if unknown."""
        if self.day is None:
            return False
        return self.day.value

    def precipitation(self, timespan: Timespan) -> Precipitation:
        """
        Amount of precipitation for the given timespan.

        Only CURRENT, TEN_MINUTES, ONE_HOUR and TWENTY_FOUR_HOURS are
        supported; other timespans return a not-available view.
        """
        name = PRECIPITATION_FIELDS.get(timespan)
        if name is None:
            return Precipitation.unavailable()
        return Precipitation(self._measurement(name))

    def pressure_msl(self) -> Pressure:
        """Pressure at mean sea level."""
        return Pressure(self._measurement(Fieldname.PRESSURE_MSL))

    def pressure_qfe(self) -> Pressure:
        """Pressure at station level."""
        return Pressure(self._measurement(Fieldname.PRESSURE_QFE))

    def snow_amount(self) -> Density:
        return Density(self._measurement(Fieldname.SNOW_AMOUNT))

    def snow_height(self) -> Height:
        return Height(self._measurement(Fieldname.SNOW_HEIGHT))

    def temperature(self) -> Temperature:
        return Temperature(self._measurement(Fieldname.TEMPERATURE))

    def weather_symbol(self) -> Condition:
        return Condition(self._measurement(Fieldname.WEATHER_SYMBOL))

    def wind_direction(self) -> Direction:
        """Direction the wind originates from."""
        return Direction(self._measurement(Fieldname.WIND_DIRECTION))

    def wind_gust(self) -> Speed:
        return Speed(self._measurement(Fieldname.WIND_GUST))

    def wind_speed(self) -> Speed:
        return Speed(self._measurement(Fieldname.WIND_SPEED))
