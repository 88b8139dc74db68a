"""
Latest station observation response.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..core.constants import DATA_NOT_AVAILABLE, TIMESPAN_UNSUPPORTED
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
from .nullable import Nullable, parse_float, parse_int, require_float
from .quantities import (
    Direction,
    Humidity,
    Precipitation,
    Pressure,
    Radiation,
    Speed,
    Temperature,
    view_for_field,
)
from .source import Source

OBSERVATION_FIELDS = {
    Fieldname.DEWPOINT: parse_float,
    Fieldname.DEWPOINT_MEAN: parse_float,
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
    Fieldname.TEMPERATURE: parse_float,
    Fieldname.TEMPERATURE_AT_GROUND: parse_float,
    Fieldname.TEMPERATURE_AT_GROUND_MIN: parse_float,
    Fieldname.TEMPERATURE_MAX: parse_float,
    Fieldname.TEMPERATURE_MEAN: parse_float,
    Fieldname.TEMPERATURE_MIN: parse_float,
    Fieldname.WIND_DIRECTION: parse_float,
    Fieldname.WIND_SPEED: parse_float,
}


@dataclass(frozen=True)
class Observation:
    """Most recent measurements of a weather station."""

    station_id: str
    name: str
    latitude: float
    longitude: float
    altitude: Optional[int] = None
    values: Dict[Fieldname, APIValue] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Any) -> "Observation":
        """
        Decode an observation response body.

        Raises:
            DecodeError: If the body is malformed
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("observation response is not a JSON object")

        station_id = payload.get("stationId")
        if station_id is None:
            raise DecodeError("observation is missing 'stationId'")

        return cls(
            station_id=str(station_id),
            name=payload.get("name") or "",
            latitude=require_float(payload, "lat"),
            longitude=require_float(payload, "lon"),
            altitude=Nullable.from_json(payload, "ele", parse_int).get(),
            values=decode_values(payload.get("data"), OBSERVATION_FIELDS),
        )

    def measurement(self, name: Fieldname) -> Measurement:
        """Return the raw Measurement of a field; observed values default to source observation."""
        return Measurement.from_api_value(name, self.values.get(name), Source.OBSERVATION)

    def describe(self, name: Fieldname) -> str:
        """Render a field with its unit, or "data not available"."""
        m = self.measurement(name)
        if not m.available:
            return DATA_NOT_AVAILABLE
        return str(view_for_field(name)(m))

    def dewpoint(self) -> Temperature:
        return Temperature(self.measurement(Fieldname.DEWPOINT))

    def dewpoint_mean(self) -> Temperature:
        return Temperature(self.measurement(Fieldname.DEWPOINT_MEAN))

    def global_radiation(self, timespan: Timespan) -> Radiation:
        name = GLOBAL_RADIATION_FIELDS.get(timespan)
        if name is None:
            return Radiation.unavailable()
        return Radiation(self.measurement(name))

    def humidity_relative(self) -> Humidity:
        return Humidity(self.measurement(Fieldname.HUMIDITY_RELATIVE))

    def precipitation(self, timespan: Timespan) -> Precipitation:
        """Precipitation for the given timespan; unsupported timespans are not available."""
        name = PRECIPITATION_FIELDS.get(timespan)
        if name is None:
            return Precipitation.unavailable()
        return Precipitation(self.measurement(name))

    def precipitation_string(self, timespan: Timespan) -> str:
        """
        Render the precipitation of a timespan.

        Returns "Timespan unsupported" for timespans the station does not
        report and "data not available" when the value is missing.
        """
        name = PRECIPITATION_FIELDS.get(timespan)
        if name is None:
            return TIMESPAN_UNSUPPORTED
        return self.describe(name)

    def pressure_msl(self) -> Pressure:
        return Pressure(self.measurement(Fieldname.PRESSURE_MSL))

    def pressure_qfe(self) -> Pressure:
        return Pressure(self.measurement(Fieldname.PRESSURE_QFE))

    def temperature(self) -> Temperature:
        """Air temperature 2 m above ground."""
        return Temperature(self.measurement(Fieldname.TEMPERATURE))

    def temperature_at_ground(self) -> Temperature:
        """Temperature 5 cm above ground."""
        return Temperature(self.measurement(Fieldname.TEMPERATURE_AT_GROUND))

    def temperature_at_ground_min(self) -> Temperature:
        return Temperature(self.measurement(Fieldname.TEMPERATURE_AT_GROUND_MIN))

    def temperature_max(self) -> Temperature:
        return Temperature(self.measurement(Fieldname.TEMPERATURE_MAX))

    def temperature_mean(self) -> Temperature:
        return Temperature(self.measurement(Fieldname.TEMPERATURE_MEAN))

    def temperature_min(self) -> Temperature:
        return Temperature(self.measurement(Fieldname.TEMPERATURE_MIN))

    def wind_direction(self) -> Direction:
        return Direction(self.measurement(Fieldname.WIND_DIRECTION))

    def wind_speed(self) -> Speed:
        return Speed(self.measurement(Fieldname.WIND_SPEED))
