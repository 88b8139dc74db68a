"""
Data models for the Meteologix client.

Contains the Optional-Value wrapper, the measurement record, the quantity
views, the closed vocabularies and the decoded response records.
"""

from .nullable import Nullable
from .source import Source
from .condition import ConditionType
from .precision import Precision
from .direction import find_direction, WIND_DIR_ABBR, WIND_DIR_FULL
from .measurement import Fieldname, Timespan, APIValue, Measurement
from .quantities import (
    DURATION_UNAVAILABLE,
    WeatherValue,
    Temperature,
    Pressure,
    Speed,
    Direction,
    Precipitation,
    Percentage,
    Humidity,
    Coverage,
    Height,
    Density,
    Duration,
    Radiation,
    Condition,
    DateTime,
    coverage_description,
)
from .current_weather import CurrentWeather
from .forecast import ForecastDetails, ForecastDatapoint, WeatherForecast
from .astronomy import AstronomicalDailyData, AstronomicalInfo
from .observation import Observation
from .station import Station
from .geolocation import GeoLocation

__all__ = [
    "Nullable",
    "Source",
    "ConditionType",
    "Precision",
    "find_direction",
    "WIND_DIR_ABBR",
    "WIND_DIR_FULL",
    "Fieldname",
    "Timespan",
    "APIValue",
    "Measurement",
    "DURATION_UNAVAILABLE",
    "WeatherValue",
    "Temperature",
    "Pressure",
    "Speed",
    "Direction",
    "Precipitation",
    "Percentage",
    "Humidity",
    "Coverage",
    "Height",
    "Density",
    "Duration",
    "Radiation",
    "Condition",
    "DateTime",
    "coverage_description",
    "CurrentWeather",
    "ForecastDetails",
    "ForecastDatapoint",
    "WeatherForecast",
    "AstronomicalDailyData",
    "AstronomicalInfo",
    "Observation",
    "Station",
    "GeoLocation",
]
