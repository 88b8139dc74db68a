"""
Tests for the quantity views over Measurement.
"""

import math
from datetime import datetime, timedelta

import pytest  # type: ignore
import pytz  # type: ignore

from src.meteologix.core.constants import DATA_UNAVAILABLE
from src.meteologix.core.date_utils import ZERO_TIME
from src.meteologix.models.condition import ConditionType
from src.meteologix.models.measurement import Fieldname, Measurement
from src.meteologix.models.quantities import (
    DURATION_UNAVAILABLE,
    Condition,
    Coverage,
    DateTime,
    Density,
    Direction,
    Duration,
    Height,
    Humidity,
    Percentage,
    Precipitation,
    Pressure,
    Radiation,
    Speed,
    Temperature,
    coverage_description,
    view_for_field,
)
from src.meteologix.models.source import Source

NOW = pytz.UTC.localize(datetime(2023, 5, 23, 5, 0))


def measure(field, value, source=Source.OBSERVATION):
    return Measurement.of(field, value, NOW, source)


NUMERIC_VIEWS = [
    (Temperature, Fieldname.TEMPERATURE),
    (Pressure, Fieldname.PRESSURE_MSL),
    (Speed, Fieldname.WIND_SPEED),
    (Direction, Fieldname.WIND_DIRECTION),
    (Precipitation, Fieldname.PRECIPITATION_1H),
    (Percentage, Fieldname.MOON_ILLUMINATION),
    (Humidity, Fieldname.HUMIDITY_RELATIVE),
    (Coverage, Fieldname.CLOUD_COVERAGE),
    (Height, Fieldname.SNOW_HEIGHT),
    (Density, Fieldname.SNOW_AMOUNT),
    (Duration, Fieldname.SUNHOURS),
    (Radiation, Fieldname.GLOBAL_RADIATION_1H),
]


class TestAvailability:
    """Availability law: not available <=> NaN or sentinel."""

    @pytest.mark.parametrize("view_cls,field", NUMERIC_VIEWS)
    def test_unavailable_numeric_is_nan(self, view_cls, field):
        view = view_cls.unavailable(field)
        assert not view.is_available
        assert math.isnan(view.value)
        assert str(view) == DATA_UNAVAILABLE

    @pytest.mark.parametrize("view_cls,field", NUMERIC_VIEWS)
    def test_available_numeric_is_not_nan(self, view_cls, field):
        view = view_cls(measure(field, 12.0))
        assert view.is_available
        assert view.value == 12.0
        assert view.date_time == NOW
        assert view.source == Source.OBSERVATION

    def test_unavailable_condition(self):
        view = Condition.unavailable(Fieldname.WEATHER_SYMBOL)
        assert view.value == DATA_UNAVAILABLE
        assert view.condition == ConditionType.UNKNOWN

    def test_unavailable_datetime_is_zero_instant(self):
        view = DateTime.unavailable(Fieldname.SUNSET)
        assert not view.is_available
        assert view.value == ZERO_TIME
        assert str(view) == "0001-01-01T00:00:00Z"

    def test_default_view_is_unavailable(self):
        assert not Temperature().is_available

    def test_view_rejects_foreign_field(self):
        with pytest.raises(ValueError):
            Temperature(measure(Fieldname.WIND_SPEED, 3.0))

    def test_views_compare_by_measurement(self):
        assert Temperature(measure(Fieldname.TEMPERATURE, 1.0)) == \
            Temperature(measure(Fieldname.TEMPERATURE, 1.0))
        assert Temperature(measure(Fieldname.TEMPERATURE, 1.0)) != \
            Temperature(measure(Fieldname.TEMPERATURE, 2.0))


class TestTemperature:
    """Test temperature conversions and formatting."""

    def test_strings(self):
        temp = Temperature(measure(Fieldname.TEMPERATURE, 17.8))
        assert str(temp) == "17.8°C"
        assert temp.celsius_string == "17.8°C"
        assert temp.fahrenheit_string == "64.0°F"

    @pytest.mark.parametrize("celsius", [-40.0, -12.3, 0.0, 17.8, 36.6])
    def test_fahrenheit_round_trip(self, celsius):
        temp = Temperature(measure(Fieldname.TEMPERATURE, celsius))
        assert (temp.fahrenheit - 32) * 5 / 9 == pytest.approx(temp.celsius)

    def test_minus_forty(self):
        temp = Temperature(measure(Fieldname.TEMPERATURE, -40.0))
        assert temp.fahrenheit == pytest.approx(-40.0)

    def test_unavailable_strings(self):
        temp = Temperature.unavailable()
        assert temp.fahrenheit_string == DATA_UNAVAILABLE
        assert math.isnan(temp.fahrenheit)


class TestSpeed:
    """Test speed conversions, applied without rounding."""

    def test_conversions(self):
        speed = Speed(measure(Fieldname.WIND_SPEED, 10.0))
        assert speed.knots == 10.0 * 1.9438444924
        assert speed.kmh == 10.0 * 3.6
        assert speed.mph == 10.0 * 2.236936

    def test_strings(self):
        speed = Speed(measure(Fieldname.WIND_SPEED, 10.0))
        assert str(speed) == "10.0m/s"
        assert speed.knots_string == "19kn"
        assert speed.kmh_string == "36.0km/h"
        assert speed.mph_string == "22.4mi/h"


class TestHeight:
    """Test height unit scaling."""

    def test_scaling(self):
        height = Height(measure(Fieldname.SNOW_HEIGHT, 0.12))
        assert height.meter == 0.12
        assert height.centimeter == pytest.approx(12.0)
        assert height.millimeter == pytest.approx(120.0)

    def test_strings(self):
        height = Height(measure(Fieldname.SNOW_HEIGHT, 0.12))
        assert height.meter_string == "0.120m"
        assert height.centimeter_string == "12.000cm"
        assert height.millimeter_string == "120.000mm"

    def test_zero_and_unavailable_edges(self):
        zero = Height(measure(Fieldname.SNOW_HEIGHT, 0.0))
        assert zero.centimeter == 0.0
        assert zero.millimeter == 0.0
        assert math.isnan(Height.unavailable().centimeter)
        assert Height.unavailable().millimeter_string == DATA_UNAVAILABLE


class TestCoverage:
    """Test cloud coverage bands and formatting."""

    @pytest.mark.parametrize("percent,label", [
        (0, "Clear sky"),
        (10, "Clear sky"),
        (10.0001, "Mostly clear"),
        (30, "Mostly clear"),
        (50, "Partly cloudy"),
        (70, "Mostly cloudy"),
        (90, "Overcast"),
        (90.0001, "Very cloudy"),
        (100, "Very cloudy"),
        (101, "Unknown"),
        (-1, "Unknown"),
    ])
    def test_bands(self, percent, label):
        assert coverage_description(percent) == label

    def test_nan_is_unknown(self):
        assert coverage_description(float("nan")) == "Unknown"
        assert Coverage.unavailable().description == "Unknown"

    def test_view_format(self):
        coverage = Coverage(measure(Fieldname.CLOUD_COVERAGE, 85.4))
        assert str(coverage) == "85%"
        assert coverage.description == "Overcast"


class TestFormatting:
    """Test the unit-tagged string forms."""

    @pytest.mark.parametrize("view_cls,field,value,expected", [
        (Pressure, Fieldname.PRESSURE_MSL, 1020.34, "1020.3hPa"),
        (Precipitation, Fieldname.PRECIPITATION_1H, 0.25, "0.2mm"),
        (Humidity, Fieldname.HUMIDITY_RELATIVE, 58.44, "58.4%"),
        (Percentage, Fieldname.MOON_ILLUMINATION, 63.7, "63.7%"),
        (Direction, Fieldname.WIND_DIRECTION, 47.0, "47°"),
        (Density, Fieldname.SNOW_AMOUNT, 3.5, "3.5kg/m³"),
        (Duration, Fieldname.SUNHOURS, 0.75, "0.75h"),
        (Radiation, Fieldname.GLOBAL_RADIATION_1H, 312.4, "312kJ/m²"),
    ])
    def test_string(self, view_cls, field, value, expected):
        assert str(view_cls(measure(field, value))) == expected


class TestDirectionView:
    """Test compass naming through the view."""

    def test_names(self):
        direction = Direction(measure(Fieldname.WIND_DIRECTION, 15.0))
        assert direction.direction == "NbE"
        assert direction.direction_full == "North by East"

    def test_out_of_range(self):
        direction = Direction(measure(Fieldname.WIND_DIRECTION, 999.0))
        assert direction.direction == "Unsupported direction"
        assert direction.direction_full == "Unsupported direction"

    def test_unavailable(self):
        assert Direction.unavailable().direction == DATA_UNAVAILABLE


class TestDuration:
    """Test the duration projection."""

    def test_duration(self):
        duration = Duration(measure(Fieldname.SUNHOURS, 1.5))
        assert duration.duration == timedelta(hours=1, minutes=30)

    def test_unavailable_sentinel(self):
        assert Duration.unavailable().duration == DURATION_UNAVAILABLE


class TestConditionAndDateTime:
    """Test the symbolic and instant views."""

    def test_condition(self):
        condition = Condition(measure(Fieldname.WEATHER_SYMBOL, "snowrain"))
        assert condition.value == "snowrain"
        assert condition.condition == ConditionType.SNOW_RAIN
        assert str(condition) == "Sleet"

    def test_unknown_condition(self):
        condition = Condition(measure(Fieldname.WEATHER_SYMBOL, "volcanic_ash"))
        assert condition.condition == ConditionType.UNKNOWN
        assert str(condition) == "Unknown"

    def test_datetime(self):
        berlin = pytz.timezone("Europe/Berlin")
        sunset = berlin.localize(datetime(2023, 5, 28, 21, 16, 37))
        view = DateTime(measure(Fieldname.SUNSET, sunset, Source.FORECAST))
        assert view.value == sunset
        assert str(view) == "2023-05-28T21:16:37+02:00"


class TestViewForField:
    """Test mapping fields onto views."""

    @pytest.mark.parametrize("field,view_cls", [
        (Fieldname.TEMPERATURE_MAX, Temperature),
        (Fieldname.HUMIDITY_RELATIVE, Humidity),
        (Fieldname.CLOUD_COVERAGE, Coverage),
        (Fieldname.MOON_ILLUMINATION, Percentage),
        (Fieldname.PRESSURE_QFE, Pressure),
        (Fieldname.WEATHER_SYMBOL, Condition),
        (Fieldname.MOONRISE, DateTime),
    ])
    def test_lookup(self, field, view_cls):
        assert view_for_field(field) is view_cls
