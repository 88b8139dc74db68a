"""
Tests for the closed vocabularies: condition, source, precision and timespan.
"""

import pytest  # type: ignore

from src.meteologix.core.exceptions import TimespanUnsupportedError
from src.meteologix.models.condition import CONDITION_LABELS, ConditionType
from src.meteologix.models.measurement import Timespan
from src.meteologix.models.precision import Precision
from src.meteologix.models.source import Source


class TestConditionType:
    """Test the weather condition vocabulary."""

    def test_every_tag_has_a_label(self):
        assert set(CONDITION_LABELS) == set(ConditionType)

    @pytest.mark.parametrize("wire,tag,label", [
        ("cloudy", ConditionType.CLOUDY, "Cloudy"),
        ("snowrain", ConditionType.SNOW_RAIN, "Sleet"),
        ("sunshine", ConditionType.SUNSHINE, "Clear sky"),
        ("thunderstorm", ConditionType.THUNDERSTORM, "Thunderstorm"),
    ])
    def test_known(self, wire, tag, label):
        assert ConditionType.from_string(wire) == tag
        assert tag.label == label
        assert str(tag) == label

    @pytest.mark.parametrize("wire", ["hail", "", None])
    def test_unknown(self, wire):
        assert ConditionType.from_string(wire) == ConditionType.UNKNOWN


class TestSource:
    """Test provenance parsing."""

    @pytest.mark.parametrize("wire,source", [
        ("observation", Source.OBSERVATION),
        ("ANALYSIS", Source.ANALYSIS),
        ("Forecast", Source.FORECAST),
        ("mIxEd", Source.MIXED),
        ("unknown", Source.UNKNOWN),
        ("satellite", Source.UNKNOWN),
        (None, Source.UNKNOWN),
    ])
    def test_from_string(self, wire, source):
        assert Source.from_string(wire) == source

    def test_string(self):
        assert str(Source.ANALYSIS) == "Analysis"


class TestPrecision:
    """Test station precision parsing."""

    @pytest.mark.parametrize("wire,precision", [
        ("SUPER_HIGH", Precision.SUPER_HIGH),
        ("super_high", Precision.SUPER_HIGH),
        ("High", Precision.HIGH),
        ("STANDARD", Precision.STANDARD),
        ("LOW", Precision.UNKNOWN),
        (None, Precision.UNKNOWN),
    ])
    def test_from_string(self, wire, precision):
        assert Precision.from_string(wire) == precision


class TestTimespan:
    """Test forecast step sizes."""

    @pytest.mark.parametrize("timespan,steps", [
        (Timespan.ONE_HOUR, "1h"),
        (Timespan.THREE_HOURS, "3h"),
        (Timespan.SIX_HOURS, "6h"),
    ])
    def test_forecast_steps(self, timespan, steps):
        assert timespan.forecast_steps == steps

    @pytest.mark.parametrize("timespan", [
        Timespan.CURRENT, Timespan.TEN_MINUTES, Timespan.TWENTY_FOUR_HOURS,
    ])
    def test_unsupported_forecast_steps(self, timespan):
        with pytest.raises(TimespanUnsupportedError, match="Timespan unsupported"):
            timespan.forecast_steps
