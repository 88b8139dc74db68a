"""
Tests for the Optional-Value wrapper.
"""

import pytest  # type: ignore

from src.meteologix.core.exceptions import DecodeError
from src.meteologix.models.nullable import (
    Nullable,
    parse_bool,
    parse_float,
    parse_int,
    parse_str,
    require_float,
)


class TestNullableDecoding:
    """Test decoding JSON fields into Nullable values."""

    def test_null_is_absent(self):
        value = Nullable.from_json({"dewpoint": None}, "dewpoint", parse_float)
        assert value.is_absent()
        assert not value.is_present()
        assert value.get() is None

    def test_missing_key_is_absent(self):
        value = Nullable.from_json({}, "dewpoint", parse_float)
        assert value.is_absent()

    @pytest.mark.parametrize("token,parser,expected", [
        (12.5, parse_float, 12.5),
        (0, parse_float, 0.0),
        (42, parse_int, 42),
        ("cloudy", parse_str, "cloudy"),
        (False, parse_bool, False),
    ])
    def test_non_null_is_present(self, token, parser, expected):
        value = Nullable.from_json({"field": token}, "field", parser)
        assert value.is_present()
        assert value.get() == expected

    def test_zero_is_not_absence(self):
        """Zero values must never signal a missing value."""
        value = Nullable.from_json({"temp": 0.0}, "temp", parse_float)
        assert value.is_present()
        assert value.get() == 0.0

    def test_without_parser_keeps_raw_token(self):
        value = Nullable.from_json({"field": [1, 2]}, "field")
        assert value.get() == [1, 2]

    def test_wrong_type_raises_decode_error(self):
        with pytest.raises(DecodeError):
            Nullable.from_json({"temp": "warm"}, "temp", parse_float)

    def test_bool_is_not_a_number(self):
        with pytest.raises(DecodeError):
            Nullable.from_json({"temp": True}, "temp", parse_float)


class TestNullableState:
    """Test construction helpers and reset."""

    def test_reset_clears_value(self):
        value = Nullable.of(3.2)
        assert value.is_present()

        value.reset()

        assert value.is_absent()
        assert value.get() is None

    def test_get_or(self):
        assert Nullable.of(1).get_or(5) == 1
        assert Nullable.absent().get_or(5) == 5

    def test_equality(self):
        assert Nullable.of(1.5) == Nullable.of(1.5)
        assert Nullable.absent() == Nullable()
        assert Nullable.of(None) != Nullable.absent()

    def test_truthiness_follows_presence(self):
        assert Nullable.of(0)
        assert not Nullable.absent()


class TestParsers:
    """Test the strict scalar parsers."""

    def test_parse_int_accepts_integral_float(self):
        assert parse_int(54.0) == 54

    def test_parse_int_rejects_fraction(self):
        with pytest.raises(TypeError):
            parse_int(54.5)

    def test_require_float_missing(self):
        with pytest.raises(DecodeError, match="lat"):
            require_float({}, "lat")

    def test_require_float(self):
        assert require_float({"lat": 50}, "lat") == 50.0
