"""
Tests for API helper functions.
"""

import pytest  # type: ignore

from src.meteologix.api.helpers import format_coordinate


class TestFormatCoordinate:
    """Test coordinate formatting for URL paths."""

    @pytest.mark.parametrize("value,expected", [
        (50.9833, "50.9833"),
        (6.9833, "6.9833"),
        (52.5067296, "52.5067296"),
        (7.0, "7"),
        (0.0, "0"),
        (-33.8688, "-33.8688"),
        (0.00001, "0.00001"),
        (180, "180"),
    ])
    def test_shortest_decimal(self, value, expected):
        assert format_coordinate(value) == expected
