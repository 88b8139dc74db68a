"""
Weather forecast operations.
"""

import logging
from typing import Any

from ..models.forecast import ForecastDetails, WeatherForecast
from ..models.geolocation import GeoLocation
from ..models.measurement import Timespan
from .helpers import format_coordinate


class ForecastAPI:
    """Mixin for forecast operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_geolocation_by_name(self, name: str) -> GeoLocation:
        """Method provided by GeolocationAPI."""
        ...

    def forecast_by_coordinates(
        self,
        latitude: float,
        longitude: float,
        timespan: Timespan = Timespan.ONE_HOUR,
        details: ForecastDetails = ForecastDetails.STANDARD
    ) -> WeatherForecast:
        """
        Get the weather forecast for a coordinate.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees
            timespan: Step size (ONE_HOUR, THREE_HOURS or SIX_HOURS)
            details: Level of detail

        Returns:
            Decoded forecast

        Raises:
            TimespanUnsupportedError: If timespan is not a forecast step size
        """
        steps = timespan.forecast_steps
        self.logger.debug(
            f"Fetching {details.value} {steps} forecast for {latitude}, {longitude}"
        )
        endpoint = (
            f"/forecast/{format_coordinate(latitude)}/{format_coordinate(longitude)}"
            f"/{details.value}/{steps}"
        )
        result = self.get(endpoint, params={"units": "metric"})
        return WeatherForecast.from_dict(result)

    def forecast_by_location(
        self,
        location: str,
        timespan: Timespan = Timespan.ONE_HOUR,
        details: ForecastDetails = ForecastDetails.STANDARD
    ) -> WeatherForecast:
        """
        Get the weather forecast for a place name.

        Raises:
            CityNotFoundError: If the place cannot be resolved
            TimespanUnsupportedError: If timespan is not a forecast step size
        """
        place = self.get_geolocation_by_name(location)
        return self.forecast_by_coordinates(place.latitude, place.longitude, timespan, details)
