"""
Current weather operations.
"""

import logging
from typing import Any

from ..models.current_weather import CurrentWeather
from ..models.geolocation import GeoLocation
from .helpers import format_coordinate


class CurrentWeatherAPI:
    """Mixin for current weather operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_geolocation_by_name(self, name: str) -> GeoLocation:
        """Method provided by GeolocationAPI."""
        ...

    def current_weather_by_coordinates(self, latitude: float, longitude: float) -> CurrentWeather:
        """
        Get the current weather for a coordinate.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            Decoded current weather
        """
        self.logger.debug(f"Fetching current weather for {latitude}, {longitude}")
        endpoint = f"/current/{format_coordinate(latitude)}/{format_coordinate(longitude)}"
        result = self.get(endpoint, params={"units": "metric"})
        return CurrentWeather.from_dict(result)

    def current_weather_by_location(self, location: str) -> CurrentWeather:
        """
        Get the current weather for a place name.

        Raises:
            CityNotFoundError: If the place cannot be resolved
        """
        place = self.get_geolocation_by_name(location)
        return self.current_weather_by_coordinates(place.latitude, place.longitude)
