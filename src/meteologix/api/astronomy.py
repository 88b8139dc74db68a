"""
Astronomical information operations.
"""

import logging
from typing import Any

from ..models.astronomy import AstronomicalInfo
from ..models.geolocation import GeoLocation
from .helpers import format_coordinate


class AstronomyAPI:
    """Mixin for astronomy operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_geolocation_by_name(self, name: str) -> GeoLocation:
        """Method provided by GeolocationAPI."""
        ...

    def astronomical_info_by_coordinates(self, latitude: float, longitude: float) -> AstronomicalInfo:
        """
        Get sun and moon events for the next 14 days at a coordinate.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            Decoded astronomical information
        """
        self.logger.debug(f"Fetching astronomical info for {latitude}, {longitude}")
        endpoint = f"/tools/astronomy/{format_coordinate(latitude)}/{format_coordinate(longitude)}"
        return AstronomicalInfo.from_dict(self.get(endpoint))

    def astronomical_info_by_location(self, location: str) -> AstronomicalInfo:
        """
        Get sun and moon events for a place name.

        Raises:
            CityNotFoundError: If the place cannot be resolved
        """
        place = self.get_geolocation_by_name(location)
        return self.astronomical_info_by_coordinates(place.latitude, place.longitude)
