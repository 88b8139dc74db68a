"""
Station search operations.
"""

import logging
from typing import Any, List

from ..core.constants import DEFAULT_RADIUS, MIN_RADIUS
from ..core.exceptions import NoStationFoundError, RadiusTooSmallError
from ..models.geolocation import GeoLocation
from ..models.station import Station, stations_from_list
from .helpers import format_coordinate


class StationsAPI:
    """Mixin for station search operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_geolocation_by_name(self, name: str) -> GeoLocation:
        """Method provided by GeolocationAPI."""
        ...

    def station_search_by_coordinates_within_radius(
        self,
        latitude: float,
        longitude: float,
        radius: int
    ) -> List[Station]:
        """
        Search weather stations around a coordinate.

        Finding a station does not imply that the subscription grants
        access to its observations.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees
            radius: Search radius in km (at least 1)

        Returns:
            Stations ordered by ascending distance

        Raises:
            RadiusTooSmallError: If radius is below 1
            NoStationFoundError: If no station lies within the radius
        """
        if radius < MIN_RADIUS:
            raise RadiusTooSmallError(radius)

        self.logger.debug(f"Searching stations within {radius} km of {latitude}, {longitude}")
        endpoint = f"/station/search/{format_coordinate(latitude)}/{format_coordinate(longitude)}"
        result = self.get(endpoint, params={"radius": radius})

        if isinstance(result, list) and not result:
            raise NoStationFoundError()
        return stations_from_list(result)

    def station_search_by_coordinates(
        self,
        latitude: float,
        longitude: float,
        radius: int = DEFAULT_RADIUS
    ) -> List[Station]:
        """Search weather stations around a coordinate (default radius 10 km)."""
        return self.station_search_by_coordinates_within_radius(latitude, longitude, radius)

    def station_search_by_location_within_radius(self, location: str, radius: int) -> List[Station]:
        """
        Search weather stations around a place name.

        Raises:
            RadiusTooSmallError: If radius is below 1
            CityNotFoundError: If the place cannot be resolved
            NoStationFoundError: If no station lies within the radius
        """
        if radius < MIN_RADIUS:
            raise RadiusTooSmallError(radius)
        place = self.get_geolocation_by_name(location)
        return self.station_search_by_coordinates_within_radius(
            place.latitude, place.longitude, radius
        )

    def station_search_by_location(self, location: str) -> List[Station]:
        """Search weather stations around a place name within the default radius."""
        return self.station_search_by_location_within_radius(location, DEFAULT_RADIUS)
