"""
Geolocation operations backed by the OpenStreetMap Nominatim gazetteer.

Resolves free-form place names into coordinates for the *_by_location
variants of the weather operations.
"""

import logging
from typing import Any, List

from ..core.config import Config
from ..core.exceptions import CityNotFoundError
from ..models.geolocation import GeoLocation, geolocations_from_list


class GeolocationAPI:
    """Mixin for gazetteer lookups."""

    config: Config
    logger: logging.Logger

    def get_url(self, url: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_geolocations_by_name(self, name: str) -> List[GeoLocation]:
        """
        Look up all places matching a name.

        Args:
            name: Free-form place name, e.g. "Cologne, Germany"

        Returns:
            Candidates sorted by descending importance

        Raises:
            CityNotFoundError: If the gazetteer knows no such place
            DecodeError: If a candidate's coordinates cannot be parsed
        """
        self.logger.debug(f"Looking up geolocation for '{name}'")
        result = self.get_url(
            self.config.geocoder_url,
            params={"format": "json", "q": name},
        )

        if isinstance(result, list) and not result:
            raise CityNotFoundError(name)
        return geolocations_from_list(result)

    def get_geolocation_by_name(self, name: str) -> GeoLocation:
        """
        Look up the most important place matching a name.

        Raises:
            CityNotFoundError: If the gazetteer knows no such place
            DecodeError: If a candidate's coordinates cannot be parsed
        """
        return self.get_geolocations_by_name(name)[0]
