"""
Station observation operations.
"""

import logging
from typing import Any
from urllib.parse import quote

from ..models.observation import Observation


class ObservationsAPI:
    """Mixin for station observation operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def observation_latest_by_station_id(self, station_id: str) -> Observation:
        """
        Get the latest observation of a weather station.

        Args:
            station_id: Station ID as returned by the station search

        Returns:
            Decoded observation
        """
        self.logger.debug(f"Fetching latest observation for station {station_id}")
        endpoint = f"/station/{quote(str(station_id), safe='')}/observations/latest"
        return Observation.from_dict(self.get(endpoint))
