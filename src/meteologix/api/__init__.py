"""
API layer for the Meteologix weather API.

Provides the HTTP client with authentication gating and the endpoint
operations for current weather, forecasts, astronomy, stations and
geolocation.
"""

import logging
from typing import Optional

import requests  # type: ignore

from ..core.config import Config
from .client import APIClient, TLSAdapter
from .auth import AuthAPI
from .geolocation import GeolocationAPI
from .current import CurrentWeatherAPI
from .forecast import ForecastAPI
from .astronomy import AstronomyAPI
from .observations import ObservationsAPI
from .stations import StationsAPI
from . import helpers


class MeteologixClient(
    AuthAPI,
    GeolocationAPI,
    CurrentWeatherAPI,
    ForecastAPI,
    AstronomyAPI,
    ObservationsAPI,
    StationsAPI,
):
    """
    Unified client for the Meteologix (Kachelmann) weather API.

    Every operation performs exactly one blocking HTTP request (the
    *_by_location variants add one gazetteer lookup) and returns the
    decoded response record.

    Example:
        with MeteologixClient(Config(api_key="...")) as client:
            weather = client.current_weather_by_location("Berlin, Germany")
            print(weather.temperature())
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            config: Client configuration; loaded from the environment if None
            session: Pre-configured requests session
            logger: Logger instance
        """
        super().__init__(config=config, session=session, logger=logger)


__all__ = [
    "APIClient",
    "TLSAdapter",
    "AuthAPI",
    "GeolocationAPI",
    "CurrentWeatherAPI",
    "ForecastAPI",
    "AstronomyAPI",
    "ObservationsAPI",
    "StationsAPI",
    "MeteologixClient",
    "helpers",
]
