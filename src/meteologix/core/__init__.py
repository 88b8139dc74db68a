"""
Core utilities for the Meteologix client.

Provides configuration management, logging helpers, date utilities and the
exception taxonomy.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils, ZERO_TIME
from .exceptions import (
    MeteologixError,
    TransportError,
    NonJSONResponseError,
    DecodeError,
    APIError,
    CityNotFoundError,
    NoStationFoundError,
    RadiusTooSmallError,
    UnsupportedDirectionError,
    TimespanUnsupportedError,
)

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "ZERO_TIME",
    "MeteologixError",
    "TransportError",
    "NonJSONResponseError",
    "DecodeError",
    "APIError",
    "CityNotFoundError",
    "NoStationFoundError",
    "RadiusTooSmallError",
    "UnsupportedDirectionError",
    "TimespanUnsupportedError",
]
