"""
Meteologix weather API client

This package provides a typed client for the Meteologix / Kachelmann
weather API: current weather, forecasts, astronomical information, station
observations and station search, plus place-name lookups via the
OpenStreetMap Nominatim gazetteer.
"""

__version__ = "0.1.0"
__description__ = "Client for the Meteologix / Kachelmann weather API"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "MeteologixClient":
        from .api import MeteologixClient
        return MeteologixClient
    if name == "Config":
        from .core.config import Config
        return Config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "MeteologixClient",
    "Config",
]
