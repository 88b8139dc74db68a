"""
Exception taxonomy for the Meteologix client.

Transport, protocol and decoding failures as well as the domain errors
raised by the endpoint helpers all derive from MeteologixError.
"""

from typing import Any, Dict, Optional

from .constants import TIMESPAN_UNSUPPORTED, UNSUPPORTED_DIRECTION


class MeteologixError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(MeteologixError):
    """Network, DNS, TLS or timeout failure while talking to a remote service."""


class NonJSONResponseError(MeteologixError):
    """The remote service answered with a content type other than application/json."""

    def __init__(self, content_type: Optional[str] = None):
        self.content_type = content_type
        super().__init__(
            f"HTTP response is of non-JSON content type: {content_type or 'unset'}"
        )


class DecodeError(MeteologixError, ValueError):
    """Response body could not be decoded or a field could not be coerced."""


class APIError(MeteologixError):
    """Structured error returned by the weather API for HTTP status >= 400."""

    def __init__(
        self,
        status: int = 0,
        detail: str = "",
        message: str = "",
        title: str = "",
        type: str = ""
    ):
        self.status = status
        self.detail = detail
        self.message = message
        self.title = title
        self.type = type
        super().__init__(str(self))

    @classmethod
    def from_dict(cls, payload: Dict[str, Any], http_status: int, reason: str) -> "APIError":
        """
        Build an APIError from a decoded error body.

        Missing status and detail fields are filled from the HTTP response.

        Args:
            payload: Decoded JSON error body
            http_status: HTTP status code of the response
            reason: HTTP status line (e.g. "404 Not Found")

        Returns:
            APIError instance
        """
        status = payload.get("status") or 0
        if not isinstance(status, int) or status < 1:
            status = http_status

        return cls(
            status=status,
            detail=payload.get("detail") or reason,
            message=payload.get("message") or "",
            title=payload.get("title") or "",
            type=payload.get("type") or "",
        )

    def __str__(self) -> str:
        text = f"API request failed with status HTTP {self.status}: {self.detail}"
        if self.message:
            text += f" (Optional message: {self.message})"
        return text


class CityNotFoundError(MeteologixError):
    """The geocoder returned no candidates for the requested place."""

    def __init__(self, city: str = ""):
        self.city = city
        super().__init__(f"requested city not found: {city}" if city else "city not found")


class NoStationFoundError(MeteologixError):
    """A station search returned an empty result list."""

    def __init__(self) -> None:
        super().__init__("no station found")


class RadiusTooSmallError(MeteologixError, ValueError):
    """Station search radius is below the supported minimum."""

    def __init__(self, radius: Any = None):
        self.radius = radius
        super().__init__("radius too small")


class UnsupportedDirectionError(MeteologixError, ValueError):
    """Bearing is outside of the supported [0, 360] interval."""

    def __init__(self, bearing: float):
        self.bearing = bearing
        super().__init__(UNSUPPORTED_DIRECTION)


class TimespanUnsupportedError(MeteologixError, ValueError):
    """Requested timespan is not supported by the operation."""

    def __init__(self, timespan: Any = None):
        self.timespan = timespan
        super().__init__(TIMESPAN_UNSUPPORTED)
