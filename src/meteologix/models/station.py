"""
Weather station directory entries.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from ..core.exceptions import DecodeError
from .nullable import Nullable, parse_bool, parse_int, parse_str, require_float
from .precision import Precision


@dataclass(frozen=True)
class Station:
    """A weather station returned by the station search."""

    id: str
    name: str
    latitude: float
    longitude: float
    distance: float
    altitude: Optional[int] = None
    precision: Precision = Precision.UNKNOWN
    recently_active: bool = False
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "Station":
        """
        Decode a station search entry.

        Raises:
            DecodeError: If the entry is malformed
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("station entry is not a JSON object")
        if payload.get("id") is None:
            raise DecodeError("station entry is missing 'id'")

        return cls(
            id=str(payload["id"]),
            name=payload.get("name") or "",
            latitude=require_float(payload, "lat"),
            longitude=require_float(payload, "lon"),
            distance=require_float(payload, "distance"),
            altitude=Nullable.from_json(payload, "alt", parse_int).get(),
            precision=Precision.from_string(payload.get("precision")),
            recently_active=Nullable.from_json(payload, "recentlyActive", parse_bool).get_or(False),
            type=Nullable.from_json(payload, "type", parse_str).get(),
        )


def stations_from_list(payload: Any) -> List[Station]:
    """
    Decode a station search response and order it by ascending distance.

    Raises:
        DecodeError: If the body is not an array of station entries
    """
    if not isinstance(payload, list):
        raise DecodeError("station search response is not a JSON array")
    stations = [Station.from_dict(item) for item in payload]
    stations.sort(key=lambda s: s.distance)
    return stations
