"""
Gazetteer (Nominatim) search results.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

from ..core.exceptions import DecodeError


def _coordinate(payload: Mapping[str, Any], key: str) -> float:
    # The gazetteer sends coordinates as strings
    raw = payload.get(key)
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"invalid {key} value {raw!r}: {e}") from e


@dataclass(frozen=True)
class GeoLocation:
    """A place found by name."""

    name: str
    latitude: float
    longitude: float
    importance: float = 0.0
    place_id: int = 0

    @classmethod
    def from_dict(cls, payload: Any) -> "GeoLocation":
        """
        Decode one gazetteer candidate.

        Raises:
            DecodeError: If the coordinates are not parseable numbers
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("geolocation entry is not a JSON object")

        importance = payload.get("importance")
        try:
            importance = float(importance) if importance is not None else 0.0
            place_id = int(payload.get("place_id") or 0)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"invalid geolocation entry: {e}") from e

        return cls(
            name=payload.get("display_name") or "",
            latitude=_coordinate(payload, "lat"),
            longitude=_coordinate(payload, "lon"),
            importance=importance,
            place_id=place_id,
        )


def geolocations_from_list(payload: Any) -> List[GeoLocation]:
    """
    Decode gazetteer candidates ordered by descending importance.

    Candidates of equal importance keep their response order.

    Raises:
        DecodeError: If the body is not an array of candidates
    """
    if not isinstance(payload, list):
        raise DecodeError("geolocation response is not a JSON array")
    locations = [GeoLocation.from_dict(item) for item in payload]
    locations.sort(key=lambda loc: loc.importance, reverse=True)
    return locations
