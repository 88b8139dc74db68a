"""
Compass naming for wind bearings.

Two fixed 32-point tables (abbreviated and long form) keyed by bearing in
degrees, plus the nearest-point lookup used for bearings between keys.
"""

from bisect import bisect_left
from typing import Dict

from ..core.constants import DIRECTION_MAX_ANGLE, DIRECTION_MIN_ANGLE
from ..core.exceptions import UnsupportedDirectionError

WIND_DIR_ABBR: Dict[float, str] = {
    0: "N", 11.25: "NbE", 22.5: "NNE", 33.75: "NEbN", 45: "NE", 56.25: "NEbE",
    67.5: "ENE", 78.75: "EbN", 90: "E", 101.25: "EbS", 112.5: "ESE", 123.75: "SEbE",
    135: "SE", 146.25: "SEbS", 157.5: "SSE", 168.75: "SbE", 180: "S",
    191.25: "SbW", 202.5: "SSW", 213.75: "SWbS", 225: "SW", 236.25: "SWbW",
    247.5: "WSW", 258.75: "WbS", 270: "W", 281.25: "WbN", 292.5: "WNW",
    303.75: "NWbW", 315: "NW", 326.25: "NWbN", 337.5: "NNW", 348.75: "NbW",
}

WIND_DIR_FULL: Dict[float, str] = {
    0: "North", 11.25: "North by East", 22.5: "North-Northeast",
    33.75: "Northeast by North", 45: "Northeast", 56.25: "Northeast by East",
    67.5: "East-Northeast", 78.75: "East by North", 90: "East",
    101.25: "East by South", 112.5: "East-Southeast", 123.75: "Southeast by East",
    135: "Southeast", 146.25: "Southeast by South", 157.5: "South-Southeast",
    168.75: "South by East", 180: "South", 191.25: "South by West",
    202.5: "South-Southwest", 213.75: "Southwest by South", 225: "Southwest",
    236.25: "Southwest by West", 247.5: "West-Southwest", 258.75: "West by South",
    270: "West", 281.25: "West by North", 292.5: "West-Northwest",
    303.75: "Northwest by West", 315: "Northwest", 326.25: "Northwest by North",
    337.5: "North-Northwest", 348.75: "North by West",
}


def find_direction(bearing: float, table: Dict[float, str]) -> str:
    """
    Name a bearing using the given compass table.

    Exact keys are looked up directly. Otherwise the two neighbouring keys
    lo < bearing < hi are compared: lo wins only if it is strictly closer,
    so equidistant bearings take the name of hi. Past the last key the
    bearing is compared against 360 degrees, which names the same point
    as 0 degrees.

    Args:
        bearing: Bearing in degrees
        table: WIND_DIR_ABBR or WIND_DIR_FULL

    Returns:
        Compass point name

    Raises:
        UnsupportedDirectionError: If bearing is outside [0, 360] or NaN
    """
    if not DIRECTION_MIN_ANGLE <= bearing <= DIRECTION_MAX_ANGLE:
        raise UnsupportedDirectionError(bearing)
    if bearing in table:
        return table[bearing]

    keys = sorted(table)
    idx = bisect_left(keys, bearing)
    lo = keys[idx - 1]
    if idx < len(keys):
        hi = keys[idx]
        hi_name = table[hi]
    else:
        hi = DIRECTION_MAX_ANGLE
        hi_name = table[keys[0]]

    lo_diff = bearing - lo
    hi_diff = hi - bearing
    if hi_diff > lo_diff:
        return table[lo]
    return hi_name
