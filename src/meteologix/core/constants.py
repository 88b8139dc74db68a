"""
Library-wide constants for the Meteologix weather API client.

This module defines endpoint roots, HTTP defaults and the fixed strings that
are part of the public contract of the quantity views.
"""

# Endpoint roots
API_BASE_URL = "https://api.kachelmannwetter.com/v02"
NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"

# HTTP defaults
DEFAULT_ACCEPT_LANGUAGE = "en"
DEFAULT_TIMEOUT = 10  # seconds
MIME_TYPE_JSON = "application/json"

# Station search
DEFAULT_RADIUS = 10  # km
MIN_RADIUS = 1  # km

# Astronomical info covers today plus the next 14 days
ASTRONOMY_HORIZON_DAYS = 14

# Wire format for date-only scalars
DATE_FORMAT = "%Y-%m-%d"

# Contract strings
DATA_UNAVAILABLE = "Data unavailable"
DATA_NOT_AVAILABLE = "data not available"
UNSUPPORTED_DIRECTION = "Unsupported direction"
TIMESPAN_UNSUPPORTED = "Timespan unsupported"

# Direction bounds in degrees
DIRECTION_MIN_ANGLE = 0.0
DIRECTION_MAX_ANGLE = 360.0

# Speed conversion factors (from m/s)
MS_TO_KNOTS = 1.9438444924
MS_TO_KMH = 3.6
MS_TO_MPH = 2.236936
