"""
Helper functions for API operations.

Provides URL path formatting for coordinates.
"""

from decimal import Decimal


def format_coordinate(value: float) -> str:
    """
    Format a coordinate for use in a URL path.

    Uses the shortest decimal representation that round-trips, without an
    exponent and without trailing zeros.

    Examples:
        50.9833 -> "50.9833"
        7.0 -> "7"
        0.00001 -> "0.00001"

    Args:
        value: Latitude or longitude

    Returns:
        Decimal string
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
