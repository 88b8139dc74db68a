"""
Date and timezone utilities.

Centralizes parsing of the wire timestamps and date-only scalars as well as
RFC 3339 rendering, with timezone handling via pytz.
"""

from datetime import date, datetime
from typing import Any, Optional, Union

import pytz
from pytz.tzinfo import BaseTzInfo

from .constants import DATE_FORMAT
from .exceptions import DecodeError

# Zero instant, returned for missing datetime values
ZERO_TIME = pytz.UTC.localize(datetime(1, 1, 1))


class DateUtils:
    """Utilities for date and timezone handling."""

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Berlin', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def parse_datetime(value: Any) -> datetime:
        """
        Parse an ISO-8601 timestamp into a timezone-aware datetime.

        Naive timestamps are interpreted as UTC.

        Args:
            value: Timestamp string as sent on the wire

        Returns:
            Timezone-aware datetime

        Raises:
            DecodeError: If the value is not a valid timestamp
        """
        if not isinstance(value, str):
            raise DecodeError(f"Invalid timestamp: {value!r}")

        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"

        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise DecodeError(f"Invalid timestamp: {value!r}") from e

        if parsed.tzinfo is None:
            parsed = pytz.UTC.localize(parsed)
        return parsed

    @staticmethod
    def parse_optional_datetime(value: Any) -> Optional[datetime]:
        """Parse a timestamp that may be null; None stays None."""
        if value is None:
            return None
        return DateUtils.parse_datetime(value)

    @staticmethod
    def parse_api_date(value: Any) -> datetime:
        """
        Parse a date-only scalar (YYYY-MM-DD) as midnight UTC.

        Args:
            value: Date string or None

        Returns:
            Timezone-aware datetime at 00:00 UTC, or ZERO_TIME for null

        Raises:
            DecodeError: If the value is not a valid calendar date
        """
        if value is None:
            return ZERO_TIME
        if not isinstance(value, str):
            raise DecodeError(f"Invalid date: {value!r}")

        try:
            parsed = datetime.strptime(value, DATE_FORMAT)
        except ValueError as e:
            raise DecodeError(f"Invalid date: {value!r}") from e
        return pytz.UTC.localize(parsed)

    @staticmethod
    def to_date(value: Union[date, datetime, str]) -> date:
        """
        Reduce a datetime, date or YYYY-MM-DD string to a calendar date.

        Datetimes keep the calendar date of their own zone.

        Raises:
            DecodeError: If a string is not a valid calendar date
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return DateUtils.parse_api_date(value).date()

    @staticmethod
    def is_zero(value: Optional[datetime]) -> bool:
        """Return True for None or the zero instant."""
        if value is None:
            return True
        return value.replace(tzinfo=None) == ZERO_TIME.replace(tzinfo=None)

    @staticmethod
    def format_rfc3339(value: datetime) -> str:
        """
        Render a datetime as RFC 3339 (second precision, 'Z' for UTC).

        Example:
            2023-05-28T21:16:37+02:00
        """
        if value.tzinfo is None:
            value = pytz.UTC.localize(value)
        text = value.isoformat(timespec="seconds")
        if text.endswith("+00:00"):
            text = text[:-6] + "Z"
        return text
