"""
Astronomical information response: sun and moon events per day.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, List, Mapping, Optional, Union

import pytz

from ..core.constants import ASTRONOMY_HORIZON_DAYS
from ..core.date_utils import ZERO_TIME, DateUtils
from ..core.exceptions import DecodeError
from .measurement import Fieldname, Measurement
from .nullable import Nullable, parse_float, parse_int, require_float
from .quantities import DateTime, Percentage
from .source import Source

# Fieldname -> wire key of the optional event timestamps of a daily record
EVENT_KEYS = {
    Fieldname.SUNRISE: "sunrise",
    Fieldname.SUNSET: "sunset",
    Fieldname.TRANSIT: "transit",
    Fieldname.CIVIL_DAWN: "civilDawn",
    Fieldname.CIVIL_DUSK: "civilDusk",
    Fieldname.NAUTICAL_DAWN: "nauticalDawn",
    Fieldname.NAUTICAL_DUSK: "nauticalDusk",
    Fieldname.ASTRONOMICAL_DAWN: "astronomicalDawn",
    Fieldname.ASTRONOMICAL_DUSK: "astronomicalDusk",
    Fieldname.MOONRISE: "moonRise",
    Fieldname.MOONSET: "moonSet",
}

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class AstronomicalDailyData:
    """Sun and moon events of one calendar day."""

    date: datetime
    events: Mapping[Fieldname, datetime] = field(default_factory=dict)
    moon_illumination: Optional[float] = None
    moon_phase: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "AstronomicalDailyData":
        if not isinstance(payload, Mapping):
            raise DecodeError("astronomical daily record is not a JSON object")

        events = {}
        for name, key in EVENT_KEYS.items():
            value = DateUtils.parse_optional_datetime(payload.get(key))
            if value is not None:
                events[name] = value

        return cls(
            date=DateUtils.parse_api_date(payload.get("date")),
            events=events,
            moon_illumination=Nullable.from_json(payload, "moonIllumination", parse_float).get(),
            moon_phase=Nullable.from_json(payload, "moonPhase", parse_int).get(),
        )

    def event(self, name: Fieldname) -> Optional[datetime]:
        """Return the timestamp of an event, or None if it does not occur that day."""
        return self.events.get(name)


@dataclass(frozen=True)
class AstronomicalInfo:
    """
    Astronomical information for a coordinate.

    Holds up to 14 daily records starting today. Lookups for dates beyond
    that horizon, or for days without a record, return not-available views.
    Every view carries the run time of the response as its timestamp.
    """

    latitude: float
    longitude: float
    timezone: str = ""
    run: datetime = ZERO_TIME
    next_full_moon: datetime = ZERO_TIME
    next_new_moon: datetime = ZERO_TIME
    daily_data: List[AstronomicalDailyData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "AstronomicalInfo":
        """
        Decode an astronomy response body.

        Raises:
            DecodeError: If the body is malformed
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("astronomy response is not a JSON object")

        raw_days = payload.get("dailyData") or []
        if not isinstance(raw_days, list):
            raise DecodeError("astronomy 'dailyData' is not a JSON array")

        def instant(key: str) -> datetime:
            value = DateUtils.parse_optional_datetime(payload.get(key))
            return value if value is not None else ZERO_TIME

        return cls(
            latitude=require_float(payload, "lat"),
            longitude=require_float(payload, "lon"),
            timezone=payload.get("timeZone") or "",
            run=instant("run"),
            next_full_moon=instant("nextFullMoon"),
            next_new_moon=instant("nextNewMoon"),
            daily_data=[AstronomicalDailyData.from_dict(day) for day in raw_days],
        )

    def _today(self) -> date:
        tz = pytz.UTC
        if self.timezone:
            try:
                tz = DateUtils.parse_timezone(self.timezone)
            except ValueError:
                tz = pytz.UTC
        return datetime.now(tz).date()

    def daily_data_by_date(self, target: Union[DateLike, str]) -> Optional[AstronomicalDailyData]:
        """
        Select the daily record for a calendar date.

        Args:
            target: date, datetime (its own calendar date is used) or "YYYY-MM-DD"

        Returns:
            The matching record, or None if there is none or the date lies
            beyond the forecast horizon

        Raises:
            DecodeError: If a date string is invalid
        """
        day = DateUtils.to_date(target)
        if day > self._today() + timedelta(days=ASTRONOMY_HORIZON_DAYS):
            return None
        for record in self.daily_data:
            if record.date.date() == day:
                return record
        return None

    def event_by_date(self, name: Fieldname, target: Union[DateLike, str]) -> DateTime:
        """Return the DateTime view of an event on the given day."""
        record = self.daily_data_by_date(target)
        instant = record.event(name) if record is not None else None
        if instant is None:
            return DateTime.unavailable(name)
        return DateTime(Measurement.of(name, instant, self.run, Source.FORECAST))

    def _event_today(self, name: Fieldname) -> DateTime:
        return self.event_by_date(name, self._today())

    def moon_illumination_by_date(self, target: Union[DateLike, str]) -> Percentage:
        """Moon illumination in percent on the given day."""
        record = self.daily_data_by_date(target)
        if record is None or record.moon_illumination is None:
            return Percentage.unavailable(Fieldname.MOON_ILLUMINATION)
        return Percentage(Measurement.of(
            Fieldname.MOON_ILLUMINATION, record.moon_illumination, self.run, Source.FORECAST
        ))

    def moon_illumination(self) -> Percentage:
        return self.moon_illumination_by_date(self._today())

    def moon_illumination_by_time(self, target: DateLike) -> Percentage:
        return self.moon_illumination_by_date(target)

    def moon_illumination_by_date_string(self, target: str) -> Percentage:
        return self.moon_illumination_by_date(target)

    def sunrise(self) -> DateTime:
        """Sunrise today at the location."""
        return self._event_today(Fieldname.SUNRISE)

    def sunrise_by_time(self, target: DateLike) -> DateTime:
        """Sunrise on the calendar day of target."""
        return self.event_by_date(Fieldname.SUNRISE, target)

    def sunrise_by_date_string(self, target: str) -> DateTime:
        """
        Sunrise on the day given as "YYYY-MM-DD".

        Raises:
            DecodeError: If the date string is invalid
        """
        return self.event_by_date(Fieldname.SUNRISE, target)

    def sunset(self) -> DateTime:
        """Sunset today at the location."""
        return self._event_today(Fieldname.SUNSET)

    def sunset_by_time(self, target: DateLike) -> DateTime:
        """Sunset on the calendar day of target."""
        return self.event_by_date(Fieldname.SUNSET, target)

    def sunset_by_date_string(self, target: str) -> DateTime:
        """
        Sunset on the day given as "YYYY-MM-DD".

        Raises:
            DecodeError: If the date string is invalid
        """
        return self.event_by_date(Fieldname.SUNSET, target)

    def transit(self) -> DateTime:
        """Solar noon today."""
        return self._event_today(Fieldname.TRANSIT)

    def transit_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.TRANSIT, target)

    def transit_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.TRANSIT, target)

    def civil_dawn(self) -> DateTime:
        return self._event_today(Fieldname.CIVIL_DAWN)

    def civil_dawn_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.CIVIL_DAWN, target)

    def civil_dawn_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.CIVIL_DAWN, target)

    def civil_dusk(self) -> DateTime:
        return self._event_today(Fieldname.CIVIL_DUSK)

    def civil_dusk_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.CIVIL_DUSK, target)

    def civil_dusk_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.CIVIL_DUSK, target)

    def nautical_dawn(self) -> DateTime:
        return self._event_today(Fieldname.NAUTICAL_DAWN)

    def nautical_dawn_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.NAUTICAL_DAWN, target)

    def nautical_dawn_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.NAUTICAL_DAWN, target)

    def nautical_dusk(self) -> DateTime:
        return self._event_today(Fieldname.NAUTICAL_DUSK)

    def nautical_dusk_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.NAUTICAL_DUSK, target)

    def nautical_dusk_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.NAUTICAL_DUSK, target)

    def astronomical_dawn(self) -> DateTime:
        return self._event_today(Fieldname.ASTRONOMICAL_DAWN)

    def astronomical_dawn_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.ASTRONOMICAL_DAWN, target)

    def astronomical_dawn_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.ASTRONOMICAL_DAWN, target)

    def astronomical_dusk(self) -> DateTime:
        return self._event_today(Fieldname.ASTRONOMICAL_DUSK)

    def astronomical_dusk_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.ASTRONOMICAL_DUSK, target)

    def astronomical_dusk_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.ASTRONOMICAL_DUSK, target)

    def moonrise(self) -> DateTime:
        return self._event_today(Fieldname.MOONRISE)

    def moonrise_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.MOONRISE, target)

    def moonrise_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.MOONRISE, target)

    def moonset(self) -> DateTime:
        return self._event_today(Fieldname.MOONSET)

    def moonset_by_time(self, target: DateLike) -> DateTime:
        return self.event_by_date(Fieldname.MOONSET, target)

    def moonset_by_date_string(self, target: str) -> DateTime:
        return self.event_by_date(Fieldname.MOONSET, target)
