"""
Timezone conversion utilities for recurring weekly meetings.

A meeting is stored as weekday + wall-clock time + the zone that time is
meant in. To show it in another zone we anchor it to a concrete calendar
date (the next occurrence of the weekday), so that DST rules for that
specific date apply in both zones.
"""

import re
from datetime import date, datetime, time, timedelta

import pytz

from .constants import WEEKDAYS, WEEKDAY_LABELS


_WALL_TIME_RE = re.compile(r"^\s*([0-9]{1,2}):([0-9]{2})\s*$")


# Exceptions
class TimeFormattingError(Exception):
    """Base exception for meeting time formatting errors."""
    pass


class InvalidInputError(TimeFormattingError):
    """Malformed wall-clock time or unknown weekday."""
    pass


class UnknownTimezoneError(TimeFormattingError):
    """An IANA timezone identifier could not be resolved."""

    def __init__(self, timezone: str):
        super().__init__(f"Unknown timezone: {timezone!r}")
        self.timezone = timezone


class ZoneResolver:
    """
    Source of timezone rules.

    Subclasses answer two questions for a named zone: what UTC offset
    applies to a local wall time, and what local time a UTC instant maps to.
    """

    def utc_offset(self, tz_name: str, local_dt: datetime) -> timedelta:
        raise NotImplementedError

    def to_local(self, tz_name: str, utc_dt: datetime) -> datetime:
        raise NotImplementedError


class PytzResolver(ZoneResolver):
    """Zone rules from the IANA database bundled with pytz."""

    def _zone(self, tz_name: str):
        if not isinstance(tz_name, str) or not tz_name.strip():
            raise UnknownTimezoneError(tz_name)
        try:
            return pytz.timezone(tz_name)
        except pytz.UnknownTimeZoneError:
            raise UnknownTimezoneError(tz_name) from None

    def utc_offset(self, tz_name: str, local_dt: datetime) -> timedelta:
        # Wall times skipped by a spring-forward gap resolve with the
        # pre-transition offset (pytz's is_dst=False default).
        return self._zone(tz_name).localize(local_dt).utcoffset()

    def to_local(self, tz_name: str, utc_dt: datetime) -> datetime:
        return utc_dt.astimezone(self._zone(tz_name))


default_resolver = PytzResolver()


def weekday_index(weekday: str) -> int:
    """
    Get the Sunday-first index (0-6) of a weekday.

    Accepts the stored three-letter code ("sat") or the full name
    ("Saturday"), case-insensitively.
    """
    if isinstance(weekday, str):
        key = weekday.strip().lower()
        if key in WEEKDAYS:
            return WEEKDAYS.index(key)
        for code, label in WEEKDAY_LABELS.items():
            if label.lower() == key:
                return WEEKDAYS.index(code)
    raise InvalidInputError(f"Unknown weekday: {weekday!r}")


def parse_wall_time(value: str) -> tuple:
    """
    Parse an "HH:MM" wall-clock string.

    Returns:
        Tuple of (hour, minute)

    Raises:
        InvalidInputError: if the string is not a valid 24-hour time
    """
    match = _WALL_TIME_RE.match(value) if isinstance(value, str) else None
    if not match:
        raise InvalidInputError(f"Invalid time (expected HH:MM): {value!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidInputError(f"Time out of range: {value!r}")
    return hour, minute


def reference_date(weekday: str, now: datetime | date | None = None) -> date:
    """
    Get the date of the next occurrence of a weekday.

    Always strictly in the future: when today already is that weekday,
    the meeting a week from today is used.

    Args:
        weekday: Weekday code or name (e.g., "sat")
        now: Current date reference (defaults to the system clock)

    Returns:
        Calendar date 1-7 days after `now`
    """
    day_index = weekday_index(weekday)
    if now is None:
        now = datetime.now()
    today = now.date() if isinstance(now, datetime) else now

    # date.weekday() is Monday-first; shift to Sunday-first
    today_index = (today.weekday() + 1) % 7
    diff = (day_index - today_index + 7) % 7 or 7
    return today + timedelta(days=diff)


def format_clock_time(dt: datetime) -> str:
    """Format a datetime as "3:00 PM" (no leading zero, no seconds)."""
    return dt.strftime("%I:%M %p").lstrip("0")


def meeting_utc_instant(
    start_time_local: str,
    source_tz: str,
    weekday: str,
    now: datetime | date | None = None,
    resolver: ZoneResolver | None = None,
) -> datetime:
    """
    Resolve the UTC instant of the next occurrence of a weekly meeting.

    The source zone's offset is looked up for the reference date, not for
    today, so a DST change between now and the meeting is honoured.
    """
    resolver = resolver or default_resolver
    hour, minute = parse_wall_time(start_time_local)
    local_dt = datetime.combine(reference_date(weekday, now), time(hour, minute))

    offset = resolver.utc_offset(source_tz, local_dt)
    return (local_dt - offset).replace(tzinfo=pytz.UTC)


def format_time_in_zone(
    start_time_local: str,
    source_tz: str,
    target_tz: str,
    weekday: str,
    now: datetime | date | None = None,
    resolver: ZoneResolver | None = None,
) -> str:
    """
    Convert a meeting's local start time to a display time in another zone.

    Args:
        start_time_local: Wall-clock time in the source zone (e.g., "10:00")
        source_tz: Zone the start time is defined in (e.g., "Asia/Jerusalem")
        target_tz: Zone to display the time in (e.g., "America/New_York")
        weekday: Weekday the meeting recurs on (e.g., "sat")
        now: Current date reference (defaults to the system clock)
        resolver: Timezone rules source (defaults to pytz)

    Returns:
        Formatted string like "3:00 AM"

    Raises:
        InvalidInputError: malformed time or weekday
        UnknownTimezoneError: source or target zone cannot be resolved
    """
    resolver = resolver or default_resolver
    utc_dt = meeting_utc_instant(start_time_local, source_tz, weekday, now, resolver)
    return format_clock_time(resolver.to_local(target_tz, utc_dt))
