"""Calendar arithmetic in the civil timezone.

Permit windows are published as wall-clock times ("7:00 AM Pacific") on
calendar dates. All day arithmetic therefore happens on local calendar dates,
never on raw 24-hour offsets: one calendar day before 07:00 PDT on the day
after a DST change is 07:00 PST, which is 23 or 25 hours earlier.

Instants returned from this module are timezone-aware and normalized to UTC.
"""

import re
from datetime import date, datetime, time, timedelta
from datetime import timezone as dt_timezone
from zoneinfo import ZoneInfo

from django.utils import timezone

from . import conf

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")
_MONTH_DAY_RE = re.compile(r"^\s*(\d{1,2})-(\d{1,2})\s*$")


def parse_clock(value: str) -> time:
    """Parse "HH:MM" or "HH:MM:SS" into a time.

    Raises:
        ValueError: If the value is not a valid wall-clock time
    """
    match = _CLOCK_RE.match(value or "")
    if not match:
        raise ValueError(f"Invalid time of day: {value!r}")
    hour, minute, second = match.groups()
    return time(int(hour), int(minute), int(second or 0))


def parse_month_day(value: str) -> tuple[int, int]:
    """Parse a recurring "MM-DD" date into (month, day).

    Feb 29 is accepted; callers resolve it against a concrete year.

    Raises:
        ValueError: If the value is not a valid month-day
    """
    match = _MONTH_DAY_RE.match(value or "")
    if not match:
        raise ValueError(f"Invalid month-day: {value!r}")
    month, day = int(match.group(1)), int(match.group(2))
    # 2000 is a leap year, so every real month-day validates
    date(2000, month, day)
    return month, day


def get_civil_timezone() -> ZoneInfo:
    return conf.get_civil_timezone()


def local_instant(day: date, time_of_day: time, tz: ZoneInfo | None = None) -> datetime:
    """Assemble a wall-clock date and time in the civil timezone.

    Args:
        day: Calendar date in the civil timezone
        time_of_day: Wall-clock time on that date
        tz: Override the configured civil timezone

    Returns:
        Aware datetime in UTC
    """
    tz = tz or get_civil_timezone()
    wall_clock = datetime.combine(day, time_of_day.replace(tzinfo=None), tzinfo=tz)
    wall_clock = wall_clock.replace(fold=time_of_day.fold)
    return wall_clock.astimezone(dt_timezone.utc)


def to_local(instant: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Convert an aware instant to the civil timezone."""
    if timezone.is_naive(instant):
        raise ValueError("Instant must be timezone-aware")
    return instant.astimezone(tz or get_civil_timezone())


def local_date(instant: datetime, tz: ZoneInfo | None = None) -> date:
    """Return the civil calendar date an instant falls on."""
    return to_local(instant, tz).date()


def shift_calendar_days(instant: datetime, days: int, tz: ZoneInfo | None = None) -> datetime:
    """Move an instant by whole calendar days, keeping its wall-clock time.

    Args:
        instant: Aware datetime
        days: Number of calendar days (negative moves backwards)
        tz: Override the configured civil timezone

    Returns:
        Aware datetime in UTC on the shifted civil date
    """
    tz = tz or get_civil_timezone()
    local = to_local(instant, tz)
    return local_instant(local.date() + timedelta(days=days), local.time(), tz)


def calendar_days_between(earlier: datetime, later: datetime, tz: ZoneInfo | None = None) -> int:
    """Count civil calendar days from one instant to another."""
    return (local_date(later, tz) - local_date(earlier, tz)).days


def format_local(instant: datetime, tz: ZoneInfo | None = None) -> str:
    """Format an instant for display, e.g. "Fri, Jan 16, 2026, 7:00 AM PST"."""
    local = to_local(instant, tz)
    hour = local.hour % 12 or 12
    return (
        f"{local:%a}, {local:%b} {local.day}, {local.year}, "
        f"{hour}:{local:%M} {local:%p} {local.tzname()}"
    )
