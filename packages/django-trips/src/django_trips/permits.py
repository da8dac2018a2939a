"""Permit-open calculator.

Given a destination's permit policy and a trip's confirmed start date,
computes the instant the permit window opens and the instant the reminder
should go out.

Policies:
- rolling: opens permit_advance_days calendar days before the trip start
- fixed_date: opens on the same month-day every year
- lottery: applications open on the same month-day every year

For fixed_date and lottery the month-day is first placed in the trip's year.
If that lands after the trip start, the window that applies to this trip
opened the year before. A trip starting on the month-day itself uses the
trip's year.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from . import conf
from .civil_time import local_instant, parse_clock, parse_month_day, shift_calendar_days
from .exceptions import InvalidPolicyParameter, MissingPolicyParameter, UnknownPolicyKind
from .models import PermitKind

logger = logging.getLogger(__name__)

# Defaults that may be applied while resolving a policy
DEFAULT_OPEN_TIME = "open_time"
DEFAULT_ADVANCE_DAYS = "advance_days"


@dataclass(frozen=True)
class PermitPolicy:
    """A destination's permit policy with defaults resolved.

    Attributes:
        kind: PermitKind value
        open_time: Local wall-clock time permits open
        advance_days: Rolling permits only
        month_day: (month, day) for fixed_date and lottery permits
        defaults_applied: Names of defaults filled in for missing values
    """

    kind: str
    open_time: time
    advance_days: int | None = None
    month_day: tuple[int, int] | None = None
    defaults_applied: tuple[str, ...] = ()

    @classmethod
    def from_destination(cls, destination) -> "PermitPolicy":
        """Resolve the policy stored on a Destination.

        Raises:
            UnknownPolicyKind: If permit_kind is blank or not recognised
            MissingPolicyParameter: If the kind's required month-day is blank
            InvalidPolicyParameter: If a stored value cannot be parsed
        """
        kind = destination.permit_kind
        if kind not in PermitKind.values:
            raise UnknownPolicyKind(destination, kind)

        defaults = []
        open_time = _resolve_open_time(destination)
        if open_time is None:
            open_time = conf.get_default_open_time()
            defaults.append(DEFAULT_OPEN_TIME)

        if kind == PermitKind.ROLLING:
            advance_days = destination.permit_advance_days
            if advance_days is None:
                advance_days = conf.get_default_advance_days()
                defaults.append(DEFAULT_ADVANCE_DAYS)
                logger.warning(
                    "Destination %s has rolling permits but no permit_advance_days set; "
                    "assuming %d days",
                    destination.name,
                    advance_days,
                )
            return cls(
                kind=kind,
                open_time=open_time,
                advance_days=advance_days,
                defaults_applied=tuple(defaults),
            )

        field = "permit_fixed_open_date" if kind == PermitKind.FIXED_DATE else "permit_lottery_open"
        raw = getattr(destination, field)
        if not raw:
            raise MissingPolicyParameter(destination, field)
        try:
            month_day = parse_month_day(raw)
        except ValueError:
            raise InvalidPolicyParameter(destination, field, raw)

        return cls(
            kind=kind,
            open_time=open_time,
            month_day=month_day,
            defaults_applied=tuple(defaults),
        )

    def open_date(self, trip_start_date: date) -> date:
        """Civil calendar date the permit window opens for a trip."""
        if self.kind == PermitKind.ROLLING:
            return trip_start_date - timedelta(days=self.advance_days)
        month, day = self.month_day
        return _month_day_in_year(resolve_open_year(month, day, trip_start_date), month, day)

    def open_instant(self, trip_start_date: date) -> datetime:
        """Absolute instant (UTC) the permit window opens for a trip."""
        return local_instant(self.open_date(trip_start_date), self.open_time)


def _resolve_open_time(destination) -> time | None:
    value = destination.permit_open_time
    if value in (None, ""):
        return None
    if isinstance(value, time):
        return value
    try:
        return parse_clock(value)
    except ValueError:
        raise InvalidPolicyParameter(destination, "permit_open_time", value)


def _month_day_in_year(year: int, month: int, day: int) -> date:
    # Feb 29 openings fall back to Feb 28 in common years
    if month == 2 and day == 29:
        try:
            return date(year, month, day)
        except ValueError:
            return date(year, 2, 28)
    return date(year, month, day)


def resolve_open_year(month: int, day: int, trip_start_date: date) -> int:
    """Year in which a recurring month-day window opens for a trip.

    The candidate is the month-day in the trip's year. If the candidate is
    after the trip start, the applicable opening was the previous year's.
    """
    trip_year = trip_start_date.year
    candidate = _month_day_in_year(trip_year, month, day)
    if candidate > trip_start_date:
        return trip_year - 1
    return trip_year


def compute_permit_open(destination, trip_start_date: date) -> datetime:
    """Compute when permits open for a destination and trip start date.

    Args:
        destination: Destination with a permit policy
        trip_start_date: Confirmed trip start (calendar date)

    Returns:
        Aware datetime in UTC

    Raises:
        PolicyError: If the destination's policy cannot be evaluated
    """
    return PermitPolicy.from_destination(destination).open_instant(trip_start_date)


def compute_reminder_instant(permit_open_at: datetime) -> datetime:
    """Reminder goes out one civil calendar day before permits open."""
    return shift_calendar_days(permit_open_at, -1)
