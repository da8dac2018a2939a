"""Candidate trip windows for a season.

Trips always run Wednesday through Sunday (5 days). Within a season the
candidates start on every Wednesday from the first one on or after the season
start, and the last candidate must end on or before the season end.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from dateutil.rrule import WE, WEEKLY, rrule

from . import conf

TRIP_LENGTH_DAYS = 5


@dataclass(frozen=True)
class DateWindow:
    """One candidate trip window."""

    start_date: date
    end_date: date
    label: str


def format_date_range(start: date, end: date) -> str:
    """Format a window as "Jun 3-7" or "Jul 29-Aug 2"."""
    if start.month == end.month:
        return f"{start:%b} {start.day}-{end.day}"
    return f"{start:%b} {start.day}-{end:%b} {end.day}"


def generate_date_options(
    year: int,
    season_start: date | None = None,
    season_end: date | None = None,
) -> list[DateWindow]:
    """Enumerate Wednesday-Sunday windows inside a season, one per week.

    Args:
        year: Season year
        season_start: First allowed trip date (defaults to TRIPS_SEASON_START)
        season_end: Last allowed trip date (defaults to TRIPS_SEASON_END)

    Returns:
        Chronological list of DateWindow
    """
    if season_start is None or season_end is None:
        default_start, default_end = conf.get_season_bounds(year)
        season_start = season_start or default_start
        season_end = season_end or default_end

    last_start = season_end - timedelta(days=TRIP_LENGTH_DAYS - 1)
    if last_start < season_start:
        return []

    wednesdays = rrule(
        WEEKLY,
        byweekday=WE,
        dtstart=datetime.combine(season_start, datetime.min.time()),
        until=datetime.combine(last_start, datetime.min.time()),
    )

    options = []
    for occurrence in wednesdays:
        start = occurrence.date()
        end = start + timedelta(days=TRIP_LENGTH_DAYS - 1)
        options.append(DateWindow(start_date=start, end_date=end, label=format_date_range(start, end)))
    return options
