"""Tests for civil-time calendar arithmetic."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from django_trips.civil_time import (
    calendar_days_between,
    format_local,
    local_date,
    local_instant,
    parse_clock,
    parse_month_day,
    shift_calendar_days,
    to_local,
)

from .conftest import LA, la


class TestParsing:
    """Tests for clock and month-day parsing."""

    def test_parse_clock(self):
        assert parse_clock("07:00") == time(7, 0)
        assert parse_clock("6:30") == time(6, 30)
        assert parse_clock("23:59:30") == time(23, 59, 30)

    @pytest.mark.parametrize("value", ["", "7am", "25:00", "07:60", None])
    def test_parse_clock_rejects_garbage(self, value):
        with pytest.raises(ValueError):
            parse_clock(value)

    def test_parse_month_day(self):
        assert parse_month_day("02-15") == (2, 15)
        assert parse_month_day("8-1") == (8, 1)

    def test_parse_month_day_accepts_leap_day(self):
        assert parse_month_day("02-29") == (2, 29)

    @pytest.mark.parametrize("value", ["", "13-01", "02-30", "0215", "Feb 15"])
    def test_parse_month_day_rejects_garbage(self, value):
        with pytest.raises(ValueError):
            parse_month_day(value)


class TestLocalInstant:
    """Tests for assembling wall-clock instants."""

    def test_winter_instant_is_utc_minus_8(self):
        instant = local_instant(date(2026, 1, 16), time(7, 0))
        assert instant == datetime(2026, 1, 16, 15, 0, tzinfo=timezone.utc)
        assert instant.tzinfo == timezone.utc

    def test_summer_instant_is_utc_minus_7(self):
        instant = local_instant(date(2026, 7, 15), time(7, 0))
        assert instant == datetime(2026, 7, 15, 14, 0, tzinfo=timezone.utc)

    def test_explicit_timezone_override(self):
        from zoneinfo import ZoneInfo

        instant = local_instant(date(2026, 1, 16), time(7, 0), tz=ZoneInfo("America/New_York"))
        assert instant == datetime(2026, 1, 16, 12, 0, tzinfo=timezone.utc)

    def test_to_local_rejects_naive(self):
        with pytest.raises(ValueError):
            to_local(datetime(2026, 1, 16, 7, 0))

    def test_local_date_crosses_utc_midnight(self):
        # 05:00 UTC on Jan 17 is still Jan 16 in Los Angeles
        instant = datetime(2026, 1, 17, 5, 0, tzinfo=timezone.utc)
        assert local_date(instant) == date(2026, 1, 16)


class TestShiftCalendarDays:
    """Calendar-day shifts keep the wall clock across DST changes."""

    def test_plain_shift_is_24_hours(self):
        instant = local_instant(date(2026, 1, 16), time(7, 0))
        shifted = shift_calendar_days(instant, -1)
        assert instant - shifted == timedelta(hours=24)

    def test_shift_over_spring_forward_is_23_hours(self):
        # DST starts 2026-03-08 in Los Angeles
        instant = local_instant(date(2026, 3, 8), time(7, 0))
        shifted = shift_calendar_days(instant, -1)

        assert to_local(shifted) == la(2026, 3, 7, 7, 0)
        assert instant - shifted == timedelta(hours=23)

    def test_shift_over_fall_back_is_25_hours(self):
        # DST ends 2026-11-01 in Los Angeles
        instant = local_instant(date(2026, 11, 1), time(7, 0))
        shifted = shift_calendar_days(instant, -1)

        assert to_local(shifted) == la(2026, 10, 31, 7, 0)
        assert instant - shifted == timedelta(hours=25)

    def test_forward_shift(self):
        instant = local_instant(date(2026, 3, 7), time(7, 0))
        shifted = shift_calendar_days(instant, 1)
        assert to_local(shifted).date() == date(2026, 3, 8)
        assert to_local(shifted).time() == time(7, 0)


class TestCalendarDaysBetween:
    def test_counts_local_dates_not_hours(self):
        earlier = la(2026, 1, 15, 23, 30)
        later = la(2026, 1, 16, 0, 30)
        assert calendar_days_between(earlier, later) == 1

    def test_same_day_is_zero(self):
        assert calendar_days_between(la(2026, 1, 16, 1, 0), la(2026, 1, 16, 22, 0)) == 0


class TestFormatLocal:
    def test_winter_format(self):
        instant = local_instant(date(2026, 1, 16), time(7, 0))
        assert format_local(instant) == "Fri, Jan 16, 2026, 7:00 AM PST"

    def test_summer_afternoon_format(self):
        instant = local_instant(date(2026, 7, 15), time(13, 5))
        assert format_local(instant) == "Wed, Jul 15, 2026, 1:05 PM PDT"

    def test_accepts_any_aware_zone(self):
        instant = datetime(2026, 1, 16, 15, 0, tzinfo=timezone.utc)
        assert format_local(instant, tz=LA).endswith("7:00 AM PST")
