"""Tests for the date-option generator."""

from datetime import date

import pytest

from django_trips.date_options import DateWindow, format_date_range, generate_date_options
from django_trips.exceptions import ConfigurationError


class TestGenerateDateOptions:
    """Tests for generate_date_options."""

    def test_june_through_august(self):
        options = generate_date_options(2026, date(2026, 6, 1), date(2026, 8, 31))

        assert options[0] == DateWindow(date(2026, 6, 3), date(2026, 6, 7), "Jun 3-7")
        assert options[-1].start_date == date(2026, 8, 26)
        assert options[-1].end_date == date(2026, 8, 30)
        assert len(options) == 13

    def test_every_window_is_wednesday_to_sunday(self):
        options = generate_date_options(2026, date(2026, 6, 1), date(2026, 8, 31))

        for option in options:
            assert option.start_date.weekday() == 2
            assert option.end_date.weekday() == 6
            assert (option.end_date - option.start_date).days == 4
            assert option.end_date <= date(2026, 8, 31)

    def test_one_window_per_week(self):
        options = generate_date_options(2026, date(2026, 6, 1), date(2026, 8, 31))

        gaps = {(b.start_date - a.start_date).days for a, b in zip(options, options[1:])}
        assert gaps == {7}

    def test_default_season(self):
        options = generate_date_options(2026)

        assert options[0].start_date == date(2026, 6, 3)
        # Aug 12-16 would end after Aug 14
        assert options[-1] == DateWindow(date(2026, 8, 5), date(2026, 8, 9), "Aug 5-9")

    def test_season_starting_on_wednesday(self):
        options = generate_date_options(2025, date(2025, 6, 4), date(2025, 6, 30))

        assert options[0].start_date == date(2025, 6, 4)

    def test_window_ending_on_season_end_is_kept(self):
        options = generate_date_options(2026, date(2026, 6, 1), date(2026, 6, 7))

        assert options == [DateWindow(date(2026, 6, 3), date(2026, 6, 7), "Jun 3-7")]

    def test_season_too_short(self):
        assert generate_date_options(2026, date(2026, 6, 4), date(2026, 6, 9)) == []

    def test_month_crossing_label(self):
        options = generate_date_options(2026, date(2026, 7, 27), date(2026, 8, 5))

        assert options[0].label == "Jul 29-Aug 2"

    def test_idempotent(self):
        assert generate_date_options(2026) == generate_date_options(2026)

    def test_configured_season(self, settings):
        settings.TRIPS_SEASON_START = "07-01"
        settings.TRIPS_SEASON_END = "07-31"

        options = generate_date_options(2026)

        assert [o.label for o in options] == ["Jul 1-5", "Jul 8-12", "Jul 15-19", "Jul 22-26"]

    def test_malformed_season(self, settings):
        settings.TRIPS_SEASON_START = "June 1"

        with pytest.raises(ConfigurationError):
            generate_date_options(2026)


class TestFormatDateRange:
    def test_same_month(self):
        assert format_date_range(date(2026, 6, 3), date(2026, 6, 7)) == "Jun 3-7"

    def test_crossing_months(self):
        assert format_date_range(date(2026, 7, 29), date(2026, 8, 2)) == "Jul 29-Aug 2"
