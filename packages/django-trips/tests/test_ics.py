"""Tests for the permit reminder calendar attachment."""

from django_trips.ics import (
    build_permit_reminder_ics,
    escape_text,
    ics_filename,
    permit_reminder_attachment,
)
from django_trips.models import Destination

from .conftest import la


def site(**kwargs):
    kwargs.setdefault("name", "East Lake")
    return Destination(**kwargs)


class TestBuildPermitReminderIcs:
    """Tests for build_permit_reminder_ics."""

    def test_event_ends_when_permits_open(self):
        ics = build_permit_reminder_ics(site(), la(2026, 1, 16, 7, 0), now=la(2026, 1, 15, 7, 0))

        # 07:00 PST is 15:00 UTC
        assert "DTSTART:20260116T144500Z" in ics
        assert "DTEND:20260116T150000Z" in ics
        assert "DTSTAMP:20260115T150000Z" in ics

    def test_crlf_line_endings(self):
        ics = build_permit_reminder_ics(site(), la(2026, 1, 16, 7, 0))

        assert ics.startswith("BEGIN:VCALENDAR\r\n")
        assert ics.endswith("END:VCALENDAR\r\n")
        assert "\n" not in ics.replace("\r\n", "")

    def test_two_alarms(self):
        ics = build_permit_reminder_ics(site(), la(2026, 1, 16, 7, 0))

        assert ics.count("BEGIN:VALARM") == 2
        assert "TRIGGER:PT0M" in ics
        assert "TRIGGER:PT10M" in ics

    def test_summary_and_url(self):
        ics = build_permit_reminder_ics(
            site(permit_url="https://www.recreation.gov/permits/445856"),
            la(2026, 1, 16, 7, 0),
        )

        assert "SUMMARY:Permits Open - East Lake" in ics
        assert "URL:https://www.recreation.gov/permits/445856" in ics

    def test_default_url(self):
        ics = build_permit_reminder_ics(site(), la(2026, 1, 16, 7, 0))

        assert "URL:https://www.recreation.gov" in ics

    def test_uid_is_stable(self):
        destination = site()
        opens = la(2026, 1, 16, 7, 0)

        first = build_permit_reminder_ics(destination, opens, now=la(2026, 1, 1))
        second = build_permit_reminder_ics(destination, opens, now=la(2026, 1, 2))

        uid = [line for line in first.split("\r\n") if line.startswith("UID:")][0]
        assert uid in second


class TestEscaping:
    def test_escape_text(self):
        assert escape_text("a,b;c\\d\ne") == "a\\,b\\;c\\\\d\\ne"

    def test_name_with_comma_is_escaped(self):
        ics = build_permit_reminder_ics(site(name="Lakes Basin, North"), la(2026, 1, 16, 7, 0))

        assert "SUMMARY:Permits Open - Lakes Basin\\, North" in ics


class TestFilename:
    def test_slug(self):
        assert ics_filename("East Lake") == "permit-reminder-east-lake.ics"
        assert ics_filename("  Mt. Whitney (Main) ") == "permit-reminder-mt-whitney-main.ics"

    def test_empty_slug(self):
        assert ics_filename("!!!") == "permit-reminder-destination.ics"

    def test_attachment(self, make_reminder, rolling_destination):
        reminder = make_reminder(rolling_destination, la(2026, 1, 16, 7, 0))

        attachment = permit_reminder_attachment(reminder)

        assert attachment.filename == "permit-reminder-east-lake.ics"
        assert attachment.mimetype == "text/calendar"
        assert attachment.content.startswith(b"BEGIN:VCALENDAR")
