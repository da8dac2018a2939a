"""Pytest configuration for django-trips tests."""

from datetime import date, datetime, time
from zoneinfo import ZoneInfo

import pytest

from django_trips.conf import EmailConfig
from django_trips.providers.base import BaseEmailProvider, SendResult

LA = ZoneInfo("America/Los_Angeles")


def la(*args) -> datetime:
    """Aware datetime in Los Angeles local time."""
    return datetime(*args, tzinfo=LA)


class RecordingProvider(BaseEmailProvider):
    """Email provider that records sends and can be told to fail."""

    provider_name = "recording"

    def __init__(self, config=None, fail_for=()):
        super().__init__(config)
        self.sent = []
        self.fail_for = set(fail_for)

    def send(self, recipients, subject, body_text, body_html=None, attachments=None):
        if any(name in subject for name in self.fail_for):
            return SendResult.fail(provider=self.provider_name, error="Mailbox unavailable")
        self.sent.append({
            "recipients": list(recipients),
            "subject": subject,
            "body_text": body_text,
            "body_html": body_html,
            "attachments": list(attachments or []),
        })
        return SendResult.ok(provider=self.provider_name, message_id=f"rec-{len(self.sent)}")


@pytest.fixture
def email_config():
    return EmailConfig(provider="console", from_email="trips@example.com", from_name="Trip Planner")


@pytest.fixture
def test_mode_config():
    return EmailConfig(
        provider="console",
        from_email="trips@example.com",
        test_mode=True,
        test_recipient="organizer@example.com",
    )


@pytest.fixture
def provider(email_config):
    return RecordingProvider(email_config)


@pytest.fixture
def members(db):
    from django_trips.models import Member

    return [
        Member.objects.create(name="Alice", email="alice@example.com"),
        Member.objects.create(name="Bob", email="bob@example.com"),
        Member.objects.create(name="Carol", email="carol@example.com", is_active=False),
    ]


@pytest.fixture
def trip(db):
    """Trip locked to July 15-19, 2026."""
    from django_trips.models import Trip

    return Trip.objects.create(
        year=2026,
        status=Trip.Status.DATES_LOCKED,
        final_start_date=date(2026, 7, 15),
        final_end_date=date(2026, 7, 19),
    )


@pytest.fixture
def rolling_destination(db):
    from django_trips.models import Destination, PermitKind

    return Destination.objects.create(
        name="East Lake",
        region="Hoover Wilderness",
        permit_url="https://www.recreation.gov/permits/445856",
        permit_kind=PermitKind.ROLLING,
        permit_advance_days=180,
        permit_open_time=time(7, 0),
        permit_cost="8.00",
        permit_notes="Bear canister required.",
    )


@pytest.fixture
def fixed_destination(db):
    from django_trips.models import Destination, PermitKind

    return Destination.objects.create(
        name="Desolation",
        permit_kind=PermitKind.FIXED_DATE,
        permit_fixed_open_date="02-15",
        permit_open_time=time(7, 0),
    )


@pytest.fixture
def lottery_destination(db):
    from django_trips.models import Destination, PermitKind

    return Destination.objects.create(
        name="Enchantments",
        permit_kind=PermitKind.LOTTERY,
        permit_lottery_open="02-15",
        permit_lottery_close="03-01",
        permit_lottery_results="03-15",
    )


@pytest.fixture
def unscheduled_destination(db):
    from django_trips.models import Destination

    return Destination.objects.create(name="Local Crag")


@pytest.fixture
def make_reminder(db, trip):
    """Factory for stored reminders with explicit instants."""
    from django_trips.models import PermitReminder, ReminderStatus

    def _make(destination, permit_open_at, remind_at=None, status=ReminderStatus.PENDING, **kwargs):
        from django_trips.permits import compute_reminder_instant

        return PermitReminder.objects.create(
            trip=kwargs.pop("trip", trip),
            destination=destination,
            target_trip_date=date(2026, 7, 15),
            permit_open_at=permit_open_at,
            remind_at=remind_at or compute_reminder_instant(permit_open_at),
            status=status,
            **kwargs,
        )

    return _make
