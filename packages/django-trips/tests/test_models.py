"""Tests for django-trips models."""

from datetime import date

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from django_trips.models import Destination, PermitKind, PermitReminder, ReminderLog, Trip

from .conftest import la


class TestDestinationClean:
    """Tests for permit policy validation."""

    def test_valid_rolling(self):
        Destination(name="A", permit_kind=PermitKind.ROLLING, permit_advance_days=180).clean()

    def test_valid_lottery_with_informational_dates(self):
        Destination(
            name="A",
            permit_kind=PermitKind.LOTTERY,
            permit_lottery_open="02-15",
            permit_lottery_close="03-01",
            permit_lottery_results="03-15",
        ).clean()

    def test_no_policy_is_valid(self):
        Destination(name="A").clean()

    def test_fixed_date_requires_month_day(self):
        with pytest.raises(ValidationError) as exc_info:
            Destination(name="A", permit_kind=PermitKind.FIXED_DATE).clean()

        assert "permit_fixed_open_date" in exc_info.value.message_dict

    def test_lottery_requires_open(self):
        with pytest.raises(ValidationError) as exc_info:
            Destination(name="A", permit_kind=PermitKind.LOTTERY).clean()

        assert "permit_lottery_open" in exc_info.value.message_dict

    def test_advance_days_only_for_rolling(self):
        with pytest.raises(ValidationError) as exc_info:
            Destination(
                name="A",
                permit_kind=PermitKind.FIXED_DATE,
                permit_fixed_open_date="02-15",
                permit_advance_days=30,
            ).clean()

        assert "permit_advance_days" in exc_info.value.message_dict

    def test_mismatched_month_day(self):
        with pytest.raises(ValidationError) as exc_info:
            Destination(name="A", permit_kind=PermitKind.ROLLING, permit_fixed_open_date="02-15").clean()

        assert "permit_fixed_open_date" in exc_info.value.message_dict

    def test_malformed_month_day(self):
        with pytest.raises(ValidationError) as exc_info:
            Destination(name="A", permit_kind=PermitKind.LOTTERY, permit_lottery_open="Feb 15").clean()

        assert "permit_lottery_open" in exc_info.value.message_dict

    def test_has_permit_policy(self):
        assert Destination(name="A", permit_kind=PermitKind.ROLLING).has_permit_policy is True
        assert Destination(name="A").has_permit_policy is False


@pytest.mark.django_db
class TestTrip:
    def test_end_before_start_rejected(self):
        with pytest.raises(IntegrityError):
            Trip.objects.create(year=2026, final_start_date=date(2026, 7, 19), final_end_date=date(2026, 7, 15))

    def test_year_is_unique(self):
        Trip.objects.create(year=2026)

        with pytest.raises(IntegrityError):
            Trip.objects.create(year=2026)

    def test_is_finalized(self, trip):
        assert trip.is_finalized is True
        assert Trip(year=2030).is_finalized is False


@pytest.mark.django_db
class TestPermitReminder:
    """Tests for PermitReminder constraints and queryset."""

    def test_remind_must_precede_open(self, trip, rolling_destination):
        opens = la(2026, 1, 16, 7, 0)

        with pytest.raises(IntegrityError):
            PermitReminder.objects.create(
                trip=trip,
                destination=rolling_destination,
                target_trip_date=date(2026, 7, 15),
                permit_open_at=opens,
                remind_at=opens,
            )

    def test_unique_per_trip_and_destination(self, make_reminder, rolling_destination):
        make_reminder(rolling_destination, la(2026, 1, 16, 7, 0))

        with pytest.raises(IntegrityError):
            make_reminder(rolling_destination, la(2026, 1, 17, 7, 0))

    def test_str(self, make_reminder, rolling_destination):
        reminder = make_reminder(rolling_destination, la(2026, 1, 16, 7, 0))

        assert str(reminder) == "East Lake permits for 2026-07-15"
        assert reminder.is_pending is True

    def test_queryset_chaining(self, trip, make_reminder, rolling_destination):
        reminder = make_reminder(rolling_destination, la(2026, 1, 16, 7, 0))

        assert list(PermitReminder.objects.for_trip(trip).due(la(2026, 1, 15, 7, 0))) == [reminder]
        assert list(PermitReminder.objects.for_trip(trip).due(la(2026, 1, 15, 6, 59))) == []


@pytest.mark.django_db
class TestReminderLog:
    def test_defaults(self):
        log = ReminderLog.objects.create(
            reminder_type=ReminderLog.ReminderType.PERMIT_OPENING,
            reference_id="abc",
            recipient_count=3,
            email_subject="Permits for East Lake open TOMORROW!",
        )

        assert log.sent_at is not None
        assert str(log) == "permit_opening abc (3 recipients)"
