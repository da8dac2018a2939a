"""Selectors for permit reminders.

Read-only queries. Nothing here changes reminder status.
"""

from datetime import datetime

from django.utils import timezone

from .models import Member, PermitReminder


def _with_related(qs):
    return qs.select_related("destination", "trip").order_by("remind_at", "created_at")


def get_due_reminders(now: datetime | None = None) -> list[PermitReminder]:
    """Pending reminders whose send instant has passed, earliest first.

    Args:
        now: Reference time (defaults to timezone.now())
    """
    now = now or timezone.now()
    return list(_with_related(PermitReminder.objects.due(now)))


def get_upcoming_reminders(horizon_days: int = 30, now: datetime | None = None) -> list[PermitReminder]:
    """Pending reminders sending within [now, now + horizon_days], earliest first.

    Args:
        horizon_days: How far ahead to look
        now: Reference time (defaults to timezone.now())
    """
    if horizon_days < 0:
        raise ValueError("horizon_days cannot be negative")
    now = now or timezone.now()
    return list(_with_related(PermitReminder.objects.upcoming(horizon_days, now)))


def get_trip_reminders(trip) -> list[PermitReminder]:
    """All reminders for a trip regardless of status."""
    return list(_with_related(PermitReminder.objects.for_trip(trip)))


def get_active_members() -> list[Member]:
    return list(Member.objects.filter(is_active=True).order_by("name"))


def get_active_recipients() -> list[str]:
    """Email addresses of active members, in name order."""
    return [member.email for member in get_active_members()]
