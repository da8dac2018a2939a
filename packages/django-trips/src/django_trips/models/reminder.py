"""Permit reminder schedule and the append-only send log."""

import uuid
from datetime import timedelta

from django.db import models
from django.db.models import F, Q
from django.utils import timezone

from .base import UUIDTimeStampedModel


class ReminderStatus(models.TextChoices):
    """PermitReminder lifecycle.

    pending -> reminder_sent happens only after a confirmed send.
    booked, missed and cancelled are set by operators, never by the scheduler.
    """

    PENDING = "pending", "Pending"
    REMINDER_SENT = "reminder_sent", "Reminder Sent"
    BOOKED = "booked", "Booked"
    MISSED = "missed", "Missed"
    CANCELLED = "cancelled", "Cancelled"


class PermitReminderQuerySet(models.QuerySet):
    """Time-based queries over reminder send instants."""

    def pending(self):
        return self.filter(status=ReminderStatus.PENDING)

    def due(self, now=None):
        """Pending reminders whose send instant is at or before now."""
        now = now or timezone.now()
        return self.pending().filter(remind_at__lte=now)

    def upcoming(self, horizon_days: int = 30, now=None):
        """Pending reminders sending between now and now + horizon_days."""
        now = now or timezone.now()
        return self.pending().filter(
            remind_at__gte=now,
            remind_at__lte=now + timedelta(days=horizon_days),
        )

    def for_trip(self, trip):
        return self.filter(trip=trip)


class PermitReminder(UUIDTimeStampedModel):
    """Computed permit schedule for one (Trip, Destination) pair.

    permit_open_at and remind_at are written once at generation time.
    Only status changes afterwards.
    """

    trip = models.ForeignKey(
        "django_trips.Trip",
        on_delete=models.CASCADE,
        related_name="permit_reminders",
    )
    destination = models.ForeignKey(
        "django_trips.Destination",
        on_delete=models.CASCADE,
        related_name="permit_reminders",
    )
    target_trip_date = models.DateField(
        help_text="Trip start date the permit is for (copied from the trip)",
    )
    permit_open_at = models.DateTimeField(
        help_text="When the permit window opens",
    )
    remind_at = models.DateTimeField(
        help_text="When the reminder email should go out",
    )
    status = models.CharField(
        max_length=20,
        choices=ReminderStatus.choices,
        default=ReminderStatus.PENDING,
    )

    objects = PermitReminderQuerySet.as_manager()

    class Meta:
        ordering = ["remind_at"]
        indexes = [
            models.Index(fields=["status", "remind_at"], name="trips_reminder_due_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["trip", "destination"],
                name="permitreminder_unique_trip_destination",
            ),
            models.CheckConstraint(
                condition=Q(remind_at__lt=F("permit_open_at")),
                name="permitreminder_remind_before_open",
            ),
        ]

    def __str__(self):
        return f"{self.destination} permits for {self.target_trip_date}"

    @property
    def is_pending(self) -> bool:
        return self.status == ReminderStatus.PENDING


class ReminderLog(models.Model):
    """Immutable record of a reminder email that was delivered.

    Written only after the provider confirms the send. Never updated or
    deleted by the application.
    """

    class ReminderType(models.TextChoices):
        PERMIT_OPENING = "permit_opening", "Permit Opening"
        DATE_VOTING = "date_voting", "Date Voting"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    reminder_type = models.CharField(
        max_length=20,
        choices=ReminderType.choices,
        db_index=True,
    )
    reference_id = models.CharField(
        max_length=50,
        blank=True,
        help_text="Primary key of the reminder that was sent",
    )
    sent_at = models.DateTimeField(default=timezone.now, db_index=True)
    recipient_count = models.PositiveIntegerField(default=0)
    email_subject = models.CharField(max_length=500, blank=True)

    class Meta:
        ordering = ["-sent_at"]

    def __str__(self):
        return f"{self.reminder_type} {self.reference_id} ({self.recipient_count} recipients)"
