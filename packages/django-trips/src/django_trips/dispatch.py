"""Send-and-settle for permit reminders.

A reminder is settled (status reminder_sent plus a ReminderLog row) only
after the provider confirms the send. A failed send leaves the reminder
pending so the next run retries it. Delivery is at-least-once: a crash
between send and settle can produce a duplicate email.

Usage:
    from django_trips.dispatch import send_due_reminders

    report = send_due_reminders()
    print(f"{report.sent} sent, {report.failed} failed")
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from django.utils import timezone

from .emails import render_permit_reminder
from .exceptions import (
    ConfigurationError,
    DeliveryError,
    InvalidRecipients,
    InvalidStatusTransition,
)
from .ics import permit_reminder_attachment
from .models import PermitReminder, ReminderLog, ReminderStatus
from .providers import BaseEmailProvider, get_email_provider
from .selectors import get_active_members, get_due_reminders

logger = logging.getLogger(__name__)

# Operator-driven status changes. Dispatch itself only ever moves
# pending -> reminder_sent.
ALLOWED_TRANSITIONS = {
    ReminderStatus.PENDING: {
        ReminderStatus.REMINDER_SENT,
        ReminderStatus.BOOKED,
        ReminderStatus.MISSED,
        ReminderStatus.CANCELLED,
    },
    ReminderStatus.REMINDER_SENT: {
        ReminderStatus.PENDING,
        ReminderStatus.BOOKED,
        ReminderStatus.MISSED,
        ReminderStatus.CANCELLED,
    },
    ReminderStatus.BOOKED: {
        ReminderStatus.PENDING,
        ReminderStatus.MISSED,
        ReminderStatus.CANCELLED,
    },
    ReminderStatus.MISSED: {
        ReminderStatus.PENDING,
        ReminderStatus.BOOKED,
        ReminderStatus.CANCELLED,
    },
    ReminderStatus.CANCELLED: {
        ReminderStatus.PENDING,
    },
}


@dataclass
class DispatchItem:
    """Outcome of sending one reminder."""

    reminder_id: str
    destination_name: str
    success: bool
    recipient_count: int = 0
    subject: str = ""
    message_id: str | None = None
    error: str | None = None
    would_have_sent_to: list[str] = field(default_factory=list)


@dataclass
class DispatchReport:
    """Outcome of one send_due_reminders run.

    Attributes:
        found: Number of due reminders
        test_mode: Sends were redirected to the test recipient
        dry_run: Nothing was sent
        items: Per-reminder results
        errors: Batch-level problems (e.g. no active members)
        planned: Reminders that would be sent (dry run only)
        recipients: Addresses the batch was (or would be) sent to
        would_have_sent_to: Member names replaced by the test recipient
    """

    found: int = 0
    test_mode: bool = False
    dry_run: bool = False
    items: list[DispatchItem] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    planned: list[PermitReminder] = field(default_factory=list)
    recipients: list[str] = field(default_factory=list)
    would_have_sent_to: list[str] = field(default_factory=list)

    @property
    def sent(self) -> int:
        return sum(1 for item in self.items if item.success)

    @property
    def failed(self) -> int:
        return sum(1 for item in self.items if not item.success)

    @property
    def success(self) -> bool:
        return not self.errors and self.failed == 0


def _check_test_mode(config) -> None:
    if config.test_mode and not config.test_recipient:
        raise ConfigurationError(
            "Email test mode is enabled but no test recipient is configured "
            "(TRIPS_EMAIL_TEST_RECIPIENT / EMAIL_TEST_RECIPIENT)"
        )


def _settle(reminder: PermitReminder, subject: str, recipient_count: int, now: datetime) -> None:
    """Record a confirmed send. Only pending reminders change status."""
    if reminder.status == ReminderStatus.PENDING:
        reminder.status = ReminderStatus.REMINDER_SENT
        reminder.save(update_fields=["status", "updated_at"])

    ReminderLog.objects.create(
        reminder_type=ReminderLog.ReminderType.PERMIT_OPENING,
        reference_id=str(reminder.pk),
        sent_at=now,
        recipient_count=recipient_count,
        email_subject=subject,
    )


def _deliver(reminder, members, provider: BaseEmailProvider, now: datetime) -> DispatchItem:
    """Render, send and settle one reminder.

    Raises:
        DeliveryError: If the provider reports failure (nothing is settled)
    """
    config = provider.config
    recipients = [member.email for member in members]
    would_have_sent_to = []
    if config.test_mode:
        would_have_sent_to = [member.name for member in members]
        recipients = [config.test_recipient]

    rendered = render_permit_reminder(reminder, now=now, test_mode=config.test_mode)
    attachment = permit_reminder_attachment(reminder, now=now)

    result = provider.send(
        recipients,
        rendered.subject,
        rendered.body_text,
        body_html=rendered.body_html,
        attachments=[attachment],
    )
    if not result.success:
        raise DeliveryError(result.provider, result.error or "Unknown error")

    if config.test_mode:
        logger.info(
            "Test send for %s went to %s (would have sent to %d members)",
            reminder.destination.name,
            config.test_recipient,
            len(would_have_sent_to),
        )
    else:
        _settle(reminder, rendered.subject, len(recipients), now)
        logger.info(
            "Sent permit reminder for %s to %d recipients",
            reminder.destination.name,
            len(recipients),
        )

    return DispatchItem(
        reminder_id=str(reminder.pk),
        destination_name=reminder.destination.name,
        success=True,
        recipient_count=len(recipients),
        subject=rendered.subject,
        message_id=result.message_id,
        would_have_sent_to=would_have_sent_to,
    )


def send_due_reminders(
    provider: BaseEmailProvider | None = None,
    now: datetime | None = None,
    dry_run: bool = False,
) -> DispatchReport:
    """Send every due reminder to all active members.

    Each reminder is sent and settled independently; one failure never
    stops the rest of the batch.

    Args:
        provider: Email provider (defaults to the configured one)
        now: Reference time (defaults to timezone.now())
        dry_run: Report what would be sent without sending

    Returns:
        DispatchReport with per-reminder results

    Raises:
        ConfigurationError: If email configuration is unusable (nothing is sent)
    """
    now = now or timezone.now()
    provider = provider or get_email_provider()
    _check_test_mode(provider.config)

    reminders = get_due_reminders(now)
    report = DispatchReport(
        found=len(reminders),
        test_mode=provider.config.test_mode,
        dry_run=dry_run,
    )
    if not reminders:
        logger.info("No due permit reminders")
        return report

    members = get_active_members()
    if not members:
        logger.warning("%d reminders due but there are no active members", len(reminders))
        report.errors.append("No active members to send to")
        return report

    if report.test_mode:
        report.recipients = [provider.config.test_recipient]
        report.would_have_sent_to = [member.name for member in members]
    else:
        report.recipients = [member.email for member in members]

    if dry_run:
        report.planned = reminders
        return report

    for reminder in reminders:
        try:
            item = _deliver(reminder, members, provider, now)
        except DeliveryError as e:
            logger.error("Permit reminder for %s not sent: %s", reminder.destination.name, e)
            item = DispatchItem(
                reminder_id=str(reminder.pk),
                destination_name=reminder.destination.name,
                success=False,
                error=e.error,
            )
        except Exception as e:
            logger.exception("Error sending permit reminder %s", reminder.pk)
            item = DispatchItem(
                reminder_id=str(reminder.pk),
                destination_name=reminder.destination.name,
                success=False,
                error=str(e),
            )
        report.items.append(item)

    logger.info("Sent %d of %d due permit reminders", report.sent, report.found)
    return report


def send_reminder(
    reminder: PermitReminder,
    recipient_emails: list[str] | None = None,
    provider: BaseEmailProvider | None = None,
    now: datetime | None = None,
) -> DispatchItem:
    """Send one reminder now, regardless of its remind_at.

    Args:
        reminder: Reminder to send
        recipient_emails: Restrict to these active members (default: all)
        provider: Email provider (defaults to the configured one)
        now: Reference time (defaults to timezone.now())

    Returns:
        DispatchItem for the successful send

    Raises:
        InvalidStatusTransition: If the reminder was cancelled
        InvalidRecipients: If a requested address is malformed or
            no requested address is an active member
        ConfigurationError: If test mode has no test recipient
        DeliveryError: If the provider reports failure
    """
    now = now or timezone.now()
    provider = provider or get_email_provider()
    _check_test_mode(provider.config)

    if reminder.status == ReminderStatus.CANCELLED:
        raise InvalidStatusTransition(reminder.status, ReminderStatus.REMINDER_SENT)

    members = get_active_members()
    if recipient_emails:
        malformed = [a for a in recipient_emails if not provider.validate_recipient(a)]
        if malformed:
            raise InvalidRecipients(f"Invalid email address: {', '.join(malformed)}")
        requested = set(recipient_emails)
        members = [member for member in members if member.email in requested]
        if not members:
            raise InvalidRecipients()
    elif not members:
        raise InvalidRecipients("No active members to send to")

    return _deliver(reminder, members, provider, now)


def update_reminder_status(reminder: PermitReminder, status: str) -> PermitReminder:
    """Apply an operator status change (booked, missed, cancelled, ...).

    Only the status is written; computed instants never change.

    Raises:
        InvalidStatusTransition: If the change is not allowed
    """
    if status not in ReminderStatus.values:
        raise InvalidStatusTransition(reminder.status, status)
    if status == reminder.status:
        return reminder

    allowed = ALLOWED_TRANSITIONS.get(reminder.status, set())
    if status not in allowed:
        raise InvalidStatusTransition(reminder.status, status)

    previous = reminder.status
    reminder.status = status
    reminder.save(update_fields=["status", "updated_at"])
    logger.info("Reminder %s status %s -> %s", reminder.pk, previous, status)
    return reminder
