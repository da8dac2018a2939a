"""Reminder scheduler.

Builds PermitReminder records for a finalized trip across a set of
destinations. Nothing here touches the database: callers decide whether and
how to persist the batch (see services.create_permit_reminders).
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from django.utils import timezone

from .exceptions import PolicyError, TripNotFinalized, UnknownPolicyKind
from .models import PermitReminder, ReminderStatus
from .permits import PermitPolicy, compute_reminder_instant

logger = logging.getLogger(__name__)


class SkipReason:
    """Stable reason codes for destinations left out of a batch."""

    NO_POLICY = "no_policy"
    POLICY_ERROR = "policy_error"
    ALREADY_OPEN = "already_open"
    ALREADY_SCHEDULED = "already_scheduled"


@dataclass
class SkippedDestination:
    """A destination that did not get a reminder, and why."""

    destination: object
    reason: str
    detail: str = ""

    @property
    def destination_name(self) -> str:
        return getattr(self.destination, "name", str(self.destination))


@dataclass
class AppliedDefaults:
    """A destination whose reminder used one or more default values."""

    destination: object
    defaults: tuple[str, ...]

    @property
    def destination_name(self) -> str:
        return getattr(self.destination, "name", str(self.destination))


@dataclass
class GenerationResult:
    """Outcome of a generation batch.

    An empty batch is a valid result: every destination may legitimately be
    skipped (no policy, permits already open).
    """

    reminders: list[PermitReminder] = field(default_factory=list)
    skipped: list[SkippedDestination] = field(default_factory=list)
    fallbacks: list[AppliedDefaults] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.reminders)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def skip(self, destination, reason: str, detail: str = "") -> None:
        self.skipped.append(SkippedDestination(destination, reason, detail))


def generate_reminders(trip, destinations, now: datetime | None = None) -> GenerationResult:
    """Compute reminders for a trip across destinations.

    Args:
        trip: Trip with final_start_date set
        destinations: Iterable of Destination
        now: Generation time (defaults to timezone.now())

    Returns:
        GenerationResult with unsaved pending reminders and skip notices

    Raises:
        TripNotFinalized: If the trip has no confirmed start date
    """
    if trip.final_start_date is None:
        raise TripNotFinalized(trip)

    now = now or timezone.now()
    trip_start = trip.final_start_date
    result = GenerationResult()

    for destination in destinations:
        try:
            policy = PermitPolicy.from_destination(destination)
            permit_open_at = policy.open_instant(trip_start)
        except UnknownPolicyKind as e:
            if e.kind:
                result.skip(destination, SkipReason.POLICY_ERROR, str(e))
                logger.error("Skipping %s: %s", destination.name, e.reason)
            else:
                result.skip(destination, SkipReason.NO_POLICY, str(e))
                logger.info("Skipping %s: no permit kind defined", destination.name)
            continue
        except PolicyError as e:
            result.skip(destination, SkipReason.POLICY_ERROR, str(e))
            logger.error("Skipping %s: %s", destination.name, e.reason)
            continue

        if policy.defaults_applied:
            result.fallbacks.append(AppliedDefaults(destination, policy.defaults_applied))

        if permit_open_at < now:
            result.skip(
                destination,
                SkipReason.ALREADY_OPEN,
                f"Permits already opened on {permit_open_at.isoformat()}",
            )
            logger.info(
                "Skipping %s: permits already opened on %s",
                destination.name,
                permit_open_at.isoformat(),
            )
            continue

        remind_at = compute_reminder_instant(permit_open_at)
        result.reminders.append(
            PermitReminder(
                trip=trip,
                destination=destination,
                target_trip_date=trip_start,
                permit_open_at=permit_open_at,
                remind_at=remind_at,
                status=ReminderStatus.PENDING,
            )
        )
        logger.info(
            "Generated reminder for %s: opens %s, remind %s",
            destination.name,
            permit_open_at.isoformat(),
            remind_at.isoformat(),
        )

    return result
