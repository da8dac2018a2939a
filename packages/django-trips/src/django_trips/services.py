"""Trip planning services that write to the database.

- Reminder generation is computed by scheduling.generate_reminders and
  persisted here in one transaction
- A (trip, destination) pair is scheduled at most once (DB unique constraint)
- Date options are generated once per trip
"""
import logging

from django.db import IntegrityError, transaction

from django_trips.date_options import generate_date_options
from django_trips.exceptions import DateOptionsExist, DuplicateReminder
from django_trips.models import DateOption, PermitReminder, Trip
from django_trips.scheduling import GenerationResult, SkipReason, generate_reminders

logger = logging.getLogger(__name__)


def create_permit_reminders(trip: Trip, destinations, now=None) -> GenerationResult:
    """Generate and store reminders for a trip.

    Destinations that already have a reminder for this trip are skipped with
    reason "already_scheduled". Everything else is inserted atomically.

    Raises:
        TripNotFinalized: If the trip has no confirmed start date
        DuplicateReminder: If a concurrent run scheduled the same pair first
    """
    destinations = list(destinations)
    scheduled = dict(
        PermitReminder.objects.filter(trip=trip).values_list("destination_id", "target_trip_date")
    )

    fresh = [d for d in destinations if d.pk not in scheduled]
    result = generate_reminders(trip, fresh, now=now)
    for destination in destinations:
        if destination.pk in scheduled:
            target = scheduled[destination.pk]
            detail = "Reminder already exists"
            if target != trip.final_start_date:
                detail = f"Reminder already exists for previous start date {target.isoformat()}"
            result.skip(destination, SkipReason.ALREADY_SCHEDULED, detail)

    if not result.reminders:
        return result

    try:
        with transaction.atomic():
            PermitReminder.objects.bulk_create(result.reminders)
    except IntegrityError as e:
        raise DuplicateReminder(trip) from e

    logger.info("Stored %d permit reminders for %s", result.created_count, trip)
    return result


@transaction.atomic
def lock_trip_dates(trip: Trip, date_option: DateOption) -> Trip:
    """Confirm a trip's dates from one of its date options.

    When the start date changes, pending reminders computed for the old
    start date are deleted so the next create_permit_reminders run
    recomputes them. Reminders already sent, booked, missed or cancelled
    are kept and keep their old target date.
    """
    if date_option.trip_id != trip.pk:
        raise ValueError(f"Date option {date_option} does not belong to {trip}")

    trip.final_start_date = date_option.start_date
    trip.final_end_date = date_option.end_date
    trip.status = Trip.Status.DATES_LOCKED
    trip.save(update_fields=["final_start_date", "final_end_date", "status", "updated_at"])

    stale, _ = (
        PermitReminder.objects.for_trip(trip)
        .pending()
        .exclude(target_trip_date=trip.final_start_date)
        .delete()
    )
    if stale:
        logger.info("Dropped %d pending reminders for the previous dates of %s", stale, trip)

    logger.info("Locked %s to %s - %s", trip, trip.final_start_date, trip.final_end_date)
    return trip


@transaction.atomic
def create_date_options(trip: Trip) -> list[DateOption]:
    """Store the season's candidate windows for a trip.

    Raises:
        DateOptionsExist: If the trip already has date options
    """
    if trip.date_options.exists():
        raise DateOptionsExist(trip)

    options = [
        DateOption(
            trip=trip,
            start_date=window.start_date,
            end_date=window.end_date,
            label=window.label,
        )
        for window in generate_date_options(trip.year)
    ]
    DateOption.objects.bulk_create(options)
    logger.info("Created %d date options for %s", len(options), trip)
    return options
