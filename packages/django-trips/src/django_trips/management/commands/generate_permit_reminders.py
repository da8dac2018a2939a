"""Management command to schedule permit reminders for a trip."""

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from django_trips.civil_time import format_local
from django_trips.exceptions import TripsError
from django_trips.models import Destination, Trip
from django_trips.services import create_permit_reminders


class Command(BaseCommand):
    help = "Compute and store permit reminders for a trip's confirmed dates"

    def add_arguments(self, parser):
        parser.add_argument(
            "--year",
            type=int,
            required=True,
            help="Trip year to schedule",
        )
        parser.add_argument(
            "--destination",
            action="append",
            dest="destinations",
            default=[],
            metavar="ID",
            help="Destination id (repeatable; default: all active destinations)",
        )

    def handle(self, *args, **options):
        year = options["year"]
        destination_ids = options["destinations"]

        try:
            trip = Trip.objects.get(year=year)
        except Trip.DoesNotExist:
            raise CommandError(f"No trip for {year}")

        if destination_ids:
            try:
                destinations = list(Destination.objects.filter(pk__in=destination_ids))
            except ValidationError as e:
                raise CommandError(f"Invalid destination id: {e.messages[0]}")
            found = {str(d.pk) for d in destinations}
            missing = [i for i in destination_ids if i not in found]
            if missing:
                raise CommandError(f"Unknown destination(s): {', '.join(missing)}")
        else:
            destinations = list(Destination.objects.filter(status=Destination.Status.ACTIVE))

        try:
            result = create_permit_reminders(trip, destinations)
        except TripsError as e:
            raise CommandError(str(e)) from e

        for reminder in result.reminders:
            self.stdout.write(
                f"  {reminder.destination.name}: opens {format_local(reminder.permit_open_at)}, "
                f"remind {format_local(reminder.remind_at)}"
            )
        for applied in result.fallbacks:
            self.stdout.write(self.style.WARNING(
                f"  {applied.destination_name}: used default {', '.join(applied.defaults)}"
            ))
        for skipped in result.skipped:
            self.stdout.write(f"  SKIPPED {skipped.destination_name} [{skipped.reason}] {skipped.detail}")

        self.stdout.write(self.style.SUCCESS(
            f"Created {result.created_count} reminders, skipped {result.skipped_count}"
        ))
