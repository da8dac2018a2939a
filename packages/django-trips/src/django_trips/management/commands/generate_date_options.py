"""Management command to create a trip's candidate date windows."""

from django.core.management.base import BaseCommand, CommandError

from django_trips.exceptions import TripsError
from django_trips.models import Trip
from django_trips.services import create_date_options


class Command(BaseCommand):
    help = "Create the Wednesday-Sunday date options for a trip year"

    def add_arguments(self, parser):
        parser.add_argument(
            "--year",
            type=int,
            required=True,
            help="Trip year",
        )

    def handle(self, *args, **options):
        year = options["year"]

        try:
            trip = Trip.objects.get(year=year)
        except Trip.DoesNotExist:
            raise CommandError(f"No trip for {year}")

        try:
            date_options = create_date_options(trip)
        except TripsError as e:
            raise CommandError(str(e)) from e

        for option in date_options:
            self.stdout.write(f"  {option.label}")
        self.stdout.write(self.style.SUCCESS(f"Generated {len(date_options)} date options"))
