"""Management command to list reminders that will send soon."""

from django.core.management.base import BaseCommand

from django_trips.civil_time import format_local
from django_trips.selectors import get_upcoming_reminders


class Command(BaseCommand):
    help = "List pending permit reminders sending within the next N days"

    def add_arguments(self, parser):
        parser.add_argument(
            "--days",
            type=int,
            default=30,
            help="Look-ahead window in days (default: 30)",
        )

    def handle(self, *args, **options):
        days = options["days"]
        if days < 0:
            self.stderr.write(self.style.ERROR("--days cannot be negative"))
            return

        reminders = get_upcoming_reminders(horizon_days=days)
        if not reminders:
            self.stdout.write(f"No reminders in the next {days} days")
            return

        self.stdout.write(f"{len(reminders)} reminder(s) in the next {days} days:")
        for reminder in reminders:
            self.stdout.write(
                f"  {format_local(reminder.remind_at)}  {reminder.destination.name} "
                f"(opens {format_local(reminder.permit_open_at)}, trip {reminder.trip.year})"
            )
