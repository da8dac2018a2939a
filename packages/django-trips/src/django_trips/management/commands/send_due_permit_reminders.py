"""Management command to send permit reminders that are due.

Intended to run once a day from cron or another scheduler.
"""

from django.core.management.base import BaseCommand, CommandError

from django_trips.civil_time import format_local
from django_trips.dispatch import send_due_reminders
from django_trips.exceptions import TripsError


class Command(BaseCommand):
    help = "Email every pending permit reminder whose send time has passed"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be sent without sending anything",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]

        try:
            report = send_due_reminders(dry_run=dry_run)
        except TripsError as e:
            raise CommandError(str(e)) from e

        if report.test_mode:
            self.stdout.write(self.style.WARNING(
                f"TEST MODE: sending to {', '.join(report.recipients)} "
                f"instead of {len(report.would_have_sent_to)} members"
            ))

        if not report.found:
            self.stdout.write("No due reminders to send")
            return

        for error in report.errors:
            self.stdout.write(self.style.ERROR(error))
        if report.errors:
            raise CommandError(f"{report.found} due reminders were not sent")

        if dry_run:
            self.stdout.write(
                f"DRY RUN: Would send {report.found} reminder(s) "
                f"to {len(report.recipients)} recipients"
            )
            for reminder in report.planned:
                self.stdout.write(
                    f"  - {reminder.destination.name}: opens {format_local(reminder.permit_open_at)}"
                )
            return

        for item in report.items:
            if item.success:
                self.stdout.write(f"  SENT: {item.destination_name} ({item.recipient_count} recipients)")
            else:
                self.stdout.write(self.style.ERROR(f"  FAILED: {item.destination_name}: {item.error}"))

        summary = f"Sent {report.sent} of {report.found} reminders"
        if report.failed:
            raise CommandError(f"{summary}; {report.failed} failed")
        self.stdout.write(self.style.SUCCESS(summary))
