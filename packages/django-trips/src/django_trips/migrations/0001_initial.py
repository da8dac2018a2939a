# Generated manually for standalone django-trips package

import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Member",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("phone", models.CharField(blank=True, max_length=30)),
                ("avatar_url", models.URLField(blank=True)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["name"],
                "indexes": [models.Index(fields=["is_active"], name="trips_member_active_idx")],
            },
        ),
        migrations.CreateModel(
            name="Destination",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200)),
                ("region", models.CharField(blank=True, max_length=200)),
                ("description", models.TextField(blank=True)),
                ("latitude", models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ("longitude", models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ("permit_url", models.URLField(blank=True)),
                (
                    "difficulty",
                    models.CharField(
                        blank=True,
                        choices=[("easy", "Easy"), ("moderate", "Moderate"), ("strenuous", "Strenuous")],
                        max_length=20,
                    ),
                ),
                ("distance_miles", models.DecimalField(blank=True, decimal_places=1, max_digits=6, null=True)),
                ("elevation_gain_ft", models.PositiveIntegerField(blank=True, null=True)),
                ("peak_elevation_ft", models.PositiveIntegerField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("archived", "Archived")],
                        default="active",
                        max_length=20,
                    ),
                ),
                (
                    "permit_kind",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("rolling", "Rolling (N days before entry)"),
                            ("fixed_date", "Fixed date each year"),
                            ("lottery", "Lottery"),
                        ],
                        help_text="Leave blank if the destination needs no permit reminder",
                        max_length=20,
                        null=True,
                    ),
                ),
                (
                    "permit_advance_days",
                    models.PositiveIntegerField(
                        blank=True,
                        help_text="Rolling permits: days before the trip start that permits open",
                        null=True,
                    ),
                ),
                (
                    "permit_open_time",
                    models.TimeField(
                        blank=True,
                        help_text="Local wall-clock time permits open (default 07:00)",
                        null=True,
                    ),
                ),
                (
                    "permit_fixed_open_date",
                    models.CharField(
                        blank=True,
                        help_text='Fixed-date permits: recurring open date as "MM-DD"',
                        max_length=5,
                    ),
                ),
                (
                    "permit_lottery_open",
                    models.CharField(
                        blank=True,
                        help_text='Lottery permits: recurring application open date as "MM-DD"',
                        max_length=5,
                    ),
                ),
                ("permit_lottery_close", models.CharField(blank=True, max_length=5)),
                ("permit_lottery_results", models.CharField(blank=True, max_length=5)),
                ("permit_cost", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("permit_notes", models.TextField(blank=True)),
            ],
            options={
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["status"], name="trips_dest_status_idx"),
                    models.Index(fields=["permit_kind"], name="trips_dest_kind_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Trip",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("year", models.PositiveIntegerField(unique=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("planning", "Planning"),
                            ("dates_open", "Date Voting Open"),
                            ("dates_locked", "Dates Locked"),
                            ("site_locked", "Site Locked"),
                            ("complete", "Complete"),
                        ],
                        default="planning",
                        max_length=20,
                    ),
                ),
                ("date_voting_opens", models.DateTimeField(blank=True, null=True)),
                ("date_voting_deadline", models.DateTimeField(blank=True, null=True)),
                ("final_start_date", models.DateField(blank=True, null=True)),
                ("final_end_date", models.DateField(blank=True, null=True)),
                (
                    "final_destination",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="final_for_trips",
                        to="django_trips.destination",
                    ),
                ),
            ],
            options={
                "ordering": ["-year"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(final_end_date__isnull=True)
                        | models.Q(final_start_date__isnull=True)
                        | models.Q(final_end_date__gte=models.F("final_start_date")),
                        name="trip_end_on_or_after_start",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="DateOption",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("label", models.CharField(blank=True, max_length=50)),
                (
                    "trip",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="date_options",
                        to="django_trips.trip",
                    ),
                ),
            ],
            options={
                "ordering": ["start_date"],
                "constraints": [
                    models.UniqueConstraint(fields=["trip", "start_date"], name="dateoption_unique_trip_start"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PermitReminder",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "target_trip_date",
                    models.DateField(help_text="Trip start date the permit is for (copied from the trip)"),
                ),
                ("permit_open_at", models.DateTimeField(help_text="When the permit window opens")),
                ("remind_at", models.DateTimeField(help_text="When the reminder email should go out")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("reminder_sent", "Reminder Sent"),
                            ("booked", "Booked"),
                            ("missed", "Missed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                (
                    "destination",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="permit_reminders",
                        to="django_trips.destination",
                    ),
                ),
                (
                    "trip",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="permit_reminders",
                        to="django_trips.trip",
                    ),
                ),
            ],
            options={
                "ordering": ["remind_at"],
                "indexes": [models.Index(fields=["status", "remind_at"], name="trips_reminder_due_idx")],
                "constraints": [
                    models.UniqueConstraint(
                        fields=["trip", "destination"],
                        name="permitreminder_unique_trip_destination",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(remind_at__lt=models.F("permit_open_at")),
                        name="permitreminder_remind_before_open",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ReminderLog",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "reminder_type",
                    models.CharField(
                        choices=[("permit_opening", "Permit Opening"), ("date_voting", "Date Voting")],
                        db_index=True,
                        max_length=20,
                    ),
                ),
                (
                    "reference_id",
                    models.CharField(
                        blank=True,
                        help_text="Primary key of the reminder that was sent",
                        max_length=50,
                    ),
                ),
                ("sent_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("recipient_count", models.PositiveIntegerField(default=0)),
                ("email_subject", models.CharField(blank=True, max_length=500)),
            ],
            options={
                "ordering": ["-sent_at"],
            },
        ),
    ]
