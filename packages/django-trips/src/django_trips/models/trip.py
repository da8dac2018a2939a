"""Trip (one season's planning cycle) and its candidate date windows."""

from django.db import models
from django.db.models import F, Q

from .base import UUIDTimeStampedModel


class Trip(UUIDTimeStampedModel):
    """One season's planning cycle.

    Lifecycle: planning -> dates_open -> dates_locked -> site_locked -> complete.
    final_start_date must be set before permit reminders can be generated.
    """

    class Status(models.TextChoices):
        PLANNING = "planning", "Planning"
        DATES_OPEN = "dates_open", "Date Voting Open"
        DATES_LOCKED = "dates_locked", "Dates Locked"
        SITE_LOCKED = "site_locked", "Site Locked"
        COMPLETE = "complete", "Complete"

    year = models.PositiveIntegerField(unique=True)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PLANNING,
    )
    date_voting_opens = models.DateTimeField(null=True, blank=True)
    date_voting_deadline = models.DateTimeField(null=True, blank=True)
    final_start_date = models.DateField(null=True, blank=True)
    final_end_date = models.DateField(null=True, blank=True)
    final_destination = models.ForeignKey(
        "django_trips.Destination",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="final_for_trips",
    )

    class Meta:
        ordering = ["-year"]
        constraints = [
            models.CheckConstraint(
                condition=Q(final_end_date__isnull=True)
                | Q(final_start_date__isnull=True)
                | Q(final_end_date__gte=F("final_start_date")),
                name="trip_end_on_or_after_start",
            ),
        ]

    def __str__(self):
        return f"Trip {self.year}"

    @property
    def is_finalized(self) -> bool:
        return self.final_start_date is not None


class DateOption(UUIDTimeStampedModel):
    """A candidate Wednesday-Sunday window members vote on."""

    trip = models.ForeignKey(
        "django_trips.Trip",
        on_delete=models.CASCADE,
        related_name="date_options",
    )
    start_date = models.DateField()
    end_date = models.DateField()
    label = models.CharField(max_length=50, blank=True)

    class Meta:
        ordering = ["start_date"]
        constraints = [
            models.UniqueConstraint(
                fields=["trip", "start_date"],
                name="dateoption_unique_trip_start",
            ),
        ]

    def __str__(self):
        return self.label or f"{self.start_date} - {self.end_date}"
