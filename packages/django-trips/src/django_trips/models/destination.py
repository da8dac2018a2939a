"""Destination (candidate trip site) model with its permit policy."""

from django.core.exceptions import ValidationError
from django.db import models

from .base import UUIDTimeStampedModel


class PermitKind(models.TextChoices):
    """How a destination's permit window opens."""

    ROLLING = "rolling", "Rolling (N days before entry)"
    FIXED_DATE = "fixed_date", "Fixed date each year"
    LOTTERY = "lottery", "Lottery"


class Destination(UUIDTimeStampedModel):
    """A candidate trip location.

    Permit policy fields by kind:
    - rolling: permit_advance_days (defaults to 180 with a warning if blank)
    - fixed_date: permit_fixed_open_date ("MM-DD")
    - lottery: permit_lottery_open ("MM-DD"); close/results are informational

    permit_open_time is the local wall-clock time permits open on the open
    date (blank means 07:00). Destinations without permit_kind are skipped
    by reminder generation.
    """

    class Difficulty(models.TextChoices):
        EASY = "easy", "Easy"
        MODERATE = "moderate", "Moderate"
        STRENUOUS = "strenuous", "Strenuous"

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        ARCHIVED = "archived", "Archived"

    # Display metadata
    name = models.CharField(max_length=200)
    region = models.CharField(max_length=200, blank=True)
    description = models.TextField(blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    permit_url = models.URLField(blank=True)
    difficulty = models.CharField(max_length=20, choices=Difficulty.choices, blank=True)
    distance_miles = models.DecimalField(max_digits=6, decimal_places=1, null=True, blank=True)
    elevation_gain_ft = models.PositiveIntegerField(null=True, blank=True)
    peak_elevation_ft = models.PositiveIntegerField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)

    # Permit policy
    permit_kind = models.CharField(
        max_length=20,
        choices=PermitKind.choices,
        blank=True,
        null=True,
        help_text="Leave blank if the destination needs no permit reminder",
    )
    permit_advance_days = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Rolling permits: days before the trip start that permits open",
    )
    permit_open_time = models.TimeField(
        null=True,
        blank=True,
        help_text="Local wall-clock time permits open (default 07:00)",
    )
    permit_fixed_open_date = models.CharField(
        max_length=5,
        blank=True,
        help_text='Fixed-date permits: recurring open date as "MM-DD"',
    )
    permit_lottery_open = models.CharField(
        max_length=5,
        blank=True,
        help_text='Lottery permits: recurring application open date as "MM-DD"',
    )
    permit_lottery_close = models.CharField(max_length=5, blank=True)
    permit_lottery_results = models.CharField(max_length=5, blank=True)
    permit_cost = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    permit_notes = models.TextField(blank=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["status"], name="trips_dest_status_idx"),
            models.Index(fields=["permit_kind"], name="trips_dest_kind_idx"),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        """Validate that policy parameters match the declared permit kind."""
        from ..civil_time import parse_month_day

        super().clean()
        errors = {}

        for field in ("permit_fixed_open_date", "permit_lottery_open",
                      "permit_lottery_close", "permit_lottery_results"):
            value = getattr(self, field)
            if value:
                try:
                    parse_month_day(value)
                except ValueError:
                    errors[field] = 'Use the "MM-DD" format.'

        kind = self.permit_kind
        if kind == PermitKind.FIXED_DATE and not self.permit_fixed_open_date:
            errors.setdefault("permit_fixed_open_date", "Required for fixed-date permits.")
        if kind == PermitKind.LOTTERY and not self.permit_lottery_open:
            errors.setdefault("permit_lottery_open", "Required for lottery permits.")

        if kind != PermitKind.ROLLING and self.permit_advance_days is not None:
            errors["permit_advance_days"] = "Only rolling permits use advance days."
        if kind != PermitKind.FIXED_DATE and self.permit_fixed_open_date:
            errors.setdefault("permit_fixed_open_date", "Only fixed-date permits use a fixed open date.")
        if kind != PermitKind.LOTTERY and self.permit_lottery_open:
            errors.setdefault("permit_lottery_open", "Only lottery permits use a lottery open date.")

        if errors:
            raise ValidationError(errors)

    @property
    def has_permit_policy(self) -> bool:
        return bool(self.permit_kind)
