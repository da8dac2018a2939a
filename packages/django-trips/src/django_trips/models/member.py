"""Trip group member model."""

from django.db import models

from .base import UUIDTimeStampedModel


class Member(UUIDTimeStampedModel):
    """A person in the trip group.

    Active members receive permit reminder emails.
    """

    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=30, blank=True)
    avatar_url = models.URLField(blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="trips_member_active_idx"),
        ]

    def __str__(self):
        return self.name
