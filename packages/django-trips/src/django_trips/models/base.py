"""Abstract base model shared by every trips model."""

import uuid

from django.db import models


class UUIDTimeStampedModel(models.Model):
    """Abstract base model with a UUID primary key and timestamps.

    Trips records are never soft-deleted: reminders and logs are an
    operational history, and the rest is plain CRUD managed by admins.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
