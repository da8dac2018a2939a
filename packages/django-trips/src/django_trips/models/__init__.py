"""Models for django-trips."""

from .base import UUIDTimeStampedModel
from .destination import Destination, PermitKind
from .member import Member
from .reminder import PermitReminder, PermitReminderQuerySet, ReminderLog, ReminderStatus
from .trip import DateOption, Trip

__all__ = [
    "UUIDTimeStampedModel",
    "Member",
    "Destination",
    "PermitKind",
    "Trip",
    "DateOption",
    "PermitReminder",
    "PermitReminderQuerySet",
    "ReminderStatus",
    "ReminderLog",
]
