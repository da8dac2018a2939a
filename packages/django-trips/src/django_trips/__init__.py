"""Django Trips - Group trip coordination with permit-opening reminders."""

__version__ = "0.1.0"

__all__ = [
    # Models
    "Member",
    "Destination",
    "Trip",
    "DateOption",
    "PermitReminder",
    "ReminderLog",
    # Calculator
    "compute_permit_open",
    "compute_reminder_instant",
    "generate_reminders",
    "generate_date_options",
    # Selectors
    "get_due_reminders",
    "get_upcoming_reminders",
    "get_trip_reminders",
    # Services
    "create_permit_reminders",
    "create_date_options",
    "lock_trip_dates",
    # Dispatch
    "send_due_reminders",
    "send_reminder",
    "update_reminder_status",
    # Exceptions
    "TripsError",
    "PolicyError",
    "TripNotFinalized",
    "DeliveryError",
    "ConfigurationError",
]

_MODELS = {"Member", "Destination", "Trip", "DateOption", "PermitReminder", "ReminderLog"}
_EXCEPTIONS = {"TripsError", "PolicyError", "TripNotFinalized", "DeliveryError", "ConfigurationError"}


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in _MODELS:
        from . import models

        return getattr(models, name)
    if name in ("compute_permit_open", "compute_reminder_instant"):
        from . import permits

        return getattr(permits, name)
    if name == "generate_reminders":
        from .scheduling import generate_reminders

        return generate_reminders
    if name == "generate_date_options":
        from .date_options import generate_date_options

        return generate_date_options
    if name in ("get_due_reminders", "get_upcoming_reminders", "get_trip_reminders"):
        from . import selectors

        return getattr(selectors, name)
    if name in ("create_permit_reminders", "create_date_options", "lock_trip_dates"):
        from . import services

        return getattr(services, name)
    if name in ("send_due_reminders", "send_reminder", "update_reminder_status"):
        from . import dispatch

        return getattr(dispatch, name)
    if name in _EXCEPTIONS:
        from . import exceptions

        return getattr(exceptions, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
