"""Custom exceptions for django-trips."""


class TripsError(Exception):
    """Base exception for trip planning errors."""
    pass


# =============================================================================
# Permit policy errors (recoverable per destination)
# =============================================================================


class PolicyError(TripsError):
    """A destination's permit policy cannot be evaluated."""

    def __init__(self, destination, reason: str):
        self.destination = destination
        self.reason = reason
        super().__init__(f"{_name(destination)}: {reason}")


class UnknownPolicyKind(PolicyError):
    """Raised when the permit kind is missing or not a known policy."""

    def __init__(self, destination, kind):
        self.kind = kind
        if kind:
            reason = f"unknown permit kind '{kind}'"
        else:
            reason = "no permit kind set"
        super().__init__(destination, reason)


class MissingPolicyParameter(PolicyError):
    """Raised when the policy kind requires a parameter that is not set."""

    def __init__(self, destination, parameter: str):
        self.parameter = parameter
        super().__init__(destination, f"missing required parameter '{parameter}'")


class InvalidPolicyParameter(PolicyError):
    """Raised when a policy parameter cannot be parsed."""

    def __init__(self, destination, parameter: str, value):
        self.parameter = parameter
        self.value = value
        super().__init__(destination, f"invalid value {value!r} for '{parameter}'")


# =============================================================================
# Trip-level and configuration errors (abort the whole call)
# =============================================================================


class TripNotFinalized(TripsError):
    """Raised when generating reminders for a trip without a confirmed start date."""

    def __init__(self, trip):
        self.trip = trip
        super().__init__(f"Trip '{trip}' has no confirmed start date")


class ConfigurationError(TripsError):
    """Raised when settings are missing or malformed."""
    pass


class DateOptionsExist(TripsError):
    """Raised when date options were already generated for a trip."""

    def __init__(self, trip):
        self.trip = trip
        super().__init__(
            f"Date options already exist for trip '{trip}'. Delete them first to regenerate."
        )


# =============================================================================
# Reminder lifecycle errors
# =============================================================================


class DeliveryError(TripsError):
    """Raised when the email provider reports a failed send."""

    def __init__(self, provider: str, error: str):
        self.provider = provider
        self.error = error
        super().__init__(f"[{provider}] {error}")


class InvalidStatusTransition(TripsError):
    """Raised when a reminder status change is not allowed."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move reminder from '{current}' to '{requested}'")


class InvalidRecipients(TripsError):
    """Raised when none of the requested recipients is an active member."""

    def __init__(self, reason: str = "No valid recipients selected"):
        self.reason = reason
        super().__init__(reason)


class DuplicateReminder(TripsError):
    """Raised when a reminder already exists for a trip/destination pair."""

    def __init__(self, trip, destination=None):
        self.trip = trip
        self.destination = destination
        if destination is not None:
            super().__init__(f"Reminder already exists for {_name(destination)} on trip '{trip}'")
        else:
            super().__init__(f"Duplicate reminder while scheduling trip '{trip}'")


def _name(destination) -> str:
    return getattr(destination, "name", None) or str(destination)
