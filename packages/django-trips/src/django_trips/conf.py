"""Configuration for django-trips.

Every value is read with the same precedence:
    1. Django setting (if set and not blank)
    2. Environment variable (where one is mapped)
    3. Built-in default

Settings:
    TRIPS_TIMEZONE              Civil timezone permit times are defined in
    TRIPS_DEFAULT_OPEN_TIME     Open time when a destination has none ("HH:MM")
    TRIPS_DEFAULT_ADVANCE_DAYS  Advance days for rolling permits without a value
    TRIPS_SEASON_START          Earliest trip start, "MM-DD"
    TRIPS_SEASON_END            Latest trip end, "MM-DD"
    TRIPS_EMAIL_PROVIDER        console, django or ses
    TRIPS_EMAIL_FROM            Sender address
    TRIPS_EMAIL_FROM_NAME       Sender display name
    TRIPS_EMAIL_REPLY_TO        Reply-to address
    TRIPS_EMAIL_TEST_MODE       Redirect every send to the test recipient
    TRIPS_EMAIL_TEST_RECIPIENT  Address used in test mode
    TRIPS_SES_REGION            AWS region for SES
    TRIPS_SES_CONFIGURATION_SET SES configuration set (optional)
"""

import os
from dataclasses import dataclass
from datetime import date, time
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.conf import settings

from .exceptions import ConfigurationError

DEFAULT_TIMEZONE = "America/Los_Angeles"
DEFAULT_OPEN_TIME = "07:00"
DEFAULT_ADVANCE_DAYS = 180
DEFAULT_SEASON_START = "06-01"
DEFAULT_SEASON_END = "08-14"

EMAIL_PROVIDERS = ("console", "django", "ses")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_setting(name: str, env_var: str | None = None, default: Any = None) -> Any:
    """Get a setting value, falling back to an environment variable, then default."""
    value = getattr(settings, name, None)
    if value not in (None, ""):
        return value

    if env_var:
        env_value = os.environ.get(env_var, "")
        if env_value:
            return env_value

    return default


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def get_civil_timezone() -> ZoneInfo:
    """Return the civil timezone all permit open times are defined in."""
    name = get_setting("TRIPS_TIMEZONE", "TRIPS_TIMEZONE", DEFAULT_TIMEZONE)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"TRIPS_TIMEZONE {name!r} is not a valid IANA timezone") from e


def get_default_open_time() -> time:
    """Return the wall-clock open time used when a destination sets none."""
    from .civil_time import parse_clock

    value = get_setting("TRIPS_DEFAULT_OPEN_TIME", default=DEFAULT_OPEN_TIME)
    if isinstance(value, time):
        return value
    try:
        return parse_clock(value)
    except ValueError as e:
        raise ConfigurationError(f"TRIPS_DEFAULT_OPEN_TIME {value!r} is not HH:MM") from e


def get_default_advance_days() -> int:
    """Return the advance-day count assumed for rolling permits without one."""
    value = get_setting("TRIPS_DEFAULT_ADVANCE_DAYS", default=DEFAULT_ADVANCE_DAYS)
    try:
        days = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"TRIPS_DEFAULT_ADVANCE_DAYS {value!r} is not an integer") from e
    if days < 0:
        raise ConfigurationError("TRIPS_DEFAULT_ADVANCE_DAYS cannot be negative")
    return days


def get_season_bounds(year: int) -> tuple[date, date]:
    """Return the (first, last) calendar dates a trip may occupy in a season.

    Raises:
        ConfigurationError: If a bound is malformed or the season is empty
    """
    from .civil_time import parse_month_day

    bounds = []
    for name, default in (
        ("TRIPS_SEASON_START", DEFAULT_SEASON_START),
        ("TRIPS_SEASON_END", DEFAULT_SEASON_END),
    ):
        value = get_setting(name, default=default)
        try:
            month, day = parse_month_day(value)
        except ValueError as e:
            raise ConfigurationError(f"{name} {value!r} is not MM-DD") from e
        if month == 2 and day == 29 and not _is_leap(year):
            day = 28
        bounds.append(date(year, month, day))

    start, end = bounds
    if end < start:
        raise ConfigurationError("TRIPS_SEASON_END falls before TRIPS_SEASON_START")
    return start, end


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@dataclass(frozen=True)
class EmailConfig:
    """Resolved email configuration.

    Attributes:
        provider: Provider key (console, django, ses)
        from_email: Sender address
        from_name: Sender display name
        reply_to: Reply-to address, blank for none
        test_mode: When True every send goes to test_recipient instead
        test_recipient: Address used in test mode
        ses_region: AWS region for the SES provider
        ses_configuration_set: SES configuration set, blank for none
    """

    provider: str
    from_email: str
    from_name: str = ""
    reply_to: str = ""
    test_mode: bool = False
    test_recipient: str = ""
    ses_region: str = "us-east-1"
    ses_configuration_set: str = ""

    @property
    def from_header(self) -> str:
        if self.from_name:
            return f"{self.from_name} <{self.from_email}>"
        return self.from_email


def get_email_config() -> EmailConfig:
    """Build the EmailConfig from settings and environment.

    Raises:
        ConfigurationError: If the provider is unknown or no sender is configured
    """
    provider = get_setting("TRIPS_EMAIL_PROVIDER", "TRIPS_EMAIL_PROVIDER", "console")
    if provider not in EMAIL_PROVIDERS:
        raise ConfigurationError(
            f"Unknown TRIPS_EMAIL_PROVIDER {provider!r}. Choose one of: {', '.join(EMAIL_PROVIDERS)}"
        )

    from_email = get_setting(
        "TRIPS_EMAIL_FROM",
        "TRIPS_EMAIL_FROM",
        getattr(settings, "DEFAULT_FROM_EMAIL", ""),
    )
    if not from_email:
        raise ConfigurationError("TRIPS_EMAIL_FROM is required to send reminders")

    return EmailConfig(
        provider=provider,
        from_email=from_email,
        from_name=get_setting("TRIPS_EMAIL_FROM_NAME", default="Trip Planner"),
        reply_to=get_setting("TRIPS_EMAIL_REPLY_TO", default=""),
        test_mode=_as_bool(get_setting("TRIPS_EMAIL_TEST_MODE", "EMAIL_TEST_MODE", False)),
        test_recipient=get_setting("TRIPS_EMAIL_TEST_RECIPIENT", "EMAIL_TEST_RECIPIENT", ""),
        ses_region=get_setting("TRIPS_SES_REGION", "AWS_SES_REGION", "us-east-1"),
        ses_configuration_set=get_setting("TRIPS_SES_CONFIGURATION_SET", default=""),
    )
