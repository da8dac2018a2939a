"""Permit reminder email rendering.

Builds the subject, plain text and HTML bodies for one PermitReminder from
the templates under ``django_trips/email/``. All dates shown to members are
formatted in the civil timezone.
"""

from dataclasses import dataclass
from datetime import timedelta

from django.template.loader import render_to_string
from django.utils import timezone

from .civil_time import calendar_days_between, format_local, to_local

TEST_SUBJECT_PREFIX = "[TEST] "
TEXT_TEMPLATE = "django_trips/email/permit_reminder.txt"
HTML_TEMPLATE = "django_trips/email/permit_reminder.html"

# Members are told to be online this long before the window opens.
BE_ONLINE_LEAD = timedelta(minutes=5)


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    body_text: str
    body_html: str


def format_trip_dates(start_date, end_date=None) -> str:
    """Format a trip range, e.g. "July 15-19, 2026".

    Returns "TBD" when the trip has no start date yet.
    """
    if start_date is None:
        return "TBD"
    start = f"{start_date:%B} {start_date.day}"
    if end_date is None or end_date == start_date:
        return f"{start}, {start_date.year}"
    if end_date.year != start_date.year:
        return f"{start}, {start_date.year}-{end_date:%B} {end_date.day}, {end_date.year}"
    if end_date.month != start_date.month:
        return f"{start}-{end_date:%B} {end_date.day}, {start_date.year}"
    return f"{start}-{end_date.day}, {start_date.year}"


def describe_days_until(days: int) -> str:
    if days <= 0:
        return "TODAY"
    if days == 1:
        return "TOMORROW"
    return f"in {days} days"


def describe_opening(days_until_open: int, already_open: bool = False) -> str:
    """Headline phrase, e.g. "open TOMORROW" or "are open now" once the window has passed."""
    if already_open:
        return "are open now"
    return f"open {describe_days_until(days_until_open)}"


def build_subject(
    destination_name: str,
    days_until_open: int,
    test_mode: bool = False,
    already_open: bool = False,
) -> str:
    subject = f"Permits for {destination_name} {describe_opening(days_until_open, already_open)}!"
    if test_mode:
        subject = TEST_SUBJECT_PREFIX + subject
    return subject


def build_context(reminder, now=None) -> dict:
    """Template context for a reminder email.

    Args:
        reminder: PermitReminder with trip and destination loaded
        now: Send instant used for the "days until open" wording

    Returns:
        Dict consumed by both the text and HTML templates
    """
    now = now or timezone.now()
    destination = reminder.destination
    trip = reminder.trip
    days_until_open = calendar_days_between(now, reminder.permit_open_at)
    already_open = reminder.permit_open_at < now
    be_online = to_local(reminder.permit_open_at - BE_ONLINE_LEAD)

    return {
        "destination": destination,
        "destination_name": destination.name,
        "region": destination.region,
        "permit_url": destination.permit_url,
        "permit_notes": destination.permit_notes,
        "permit_cost": destination.permit_cost,
        "distance_miles": destination.distance_miles,
        "elevation_gain_ft": destination.elevation_gain_ft,
        "peak_elevation_ft": destination.peak_elevation_ft,
        "permit_open_display": format_local(reminder.permit_open_at),
        "be_online_display": f"{be_online.hour % 12 or 12}:{be_online:%M} {be_online:%p} {be_online.tzname()}",
        "trip_dates_display": format_trip_dates(
            trip.final_start_date or reminder.target_trip_date,
            trip.final_end_date,
        ),
        "days_until_open": days_until_open,
        "days_until_display": describe_days_until(days_until_open),
        "already_open": already_open,
        "opening_display": describe_opening(days_until_open, already_open),
    }


def render_permit_reminder(reminder, now=None, test_mode: bool = False) -> RenderedEmail:
    """Render subject and bodies for one permit reminder."""
    context = build_context(reminder, now=now)
    context["test_mode"] = test_mode
    return RenderedEmail(
        subject=build_subject(
            reminder.destination.name,
            context["days_until_open"],
            test_mode,
            already_open=context["already_open"],
        ),
        body_text=render_to_string(TEXT_TEMPLATE, context),
        body_html=render_to_string(HTML_TEMPLATE, context),
    )
