"""iCalendar attachment for permit reminder emails.

The event lasts 15 minutes and ends at the permit-open instant, so
calendar clients alert members while there is still time to log in.
"""

import re
from datetime import datetime, timedelta
from datetime import timezone as dt_timezone

from django.utils import timezone

from .providers.base import EmailAttachment

PRODID = "-//django-trips//Permit Reminder//EN"
EVENT_LEAD = timedelta(minutes=15)
DEFAULT_BOOKING_URL = "https://www.recreation.gov"
ICS_MIMETYPE = "text/calendar"


def _format_ics_datetime(dt: datetime) -> str:
    return dt.astimezone(dt_timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def escape_text(value: str) -> str:
    """Escape an iCalendar TEXT value."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def build_permit_reminder_ics(destination, permit_open_at: datetime, now=None) -> str:
    """Build a VCALENDAR with one event ending when permits open.

    Two display alarms fire at the event start and five minutes before
    the window opens.
    """
    now = now or timezone.now()
    name = escape_text(destination.name)
    url = destination.permit_url or DEFAULT_BOOKING_URL
    description = escape_text(
        f"Permits for {destination.name} are opening!\n\n"
        f"Go to {url} to secure your spot.\n\n"
        "Tips:\n"
        "- Log in to the booking site in advance\n"
        "- Have payment info ready\n"
        "- Know your group size and entry date"
    )
    uid = f"permit-{destination.pk}-{int(permit_open_at.timestamp())}@django-trips"

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"DTSTAMP:{_format_ics_datetime(now)}",
        f"DTSTART:{_format_ics_datetime(permit_open_at - EVENT_LEAD)}",
        f"DTEND:{_format_ics_datetime(permit_open_at)}",
        f"SUMMARY:Permits Open - {name}",
        f"DESCRIPTION:{description}",
        f"URL:{url}",
        "BEGIN:VALARM",
        "TRIGGER:PT0M",
        "ACTION:DISPLAY",
        f"DESCRIPTION:Permits opening in 15 minutes for {name}!",
        "END:VALARM",
        "BEGIN:VALARM",
        "TRIGGER:PT10M",
        "ACTION:DISPLAY",
        f"DESCRIPTION:Permits opening in 5 minutes for {name}!",
        "END:VALARM",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\r\n".join(lines) + "\r\n"


def ics_filename(destination_name: str) -> str:
    """File name for the attachment, e.g. "permit-reminder-east-lake.ics"."""
    slug = re.sub(r"[^a-z0-9]+", "-", destination_name.lower()).strip("-")
    return f"permit-reminder-{slug or 'destination'}.ics"


def permit_reminder_attachment(reminder, now=None) -> EmailAttachment:
    content = build_permit_reminder_ics(reminder.destination, reminder.permit_open_at, now=now)
    return EmailAttachment(
        filename=ics_filename(reminder.destination.name),
        content=content.encode("utf-8"),
        mimetype=ICS_MIMETYPE,
    )
