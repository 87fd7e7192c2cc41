"""ICS export of generated events."""

from datetime import datetime, time, timedelta, timezone
from pathlib import Path
from typing import Iterable

from icalendar import Calendar as ICalendar
from icalendar import Event

from masonic_calendar.constants import (
    ICS_DEFAULT_TIME,
    ICS_EVENT_DURATION_HOURS,
    PRODID,
    UID_DOMAIN,
)
from masonic_calendar.exceptions import ExportError
from masonic_calendar.models.calendar import Calendar
from masonic_calendar.models.event import CalendarEvent


def _start_datetime(event: CalendarEvent) -> datetime:
    """Wall-clock start written as UTC, 09:00 when no time is scheduled."""
    start = event.start_time or time.fromisoformat(ICS_DEFAULT_TIME)
    return datetime.combine(event.date, start, tzinfo=timezone.utc)


def build_ical(
    events: Iterable[CalendarEvent], dtstamp: datetime | None = None
) -> ICalendar:
    """
    Convert events into an iCalendar object.

    Events with an empty label are skipped.

    Args:
        events: Generated events
        dtstamp: Timestamp written to every VEVENT (defaults to now, UTC)

    Returns:
        An icalendar.Calendar object containing the labelled events
    """
    if dtstamp is None:
        dtstamp = datetime.now(timezone.utc).replace(microsecond=0)

    cal = ICalendar()
    cal.add("version", "2.0")
    cal.add("prodid", PRODID)
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")

    for event_model in events:
        if not event_model.label:
            continue

        start = _start_datetime(event_model)

        event = Event()
        event.add("uid", f"{event_model.id}@{UID_DOMAIN}")
        event.add("dtstamp", dtstamp)
        event.add("dtstart", start)
        event.add("dtend", start + timedelta(hours=ICS_EVENT_DURATION_HOURS))
        event.add("summary", event_model.label)
        if event_model.description:
            event.add("description", event_model.description)

        cal.add_component(event)

    return cal


def to_ics(events: Iterable[CalendarEvent], dtstamp: datetime | None = None) -> str:
    """Serialize events to VCALENDAR text with CRLF line endings."""
    return build_ical(events, dtstamp=dtstamp).to_ical().decode("utf-8")


class ICSWriter:
    """Writer for ICS calendar files."""

    def __init__(self, dtstamp: datetime | None = None):
        self.dtstamp = dtstamp

    def write(self, calendar: Calendar, path: Path) -> None:
        """Write calendar to ICS file.

        Args:
            calendar: Generated calendar to write
            path: Path to write ICS file

        Raises:
            ExportError: If the file could not be written
        """
        ical_content = build_ical(calendar.events, dtstamp=self.dtstamp).to_ical()

        try:
            with open(path, "wb") as f:
                f.write(ical_content)
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}") from e

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"
