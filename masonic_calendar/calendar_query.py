"""Calendar query module for filtering and selecting events."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from masonic_calendar.calendar_generator import generate
from masonic_calendar.constants import MAX_YEAR, RECESS_LABEL
from masonic_calendar.models.calendar import Calendar
from masonic_calendar.models.event import CalendarEvent


class LodgeFilter(str, Enum):
    """Category filter applied to event labels."""

    ALL = "ALL"
    ALDENHAM = "ALDENHAM"
    RADLETT = "RADLETT"
    ELSTREE = "ELSTREE"
    LOI = "LOI"


@dataclass
class CalendarStatistics:
    """Headline counts for a set of events."""

    meetings: int
    loi: int
    officers: int


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day of the month."""
    if 3 < day < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def matches_lodge(event: CalendarEvent, lodge: LodgeFilter | str) -> bool:
    """True if the event belongs to the given category."""
    lodge = LodgeFilter(lodge)
    label = event.label
    if lodge == LodgeFilter.ALL:
        return True
    if lodge == LodgeFilter.LOI:
        return "LoI" in label or "Degree" in label or "Officers" in label
    return lodge.value.title() in label


def searchable_text(event: CalendarEvent) -> str:
    """Lower-cased text an event can be found by, including UK date forms."""
    day = event.date.day
    month = event.date.month
    month_name = event.date.strftime("%B")
    short_month = month_name[:3]
    suffix = ordinal_suffix(day)

    terms = [
        event.label,
        event.description,
        event.time,
        month_name,
        short_month,
        f"{day}",
        f"{day}{suffix}",
        f"{day}/{month}",
        f"{day}/{month}/{event.date.year}",
        f"{day:02d}/{month:02d}",
        f"{day} {month_name}",
        f"{day}{suffix} {month_name}",
        f"{day} {short_month}",
        f"{day}{suffix} {short_month}",
    ]
    return " ".join(t for t in terms if t).lower()


class CalendarQuery:
    """Filter and select events from a generated calendar."""

    def __init__(self, calendar: Calendar | list[CalendarEvent]):
        """Initialize with a calendar or a list of events.

        Args:
            calendar: Calendar (or events) to query.
        """
        events = calendar.events if isinstance(calendar, Calendar) else calendar
        self.events = sorted(events, key=lambda e: e.date)

    def search(
        self, term: str | None = None, lodge: LodgeFilter | str = LodgeFilter.ALL
    ) -> list[CalendarEvent]:
        """Search events by text and lodge category.

        Text search is case-insensitive and matches labels, descriptions,
        times, month names and UK-style dates ("15th Aug", "15/8/2026").
        Both criteria are combined with AND logic.

        Args:
            term: Text to search for. Empty or None matches everything.
            lodge: Category filter.

        Returns:
            Matching events, sorted by date.
        """
        needle = (term or "").strip().lower()
        return [
            e
            for e in self.events
            if (not needle or needle in searchable_text(e)) and matches_lodge(e, lodge)
        ]

    def on_date(self, target: date) -> list[CalendarEvent]:
        """Get events on a specific date."""
        return [e for e in self.events if e.date == target]

    def date_range(self, start: date, end: date) -> list[CalendarEvent]:
        """Get events within a date range (inclusive)."""
        return [e for e in self.events if start <= e.date <= end]

    def by_month(self) -> list[list[CalendarEvent]]:
        """Events grouped into twelve lists, January first."""
        grouped: list[list[CalendarEvent]] = [[] for _ in range(12)]
        for event in self.events:
            grouped[event.date.month - 1].append(event)
        return grouped

    def upcoming(self, ref_date: date | None = None) -> CalendarEvent | None:
        """Next labelled event on or after the reference date, skipping closures.

        Args:
            ref_date: Reference date (defaults to today).

        Returns:
            The next event, or None if the year has nothing left.
        """
        start = ref_date or date.today()
        for event in self.events:
            if event.date >= start and event.label and RECESS_LABEL not in event.label:
                return event
        return None

    def statistics(self, events: list[CalendarEvent] | None = None) -> CalendarStatistics:
        """Count meetings, LoI evenings and officers nights.

        Args:
            events: Subset to count (defaults to all events).
        """
        events = self.events if events is None else events
        return CalendarStatistics(
            meetings=sum(1 for e in events if e.is_meeting),
            loi=sum(1 for e in events if "Degree" in e.label or "AGM" in e.label),
            officers=sum(1 for e in events if "Officers" in e.label),
        )


def find_next_event(ref_date: date | None = None) -> CalendarEvent | None:
    """Next labelled event from a date, looking into the following year if needed."""
    start = ref_date or date.today()
    event = CalendarQuery(generate(start.year)).upcoming(start)
    if event is None and start.year < MAX_YEAR:
        event = CalendarQuery(generate(start.year + 1)).upcoming(start)
    return event
