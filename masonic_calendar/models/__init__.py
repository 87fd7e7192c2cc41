"""Pydantic models for the masonic calendar."""

from masonic_calendar.models.calendar import Calendar
from masonic_calendar.models.event import (
    CalendarEvent,
    EventType,
    epoch_millis,
    make_event_id,
)
from masonic_calendar.models.rules import Lodge, RecurrenceRule

__all__ = [
    "Calendar",
    "CalendarEvent",
    "EventType",
    "Lodge",
    "RecurrenceRule",
    "epoch_millis",
    "make_event_id",
]
