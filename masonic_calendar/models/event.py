"""Event model with Pydantic v2 validation."""

import re
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class EventType(str, Enum):
    """Event type enumeration."""

    MONDAY = "MONDAY"
    BANK_HOLIDAY = "BANK_HOLIDAY"
    MEETING_ALDENHAM = "MEETING_ALDENHAM"
    MEETING_RADLETT = "MEETING_RADLETT"
    MEETING_ELSTREE = "MEETING_ELSTREE"
    OFFICERS_ALDENHAM = "OFFICERS_ALDENHAM"
    OFFICERS_RADLETT = "OFFICERS_RADLETT"
    OFFICERS_ELSTREE = "OFFICERS_ELSTREE"
    RECESS = "RECESS"


def epoch_millis(day: date) -> int:
    """Milliseconds since the epoch for midnight UTC on ``day``."""
    midnight = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def make_event_id(prefix: str, day: date) -> str:
    """Build a deterministic event id from its source prefix and date."""
    return f"{prefix}-{epoch_millis(day)}"


class CalendarEvent(BaseModel):
    """A single dated entry of a generated year.

    An empty ``label`` marks a Monday that nothing has claimed yet.
    """

    id: str
    date: date
    label: str = ""
    type: EventType = EventType.MONDAY
    is_meeting: bool = False
    time: Optional[str] = None
    description: Optional[str] = None

    class Config:
        """Pydantic config."""

        frozen = True

    @field_validator("time", mode="before")
    @classmethod
    def normalize_time(cls, v):
        """Accept HH:MM strings or time objects."""
        if v is None:
            return None
        if isinstance(v, time):
            return v.strftime("%H:%M")
        if isinstance(v, str) and _TIME_PATTERN.match(v):
            return v
        raise ValueError(f"Invalid time format: {v}")

    @property
    def is_monday(self) -> bool:
        return self.date.weekday() == 0

    @property
    def start_time(self) -> Optional[time]:
        """Scheduled time of day, if any."""
        if self.time is None:
            return None
        hours, minutes = self.time.split(":")
        return time(int(hours), int(minutes))
