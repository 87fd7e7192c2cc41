"""Summer recess and Lodge of Instruction degree rotation."""

from typing import Iterable

from masonic_calendar.constants import (
    DEGREES,
    EVENING_TIME,
    RECESS_DESCRIPTION,
    RECESS_FIRST_DAY,
    RECESS_LABEL,
    RECESS_LAST_DAY,
    RECESS_MONTH,
)
from masonic_calendar.models.event import CalendarEvent, EventType


def in_recess(event: CalendarEvent) -> bool:
    """True for Mondays inside the August closure window."""
    day = event.date
    return (
        event.is_monday
        and day.month == RECESS_MONTH
        and RECESS_FIRST_DAY <= day.day <= RECESS_LAST_DAY
    )


def close_for_recess(event: CalendarEvent) -> CalendarEvent:
    """Overwrite an event as a recess closure, whatever it held before."""
    return event.model_copy(
        update={
            "label": RECESS_LABEL,
            "description": RECESS_DESCRIPTION,
            "type": EventType.RECESS,
            "time": None,
            "is_meeting": False,
        }
    )


def assign_degree(event: CalendarEvent, degree: str) -> CalendarEvent:
    return event.model_copy(
        update={
            "label": degree,
            "time": EVENING_TIME,
            "description": f"Lodge of Instruction - Practice for {degree}",
        }
    )


def apply_recess_and_degrees(events: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    """Single forward sweep over date-sorted events.

    Recess Mondays are closed and do not advance the rotation. Every other
    Monday that is still unlabelled gets the next degree in the cycle.
    """
    result = []
    degree_index = 0

    for event in events:
        if in_recess(event):
            result.append(close_for_recess(event))
            continue

        if event.is_monday and not event.label:
            result.append(assign_degree(event, DEGREES[degree_index]))
            degree_index = (degree_index + 1) % len(DEGREES)
            continue

        result.append(event)

    return result
