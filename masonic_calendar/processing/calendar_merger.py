"""Date-keyed merging of special events into the Monday baseline."""

import logging
from datetime import date
from typing import Iterable

from masonic_calendar.models.event import CalendarEvent, EventType

logger = logging.getLogger(__name__)


def _join(first: str | None, second: str | None, separator: str) -> str | None:
    parts = [p for p in (first, second) if p]
    return separator.join(parts) if parts else None


def merge_pair(existing: CalendarEvent, incoming: CalendarEvent) -> CalendarEvent:
    """Combine two events that share a date.

    The existing record keeps its id and meeting flag. A bank holiday keeps
    its type and gains the incoming label after " & ". Any other claimed
    date takes the incoming type with labels joined by " / ". An unclaimed
    Monday is simply taken over by the incoming event.
    """
    time = incoming.time or existing.time

    if existing.type == EventType.BANK_HOLIDAY:
        return existing.model_copy(
            update={
                "label": f"{existing.label} & {incoming.label}",
                "type": EventType.BANK_HOLIDAY,
                "description": _join(existing.description, incoming.description, ". "),
                "time": time,
            }
        )

    if existing.type != EventType.MONDAY or existing.label:
        return existing.model_copy(
            update={
                "label": f"{existing.label} / {incoming.label}",
                "type": incoming.type,
                "description": _join(existing.description, incoming.description, " | "),
                "time": time,
            }
        )

    return existing.model_copy(
        update={
            "label": incoming.label,
            "type": incoming.type,
            "description": incoming.description or existing.description,
            "time": time,
        }
    )


def merge_events(
    baseline: Iterable[CalendarEvent], special: Iterable[CalendarEvent]
) -> list[CalendarEvent]:
    """Merge special events into the baseline so each date holds one event.

    Args:
        baseline: Bare Monday slots
        special: Holiday, meeting and manual events, applied in order

    Returns:
        Merged events sorted by date
    """
    by_date: dict[date, CalendarEvent] = {e.date: e for e in baseline}

    for event in special:
        existing = by_date.get(event.date)
        if existing is None:
            by_date[event.date] = event
            continue
        if existing.label:
            logger.debug(
                f"Merging '{event.label}' into '{existing.label}' on {event.date}"
            )
        by_date[event.date] = merge_pair(existing, event)

    return sorted(by_date.values(), key=lambda e: e.date)
