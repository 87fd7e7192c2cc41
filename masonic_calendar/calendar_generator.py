"""Generate a year of lodge events."""

import logging

from masonic_calendar.constants import MAX_YEAR, MIN_YEAR
from masonic_calendar.exceptions import InvalidYearError
from masonic_calendar.models.calendar import Calendar
from masonic_calendar.models.event import CalendarEvent
from masonic_calendar.processing.bank_holidays import bank_holidays
from masonic_calendar.processing.calendar_merger import merge_events
from masonic_calendar.processing.degree_assigner import apply_recess_and_degrees
from masonic_calendar.processing.meetings import manual_events, recurring_events
from masonic_calendar.processing.weekdays import monday_slots

logger = logging.getLogger(__name__)


def validate_year(year: int) -> int:
    """Reject years that datetime.date cannot represent.

    Raises:
        InvalidYearError: If the year is outside 1-9999
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(
            f"Year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}"
        )
    return year


def generate(year: int) -> list[CalendarEvent]:
    """
    Build every event of a year, sorted by date.

    Every Monday is seeded first, then bank holidays, lodge meetings with
    their officers nights and the LoI AGM are merged in by date. A final
    sweep closes the August recess and fills the remaining Mondays with the
    degree rotation.

    Args:
        year: Gregorian year

    Returns:
        One event per date, ascending
    """
    baseline = monday_slots(year)
    special = [
        *bank_holidays(year),
        *recurring_events(year),
        *manual_events(year),
    ]
    merged = merge_events(baseline, special)
    events = apply_recess_and_degrees(merged)
    logger.debug(
        f"Generated {len(events)} events for {year} "
        f"({len(baseline)} Mondays, {len(special)} special)"
    )
    return events


def generate_calendar(year: int) -> Calendar:
    """Generate a year wrapped in a Calendar model."""
    return Calendar(year=year, events=generate(year))
