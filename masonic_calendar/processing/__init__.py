"""Processing stages of the calendar generator."""

from masonic_calendar.processing.bank_holidays import bank_holidays, easter_sunday
from masonic_calendar.processing.calendar_merger import merge_events, merge_pair
from masonic_calendar.processing.degree_assigner import apply_recess_and_degrees
from masonic_calendar.processing.meetings import (
    MEETING_RULES,
    manual_events,
    recurring_events,
)
from masonic_calendar.processing.weekdays import (
    first_monday,
    monday_slots,
    nth_weekday_of_month,
    preceding_monday,
)

__all__ = [
    "MEETING_RULES",
    "apply_recess_and_degrees",
    "bank_holidays",
    "easter_sunday",
    "first_monday",
    "manual_events",
    "merge_events",
    "merge_pair",
    "monday_slots",
    "nth_weekday_of_month",
    "preceding_monday",
    "recurring_events",
]
