"""Recurring lodge meetings, their officers nights, and fixed annual events."""

import logging

from masonic_calendar.constants import (
    EVENING_TIME,
    INSTALLATION_TIME,
    LOI_AGM_TIME,
    MEETING_TIME,
)
from masonic_calendar.models.event import CalendarEvent, EventType, make_event_id
from masonic_calendar.models.rules import Lodge, RecurrenceRule
from masonic_calendar.processing.weekdays import (
    first_monday,
    nth_weekday_of_month,
    preceding_monday,
)

logger = logging.getLogger(__name__)

THURSDAY = 4
WEDNESDAY = 3
SATURDAY = 6

MEETING_RULES: tuple[RecurrenceRule, ...] = (
    # Aldenham (Saturdays)
    RecurrenceRule.for_lodge(Lodge.ALDENHAM, month=0, nth=4, weekday=SATURDAY),
    RecurrenceRule.for_lodge(Lodge.ALDENHAM, month=2, nth=1, weekday=SATURDAY),
    RecurrenceRule.for_lodge(Lodge.ALDENHAM, month=4, nth=2, weekday=SATURDAY),
    RecurrenceRule.for_lodge(Lodge.ALDENHAM, month=8, nth=4, weekday=SATURDAY),
    RecurrenceRule.for_lodge(Lodge.ALDENHAM, month=10, nth=4, weekday=SATURDAY),
    # Radlett (Saturdays)
    RecurrenceRule.for_lodge(Lodge.RADLETT, month=1, nth=2, weekday=SATURDAY),
    RecurrenceRule.for_lodge(Lodge.RADLETT, month=3, nth=1, weekday=SATURDAY),
    RecurrenceRule.for_lodge(Lodge.RADLETT, month=6, nth=2, weekday=SATURDAY),
    RecurrenceRule.for_lodge(Lodge.RADLETT, month=8, nth=1, weekday=SATURDAY),
    RecurrenceRule.for_lodge(
        Lodge.RADLETT, month=11, nth=2, weekday=SATURDAY, installation=True
    ),
    # Elstree (Thursdays, December on a Wednesday)
    RecurrenceRule.for_lodge(Lodge.ELSTREE, month=2, nth=3, weekday=THURSDAY),
    RecurrenceRule.for_lodge(Lodge.ELSTREE, month=5, nth=3, weekday=THURSDAY),
    RecurrenceRule.for_lodge(
        Lodge.ELSTREE, month=9, nth=3, weekday=THURSDAY, installation=True
    ),
    RecurrenceRule.for_lodge(Lodge.ELSTREE, month=11, nth=3, weekday=WEDNESDAY),
)


def schedule_rule(year: int, rule: RecurrenceRule) -> list[CalendarEvent]:
    """Meeting and officers night for one rule, or nothing if the date doesn't exist."""
    meeting_date = nth_weekday_of_month(year, rule.month, rule.weekday, rule.nth)
    if meeting_date is None:
        logger.debug(
            f"No occurrence {rule.nth} of weekday {rule.weekday} "
            f"in month {rule.month + 1}/{year} for {rule.name}"
        )
        return []

    installation = rule.is_installation
    meeting = CalendarEvent(
        id=make_event_id("mtg", meeting_date),
        date=meeting_date,
        label=rule.name,
        type=rule.type,
        is_meeting=True,
        time=INSTALLATION_TIME if installation else MEETING_TIME,
        description=(
            "Annual Installation Meeting" if installation else "Regular Lodge Meeting"
        ),
    )

    lodge = rule.lodge_name
    officers = CalendarEvent(
        # Keyed by the meeting date so each rule owns a distinct id
        id=make_event_id("off1", meeting_date),
        date=preceding_monday(meeting_date, offset=1),
        label=f"Officers Night: {lodge}",
        type=rule.officer_type,
        is_meeting=False,
        time=EVENING_TIME,
        description=(
            f"Officers Night allocated to the {lodge} meeting. "
            "Rehearsal and Lodge of Instruction."
        ),
    )
    return [meeting, officers]


def recurring_events(
    year: int, rules: tuple[RecurrenceRule, ...] = MEETING_RULES
) -> list[CalendarEvent]:
    """Meetings and officers nights for every rule, in rule order."""
    events = []
    for rule in rules:
        events.extend(schedule_rule(year, rule))
    logger.debug(f"{len(events)} meeting and officers events in {year}")
    return events


def manual_events(year: int) -> list[CalendarEvent]:
    """Fixed annual one-off events."""
    agm_date = first_monday(year)
    return [
        CalendarEvent(
            id=make_event_id("manual-loi-agm", agm_date),
            date=agm_date,
            label="LoI AGM 8pm",
            type=EventType.MONDAY,
            is_meeting=False,
            time=LOI_AGM_TIME,
            description="Lodge of Instruction Annual General Meeting",
        )
    ]
