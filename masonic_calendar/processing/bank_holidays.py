"""UK bank holidays as they affect lodge Mondays.

Only the holidays that can land on (or be observed on) a Monday are
produced. New Year's Day falling Tuesday to Friday yields no event, and
Christmas/Boxing Day only produce an event on an exact Monday match or the
Friday/Saturday substitutions.
"""

import logging
from datetime import date, timedelta

from masonic_calendar.constants import BANK_HOLIDAY_DESCRIPTION
from masonic_calendar.models.event import CalendarEvent, EventType, make_event_id
from masonic_calendar.processing.weekdays import (
    MONDAY,
    js_weekday,
    last_weekday_on_or_before,
    nth_weekday_of_month,
)

logger = logging.getLogger(__name__)

SUNDAY = 0
FRIDAY = 5
SATURDAY = 6


def easter_sunday(year: int) -> date:
    """Easter Sunday by the anonymous Gregorian (Meeus/Jones/Butcher) algorithm.

    Valid for 1583 to 4099; other years still return a date but it carries
    no ecclesiastical meaning.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def _new_years_day(year: int) -> list[tuple[date, str]]:
    jan1 = date(year, 1, 1)
    weekday = js_weekday(jan1)
    if weekday == SATURDAY:
        return [(date(year, 1, 3), "New Year's Day (Sub)")]
    if weekday == SUNDAY:
        return [(date(year, 1, 2), "New Year's Day (Sub)")]
    if weekday == MONDAY:
        return [(jan1, "New Year's Day")]
    return []


def _christmas(year: int) -> list[tuple[date, str]]:
    christmas = date(year, 12, 25)
    boxing = date(year, 12, 26)
    holidays = []
    if js_weekday(christmas) == MONDAY:
        holidays.append((christmas, "Christmas Day"))
    if js_weekday(boxing) == MONDAY:
        holidays.append((boxing, "Boxing Day"))
    if js_weekday(christmas) == FRIDAY:
        holidays.append((date(year, 12, 28), "Boxing Day (Sub)"))
    if js_weekday(christmas) == SATURDAY:
        holidays.append((date(year, 12, 27), "Christmas Day (Sub)"))
    return holidays


def holiday_dates(year: int) -> list[tuple[date, str]]:
    """Resolved (date, label) pairs in rule order."""
    holidays = _new_years_day(year)

    holidays.append((easter_sunday(year) + timedelta(days=1), "Easter Monday"))

    early_may = nth_weekday_of_month(year, 4, MONDAY, 1)
    if early_may:
        holidays.append((early_may, "Early May Bank Holiday"))

    holidays.append(
        (last_weekday_on_or_before(date(year, 5, 31), MONDAY), "Spring Bank Holiday")
    )
    holidays.append(
        (last_weekday_on_or_before(date(year, 8, 31), MONDAY), "August Bank Holiday")
    )

    holidays.extend(_christmas(year))
    return holidays


def bank_holidays(year: int) -> list[CalendarEvent]:
    """Bank holiday events for a year."""
    events = [
        CalendarEvent(
            id=make_event_id("bh", day),
            date=day,
            label=label,
            type=EventType.BANK_HOLIDAY,
            is_meeting=False,
            description=BANK_HOLIDAY_DESCRIPTION,
        )
        for day, label in holiday_dates(year)
    ]
    logger.debug(f"{len(events)} bank holidays in {year}")
    return events
