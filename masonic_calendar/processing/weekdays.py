"""Weekday arithmetic and the baseline Monday slots of a year."""

from calendar import monthrange
from datetime import date, timedelta

from masonic_calendar.models.event import CalendarEvent, EventType, make_event_id

MONDAY = 1
ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(weeks=1)


def js_weekday(day: date) -> int:
    """Weekday numbered 0 = Sunday through 6 = Saturday."""
    return day.isoweekday() % 7


def first_monday(year: int) -> date:
    """First Monday on or after 1 January."""
    day = date(year, 1, 1)
    while js_weekday(day) != MONDAY:
        day += ONE_DAY
    return day


def nth_weekday_of_month(year: int, month: int, weekday: int, nth: int) -> date | None:
    """Date of the nth ``weekday`` in a month, or None if the month has fewer.

    Args:
        year: Gregorian year
        month: Month index, 0 = January
        weekday: 0 = Sunday through 6 = Saturday
        nth: Occurrence to find, starting at 1

    Returns:
        The matching date, or None when the occurrence spills into the next month
    """
    first = date(year, month + 1, 1)
    day = 1 + (weekday - js_weekday(first)) % 7 + (nth - 1) * 7
    if day > monthrange(year, month + 1)[1]:
        return None
    return first.replace(day=day)


def last_weekday_on_or_before(day: date, weekday: int) -> date:
    """Walk backwards from ``day`` until ``weekday`` is reached."""
    while js_weekday(day) != weekday:
        day -= ONE_DAY
    return day


def preceding_monday(day: date, offset: int = 1) -> date:
    """Monday at or before ``day``, moved back ``offset - 1`` further weeks."""
    monday = last_weekday_on_or_before(day, MONDAY)
    return monday - (offset - 1) * ONE_WEEK


def mondays(year: int) -> list[date]:
    """Every Monday of the year in ascending order."""
    result = []
    day = first_monday(year)
    last = date(year, 12, 31)
    while day <= last:
        result.append(day)
        if day > last - ONE_WEEK:
            break
        day += ONE_WEEK
    return result


def monday_slots(year: int) -> list[CalendarEvent]:
    """Bare, unlabelled Monday events that every rule is later merged into."""
    return [
        CalendarEvent(id=make_event_id("mon", day), date=day, type=EventType.MONDAY)
        for day in mondays(year)
    ]
