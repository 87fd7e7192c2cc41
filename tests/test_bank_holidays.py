"""Tests for bank holiday computation."""

from datetime import date

import pytest

from masonic_calendar.models.event import EventType, make_event_id
from masonic_calendar.processing.bank_holidays import (
    bank_holidays,
    easter_sunday,
    holiday_dates,
)


def labels_by_date(year):
    return {day: label for day, label in holiday_dates(year)}


@pytest.mark.parametrize(
    "year,expected",
    [
        (1583, date(1583, 4, 10)),
        (1818, date(1818, 3, 22)),
        (1943, date(1943, 4, 25)),
        (2000, date(2000, 4, 23)),
        (2019, date(2019, 4, 21)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 5)),
        (2038, date(2038, 4, 25)),
        (2285, date(2285, 3, 22)),
    ],
)
def test_easter_sunday(year, expected):
    """Known Easter Sunday dates."""
    assert easter_sunday(year) == expected


def test_easter_monday_2026():
    """Easter Monday 2026 is 6 April."""
    assert labels_by_date(2026)[date(2026, 4, 6)] == "Easter Monday"


def test_easter_monday_2024():
    """Easter Monday 2024 is 1 April."""
    assert labels_by_date(2024)[date(2024, 4, 1)] == "Easter Monday"


def test_holidays_2026():
    """Full 2026 set: New Year on a Thursday produces nothing."""
    assert holiday_dates(2026) == [
        (date(2026, 4, 6), "Easter Monday"),
        (date(2026, 5, 4), "Early May Bank Holiday"),
        (date(2026, 5, 25), "Spring Bank Holiday"),
        (date(2026, 8, 31), "August Bank Holiday"),
        (date(2026, 12, 28), "Boxing Day (Sub)"),
    ]


def test_new_year_saturday_substitute():
    """1 January 2028 is a Saturday, observed on the 3rd."""
    assert labels_by_date(2028)[date(2028, 1, 3)] == "New Year's Day (Sub)"


def test_new_year_sunday_substitute():
    """1 January 2023 is a Sunday, observed on the 2nd."""
    assert labels_by_date(2023)[date(2023, 1, 2)] == "New Year's Day (Sub)"


def test_new_year_monday():
    """1 January 2029 is a Monday."""
    assert labels_by_date(2029)[date(2029, 1, 1)] == "New Year's Day"


def test_new_year_midweek_produces_nothing():
    """New Year's Day on Tuesday to Friday yields no event."""
    labels = labels_by_date(2026).values()
    assert not any("New Year" in label for label in labels)


def test_christmas_on_monday():
    """Christmas 2028 is a Monday; Boxing Day on Tuesday is not emitted."""
    labels = labels_by_date(2028)
    assert labels[date(2028, 12, 25)] == "Christmas Day"
    assert date(2028, 12, 26) not in labels


def test_boxing_day_on_monday():
    """Christmas 2022 is a Sunday: only Boxing Day on the Monday."""
    labels = labels_by_date(2022)
    assert labels[date(2022, 12, 26)] == "Boxing Day"
    assert date(2022, 12, 27) not in labels


def test_christmas_saturday_substitute():
    """Christmas 2027 is a Saturday, substitute on the 27th."""
    labels = labels_by_date(2027)
    assert labels[date(2027, 12, 27)] == "Christmas Day (Sub)"
    assert date(2027, 12, 28) not in labels


def test_christmas_friday_substitute():
    """Christmas 2026 is a Friday, Boxing Day substitute on the 28th."""
    assert labels_by_date(2026)[date(2026, 12, 28)] == "Boxing Day (Sub)"


def test_spring_and_august_last_mondays():
    """Last Mondays of May and August."""
    labels = labels_by_date(2025)
    assert labels[date(2025, 5, 26)] == "Spring Bank Holiday"
    assert labels[date(2025, 8, 25)] == "August Bank Holiday"


def test_all_holidays_fall_on_mondays():
    """Every rule resolves to a Monday."""
    for year in range(2000, 2051):
        for day, _ in holiday_dates(year):
            assert day.weekday() == 0, (year, day)


def test_bank_holiday_events():
    """Holiday events carry type, description and a date-derived id."""
    events = bank_holidays(2026)
    assert len(events) == 5
    easter = events[0]
    assert easter.type == EventType.BANK_HOLIDAY
    assert easter.is_meeting is False
    assert easter.description == "National Bank Holiday"
    assert easter.time is None
    assert easter.id == make_event_id("bh", date(2026, 4, 6))
