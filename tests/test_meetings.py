"""Tests for recurring meetings, officers nights and manual events."""

from datetime import date

from masonic_calendar.models.event import EventType, make_event_id
from masonic_calendar.models.rules import Lodge, RecurrenceRule
from masonic_calendar.processing.meetings import (
    MEETING_RULES,
    manual_events,
    recurring_events,
    schedule_rule,
)


def test_rule_table_shape():
    """Five Aldenham, five Radlett and four Elstree rules."""
    assert len(MEETING_RULES) == 14
    counts = {}
    for rule in MEETING_RULES:
        counts[rule.type] = counts.get(rule.type, 0) + 1
    assert counts == {
        EventType.MEETING_ALDENHAM: 5,
        EventType.MEETING_RADLETT: 5,
        EventType.MEETING_ELSTREE: 4,
    }


def test_installation_rules():
    """Radlett December and Elstree October are installations."""
    installations = [(r.name, r.month) for r in MEETING_RULES if r.is_installation]
    assert installations == [
        ("Radlett Meeting (Installation)", 11),
        ("Elstree Meeting (Installation)", 9),
    ]


def test_regular_meeting_event():
    """Aldenham meets on the 1st Saturday of March 2026."""
    rule = MEETING_RULES[1]
    meeting, officers = schedule_rule(2026, rule)

    assert meeting.date == date(2026, 3, 7)
    assert meeting.label == "Aldenham Meeting"
    assert meeting.type == EventType.MEETING_ALDENHAM
    assert meeting.is_meeting is True
    assert meeting.time == "16:30"
    assert meeting.description == "Regular Lodge Meeting"
    assert meeting.id == make_event_id("mtg", date(2026, 3, 7))


def test_officers_night_precedes_meeting():
    """Officers night is on the Monday before the meeting."""
    rule = MEETING_RULES[1]
    meeting, officers = schedule_rule(2026, rule)

    assert officers.date == date(2026, 3, 2)
    assert officers.label == "Officers Night: Aldenham"
    assert officers.type == EventType.OFFICERS_ALDENHAM
    assert officers.is_meeting is False
    assert officers.time == "19:30"
    assert officers.description == (
        "Officers Night allocated to the Aldenham meeting. "
        "Rehearsal and Lodge of Instruction."
    )
    assert officers.id == make_event_id("off1", meeting.date)


def test_installation_meeting_event():
    """Installation meetings start at 16:00."""
    rule = next(r for r in MEETING_RULES if r.name == "Elstree Meeting (Installation)")
    meeting, officers = schedule_rule(2026, rule)

    assert meeting.date == date(2026, 10, 15)
    assert meeting.time == "16:00"
    assert meeting.description == "Annual Installation Meeting"
    assert officers.date == date(2026, 10, 12)
    assert officers.label == "Officers Night: Elstree"


def test_elstree_december_wednesday():
    """Elstree's December meeting is the 3rd Wednesday."""
    meeting, officers = schedule_rule(2026, MEETING_RULES[-1])
    assert meeting.date == date(2026, 12, 16)
    assert officers.date == date(2026, 12, 14)


def test_missing_occurrence_yields_nothing():
    """A rule asking for a non-existent 5th Saturday produces no events."""
    rule = RecurrenceRule.for_lodge(Lodge.ALDENHAM, month=1, nth=5, weekday=6)
    assert schedule_rule(2026, rule) == []


def test_recurring_events_2026():
    """Every 2026 rule resolves: 14 meetings and 14 officers nights."""
    events = recurring_events(2026)
    assert len(events) == 28
    assert sum(1 for e in events if e.is_meeting) == 14


def test_recurring_events_rule_order():
    """Events follow rule order, meeting then officers night."""
    events = recurring_events(2026)
    assert events[0].date == date(2026, 1, 24)
    assert events[1].date == date(2026, 1, 19)
    assert events[2].date == date(2026, 3, 7)


def test_aldenham_meeting_count_matches_rules():
    """Aldenham meeting count equals its rules with an existing occurrence."""
    for year in range(2020, 2040):
        aldenham = [
            e for e in recurring_events(year) if e.type == EventType.MEETING_ALDENHAM
        ]
        assert len(aldenham) == 5


def test_manual_loi_agm():
    """LoI AGM falls on the first Monday of the year."""
    (agm,) = manual_events(2026)
    assert agm.date == date(2026, 1, 5)
    assert agm.label == "LoI AGM 8pm"
    assert agm.time == "20:00"
    assert agm.type == EventType.MONDAY
    assert agm.is_meeting is False
    assert agm.id == make_event_id("manual-loi-agm", date(2026, 1, 5))
