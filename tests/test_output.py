"""Tests for output layer."""

from datetime import date, datetime, timezone

import pytest
from icalendar import Calendar as ICalendar

from masonic_calendar.calendar_generator import generate, generate_calendar
from masonic_calendar.exceptions import ExportError, UnsupportedFormatError
from masonic_calendar.models.calendar import Calendar
from masonic_calendar.models.event import CalendarEvent, EventType, make_event_id
from masonic_calendar.output import ICSWriter, JSONWriter, setup_writer, to_ics

STAMP = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_event(**kwargs) -> CalendarEvent:
    values = {"id": "mtg-1", "date": date(2026, 3, 7), "label": "Aldenham Meeting"}
    values.update(kwargs)
    return CalendarEvent(**values)


def test_to_ics_calendar_headers():
    """VCALENDAR carries version, prodid, scale and method."""
    content = to_ics([make_event()], dtstamp=STAMP)
    assert content.startswith("BEGIN:VCALENDAR\r\n")
    assert "VERSION:2.0\r\n" in content
    assert "PRODID:-//Masonic Calendar//EN\r\n" in content
    assert "CALSCALE:GREGORIAN\r\n" in content
    assert "METHOD:PUBLISH\r\n" in content
    assert content.rstrip().endswith("END:VCALENDAR")


def test_to_ics_header_order():
    """VERSION leads the calendar properties, ahead of PRODID."""
    lines = to_ics([make_event()], dtstamp=STAMP).split("\r\n")
    assert lines[:5] == [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Masonic Calendar//EN",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]


def test_to_ics_timed_event():
    """Event time is written as UTC with a two hour duration."""
    content = to_ics([make_event(time="16:30")], dtstamp=STAMP)
    assert "DTSTART:20260307T163000Z" in content
    assert "DTEND:20260307T183000Z" in content
    assert "SUMMARY:Aldenham Meeting" in content
    assert "UID:mtg-1@masoniccalendar.com" in content
    assert "DTSTAMP:20260101T120000Z" in content


def test_to_ics_default_time():
    """Events without a time start at 09:00."""
    content = to_ics([make_event(date=date(2026, 4, 6))], dtstamp=STAMP)
    assert "DTSTART:20260406T090000Z" in content
    assert "DTEND:20260406T110000Z" in content


def test_to_ics_end_crosses_midnight():
    """A late start ends on the next day."""
    content = to_ics([make_event(time="23:00")], dtstamp=STAMP)
    assert "DTEND:20260308T010000Z" in content


def test_to_ics_skips_unlabelled_events():
    """Unlabelled events are not exported."""
    events = [make_event(), make_event(id="mon-1", date=date(2026, 3, 9), label="")]
    content = to_ics(events, dtstamp=STAMP)
    assert content.count("BEGIN:VEVENT") == 1


def test_to_ics_description_optional():
    """DESCRIPTION appears only when the event has one."""
    assert "DESCRIPTION" not in to_ics([make_event()], dtstamp=STAMP)
    content = to_ics([make_event(description="National Bank Holiday")], dtstamp=STAMP)
    assert "DESCRIPTION:National Bank Holiday" in content


def test_to_ics_uses_crlf():
    """Lines are joined with CRLF."""
    content = to_ics([make_event()], dtstamp=STAMP)
    assert "\n" not in content.replace("\r\n", "")


def test_to_ics_generated_year():
    """A generated year exports one VEVENT per labelled event."""
    events = generate(2026)
    content = to_ics(events, dtstamp=STAMP)
    assert content.count("BEGIN:VEVENT") == 66
    assert "DTSTART:20260307T163000Z" in content
    assert f"UID:{make_event_id('mtg', date(2026, 3, 7))}@masoniccalendar.com" in content

    cal = ICalendar.from_ical(content)
    assert len(cal.walk("VEVENT")) == 66


def test_to_ics_reproducible():
    """Same year and stamp give byte-identical output."""
    assert to_ics(generate(2026), dtstamp=STAMP) == to_ics(
        generate(2026), dtstamp=STAMP
    )


def test_to_ics_default_dtstamp_is_now():
    """Without an explicit stamp the current time is used."""
    content = to_ics([make_event()])
    assert f"DTSTAMP:{datetime.now(timezone.utc):%Y%m%d}" in content


def test_ics_writer(tmp_path):
    """ICSWriter writes a parseable file."""
    path = tmp_path / "masonic-calendar-2026.ics"
    writer = ICSWriter(dtstamp=STAMP)
    writer.write(generate_calendar(2026), path)

    content = path.read_bytes()
    assert content == to_ics(generate(2026), dtstamp=STAMP).encode("utf-8")
    assert ICalendar.from_ical(content) is not None


def test_ics_writer_missing_directory(tmp_path):
    """Write failures surface as ExportError."""
    path = tmp_path / "missing" / "calendar.ics"
    with pytest.raises(ExportError):
        ICSWriter().write(Calendar(year=2026, events=[make_event()]), path)


def test_json_writer(tmp_path):
    """JSONWriter writes a loadable calendar."""
    path = tmp_path / "calendar.json"
    calendar = generate_calendar(2026)
    JSONWriter().write(calendar, path)
    assert Calendar.load(path) == calendar


def test_writer_extensions():
    assert ICSWriter().get_extension() == "ics"
    assert JSONWriter().get_extension() == "json"


def test_setup_writer():
    """Writers are chosen by format name."""
    assert isinstance(setup_writer("ics"), ICSWriter)
    assert isinstance(setup_writer("json"), JSONWriter)
    with pytest.raises(UnsupportedFormatError):
        setup_writer("xml")


def test_recess_event_exported_at_default_time():
    """Closure entries have no time and export at 09:00."""
    event = make_event(
        date=date(2026, 8, 10), label="Centre Closed", type=EventType.RECESS
    )
    assert "DTSTART:20260810T090000Z" in to_ics([event], dtstamp=STAMP)
