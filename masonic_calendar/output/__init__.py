"""Output layer for calendar files."""

from masonic_calendar.exceptions import UnsupportedFormatError
from masonic_calendar.output.base import CalendarWriter
from masonic_calendar.output.ics_writer import ICSWriter, build_ical, to_ics
from masonic_calendar.output.json_writer import JSONWriter


def setup_writer(format: str) -> CalendarWriter:
    """Get writer for format."""
    if format == "ics":
        return ICSWriter()
    elif format == "json":
        return JSONWriter()
    else:
        raise UnsupportedFormatError(f"Unsupported output format: {format}")


__all__ = [
    "CalendarWriter",
    "ICSWriter",
    "JSONWriter",
    "build_ical",
    "setup_writer",
    "to_ics",
]
