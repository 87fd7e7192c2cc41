"""JSON file writer for calendar files."""

from pathlib import Path

from masonic_calendar.exceptions import ExportError
from masonic_calendar.models.calendar import Calendar


class JSONWriter:
    """Writer for JSON calendar files."""

    def write(self, calendar: Calendar, path: Path) -> None:
        """Write calendar to JSON file."""
        try:
            calendar.save(path)
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}") from e

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"
