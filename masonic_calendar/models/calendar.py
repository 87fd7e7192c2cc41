"""Calendar model holding one generated year."""

import json
from pathlib import Path

from pydantic import BaseModel

from masonic_calendar.models.event import CalendarEvent


class Calendar(BaseModel):
    """A generated year of events, ordered by date."""

    year: int
    events: list[CalendarEvent]

    def save(self, path: Path) -> None:
        """Save to native JSON format."""
        path.write_text(self.model_dump_json(indent=2, exclude_none=True))

    @classmethod
    def load(cls, path: Path) -> "Calendar":
        """Load from native JSON format."""
        return cls.model_validate(json.loads(path.read_text()))
