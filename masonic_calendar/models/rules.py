"""Recurrence rules for lodge meetings."""

from enum import Enum

from pydantic import BaseModel, Field

from masonic_calendar.models.event import EventType


class Lodge(str, Enum):
    """Lodges meeting at the centre, with their event types."""

    ALDENHAM = "Aldenham"
    RADLETT = "Radlett"
    ELSTREE = "Elstree"

    @property
    def meeting_type(self) -> EventType:
        return EventType[f"MEETING_{self.name}"]

    @property
    def officer_type(self) -> EventType:
        return EventType[f"OFFICERS_{self.name}"]


class RecurrenceRule(BaseModel):
    """Nth weekday of a month on which a lodge meets.

    Months are 0-based (0 = January) and weekdays run 0 = Sunday to
    6 = Saturday.
    """

    name: str
    type: EventType
    officer_type: EventType
    month: int = Field(ge=0, le=11)
    weekday: int = Field(ge=0, le=6)
    nth: int = Field(ge=1, le=5)

    class Config:
        """Pydantic config."""

        frozen = True

    @classmethod
    def for_lodge(
        cls, lodge: Lodge, month: int, nth: int, weekday: int, installation: bool = False
    ) -> "RecurrenceRule":
        """Build a rule whose types follow from the lodge."""
        name = f"{lodge.value} Meeting"
        if installation:
            name += " (Installation)"
        return cls(
            name=name,
            type=lodge.meeting_type,
            officer_type=lodge.officer_type,
            month=month,
            weekday=weekday,
            nth=nth,
        )

    @property
    def is_installation(self) -> bool:
        return "Installation" in self.name

    @property
    def lodge_name(self) -> str:
        """First word of the rule name, e.g. "Aldenham"."""
        return self.name.split(" ")[0]
