"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class InvalidYearError(CalendarError):
    """Year cannot be represented as a calendar date range."""

    pass


class UnsupportedFormatError(CalendarError):
    """Export format not supported."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass
