"""Shared CLI context with lazy-initialized dependencies."""

from masonic_calendar.calendar_generator import generate_calendar, validate_year
from masonic_calendar.config import CalendarConfig
from masonic_calendar.models.calendar import Calendar


class CLIContext:
    """Shared context for CLI commands.

    Holds the configuration and caches generated years so a command that
    touches the same year twice only generates it once.
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.verbose = verbose
        self.quiet = quiet

        self._config: CalendarConfig | None = None
        self._calendars: dict[int, Calendar] = {}

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    def calendar(self, year: int | None = None) -> Calendar:
        """Generated calendar for a year (configured default when omitted).

        Raises:
            InvalidYearError: If the year cannot be represented
        """
        resolved = validate_year(self.config.resolve_year(year))
        if resolved not in self._calendars:
            self._calendars[resolved] = generate_calendar(resolved)
        return self._calendars[resolved]


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
