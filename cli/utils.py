"""CLI utilities shared by commands."""

import logging

import typer

from masonic_calendar.exceptions import InvalidYearError
from masonic_calendar.models.calendar import Calendar
from cli.context import CLIContext

logger = logging.getLogger(__name__)


def require_calendar(ctx: CLIContext, year: int | None) -> Calendar:
    """Generate the requested year or exit with an error.

    Raises:
        typer.Exit: If the year cannot be generated
    """
    try:
        return ctx.calendar(year)
    except InvalidYearError as e:
        logger.error(str(e))
        raise typer.Exit(1)
