"""Display a generated year in agenda or list format."""

import logging

import typer
from typing_extensions import Annotated

from masonic_calendar.calendar_query import CalendarQuery
from cli.context import get_context
from cli.display import RichEventRenderer
from cli.utils import require_calendar

logger = logging.getLogger(__name__)


def show(
    year: Annotated[
        int | None,
        typer.Argument(help="Year to show (defaults to DEFAULT_YEAR or this year)"),
    ] = None,
    month: Annotated[
        int | None,
        typer.Option("--month", "-m", min=1, max=12, help="Only show one month (1-12)"),
    ] = None,
    view: Annotated[
        str,
        typer.Option("--view", "-v", help="View mode: 'agenda' or 'list'"),
    ] = "agenda",
) -> None:
    """Display the calendar for a year.

    Examples:
        masonic-calendar show 2026
        masonic-calendar show 2026 --month 8
        masonic-calendar show 2026 --view list
    """
    ctx = get_context()
    calendar = require_calendar(ctx, year)
    query = CalendarQuery(calendar)
    renderer = RichEventRenderer()

    if view not in ("agenda", "list"):
        logger.error(f"Invalid view mode: {view}. Use 'agenda' or 'list'.")
        raise typer.Exit(1)

    if month:
        events = query.by_month()[month - 1]
        subtitle = f"{calendar.year}-{month:02d}"
    else:
        events = query.events
        subtitle = str(calendar.year)

    if view == "agenda":
        renderer.render_agenda(events, title="Masonic Calendar", subtitle=subtitle)
    else:
        renderer.render_list(events, title="Masonic Calendar", subtitle=subtitle)
