"""Show the next upcoming event."""

import logging
from datetime import date, datetime, timedelta

import typer
from typing_extensions import Annotated

from masonic_calendar.calendar_query import CalendarQuery, find_next_event
from cli.context import get_context
from cli.display import RichEventRenderer

logger = logging.getLogger(__name__)


def _parse_date(date_str: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD.")


def next_event(
    target_date: Annotated[
        str | None,
        typer.Option("--date", help="Look from this date instead of today (YYYY-MM-DD)"),
    ] = None,
    days: Annotated[
        int | None,
        typer.Option(
            "--days",
            "-d",
            min=1,
            help="Also list what follows within this many days (defaults to UPCOMING_DAYS)",
        ),
    ] = None,
) -> None:
    """Show the next lodge event, skipping the summer closure."""
    ctx = get_context()
    ref_date = _parse_date(target_date) if target_date else date.today()
    window = days or ctx.config.upcoming_days
    logger.info(f"Looking for the next event from {ref_date}")

    renderer = RichEventRenderer()
    event = find_next_event(ref_date)
    if event is None:
        renderer.render_empty("No upcoming events")
        return

    renderer.render_event(event, heading="Next up")

    horizon = ref_date + timedelta(days=min(window, (date.max - ref_date).days))
    later = []
    # Windows that run past 31 December continue into the following years
    for year in range(event.date.year, horizon.year + 1):
        later += CalendarQuery(ctx.calendar(year)).date_range(
            event.date + timedelta(days=1), horizon
        )
    if later:
        renderer.render_list(
            later, title="Coming up", subtitle=f"until {horizon.strftime('%d %B %Y')}"
        )
