"""Count meetings, LoI evenings and officers nights in a year."""

import typer
from typing_extensions import Annotated

from masonic_calendar.calendar_query import CalendarQuery, LodgeFilter
from cli.context import get_context
from cli.display.stats_renderer import StatsRenderer
from cli.utils import require_calendar


def stats(
    year: Annotated[
        int | None,
        typer.Argument(help="Year to analyse (defaults to this year)"),
    ] = None,
    lodge: Annotated[
        LodgeFilter,
        typer.Option("--lodge", "-l", case_sensitive=False, help="Lodge filter"),
    ] = LodgeFilter.ALL,
) -> None:
    """Count meetings, LoI evenings and officers nights."""
    ctx = get_context()
    calendar = require_calendar(ctx, year)
    query = CalendarQuery(calendar)

    stats_data = query.statistics(query.search(lodge=lodge))
    StatsRenderer().render_statistics(stats_data, year=calendar.year, lodge=lodge.value)
