"""Search a generated year by text and lodge."""

import typer
from typing_extensions import Annotated

from masonic_calendar.calendar_query import CalendarQuery, LodgeFilter
from cli.context import get_context
from cli.display import RichEventRenderer
from cli.utils import require_calendar


def search(
    term: Annotated[
        str,
        typer.Argument(help="Text, month or UK date (e.g. '15th Aug', '15/8')"),
    ],
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Year to search (defaults to this year)"),
    ] = None,
    lodge: Annotated[
        LodgeFilter,
        typer.Option("--lodge", "-l", case_sensitive=False, help="Lodge filter"),
    ] = LodgeFilter.ALL,
) -> None:
    """Search events by label, description, time or date.

    Examples:
        masonic-calendar search "3rd Degree" --year 2026
        masonic-calendar search august --lodge loi
    """
    ctx = get_context()
    calendar = require_calendar(ctx, year)
    events = CalendarQuery(calendar).search(term, lodge=lodge)

    subtitle = f"'{term}' in {calendar.year}"
    if lodge != LodgeFilter.ALL:
        subtitle += f", {lodge.value.title()}"
    RichEventRenderer().render_list(events, title="Search", subtitle=subtitle)
