"""Export a generated year to ICS or JSON."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from masonic_calendar.exceptions import ExportError, UnsupportedFormatError
from masonic_calendar.output import setup_writer
from cli.context import get_context
from cli.utils import require_calendar

logger = logging.getLogger(__name__)


def export_command(
    year: Annotated[
        int | None,
        typer.Argument(help="Year to export (defaults to DEFAULT_YEAR or this year)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (defaults to OUTPUT_DIR)"),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: 'ics' or 'json'"),
    ] = "ics",
) -> None:
    """
    Export a year to a calendar file.

    The default ICS file name is masonic-calendar-<year>.ics, suitable for
    importing into any calendar application.
    """
    ctx = get_context()
    config = ctx.config
    calendar = require_calendar(ctx, year)

    try:
        writer = setup_writer(format)
    except UnsupportedFormatError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if output is None:
        filename = config.ics_filename(calendar.year)
        if writer.get_extension() != "ics":
            filename = f"{Path(filename).stem}.{writer.get_extension()}"
        output = config.output_dir / filename

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        writer.write(calendar, output)
    except (ExportError, OSError) as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Exported {calendar.year}")
    print(f"  {output.resolve()}")
    logger.info(f"Exported {calendar.year} to {output}")
