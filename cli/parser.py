"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import export_command, next_event, search, show, stats
from cli.context import CLIContext, set_context

app = typer.Typer(
    name="masonic-calendar",
    help="Lodge meeting calendar: meetings, officers nights, LoI degrees and bank holidays.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info-level log messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("show")(show)
app.command("export")(export_command)
app.command("search")(search)
app.command("stats")(stats)
app.command("next")(next_event)
