"""CLI commands package."""

from cli.commands.export import export_command
from cli.commands.next_event import next_event
from cli.commands.search import search
from cli.commands.show import show
from cli.commands.stats import stats

__all__ = [
    "export_command",
    "next_event",
    "search",
    "show",
    "stats",
]
