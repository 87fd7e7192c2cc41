"""Display module for rendering calendar output.

This module provides renderers for various display contexts:
- RichEventRenderer: Rich-based event display (agenda/list views)
- StatsRenderer: Statistics display

It also provides:
- console: Shared Rich console instance
"""

from cli.display.console import console
from cli.display.rich_renderer import RichEventRenderer
from cli.display.stats_renderer import StatsRenderer

__all__ = [
    "console",
    "RichEventRenderer",
    "StatsRenderer",
]
