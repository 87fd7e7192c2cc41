"""Rich-based event renderer for terminal display."""

from collections import defaultdict
from datetime import date

from rich.console import Console
from rich.text import Text

from cli.display.console import console as shared_console
from masonic_calendar.models.event import CalendarEvent, EventType

# Label colour per event type
TYPE_STYLES = {
    EventType.BANK_HOLIDAY: "red",
    EventType.MEETING_ALDENHAM: "bold blue",
    EventType.MEETING_RADLETT: "bold green",
    EventType.MEETING_ELSTREE: "bold magenta",
    EventType.OFFICERS_ALDENHAM: "blue",
    EventType.OFFICERS_RADLETT: "green",
    EventType.OFFICERS_ELSTREE: "magenta",
    EventType.RECESS: "dim",
}


class RichEventRenderer:
    """Render calendar events using Rich for terminal display.

    Uses neutral hierarchy-based colors:
    - Headers: bold white
    - Month labels: cyan
    - Times: dim
    - Labels: coloured by lodge, red for bank holidays
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render_agenda(
        self,
        events: list[CalendarEvent],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Render events grouped by month (agenda view)."""
        if not events:
            self.render_empty()
            return

        self._print_header(title, subtitle)

        by_month: dict[tuple[int, int], list[CalendarEvent]] = defaultdict(list)
        for event in events:
            by_month[(event.date.year, event.date.month)].append(event)

        for year, month in sorted(by_month.keys()):
            month_label = date(year, month, 1).strftime("%B %Y")
            self.console.print(f"\n[cyan]{month_label}[/cyan]")
            for event in by_month[(year, month)]:
                self._render_agenda_event(event)

        self._print_footer(len(events))

    def render_list(
        self,
        events: list[CalendarEvent],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Render events as a flat list (useful for search results)."""
        if not events:
            self.render_empty()
            return

        self._print_header(title, subtitle)
        self.console.print()

        for event in events:
            self._render_list_event(event)

        self._print_footer(len(events))

    def render_event(self, event: CalendarEvent, heading: str | None = None) -> None:
        """Render one event with its description."""
        if heading:
            self.console.print(f"\n[bold]{heading}[/bold]")
        self.console.print(self._label_text(event))
        self.console.print(
            f"[dim]{event.date.strftime('%A %d %B %Y')}"
            f"{'  ' + event.time if event.time else ''}[/dim]"
        )
        if event.description:
            self.console.print(event.description)
        self.console.print()

    def render_empty(self, message: str | None = None) -> None:
        """Render an empty state message."""
        msg = message or "No events found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

    # ─────────────────────────────────────────────────────────────────────────
    # Private helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _print_header(self, title: str | None, subtitle: str | None) -> None:
        """Print the display header."""
        self.console.print()
        self.console.print("━" * 40)
        if title:
            header_text = f"  {title}"
            if subtitle:
                header_text += f" [dim]({subtitle})[/dim]"
            self.console.print(f"[bold]{header_text}[/bold]")
        self.console.print("━" * 40)

    def _print_footer(self, count: int) -> None:
        """Print the display footer with event count."""
        self.console.print()
        self.console.print("─" * 40)
        event_word = "event" if count == 1 else "events"
        self.console.print(f"[dim]{count} {event_word}[/dim]")
        self.console.print()

    def _label_text(self, event: CalendarEvent) -> Text:
        label = event.label or "(unassigned)"
        return Text(label, style=TYPE_STYLES.get(event.type, ""))

    def _render_agenda_event(self, event: CalendarEvent) -> None:
        """Render a single event in agenda format."""
        line = Text()
        line.append("  ")
        line.append(f"{event.date.strftime('%a %d'):<8}")
        line.append(f"{event.time or '':<7}", style="dim")
        line.append_text(self._label_text(event))
        self.console.print(line)

    def _render_list_event(self, event: CalendarEvent) -> None:
        """Render a single event in list format."""
        line = Text()
        line.append(f"{event.date.strftime('%Y-%m-%d')}  ", style="dim")
        line.append(f"{event.date.strftime('%a')}  ", style="cyan")
        line.append(f"{event.time or '':<7}", style="blue")
        line.append_text(self._label_text(event))
        self.console.print(line)
