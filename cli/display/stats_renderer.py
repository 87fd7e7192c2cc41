"""Stats renderer for calendar statistics display."""

from masonic_calendar.calendar_query import CalendarStatistics
from cli.display.console import console


class StatsRenderer:
    """Render headline counts for a generated year."""

    def render_statistics(
        self,
        stats_data: CalendarStatistics,
        year: int,
        lodge: str | None = None,
    ) -> None:
        """Render full statistics display.

        Args:
            stats_data: CalendarStatistics object with computed counts.
            year: Year the counts cover.
            lodge: Optional lodge filter (for header display).
        """
        lodge_label = f" - {lodge.title()}" if lodge and lodge != "ALL" else ""
        console.print()
        console.print("━" * 50)
        console.print(f"[bold]  Statistics: {year}{lodge_label}[/bold]")
        console.print("━" * 50)

        console.print(f"\n  Lodge meetings:   {stats_data.meetings:>4}")
        console.print(f"  LoI evenings:     {stats_data.loi:>4}")
        console.print(f"  Officers nights:  {stats_data.officers:>4}")

        console.print()
