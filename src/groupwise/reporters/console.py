"""Console reporter for terminal output."""

from __future__ import annotations

import io
import sys
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console, Group as Renderables
from rich.table import Table
from rich.text import Text

from groupwise.scheduling import PairCoverage, Schedule

MEMBER_SEPARATOR = " • "

# Cycled per group so neighbouring groups are easy to tell apart
GROUP_COLORS = ["blue", "magenta", "green", "dark_orange", "deep_pink3", "cyan", "purple", "red"]


def empty_hint(member_count: int, size: int) -> str:
    """What to tell the user when there is nothing to show."""
    if size <= 0:
        return "Group size must be at least 1"
    return f"Add at least {size} members to generate subgroups (have {member_count})"


class ConsoleReporter:
    """Formats schedules and combinations for the terminal with rich.

    Example::

        reporter = ConsoleReporter()

        # Get report as string
        output = reporter.report_schedule(members, schedule, size=2)

        # Or print directly
        reporter.print_report(output)

        # Plain text for files
        reporter = ConsoleReporter(color=False)
    """

    def __init__(self, file: TextIO | None = None, color: bool = True, width: int = 80) -> None:
        """Initialize the console reporter.

        Args:
            file: Output file (default: stdout). Only used by print_report().
            color: Whether to emit ANSI styles.
            width: Render width in columns.
        """
        self.file = file or sys.stdout
        self.color = color
        self.width = width

    def _console(self, buffer: io.StringIO) -> Console:
        return Console(
            file=buffer,
            width=self.width,
            force_terminal=self.color,
            no_color=not self.color,
            highlight=False,
        )

    def report_schedule(self, members: Sequence[str], schedule: Schedule, size: int) -> str:
        """Render a round-robin schedule with its coverage summary."""
        buffer = io.StringIO()
        console = self._console(buffer)

        if not schedule:
            console.print(f"[yellow]{empty_hint(len(members), size)}[/yellow]")
            return buffer.getvalue()

        kind = "pairs" if size == 2 else f"groups of {size}"
        plural = "s" if len(schedule) != 1 else ""
        console.print(f"[bold]Round Robin:[/bold] {len(schedule)} round{plural} of {kind}")
        console.print()

        for number, rnd in enumerate(schedule, start=1):
            title = f"Round {number}" if len(schedule) > 1 else "Round Robin Schedule"
            console.print(self._titled_table(title, rnd))

        coverage = PairCoverage.from_schedule(members, schedule)
        coverage_color = "green" if coverage.is_complete else (
            "yellow" if coverage.coverage_pct >= 50 else "red"
        )
        parts = [
            f"{coverage.covered_pairs}/{coverage.total_pairs} pairs",
            f"[{coverage_color}]{coverage.coverage_pct:.0f}% coverage[/{coverage_color}]",
            f"{coverage.repeated_pairs} repeats",
        ]
        console.print(f"[bold]Summary:[/bold] {' │ '.join(parts)}")
        return buffer.getvalue()

    def report_combinations(self, members: Sequence[str], combos: list[list[str]], size: int) -> str:
        """Render every combination as one numbered table."""
        buffer = io.StringIO()
        console = self._console(buffer)

        if not combos:
            console.print(f"[yellow]{empty_hint(len(members), size)}[/yellow]")
            return buffer.getvalue()

        console.print(self._titled_table(f"Combinations of {size} ({len(combos)})", combos))
        return buffer.getvalue()

    def print_report(self, output: str) -> None:
        self.file.write(output)

    def _titled_table(self, title: str, groups: Sequence[Sequence[str]]) -> Renderables:
        # Titles sit above the table; a Table title would wrap to the table width
        table = Table(show_header=False, expand=False)
        table.add_column("Group", no_wrap=True)
        table.add_column("Members")
        for index, group in enumerate(groups):
            color = GROUP_COLORS[index % len(GROUP_COLORS)]
            table.add_row(
                f"[bold {color}]Group {index + 1}[/bold {color}]",
                Text(MEMBER_SEPARATOR.join(group)),
            )
        return Renderables(Text(title, style="bold"), table)
