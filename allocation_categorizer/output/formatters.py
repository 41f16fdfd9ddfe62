"""Output formatters for allocation summaries.

Provides multiple output formats:
- JSON: Machine-readable, complete data
- CSV: Spreadsheet-compatible summary table
- Table: Human-readable CLI output with percentage bars
"""

import csv
import io
import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from rich.console import Console
from rich.table import Table

from ..core.models import AllocationSummary
from ..core.types import OutputFormat

logger = logging.getLogger(__name__)


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, decimals: int = 1):
        """
        Initialize formatter.

        Args:
            decimals: Decimal places shown for percentages
        """
        self.decimals = decimals

    def format_percentage(self, value: float) -> str:
        return f"{value:.{self.decimals}f}%"

    @abstractmethod
    def format(self, summary: AllocationSummary) -> str:
        """Format the summary as a string."""
        pass

    def format_to_file(self, summary: AllocationSummary, filepath: str) -> None:
        """Write formatted summary to a file."""
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(self.format(summary))
        logger.debug(f"Wrote {type(self).__name__} output to {filepath}")


class JSONFormatter(OutputFormatter):
    """Formats summaries as JSON."""

    def __init__(self, indent: int = 2, decimals: int = 1):
        super().__init__(decimals)
        self.indent = indent

    def to_dict(self, summary: AllocationSummary) -> dict[str, Any]:
        """Summary as plain data: total plus ordered entries."""
        return {
            "total_entries": summary.total_entries,
            "entries": summary.rows(),
        }

    def format(self, summary: AllocationSummary) -> str:
        """Format summary as JSON string."""
        return json.dumps(self.to_dict(summary), indent=self.indent)


class CSVFormatter(OutputFormatter):
    """Formats summaries as CSV."""

    HEADER = ["Data Allocation", "Count", "Percentage"]

    def __init__(self, delimiter: str = ",", include_total: bool = True, decimals: int = 1):
        """
        Initialize CSV formatter.

        Args:
            delimiter: CSV delimiter
            include_total: Append a TOTAL row after the entries
            decimals: Decimal places shown for percentages
        """
        super().__init__(decimals)
        self.delimiter = delimiter
        self.include_total = include_total

    def format(self, summary: AllocationSummary) -> str:
        """Format summary as CSV string."""
        output = io.StringIO()
        writer = csv.writer(output, delimiter=self.delimiter, lineterminator="\n")

        writer.writerow(self.HEADER)
        for row in summary.rows():
            writer.writerow([
                row["allocation"],
                row["count"],
                self.format_percentage(row["percentage"]),
            ])

        if self.include_total and not summary.is_empty:
            writer.writerow(["TOTAL", summary.total_entries, self.format_percentage(100.0)])

        return output.getvalue()


class TableFormatter(OutputFormatter):
    """Formats summaries as human-readable tables for CLI output."""

    def __init__(
        self,
        use_rich: bool = True,
        width: int = 80,
        bar_width: int = 20,
        decimals: int = 1,
    ):
        """
        Initialize table formatter.

        Args:
            use_rich: Use rich for colored output
            width: Maximum table width
            bar_width: Characters used by a 100% percentage bar
            decimals: Decimal places shown for percentages
        """
        super().__init__(decimals)
        self.use_rich = use_rich
        self.width = width
        self.bar_width = bar_width

    def percentage_bar(self, value: float) -> str:
        """Fixed-width text bar filled in proportion to ``value`` (0-100)."""
        filled = round(max(0.0, min(value, 100.0)) / 100 * self.bar_width)
        return "█" * filled + "░" * (self.bar_width - filled)

    def format(self, summary: AllocationSummary) -> str:
        """Format summary as readable tables."""
        if self.use_rich:
            return self._format_rich(summary)
        return self._format_plain(summary)

    def _format_plain(self, summary: AllocationSummary) -> str:
        """Plain text formatting without ANSI codes."""
        lines = []
        sep = "=" * 60

        lines.append(sep)
        lines.append("  DATA ALLOCATION SUMMARY")
        lines.append(sep)

        if summary.is_empty:
            lines.append("  No entries to summarize")
            lines.append(sep)
            return "\n".join(lines)

        lines.append(f"  {'Data Allocation':<18} {'Count':>6}  {'Percentage':>10}")
        lines.append("  " + "-" * 56)
        for row in summary.rows():
            pct = self.format_percentage(row["percentage"])
            lines.append(f"  {row['allocation']:<18} {row['count']:>6}  {pct:>10}")

        lines.append("  " + "-" * 56)
        lines.append(f"  {'TOTAL':<18} {summary.total_entries:>6}  {'total entries':>10}")
        lines.append(sep)

        return "\n".join(lines)

    def _format_rich(self, summary: AllocationSummary) -> str:
        """Rich library formatting with colors."""
        output = io.StringIO()
        console = Console(file=output, force_terminal=True, width=self.width)

        if summary.is_empty:
            console.print("[yellow]No entries to summarize[/]")
            return output.getvalue()

        table = Table(title=f"Summary ({summary.total_entries} total entries)")
        table.add_column("Data Allocation", style="cyan")
        table.add_column("Count", justify="right", style="green")
        table.add_column("Percentage", style="blue")

        for row in summary.rows():
            bar = self.percentage_bar(row["percentage"])
            table.add_row(
                row["allocation"],
                str(row["count"]),
                f"{bar} {self.format_percentage(row['percentage'])}",
            )

        table.add_row("", "", "", end_section=True)
        table.add_row("[bold]TOTAL[/]", f"[bold]{summary.total_entries}[/]", "")

        console.print(table)
        return output.getvalue()

    def format_to_file(self, summary: AllocationSummary, filepath: str) -> None:
        """Write formatted output to file."""
        # For file output, use plain format (no ANSI codes)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self._format_plain(summary))


def get_formatter(
    output_format: OutputFormat,
    decimals: int = 1,
    use_rich: bool = True,
) -> OutputFormatter:
    """Formatter instance for ``output_format``."""
    if output_format == OutputFormat.JSON:
        return JSONFormatter(decimals=decimals)
    if output_format == OutputFormat.CSV:
        return CSVFormatter(decimals=decimals)
    return TableFormatter(use_rich=use_rich, decimals=decimals)
