"""Output formatters for exclusivity reports.

Provides the number formatting used everywhere plus two report formats:
- JSON: Machine-readable, complete data
- Table: Human-readable CLI output
"""

import json
import logging
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from io import StringIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.constants import GLOBAL_POPULATION
from ..core.models import ExclusivityReport, RarityResult
from ..core.types import PopulationMode

logger = logging.getLogger(__name__)

TRILLION = 1e12
BILLION = 1e9
MILLION = 1e6


def format_usd(amount: float) -> str:
    """
    Abbreviate a USD amount.

    ``>= 1e12`` becomes ``$x.xxT``, ``>= 1e9`` ``$x.xxB``, ``>= 1e6``
    ``$x.xxM``; anything smaller is a comma-grouped whole number, rounded
    half up.

    Args:
        amount: Value in USD

    Returns:
        Formatted string, e.g. ``$71,429`` or ``$642.86M``
    """
    if amount >= TRILLION:
        return f"${amount / TRILLION:.2f}T"
    if amount >= BILLION:
        return f"${amount / BILLION:.2f}B"
    # Whole dollars round half up; anything that rounds to a million is shown as one
    dollars = math.floor(amount + 0.5)
    if amount >= MILLION or dollars >= MILLION:
        return f"${amount / MILLION:.2f}M"
    return f"${dollars:,}"


def format_btc(amount: float) -> str:
    """Comma-grouped coin amount without trailing zeros (``1,500,000``, ``0.5``)."""
    text = f"{amount:,.8f}".rstrip("0").rstrip(".")
    if text == "0" and amount > 0:
        # Below one satoshi
        return format(Decimal(repr(amount)), "f")
    return text or "0"


def format_count(count: int) -> str:
    """Comma-grouped holder count."""
    return f"{count:,}"


def format_rarity_sentence(rarity: RarityResult) -> str:
    """Sentence describing how many holders have at least the amount."""
    holders = f"{format_count(rarity.holders)} {rarity.mode.holder_noun}"
    tail = f"would have at least {format_btc(rarity.amount)} BTC"

    if rarity.mode is PopulationMode.GLOBAL_POPULATION:
        return (
            f"If Bitcoin was distributed among all {GLOBAL_POPULATION / 1e9:.1f} billion "
            f"people in the same ratio as current holders, {holders} {tail}"
        )
    return f"Currently, {holders} {tail}"


class OutputFormatter(ABC):
    """Abstract base class for report formatters."""

    @abstractmethod
    def format(self, report: ExclusivityReport) -> str:
        """Format the report as a string."""
        pass

    @abstractmethod
    def format_to_file(self, report: ExclusivityReport, filepath: str) -> None:
        """Write formatted report to a file."""
        pass


class JSONFormatter(OutputFormatter):
    """Formats reports as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, report: ExclusivityReport) -> str:
        """Format report as JSON string, with display strings alongside raw values."""
        data = report.model_dump(mode="json")

        if report.rarity is not None:
            data["rarity"]["none_known"] = report.rarity.none_known
            data["rarity"]["sentence"] = format_rarity_sentence(report.rarity)
        for entry, valuation in zip(data["valuations"], report.valuations):
            entry["formatted"] = valuation.formatted

        return json.dumps(data, indent=self.indent, allow_nan=False)

    def format_to_file(self, report: ExclusivityReport, filepath: str) -> None:
        """Write JSON to file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format(report))


class TableFormatter(OutputFormatter):
    """Formats reports as human-readable tables for CLI output."""

    def __init__(self, use_rich: bool = True, width: int = 80):
        """
        Initialize table formatter.

        Args:
            use_rich: Use rich for colored output
            width: Maximum table width
        """
        self.use_rich = use_rich
        self.width = width

    def format(self, report: ExclusivityReport) -> str:
        """Format report as readable tables."""
        if self.use_rich:
            return self._format_rich(report)
        return self._format_plain(report)

    def _format_plain(self, report: ExclusivityReport) -> str:
        """Plain text formatting without colors."""
        lines = []
        sep = "=" * 60

        lines.append(sep)
        lines.append("  BITCOIN EXCLUSIVITY CALCULATOR")
        lines.append(f"  Mode: {report.mode.display_name}")
        lines.append(sep)
        lines.append("")

        if report.validation.message:
            lines.append(f"  [!] {report.validation.message}")
            lines.append("")

        if not report.has_result:
            if not report.validation.is_error:
                lines.append(f"  No result for input {report.raw_input!r}")
                lines.append("")
        else:
            lines.append("EXCLUSIVITY")
            lines.append("-" * 40)
            lines.append(f"  Holders ({report.mode.holder_noun}): {format_count(report.rarity.holders)}")
            if report.show_holder_sentence:
                lines.append(f"  {format_rarity_sentence(report.rarity)}")
            lines.append("")

            lines.append(f"VALUE OF {format_btc(report.rarity.amount)} BTC")
            lines.append("-" * 40)
            for v in report.valuations:
                lines.append(f"  {v.scenario.name + ':':<30} {v.formatted:>15}")
            lines.append("")

        lines.append(sep)
        lines.append(f"  Note: {report.mode.note}")
        lines.append(sep)

        return "\n".join(lines)

    def _format_rich(self, report: ExclusivityReport) -> str:
        """Rich library formatting with colors."""
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self.width)

        console.print(Panel(
            f"[bold cyan]Bitcoin Exclusivity Calculator[/]\n"
            f"[dim]Mode: {report.mode.display_name}[/]",
            expand=False,
        ))

        if report.validation.message:
            console.print(f"[bold red]{report.validation.message}[/]")

        if report.has_result:
            console.print(
                f"Holders ({report.mode.holder_noun}): [bold]{format_count(report.rarity.holders)}[/]",
                highlight=False,
            )
            if report.show_holder_sentence:
                console.print(Panel(format_rarity_sentence(report.rarity), style="blue"))

            value_table = Table(title=f"Value of {format_btc(report.rarity.amount)} BTC")
            value_table.add_column("Scenario", style="cyan")
            value_table.add_column("Value", justify="right", style="green")
            for v in report.valuations:
                value_table.add_row(v.scenario.name, v.formatted)
            console.print(value_table)

        console.print(f"[dim]Note: {report.mode.note}[/]")

        return output.getvalue()

    def format_to_file(self, report: ExclusivityReport, filepath: str) -> None:
        """Write formatted output to file."""
        # For file output, use plain format (no ANSI codes)
        content = self._format_plain(report)

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
