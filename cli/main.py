"""CLI entry point for the Bitcoin Exclusivity Calculator.

Usage:
    btc-exclusivity calculate 1.5
    btc-exclusivity calculate 1.5 --global --output json --save results/1_5btc.json
    btc-exclusivity scenarios
    btc-exclusivity bands --global
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from src.calculator.rarity import RarityEstimator
from src.core.config import MARKET_SCENARIOS, get_config
from src.core.exceptions import ConfigurationError
from src.core.types import PopulationMode
from src.engine import ExclusivityEngine
from src.output.formatters import (
    JSONFormatter,
    TableFormatter,
    format_btc,
    format_count,
    format_usd,
)

# Initialize app
app = typer.Typer(
    name="btc-exclusivity",
    help="Bitcoin Exclusivity Calculator",
    add_completion=False,
)

console = Console()
log_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else get_config().log_level_value
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=log_console, show_time=False, show_path=False)],
    )


def resolve_mode(global_population: Optional[bool]) -> PopulationMode:
    """Pick the population mode from the flag, falling back to configuration."""
    if global_population is None:
        return get_config().default_mode
    if global_population:
        return PopulationMode.GLOBAL_POPULATION
    return PopulationMode.CURRENT_ADDRESSES


@app.command()
def calculate(
    amount: str = typer.Argument(..., help="Bitcoin balance in BTC (e.g., 1.5)"),
    global_population: Optional[bool] = typer.Option(
        None,
        "--global/--addresses",
        "-g/-a",
        help="Apply the distribution to the world population instead of known addresses",
    ),
    output: str = typer.Option(
        "table",
        "--output", "-o",
        help="Output format: table, json",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save", "-s",
        help="Save output to file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Estimate how exclusive a Bitcoin balance is and what it could be worth.

    Examples:
        btc-exclusivity calculate 1.5
        btc-exclusivity calculate 250 --global
        btc-exclusivity calculate 0.05 --output json
    """
    try:
        setup_logging(verbose)
        mode = resolve_mode(global_population)
    except ConfigurationError as e:
        console.print(f"[red]{e.message}[/]")
        raise typer.Exit(1)

    output_lower = output.lower()
    if output_lower not in ("table", "json"):
        console.print(f"[red]Invalid output format: {output}[/]")
        console.print("Valid formats: table, json")
        raise typer.Exit(1)

    report = ExclusivityEngine().evaluate(amount, mode)

    if output_lower == "json":
        formatter = JSONFormatter()
        print(formatter.format(report))
    else:
        formatter = TableFormatter()
        typer.echo(formatter.format(report), nl=False)

    # Save if requested
    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save_path = save.with_suffix(".json" if output_lower == "json" else ".txt")
        formatter.format_to_file(report, str(save_path))
        console.print(f"[green]Saved to {save_path}[/]")

    if not report.has_result:
        raise typer.Exit(1)


@app.command()
def scenarios() -> None:
    """List the market cap scenarios and their implied price per coin."""
    table = Table(title="Market Scenarios")
    table.add_column("Key", style="cyan")
    table.add_column("Scenario")
    table.add_column("Market Cap", justify="right", style="green")
    table.add_column("Price / BTC", justify="right", style="green")

    for scenario in MARKET_SCENARIOS:
        table.add_row(
            scenario.key,
            scenario.name,
            format_usd(scenario.cap_usd),
            f"${scenario.price_per_coin:,.2f}",
        )

    console.print(table)


@app.command()
def bands(
    global_population: Optional[bool] = typer.Option(
        None,
        "--global/--addresses",
        "-g/-a",
        help="Show holder counts for the world population instead of known addresses",
    ),
) -> None:
    """Show the rarity bands used for the holder estimate."""
    try:
        mode = resolve_mode(global_population)
    except ConfigurationError as e:
        console.print(f"[red]{e.message}[/]")
        raise typer.Exit(1)

    estimator = RarityEstimator()

    table = Table(title=f"Rarity Bands ({mode.display_name})")
    table.add_column("Amount (BTC)", style="cyan")
    table.add_column(f"Holders ({mode.holder_noun})", justify="right", style="green")

    table.add_row("<= 0", format_count(mode.base_population))
    for band in estimator.bands:
        table.add_row(band.label, format_count(estimator.band_holders(band, mode)))
    table.add_row(f"> {format_btc(estimator.bands[-1].upper_btc)}", "0")

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from src import __version__
    console.print(f"Bitcoin Exclusivity Calculator v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
