"""CLI main entry point for island transit search."""

import logging

import click
from rich.console import Console

from .. import __version__
from ..config import Settings
from ..core import TripSearchEngine, aggregate
from ..core.models import SERVICE_CLASSES, TIME_PREFERENCES, SearchCriteria
from ..utils.geo import distance_km, format_distance
from .context import CliState, error_console
from .formatters import (
    format_results_detailed,
    format_results_json,
    format_results_table,
    format_statistics,
)
from .station_commands import stations
from .timetable_commands import fares, schedules

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--data-source",
    "-D",
    help="Base URL or directory of the JSON data files. A relative directory "
    "is resolved against the working directory (default: ./data)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, data_source: str | None, verbose: bool) -> None:
    """Island Transit - Browse the island network and search trips between stations."""
    settings = Settings()
    if data_source:
        settings = settings.model_copy(update={"data_source": data_source})

    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)
    ctx.obj = CliState(settings)


@cli.command()
@click.argument("origin_id")
@click.argument("destination_id")
@click.option(
    "--class",
    "-c",
    "service_class",
    type=click.Choice(SERVICE_CLASSES),
    help="Service class used for prices (default from configuration)",
)
@click.option(
    "--time",
    "-t",
    "time_preference",
    type=click.Choice(TIME_PREFERENCES),
    default="any",
    help="Departure time of day",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json", "detailed"]),
    default="table",
    help="Output format",
)
@click.option("--stats", "-s", is_flag=True, help="Show statistics of the results")
@click.option("--details", is_flag=True, help="Show direction and days of each trip")
@click.pass_obj
def search(
    state: CliState,
    origin_id: str,
    destination_id: str,
    service_class: str | None,
    time_preference: str,
    output_format: str,
    stats: bool,
    details: bool,
) -> None:
    """Search trips between two stations, by station id.

    Examples:
        island-transit search NOU KON
        island-transit search NOU LIF --time morning --class first_class
        island-transit search NOU KON --format json
    """
    service_class = service_class or state.settings.default_service_class
    currency = state.settings.currency

    engine = TripSearchEngine(state.snapshot)
    criteria = SearchCriteria(
        origin_id=origin_id,
        destination_id=destination_id,
        service_class=service_class,  # type: ignore[arg-type]
        time_preference=time_preference,  # type: ignore[arg-type]
    )
    results = engine.search(criteria)

    if output_format == "json":
        click.echo(format_results_json(results, service_class))
        return

    if not results:
        error_console.print("[yellow]No trips found[/yellow]")
        return

    if output_format == "detailed":
        format_results_detailed(results, service_class, currency)
    else:
        format_results_table(results, service_class, currency, verbose=details)

    if stats:
        console.print()
        format_statistics(aggregate(results), currency)


@cli.command()
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@click.option(
    "--precision",
    "-p",
    type=click.IntRange(0, 6),
    default=1,
    help="Decimal places (0 rounds to whole kilometers)",
)
def distance(lat1: float, lon1: float, lat2: float, lon2: float, precision: int) -> None:
    """Great-circle distance between two coordinates.

    Example:
        island-transit distance -- -22.2 166.4 -20.9 167.0
    """
    km = distance_km(lat1, lon1, lat2, lon2, precision=precision)
    console.print(format_distance(km))


# Add the imported command groups to the main CLI
cli.add_command(stations)
cli.add_command(schedules)
cli.add_command(fares)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@click.pass_obj
def show_config(state: CliState) -> None:
    """Show current configuration."""
    settings = state.settings
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• Data source: {settings.data_source}")
    console.print(f"• Timeout: {settings.timeout} seconds")
    console.print(f"• Currency: {settings.currency}")
    console.print(f"• Default service class: {settings.default_service_class}")
    console.print(f"• Log level: {settings.log_level}")


if __name__ == "__main__":
    cli()
