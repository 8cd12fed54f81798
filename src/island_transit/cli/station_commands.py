"""CLI commands for browsing stations."""

import sys

import click
from rich.console import Console

from ..catalog.stations import ALL_ISLANDS, StationDirectory, StationViewState
from ..core.exceptions import StationNotFoundError
from ..core.search import TripSearchEngine
from .context import CliState, error_console
from .formatters import (
    format_station_detail,
    format_station_list,
    format_station_statistics,
    format_station_table,
)

console = Console()


@click.group()
def stations() -> None:
    """Station browsing commands."""
    pass


@stations.command("list")
@click.option("--island", "-i", default=ALL_ISLANDS, help="Only stations of this island")
@click.option("--query", "-q", default="", help="Filter by name or island")
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(["name", "schedules", "lines"]),
    default="name",
    help="Sort key",
)
@click.option("--desc", is_flag=True, help="Sort in descending order")
@click.pass_obj
def list_stations(
    state: CliState, island: str, query: str, sort_by: str, desc: bool
) -> None:
    """List stations with the lines and trips serving them.

    Examples:
        island-transit stations list
        island-transit stations list --island Lifou
        island-transit stations list --sort schedules --desc
    """
    directory = StationDirectory(state.snapshot)
    view_state = StationViewState(
        island=island,
        search_term=query,
        sort_by=sort_by,  # type: ignore[arg-type]
        sort_order="desc" if desc else "asc",
    )
    format_station_table(directory.select(view_state))


@stations.command("show")
@click.argument("station_id")
@click.pass_obj
def show_station(state: CliState, station_id: str) -> None:
    """Show details of a station."""
    directory = StationDirectory(state.snapshot)
    try:
        summary = directory.require(station_id)
    except StationNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    format_station_detail(summary)


@stations.command("find")
@click.argument("query")
@click.option("--limit", "-l", default=10, help="Maximum number of results")
@click.pass_obj
def find_stations(state: CliState, query: str, limit: int) -> None:
    """Find stations by French or English name, or by island."""
    engine = TripSearchEngine(state.snapshot)
    matches = engine.search_stations(query, limit=limit)
    if not matches:
        console.print(f"[yellow]No stations matching '{query}'[/yellow]")
        return

    format_station_list(matches, title=f"Stations matching '{query}'")


@stations.command("popular")
@click.argument("station_id")
@click.option("--limit", "-l", default=5, help="Maximum number of suggestions")
@click.pass_obj
def popular_destinations(state: CliState, station_id: str, limit: int) -> None:
    """Suggest destinations reachable without a transfer."""
    engine = TripSearchEngine(state.snapshot)
    origin = engine.get_station(station_id)
    if origin is None:
        error_console.print(f"[red]Error:[/red] Station '{station_id}' not found")
        sys.exit(1)

    destinations = engine.popular_destinations(station_id, limit=limit)
    if not destinations:
        console.print(f"[yellow]No destinations from {origin}[/yellow]")
        return

    format_station_list(destinations, title=f"Destinations from {origin}")


@stations.command("hubs")
@click.pass_obj
def transport_hubs(state: CliState) -> None:
    """List transport hubs (more than 2 lines and more than 10 trips)."""
    directory = StationDirectory(state.snapshot)
    format_station_table(directory.transport_hubs())


@stations.command("stats")
@click.pass_obj
def station_stats(state: CliState) -> None:
    """Show station statistics."""
    directory = StationDirectory(state.snapshot)
    format_station_statistics(directory.statistics())
