"""CLI commands for the schedule board and the fare table."""

import sys

import click

from ..catalog.fares import ZONE_LABELS, ZONES, FareTable
from ..catalog.schedules import TABS, ScheduleBoard
from ..core.exceptions import ValidationError
from ..core.models import SERVICE_CLASSES
from ..utils.timeutils import parse_time
from .context import CliState, error_console
from .formatters import (
    format_fare_table,
    format_schedule_statistics,
    format_schedule_table,
)

TAB_TITLES = {
    "south": "Southbound and returns from the islands",
    "north": "Northbound",
    "islands": "To the islands",
}


def validate_time(value: str | None) -> str | None:
    """Check an optional HH:MM option value.

    Raises:
        ValidationError: If the value is not a valid time
    """
    if value is None:
        return None
    try:
        parse_time(value)
    except ValueError as e:
        raise ValidationError(str(e)) from e
    return value


@click.group()
def schedules() -> None:
    """Schedule board commands."""
    pass


@schedules.command("list")
@click.option(
    "--tab",
    "-t",
    type=click.Choice(TABS),
    default="south",
    help="Direction tab",
)
@click.option("--line", "-l", "line_id", help="Only trips of this line id")
@click.option("--after", "-a", help="Only trips departing at or after HH:MM")
@click.pass_obj
def list_schedules(
    state: CliState, tab: str, line_id: str | None, after: str | None
) -> None:
    """List trips of a direction tab.

    Examples:
        island-transit schedules list --tab north
        island-transit schedules list --tab islands --after 12:00
    """
    try:
        after = validate_time(after)
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    board = ScheduleBoard(state.snapshot)
    displays = board.tab(tab)
    if line_id:
        displays = board.by_line(line_id, displays)
    if after:
        displays = board.after_time(after, displays)

    format_schedule_table(displays, title=TAB_TITLES[tab])


@schedules.command("stats")
@click.pass_obj
def schedule_stats(state: CliState) -> None:
    """Show schedule statistics."""
    board = ScheduleBoard(state.snapshot)
    format_schedule_statistics(board.statistics())


@click.group()
def fares() -> None:
    """Fare table commands."""
    pass


@fares.command("list")
@click.option(
    "--zone",
    "-z",
    type=click.Choice(ZONES),
    default="all",
    help="Geographic zone",
)
@click.option(
    "--class",
    "-c",
    "service_class",
    type=click.Choice(SERVICE_CLASSES),
    help="Service class (default from configuration)",
)
@click.pass_obj
def list_fares(state: CliState, zone: str, service_class: str | None) -> None:
    """List fares of a zone, cheapest first.

    Examples:
        island-transit fares list
        island-transit fares list --zone loyaute --class first_class
    """
    service_class = service_class or state.settings.default_service_class
    table = FareTable(state.snapshot)
    format_fare_table(
        table.select(zone, service_class),
        service_class,
        state.settings.currency,
        title=f"Fares: {ZONE_LABELS[zone]} ({table.zone_count(zone)})",
    )
