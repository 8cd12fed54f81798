"""Output formatters for CLI display."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..catalog.fares import FareDisplay
from ..catalog.schedules import (
    ScheduleDisplay,
    ScheduleStatistics,
    stop_time,
    trip_duration,
)
from ..catalog.stations import StationStatistics, StationSummary
from ..core.models import SearchResult, Station, TripStatistics
from ..utils.geo import format_distance
from ..utils.labels import direction_label, format_price, service_class_label

console = Console()


def result_to_dict(result: SearchResult, service_class: str) -> dict[str, Any]:
    """JSON-ready representation of a search result."""
    return {
        "trip_id": result.schedule.trip_id,
        "direction": result.schedule.direction,
        "origin": result.origin.model_dump(mode="json"),
        "destination": result.destination.model_dump(mode="json"),
        "departure_time": result.departure_time,
        "arrival_time": result.arrival_time,
        "duration": result.duration,
        "distance_km": result.distance,
        "service_class": service_class,
        "price": result.price_for(service_class),
        "prices": result.price.model_dump(mode="json"),
        "days_of_week": result.schedule.days_of_week,
    }


def format_results_table(
    results: list[SearchResult],
    service_class: str = "second_class",
    currency: str = "XPF",
    verbose: bool = False,
) -> None:
    """Display search results as a rich table."""
    if not results:
        console.print("No trips found.")
        return

    first = results[0]
    table = Table(
        title=f"Trips: {first.origin} → {first.destination}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Trip", style="cyan", no_wrap=True)
    table.add_column("Departure", style="green")
    table.add_column("Arrival", style="green")
    table.add_column("Duration", style="yellow")
    table.add_column(service_class_label(service_class), style="magenta")
    if verbose:
        table.add_column("Direction", style="blue")
        table.add_column("Days", style="dim blue")

    for result in results:
        row = [
            result.schedule.trip_id,
            result.departure_time or "-",
            result.arrival_time or "-",
            result.duration,
            format_price(result.price_for(service_class), currency),
        ]
        if verbose:
            row.append(direction_label(result.schedule.direction))
            row.append(", ".join(result.schedule.days_of_week) or "-")
        table.add_row(*row)

    console.print(table)
    console.print(f"[dim]Distance: {format_distance(first.distance)}[/dim]")


def format_results_detailed(
    results: list[SearchResult],
    service_class: str = "second_class",
    currency: str = "XPF",
) -> None:
    """Display each search result in its own panel."""
    if not results:
        console.print("No trips found.")
        return

    for idx, result in enumerate(results, 1):
        summary_text = f"""[bold]From:[/bold] {result.origin} ({result.origin.island_fr})
[bold]To:[/bold] {result.destination} ({result.destination.island_fr})
[bold]Departure:[/bold] {result.departure_time or "-"}
[bold]Arrival:[/bold] {result.arrival_time or "-"}
[bold]Duration:[/bold] {result.duration}
[bold]Distance:[/bold] {format_distance(result.distance)}
[bold]Direction:[/bold] {direction_label(result.schedule.direction)}
[bold]{service_class_label(service_class)}:[/bold] {format_price(result.price_for(service_class), currency)}"""

        if result.schedule.description_fr:
            summary_text += f"\n[bold]Description:[/bold] {result.schedule.description_fr}"

        console.print(
            Panel(
                summary_text,
                title=f"Trip {idx}: {result.schedule.trip_id}",
                border_style="blue",
            )
        )


def format_results_json(
    results: list[SearchResult], service_class: str = "second_class"
) -> str:
    """Format search results as JSON."""
    return json.dumps(
        [result_to_dict(result, service_class) for result in results],
        ensure_ascii=False,
        indent=2,
    )


def format_statistics(stats: TripStatistics, currency: str = "XPF") -> None:
    """Display trip statistics as a property table."""
    table = Table(title="Trip Statistics", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Trips", str(stats.total_routes))
    table.add_row("Average duration", stats.average_duration)
    table.add_row(
        "Price range (3rd class)",
        f"{format_price(stats.price_range.min, currency)} - "
        f"{format_price(stats.price_range.max, currency)}",
    )
    table.add_row("Morning departures", str(stats.time_distribution.morning))
    table.add_row("Afternoon departures", str(stats.time_distribution.afternoon))
    table.add_row("Evening departures", str(stats.time_distribution.evening))

    console.print(table)


def format_station_list(stations: list[Station], title: str = "Stations") -> None:
    """Display plain stations as a table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("English", style="green")
    table.add_column("Island", style="blue")

    for station in stations:
        table.add_row(station.id, station.name_fr, station.name_en, station.island_fr)

    console.print(table)


def format_station_table(summaries: list[StationSummary]) -> None:
    """Display station summaries as a table."""
    if not summaries:
        console.print("No stations found.")
        return

    table = Table(title="Stations", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Island", style="blue")
    table.add_column("Lines", style="yellow", justify="right")
    table.add_column("Trips", style="yellow", justify="right")
    table.add_column("Connections", style="magenta", justify="right")

    for summary in summaries:
        table.add_row(
            summary.station.id,
            summary.station.name_fr,
            summary.station.island_fr,
            str(len(summary.lines_served)),
            str(summary.schedule_count),
            str(summary.connections_count),
        )

    console.print(table)


def format_station_detail(summary: StationSummary) -> None:
    """Display one station with the lines serving it."""
    station = summary.station
    text = f"""[bold]ID:[/bold] {station.id}
[bold]Name:[/bold] {station.name_fr} / {station.name_en}
[bold]Island:[/bold] {station.island_fr} / {station.island_en}
[bold]Coordinates:[/bold] {station.coordinates.lat}, {station.coordinates.lon}
[bold]Trips:[/bold] {summary.schedule_count}
[bold]Connections:[/bold] {summary.connections_count}"""

    if summary.lines_served:
        text += "\n[bold]Lines:[/bold]"
        for line in summary.lines_served:
            text += f"\n  • {line.name} ({line.id})"

    console.print(Panel(text, title=station.name_fr, border_style="green"))


def format_station_statistics(stats: StationStatistics | None) -> None:
    if stats is None:
        console.print("No stations loaded.")
        return

    table = Table(
        title="Station Statistics", show_header=True, header_style="bold magenta"
    )
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Stations", str(stats.total_stations))
    for island, count in stats.stations_by_island.items():
        table.add_row(f"  {island}", str(count))
    table.add_row("Average lines per station", str(stats.average_lines_per_station))
    table.add_row(
        "Average trips per station", str(stats.average_schedules_per_station)
    )
    table.add_row("Transport hubs", str(stats.transport_hubs_count))
    if stats.most_connected_station:
        table.add_row("Most connected", stats.most_connected_station.station.name_fr)

    console.print(table)


def format_schedule_table(displays: list[ScheduleDisplay], title: str) -> None:
    """Display trips of the schedule board."""
    if not displays:
        console.print(f"No trips in {title}.")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Trip", style="cyan", no_wrap=True)
    table.add_column("Line", style="blue")
    table.add_column("Direction", style="yellow")
    table.add_column("Departure", style="green")
    table.add_column("Stops", style="dim")
    table.add_column("Duration", style="green")

    for display in displays:
        stops = " → ".join(
            f"{station.name_fr} {stop_time(display.schedule, station.id)}".strip()
            for station in display.stations
        )
        table.add_row(
            display.schedule.trip_id,
            display.line.name,
            direction_label(display.schedule.direction),
            display.first_departure,
            stops,
            trip_duration(display.schedule),
        )

    console.print(table)


def format_schedule_statistics(stats: ScheduleStatistics) -> None:
    table = Table(
        title="Schedule Statistics", show_header=True, header_style="bold magenta"
    )
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Trips", str(stats.total_schedules))
    for direction, count in stats.schedules_by_direction.items():
        table.add_row(f"  {direction}", str(count))
    table.add_row("Average stops per trip", str(stats.average_stops_per_trip))
    table.add_row("Lines", str(stats.lines_served_count))
    table.add_row("Island route trips", str(stats.island_routes_count))

    console.print(table)


def format_fare_table(
    displays: list[FareDisplay],
    service_class: str = "second_class",
    currency: str = "XPF",
    title: str = "Fares",
) -> None:
    """Display fares with distance and price per km."""
    if not displays:
        console.print("No fares found.")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column(service_class_label(service_class), style="green", justify="right")
    table.add_column("Distance", style="yellow", justify="right")
    table.add_column("Per km", style="dim", justify="right")

    for display in displays:
        per_km = (
            f"{display.price_per_km:.0f} {currency}"
            if display.price_per_km is not None
            else "-"
        )
        table.add_row(
            display.origin.name_fr,
            display.destination.name_fr,
            format_price(display.fare.prices.for_class(service_class), currency),
            format_distance(display.distance) if display.distance is not None else "-",
            per_km,
        )

    console.print(table)
