"""Schedule board: trips grouped by travel direction."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.models import Line, Schedule, Station, TransitSnapshot
from ..utils.geo import round_half_up
from ..utils.timeutils import duration_text

logger = logging.getLogger(__name__)

Tab = Literal["south", "north", "islands"]
TABS: tuple[str, ...] = ("south", "north", "islands")

MAINLAND_MARKER = "grande-terre"
FROM_ISLAND_PREFIX = "from-"
EARLIEST_DEPARTURE = "00:00"
UNAVAILABLE_DURATION = "-"


class ScheduleDisplay(BaseModel):
    """A trip with its line and the stations it visits, in order."""

    model_config = ConfigDict(frozen=True)

    line: Line
    schedule: Schedule
    stations: list[Station] = Field(default_factory=list)
    island_route: bool = False

    @property
    def first_departure(self) -> str:
        first_stop = self.schedule.stops[0] if self.schedule.stops else None
        return (first_stop.departure_time if first_stop else None) or EARLIEST_DEPARTURE


class ScheduleStatistics(BaseModel):
    """Figures over every trip on the board."""

    total_schedules: int
    schedules_by_direction: dict[str, int]
    average_stops_per_trip: float
    lines_served_count: int
    island_routes_count: int


def is_island_route(line: Line, stations: list[Station]) -> bool:
    """Whether the line serves a station outside Grande-Terre."""
    served = set(line.station_ids)
    return any(
        station.id in served and MAINLAND_MARKER not in station.island_fr.lower()
        for station in stations
    )


def tab_for(display: ScheduleDisplay) -> str | None:
    """Board tab of a trip, None when its direction fits no tab.

    Returns from an island count as "south" since they head back to Nouméa.
    """
    direction = display.schedule.direction
    if display.island_route:
        if direction.startswith(FROM_ISLAND_PREFIX):
            return "south"
        return "islands"
    if direction == "southbound":
        return "south"
    if direction == "northbound":
        return "north"
    return None


def trip_duration(schedule: Schedule) -> str:
    """Duration from the first stop departure to the last stop arrival."""
    if not schedule.stops:
        return UNAVAILABLE_DURATION
    return duration_text(
        schedule.stops[0].departure_time,
        schedule.stops[-1].arrival_time,
        unavailable=UNAVAILABLE_DURATION,
    )


def stop_time(schedule: Schedule, station_id: str) -> str:
    """Departure time at a station, else its arrival time, else ""."""
    stop = schedule.stop_at(station_id)
    if stop is None:
        return ""
    return stop.departure_time or stop.arrival_time or ""


def count_stops(schedule: Schedule) -> int:
    return sum(1 for stop in schedule.stops if stop.station_id)


class ScheduleBoard:
    """Trips of every line, split into south, north and islands tabs."""

    def __init__(self, snapshot: TransitSnapshot):
        self.snapshot = snapshot
        self.displays = self._build_displays()
        self.tabs: dict[str, list[ScheduleDisplay]] = {tab: [] for tab in TABS}
        for display in self.displays:
            tab = tab_for(display)
            if tab is not None:
                self.tabs[tab].append(display)
        for tab in TABS:
            self.tabs[tab].sort(key=lambda d: d.first_departure)

    def _build_displays(self) -> list[ScheduleDisplay]:
        lines_by_id = {line.id: line for line in self.snapshot.lines}
        stations_by_id = {station.id: station for station in self.snapshot.stations}

        displays = []
        for line_schedule in self.snapshot.schedules:
            line = lines_by_id.get(line_schedule.line_id)
            if line is None:
                logger.warning(
                    f"Skipping schedules of unknown line {line_schedule.line_id}"
                )
                continue

            island_route = is_island_route(line, self.snapshot.stations)
            for schedule in line_schedule.schedules:
                trip_stations = [
                    stations_by_id[stop.station_id]
                    for stop in schedule.stops
                    if stop.station_id in stations_by_id
                ]
                displays.append(
                    ScheduleDisplay(
                        line=line,
                        schedule=schedule,
                        stations=trip_stations,
                        island_route=island_route,
                    )
                )
        return displays

    def tab(self, name: str) -> list[ScheduleDisplay]:
        """Trips of one tab, by first departure.

        Raises:
            ValueError: If the tab name is unknown
        """
        if name not in self.tabs:
            raise ValueError(f"Unknown tab '{name}', expected one of {', '.join(TABS)}")
        return self.tabs[name]

    def all_schedules(self) -> list[ScheduleDisplay]:
        """Trips of every tab, in tab order."""
        return [display for tab in TABS for display in self.tabs[tab]]

    def by_line(
        self, line_id: str, displays: list[ScheduleDisplay] | None = None
    ) -> list[ScheduleDisplay]:
        displays = self.all_schedules() if displays is None else displays
        return [d for d in displays if d.line.id == line_id]

    def after_time(
        self, time: str, displays: list[ScheduleDisplay] | None = None
    ) -> list[ScheduleDisplay]:
        """Trips whose first departure is at or after ``time`` (HH:MM)."""
        displays = self.all_schedules() if displays is None else displays
        return [d for d in displays if d.first_departure >= time]

    def lines_on_island(self, island_name: str) -> list[Line]:
        """Lines serving at least one station of the island."""
        needle = island_name.lower()
        stations_by_id = {station.id: station for station in self.snapshot.stations}
        return [
            line
            for line in self.snapshot.lines
            if any(
                station_id in stations_by_id
                and needle in stations_by_id[station_id].island_fr.lower()
                for station_id in line.station_ids
            )
        ]

    def count_by_direction(
        self, displays: list[ScheduleDisplay] | None = None
    ) -> dict[str, int]:
        displays = self.all_schedules() if displays is None else displays
        counts: dict[str, int] = {}
        for display in displays:
            direction = display.schedule.direction
            counts[direction] = counts.get(direction, 0) + 1
        return counts

    def statistics(self) -> ScheduleStatistics:
        displays = self.all_schedules()
        total_stops = sum(count_stops(d.schedule) for d in displays)
        average_stops = total_stops / len(displays) if displays else 0

        return ScheduleStatistics(
            total_schedules=len(displays),
            schedules_by_direction=self.count_by_direction(displays),
            average_stops_per_trip=round_half_up(average_stops, 1),
            lines_served_count=len({d.line.id for d in displays}),
            island_routes_count=sum(
                1 for d in displays if is_island_route(d.line, d.stations)
            ),
        )
