"""Station directory: per-station summaries, filtering and statistics."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import StationNotFoundError
from ..core.models import Line, Station, TransitSnapshot
from ..utils.geo import round_half_up

logger = logging.getLogger(__name__)

SortBy = Literal["name", "schedules", "lines"]
SortOrder = Literal["asc", "desc"]

ALL_ISLANDS = "all"
HUB_MIN_LINES = 2
HUB_MIN_SCHEDULES = 10


class StationSummary(BaseModel):
    """A station with the lines and trips serving it."""

    model_config = ConfigDict(frozen=True)

    station: Station
    lines_served: list[Line] = Field(default_factory=list)
    schedule_count: int = 0
    connections_count: int = 0


class StationViewState(BaseModel):
    """Filter and sort selection of the station list."""

    model_config = ConfigDict(frozen=True)

    island: str = ALL_ISLANDS
    search_term: str = ""
    sort_by: SortBy = "name"
    sort_order: SortOrder = "asc"


class StationStatistics(BaseModel):
    """Aggregate figures over the whole station directory."""

    total_stations: int
    stations_by_island: dict[str, int]
    average_lines_per_station: float
    average_schedules_per_station: float
    transport_hubs_count: int
    most_connected_station: StationSummary | None


def matches_search_term(summary: StationSummary, term: str) -> bool:
    term = term.strip().lower()
    if not term:
        return True
    station = summary.station
    return (
        term in station.name_fr.lower()
        or term in station.name_en.lower()
        or term in station.island_fr.lower()
    )


def sort_summaries(
    summaries: list[StationSummary], sort_by: str = "name", sort_order: str = "asc"
) -> list[StationSummary]:
    """Sorted copy of the summaries."""
    reverse = sort_order == "desc"
    if sort_by == "schedules":
        return sorted(summaries, key=lambda s: s.schedule_count, reverse=reverse)
    if sort_by == "lines":
        return sorted(summaries, key=lambda s: len(s.lines_served), reverse=reverse)
    return sorted(
        summaries, key=lambda s: s.station.name_fr.casefold(), reverse=reverse
    )


class StationDirectory:
    """Station summaries built once from a snapshot."""

    def __init__(self, snapshot: TransitSnapshot):
        """Initialize the directory.

        Args:
            snapshot: Loaded transit data
        """
        self.snapshot = snapshot
        self.summaries = [
            self._summarize(station) for station in snapshot.stations
        ]
        self._by_id = {summary.station.id: summary for summary in self.summaries}

    def _summarize(self, station: Station) -> StationSummary:
        lines_served = [
            line for line in self.snapshot.lines if station.id in line.station_ids
        ]

        schedule_count = sum(
            1
            for line_schedule in self.snapshot.schedules
            for schedule in line_schedule.schedules
            if schedule.serves(station.id)
        )

        connections: set[str] = set()
        for line in lines_served:
            connections.update(line.station_ids)
        connections.discard(station.id)

        return StationSummary(
            station=station,
            lines_served=lines_served,
            schedule_count=schedule_count,
            connections_count=len(connections),
        )

    def get(self, station_id: str) -> StationSummary | None:
        return self._by_id.get(station_id)

    def require(self, station_id: str) -> StationSummary:
        """Summary of a station that must exist.

        Raises:
            StationNotFoundError: If no station has this id
        """
        summary = self.get(station_id)
        if summary is None:
            raise StationNotFoundError(f"Station '{station_id}' not found")
        return summary

    def select(self, view_state: StationViewState | None = None) -> list[StationSummary]:
        """Summaries matching the view state, sorted as it requests."""
        view_state = view_state or StationViewState()
        selected = self.summaries

        if view_state.island != ALL_ISLANDS:
            selected = [
                s for s in selected if s.station.island_fr == view_state.island
            ]

        selected = [
            s for s in selected if matches_search_term(s, view_state.search_term)
        ]
        return sort_summaries(selected, view_state.sort_by, view_state.sort_order)

    def islands(self) -> list[str]:
        """Distinct islands, sorted."""
        return sorted({s.station.island_fr for s in self.summaries})

    def group_by_island(self) -> dict[str, list[StationSummary]]:
        grouped: dict[str, list[StationSummary]] = {}
        for summary in self.summaries:
            grouped.setdefault(summary.station.island_fr, []).append(summary)
        return grouped

    def with_min_lines(self, min_lines: int) -> list[StationSummary]:
        return [s for s in self.summaries if len(s.lines_served) >= min_lines]

    def with_min_schedules(self, min_schedules: int) -> list[StationSummary]:
        return [s for s in self.summaries if s.schedule_count >= min_schedules]

    def transport_hubs(
        self,
        min_lines: int = HUB_MIN_LINES,
        min_schedules: int = HUB_MIN_SCHEDULES,
    ) -> list[StationSummary]:
        """Stations served by more than ``min_lines`` lines and more than
        ``min_schedules`` trips, busiest first."""
        hubs = [
            s
            for s in self.summaries
            if len(s.lines_served) > min_lines and s.schedule_count > min_schedules
        ]
        return sorted(hubs, key=lambda s: s.schedule_count, reverse=True)

    def statistics(self) -> StationStatistics | None:
        """Directory-wide figures, None when there are no stations."""
        if not self.summaries:
            return None

        total = len(self.summaries)
        island_counts: dict[str, int] = {}
        for summary in self.summaries:
            island = summary.station.island_fr
            island_counts[island] = island_counts.get(island, 0) + 1

        total_lines = sum(len(s.lines_served) for s in self.summaries)
        total_schedules = sum(s.schedule_count for s in self.summaries)

        most_connected: StationSummary | None = None
        for summary in self.summaries:
            if (
                most_connected is None
                or summary.connections_count > most_connected.connections_count
            ):
                most_connected = summary

        return StationStatistics(
            total_stations=total,
            stations_by_island=island_counts,
            average_lines_per_station=round_half_up(total_lines / total, 1),
            average_schedules_per_station=round_half_up(total_schedules / total, 1),
            transport_hubs_count=len(self.transport_hubs()),
            most_connected_station=most_connected,
        )
