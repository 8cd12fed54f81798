"""Trip search over the static transit collections."""

import logging

from ..utils.geo import distance_km
from ..utils.timeutils import TIME_BANDS, duration_text, hour_of
from .models import (
    Fare,
    LineSchedule,
    Schedule,
    SearchCriteria,
    SearchResult,
    Station,
    TransitSnapshot,
)

logger = logging.getLogger(__name__)

# sort key for trips without a departure time at the origin
LATEST_DEPARTURE = "23:59"


def find_connecting_schedules(
    line_schedules: list[LineSchedule], origin_id: str, destination_id: str
) -> list[Schedule]:
    """Schedules that stop at the origin before the destination.

    Args:
        line_schedules: Trips of every line
        origin_id: Origin station id
        destination_id: Destination station id

    Returns:
        Matching schedules across all lines, in collection order
    """
    connecting = []
    for line_schedule in line_schedules:
        for schedule in line_schedule.schedules:
            origin_index = schedule.stop_index(origin_id)
            destination_index = schedule.stop_index(destination_id)
            if origin_index is None or destination_index is None:
                continue
            if origin_index < destination_index:
                connecting.append(schedule)
    return connecting


def calculate_trip_duration(
    schedule: Schedule, origin_id: str, destination_id: str
) -> str:
    """Duration from the origin departure to the destination arrival.

    Returns "N/A" when either time is missing or the trip crosses midnight.
    """
    origin_stop = schedule.stop_at(origin_id)
    destination_stop = schedule.stop_at(destination_id)
    return duration_text(
        origin_stop.departure_time if origin_stop else None,
        destination_stop.arrival_time if destination_stop else None,
    )


def matches_time_preference(result: SearchResult, time_preference: str) -> bool:
    """Whether the origin departure falls in the requested time-of-day band.

    Trips without a departure time at the origin are kept.
    """
    if time_preference == "any":
        return True

    band = TIME_BANDS.get(time_preference)
    departure = result.departure_time
    if band is None or not departure:
        return True

    start, end = band
    return start <= hour_of(departure) < end


def departure_sort_key(result: SearchResult) -> str:
    return result.departure_time or LATEST_DEPARTURE


class TripSearchEngine:
    """Search engine over one snapshot of the transit data."""

    def __init__(self, snapshot: TransitSnapshot):
        """Initialize the engine.

        Args:
            snapshot: Loaded stations, lines, schedules and fares
        """
        self.snapshot = snapshot
        self._stations_by_id: dict[str, Station] = {
            station.id: station for station in snapshot.stations
        }
        self._fares_by_pair: dict[tuple[str, str], Fare] = {}
        for fare in snapshot.fares:
            pair = (fare.origin_station_id, fare.destination_station_id)
            # first matching row wins
            self._fares_by_pair.setdefault(pair, fare)

    def get_station(self, station_id: str) -> Station | None:
        return self._stations_by_id.get(station_id)

    def get_fare(self, origin_id: str, destination_id: str) -> Fare | None:
        """Fare for the exact (origin, destination) pair."""
        return self._fares_by_pair.get((origin_id, destination_id))

    def search(self, criteria: SearchCriteria) -> list[SearchResult]:
        """Search trips matching the criteria.

        Args:
            criteria: Origin, destination and filters

        Returns:
            Results sorted by departure time at the origin. Unknown stations,
            a missing fare and unconnected stations all give an empty list.
        """
        origin_id = criteria.origin_id
        destination_id = criteria.destination_id
        if not origin_id or not destination_id:
            return []

        origin = self.get_station(origin_id)
        destination = self.get_station(destination_id)
        if origin is None or destination is None:
            logger.debug(f"Unknown station in search {origin_id} → {destination_id}")
            return []

        schedules = find_connecting_schedules(
            self.snapshot.schedules, origin_id, destination_id
        )

        fare = self.get_fare(origin_id, destination_id)
        if fare is None:
            logger.debug(f"No fare from {origin_id} to {destination_id}")
            return []

        distance = int(
            distance_km(
                origin.coordinates.lat,
                origin.coordinates.lon,
                destination.coordinates.lat,
                destination.coordinates.lon,
                precision=0,
            )
        )

        results = [
            SearchResult(
                origin=origin,
                destination=destination,
                schedule=schedule,
                price=fare.prices,
                duration=calculate_trip_duration(schedule, origin_id, destination_id),
                distance=distance,
            )
            for schedule in schedules
        ]
        results = [
            result
            for result in results
            if matches_time_preference(result, criteria.time_preference)
        ]
        results.sort(key=departure_sort_key)

        logger.debug(
            f"Found {len(results)} trips from {origin_id} to {destination_id}"
        )
        return results

    def search_trips(
        self,
        origin_id: str | None,
        destination_id: str | None,
        service_class: str = "second_class",
        time_preference: str = "any",
    ) -> list[SearchResult]:
        """Convenience wrapper building the criteria from plain arguments."""
        criteria = SearchCriteria(
            origin_id=origin_id,
            destination_id=destination_id,
            service_class=service_class,  # type: ignore[arg-type]
            time_preference=time_preference,  # type: ignore[arg-type]
        )
        return self.search(criteria)

    def search_stations(self, query: str, limit: int = 10) -> list[Station]:
        """Stations whose French or English name, or island, contains the query."""
        query_lower = query.lower()
        matches = [
            station
            for station in self.snapshot.stations
            if query_lower in station.name_fr.lower()
            or query_lower in station.name_en.lower()
            or query_lower in station.island_fr.lower()
        ]
        return matches[:limit]

    def popular_destinations(self, origin_id: str, limit: int = 5) -> list[Station]:
        """Stations reachable without a transfer from the origin.

        Args:
            origin_id: Origin station id
            limit: Maximum number of suggestions

        Returns:
            Unique stations, in the order the serving lines list them
        """
        seen: set[str] = set()
        destinations: list[Station] = []

        for line in self.snapshot.lines:
            if origin_id not in line.station_ids:
                continue
            for station_id in line.station_ids:
                if station_id == origin_id or station_id in seen:
                    continue
                station = self.get_station(station_id)
                if station is None:
                    continue
                seen.add(station_id)
                destinations.append(station)

        return destinations[:limit]
