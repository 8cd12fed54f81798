"""Data models for island transit search."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.timeutils import parse_time

ServiceClass = Literal["first_class", "second_class", "third_class"]
TimePreference = Literal["morning", "afternoon", "evening", "any"]

SERVICE_CLASSES: tuple[str, ...] = ("first_class", "second_class", "third_class")
TIME_PREFERENCES: tuple[str, ...] = ("any", "morning", "afternoon", "evening")
DIRECTIONS: tuple[str, ...] = ("northbound", "southbound", "outbound", "inbound")

HHMM_PATTERN = r"^\d{2}:\d{2}$"


class Coordinates(BaseModel):
    """Geographic position of a station."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude in degrees")
    lon: float = Field(..., description="Longitude in degrees")


class Station(BaseModel):
    """Represents a station of the network."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique station identifier")
    name_fr: str = Field(..., description="Station name in French")
    name_en: str = Field(..., description="Station name in English")
    island_fr: str = Field(..., description="Island name in French")
    island_en: str = Field(..., description="Island name in English")
    coordinates: Coordinates

    def __str__(self) -> str:
        return self.name_fr


class Line(BaseModel):
    """A transit line and the stations it serves, in order."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique line identifier")
    name: str = Field(..., description="Line name")
    description_fr: str = Field("", description="Description in French")
    description_en: str = Field("", description="Description in English")
    station_ids: list[str] = Field(default_factory=list)

    def __str__(self) -> str:
        return self.name


class Stop(BaseModel):
    """A station visited by a trip."""

    model_config = ConfigDict(frozen=True)

    station_id: str = Field(..., description="Visited station")
    departure_time: str | None = Field(
        None, pattern=HHMM_PATTERN, description="Departure time (HH:MM)"
    )
    arrival_time: str | None = Field(
        None, pattern=HHMM_PATTERN, description="Arrival time (HH:MM)"
    )

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def validate_time_range(cls, v: str | None) -> str | None:
        if v is not None:
            parse_time(v)
        return v


class Schedule(BaseModel):
    """One scheduled run (trip) of a line."""

    model_config = ConfigDict(frozen=True)

    trip_id: str = Field(..., description="Trip identifier")
    direction: str = Field(
        ...,
        description="northbound, southbound, outbound, inbound or a from-/to- island tag",
    )
    description_fr: str = Field("", description="Description in French")
    description_en: str = Field("", description="Description in English")
    days_of_week: list[str] = Field(default_factory=list)
    stops: list[Stop] = Field(default_factory=list)

    def stop_index(self, station_id: str) -> int | None:
        """Index of the first stop at ``station_id``."""
        for index, stop in enumerate(self.stops):
            if stop.station_id == station_id:
                return index
        return None

    def stop_at(self, station_id: str) -> Stop | None:
        """First stop at ``station_id``."""
        index = self.stop_index(station_id)
        return None if index is None else self.stops[index]

    def serves(self, station_id: str) -> bool:
        return self.stop_index(station_id) is not None

    def __str__(self) -> str:
        return f"{self.trip_id} ({self.direction})"


class LineSchedule(BaseModel):
    """All trips of one line."""

    model_config = ConfigDict(frozen=True)

    line_id: str
    schedules: list[Schedule] = Field(default_factory=list)


class PriceByClass(BaseModel):
    """Prices of a fare, in integer currency units."""

    model_config = ConfigDict(frozen=True)

    first_class: int
    second_class: int
    third_class: int

    def for_class(self, service_class: str) -> int:
        """Price for the given service class."""
        if service_class not in SERVICE_CLASSES:
            raise ValueError(f"Unknown service class: {service_class}")
        return int(getattr(self, service_class))


class Fare(BaseModel):
    """Priced relationship between an origin and a destination station."""

    model_config = ConfigDict(frozen=True)

    origin_station_id: str
    destination_station_id: str
    prices: PriceByClass

    @property
    def key(self) -> str:
        return f"{self.origin_station_id}-{self.destination_station_id}"


class SearchCriteria(BaseModel):
    """Request model for trip search."""

    model_config = ConfigDict(frozen=True)

    origin_id: str | None = Field(None, description="Origin station id")
    destination_id: str | None = Field(None, description="Destination station id")
    departure_date: date | None = Field(
        None, description="Travel date, informational only"
    )
    service_class: ServiceClass = Field(
        "second_class", description="Class used to price the results"
    )
    time_preference: TimePreference = Field(
        "any", description="Time-of-day band of the origin departure"
    )


class SearchResult(BaseModel):
    """A trip connecting the requested origin and destination."""

    model_config = ConfigDict(frozen=True)

    origin: Station
    destination: Station
    schedule: Schedule
    price: PriceByClass
    duration: str = Field(..., description="Formatted duration or N/A")
    distance: int = Field(..., description="Great-circle distance in km")

    @property
    def departure_time(self) -> str | None:
        """Departure time at the origin stop."""
        stop = self.schedule.stop_at(self.origin.id)
        return stop.departure_time if stop else None

    @property
    def arrival_time(self) -> str | None:
        """Arrival time at the destination stop."""
        stop = self.schedule.stop_at(self.destination.id)
        return stop.arrival_time if stop else None

    @property
    def key(self) -> str:
        return f"{self.origin.id}-{self.destination.id}-{self.schedule.trip_id}"

    def price_for(self, service_class: str) -> int:
        return self.price.for_class(service_class)

    def __str__(self) -> str:
        return (
            f"{self.origin} → {self.destination} "
            f"({self.departure_time or '--:--'}, {self.duration})"
        )


class PriceRange(BaseModel):
    """Lowest and highest price of a result set."""

    min: int = 0
    max: int = 0


class TimeDistribution(BaseModel):
    """Number of departures per time-of-day band."""

    morning: int = 0
    afternoon: int = 0
    evening: int = 0


class TripStatistics(BaseModel):
    """Summary of a list of search results."""

    total_routes: int = 0
    average_duration: str = "0min"
    price_range: PriceRange = Field(default_factory=PriceRange)
    time_distribution: TimeDistribution = Field(default_factory=TimeDistribution)


class TransitSnapshot(BaseModel):
    """The static collections of one session."""

    model_config = ConfigDict(frozen=True)

    stations: list[Station] = Field(default_factory=list)
    lines: list[Line] = Field(default_factory=list)
    schedules: list[LineSchedule] = Field(default_factory=list)
    fares: list[Fare] = Field(default_factory=list)
    failed_sources: list[str] = Field(
        default_factory=list, description="Collections that could not be loaded"
    )

    @property
    def load_failed(self) -> bool:
        return bool(self.failed_sources)
