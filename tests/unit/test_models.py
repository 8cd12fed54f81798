"""Unit tests for data models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from island_transit.core.models import (
    Fare,
    PriceByClass,
    Schedule,
    SearchCriteria,
    Station,
    Stop,
    TransitSnapshot,
    TripStatistics,
)


class TestStation:
    """Test Station model."""

    def test_station_creation(self, stations_data):
        station = Station.model_validate(stations_data[0])
        assert station.id == "NOU"
        assert station.name_en == "Noumea"
        assert station.coordinates.lat == -22.2
        assert str(station) == "Nouméa"

    def test_station_is_immutable(self, stations_data):
        station = Station.model_validate(stations_data[0])
        with pytest.raises(PydanticValidationError):
            station.name_fr = "Autre"

    def test_station_requires_coordinates(self):
        with pytest.raises(PydanticValidationError):
            Station(
                id="X",
                name_fr="X",
                name_en="X",
                island_fr="Lifou",
                island_en="Lifou",
            )


class TestSchedule:
    """Test Schedule model."""

    def setup_method(self):
        self.schedule = Schedule(
            trip_id="T1",
            direction="northbound",
            stops=[
                Stop(station_id="A", departure_time="08:00"),
                Stop(station_id="B", arrival_time="08:30", departure_time="08:35"),
                Stop(station_id="A", arrival_time="09:00"),
            ],
        )

    def test_stop_index_uses_first_occurrence(self):
        assert self.schedule.stop_index("A") == 0
        assert self.schedule.stop_index("B") == 1
        assert self.schedule.stop_index("C") is None

    def test_stop_at(self):
        assert self.schedule.stop_at("B").arrival_time == "08:30"
        assert self.schedule.stop_at("C") is None

    def test_serves(self):
        assert self.schedule.serves("B")
        assert not self.schedule.serves("C")

    def test_defaults(self):
        schedule = Schedule(trip_id="T2", direction="southbound")
        assert schedule.stops == []
        assert schedule.days_of_week == []
        assert schedule.description_fr == ""

    def test_stop_time_format_is_checked(self):
        with pytest.raises(PydanticValidationError):
            Stop(station_id="A", departure_time="8h00")

    @pytest.mark.parametrize("value", ["24:30", "25:99", "12:60"])
    def test_stop_time_range_is_checked(self, value):
        with pytest.raises(PydanticValidationError, match="Invalid time"):
            Stop(station_id="A", departure_time=value)
        with pytest.raises(PydanticValidationError, match="Invalid time"):
            Stop(station_id="A", arrival_time=value)

    def test_last_minute_of_day_is_valid(self):
        stop = Stop(station_id="A", departure_time="23:59", arrival_time="00:00")
        assert stop.departure_time == "23:59"


class TestPrices:
    """Test price models."""

    def test_for_class(self):
        prices = PriceByClass(first_class=5000, second_class=3500, third_class=2000)
        assert prices.for_class("first_class") == 5000
        assert prices.for_class("second_class") == 3500
        assert prices.for_class("third_class") == 2000

    def test_for_unknown_class(self):
        prices = PriceByClass(first_class=5000, second_class=3500, third_class=2000)
        with pytest.raises(ValueError, match="Unknown service class"):
            prices.for_class("business")

    def test_fare_key(self, fares_data):
        fare = Fare.model_validate(fares_data[0])
        assert fare.key == "NOU-KON"


class TestSearchCriteria:
    """Test SearchCriteria model."""

    def test_defaults(self):
        criteria = SearchCriteria(origin_id="NOU", destination_id="KON")
        assert criteria.service_class == "second_class"
        assert criteria.time_preference == "any"
        assert criteria.departure_date is None

    def test_invalid_time_preference(self):
        with pytest.raises(PydanticValidationError):
            SearchCriteria(origin_id="NOU", destination_id="KON", time_preference="night")

    def test_invalid_service_class(self):
        with pytest.raises(PydanticValidationError):
            SearchCriteria(origin_id="NOU", destination_id="KON", service_class="business")


class TestSnapshotAndStatistics:
    """Test container and summary models."""

    def test_empty_statistics(self):
        stats = TripStatistics()
        assert stats.total_routes == 0
        assert stats.average_duration == "0min"
        assert stats.price_range.min == 0
        assert stats.price_range.max == 0
        assert stats.time_distribution.evening == 0

    def test_snapshot_load_failed(self):
        assert not TransitSnapshot().load_failed
        assert TransitSnapshot(failed_sources=["fares"]).load_failed
