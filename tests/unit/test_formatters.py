"""Unit tests for CLI formatters."""

import json
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from island_transit.catalog.fares import FareTable
from island_transit.catalog.schedules import ScheduleBoard
from island_transit.catalog.stations import StationDirectory
from island_transit.cli.formatters import (
    format_fare_table,
    format_results_detailed,
    format_results_json,
    format_results_table,
    format_schedule_statistics,
    format_schedule_table,
    format_station_detail,
    format_station_statistics,
    format_station_table,
    format_statistics,
    result_to_dict,
)
from island_transit.core.search import TripSearchEngine
from island_transit.core.statistics import aggregate


@pytest.fixture
def output_console():
    console = Console(file=StringIO(), width=200)
    with patch("island_transit.cli.formatters.console", console):
        yield console


class TestResultFormatters:
    """Test search result formatters."""

    @pytest.fixture(autouse=True)
    def setup_results(self, snapshot):
        self.results = TripSearchEngine(snapshot).search_trips("NOU", "KON")

    def test_format_results_table(self, output_console):
        format_results_table(self.results)
        output = output_console.file.getvalue()

        assert "Trips: Nouméa → Koné" in output
        assert "RT1-N-0800" in output
        assert "3h 15min" in output
        assert "N/A" in output
        assert "Deuxième Classe" in output
        assert "3\u202f500 XPF" in output
        assert "Distance:" in output

    def test_format_results_table_verbose(self, output_console):
        format_results_table(self.results, "first_class", verbose=True)
        output = output_console.file.getvalue()

        assert "Première Classe" in output
        assert "5\u202f000 XPF" in output
        assert "Direction Nord" in output
        assert "friday" in output

    def test_format_results_table_empty(self, output_console):
        format_results_table([])
        assert "No trips found." in output_console.file.getvalue()

    def test_format_results_detailed(self, output_console):
        format_results_detailed(self.results, "third_class", "EUR")
        output = output_console.file.getvalue()

        assert "Trip 1: RT1-N-0800" in output
        assert "Trip 3: RT1-N-2300" in output
        assert "Grande-Terre" in output
        assert "2\u202f000 EUR" in output
        assert "Départ du matin" in output

    def test_format_results_json(self):
        data = json.loads(format_results_json(self.results, "third_class"))

        assert len(data) == 3
        assert data[0]["trip_id"] == "RT1-N-0800"
        assert data[0]["origin"]["name_fr"] == "Nouméa"
        assert data[0]["price"] == 2000
        assert data[2]["duration"] == "N/A"
        assert data[0]["prices"]["first_class"] == 5000

    def test_result_to_dict(self):
        data = result_to_dict(self.results[1], "second_class")

        assert data["departure_time"] == "14:30"
        assert data["arrival_time"] == "17:45"
        assert data["service_class"] == "second_class"
        assert isinstance(data["distance_km"], int)

    def test_format_statistics(self, output_console):
        format_statistics(aggregate(self.results))
        output = output_console.file.getvalue()

        assert "Trip Statistics" in output
        assert "2h 10min" in output
        assert "2\u202f000 XPF" in output


class TestCatalogFormatters:
    """Test station, schedule and fare formatters."""

    def test_format_station_table(self, snapshot, output_console):
        format_station_table(StationDirectory(snapshot).select())
        output = output_console.file.getvalue()

        assert "Nouméa" in output
        assert "Île des Pins" in output

    def test_format_station_table_empty(self, output_console):
        format_station_table([])
        assert "No stations found." in output_console.file.getvalue()

    def test_format_station_detail(self, snapshot, output_console):
        format_station_detail(StationDirectory(snapshot).require("NOU"))
        output = output_console.file.getvalue()

        assert "Nouméa / Noumea" in output
        assert "RT1 Côte Ouest (RT1)" in output
        assert "Connections:" in output

    def test_format_station_statistics(self, snapshot, output_console):
        format_station_statistics(StationDirectory(snapshot).statistics())
        output = output_console.file.getvalue()

        assert "Station Statistics" in output
        assert "Most connected" in output

    def test_format_station_statistics_empty(self, output_console):
        format_station_statistics(None)
        assert "No stations loaded." in output_console.file.getvalue()

    def test_format_schedule_table(self, snapshot, output_console):
        board = ScheduleBoard(snapshot)
        format_schedule_table(board.tab("south"), title="South")
        output = output_console.file.getvalue()

        assert "RT1-S-0700" in output
        assert "IL1-FROM-LIF" in output
        assert "Koné 07:00" in output
        assert "Direction Sud" in output

    def test_format_schedule_table_empty(self, output_console):
        format_schedule_table([], title="North")
        assert "No trips in North." in output_console.file.getvalue()

    def test_format_schedule_statistics(self, snapshot, output_console):
        format_schedule_statistics(ScheduleBoard(snapshot).statistics())
        output = output_console.file.getvalue()

        assert "Schedule Statistics" in output
        assert "3.2" in output

    def test_format_fare_table(self, snapshot, output_console):
        format_fare_table(FareTable(snapshot).select("ile-des-pins"), title="Pins")
        output = output_console.file.getvalue()

        assert "Vao" in output
        assert "6\u202f500 XPF" in output
        assert "km" in output

    def test_format_fare_table_empty(self, output_console):
        format_fare_table([])
        assert "No fares found." in output_console.file.getvalue()
