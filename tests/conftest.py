"""Test configuration and fixtures."""

import json

import pytest

from island_transit.core.models import Fare, Line, LineSchedule, Station, TransitSnapshot


def _station(station_id, name, island_fr, island_en, lat, lon, name_en=None):
    return {
        "id": station_id,
        "name_fr": name,
        "name_en": name_en or name,
        "island_fr": island_fr,
        "island_en": island_en,
        "coordinates": {"lat": lat, "lon": lon},
    }


def _fare(origin, destination, first, second, third):
    return {
        "origin_station_id": origin,
        "destination_station_id": destination,
        "prices": {
            "first_class": first,
            "second_class": second,
            "third_class": third,
        },
    }


@pytest.fixture
def stations_data():
    """Sample stations: four on Grande-Terre, three on the outer islands."""
    return [
        _station("NOU", "Nouméa", "Grande-Terre", "Grande Terre", -22.2, 166.4, "Noumea"),
        _station("LIF", "Wé", "Lifou", "Lifou", -20.9, 167.0),
        _station("PAI", "Païta", "Grande-Terre", "Grande Terre", -22.13, 166.36, "Paita"),
        _station("BOU", "Bourail", "Grande-Terre", "Grande Terre", -21.57, 165.49),
        _station("KON", "Koné", "Grande-Terre", "Grande Terre", -21.06, 164.86, "Kone"),
        _station("MAR", "Tadine", "Maré", "Mare", -21.55, 167.88),
        _station("IDP", "Vao", "Île des Pins", "Isle of Pines", -22.67, 167.48),
    ]


@pytest.fixture
def lines_data():
    """Sample lines: the west coast road and two island links."""
    return [
        {
            "id": "RT1",
            "name": "RT1 Côte Ouest",
            "description_fr": "Nouméa - Koné par la côte ouest",
            "description_en": "Noumea - Kone along the west coast",
            "station_ids": ["NOU", "PAI", "BOU", "KON"],
        },
        {
            "id": "IL1",
            "name": "IL1 Îles Loyauté",
            "station_ids": ["NOU", "LIF", "MAR"],
        },
        {
            "id": "IP1",
            "name": "IP1 Île des Pins",
            "station_ids": ["NOU", "IDP"],
        },
    ]


@pytest.fixture
def schedules_data():
    """Sample trips of every line, including one that crosses midnight."""
    weekdays = ["monday", "tuesday", "wednesday", "thursday", "friday"]
    return [
        {
            "line_id": "RT1",
            "schedules": [
                {
                    "trip_id": "RT1-N-0800",
                    "direction": "northbound",
                    "description_fr": "Départ du matin",
                    "days_of_week": weekdays,
                    "stops": [
                        {"station_id": "NOU", "departure_time": "08:00"},
                        {"station_id": "PAI", "arrival_time": "08:25", "departure_time": "08:30"},
                        {"station_id": "BOU", "arrival_time": "10:00", "departure_time": "10:05"},
                        {"station_id": "KON", "arrival_time": "11:15"},
                    ],
                },
                {
                    "trip_id": "RT1-N-1430",
                    "direction": "northbound",
                    "days_of_week": weekdays,
                    "stops": [
                        {"station_id": "NOU", "departure_time": "14:30"},
                        {"station_id": "PAI", "arrival_time": "14:55", "departure_time": "15:00"},
                        {"station_id": "BOU", "arrival_time": "16:30", "departure_time": "16:35"},
                        {"station_id": "KON", "arrival_time": "17:45"},
                    ],
                },
                {
                    "trip_id": "RT1-S-0700",
                    "direction": "southbound",
                    "days_of_week": weekdays,
                    "stops": [
                        {"station_id": "KON", "departure_time": "07:00"},
                        {"station_id": "BOU", "arrival_time": "08:10", "departure_time": "08:15"},
                        {"station_id": "PAI", "arrival_time": "09:45", "departure_time": "09:50"},
                        {"station_id": "NOU", "arrival_time": "10:15"},
                    ],
                },
                {
                    "trip_id": "RT1-N-2300",
                    "direction": "northbound",
                    "days_of_week": ["friday"],
                    "stops": [
                        {"station_id": "NOU", "departure_time": "23:00"},
                        {"station_id": "PAI", "arrival_time": "23:25", "departure_time": "23:30"},
                        {"station_id": "BOU", "arrival_time": "00:55", "departure_time": "01:00"},
                        {"station_id": "KON", "arrival_time": "02:10"},
                    ],
                },
            ],
        },
        {
            "line_id": "IL1",
            "schedules": [
                {
                    "trip_id": "IL1-TO-LIF",
                    "direction": "to-lifou",
                    "days_of_week": ["monday", "thursday"],
                    "stops": [
                        {"station_id": "NOU", "departure_time": "08:00"},
                        {"station_id": "LIF", "arrival_time": "10:15", "departure_time": "10:45"},
                        {"station_id": "MAR", "arrival_time": "11:30"},
                    ],
                },
                {
                    "trip_id": "IL1-FROM-LIF",
                    "direction": "from-lifou",
                    "days_of_week": ["monday", "thursday"],
                    "stops": [
                        {"station_id": "MAR", "departure_time": "13:00"},
                        {"station_id": "LIF", "arrival_time": "13:45", "departure_time": "14:15"},
                        {"station_id": "NOU", "arrival_time": "16:30"},
                    ],
                },
                {
                    "trip_id": "IL1-EVE",
                    "direction": "to-mare",
                    "days_of_week": ["saturday"],
                    "stops": [
                        {"station_id": "NOU", "departure_time": "18:30"},
                        {"station_id": "LIF", "arrival_time": "20:45", "departure_time": "21:00"},
                        {"station_id": "MAR", "arrival_time": "22:00"},
                    ],
                },
            ],
        },
        {
            "line_id": "IP1",
            "schedules": [
                {
                    "trip_id": "IP1-OUT",
                    "direction": "outbound",
                    "days_of_week": ["saturday", "sunday"],
                    "stops": [
                        {"station_id": "NOU", "departure_time": "06:15"},
                        {"station_id": "IDP", "arrival_time": "07:10"},
                    ],
                },
                {
                    "trip_id": "IP1-IN",
                    "direction": "inbound",
                    "days_of_week": ["saturday", "sunday"],
                    "stops": [
                        {"station_id": "IDP", "departure_time": "17:00"},
                        {"station_id": "NOU", "arrival_time": "17:55"},
                    ],
                },
            ],
        },
    ]


@pytest.fixture
def fares_data():
    """Sample fares. There is deliberately no Bourail to Koné fare."""
    return [
        _fare("NOU", "KON", 5000, 3500, 2000),
        _fare("NOU", "BOU", 3500, 2500, 1500),
        _fare("NOU", "LIF", 12000, 8500, 6000),
        _fare("LIF", "NOU", 12000, 8500, 6000),
        _fare("NOU", "IDP", 9000, 6500, 4500),
        _fare("KON", "NOU", 5000, 3500, 2000),
        _fare("NOU", "PAI", 800, 600, 400),
        _fare("NOU", "MAR", 14000, 10000, 7000),
    ]


@pytest.fixture
def snapshot(stations_data, lines_data, schedules_data, fares_data):
    """Snapshot built from the sample collections."""
    return TransitSnapshot(
        stations=[Station.model_validate(s) for s in stations_data],
        lines=[Line.model_validate(line) for line in lines_data],
        schedules=[LineSchedule.model_validate(s) for s in schedules_data],
        fares=[Fare.model_validate(f) for f in fares_data],
    )


@pytest.fixture
def data_dir(tmp_path, stations_data, lines_data, schedules_data, fares_data):
    """Directory holding the sample collections as JSON files."""
    files = {
        "stations.json": stations_data,
        "lines.json": lines_data,
        "schedules.json": schedules_data,
        "prices.json": fares_data,
    }
    for filename, payload in files.items():
        (tmp_path / filename).write_text(
            json.dumps(payload, ensure_ascii=False), encoding="utf-8"
        )
    return tmp_path
