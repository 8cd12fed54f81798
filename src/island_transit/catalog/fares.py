"""Fare table with distances and geographic zones."""

import logging

from pydantic import BaseModel, ConfigDict

from ..core.models import Fare, Station, TransitSnapshot
from ..utils.geo import distance_km
from ..utils.labels import ISLE_OF_PINES, LOYALTY_ISLANDS, MAINLAND_ISLAND

logger = logging.getLogger(__name__)

ZONES: tuple[str, ...] = ("all", "grande-terre", "loyaute", "ile-des-pins")
ZONE_LABELS = {
    "all": "Toutes les zones",
    "grande-terre": "Grande-Terre",
    "loyaute": "Îles Loyauté",
    "ile-des-pins": "Île des Pins",
}


class FareDisplay(BaseModel):
    """A fare with its resolved stations."""

    model_config = ConfigDict(frozen=True)

    fare: Fare
    origin: Station
    destination: Station
    distance: float | None = None
    price_per_km: float | None = None

    @property
    def key(self) -> str:
        return self.fare.key


def in_zone(display: FareDisplay, zone: str) -> bool:
    """Whether a fare belongs to a geographic zone.

    Raises:
        ValueError: If the zone is unknown
    """
    origin_island = display.origin.island_fr
    destination_island = display.destination.island_fr

    if zone == "all":
        return True
    if zone == "grande-terre":
        return origin_island == MAINLAND_ISLAND and destination_island == MAINLAND_ISLAND
    if zone == "loyaute":
        return origin_island in LOYALTY_ISLANDS or destination_island in LOYALTY_ISLANDS
    if zone == "ile-des-pins":
        return origin_island == ISLE_OF_PINES or destination_island == ISLE_OF_PINES
    raise ValueError(f"Unknown zone '{zone}', expected one of {', '.join(ZONES)}")


class FareTable:
    """Every priced origin/destination pair of the network."""

    def __init__(self, snapshot: TransitSnapshot):
        self.snapshot = snapshot
        stations_by_id = {station.id: station for station in snapshot.stations}
        self.displays: list[FareDisplay] = []

        for fare in snapshot.fares:
            origin = stations_by_id.get(fare.origin_station_id)
            destination = stations_by_id.get(fare.destination_station_id)
            if origin is None or destination is None:
                logger.warning(f"Station not found for fare {fare.key}")
                continue
            self.displays.append(self._display(fare, origin, destination))

    @staticmethod
    def _display(fare: Fare, origin: Station, destination: Station) -> FareDisplay:
        distance = distance_km(
            origin.coordinates.lat,
            origin.coordinates.lon,
            destination.coordinates.lat,
            destination.coordinates.lon,
            precision=1,
        )
        price_per_km = fare.prices.second_class / distance if distance else None
        return FareDisplay(
            fare=fare,
            origin=origin,
            destination=destination,
            distance=distance,
            price_per_km=price_per_km,
        )

    def select(
        self, zone: str = "all", service_class: str = "second_class"
    ) -> list[FareDisplay]:
        """Fares of a zone, cheapest first for the given class."""
        selected = [d for d in self.displays if in_zone(d, zone)]
        return sorted(selected, key=lambda d: d.fare.prices.for_class(service_class))

    def zone_count(self, zone: str) -> int:
        return sum(1 for d in self.displays if in_zone(d, zone))
