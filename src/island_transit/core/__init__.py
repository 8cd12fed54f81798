"""Core transit search functionality."""

from .exceptions import (
    DataFormatError,
    DataLoadError,
    NetworkError,
    StationNotFoundError,
    TransitSearchError,
    ValidationError,
)
from .models import (
    Coordinates,
    Fare,
    Line,
    LineSchedule,
    PriceByClass,
    Schedule,
    SearchCriteria,
    SearchResult,
    Station,
    Stop,
    TransitSnapshot,
    TripStatistics,
)
from .search import TripSearchEngine
from .statistics import aggregate

__all__ = [
    "Coordinates",
    "Fare",
    "Line",
    "LineSchedule",
    "PriceByClass",
    "Schedule",
    "SearchCriteria",
    "SearchResult",
    "Station",
    "Stop",
    "TransitSnapshot",
    "TripSearchEngine",
    "TripStatistics",
    "aggregate",
    "TransitSearchError",
    "DataLoadError",
    "DataFormatError",
    "NetworkError",
    "StationNotFoundError",
    "ValidationError",
]
