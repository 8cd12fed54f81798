"""Island Transit Package

A Python package for browsing a simulated island transit network and
searching trips between its stations, with CLI and MCP server front ends.
"""

__version__ = "0.1.0"

from .core.models import SearchResult, Station
from .core.search import TripSearchEngine
from .core.statistics import aggregate
from .data.store import TransitDataStore

__all__ = [
    "SearchResult",
    "Station",
    "TransitDataStore",
    "TripSearchEngine",
    "aggregate",
]
