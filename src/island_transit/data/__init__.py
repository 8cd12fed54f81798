"""Static data loading."""

from .store import TransitDataStore

__all__ = ["TransitDataStore"]
