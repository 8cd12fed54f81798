"""Utility modules for island-transit."""

from .geo import distance_km, format_distance, haversine_km, round_half_up
from .labels import (
    direction_label,
    format_price,
    is_outer_island,
    service_class_label,
)
from .timeutils import (
    NOT_AVAILABLE,
    TIME_BANDS,
    duration_text,
    format_duration,
    parse_duration_to_minutes,
    parse_time,
    time_band,
)

__all__ = [
    "NOT_AVAILABLE",
    "TIME_BANDS",
    "direction_label",
    "distance_km",
    "duration_text",
    "format_distance",
    "format_duration",
    "format_price",
    "haversine_km",
    "is_outer_island",
    "parse_duration_to_minutes",
    "parse_time",
    "round_half_up",
    "service_class_label",
    "time_band",
]
