"""Helpers for "HH:MM" times, trip durations and time-of-day bands."""

import re

NOT_AVAILABLE = "N/A"

# [start, end) hours of each time-of-day band
TIME_BANDS: dict[str, tuple[int, int]] = {
    "morning": (6, 12),
    "afternoon": (12, 18),
    "evening": (18, 22),
}

_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")
_DURATION_PATTERN = re.compile(r"^\s*(?:(\d+)h)?\s*(?:(\d+)\s*min)?\s*$")


def parse_time(value: str) -> int:
    """Parse a "HH:MM" string into minutes since midnight.

    Raises:
        ValueError: If the value is not a valid zero-padded 24-hour time
    """
    match = _TIME_PATTERN.match(value)
    if not match:
        raise ValueError(f"Invalid time '{value}', expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid time '{value}', expected HH:MM")
    return hours * 60 + minutes


def hour_of(value: str) -> int:
    """Hour component of a "HH:MM" string."""
    return parse_time(value) // 60


def time_band(hour: int) -> str | None:
    """Name of the band containing ``hour``, or None outside every band."""
    for name, (start, end) in TIME_BANDS.items():
        if start <= hour < end:
            return name
    return None


def format_duration(total_minutes: int) -> str:
    """Format minutes as "1h 35min", "1h" or "45min"."""
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}min" if minutes > 0 else f"{hours}h"
    return f"{minutes}min"


def minutes_between(departure: str | None, arrival: str | None) -> int | None:
    """Same-day minutes from departure to arrival.

    Returns None when a time is missing or the arrival is earlier than the
    departure (the trip crosses midnight).
    """
    if not departure or not arrival:
        return None

    diff = parse_time(arrival) - parse_time(departure)
    if diff < 0:
        return None
    return diff


def duration_text(
    departure: str | None, arrival: str | None, unavailable: str = NOT_AVAILABLE
) -> str:
    """Formatted duration between two times, ``unavailable`` when undefined."""
    minutes = minutes_between(departure, arrival)
    if minutes is None:
        return unavailable
    return format_duration(minutes)


def parse_duration_to_minutes(text: str) -> int:
    """Inverse of :func:`format_duration`.

    Raises:
        ValueError: If the text is not a formatted duration
    """
    match = _DURATION_PATTERN.match(text)
    if not match or not any(match.groups()):
        raise ValueError(f"Invalid duration '{text}'")

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return hours * 60 + minutes
