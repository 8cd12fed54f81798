"""Great-circle distance helpers."""

import math

EARTH_RADIUS_KM = 6371


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero, the way displayed figures are rounded.

    Python's built-in ``round`` uses banker's rounding, which would turn
    152.5 km into 152 instead of 153.
    """
    factor = 10**digits
    scaled = abs(value) * factor
    rounded = math.floor(scaled + 0.5) / factor
    return math.copysign(rounded, value)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Unrounded haversine distance in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    precision: int | None = None,
) -> float:
    """Distance between two coordinates in kilometers.

    Args:
        lat1: Latitude of the first point
        lon1: Longitude of the first point
        lat2: Latitude of the second point
        lon2: Longitude of the second point
        precision: Decimal places to round to. ``1`` is used for display,
            ``0`` for fares and trip matching, ``None`` keeps the raw value.

    Returns:
        Distance in kilometers
    """
    distance = haversine_km(lat1, lon1, lat2, lon2)
    if precision is None:
        return distance
    return round_half_up(distance, precision)


def format_distance(distance: float) -> str:
    """Render a distance in kilometers as text ("850 m", "12.4 km")."""
    if distance < 1:
        return f"{int(round_half_up(distance * 1000))} m"
    if float(distance).is_integer():
        return f"{int(distance)} km"
    return f"{distance} km"
