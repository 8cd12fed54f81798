"""Summary statistics over trip search results."""

from ..utils.geo import round_half_up
from ..utils.timeutils import (
    NOT_AVAILABLE,
    format_duration,
    hour_of,
    parse_duration_to_minutes,
    time_band,
)
from .models import PriceRange, SearchResult, TimeDistribution, TripStatistics

# economy figure used for the price range
REFERENCE_CLASS = "third_class"


def aggregate(results: list[SearchResult]) -> TripStatistics:
    """Compute count, average duration, price range and time distribution.

    The average divides by the total number of results, so trips without a
    duration count as zero minutes.
    """
    if not results:
        return TripStatistics()

    total_minutes = 0
    prices = []
    bands = {"morning": 0, "afternoon": 0, "evening": 0}

    for result in results:
        if result.duration and result.duration != NOT_AVAILABLE:
            total_minutes += parse_duration_to_minutes(result.duration)

        prices.append(result.price_for(REFERENCE_CLASS))

        departure = result.departure_time
        if departure:
            band = time_band(hour_of(departure))
            if band is not None:
                bands[band] += 1

    average = int(round_half_up(total_minutes / len(results)))

    return TripStatistics(
        total_routes=len(results),
        average_duration=format_duration(average),
        price_range=PriceRange(min=min(prices), max=max(prices)),
        time_distribution=TimeDistribution(**bands),
    )
