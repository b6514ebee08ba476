"""
Geographic utility functions.

Plain (lat, lon) math shared by the simplifier and the run report.
"""
import math
from typing import Iterable, Tuple

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0

# Decimal places of a coverage cell (~11 m at the equator)
COVERAGE_DIGITS = 4


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def calculate_total_distance(coords: Iterable[Tuple[float, float]]) -> float:
    """
    Calculate total distance along a polyline.

    Args:
        coords: (lat, lon) pairs in track order

    Returns:
        Total distance in kilometers
    """
    total = 0.0
    previous = None

    for lat, lon in coords:
        if previous is not None:
            total += haversine(previous[0], previous[1], lat, lon)
        previous = (lat, lon)

    return total


def round_coordinate(value: float, digits: int) -> float:
    """Round half away from zero, like most GPS tooling does."""
    factor = 10 ** digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def is_collinear(
    a: Tuple[float, float],
    b: Tuple[float, float],
    c: Tuple[float, float]
) -> bool:
    """
    Check whether b lies on the straight line through a and c.

    Exact test on the 2D cross product, so it only fires for
    points that were already rounded onto the same line.
    """
    return (c[0] - a[0]) * (b[1] - a[1]) == (b[0] - a[0]) * (c[1] - a[1])


def lies_between(
    a: Tuple[float, float],
    b: Tuple[float, float],
    c: Tuple[float, float]
) -> bool:
    """Check that b is on the segment a-c, not just on its line."""
    if not is_collinear(a, b, c):
        return False
    return (
        min(a[0], c[0]) <= b[0] <= max(a[0], c[0]) and
        min(a[1], c[1]) <= b[1] <= max(a[1], c[1])
    )


def coverage_cell(lat: float, lon: float) -> Tuple[float, float]:
    """Grid cell a point falls into when checking track coverage."""
    return (
        round_coordinate(lat, COVERAGE_DIGITS),
        round_coordinate(lon, COVERAGE_DIGITS),
    )
