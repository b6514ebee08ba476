"""
Shared utilities (NOT conversion logic).

Usage:
    from gpx2js.shared import haversine, round_coordinate
    from gpx2js.shared.formatters import format_distance_km
"""
from .geo import (
    haversine,
    calculate_total_distance,
    round_coordinate,
    is_collinear,
    lies_between,
    coverage_cell,
    EARTH_RADIUS_KM,
    COVERAGE_DIGITS,
)
from .formatters import (
    format_distance_km,
    format_count,
)
