"""
Tests for shared geographic functions.

Tests the haversine distance, rounding and collinearity helpers.
"""

import pytest

from gpx2js.shared.geo import (
    haversine,
    calculate_total_distance,
    round_coordinate,
    is_collinear,
    lies_between,
    coverage_cell,
    EARTH_RADIUS_KM,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        assert haversine(47.1, 8.5, 47.1, 8.5) == 0.0

    def test_small_distance(self):
        """0.001 degree latitude is about 111 meters."""
        dist = haversine(47.0, 8.0, 47.001, 8.0)
        assert 0.1 < dist < 0.12

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(47.0, 8.0, 48.0, 9.0)
        dist_ba = haversine(48.0, 9.0, 47.0, 8.0)
        assert dist_ab == pytest.approx(dist_ba, rel=0.0001)

    def test_north_south_distance(self):
        """1 degree latitude is about 111 km everywhere."""
        assert 110 < haversine(0.0, 0.0, 1.0, 0.0) < 112

    def test_antimeridian(self):
        """2 degrees across 180° longitude at the equator is about 222 km."""
        assert 220 < haversine(0.0, 179.0, 0.0, -179.0) < 225

    def test_earth_radius_constant(self):
        assert EARTH_RADIUS_KM == 6371.0


# =============================================================================
# Test Calculate Total Distance
# =============================================================================

class TestCalculateTotalDistance:
    """Tests for calculate_total_distance function."""

    def test_empty(self):
        assert calculate_total_distance([]) == 0.0

    def test_single_point(self):
        assert calculate_total_distance([(47.0, 8.0)]) == 0.0

    def test_multiple_points(self):
        """Three steps of ~111 m each."""
        coords = [(47.0, 8.0), (47.001, 8.0), (47.002, 8.0), (47.003, 8.0)]
        assert 0.3 < calculate_total_distance(coords) < 0.36

    def test_accepts_generator(self):
        """Works on a one-shot iterator, not just lists."""
        coords = ((47.0 + i * 0.001, 8.0) for i in range(3))
        assert calculate_total_distance(coords) > 0.2

    def test_round_trip(self):
        """Out and back is twice one way."""
        one_way = haversine(47.0, 8.0, 47.01, 8.0)
        dist = calculate_total_distance([(47.0, 8.0), (47.01, 8.0), (47.0, 8.0)])
        assert dist == pytest.approx(2 * one_way, rel=0.001)


# =============================================================================
# Test Rounding
# =============================================================================

class TestRoundCoordinate:
    """Tests for round_coordinate."""

    def test_six_digits(self):
        assert round_coordinate(51.3297934, 6) == 51.329793

    def test_rounds_up(self):
        assert round_coordinate(51.3297936, 6) == 51.329794

    def test_half_away_from_zero(self):
        """Unlike round(), .5 goes away from zero."""
        assert round_coordinate(2.5, 0) == 3.0
        assert round_coordinate(-2.5, 0) == -3.0

    def test_negative(self):
        assert round_coordinate(-33.86881234, 4) == -33.8688

    def test_already_rounded(self):
        assert round_coordinate(47.1, 6) == 47.1


# =============================================================================
# Test Collinearity
# =============================================================================

class TestCollinear:
    """Tests for is_collinear and lies_between."""

    def test_meridian(self):
        assert is_collinear((0.0, 5.0), (1.0, 5.0), (2.0, 5.0))

    def test_diagonal(self):
        assert is_collinear((0.0, 0.0), (1.0, 1.0), (2.0, 2.0))

    def test_corner(self):
        assert not is_collinear((0.0, 0.0), (1.0, 1.0), (2.0, 0.0))

    def test_between(self):
        assert lies_between((0.0, 0.0), (1.0, 1.0), (2.0, 2.0))

    def test_turnaround_not_between(self):
        """b beyond c on the same line is not between them."""
        assert is_collinear((0.0, 0.0), (2.0, 0.0), (1.0, 0.0))
        assert not lies_between((0.0, 0.0), (2.0, 0.0), (1.0, 0.0))

    def test_out_and_back(self):
        assert not lies_between((0.0, 0.0), (1.0, 0.0), (0.0, 0.0))


class TestCoverageCell:
    """Tests for coverage_cell."""

    def test_same_cell(self):
        assert coverage_cell(47.10001, 8.50001) == coverage_cell(47.1, 8.5)

    def test_different_cell(self):
        assert coverage_cell(47.1001, 8.5) != coverage_cell(47.1, 8.5)
