"""
Tests for geometry helpers.
"""
import math

import pytest

from ref_schemas.geo import blur_location, haversine_distance_miles, is_within_radius


class TestBlurLocation:
    def test_rounds_to_two_decimals(self):
        assert blur_location(37.77493, -122.41942) == (37.77, -122.42)

    def test_named_fields(self):
        blurred = blur_location(40.71278, -74.00597)

        assert blurred.lat == 40.71
        assert blurred.lng == -74.01

    def test_out_of_range_not_rejected(self):
        assert blur_location(123.456, 200.001) == (123.46, 200.0)


class TestHaversine:
    """Tests for haversine_distance_miles."""

    def test_same_point_is_zero(self):
        assert haversine_distance_miles(40.7128, -74.0060, 40.7128, -74.0060) == 0

    @pytest.mark.parametrize(
        "a, b",
        [
            ((40.7128, -74.0060), (34.0522, -118.2437)),
            ((51.5074, -0.1278), (-33.8688, 151.2093)),
            ((0.0, 0.0), (0.0, 180.0)),
        ],
    )
    def test_symmetric(self, a, b):
        assert haversine_distance_miles(*a, *b) == pytest.approx(haversine_distance_miles(*b, *a))

    def test_new_york_to_los_angeles(self):
        distance = haversine_distance_miles(40.7128, -74.0060, 34.0522, -118.2437)

        assert distance == pytest.approx(2445.6, abs=1.0)

    def test_near_antipodal_points_do_not_fail(self):
        """Rounding that pushes the haversine term past 1 still yields half the circumference."""
        distance = haversine_distance_miles(
            69.51232454868148, 86.5812282599507, -69.51232454868148, -93.4187717400493
        )

        assert distance == pytest.approx(math.pi * 3958.8)

    def test_one_degree_latitude(self):
        assert haversine_distance_miles(0, 0, 1, 0) == pytest.approx(69.09, abs=0.01)

    def test_within_radius(self):
        assert is_within_radius(37.7749, -122.4194, 37.8044, -122.2712, 10)
        assert not is_within_radius(37.7749, -122.4194, 34.0522, -118.2437, 100)
