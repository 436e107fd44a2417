"""Tests for provider routing by coordinate."""

import math

import pytest

from weather_mcp.geo import covers_location


class TestCoversLocation:
    @pytest.mark.parametrize("lat, lon", [
        (40.7128, -74.0060),   # New York
        (61.2181, -149.9003),  # Anchorage
        (24.0, -60.0),
        (72.0, -180.0),
        (24.0, -180.0),
        (72.0, -60.0),
    ])
    def test_inside_box(self, lat, lon):
        assert covers_location(lat, lon) is True

    @pytest.mark.parametrize("lat, lon", [
        (52.52, 13.41),        # Berlin
        (23.999, -100.0),
        (72.001, -100.0),
        (40.0, -59.999),
        (40.0, -180.001),
        (-33.87, 151.21),      # Sydney
        (21.3069, -157.8583),  # Honolulu sits south of the box
    ])
    def test_outside_box(self, lat, lon):
        assert covers_location(lat, lon) is False

    def test_nan_is_never_covered(self):
        assert covers_location(math.nan, -100.0) is False
        assert covers_location(40.0, math.nan) is False
