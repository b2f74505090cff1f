"""Pytest configuration and fixtures for latlng tests."""

import pytest

from latlng import config
from latlng.point import LatLng
from latlng.units import LengthUnit


@pytest.fixture(autouse=True)
def earth_radius():
    """Restore the default Earth radius after every test."""
    yield config.get_earth_radius
    config.set_earth_radius(config.EARTH_MEAN_RADIUS_KILOMETERS, LengthUnit.KILOMETER)


class Located:
    """An object that has a location, for filtering tests."""

    def __init__(self, point: LatLng):
        self.point = point

    def __repr__(self):
        return f"Located({self.point})"


@pytest.fixture
def located_objects():
    """A keyed set of objects scattered around the origin."""
    return {
        1: Located(LatLng(0, 0)),
        2: Located(LatLng(90, 0)),
        3: Located(LatLng(45, 45)),
        4: Located(LatLng(20, -15)),
        5: Located(LatLng(-5, 7)),
        6: Located(LatLng(7, -5)),
        7: Located(LatLng(3, 0)),
        8: Located(LatLng(0, 3)),
    }
