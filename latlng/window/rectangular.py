"""Rectangular windows bounded by parallels and meridians."""

import math

from latlng.degrees import to_fixed, to_float
from latlng.exceptions import InvalidWindow
from latlng.point import LatLng, normalize_latitude, normalize_longitude
from latlng.units import LengthUnit

from .base import (
    latitude_delta_to_length,
    length_to_latitude_delta,
    length_to_longitude_delta,
    longitude_delta_to_length,
)

_FULL_CIRCLE = 360_000000
_ANTIMERIDIAN = 180_000000


def _check_delta(value: float, name: str) -> None:
    if math.isnan(value) or math.isinf(value):
        raise InvalidWindow(f"Invalid {name} delta.")


def _spans_intersect(west1: int, east1: int, west2: int, east2: int) -> bool:
    """Test two longitude spans for intersection on the circle, each unrolled so east >= west."""
    for shift in (-_FULL_CIRCLE, 0, _FULL_CIRCLE):
        if west1 <= east2 + shift and west2 + shift <= east1:
            return True
    return False


class RectangularWindow:
    """
    A "rectangle" of latitude and longitude around a center point.

    Near a pole the window is squashed rather than wrapped: its latitude
    span stops at the pole. A window may cross the antimeridian, in which
    case its left (western) longitude is numerically greater than its
    right (eastern) one.
    """

    def __init__(self, center: LatLng, delta_lat: float, delta_lng: float):
        """
        Args:
            center: Center of the window
            delta_lat: Height of the window in degrees, capped at 180
            delta_lng: Width of the window in degrees, capped at 360

        Raises:
            InvalidWindow: If center is None or a delta is NaN or infinite
        """
        if center is None:
            raise InvalidWindow("Invalid center point.")
        _check_delta(delta_lat, "latitude")
        _check_delta(delta_lng, "longitude")

        self._center = center
        self._set_latitude_span(center.latitude, min(abs(delta_lat), 180.0))
        self._set_longitude_span(center.longitude, min(abs(delta_lng), 360.0))

    @classmethod
    def from_lengths(
        cls, center: LatLng, width: float, height: float, unit: LengthUnit
    ) -> "RectangularWindow":
        """
        Create a window from its size along the Earth's surface.

        The width is measured along the center's parallel.

        Args:
            center: Center of the window
            width: East-west extent
            height: North-south extent
            unit: The unit ``width`` and ``height`` are given in
        """
        if center is None:
            raise InvalidWindow("Invalid center point.")
        _check_delta(width, "width")
        _check_delta(height, "height")
        delta_lat = length_to_latitude_delta(height, unit)
        delta_lng = length_to_longitude_delta(width, unit, center.latitude)
        return cls(center, delta_lat, delta_lng)

    @classmethod
    def square(cls, center: LatLng, size: float, unit: LengthUnit) -> "RectangularWindow":
        """Create a window as tall as it is wide."""
        return cls.from_lengths(center, size, size, unit)

    @classmethod
    def from_corners(cls, northeast: LatLng, southwest: LatLng) -> "RectangularWindow":
        """
        Create a window from two opposite corners.

        A north-east corner west of the south-west corner means the
        window crosses the antimeridian.

        Raises:
            InvalidWindow: If a corner is missing or sits on a pole, or the
                north-east corner is south of the south-west corner
        """
        if northeast is None or southwest is None:
            raise InvalidWindow("Both corners are required.")
        if northeast.is_polar() or southwest.is_polar():
            raise InvalidWindow("A window corner cannot be a pole.")
        if northeast.latitude_internal < southwest.latitude_internal:
            raise InvalidWindow("North-east corner is south of the south-west corner.")

        delta_lat = northeast.latitude_internal - southwest.latitude_internal
        delta_lng = northeast.longitude_internal - southwest.longitude_internal
        if delta_lng < 0:
            delta_lng += _FULL_CIRCLE

        center = LatLng(
            to_float(southwest.latitude_internal + delta_lat // 2),
            to_float(southwest.longitude_internal + delta_lng // 2),
        )
        return cls(center, to_float(delta_lat), to_float(delta_lng))

    def _set_latitude_span(self, center_lat: float, delta_lat: float) -> None:
        lat1 = normalize_latitude(center_lat + delta_lat / 2.0)
        lat2 = normalize_latitude(center_lat - delta_lat / 2.0)
        self._max_latitude = to_fixed(max(lat1, lat2))
        self._min_latitude = to_fixed(min(lat1, lat2))
        self._latitude_delta = to_fixed(delta_lat)

    def _set_longitude_span(self, center_lng: float, delta_lng: float) -> None:
        right = center_lng + delta_lng / 2.0
        left = center_lng - delta_lng / 2.0
        self._crosses_antimeridian = right > 180 or left < -180
        self._right_longitude = to_fixed(normalize_longitude(right))
        self._left_longitude = to_fixed(normalize_longitude(left))
        self._longitude_delta = to_fixed(delta_lng)

        # Unrolled span, west <= east, used for overlap tests.
        if self._crosses_antimeridian:
            self._west = self._left_longitude
            self._east = self._right_longitude + _FULL_CIRCLE
        else:
            self._west = to_fixed(left)
            self._east = to_fixed(right)

    def contains(self, point: LatLng) -> bool:
        latitude = point.latitude_internal
        if latitude > self._max_latitude or latitude < self._min_latitude:
            return False

        longitude = point.longitude_internal
        if self._crosses_antimeridian:
            return not self._right_longitude < longitude < self._left_longitude
        if longitude == _ANTIMERIDIAN and self._west == -_ANTIMERIDIAN:
            # The western edge is the antimeridian itself, spelled -180.
            return True
        return self._west <= longitude <= self._east

    def overlaps(self, window: "RectangularWindow") -> bool:
        if not isinstance(window, RectangularWindow):
            raise TypeError(f"Cannot test a rectangular window against {type(window).__name__}")
        if window._max_latitude < self._min_latitude or window._min_latitude > self._max_latitude:
            return False
        return _spans_intersect(self._west, self._east, window._west, window._east)

    @property
    def center(self) -> LatLng:
        return self._center

    @property
    def crosses_antimeridian(self) -> bool:
        """True if the window straddles the 180th meridian."""
        return self._crosses_antimeridian

    @property
    def latitude_delta(self) -> float:
        return to_float(self._latitude_delta)

    @property
    def longitude_delta(self) -> float:
        return to_float(self._longitude_delta)

    @property
    def min_latitude(self) -> float:
        return to_float(self._min_latitude)

    @property
    def max_latitude(self) -> float:
        return to_float(self._max_latitude)

    @property
    def left_longitude(self) -> float:
        """
        Western edge, normalized.

        A window whose western edge is exactly the antimeridian reports 180
        here, so it can exceed right_longitude without the window crossing.
        Check crosses_antimeridian rather than comparing the edges.
        """
        return to_float(self._left_longitude)

    @property
    def right_longitude(self) -> float:
        """Eastern edge, normalized."""
        return to_float(self._right_longitude)

    def height(self, unit: LengthUnit) -> float:
        return latitude_delta_to_length(self.latitude_delta, unit)

    def width(self, unit: LengthUnit) -> float:
        """East-west extent measured along the center's parallel."""
        return longitude_delta_to_length(self.longitude_delta, unit, self._center.latitude)

    def __repr__(self) -> str:
        return (
            f"RectangularWindow(center={self._center!r}, "
            f"latitude_delta={self.latitude_delta:.6f}, longitude_delta={self.longitude_delta:.6f})"
        )
