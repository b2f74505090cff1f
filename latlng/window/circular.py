"""Circular windows: every point within an angular radius of a center."""

import math

from latlng.degrees import to_fixed, to_float
from latlng.exceptions import InvalidWindow
from latlng.geo.distance import angular_distance_degrees
from latlng.point import LatLng
from latlng.units import LengthUnit

from .base import latitude_delta_to_length, length_to_latitude_delta


class CircularWindow:
    """
    A circle on the surface of the Earth.

    The radius is an angle in degrees, measured at the center of the
    Earth, and is capped at 360.
    """

    def __init__(self, center: LatLng, radius: float):
        if center is None:
            raise InvalidWindow("Window's center may not be None.")
        if math.isnan(radius):
            raise InvalidWindow("Invalid radius given.")
        self._center = center
        self._radius = to_fixed(min(abs(radius), 360.0))

    @classmethod
    def from_length(cls, center: LatLng, radius: float, unit: LengthUnit) -> "CircularWindow":
        """
        Create a window whose radius is a length along the Earth's surface.

        Args:
            center: Center of the window
            radius: Radius along the surface
            unit: The unit ``radius`` is given in
        """
        if math.isnan(radius):
            raise InvalidWindow("Invalid radius given.")
        return cls(center, length_to_latitude_delta(radius, unit))

    @property
    def center(self) -> LatLng:
        return self._center

    @property
    def radius(self) -> float:
        """Radius in degrees."""
        return to_float(self._radius)

    def radius_in(self, unit: LengthUnit) -> float:
        """Radius as a length along the Earth's surface."""
        return latitude_delta_to_length(self.radius, unit)

    def contains(self, point: LatLng) -> bool:
        return to_fixed(angular_distance_degrees(self._center, point)) <= self._radius

    def overlaps(self, window: "CircularWindow") -> bool:
        if not isinstance(window, CircularWindow):
            raise TypeError(f"Cannot test a circular window against {type(window).__name__}")
        angle = to_fixed(angular_distance_degrees(self._center, window._center))
        return angle <= self._radius + window._radius

    def __repr__(self) -> str:
        return f"CircularWindow(center={self._center!r}, radius={self.radius:.6f})"
