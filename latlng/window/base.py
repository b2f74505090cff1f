"""Window protocol and conversions between lengths and degree spans."""

import math
from typing import Protocol, TypeVar, runtime_checkable

from latlng.config import get_earth_radius
from latlng.point import LatLng
from latlng.units import LengthUnit

W = TypeVar("W", bound="LatLngWindow")


@runtime_checkable
class LatLngWindow(Protocol):
    """
    A region of the globe that points can be tested against.

    Overlap is only defined between windows of the same kind.
    """

    @property
    def center(self) -> LatLng: ...

    def contains(self, point: LatLng) -> bool: ...

    def overlaps(self: W, window: W) -> bool: ...


def length_to_latitude_delta(length: float, unit: LengthUnit) -> float:
    """
    Convert a length to degrees of latitude.

    Also valid for arcs measured along any great circle.
    """
    return math.degrees(length / get_earth_radius(unit))


def latitude_delta_to_length(delta_lat: float, unit: LengthUnit) -> float:
    """Convert degrees of latitude to a length."""
    return get_earth_radius(unit) * math.radians(delta_lat)


def length_to_longitude_delta(length: float, unit: LengthUnit, latitude: float) -> float:
    """
    Convert a length to degrees of longitude at a given latitude.

    Degrees of longitude shrink towards the poles, so the same length
    spans more of them the further the latitude is from the equator.

    Args:
        length: The length to convert
        unit: The unit ``length`` is given in
        latitude: The latitude at which the length is measured

    Returns:
        The span in degrees of longitude
    """
    return math.degrees(length / (get_earth_radius(unit) * math.cos(math.radians(latitude))))


def longitude_delta_to_length(delta_lng: float, unit: LengthUnit, latitude: float) -> float:
    """Convert degrees of longitude at a given latitude to a length."""
    return get_earth_radius(unit) * math.radians(delta_lng) * math.cos(math.radians(latitude))
