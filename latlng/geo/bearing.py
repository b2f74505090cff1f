"""Bearings and travel along great circles."""

import math

from latlng.config import get_earth_radius
from latlng.exceptions import InvalidCoordinate
from latlng.point import LatLng
from latlng.units import LengthUnit


def normalize_bearing(bearing: float) -> float:
    """
    Convert a bearing to be within the [0, 360) degree range.

    Returns NaN if the input is NaN or infinite.
    """
    if math.isnan(bearing) or math.isinf(bearing):
        return math.nan
    result = math.fmod(bearing, 360.0)
    if result < 0:
        result += 360
    return result


def initial_bearing_in_radians(start: LatLng, end: LatLng) -> float:
    """
    Calculate the initial bearing on a great-circle course, in radians.

    The final bearing is the initial bearing of the reverse course
    turned around by half a circle.

    Args:
        start: The starting point
        end: The destination

    Returns:
        Bearing in radians, in the (-pi, pi] range
    """
    lat1 = math.radians(start.latitude)
    lat2 = math.radians(end.latitude)
    dlon = math.radians(end.longitude - start.longitude)

    a = math.sin(dlon) * math.cos(lat2)
    b = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return math.atan2(a, b)


def initial_bearing(start: LatLng, end: LatLng) -> float:
    """Initial bearing in degrees, normalized to [0, 360)."""
    return normalize_bearing(math.degrees(initial_bearing_in_radians(start, end)))


def travel(start: LatLng, bearing: float, distance: float, unit: LengthUnit) -> LatLng:
    """
    Find the point reached by following a great circle.

    Args:
        start: The starting point
        bearing: Initial bearing in degrees
        distance: How far to travel
        unit: The unit ``distance`` is given in

    Returns:
        The destination point

    Raises:
        InvalidCoordinate: If bearing or distance is NaN or infinite
    """
    if not (math.isfinite(bearing) and math.isfinite(distance)):
        raise InvalidCoordinate(f"Cannot travel {distance} {unit.value} on bearing {bearing}")

    angle = distance / get_earth_radius(unit)
    theta = math.radians(bearing)
    lat1 = math.radians(start.latitude)
    lon1 = math.radians(start.longitude)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(angle) + math.cos(lat1) * math.sin(angle) * math.cos(theta)
    )
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(angle) * math.cos(lat1),
        math.cos(angle) - math.sin(lat1) * math.sin(lat2),
    )
    return LatLng(math.degrees(lat2), math.degrees(lon2))
