"""Distance calculations using the Haversine formula."""

import math

from latlng.config import get_earth_radius
from latlng.point import LatLng
from latlng.units import LengthUnit


def distance_in_radians(point1: LatLng, point2: LatLng) -> float:
    """
    Calculate the central angle between two points on a sphere.

    This is the angle, measured at the center of the Earth, of the
    great-circle arc connecting the two points. Multiply it by the
    sphere's radius to get the length of the arc.

    Args:
        point1: First point
        point2: Second point

    Returns:
        The angle in radians
    """
    lat1 = math.radians(point1.latitude)
    lat2 = math.radians(point2.latitude)

    dlat = abs(lat2 - lat1)
    dlon = abs(math.radians(point2.longitude - point1.longitude))

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push antipodal points just past 1.
    return 2 * math.asin(min(1.0, math.sqrt(a)))


def angular_distance_degrees(point1: LatLng, point2: LatLng) -> float:
    """Central angle between two points, in degrees."""
    return math.degrees(distance_in_radians(point1, point2))


def distance(point1: LatLng, point2: LatLng, unit: LengthUnit) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Args:
        point1: First point
        point2: Second point
        unit: The unit of measure for the result

    Returns:
        Distance in the chosen unit
    """
    return distance_in_radians(point1, point2) * get_earth_radius(unit)
