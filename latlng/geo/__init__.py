"""Great-circle calculations on a spherical Earth."""

from .bearing import initial_bearing, initial_bearing_in_radians, normalize_bearing, travel
from .distance import angular_distance_degrees, distance, distance_in_radians

__all__ = [
    "distance",
    "distance_in_radians",
    "angular_distance_degrees",
    "initial_bearing",
    "initial_bearing_in_radians",
    "normalize_bearing",
    "travel",
]
