"""
latlng - fixed-precision latitude/longitude toolkit.

Points, geohashes and spatial windows that all agree on one
micro-degree integer model for equality and containment.
"""

__version__ = "0.4.0"

from latlng.exceptions import (
    InvalidCoordinate,
    InvalidDegree,
    InvalidGeohash,
    InvalidWindow,
    LatLngError,
)
from latlng.point import LatLng, normalize_latitude, normalize_longitude
from latlng.units import LengthUnit

__all__ = [
    "__version__",
    "LatLng",
    "LengthUnit",
    "LatLngError",
    "InvalidDegree",
    "InvalidCoordinate",
    "InvalidGeohash",
    "InvalidWindow",
    "normalize_latitude",
    "normalize_longitude",
]
