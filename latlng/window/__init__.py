"""Spatial windows: regions that contain points and overlap each other."""

from .base import (
    LatLngWindow,
    latitude_delta_to_length,
    length_to_latitude_delta,
    length_to_longitude_delta,
    longitude_delta_to_length,
)
from .circular import CircularWindow
from .filtering import filter_copy, filter_copy_sort, filter_in_place
from .rectangular import RectangularWindow

__all__ = [
    "LatLngWindow",
    "CircularWindow",
    "RectangularWindow",
    "length_to_latitude_delta",
    "latitude_delta_to_length",
    "length_to_longitude_delta",
    "longitude_delta_to_length",
    "filter_in_place",
    "filter_copy",
    "filter_copy_sort",
]
