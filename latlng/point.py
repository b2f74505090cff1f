"""
Latitude/longitude points.

A LatLng always holds a normalized position: latitude clamped to the
poles, longitude wrapped into (-180, 180], and longitude forced to zero
at either pole where every meridian meets.
"""

import math
import random as _random

from latlng.degrees import to_fixed, to_float
from latlng.exceptions import InvalidCoordinate

_POLE = 90_000000


def normalize_latitude(latitude: float) -> float:
    """
    Clamp latitude to +/- 90 degrees.

    Args:
        latitude: Latitude in degrees

    Returns:
        The clamped latitude. NaN stays NaN; infinities become the poles.
    """
    if math.isnan(latitude):
        return math.nan
    if latitude > 0:
        return min(latitude, 90.0)
    return max(latitude, -90.0)


def normalize_longitude(longitude: float) -> float:
    """
    Wrap longitude into the (-180, 180] range.

    Exactly -180 maps to 180 so the antimeridian has a single name.

    Args:
        longitude: Longitude in degrees

    Returns:
        The wrapped longitude, or NaN if the input is NaN or infinite
    """
    if math.isnan(longitude) or math.isinf(longitude):
        return math.nan
    result = math.fmod(longitude, 360.0)
    if result > 180:
        result -= 360
    elif result <= -180:
        result += 360
    return result


class LatLng:
    """A single point in latitude and longitude, in degrees."""

    __slots__ = ("_latitude", "_longitude")

    def __init__(self, latitude: float, longitude: float):
        self._latitude = 0
        self._longitude = 0
        self.set_latitude_longitude(latitude, longitude)

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> "LatLng":
        """
        Create a random point.

        Args:
            rng: Random number generator to draw from, handy when making many
                points at once or when a reproducible sequence is needed

        Returns:
            A point anywhere on the globe
        """
        rng = rng or _random.Random()
        return cls(rng.random() * -180.0 + 90.0, rng.random() * -360.0 + 180.0)

    def set_latitude_longitude(self, latitude: float, longitude: float) -> None:
        """
        Move this point.

        Both components are normalized before either is stored, so a
        failure leaves the point unchanged.

        Raises:
            InvalidCoordinate: If latitude is NaN, or longitude is NaN or
                infinite away from the poles
        """
        lat = normalize_latitude(latitude)
        if math.isnan(lat):
            raise InvalidCoordinate("Invalid latitude given.")
        lat_fixed = to_fixed(lat)

        if abs(lat_fixed) == _POLE:
            # All longitudes meet at the poles.
            lng_fixed = 0
        else:
            lng = normalize_longitude(longitude)
            if math.isnan(lng):
                raise InvalidCoordinate("Invalid longitude given.")
            lng_fixed = to_fixed(lng)
            if lng_fixed == -180_000000:
                lng_fixed = 180_000000

        self._latitude = lat_fixed
        self._longitude = lng_fixed

    @property
    def latitude(self) -> float:
        return to_float(self._latitude)

    @property
    def longitude(self) -> float:
        return to_float(self._longitude)

    @property
    def latitude_internal(self) -> int:
        """Latitude in micro-degrees."""
        return self._latitude

    @property
    def longitude_internal(self) -> int:
        """Longitude in micro-degrees."""
        return self._longitude

    def is_polar(self) -> bool:
        return abs(self._latitude) == _POLE

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, LatLng):
            return NotImplemented
        return self._latitude == other._latitude and self._longitude == other._longitude

    def __hash__(self) -> int:
        return hash((self._latitude, self._longitude))

    def __str__(self) -> str:
        return f"({self.latitude:.6f},{self.longitude:.6f})"

    def __repr__(self) -> str:
        return f"LatLng(latitude={self.latitude:.6f}, longitude={self.longitude:.6f})"
