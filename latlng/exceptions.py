"""Error types raised for invalid degrees, points, geohashes and windows."""


class LatLngError(ValueError):
    """Base class for all input validation errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidDegree(LatLngError):
    """A degree value was NaN or infinite where that is not allowed."""


class InvalidCoordinate(LatLngError):
    """A latitude or longitude could not be normalized."""


class InvalidGeohash(LatLngError):
    """A geohash string was empty, missing or held characters outside the alphabet."""


class InvalidWindow(LatLngError):
    """A window was given no center, or a NaN/infinite span or radius."""
