"""
Pydantic models for the external representation of points and results.

These models define the JSON documents the command line prints.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from latlng.point import LatLng
from latlng.units import LengthUnit
from latlng.validation import validate_geohash


# -----------------------------------------------------------------------------
# Core Geometry Models
# -----------------------------------------------------------------------------


class Point(BaseModel):
    """A point on the globe (spherical Earth, degrees)."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lon: float = Field(..., gt=-180, le=180, description="Longitude in degrees")

    @classmethod
    def from_latlng(cls, point: LatLng) -> "Point":
        return cls(lat=point.latitude, lon=point.longitude)

    def to_latlng(self) -> LatLng:
        return LatLng(self.lat, self.lon)


# -----------------------------------------------------------------------------
# Result Models
# -----------------------------------------------------------------------------


class GeohashResult(BaseModel):
    """A point together with its geohash."""

    geohash: str
    point: Point

    @field_validator("geohash")
    @classmethod
    def validate_geohash_chars(cls, v: str) -> str:
        return validate_geohash(v)


class DistanceResult(BaseModel):
    """Great-circle distance between two points."""

    start: Point
    end: Point
    distance: float = Field(..., ge=0)
    unit: LengthUnit


class BearingResult(BaseModel):
    """Initial bearing of a great-circle course."""

    start: Point
    end: Point
    bearing: float = Field(..., ge=0, le=360, description="Initial bearing in degrees")


class TravelResult(BaseModel):
    """Where a great-circle journey ends."""

    start: Point
    bearing: float
    distance: float
    unit: LengthUnit
    destination: Point


# -----------------------------------------------------------------------------
# Error Models
# -----------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Standard error response."""

    status: Literal["error"] = "error"
    error: str
    detail: str | None = None
