"""
Configuration management for latlng.

Uses pydantic-settings for environment variable loading with sensible defaults.
The Earth radius table derived from it is an immutable snapshot that is
replaced as a whole, never edited in place.
"""

import logging
import threading
from types import MappingProxyType
from typing import Mapping

from pydantic_settings import BaseSettings

from latlng.units import LengthUnit

logger = logging.getLogger(__name__)

# Two angles closer than this (in degrees) are the same angle.
# 1e-6 degrees is roughly 11 centimeters at the equator.
DEGREE_TOLERANCE = 0.000001

# Micro-degrees per degree.
DEGREE_SCALE = 1_000_000

EARTH_MEAN_RADIUS_KILOMETERS = 6371.009


class Settings(BaseSettings):
    """latlng configuration."""

    # Spherical Earth approximation
    earth_radius: float = EARTH_MEAN_RADIUS_KILOMETERS
    earth_radius_unit: LengthUnit = LengthUnit.KILOMETER

    # Command line output
    default_unit: LengthUnit = LengthUnit.KILOMETER

    model_config = {
        "env_prefix": "LATLNG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()


def build_radius_table(radius: float, unit: LengthUnit) -> Mapping[LengthUnit, float]:
    """
    Pre-compute the Earth's radius in every supported unit.

    Args:
        radius: The Earth's radius
        unit: The unit ``radius`` is given in

    Returns:
        A read-only mapping of unit to radius
    """
    return MappingProxyType({to_unit: unit.convert_to(to_unit, radius) for to_unit in LengthUnit})


_radius_lock = threading.Lock()
_radius_table = build_radius_table(settings.earth_radius, settings.earth_radius_unit)


def get_earth_radius(unit: LengthUnit) -> float:
    """Retrieve the Earth's radius in the requested unit."""
    return _radius_table[unit]


def set_earth_radius(radius: float, unit: LengthUnit) -> None:
    """
    Set the Earth's radius used by all future distance calculations.

    The new table is fully built before it replaces the old one, so a
    concurrent reader sees either the old radius or the new one.

    Args:
        radius: The Earth's spherical approximation radius
        unit: The unit the radius is given in
    """
    global _radius_table

    table = build_radius_table(radius, unit)
    with _radius_lock:
        _radius_table = table
    logger.info(f"Earth radius set to {radius} {unit.value}")


def reset_earth_radius() -> None:
    """Restore the Earth's radius from the current settings."""
    set_earth_radius(settings.earth_radius, settings.earth_radius_unit)
