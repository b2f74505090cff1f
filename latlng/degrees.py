"""
Fixed-point degree representation.

Angles are compared as integer counts of micro-degrees rather than as
floats, so that equality, containment and overlap all agree no matter
how much floating-point arithmetic produced the inputs.
"""

import math

from latlng.config import DEGREE_SCALE, DEGREE_TOLERANCE
from latlng.exceptions import InvalidDegree


def to_fixed(value: float) -> int:
    """
    Convert an angle in degrees to its fixed-point representation.

    Rounds half up to the nearest micro-degree.

    Args:
        value: The angle in degrees

    Returns:
        The angle as an integer number of micro-degrees

    Raises:
        InvalidDegree: If value is NaN or infinite
    """
    if math.isnan(value) or math.isinf(value):
        raise InvalidDegree(f"Cannot represent {value} degrees as a fixed-point value")
    return math.floor(value / DEGREE_TOLERANCE + 0.5)


def to_float(fixed: int) -> float:
    """Convert a fixed-point angle back to degrees."""
    return fixed / DEGREE_SCALE


def degrees_equal(a: float, b: float) -> bool:
    """
    Test two angles for equality at micro-degree precision.

    NaN and infinite values are never equal to anything, themselves included.
    """
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or math.isinf(b):
        return False
    return to_fixed(a) == to_fixed(b)
