"""Length units and conversions between them."""

from enum import Enum


class LengthUnit(str, Enum):
    """
    Units of length supported for distances and window sizes.

    Every unit is defined by its scale factor relative to the primary
    unit (kilometers). The string values are what configuration files
    and the command line accept.
    """

    KILOMETER = "kilometer"
    METER = "meter"
    MILE = "mile"
    NAUTICAL_MILE = "nautical_mile"
    # Because your car gets forty rods to the hogshead.
    ROD = "rod"

    @property
    def scale_factor(self) -> float:
        """Units of this kind per kilometer."""
        return _SCALE_FACTORS[self]

    def convert_to(self, to_unit: "LengthUnit", value: float) -> float:
        """
        Convert a length in this unit to another unit.

        Conversions not involving the primary unit go through it first.

        Args:
            to_unit: The unit to convert to
            value: The length in this unit

        Returns:
            The length in ``to_unit``
        """
        if self is PRIMARY:
            if to_unit is PRIMARY:
                return value
            converted = value
        else:
            converted = value / self.scale_factor
        return converted * to_unit.scale_factor


_SCALE_FACTORS = {
    LengthUnit.KILOMETER: 1.0,
    LengthUnit.METER: 1000.0,
    LengthUnit.MILE: 0.6213712,
    LengthUnit.NAUTICAL_MILE: 0.5399568,
    LengthUnit.ROD: 198.8387815,
}

# All scale factors are relative to this unit.
PRIMARY = LengthUnit.KILOMETER
