"""
Geohash encoding and decoding.

Points are hashed to PRECISION characters, which gives 30 bits per value
and a resolution just under one micro-degree, matching LatLng itself.
Only full-precision hashes are stable: decoding "s" and hashing the
result gives "ss0000000000", not "s00000000000".

Bit budget:

    BITS_PER_VALUE = (PRECISION * 5) // 2 + PRECISION % 2
    LATITUDE_ERROR = 90 / 2 ** (BITS_PER_VALUE + 1)
    LONGITUDE_ERROR = 180 / 2 ** (BITS_PER_VALUE + 1)
"""

import logging
from decimal import ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext

from latlng.point import LatLng
from latlng.validation import GEOHASH_ALPHABET, validate_geohash

logger = logging.getLogger(__name__)

PRECISION = 12
BITS_PER_VALUE = (PRECISION * 5) // 2 + PRECISION % 2

MAX_LATITUDE = 90
MAX_LONGITUDE = 180

_CHAR_VALUES = {ch: i for i, ch in enumerate(GEOHASH_ALPHABET)}
_MICRO_DEGREE = Decimal("0.000001")
# Enough digits to hold a sum of 2**-30 fractions of 180 exactly.
_DECIMAL_PRECISION = 64


def _bit_values(max_range: int) -> tuple[Decimal, ...]:
    """Value contributed by each bit, most significant first: max_range / 2**(i+1)."""
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        value = Decimal(max_range)
        values = []
        for _ in range(BITS_PER_VALUE):
            value = value / 2
            values.append(value)
    return tuple(values)


LAT_BIT_VALUES = _bit_values(MAX_LATITUDE)
LNG_BIT_VALUES = _bit_values(MAX_LONGITUDE)


def _split_bits(total_bits: int) -> tuple[int, int]:
    """Number of (longitude, latitude) bits in a stream. Longitude leads, so it gets the odd one."""
    return (total_bits + 1) // 2, total_bits // 2


def encode_value(value: float, max_range: float, bit_count: int = BITS_PER_VALUE) -> int:
    """
    Binary-search a value into geohash bits.

    Args:
        value: Latitude or longitude in degrees
        max_range: 90 for latitude, 180 for longitude
        bit_count: How many bits to produce

    Returns:
        The bits as an integer, most significant bit first
    """
    low, high = -max_range, max_range
    bits = 0
    for _ in range(bit_count):
        mid = (low + high) / 2.0
        bits <<= 1
        if value >= mid:
            bits |= 1
            low = mid
        else:
            high = mid
    return bits


def interleave(lng_bits: int, lat_bits: int, total_bits: int) -> int:
    """Merge longitude and latitude bits, longitude taking the most significant position."""
    lng_count, lat_count = _split_bits(total_bits)
    stream = 0
    for position in range(total_bits):
        stream <<= 1
        index = position // 2
        if position % 2 == 0:
            stream |= (lng_bits >> (lng_count - 1 - index)) & 1
        else:
            stream |= (lat_bits >> (lat_count - 1 - index)) & 1
    return stream


def deinterleave(stream: int, total_bits: int) -> tuple[int, int]:
    """
    Split an interleaved stream into its two values.

    Returns:
        (longitude bits, latitude bits), each most significant bit first
    """
    lng_bits = lat_bits = 0
    for position in range(total_bits):
        bit = (stream >> (total_bits - 1 - position)) & 1
        if position % 2 == 0:
            lng_bits = (lng_bits << 1) | bit
        else:
            lat_bits = (lat_bits << 1) | bit
    return lng_bits, lat_bits


def hash_to_bits(geohash: str) -> int:
    """Concatenate the 5-bit values of an already validated geohash."""
    stream = 0
    for ch in geohash:
        stream = (stream << 5) | _CHAR_VALUES[ch]
    return stream


def bits_to_hash(stream: int, total_bits: int) -> str:
    """Encode an interleaved stream as base-32, most significant chunk first."""
    chars = []
    for shift in range(total_bits - 5, -1, -5):
        chars.append(GEOHASH_ALPHABET[(stream >> shift) & 0x1F])
    return "".join(chars)


def _round_within(value: Decimal, low: Decimal, high: Decimal) -> Decimal:
    """Round to micro-degrees, staying inside [low, high] when a grid point there allows it."""
    rounded = value.quantize(_MICRO_DEGREE, rounding=ROUND_HALF_UP)
    if low <= rounded <= high:
        return rounded

    toward_bound = ROUND_FLOOR if rounded > high else ROUND_CEILING
    rounded = value.quantize(_MICRO_DEGREE, rounding=toward_bound)
    if low <= rounded <= high:
        return rounded

    logger.debug(f"No micro-degree value within [{low}, {high}]; truncating {value}")
    return value.quantize(_MICRO_DEGREE, rounding=ROUND_DOWN)


def bits_to_degrees(bits: int, bit_count: int, bit_values: tuple[Decimal, ...]) -> float:
    """
    Reconstruct a degree value from its de-interleaved bits.

    The walk starts at zero and moves up or down by each bit's value.
    The result is then rounded to micro-degrees, but never outside the
    envelope set by the next-to-last bit around the value reached before
    the final step.

    Args:
        bits: The bits for this value, most significant first
        bit_count: Number of bits in ``bits``
        bit_values: LAT_BIT_VALUES or LNG_BIT_VALUES

    Returns:
        The value in degrees
    """
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        value = last_value = Decimal(0)
        for i in range(bit_count):
            last_value = value
            if (bits >> (bit_count - 1 - i)) & 1:
                value += bit_values[i]
            else:
                value -= bit_values[i]

        bound = bit_values[bit_count - 2]
        rounded = _round_within(value, last_value - bound, last_value + bound)
    return float(rounded)


def hash(point: LatLng) -> str:
    """
    Geohash a point.

    Args:
        point: The point to hash

    Returns:
        The geohash, PRECISION characters long
    """
    total_bits = PRECISION * 5
    lng_count, lat_count = _split_bits(total_bits)
    lng_bits = encode_value(point.longitude, MAX_LONGITUDE, lng_count)
    lat_bits = encode_value(point.latitude, MAX_LATITUDE, lat_count)
    return bits_to_hash(interleave(lng_bits, lat_bits, total_bits), total_bits)


def decode(geohash: str) -> LatLng:
    """
    Decode a geohash to a point.

    Hashes longer than PRECISION are accepted, but the extra characters
    are ignored: LatLng cannot hold more precision than that anyway.

    Args:
        geohash: The geohash, in either case

    Returns:
        The decoded point

    Raises:
        InvalidGeohash: On None or empty strings, or characters outside
            [0-9bcdefghjkmnpqrstuvwxyz]
    """
    geohash = validate_geohash(geohash)[:PRECISION]
    total_bits = len(geohash) * 5
    lng_count, lat_count = _split_bits(total_bits)

    lng_bits, lat_bits = deinterleave(hash_to_bits(geohash), total_bits)
    latitude = bits_to_degrees(lat_bits, lat_count, LAT_BIT_VALUES)
    longitude = bits_to_degrees(lng_bits, lng_count, LNG_BIT_VALUES)
    return LatLng(latitude, longitude)
