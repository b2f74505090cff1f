"""Validation helpers for untrusted inputs."""

from __future__ import annotations

from latlng.exceptions import InvalidGeohash

GEOHASH_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
_ALLOWED_CHARS = frozenset(GEOHASH_ALPHABET)


def validate_geohash(value: str | None) -> str:
    """Validate and normalize a geohash string.

    Policy:
    - must be a non-empty string
    - case-insensitive; returned lowercased
    - only characters from the base-32 geohash alphabet
      (no a, i, l, o, no whitespace)

    Any length is accepted here; callers decide how much precision to keep.

    Returns the normalized geohash or raises InvalidGeohash.
    """
    if value is None:
        raise InvalidGeohash("Geohash string cannot be empty or null.")
    if not isinstance(value, str):
        raise InvalidGeohash(f"Geohash must be a string, not {type(value).__name__}")
    if not value:
        raise InvalidGeohash("Geohash string cannot be empty or null.")

    # str.lower folds some non-ASCII letters onto the alphabet, e.g. KELVIN SIGN to "k".
    invalid = sorted({ch for ch in value if not ch.isascii() or ch.lower() not in _ALLOWED_CHARS})
    if invalid:
        raise InvalidGeohash(f"Geohash string contains invalid characters: {''.join(invalid)!r}")

    return value.lower()
