"""Filtering collections of located objects through a window."""

from collections.abc import Callable, Iterable, MutableMapping, MutableSequence
from typing import TypeVar

from latlng.geo.distance import distance_in_radians
from latlng.point import LatLng

from .base import LatLngWindow

T = TypeVar("T")


def _identity(item):
    return item


def filter_in_place(
    window: LatLngWindow,
    collection: MutableSequence[T] | MutableMapping[object, T],
    key: Callable[[T], LatLng] = _identity,
) -> None:
    """
    Remove every item the window does not contain.

    Mappings are filtered on their values.

    Args:
        window: The window to test against
        collection: A list or dict to filter
        key: Maps an item to its location
    """
    if isinstance(collection, MutableMapping):
        rejected = [k for k, item in collection.items() if not window.contains(key(item))]
        for k in rejected:
            del collection[k]
    else:
        collection[:] = [item for item in collection if window.contains(key(item))]


def filter_copy(
    window: LatLngWindow,
    source: Iterable[T],
    destination: MutableSequence[T],
    key: Callable[[T], LatLng] = _identity,
) -> MutableSequence[T]:
    """
    Append the items the window contains to ``destination``.

    The copy is shallow: the same objects end up in both collections.

    Returns:
        The destination
    """
    destination.extend(item for item in source if window.contains(key(item)))
    return destination


def filter_copy_sort(
    window: LatLngWindow,
    source: Iterable[T],
    destination: MutableSequence[T],
    key: Callable[[T], LatLng] = _identity,
) -> MutableSequence[T]:
    """
    Like filter_copy, but the items arrive nearest-to-center first.

    Items at equal distance keep their source order.
    """
    center = window.center
    located = [(distance_in_radians(center, key(item)), item) for item in source]
    located = [pair for pair in located if window.contains(key(pair[1]))]
    located.sort(key=lambda pair: pair[0])
    destination.extend(item for _, item in located)
    return destination
