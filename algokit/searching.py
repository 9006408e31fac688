"""Searching and scanning over sequences."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, TypeVar

__all__ = [
    "find_largest",
    "binary_search",
    "find_max_min",
    "running_min_max",
    "insert_at",
    "linear_search",
]

T = TypeVar("T")


def find_largest(values: Iterable[T]) -> T:
    """Return the largest item; raise ValueError when there is none."""
    iterator = iter(values)
    try:
        largest = next(iterator)
    except StopIteration:
        raise ValueError("find_largest() needs at least one value") from None
    for value in iterator:
        if value > largest:
            largest = value
    return largest


def binary_search(values: Sequence[T], target: T) -> Optional[int]:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = low + (high - low) // 2
        if values[middle] == target:
            return middle
        if values[middle] > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def _extremes(values: Sequence[T], low: int, high: int) -> tuple[T, T]:
    if low == high:
        return values[low], values[low]
    if high == low + 1:
        if values[low] > values[high]:
            return values[low], values[high]
        return values[high], values[low]
    middle = (low + high) // 2
    max1, min1 = _extremes(values, low, middle)
    max2, min2 = _extremes(values, middle + 1, high)
    return (max1 if max1 > max2 else max2), (min1 if min1 < min2 else min2)


def find_max_min(values: Sequence[T]) -> tuple[T, T]:
    """Return ``(maximum, minimum)`` found by divide and conquer."""
    if not values:
        raise ValueError("find_max_min() needs at least one value")
    return _extremes(values, 0, len(values) - 1)


def running_min_max(values: Iterable[T]) -> Iterator[tuple[T, T]]:
    """Yield ``(minimum, maximum)`` of each prefix of ``values``."""
    current_min: Optional[T] = None
    current_max: Optional[T] = None
    for value in values:
        if current_min is None or value < current_min:
            current_min = value
        if current_max is None or value > current_max:
            current_max = value
        yield current_min, current_max


def insert_at(values: Sequence[T], position: int, value: T) -> list[T]:
    """Return a new list with ``value`` inserted before index ``position``."""
    items = list(values)
    if not 0 <= position <= len(items):
        raise IndexError(f"position {position} is outside 0..{len(items)}")
    return [*items[:position], value, *items[position:]]


def linear_search(values: Iterable[T], target: T) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)