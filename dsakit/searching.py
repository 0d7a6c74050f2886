"""Linear and binary searches over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def binary_search(values: Sequence[int], key: int) -> Optional[int]:
    """Index of ``key`` in the ascending ``values``, or None when absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if key > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return None


def find_peak(values: Sequence[int]) -> int:
    """Index of a peak in a sequence that rises and then falls.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("find_peak() needs a non-empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def linear_search(values: Sequence[int], key: int) -> Optional[int]:
    """Index of the first occurrence of ``key``, or None when absent."""
    return next((index for index, value in enumerate(values) if value == key), None)


def binary_contains(values: Sequence[int], key: int) -> bool:
    """Whether ``key`` occurs in the ascending ``values`` (recursive halving)."""

    def search(start: int, end: int) -> bool:
        if start > end:
            return False
        mid = start + (end - start) // 2
        if values[mid] == key:
            return True
        if values[mid] < key:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(values) - 1)