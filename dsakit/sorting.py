"""Classic sorting algorithms. Each takes an iterable and returns a new list."""

from __future__ import annotations

import warnings
from collections.abc import Iterable

RANGE_LIMIT = 1_000_000


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping the smallest remaining value into place."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers by counting occurrences over their value range.

    Emits a RuntimeWarning when the range is wider than RANGE_LIMIT.
    """
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    range_size = high - low + 1
    if range_size > RANGE_LIMIT:
        warnings.warn(
            "Counting sort may work slow - input range too wide.",
            RuntimeWarning,
            stacklevel=2,
        )
    counts = [0] * range_size
    for value in items:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort with a binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for last in range(size - 1, 0, -1):
        items[0], items[last] = items[last], items[0]
        _sift_down(items, last, 0)
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[int], low: int, high: int) -> int:
    """Partition ``items[low:high]`` around ``items[low]``; return the pivot's final index."""
    pivot = items[low]
    i, j = low, high
    while True:
        i += 1
        while i < high and items[i] <= pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            break
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort taking the first element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort in base 10 for non-negative integers."""
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("radix_sort() only handles non-negative integers")
    passes = len(str(max(items)))
    place = 1
    for _ in range(passes):
        bins: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            bins[(value // place) % 10].append(value)
        items = [value for bucket in bins for value in bucket]
        place *= 10
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each value into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items


def wave_sort(values: Iterable[int]) -> list[int]:
    """Arrange values so that every odd position is at least as large as its neighbours."""
    items = list(values)
    size = len(items)
    for i in range(1, size, 2):
        if items[i - 1] > items[i]:
            items[i - 1], items[i] = items[i], items[i - 1]
        if i < size - 1 and items[i] < items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items