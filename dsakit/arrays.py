"""Simple scans over integer sequences: duplicates, extremes, gaps and partitions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence


def find_duplicates(values: Iterable[int]) -> dict[int, int]:
    """Map every value that occurs more than once to its number of occurrences.

    The keys are in ascending order.
    """
    counts = Counter(values)
    return {value: counts[value] for value in sorted(counts) if counts[value] > 1}


def max_min(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(largest, smallest)`` found in a single pass.

    Raises ValueError for an empty input.
    """
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("max_min() needs at least one value") from None
    largest = smallest = first
    for value in iterator:
        if value < smallest:
            smallest = value
        elif value > largest:
            largest = value
    return largest, smallest


def min_partition_difference(values: Iterable[int]) -> int:
    """Smallest possible absolute difference between the sums of two subsets
    that together hold every value exactly once."""
    items: Sequence[int] = list(values)

    def best(index: int, first: int, second: int) -> int:
        if index == len(items):
            return abs(first - second)
        item = items[index]
        return min(
            best(index + 1, first + item, second),
            best(index + 1, first, second + item),
        )

    return best(0, 0, 0)


def missing_elements(values: Iterable[int]) -> list[int]:
    """Integers between the smallest and largest value that do not occur, ascending."""
    present = set(values)
    if not present:
        return []
    return [n for n in range(min(present), max(present) + 1) if n not in present]


def reverse_range(values: MutableSequence[int], start: int, end: int) -> None:
    """Reverse ``values[start..end]`` (both ends inclusive) in place.

    Nothing happens when ``start >= end``.
    """
    if start >= end:
        return
    if start < 0 or end >= len(values):
        raise IndexError(f"range {start}..{end} is outside a sequence of length {len(values)}")
    values[start : end + 1] = values[start : end + 1][::-1]