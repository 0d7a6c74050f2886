"""Dynamic-programming classics: sequences, subsequences, stacking, dice and edit distance."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DICE_MODULUS = 10**9 + 7


def fibonacci_recursive(n: int) -> int:
    """The n-th Fibonacci number by plain recursion (n <= 1 gives n)."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_memoized(n: int) -> int:
    """The n-th Fibonacci number, top-down with a memo table."""
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)


def fibonacci_tabulated(n: int) -> int:
    """The n-th Fibonacci number, bottom-up."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def stair_ways_recursive(n: int) -> int:
    """Ways to climb n stairs taking one or two steps at a time, by plain recursion."""
    if n <= 1:
        return 1
    return stair_ways_recursive(n - 1) + stair_ways_recursive(n - 2)


def stair_ways_memoized(n: int) -> int:
    """Ways to climb n stairs, top-down with a memo table."""
    memo: dict[int, int] = {}

    def ways(k: int) -> int:
        if k <= 1:
            return 1
        if k not in memo:
            memo[k] = ways(k - 1) + ways(k - 2)
        return memo[k]

    return ways(n)


def stair_ways_tabulated(n: int) -> int:
    """Ways to climb n stairs, bottom-up."""
    if n <= 1:
        return 1
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def _check_factorial_argument(n: int) -> None:
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")


def factorial_recursive(n: int) -> int:
    """n! by plain recursion."""
    _check_factorial_argument(n)
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def factorial_memoized(n: int) -> int:
    """n!, top-down with a memo table."""
    _check_factorial_argument(n)
    memo: dict[int, int] = {}

    def fact(k: int) -> int:
        if k <= 1:
            return 1
        if k not in memo:
            memo[k] = k * fact(k - 1)
        return memo[k]

    return fact(n)


def factorial_tabulated(n: int) -> int:
    """n!, bottom-up."""
    _check_factorial_argument(n)
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence (0 for no values)."""
    items = list(values)
    lengths: list[int] = []
    for i, value in enumerate(items):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if items[j] < value), default=0)
        )
    return max(lengths, default=0)


@dataclass(frozen=True)
class Box:
    """One orientation of a box: base ``length`` x ``width`` and ``height``."""

    length: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.length * self.width

    def fits_on(self, other: Box) -> bool:
        """Whether this box's base is strictly smaller than ``other``'s in both dimensions."""
        return self.length < other.length and self.width < other.width


def _rotations(height: int, width: int, length: int) -> list[Box]:
    return [
        Box(max(length, width), min(length, width), height),
        Box(max(length, height), min(length, height), width),
        Box(max(width, height), min(width, height), length),
    ]


def max_stack_height(
    heights: Sequence[int], widths: Sequence[int], lengths: Sequence[int]
) -> int:
    """Height of the tallest stack buildable from the given box types.

    Every type may be used in any of its three rotations; a box can rest only on
    one whose base is strictly larger in both dimensions.
    """
    if not len(heights) == len(widths) == len(lengths):
        raise ValueError("heights, widths and lengths must have the same length")
    boxes = sorted(
        (
            box
            for height, width, length in zip(heights, widths, lengths)
            for box in _rotations(height, width, length)
        ),
        key=lambda box: box.area,
    )
    tallest: list[int] = []
    for i, box in enumerate(boxes):
        above = max(
            (tallest[j] for j in range(i) if boxes[j].fits_on(box)), default=0
        )
        tallest.append(box.height + above)
    return max(tallest, default=0)


def dice_ways(dice: int, faces: int, target: int) -> int:
    """Ways to throw ``target`` with ``dice`` dice numbered 1..``faces``, modulo 10**9 + 7."""
    if dice < 1:
        raise ValueError("at least one die is needed")
    if faces < 1:
        raise ValueError("a die needs at least one face")
    if target <= 0:
        return 0
    row = [1 if 1 <= x <= faces else 0 for x in range(target + 1)]
    row[0] = 0
    for _ in range(dice - 1):
        next_row = [0] * (target + 1)
        for x in range(1, target + 1):
            total = 0
            for face in range(1, faces + 1):
                remaining = x - face
                if remaining > 0:
                    total += row[remaining]
                if total > DICE_MODULUS:
                    total -= DICE_MODULUS
            next_row[x] = total
        row = next_row
    return row[target]


def edit_distance(word1: str, word2: str) -> int:
    """Fewest single-character insertions, deletions or substitutions turning word1 into word2."""
    previous = list(range(len(word2) + 1))
    for i, char1 in enumerate(word1, start=1):
        current = [i]
        for j, char2 in enumerate(word2, start=1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]