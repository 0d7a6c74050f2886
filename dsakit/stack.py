"""A bounded last-in, first-out stack of integers."""

from __future__ import annotations

MAX_SIZE = 1000


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, item: int) -> None:
        """Put ``item`` on top; raises StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("Stack Overflow!!!")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; raises StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow!!")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)