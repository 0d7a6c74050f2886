"""Singly and doubly linked lists: loop detection, searching, middles, sorting and group reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: int
    next: Optional[ListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    value: int
    next: Optional[DoublyNode] = field(default=None, repr=False)
    previous: Optional[DoublyNode] = field(default=None, repr=False)


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    """Yield the nodes of a list; raises ValueError if the list loops."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a loop")
        seen.add(id(node))
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a singly linked list holding ``values`` in order; None when empty."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """The values of a singly linked list in order; raises ValueError on a loop."""
    return [node.value for node in _nodes(head)]


def has_loop(head: Optional[ListNode]) -> bool:
    """Whether the list loops, using a slow and a fast pointer."""
    slow = fast = head
    while slow is not None and fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def has_loop_visited(head: Optional[ListNode]) -> bool:
    """Whether the list loops, by remembering every node already visited."""
    visited: set[int] = set()
    node = head
    while node is not None:
        if id(node) in visited:
            return True
        visited.add(id(node))
        node = node.next
    return False


def search_move_to_front(
    head: Optional[ListNode], key: int
) -> tuple[Optional[ListNode], Optional[ListNode]]:
    """Find the first node holding ``key`` and move it to the front.

    Returns ``(new_head, found_node)``; when ``key`` is absent the list is left
    unchanged and ``found_node`` is None.
    """
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        if node.value == key:
            if previous is None:
                return head, node
            previous.next = node.next
            node.next = head
            return node, node
        previous = node
        node = node.next
    return head, None


def recursive_search(head: Optional[ListNode], key: int) -> Optional[ListNode]:
    """The first node holding ``key``, found recursively, or None."""
    if head is None:
        return None
    if head.value == key:
        return head
    return recursive_search(head.next, key)


def _require_nodes(head: Optional[ListNode]) -> list[ListNode]:
    nodes = list(_nodes(head))
    if not nodes:
        raise ValueError("an empty list has no middle element")
    return nodes


def middle_by_length(head: Optional[ListNode]) -> int:
    """Middle value found by counting the length first (the earlier of two middles)."""
    length = len(_require_nodes(head))
    steps = (length + 1) // 2 - 1
    node = head
    for _ in range(steps):
        node = node.next
    return node.value


def middle_two_pointer(head: Optional[ListNode]) -> int:
    """Middle value found with a pointer moving at half the speed of another."""
    if head is None:
        raise ValueError("an empty list has no middle element")
    slow = head
    fast: Optional[ListNode] = head
    while fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        if fast is not None:
            slow = slow.next
    return slow.value


def middle_by_stack(head: Optional[ListNode]) -> int:
    """Middle value found by stacking every node and popping half of them."""
    stack = _require_nodes(head)
    for _ in range(len(stack) // 2):
        stack.pop()
    return stack[-1].value


def _sort_chain(head: Optional[ListNode]) -> tuple[Optional[ListNode], Optional[ListNode]]:
    """Quicksort a loop-free chain around its last node; return ``(head, tail)``."""
    if head is None or head.next is None:
        return head, head
    pivot = head
    while pivot.next is not None:
        pivot = pivot.next
    smaller = ListNode(0)
    larger = ListNode(0)
    small_tail, large_tail = smaller, larger
    node = head
    while node is not pivot:
        following = node.next
        node.next = None
        if node.value < pivot.value:
            small_tail.next = node
            small_tail = node
        else:
            large_tail.next = node
            large_tail = node
        node = following
    low_head, low_tail = _sort_chain(smaller.next)
    high_head, high_tail = _sort_chain(larger.next)
    pivot.next = high_head
    tail = high_tail if high_tail is not None else pivot
    if low_head is None:
        return pivot, tail
    low_tail.next = pivot
    return low_head, tail


def quick_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a singly linked list in ascending order by relinking its nodes; return the new head."""
    if has_loop_visited(head):
        raise ValueError("linked list contains a loop")
    return _sort_chain(head)[0]


def build_doubly(values: Iterable[int]) -> Optional[DoublyNode]:
    """Build a doubly linked list holding ``values`` in order; None when empty."""
    head: Optional[DoublyNode] = None
    tail: Optional[DoublyNode] = None
    for value in values:
        node = DoublyNode(value, previous=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def doubly_to_list(head: Optional[DoublyNode]) -> list[int]:
    """The values of a doubly linked list, following the forward links."""
    values: list[int] = []
    node = head
    while node is not None:
        values.append(node.value)
        node = node.next
    return values


def reverse_in_groups(head: Optional[DoublyNode], k: int) -> Optional[DoublyNode]:
    """A new doubly linked list with every run of ``k`` nodes reversed.

    The last run may be shorter than ``k``. The input list is not modified.
    """
    if k < 1:
        raise ValueError("group size must be at least 1")
    values = doubly_to_list(head)
    reordered = (
        value
        for start in range(0, len(values), k)
        for value in reversed(values[start : start + k])
    )
    return build_doubly(reordered)