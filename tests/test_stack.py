import pytest

from dsakit.stack import MAX_SIZE, Stack, StackOverflowError, StackUnderflowError


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_pop_returns_items_in_reverse_order():
    stack = Stack()
    for item in (1, 2, 3):
        stack.push(item)
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    assert popped == [3, 2, 1]


def test_push_makes_stack_non_empty():
    stack = Stack()
    stack.push(42)
    assert not stack.is_empty()
    assert len(stack) == 1


def test_pop_empty_raises_underflow():
    with pytest.raises(StackUnderflowError):
        Stack().pop()


def test_underflow_is_an_index_error():
    stack = Stack()
    stack.push(1)
    stack.pop()
    with pytest.raises(IndexError):
        stack.pop()


def test_default_capacity_overflows_after_max_size():
    stack = Stack()
    for item in range(MAX_SIZE):
        stack.push(item)
    assert len(stack) == MAX_SIZE
    with pytest.raises(StackOverflowError):
        stack.push(MAX_SIZE)
    assert stack.pop() == MAX_SIZE - 1


def test_custom_capacity():
    stack = Stack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(capacity=-1)