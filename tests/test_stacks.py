import pytest

from dsakit.stacks import ArrayStack, LinkedStack, QueueStack


def test_is_lifo():
    for stack in (ArrayStack(), LinkedStack(), QueueStack()):
        for value in (1, 2, 3):
            stack.push(value)
        assert len(stack) == 3
        assert stack.pop() == 3
        stack.push(18)
        assert [stack.pop() for _ in range(3)] == [18, 2, 1]
        assert len(stack) == 0


def test_pop_from_empty_raises():
    for stack in (ArrayStack(), LinkedStack(), QueueStack()):
        with pytest.raises(IndexError):
            stack.pop()


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_peek(cls):
    stack = cls()
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.peek()
    stack.push(4)
    stack.push(9)
    assert stack.peek() == 9
    assert not stack.is_empty()


def test_queue_stack_top():
    stack = QueueStack()
    with pytest.raises(IndexError):
        stack.top()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.top() == 3
    stack.pop()
    assert stack.top() == 2


@pytest.mark.parametrize("args, limit", [((), 8), ((2,), 2), ((5,), 5)])
def test_array_stack_capacity(args, limit):
    stack = ArrayStack(*args)
    for value in range(limit):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(99)
    assert len(stack) == limit


def test_array_stack_drain_top_first():
    stack = ArrayStack()
    for value in (4, 5, 6):
        stack.push(value)
    assert stack.drain() == [6, 5, 4]
    assert stack.is_empty()
    assert stack.drain() == []


def test_array_stack_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_linked_stack_iterates_top_first():
    stack = LinkedStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]


@pytest.mark.parametrize("values", [[], [7], [1, 2, 18]])
def test_linked_stack_reverse(values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    before = list(stack)
    stack.reverse()
    assert list(stack) == before[::-1]
    assert len(stack) == len(values)