"""Queues: fixed array, linked, circular buffer, and two-stack forms.

Taking from an empty queue raises IndexError; adding to a full one raises
OverflowError.
"""

from __future__ import annotations

from collections import deque
from typing import Any


class ArrayQueue:
    """Queue over a fixed array whose slots are never reused.

    ``capacity`` bounds the total number of items ever enqueued: space freed
    by dequeuing is not reclaimed.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise OverflowError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        value = self.peek()
        self._front += 1
        return value

    def peek(self) -> Any:
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity


class LinkedQueue:
    """Unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        return self._items.popleft()

    def peek(self) -> Any:
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue:
    """Ring-buffer queue of fixed ``capacity``."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def _slot(self, offset: int) -> int:
        if not self._size:
            raise IndexError("queue is empty")
        return (self._front + offset) % self.capacity

    def push(self, value: Any) -> None:
        if self._size == self.capacity:
            raise OverflowError("queue is full")
        self._buffer[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def pop(self) -> Any:
        index = self._slot(0)
        value, self._buffer[index] = self._buffer[index], None
        self._front = (index + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> Any:
        return self._buffer[self._slot(0)]

    def rear(self) -> Any:
        """Return the most recently pushed value."""
        return self._buffer[self._slot(self._size - 1)]

    def __len__(self) -> int:
        return self._size


class StackQueue:
    """FIFO queue built from two stacks with amortised O(1) operations."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def push(self, value: Any) -> None:
        self._inbox.append(value)

    def pop(self) -> Any:
        if not self._outbox:
            self._outbox.extend(reversed(self._inbox))
            self._inbox.clear()
        return self._outbox.pop()

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox