"""Stacks backed by a bounded array, a linked chain, and two queues.

Popping or peeking at an empty stack raises IndexError.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, Optional, Tuple

_Link = Optional[Tuple[Any, Any]]


class ArrayStack:
    """Stack holding at most ``capacity`` items (eight by default)."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push ``value``; raises OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        return self._items.pop()

    def peek(self) -> Any:
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def drain(self) -> list[Any]:
        """Pop every value, returning them from top to bottom."""
        drained = self._items[::-1]
        self._items.clear()
        return drained

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """Unbounded stack built from a chain of ``(value, rest)`` links."""

    def __init__(self) -> None:
        self._top: _Link = None
        self._size = 0

    def _top_link(self) -> tuple[Any, Any]:
        if self._top is None:
            raise IndexError("stack underflow")
        return self._top

    def push(self, value: Any) -> None:
        self._top = (value, self._top)
        self._size += 1

    def pop(self) -> Any:
        value, self._top = self._top_link()
        self._size -= 1
        return value

    def peek(self) -> Any:
        return self._top_link()[0]

    def is_empty(self) -> bool:
        return self._top is None

    def reverse(self) -> None:
        """Reverse the stack in place so the bottom value becomes the top."""
        flipped: _Link = None
        for value in self:
            flipped = (value, flipped)
        self._top = flipped

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        link = self._top
        while link is not None:
            value, link = link
            yield value

    def __len__(self) -> int:
        return self._size


class QueueStack:
    """Stack implemented with two FIFO queues; push costs O(n)."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._spare.append(value)
        self._spare.extend(self._main)
        self._main.clear()
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        return self._main.popleft()

    def top(self) -> Any:
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)