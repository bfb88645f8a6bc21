"""A singly linked list with head and tail pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """Singly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_back(value)

    def _links(self) -> Iterator[tuple[_Node | None, _Node]]:
        """Yield each node together with the node before it."""
        previous: _Node | None = None
        node = self._head
        while node is not None:
            yield previous, node
            previous, node = node, node.next

    def _find(self, value: Any) -> tuple[_Node | None, _Node]:
        for previous, node in self._links():
            if node.value == value:
                return previous, node
        raise ValueError(f"{value!r} is not in list")

    def insert_front(self, value: Any) -> None:
        """Put ``value`` before the first element."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_back(self, value: Any) -> None:
        """Put ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_front(value)
        elif position == self._size + 1:
            self.insert_back(value)
        else:
            _, previous = next(islice(self._links(), position - 2, None))
            previous.next = _Node(value, previous.next)
            self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first element equal to ``value``; ValueError if absent."""
        previous, node = self._find(value)
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1

    def update(self, old: Any, new: Any) -> None:
        """Replace the first element equal to ``old``; ValueError if absent."""
        _, node = self._find(old)
        node.value = new

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for _, node in self._links())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"