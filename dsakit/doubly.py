"""Doubly linked list and circular singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


def _check_position(position: int, size: int) -> None:
    if not 1 <= position <= size:
        raise IndexError(f"position {position} out of range")


@dataclass(eq=False)
class _DNode:
    value: Any
    prev: _DNode | None = field(default=None, repr=False)
    next: _DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """Linear doubly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        self._size = 0
        for value in values:
            self.insert_back(value)

    def insert_front(self, value: Any) -> None:
        node = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_back(self, value: Any) -> None:
        node = _DNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` right after the element at ``position``."""
        _check_position(position, self._size)
        node = self._node_at(position)
        new = _DNode(value, node, node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1

    def insert_before(self, position: int, value: Any) -> None:
        """Insert ``value`` right before the element at ``position``."""
        _check_position(position, self._size)
        if position == 1:
            self.insert_front(value)
        else:
            self.insert_after(position - 1, value)

    def delete_first(self) -> Any:
        """Remove and return the first element; IndexError when empty."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self._unlink(self._head)

    def delete_last(self) -> Any:
        """Remove and return the last element; IndexError when empty."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        return self._unlink(self._tail)

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        _check_position(position, self._size)
        return self._unlink(self._node_at(position))

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def _unlink(self, node: _DNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def _node_at(self, position: int) -> _DNode:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


@dataclass(eq=False)
class _SNode:
    value: Any
    next: _SNode | None = field(default=None, repr=False)


class CircularSinglyLinkedList:
    """Circular singly linked list addressed through its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _SNode | None = None
        self._size = 0
        for value in values:
            self.insert_back(value)

    def insert_front(self, value: Any) -> None:
        node = _SNode(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def insert_back(self, value: Any) -> None:
        self.insert_front(value)
        assert self._tail is not None
        self._tail = self._tail.next

    def insert_after(self, value: Any, position: int) -> None:
        """Insert ``value`` right after the element at ``position``."""
        _check_position(position, self._size)
        node = self._node_at(position)
        new = _SNode(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the first element; IndexError when empty."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        head = self._tail.next
        assert head is not None
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete_last(self) -> Any:
        """Remove and return the last element; IndexError when empty."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        if self._size == 1:
            return self.delete_first()
        previous = self._node_at(self._size - 1)
        removed = self._tail
        previous.next = removed.next
        self._tail = previous
        self._size -= 1
        return removed.value

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        _check_position(position, self._size)
        if position == 1:
            return self.delete_first()
        if position == self._size:
            return self.delete_last()
        previous = self._node_at(position - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def _node_at(self, position: int) -> _SNode:
        assert self._tail is not None
        node = self._tail.next
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularDoublyLinkedList:
    """Circular doubly linked list addressed through its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _DNode | None = None
        self._size = 0
        for value in values:
            self.insert_back(value)

    def insert_front(self, value: Any) -> None:
        node = _DNode(value)
        if self._tail is None:
            node.prev = node.next = node
            self._tail = node
        else:
            head = self._tail.next
            assert head is not None
            node.next = head
            node.prev = self._tail
            self._tail.next = node
            head.prev = node
        self._size += 1

    def insert_back(self, value: Any) -> None:
        self.insert_front(value)
        assert self._tail is not None
        self._tail = self._tail.next

    def insert_after(self, value: Any, position: int) -> None:
        """Insert ``value`` right after the element at ``position``."""
        _check_position(position, self._size)
        node = self._node_at(position)
        following = node.next
        assert following is not None
        new = _DNode(value, node, following)
        following.prev = new
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the first element; IndexError when empty."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        head = self._tail.next
        assert head is not None
        return self._unlink(head)

    def delete_last(self) -> Any:
        """Remove and return the last element; IndexError when empty."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        return self._unlink(self._tail)

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        _check_position(position, self._size)
        return self._unlink(self._node_at(position))

    def update(self, old: Any, new: Any) -> bool:
        """Replace the first element equal to ``old``; tell whether one was found."""
        if self._tail is None:
            return False
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            if node.value == old:
                node.value = new
                return True
            node = node.next
        return False

    def _unlink(self, node: _DNode) -> Any:
        if self._size == 1:
            self._tail = None
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._tail:
                self._tail = node.prev
        self._size -= 1
        return node.value

    def _node_at(self, position: int) -> _DNode:
        assert self._tail is not None
        node = self._tail.next
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"