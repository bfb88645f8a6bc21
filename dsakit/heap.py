"""A bounded array-backed max-heap."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class MaxHeap:
    """Max-heap holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value``; raises OverflowError when the heap is full."""
        if len(self._data) >= self.capacity:
            raise OverflowError("heap overflow")
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value; raises IndexError when empty."""
        if not self._data:
            raise IndexError("pop from empty heap")
        largest = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return largest

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the stored values in array order."""
        return iter(list(self._data))

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if data[index] <= data[parent]:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and data[child] > data[largest]:
                    largest = child
            if largest == index:
                return
            data[index], data[largest] = data[largest], data[index]
            index = largest