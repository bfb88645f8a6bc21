"""Comparison sorts: bubble, selection, insertion, merge and quick sort.

Every function takes any iterable, leaves it untouched and returns a new
sorted list in ascending order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Bubble sort that stops early once a pass makes no swap."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Selection sort: move the smallest remaining item to the front."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Insertion sort: grow a sorted prefix one item at a time."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _bubble_pass(values: list[T], length: int) -> None:
    if length <= 1:
        return
    swapped = False
    for i in range(length - 1):
        if values[i] > values[i + 1]:
            values[i], values[i + 1] = values[i + 1], values[i]
            swapped = True
    if swapped:
        _bubble_pass(values, length - 1)


def recursive_bubble_sort(items: Iterable[T]) -> list[T]:
    """Bubble sort where each pass recurses on the unsorted prefix."""
    result = list(items)
    _bubble_pass(result, len(result))
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(values: list[T]) -> list[T]:
    if len(values) <= 1:
        return values
    mid = len(values) // 2
    return _merge(_merge_sort(values[:mid]), _merge_sort(values[mid:]))


def merge_sort(items: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    return _merge_sort(list(items))


def _partition(values: list[T], start: int, end: int) -> int:
    pivot = values[end]
    index = start - 1
    for i in range(start, end):
        if values[i] <= pivot:
            index += 1
            values[i], values[index] = values[index], values[i]
    index += 1
    values[end], values[index] = values[index], values[end]
    return index


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quick sort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pivot_index = _partition(result, start, end)
            pending.append((start, pivot_index - 1))
            pending.append((pivot_index + 1, end))
    return result