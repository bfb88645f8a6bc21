"""Binary search over sorted sequences and the two-pointer pair search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``items``, or None."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = (left + right) // 2
        if items[mid] > target:
            right = mid - 1
        elif items[mid] < target:
            left = mid + 1
        else:
            return mid
    return None


def recursive_binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Recursive form of :func:`binary_search`."""

    def search(left: int, right: int) -> int | None:
        if left > right:
            return None
        mid = (left + right) // 2
        if items[mid] > target:
            return search(left, mid - 1)
        if items[mid] < target:
            return search(mid + 1, right)
        return mid

    return search(0, len(items) - 1)


def contains(items: Sequence[Any], target: Any) -> bool:
    """Tell whether the sorted ``items`` hold ``target``."""
    return binary_search(items, target) is not None


def has_pair_with_sum(items: Iterable[int], target: int) -> bool:
    """Tell whether two distinct entries of ``items`` add up to ``target``."""
    ordered = sorted(items)
    left, right = 0, len(ordered) - 1
    while left < right:
        total = ordered[left] + ordered[right]
        if total == target:
            return True
        if total > target:
            right -= 1
        else:
            left += 1
    return False