"""0/1 knapsack, fractional knapsack and minimum coin change."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class KnapsackResult:
    """Best total profit and the 0-based indices of the chosen items."""

    value: int
    items: tuple[int, ...]


def knapsack_01(
    profits: Sequence[int], weights: Sequence[int], capacity: int
) -> KnapsackResult:
    """Solve the 0/1 knapsack by dynamic programming and recover the items."""
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for profit, weight in zip(profits, weights):
        previous = table[-1]
        row = [0] * (capacity + 1)
        for w in range(1, capacity + 1):
            if weight <= w:
                row[w] = max(profit + previous[w - weight], previous[w])
            else:
                row[w] = previous[w]
        table.append(row)

    chosen: list[int] = []
    i, j = len(profits), capacity
    while i > 0 and j > 0:
        if table[i][j] != table[i - 1][j]:
            chosen.append(i - 1)
            j -= weights[i - 1]
        i -= 1
    return KnapsackResult(table[-1][capacity], tuple(sorted(chosen)))


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Greedy fractional knapsack over ``(value, weight)`` pairs."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    ranked = []
    for value, weight in items:
        if weight <= 0:
            raise ValueError("weights must be positive")
        ranked.append((value / weight, weight))
    ranked.sort(reverse=True)

    remaining = capacity
    total = 0.0
    for ratio, weight in ranked:
        if weight <= remaining:
            total += weight * ratio
            remaining -= weight
        else:
            total += remaining * ratio
            break
    return total


def min_coins(coins: Iterable[float], amount: float) -> int | None:
    """Fewest coins summing to ``amount``, or None when it cannot be made.

    Coin values and the amount are compared in hundredths, so decimal
    currency amounts such as ``0.25`` work as expected.
    """
    target = round(amount * 100)
    if target < 0:
        raise ValueError("amount must not be negative")
    cents = [round(coin * 100) for coin in coins]
    if any(c <= 0 for c in cents):
        raise ValueError("coin values must be positive")

    unreachable = target + 1
    best = [0] + [unreachable] * target
    for total in range(1, target + 1):
        for coin in cents:
            if coin <= total and best[total - coin] != unreachable:
                best[total] = min(best[total], best[total - coin] + 1)
    return None if best[target] == unreachable else best[target]