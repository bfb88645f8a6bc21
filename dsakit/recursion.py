"""Memoised factorial and Fibonacci numbers, and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator

_factorials: list[int] = [1, 1]
_fibonacci: list[int] = [0, 1]


def factorial(n: int) -> int:
    """Return ``n!``, reusing every value already computed."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    while len(_factorials) <= n:
        _factorials.append(len(_factorials) * _factorials[-1])
    return _factorials[n]


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError("Fibonacci numbers are defined for n >= 0")
    while len(_fibonacci) <= n:
        _fibonacci.append(_fibonacci[-1] + _fibonacci[-2])
    return _fibonacci[n]


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", helper: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves shifting ``n`` disks to ``target``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    return _hanoi(n, source, target, helper)


def _hanoi(n: int, source: str, target: str, helper: str) -> Iterator[tuple[int, str, str]]:
    if n == 0:
        return
    yield from _hanoi(n - 1, source, helper, target)
    yield (n, source, target)
    yield from _hanoi(n - 1, helper, target, source)