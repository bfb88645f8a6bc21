"""Huffman tree construction and prefix-code assignment."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from itertools import count


@dataclass
class HuffmanNode:
    """A Huffman tree node; internal nodes carry no symbol."""

    freq: int
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _pairs(frequencies: Mapping[str, int] | Iterable[tuple[str, int]]) -> list[tuple[str, int]]:
    if isinstance(frequencies, Mapping):
        return list(frequencies.items())
    return list(frequencies)


def build_huffman_tree(
    frequencies: Mapping[str, int] | Iterable[tuple[str, int]],
) -> HuffmanNode:
    """Repeatedly merge the two least frequent nodes into one tree."""
    pairs = _pairs(frequencies)
    if not pairs:
        raise ValueError("at least one symbol is required")
    order = count()
    heap = [(freq, next(order), HuffmanNode(freq, symbol)) for symbol, freq in pairs]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(left.freq + right.freq, None, left, right)
        heapq.heappush(heap, (merged.freq, next(order), merged))
    return heap[0][2]


def huffman_codes(
    frequencies: Mapping[str, int] | Iterable[tuple[str, int]],
) -> dict[str, str]:
    """Map each symbol to its code: '0' for a left branch, '1' for a right."""
    codes: dict[str, str] = {}
    stack = [(build_huffman_tree(frequencies), "")]
    while stack:
        node, prefix = stack.pop()
        if node.symbol is not None:
            codes[node.symbol] = prefix
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes