"""Huffman trees, prefix codes and a text codec built on them."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from itertools import count
from typing import Optional, Union


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol."""

    frequency: int
    symbol: Optional[str] = None
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


Frequencies = Union[Mapping[str, int], Iterable[tuple[str, int]]]


def build_tree(frequencies: Frequencies) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two least frequent nodes.

    The first node taken becomes the left child. Raises ValueError when empty.
    """
    pairs = frequencies.items() if isinstance(frequencies, Mapping) else frequencies
    order = count()
    heap = [(freq, next(order), HuffmanNode(freq, symbol)) for symbol, freq in pairs]
    if not heap:
        raise ValueError("cannot build a Huffman tree without symbols")
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode(total, None, left, right)))
    return heap[0][2]


def assign_codes(root: HuffmanNode) -> dict[str, str]:
    """Map each leaf's symbol to its code, in preorder; a lone leaf gets ``"1"``."""
    codes: dict[str, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = prefix or "1"
            continue
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes


class HuffmanCodec:
    """Encodes text into a string of ``0``/``1`` bits and back."""

    def __init__(self, frequencies: Frequencies) -> None:
        self.root = build_tree(frequencies)
        self.codes = assign_codes(self.root)

    @classmethod
    def from_text(cls, text: str) -> HuffmanCodec:
        """A codec whose frequencies are the character counts of ``text``."""
        return cls(Counter(text))

    def encode(self, text: str) -> str:
        try:
            return "".join(self.codes[char] for char in text)
        except KeyError as exc:
            raise ValueError(f"symbol {exc.args[0]!r} has no code") from None

    def decode(self, bits: str) -> str:
        if self.root.is_leaf():
            if set(bits) - {"1"}:
                raise ValueError("a single-symbol code only contains '1' bits")
            return self.root.symbol * len(bits)
        symbols: list[str] = []
        node = self.root
        for bit in bits:
            if bit == "0":
                node = node.left
            elif bit == "1":
                node = node.right
            else:
                raise ValueError(f"invalid bit {bit!r}")
            if node.is_leaf():
                symbols.append(node.symbol)
                node = self.root
        if node is not self.root:
            raise ValueError("bit string ends in the middle of a code")
        return "".join(symbols)