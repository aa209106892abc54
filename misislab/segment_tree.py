"""A segment tree over integers that also tracks the sum of positive parts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class _Node:
    start: int
    end: int
    value: int = 0
    positive: int = 0
    left: _Node | None = None
    right: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.start == self.end

    @property
    def mid(self) -> int:
        return (self.start + self.end) // 2

    def pull(self) -> None:
        assert self.left is not None and self.right is not None
        self.value = self.left.value + self.right.value
        self.positive = self.left.positive + self.right.positive


def _build(values: list[int], start: int, end: int) -> _Node:
    node = _Node(start, end)
    if start == end:
        node.value = values[start]
        node.positive = max(values[start], 0)
    else:
        node.left = _build(values, start, node.mid)
        node.right = _build(values, node.mid + 1, end)
        node.pull()
    return node


class SegmentTree:
    """Range additions, point subtractions and sums of positive values.

    All ranges are inclusive on both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("SegmentTree needs at least one value")
        self._size = len(items)
        self._root = _build(items, 0, self._size - 1)

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] is out of bounds")

    def add_range(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every element in ``[left, right]``.

        A leaf's positive part is refreshed only when its new value is positive.
        """
        self._check_range(left, right)
        self._add(self._root, left, right, delta)

    def _add(self, node: _Node, left: int, right: int, delta: int) -> None:
        if node.is_leaf:
            node.value += delta
            if node.value > 0:
                node.positive = node.value
            return
        assert node.left is not None and node.right is not None
        if node.mid >= right:
            self._add(node.left, left, right, delta)
        elif node.mid < left:
            self._add(node.right, left, right, delta)
        else:
            self._add(node.left, left, right, delta)
            self._add(node.right, left, right, delta)
        node.pull()

    def subtract_at(self, index: int, amount: int) -> None:
        """Subtract ``amount`` from the element at ``index``.

        When the element is smaller than ``amount`` its positive part drops
        to zero and only the element's old value is taken from the totals.
        """
        self._check_range(index, index)
        self._subtract(self._root, index, amount)

    def _subtract(self, node: _Node, index: int, amount: int) -> int:
        if node.is_leaf:
            if node.value < amount:
                correction = node.value
                node.positive = 0
            else:
                correction = amount
                node.positive -= amount
            node.value -= amount
            return correction
        assert node.left is not None and node.right is not None
        child = node.left if node.mid >= index else node.right
        correction = self._subtract(child, index, amount)
        node.positive -= correction
        node.value -= amount
        return correction

    def positive_sum(self, left: int, right: int) -> int:
        """Return the sum of positive parts over ``[left, right]``; 0 if empty."""
        return self._sum(self._root, left, right)

    def _sum(self, node: _Node, left: int, right: int) -> int:
        if left <= node.start and node.end <= right:
            return node.positive
        if left > node.end or right < node.start:
            return 0
        assert node.left is not None and node.right is not None
        return self._sum(node.left, left, right) + self._sum(node.right, left, right)