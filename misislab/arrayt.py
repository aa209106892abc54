"""A resizable, bounds-checked array of arbitrary elements."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class ArrayT(Generic[T]):
    """Array whose new elements are produced by ``factory``."""

    def __init__(self, size: int | None = None, factory: Callable[[], T] = int) -> None:
        self._factory = factory
        if size is None:
            self._data: list[T] = []
            return
        if size <= 0:
            raise ValueError("ArrayT: non positive size")
        self._data = [factory() for _ in range(size)]

    def _check(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._data):
            raise IndexError("ArrayT: index out of range")
        return index

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[self._check(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[self._check(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def copy(self) -> ArrayT[T]:
        """Return an independent copy sharing the element factory."""
        clone: ArrayT[T] = ArrayT(factory=self._factory)
        clone._data = list(self._data)
        return clone

    def resize(self, size: int) -> None:
        """Change the size, filling new slots with default elements."""
        if size < 0:
            raise ValueError("ArrayT: negative size")
        if size > len(self._data):
            self._data.extend(self._factory() for _ in range(size - len(self._data)))
        else:
            del self._data[size:]

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the size."""
        index = operator.index(index)
        if not 0 <= index <= len(self._data):
            raise IndexError("ArrayT: insert position out of range")
        self._data.insert(index, value)

    def remove(self, index: int) -> None:
        """Remove the element at ``index``, shifting later elements left."""
        position = self._check(index)
        self._data = self._data[:position] + self._data[position + 1:]