"""A resizable array of floats with bounds-checked access."""

from __future__ import annotations

import operator
from collections.abc import Iterator


class ArrayD:
    """Array of floats; new elements are zero."""

    def __init__(self, size: int | None = None) -> None:
        if size is None:
            self._data: list[float] = []
            return
        if size <= 0:
            raise ValueError("ArrayD: non positive size")
        self._data = [0.0] * size

    def _check(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._data):
            raise IndexError("ArrayD: index out of range")
        return index

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[self._check(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._check(index)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def copy(self) -> ArrayD:
        """Return an independent copy."""
        clone = ArrayD()
        clone._data = list(self._data)
        return clone

    def resize(self, size: int) -> None:
        """Change the size, padding with zeros or truncating."""
        if size <= 0:
            raise ValueError("ArrayD: non positive size")
        if size > len(self._data):
            self._data.extend([0.0] * (size - len(self._data)))
        else:
            del self._data[size:]

    def insert(self, index: int, value: float) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the size."""
        index = operator.index(index)
        if not 0 <= index <= len(self._data):
            raise IndexError("ArrayD: insert position out of range")
        self._data.insert(index, float(value))

    def remove(self, index: int) -> None:
        """Remove the element at ``index``; the array may not become empty."""
        index = self._check(index)
        if len(self._data) == 1:
            raise ValueError("ArrayD: non positive size")
        del self._data[index]