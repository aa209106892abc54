"""A FIFO queue of byte values."""

from __future__ import annotations

from collections import deque


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


class QueueA:
    """Queue of integers in the range 0..255."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, value: int) -> None:
        """Append ``value`` to the tail."""
        self._items.append(_check_byte(value))

    def pop(self) -> None:
        """Drop the head element; does nothing on an empty queue."""
        if self._items:
            self._items.popleft()

    def top(self) -> int:
        """Return the head element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("try get top from empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> QueueA:
        """Return an independent copy."""
        clone = QueueA()
        clone._items = deque(self._items)
        return clone