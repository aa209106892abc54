"""A LIFO stack of byte values."""

from __future__ import annotations


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


class StackL:
    """Stack of integers in the range 0..255."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.append(_check_byte(value))

    def pop(self) -> None:
        """Drop the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> StackL:
        """Return an independent copy."""
        clone = StackL()
        clone._items = list(self._items)
        return clone