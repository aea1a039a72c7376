"""An array-backed list with an explicit, doubling capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def _check_position(position: int, length: int, *, allow_end: bool = False) -> None:
    """Raise IndexError unless ``position`` addresses an element (or the end)."""
    upper = length if allow_end else length - 1
    if not 0 <= position <= upper:
        raise IndexError(f"position {position} out of range")


def _first_index(items: Iterable[Any], data: Any) -> int:
    """Return the index of the first item equal to ``data``, or -1."""
    return next((i for i, item in enumerate(items) if item == data), -1)


class ArrayList:
    """A positional list stored in a contiguous array whose capacity doubles when full."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of elements the list can hold before it grows."""
        return self._capacity

    def insert(self, position: int, data: Any) -> None:
        """Insert ``data`` before ``position``; ``position`` may equal the length."""
        _check_position(position, len(self._items), allow_end=True)
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.insert(position, data)

    def remove(self, position: int) -> Any:
        """Remove the element at ``position`` and return it."""
        _check_position(position, len(self._items))
        return self._items.pop(position)

    def get_at(self, position: int) -> Any:
        """Return the element at ``position``."""
        _check_position(position, len(self._items))
        return self._items[position]

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def search(self, data: Any) -> int:
        """Return the index of the first element equal to ``data``, or -1."""
        return _first_index(self._items, data)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r}, capacity={self._capacity})"