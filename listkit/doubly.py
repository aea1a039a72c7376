"""A circular doubly linked list built around a sentinel head node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from listkit.arraylist import _check_position, _first_index


class _Link:
    __slots__ = ("data", "left", "right")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.left: _Link = self
        self.right: _Link = self


class DoublyLinkedList:
    """A positional list whose nodes link both ways through a sentinel head."""

    def __init__(self) -> None:
        self._head = _Link()
        self._count = 0

    def _link_at(self, offset: int) -> _Link:
        link = self._head
        for _ in range(offset):
            link = link.right
        return link

    def _walk(self, attribute: str) -> Iterator[Any]:
        link = getattr(self._head, attribute)
        while link is not self._head:
            yield link.data
            link = getattr(link, attribute)

    def insert(self, position: int, data: Any) -> None:
        """Insert ``data`` before ``position``; ``position`` may equal the length."""
        _check_position(position, self._count, allow_end=True)
        link = _Link(data)
        link.left = self._link_at(position)
        link.right = link.left.right
        link.left.right = link.right.left = link
        self._count += 1

    def remove(self, position: int) -> Any:
        """Remove the element at ``position`` and return it."""
        _check_position(position, self._count)
        removed = self._link_at(position + 1)
        removed.left.right = removed.right
        removed.right.left = removed.left
        self._count -= 1
        return removed.data

    def get_at(self, position: int) -> Any:
        """Return the element at ``position``."""
        _check_position(position, self._count)
        return self._link_at(position + 1).data

    def clear(self) -> None:
        """Remove every element."""
        self._head = _Link()
        self._count = 0

    def search(self, data: Any) -> int:
        """Return the index of the first element equal to ``data``, or -1."""
        return _first_index(self, data)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return self._walk("right")

    def __reversed__(self) -> Iterator[Any]:
        return self._walk("left")

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"