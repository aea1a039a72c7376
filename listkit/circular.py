"""A circular singly linked list whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from listkit.arraylist import _check_position, _first_index
from listkit.singly import _Node


class CircularLinkedList:
    """A positional list whose nodes form a ring starting at a header node."""

    def __init__(self) -> None:
        self._header: Optional[_Node] = None
        self._count = 0

    def _walk(self, steps: int) -> _Node:
        node = self._header
        for _ in range(steps):
            node = node.next
        return node

    def _predecessor(self, position: int) -> _Node:
        # The node before the header is the tail of the ring.
        return self._walk((position or self._count) - 1)

    def insert(self, position: int, data: Any) -> None:
        """Insert ``data`` before ``position``; ``position`` may equal the length."""
        _check_position(position, self._count, allow_end=True)
        node = _Node(data)
        if self._header is None:
            node.next = node
            self._header = node
        else:
            previous = self._predecessor(position)
            node.next = previous.next
            previous.next = node
            if position == 0:
                self._header = node
        self._count += 1

    def remove(self, position: int) -> Any:
        """Remove the element at ``position`` and return it."""
        _check_position(position, self._count)
        if self._count == 1:
            removed, self._header = self._header, None
        else:
            previous = self._predecessor(position)
            removed = previous.next
            previous.next = removed.next
            if position == 0:
                self._header = removed.next
        self._count -= 1
        return removed.data

    def get_at(self, position: int) -> Any:
        """Return the element at ``position``."""
        _check_position(position, self._count)
        return self._walk(position).data

    def clear(self) -> None:
        """Remove every element."""
        self._header = None
        self._count = 0

    def search(self, data: Any) -> int:
        """Return the index of the first element equal to ``data``, or -1."""
        return _first_index(self, data)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._header
        for _ in range(self._count):
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"