"""A singly linked list with a sentinel head node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from listkit.arraylist import _check_position, _first_index


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any = None, next: Optional["_Node"] = None) -> None:
        self.data = data
        self.next = next


class SinglyLinkedList:
    """A positional list built from forward-linked nodes."""

    def __init__(self) -> None:
        self._head = _Node()
        self._count = 0

    def _node_before(self, position: int) -> _Node:
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def insert(self, position: int, data: Any) -> None:
        """Insert ``data`` before ``position``; ``position`` may equal the length."""
        _check_position(position, self._count, allow_end=True)
        previous = self._node_before(position)
        previous.next = _Node(data, previous.next)
        self._count += 1

    def remove(self, position: int) -> Any:
        """Remove the element at ``position`` and return it."""
        _check_position(position, self._count)
        previous = self._node_before(position)
        removed = previous.next
        previous.next = removed.next
        self._count -= 1
        return removed.data

    def get_at(self, position: int) -> Any:
        """Return the element at ``position``."""
        _check_position(position, self._count)
        return self._node_before(position + 1).data

    def clear(self) -> None:
        """Remove every element."""
        self._head.next = None
        self._count = 0

    def search(self, data: Any) -> int:
        """Return the index of the first element equal to ``data``, or -1."""
        return _first_index(self, data)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"