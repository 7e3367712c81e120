"""Doubly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from dsakit.linkedlist import _Chain, _nth, _walk


@dataclass(slots=True, eq=False)
class _Node:
    data: Any
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class DoublyLinkedList(_Chain):
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._head))

    def __reversed__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._tail, link="prev"))

    def __len__(self) -> int:
        return self._size

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the beginning."""
        self._link(_Node(data, None, self._head))

    def append(self, data: Any) -> None:
        """Insert ``data`` at the end."""
        self._link(_Node(data, self._tail, None))

    def insert_at(self, position: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at ``position`` (0-based)."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} out of bounds")
        if position == 0:
            self.push_front(data)
            return
        current = _nth(self._head, position - 1)
        self._link(_Node(data, current, current.next))

    def delete_at(self, n: int) -> Any:
        """Remove and return the ``n``-th element, counting from 1."""
        if not 1 <= n <= self._size:
            raise IndexError(f"node {n} out of bounds")
        return self._unlink(_nth(self._head, n - 1))

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("the list is empty")
        return self._unlink(self._tail)

    def format(self) -> str:
        """Render the list as ``a -> b -> NULL``."""
        return self._render("NULL")

    def _link(self, node: _Node) -> None:
        """Splice ``node`` in between its already set neighbours."""
        if node.prev is not None:
            node.prev.next = node
        else:
            self._head = node
        if node.next is not None:
            node.next.prev = node
        else:
            self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data