"""Circular singly linked list addressed through its tail node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from dsakit.linkedlist import _Chain, _Node, _nth, _walk


class CircularList(_Chain):
    """A circular singly linked list whose tail points back to the first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return iter(())
        first = self._tail.next
        return (node.data for node in _walk(first, first))

    def __len__(self) -> int:
        return self._size

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the first node."""
        self._add_after_tail(data)

    def append(self, data: Any) -> None:
        """Insert ``data`` after the tail, making it the new tail."""
        self._tail = self._add_after_tail(data)

    def insert_after(self, pos: int, data: Any) -> None:
        """Insert ``data`` after the ``pos``-th node, counting from 1."""
        if not 1 <= pos <= self._size:
            raise IndexError(f"position {pos} out of range")
        node = _nth(self._tail.next, pos - 1)
        new = _Node(data, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        first = self._tail.next
        if first is self._tail:
            self._tail = None
        else:
            self._tail.next = first.next
        self._size -= 1
        return first.data

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        return self.delete_at(self._size)

    def delete_at(self, pos: int) -> Any:
        """Remove and return the ``pos``-th element, counting from 1."""
        if not 1 <= pos <= self._size:
            raise IndexError(f"position {pos} out of range")
        if pos == 1:
            return self.pop_front()
        before = _nth(self._tail.next, pos - 2)
        target = before.next
        before.next = target.next
        if target is self._tail:
            self._tail = before
        self._size -= 1
        return target.data

    def format(self) -> str:
        """Render the list as ``a -> b -> TO First``."""
        if self._tail is None:
            return "No nodes in the list"
        return self._render("TO First")

    def _add_after_tail(self, data: Any) -> _Node:
        """Link a new node right after the tail and return it."""
        node = _Node(data)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node