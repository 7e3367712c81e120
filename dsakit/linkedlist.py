"""Singly linked list of values, and the node helpers the other linked structures share."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Iterator, Optional


@dataclass(slots=True, eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


def _walk(start: Any, stop: Any = None, link: str = "next") -> Iterator[Any]:
    """Yield nodes from ``start`` along ``link`` until None or until ``stop`` comes round."""
    node = start
    while node is not None:
        yield node
        node = getattr(node, link)
        if node is stop:
            return


def _nth(start: Any, steps: int) -> Any:
    """Return the node ``steps`` links after ``start``."""
    node = next(islice(_walk(start), steps, None), None)
    if node is None:
        raise IndexError(f"no node {steps} links along")
    return node


class _Chain:
    """Shared behaviour of the linked containers."""

    _size: int = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _render(self, terminator: str) -> str:
        return "".join(f"{item} -> " for item in self) + terminator


class LinkedList(_Chain):
    """A singly linked list supporting insertion, deletion and in-place reversal."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._head))

    def __len__(self) -> int:
        return self._size

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the beginning of the list."""
        self._head = _Node(data, self._head)
        self._size += 1

    def append(self, data: Any) -> None:
        """Insert ``data`` at the end of the list."""
        self.insert_at(self._size, data)

    def insert_at(self, index: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at position ``index`` (0-based)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.push_front(data)
            return
        before = _nth(self._head, index - 1)
        before.next = _Node(data, before.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def delete_at(self, index: int) -> Any:
        """Remove and return the element at position ``index`` (0-based)."""
        if not 0 <= index < self._size:
            raise IndexError(f"delete index {index} out of range")
        if index == 0:
            return self.pop_front()
        before = _nth(self._head, index - 1)
        target = before.next
        before.next = target.next
        self._size -= 1
        return target.data

    def remove(self, data: Any) -> None:
        """Remove the first element equal to ``data``."""
        for index, item in enumerate(self):
            if item == data:
                self.delete_at(index)
                return
        raise ValueError(f"{data!r} not in list")

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        prev: Optional[_Node] = None
        node = self._head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head = prev

    def format(self) -> str:
        """Render the list as ``a -> b -> NULL``."""
        return self._render("NULL")