"""Bounded array queues and unbounded linked queues."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Optional

from dsakit.linkedlist import _Chain, _Node, _walk
from dsakit.stack import _Bounded


class QueueFull(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmpty(IndexError):
    """Raised when dequeueing from an empty queue."""


def _require_items(queue: Any) -> None:
    if queue.is_empty():
        raise QueueEmpty("the queue is empty")


class ArrayQueue(_Bounded):
    """A linear queue over a fixed number of slots.

    Slots are never reused: once ``size`` values have been enqueued the
    queue reports itself full, even if some of them were dequeued since.
    """

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._items: list[Any] = []
        self._front = 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[self._front:])

    def __len__(self) -> int:
        return len(self._items) - self._front

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueFull when no slot is left."""
        if self.is_full():
            raise QueueFull("the queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        _require_items(self)
        self._front += 1
        return self._items[self._front - 1]


class CircularQueue(_Bounded):
    """A ring-buffer queue of ``size`` slots, holding at most ``size - 1`` values."""

    def __init__(self, size: int) -> None:
        super().__init__(size, 1)
        self._items: deque[Any] = deque()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size - 1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueFull when the ring is full."""
        if self.is_full():
            raise QueueFull("the queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        _require_items(self)
        return self._items.popleft()


class LinkedQueue(_Chain):
    """An unbounded queue built on linked nodes with front and rear pointers."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._front))

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        _require_items(self)
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data


class CircularLinkedQueue(_Chain):
    """An unbounded queue whose rear node links back to the front node."""

    def __init__(self) -> None:
        self._rear: Optional[_Node] = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        if self._rear is None:
            return iter(())
        front = self._rear.next
        return (node.data for node in _walk(front, front))

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._rear is None

    def enqueue(self, value: Any) -> None:
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        _require_items(self)
        front = self._rear.next
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.data