"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterator, Optional, Protocol

from dsakit.linkedlist import _Chain, _Node, _walk


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when reading from or popping an empty stack."""


class _Bounded:
    """Shared behaviour of containers with a fixed number of slots."""

    def __init__(self, size: int, minimum: int = 0) -> None:
        if size < minimum:
            raise ValueError(f"size must be at least {minimum}")
        self.size = size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={list(self)!r})"


class ArrayStack(_Bounded):
    """A stack with a fixed capacity; iterates from bottom to top."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._items: list[Any] = []

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def push(self, value: Any) -> None:
        """Push ``value``; raise StackOverflow when the stack is full."""
        if self.is_full():
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Pop and return the top value."""
        self._require_items("stack underflow: cannot pop from the stack")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the value at ``position`` counted from the top, starting at 1."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"invalid position {position} for the stack")
        return self._items[-position]

    def top(self) -> Any:
        """Return the topmost value."""
        self._require_items("stack is empty")
        return self._items[-1]

    def bottom(self) -> Any:
        """Return the bottommost value."""
        self._require_items("stack is empty")
        return self._items[0]

    def _require_items(self, message: str) -> None:
        if not self._items:
            raise StackUnderflow(message)


class LinkedStack(_Chain):
    """An unbounded stack built on linked nodes; iterates from top to bottom."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._top))

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Pop and return the top value."""
        if self._top is None:
            raise StackUnderflow("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self, pos: int) -> Any:
        """Return the value ``pos`` places below the top, starting at 0."""
        if pos >= 0:
            for value in islice(self, pos, None):
                return value
        raise IndexError(f"invalid position {pos}")


class _Stack(Protocol):
    def is_empty(self) -> bool: ...

    def push(self, value: Any) -> None: ...

    def pop(self) -> Any: ...


def copy_stack(source: _Stack, destination: _Stack) -> None:
    """Move every value of ``source`` onto ``destination``, keeping their order.

    ``source`` is left empty, as the values pass through a temporary stack.
    """
    temp: list[Any] = []
    while not source.is_empty():
        temp.append(source.pop())
    while temp:
        destination.push(temp.pop())