"""A fixed-capacity array with positional insertion and deletion."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class BoundedArray:
    """An array that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int, items: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items = list(items)
        if len(self._items) > capacity:
            raise ValueError("more items than the capacity allows")

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"

    def insert(self, index: int, element: Any) -> None:
        """Insert ``element`` at ``index``, shifting later elements right."""
        if len(self._items) >= self.capacity:
            raise OverflowError("the array is at capacity")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} out of range")
        self._items.insert(index, element)

    def delete(self, index: int) -> Any:
        """Remove and return the element at ``index``, shifting later ones left."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"delete index {index} out of range")
        return self._items.pop(index)