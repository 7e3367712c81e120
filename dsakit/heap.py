"""A bounded array-backed max-heap and heap sort."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

DEFAULT_CAPACITY = 100


class HeapFull(Exception):
    """Raised when adding to a heap that is at capacity."""


class MaxHeap:
    """A max-heap holding at most ``capacity`` values; iterates in array order."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._heap = list(items)
        if len(self._heap) > capacity:
            raise HeapFull("more items than the heap can hold")
        for index in reversed(range(len(self._heap) // 2)):
            self._sift_down(index)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._heap!r}, capacity={self.capacity})"

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] > heap[largest]:
                    largest = child
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def push(self, value: Any) -> None:
        """Add ``value``; raise HeapFull when the heap is at capacity."""
        if len(self._heap) >= self.capacity:
            raise HeapFull("heap is full")
        heap = self._heap
        heap.append(value)
        index = len(heap) - 1
        while index:
            parent = (index - 1) // 2
            if not heap[parent] < heap[index]:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def pop_max(self) -> Any:
        """Remove and return the largest value."""
        if not self._heap:
            raise IndexError("heap is empty")
        heap = self._heap
        largest = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(0)
        return largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` in ascending order, using a max-heap."""
    values = list(items)
    heap = MaxHeap(values, capacity=len(values))
    descending = [heap.pop_max() for _ in range(len(values))]
    descending.reverse()
    return descending