"""Comparison sorts: bubble, insertion, merge, quick and selection."""

from __future__ import annotations

from typing import Any, Iterable


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` in ascending order, using bubble sort."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` in ascending order, using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and key < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` in ascending order, using merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while i < high and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def _quick_sort(values: list[Any], low: int, high: int) -> None:
    while low < high:
        split = _partition(values, low, high)
        if split - low < high - split:
            _quick_sort(values, low, split - 1)
            low = split + 1
        else:
            _quick_sort(values, split + 1, high)
            high = split - 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` in ascending order, using quicksort.

    The first element of each range serves as the pivot.
    """
    result = list(items)
    _quick_sort(result, 0, len(result) - 1)
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` in ascending order, using selection sort."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result