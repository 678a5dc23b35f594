"""Classic comparison sorts.

Every function takes any iterable of comparable values and returns a new
list in ascending order. The input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order neighbours."""
    items = list(values)
    n = len(items)
    swapped = False
    for done in range(n):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
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


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[T], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _quick_sort(items: list[T], low: int, high: int) -> None:
    if low < high:
        pivot_index = _partition(items, low, high)
        _quick_sort(items, low, pivot_index - 1)
        _quick_sort(items, pivot_index + 1, high)


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort using the last element of each range as the pivot."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    n = len(items)
    for i in range(n):
        min_index = min(range(i, n), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items