"""Small algorithms over lists of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def alternates(values: Iterable[T]) -> list[T]:
    """Return every other element, starting with the first."""
    return list(values)[::2]


def is_sorted(values: Iterable[T]) -> bool:
    """Return True if the values are in non-decreasing order."""
    items = list(values)
    return all(a <= b for a, b in zip(items, items[1:]))


def largest(values: Iterable[T]) -> T:
    """Return the largest value; raise ValueError when there are none."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    best = items[0]
    for value in items[1:]:
        if value > best:
            best = value
    return best


def leaders(values: Iterable[T]) -> list[T]:
    """Return the elements not smaller than anything to their right.

    The last element is always a leader. Order follows the input.
    """
    items = list(values)
    if not items:
        return []
    max_right = items[-1]
    found = [max_right]
    for value in reversed(items[:-1]):
        if value >= max_right:
            max_right = value
            found.append(value)
    found.reverse()
    return found


def linear_search(values: Iterable[T], target: T) -> int | None:
    """Return the index of the first element equal to target, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def push_zeros_to_end(values: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, order kept."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def remove_duplicates(values: Iterable[T]) -> list[T]:
    """Collapse runs of equal adjacent values into one."""
    return [key for key, _ in groupby(values)]


def reversed_array(values: Iterable[T]) -> list[T]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def rotate_right(values: Iterable[T], d: int) -> list[T]:
    """Rotate the values d places to the right; d wraps around the length."""
    items = list(values)
    if not items:
        return items
    d %= len(items)
    return items[len(items) - d:] + items[: len(items) - d]


def second_largest(values: Iterable[T]) -> T | None:
    """Return the largest value strictly below the maximum.

    Returns None when all values are equal; raises ValueError when empty.
    """
    items = list(values)
    if not items:
        raise ValueError("second_largest() of an empty sequence")
    first = items[0]
    second: T | None = None
    for value in items[1:]:
        if value > first:
            second = first
            first = value
        if value != first and (second is None or value > second):
            second = value
    return second


def subarrays(values: Sequence[T]) -> Iterator[list[T]]:
    """Yield every non-empty contiguous slice, by start then by end."""
    items = list(values)
    n = len(items)
    for start in range(n):
        for end in range(start + 1, n + 1):
            yield items[start:end]


def three_largest(values: Iterable[T]) -> list[T]:
    """Return up to three largest distinct values in descending order."""
    first: T | None = None
    second: T | None = None
    third: T | None = None
    for value in values:
        if first is None or value > first:
            first, second, third = value, first, second
        elif value != first and (second is None or value > second):
            second, third = value, second
        elif value != first and value != second and (third is None or value > third):
            third = value
    return [value for value in (first, second, third) if value is not None]