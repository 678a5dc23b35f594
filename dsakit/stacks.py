"""Queries on a stack held as a list whose top is the last element."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def bottom_element(stack: Sequence[T]) -> T:
    """Return the element at the bottom of the stack without changing it."""
    if not stack:
        raise IndexError("bottom_element() of an empty stack")
    return stack[0]


def middle_element(stack: Sequence[T]) -> T:
    """Return the element at position size // 2 counted from the bottom."""
    if not stack:
        raise IndexError("middle_element() of an empty stack")
    return stack[len(stack) // 2]