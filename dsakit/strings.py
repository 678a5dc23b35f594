"""Simple string operations."""

from __future__ import annotations


def insert_char(s: str, c: str, pos: int) -> str:
    """Insert the single character c before index pos.

    A position at or past the end, or a negative one, appends c.
    """
    if len(c) != 1:
        raise ValueError("c must be a single character")
    if 0 <= pos < len(s):
        return s[:pos] + c + s[pos:]
    return s + c


def search_char(s: str, c: str) -> int:
    """Return the index of the first occurrence of c in s, or -1."""
    if len(c) != 1:
        raise ValueError("c must be a single character")
    return s.find(c)


def strings_same(a: str, b: str) -> bool:
    """Return True if both strings are identical."""
    return a == b


def is_palindrome(s: str) -> bool:
    """Return True if s reads the same backwards."""
    return s == s[::-1]