"""Fibonacci and factorial, each in several classic formulations."""

from __future__ import annotations


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number using top-down memoisation.

    Values of ``n`` below 2 are returned unchanged.
    """
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n in (0, 1):
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_table(n: int) -> list[int]:
    """Return the bottom-up table of Fibonacci numbers from F(0) to F(n)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = [0, 1][: n + 1]
    while len(table) <= n:
        table.append(table[-1] + table[-2])
    return table


def fibonacci_offset(n: int) -> int:
    """Return the n-th term of the series that starts 0, 0, 1, 1, 2, ...

    Terms 0 and 1 are both 0 and term 2 is 1; each later term is the sum of
    the two before it.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n in (0, 1):
        return 0
    previous, current = 0, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def factorial_recursive(n: int) -> int:
    """Return n! computed recursively."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n in (0, 1):
        return 1
    return n * factorial_recursive(n - 1)


def factorial_iterative(n: int) -> int:
    """Return the product 1 * 2 * ... * n; 1 when n is below 1."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result