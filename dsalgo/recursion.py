"""Factorial computed with an accumulating (tail-recursive style) formulation."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return ``n!``; negative numbers have no factorial and raise ``ValueError``."""
    if n < 0:
        raise ValueError("no factorial of negative number")
    accumulator = 1
    while n > 1:
        n, accumulator = n - 1, n * accumulator
    return accumulator