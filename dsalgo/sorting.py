"""Insertion, bottom-up merge and bubble sorts with step-by-step views."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def insertion_sort_passes(items: Iterable[T]) -> Iterator[tuple[int, T, list[T]]]:
    """Yield ``(pass number, inserted element, list after the pass)`` for each pass."""
    data = list(items)
    for j in range(1, len(data)):
        key = data[j]
        i = j - 1
        while i >= 0 and key < data[i]:
            data[i + 1] = data[i]
            i -= 1
        data[i + 1] = key
        yield j, key, list(data)


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy of ``items`` using insertion sort."""
    data = list(items)
    for _, _, snapshot in insertion_sort_passes(data):
        data = snapshot
    return data


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


def merge_sort_passes(items: Iterable[T]) -> Iterator[tuple[int, list[T]]]:
    """Yield ``(run size, list after merging runs of that size)`` for each pass."""
    data = list(items)
    n = len(data)
    size = 1
    while size < n:
        merged: list[T] = []
        start = 0
        while start + size < n:
            middle = start + size
            end = min(middle + size, n)
            merged.extend(_merge(data[start:middle], data[middle:end]))
            start = end
        merged.extend(data[start:])
        data = merged
        yield size, list(data)
        size *= 2


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy of ``items`` using non-recursive merge sort."""
    data = list(items)
    for _, snapshot in merge_sort_passes(data):
        data = snapshot
    return data


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy of ``items`` using bubble sort."""
    data = list(items)
    n = len(data)
    for i in range(n):
        for j in range(n - i - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data