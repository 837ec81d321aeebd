"""Bubble sort, quick sort and merging of sorted arrays."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, produced by bubble sort."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def partition(values: MutableSequence[int], start: int, end: int) -> int:
    """Partition ``values[start:end + 1]`` in place around its last element.

    Smaller elements end up left of the pivot, the rest right of it.
    Returns the pivot's final index.
    """
    pivot = values[end]
    store = start
    for i in range(start, end):
        if values[i] < pivot:
            values[store], values[i] = values[i], values[store]
            store += 1
    values[store], values[end] = values[end], values[store]
    return store


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, produced by quick sort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            p = partition(items, start, end)
            pending.append((start, p - 1))
            pending.append((p + 1, end))
    return items


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two non-decreasing sequences into one; ties take from ``first``."""
    a, b = list(first), list(second)
    merged: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def next_gap(gap: int) -> int:
    """Return the next gap of the shell-style merge: half, rounded up, or 0."""
    if gap <= 1:
        return 0
    return gap // 2 + gap % 2


def merge_without_extra_space(
    first: Iterable[int], second: Iterable[int]
) -> tuple[list[int], list[int]]:
    """Merge two sorted sequences by the gap method.

    Returns the smallest values in a list as long as ``first`` and the
    remainder in a list as long as ``second``, both sorted.
    """
    a = list(first)
    combined = a + list(second)
    gap = next_gap(len(combined))
    while gap > 0:
        for i in range(len(combined) - gap):
            if combined[i] > combined[i + gap]:
                combined[i], combined[i + gap] = combined[i + gap], combined[i]
        gap = next_gap(gap)
    return combined[: len(a)], combined[len(a):]