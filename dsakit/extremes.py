"""Smallest, largest and second-largest elements of a sequence."""

from __future__ import annotations

from collections.abc import Iterable


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(minimum, maximum)`` of the values."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("min_max() of an empty sequence")
    return ordered[0], ordered[-1]


def largest(values: Iterable[int]) -> int:
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    best = items[0]
    for value in items:
        if value > best:
            best = value
    return best


def second_largest(values: Iterable[int]) -> int | None:
    """Return the largest value strictly below the maximum.

    Returns ``None`` when every value equals the maximum.
    """
    items = list(values)
    top = largest(items)
    below = [value for value in items if value != top]
    return max(below) if below else None