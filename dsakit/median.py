"""Median of the union of two sorted arrays."""

from __future__ import annotations

from collections.abc import Iterable


def median_of_two(first: Iterable[int], second: Iterable[int]) -> float:
    """Return the median of all values from both inputs."""
    merged = sorted([*first, *second])
    if not merged:
        raise ValueError("median of two empty sequences")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle] + merged[middle - 1]) / 2