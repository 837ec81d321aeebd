"""Maximum-sum and fixed-sum contiguous subarrays."""

from __future__ import annotations

from collections.abc import Sequence


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane)."""
    if not values:
        raise ValueError("max_subarray_sum() of an empty sequence")
    current = best = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray_sum_or_zero(values: Sequence[int]) -> int:
    """Return the largest contiguous subarray sum, or 0 if it is negative."""
    total = 0
    best = None
    for value in values:
        total += value
        if best is None or total > best:
            best = total
        if total < 0:
            total = 0
    if best is None or best < 0:
        return 0
    return best


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous run summing to ``k``.

    Uses a sliding window, so the values are expected to be non-negative.
    """
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best