"""Minimum candies for children standing in a line by rating."""

from __future__ import annotations

from collections.abc import Sequence


def _triangle(n: int) -> int:
    return n * (n + 1) // 2


def min_candies(ratings: Sequence[int]) -> int:
    """Return the minimum candies using left and right passes."""
    n = len(ratings)
    left = [1] * n
    right = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            left[i] = left[i - 1] + 1
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            right[i] = right[i + 1] + 1
    return sum(max(a, b) for a, b in zip(left, right))


def min_candies_by_slopes(ratings: Sequence[int]) -> int:
    """Return the minimum candies in constant space by counting slopes."""
    if len(ratings) <= 1:
        return len(ratings)
    up = down = candies = prev_slope = 0
    for previous, current in zip(ratings, ratings[1:]):
        slope = (current > previous) - (current < previous)
        if (prev_slope < 0 and slope >= 0) or (prev_slope > 0 and slope == 0):
            candies += _triangle(up) + _triangle(down) + max(up, down)
            up = down = 0
        if slope > 0:
            up += 1
        elif slope < 0:
            down += 1
        else:
            candies += 1
        prev_slope = slope
    return candies + _triangle(up) + _triangle(down) + max(up, down) + 1