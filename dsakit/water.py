"""Trapping rain water over an elevation map."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def trapped_water(heights: Sequence[int]) -> int:
    """Return the trapped water using running maxima from both sides."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


def trapped_water_two_pointer(heights: Sequence[int]) -> int:
    """Return the trapped water using two converging pointers."""
    if not heights:
        return 0
    left, right = 0, len(heights) - 1
    left_max, right_max = heights[0], 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water