"""Pair and triplet searches over integer arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def good_pairs(nums: Iterable[int]) -> int:
    """Return the number of index pairs ``i < j`` with ``nums[i] == nums[j]``."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices of two distinct elements that add up to ``target``.

    The later index comes first. Returns ``None`` when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        wanted = target - value
        if wanted in seen:
            return index, seen[wanted]
        seen[value] = index
    return None


def three_sum(nums: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triplet of elements that sums to zero."""
    arr = sorted(nums)
    n = len(arr)
    found: list[tuple[int, int, int]] = []
    for i, first in enumerate(arr):
        if i and first == arr[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + arr[j] + arr[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                found.append((first, arr[j], arr[k]))
                j += 1
                k -= 1
                while j < k and arr[j] == arr[j - 1]:
                    j += 1
                while j < k and arr[k] == arr[k + 1]:
                    k -= 1
    return found


def two_repeated(values: Iterable[int]) -> tuple[int, int]:
    """Return the two values that occur twice, ordered by their second occurrence.

    Raises ``ValueError`` when fewer than two distinct values repeat.
    """
    seen: set[int] = set()
    repeated: list[int] = []
    for value in values:
        if value in seen:
            if value not in repeated:
                repeated.append(value)
                if len(repeated) == 2:
                    return repeated[0], repeated[1]
        else:
            seen.add(value)
    raise ValueError("the input does not hold two repeated values")