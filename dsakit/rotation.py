"""Array rotations."""

from __future__ import annotations

from collections.abc import Sequence


def rotate_left_by_one(values: Sequence[int]) -> list[int]:
    """Return a copy with the first element moved to the end."""
    items = list(values)
    if not items:
        return []
    return items[1:] + items[:1]


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return a copy rotated ``k`` places to the right.

    ``k`` is taken modulo the length, so a negative ``k`` rotates left.
    """
    items = list(values)
    if not items:
        return []
    k %= len(items)
    if k == 0:
        return items
    return items[-k:] + items[:-k]