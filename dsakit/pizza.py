"""Counting ways to cut a pizza so that every piece holds an apple."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

MOD = 1_000_000_007


def ways(pizza: Sequence[str], k: int) -> int:
    """Return the number of ways to cut ``pizza`` into ``k`` pieces, modulo 1e9+7.

    Each cut is horizontal or vertical; the upper or left part is given away,
    and every piece must contain at least one ``'A'``.
    """
    rows = [str(row) for row in pizza]
    if not rows or not rows[0]:
        raise ValueError("pizza must have at least one cell")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("pizza rows have unequal lengths")
    if k < 1:
        raise ValueError("k must be at least 1")

    height = len(rows)
    if k > height + width - 1:
        return 0

    prefix = [[0] * (width + 1) for _ in range(height + 1)]
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            prefix[i + 1][j + 1] = (
                prefix[i + 1][j] + prefix[i][j + 1] - prefix[i][j] + (cell == "A")
            )

    def has_apple(r1: int, r2: int, c1: int, c2: int) -> bool:
        return prefix[r2][c2] - prefix[r2][c1] - prefix[r1][c2] + prefix[r1][c1] > 0

    @lru_cache(maxsize=None)
    def count(top: int, left: int, cuts: int) -> int:
        if cuts == 0:
            return int(has_apple(top, height, left, width))
        total = 0
        for i in range(top + 1, height):
            if has_apple(top, i, left, width):
                total += count(i, left, cuts - 1)
        for j in range(left + 1, width):
            if has_apple(top, height, left, j):
                total += count(top, j, cuts - 1)
        return total % MOD

    return count(0, 0, k - 1)