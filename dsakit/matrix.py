"""Matrix symmetry check."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def is_symmetric(matrix: Iterable[Sequence[int]]) -> bool:
    """Return whether the matrix equals its transpose.

    A non-square matrix is not symmetric. Raises ``ValueError`` for rows
    of unequal length.
    """
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows have unequal lengths")
    if rows and len(rows) != len(rows[0]):
        return False
    return rows == [list(column) for column in zip(*rows)]