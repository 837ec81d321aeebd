"""Book allocation: split pages among students minimising the largest share."""

from __future__ import annotations

from collections.abc import Sequence


def _check(pages: Sequence[int], k: int) -> None:
    if not pages:
        raise ValueError("no books to allocate")
    if k < 1:
        raise ValueError("at least one student is required")


def allocate_pages_brute(pages: Sequence[int], k: int) -> int:
    """Return the minimal largest share by trying every split recursively."""
    _check(pages, k)
    if k == 1:
        return sum(pages)
    if len(pages) == 1:
        return pages[0]
    return min(
        max(sum(pages[split:]), allocate_pages_brute(pages[:split], k - 1))
        for split in range(1, len(pages))
    )


def is_feasible(pages: Sequence[int], k: int, limit: int) -> bool:
    """Return whether contiguous shares of at most ``limit`` need ``k`` students or fewer."""
    students = 1
    current = 0
    for count in pages:
        if current + count <= limit:
            current += count
        else:
            students += 1
            current = count
    return students <= k


def allocate_pages(pages: Sequence[int], k: int) -> int:
    """Return the minimal largest share by binary search on the answer.

    Raises ``ValueError`` when there are more students than books.
    """
    _check(pages, k)
    if k > len(pages):
        raise ValueError("more students than books")
    low, high = max(pages), sum(pages)
    answer = 0
    while low <= high:
        mid = low + (high - low) // 2
        if is_feasible(pages, k, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer