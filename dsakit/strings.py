"""Anagram and concatenated-palindrome checks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def is_anagram(a: str, b: str) -> bool:
    """Return whether ``b`` is a rearrangement of the characters of ``a``."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def can_make_palindrome(words: Iterable[str]) -> bool:
    """Return whether equal-length words can be concatenated into a palindrome.

    True when the multiset of words equals the multiset of their reversals.
    """
    items = list(words)
    return sorted(items) == sorted(word[::-1] for word in items)