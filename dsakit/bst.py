"""Binary search trees: insertion, height and a root-level balance check."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .binary_tree import Node, insert_sorted, levels


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the search tree, equal values going left.

    Returns the (possibly new) root.
    """
    return insert_sorted(root, value)


def build(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting the values in order."""
    root: Optional[Node] = None
    for value in values:
        root = insert(root, value)
    return root


def height(root: Optional[Node]) -> int:
    """Return the number of levels in the tree; an empty tree has height 0."""
    return len(levels(root))


def is_avl(root: Optional[Node]) -> bool:
    """Return whether the root's subtrees differ in height by at most one.

    Only the root is examined; deeper subtrees are not checked.
    """
    if root is None:
        return True
    return abs(height(root.left) - height(root.right)) <= 1