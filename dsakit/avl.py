"""AVL trees: self-balancing insertion, rotations and deletion."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree, carrying the height of its subtree."""

    data: int
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1


def height(node: Optional[AVLNode]) -> int:
    """Return the stored height of ``node``; 0 for an empty subtree."""
    return 0 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return left height minus right height; 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _refresh(node: AVLNode) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate ``node`` left and return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate ``node`` right and return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def insert(root: Optional[AVLNode], value: int) -> AVLNode:
    """Insert ``value`` and rebalance; a value already present is ignored.

    Returns the new root of the subtree.
    """
    if root is None:
        return AVLNode(value)
    if value < root.data:
        root.left = insert(root.left, value)
    elif value > root.data:
        root.right = insert(root.right, value)

    _refresh(root)
    factor = balance_factor(root)

    if factor > 1 and value < root.left.data:
        return rotate_right(root)
    if factor < -1 and value > root.right.data:
        return rotate_left(root)
    if factor > 1 and value > root.left.data:
        root.left = rotate_left(root.left)
        return rotate_right(root)
    if factor < -1 and value < root.right.data:
        root.right = rotate_right(root.right)
        return rotate_left(root)
    return root


def min_node(root: Optional[AVLNode]) -> Optional[AVLNode]:
    """Return the leftmost node of the subtree, or ``None`` if it is empty."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete(root: Optional[AVLNode], value: int) -> Optional[AVLNode]:
    """Remove ``value`` by plain search-tree deletion and return the new root.

    A node with two children takes its in-order successor's value. The tree
    is not rebalanced and stored heights are left as they were.
    """
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right)
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def inorder(root: Optional[AVLNode]) -> list[int]:
    """Return the values in ascending (left, root, right) order."""
    result: list[int] = []
    pending: list[AVLNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        result.append(node.data)
        node = node.right
    return result


def build(values: Iterable[int]) -> Optional[AVLNode]:
    """Build an AVL tree by inserting the values in order."""
    root: Optional[AVLNode] = None
    for value in values:
        root = insert(root, value)
    return root