"""Binary trees: construction, traversals, comparison and duplicate search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def is_same_tree(a: Optional[Node], b: Optional[Node]) -> bool:
    """Return whether two trees have the same shape and values."""
    pending = deque([(a, b)])
    while pending:
        x, y = pending.popleft()
        if x is None and y is None:
            continue
        if x is None or y is None or x.data != y.data:
            return False
        pending.append((x.left, y.left))
        pending.append((x.right, y.right))
    return True


def from_level_order(values: Sequence[int]) -> Optional[Node]:
    """Build a tree from a level-order listing where ``-1`` marks a missing child.

    The first value is always the root. Raises ``ValueError`` when values
    remain but no node is left to attach them to.
    """
    if not values:
        return None
    stream = iter(values)
    root = Node(next(stream))
    pending = deque([root])
    remaining = list(stream)
    index = 0
    while index < len(remaining):
        if not pending:
            raise ValueError("level-order values have no parent to attach to")
        current = pending.popleft()
        left_value = remaining[index]
        index += 1
        if left_value != -1:
            current.left = Node(left_value)
            pending.append(current.left)
        if index < len(remaining):
            right_value = remaining[index]
            index += 1
            if right_value != -1:
                current.right = Node(right_value)
                pending.append(current.right)
    return root


def insert_level_order(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` at the first free child slot in level order.

    Nodes holding 0 are placeholders: they take a slot but are not descended
    into. Returns the (possibly new) root.
    """
    if root is None:
        return Node(value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        if node.left is None:
            node.left = Node(value)
            return root
        if node.left.data != 0:
            pending.append(node.left)
        if node.right is None:
            node.right = Node(value)
            return root
        if node.right.data != 0:
            pending.append(node.right)
    return root


def prune_zeros(root: Optional[Node]) -> Optional[Node]:
    """Detach every child holding 0 and return the root."""
    if root is None:
        return None
    pending = deque([root])
    while pending:
        node = pending.popleft()
        if node.left is not None:
            if node.left.data == 0:
                node.left = None
            else:
                pending.append(node.left)
        if node.right is not None:
            if node.right.data == 0:
                node.right = None
            else:
                pending.append(node.right)
    return root


def from_array(values: Iterable[int]) -> Optional[Node]:
    """Build a tree by level-order insertion, with 0 marking an empty slot."""
    root: Optional[Node] = None
    for value in values:
        root = insert_level_order(root, value)
    return prune_zeros(root)


def preorder(root: Optional[Node]) -> list[int]:
    """Return the values in root, left, right order."""
    result: list[int] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.data)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def inorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, root, right order."""
    result: list[int] = []
    pending: list[Node] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, right, root order."""
    result: list[int] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result[::-1]


def levels(root: Optional[Node]) -> list[list[int]]:
    """Return the values grouped by depth, top level first."""
    result: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        result.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def level_order(root: Optional[Node]) -> list[int]:
    """Return the values in breadth-first order."""
    return [value for level in levels(root) for value in level]


def insert_complete(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` at the first empty child slot in level order."""
    new = Node(value)
    if root is None:
        return new
    pending = deque([root])
    while pending:
        node = pending.popleft()
        if node.left is None:
            node.left = new
            return root
        if node.right is None:
            node.right = new
            return root
        pending.append(node.left)
        pending.append(node.right)
    return root


def insert_sorted(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` by search-tree order, equal values going left."""
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value <= node.data:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def has_duplicates(root: Optional[Node]) -> bool:
    """Return whether any value occurs in more than one node."""
    seen: set[int] = set()
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        if node.data in seen:
            return True
        seen.add(node.data)
        pending.extend(child for child in (node.right, node.left) if child is not None)
    return False