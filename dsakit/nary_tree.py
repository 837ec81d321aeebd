"""General (n-ary) trees: level-wise construction and largest node."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A tree node with any number of ordered children."""

    data: int
    children: list[TreeNode] = field(default_factory=list)

    def __iter__(self) -> Iterator[TreeNode]:
        """Yield this node and its descendants in level order."""
        pending = deque([self])
        while pending:
            node = pending.popleft()
            yield node
            pending.extend(node.children)


def max_data_node(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the node with the largest data, the first in level order on ties."""
    if root is None:
        return None
    best = root
    for node in root:
        if node.data > best.data:
            best = node
    return best


def from_level_tokens(tokens: Iterable[int]) -> TreeNode:
    """Build a tree from level-wise tokens.

    The first token is the root's data; then, for each node in level order,
    a child count followed by that many child values. Raises ``ValueError``
    when the tokens run out early.
    """
    stream = iter(tokens)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("tree description ended early") from None

    root = TreeNode(take())
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for _ in range(take()):
            child = TreeNode(take())
            node.children.append(child)
            pending.append(child)
    return root