"""Binary tree node and construction from level-order values."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree of integers."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def tree_from_level_order(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where ``None`` marks a missing child.

    An empty sequence gives ``None``.
    """
    if not values:
        return None
    if values[0] is None:
        raise ValueError("the root value must not be None")

    root = TreeNode(values[0])
    parents: deque[TreeNode] = deque([root])
    rest = list(values[1:])

    for start in range(0, len(rest), 2):
        children = rest[start:start + 2]
        if not parents:
            raise ValueError("more children than parents in level-order values")
        parent = parents.popleft()
        if children[0] is not None:
            parent.left = TreeNode(children[0])
            parents.append(parent.left)
        if len(children) > 1 and children[1] is not None:
            parent.right = TreeNode(children[1])
            parents.append(parent.right)
    return root