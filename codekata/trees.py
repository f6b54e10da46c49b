"""Binary tree inversion and a compact codec for binary search trees."""

from __future__ import annotations

from codekata.tree_node import TreeNode


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        invert_tree(root.left)
        invert_tree(root.right)
        root.left, root.right = root.right, root.left
    return root


def _parse(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


class Codec:
    """Serializes trees as post-order values separated by spaces.

    A missing child is written as an empty token.
    """

    def serialize(self, root: TreeNode | None) -> str:
        """Encode ``root`` as a string."""
        tokens: list[str] = []

        def _walk(node: TreeNode | None) -> None:
            if node is None:
                tokens.append("")
                return
            _walk(node.left)
            _walk(node.right)
            tokens.append(str(node.val))

        _walk(root)
        return " ".join(tokens)

    def deserialize(self, data: str) -> TreeNode | None:
        """Rebuild a tree from a string produced by :meth:`serialize`."""
        if not data:
            return None
        values = [_parse(token) for token in data.split(" ")]

        def _build() -> TreeNode | None:
            if not values:
                return None
            val = values.pop()
            if val is None:
                return None
            right = _build()
            left = _build()
            return TreeNode(val, left, right)

        return _build()