"""Binary tree nodes with binary-search-tree insertion and in-order traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert(root: Optional[TreeNode], key: Any) -> TreeNode:
    """Insert ``key`` following search-tree order and return the root.

    Raises ValueError if ``key`` is already in the tree.
    """
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while True:
        if key == node.data:
            raise ValueError(f"cannot insert {key!r} as it is already in the tree")
        if key < node.data:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def in_order(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the values of the tree in left, node, right order."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right