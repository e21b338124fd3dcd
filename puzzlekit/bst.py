"""Construction and editing of binary search trees."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any, Optional

from puzzlekit.nodes import TreeNode


def bst_from_preorder(preorder: Iterable[Any]) -> Optional[TreeNode]:
    """Build a binary search tree from its preorder values.

    Building stops at the first value that cannot be placed, such as a duplicate.
    """
    values = list(preorder)
    position = 0

    def build(low: Any, high: Any) -> Optional[TreeNode]:
        nonlocal position
        if position == len(values):
            return None
        val = values[position]
        if not low < val < high:
            return None
        position += 1
        node = TreeNode(val)
        node.left = build(low, val)
        node.right = build(val, high)
        return node

    return build(-math.inf, math.inf)


def delete_node(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Remove the node holding key and return the new root.

    A node with two children takes its in-order predecessor's value.
    """
    if root is None:
        return None
    if root.val == key:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        predecessor = root.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        root.val = predecessor.val
        root.left = delete_node(root.left, predecessor.val)
        return root
    if key > root.val:
        root.right = delete_node(root.right, key)
    else:
        root.left = delete_node(root.left, key)
    return root


def trim_bst(root: Optional[TreeNode], low: Any, high: Any) -> Optional[TreeNode]:
    """Drop every node whose value lies outside [low, high], keeping the BST shape."""
    if root is None:
        return None
    root.left = trim_bst(root.left, low, high)
    root.right = trim_bst(root.right, low, high)
    if root.val < low:
        return root.right
    if root.val > high:
        return root.left
    return root