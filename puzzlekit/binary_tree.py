"""Traversals and reshaping operations on binary and n-ary trees."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby
from operator import itemgetter
from typing import Any, Optional

from puzzlekit.nodes import LinkedTreeNode, NaryNode, TreeNode


def vertical_traversal(root: Optional[TreeNode]) -> list[list[Any]]:
    """Group node values by column, left to right.

    Within a column values are ordered by depth; values sharing a position are sorted.
    """
    placed: list[tuple[int, int, Any]] = []
    stack = [(root, 0, 0)] if root is not None else []
    while stack:
        node, column, row = stack.pop()
        placed.append((column, row, node.val))
        if node.left is not None:
            stack.append((node.left, column - 1, row + 1))
        if node.right is not None:
            stack.append((node.right, column + 1, row + 1))
    placed.sort()
    return [
        [val for _, _, val in group]
        for _, group in groupby(placed, key=itemgetter(0))
    ]


def connect(root: Optional[LinkedTreeNode]) -> Optional[LinkedTreeNode]:
    """Point every node's next at its right-hand neighbour on the same level, or None."""
    level = [root] if root is not None else []
    while level:
        for node, neighbour in zip(level, [*level[1:], None]):
            node.next = neighbour
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return root


def del_nodes(root: Optional[TreeNode], to_delete: Iterable[Any]) -> list[TreeNode]:
    """Remove every node whose value is in to_delete and return the roots left behind."""
    doomed = set(to_delete)
    forest: list[TreeNode] = []

    def prune(node: Optional[TreeNode]) -> Optional[TreeNode]:
        if node is None:
            return None
        node.left = prune(node.left)
        node.right = prune(node.right)
        if node.val in doomed:
            forest.extend(child for child in (node.left, node.right) if child is not None)
            return None
        return node

    kept = prune(root)
    if kept is not None:
        forest.append(kept)
    return forest


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes; 0 for an empty tree."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    height(root)
    return best


def merge_trees(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> Optional[TreeNode]:
    """Overlay root2 onto root1, summing values where both have a node.

    root1 is modified in place; subtrees present only in root2 are shared, not copied.
    """
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    root1.val = root1.val + root2.val
    root1.left = merge_trees(root1.left, root2.left)
    root1.right = merge_trees(root1.right, root2.right)
    return root1


def preorder(root: Optional[NaryNode]) -> list[Any]:
    """Return the values of an n-ary tree in preorder."""
    out: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        out.append(node.val)
        stack.extend(child for child in reversed(node.children) if child is not None)
    return out


def distance_k(root: Optional[TreeNode], target: TreeNode, k: int) -> list[Any]:
    """Return the values of the nodes exactly k edges away from target."""
    parents: dict[TreeNode, Optional[TreeNode]] = {}
    stack: list[tuple[TreeNode, Optional[TreeNode]]] = (
        [(root, None)] if root is not None else []
    )
    while stack:
        node, parent = stack.pop()
        parents[node] = parent
        stack.extend((child, node) for child in (node.left, node.right) if child is not None)

    frontier = [target]
    seen = {target}
    steps = k
    while frontier and steps != 0:
        steps -= 1
        following = []
        for node in frontier:
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in seen:
                    seen.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return [node.val for node in frontier]