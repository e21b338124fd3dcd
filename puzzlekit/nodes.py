"""Node types for trees and linked lists, with helpers to build and flatten them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare and hash by identity."""

    val: Any = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class LinkedTreeNode(TreeNode):
    """A binary tree node that also points at its right-hand neighbour on the same level."""

    next: Optional[LinkedTreeNode] = None


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional[ListNode] = None


@dataclass(eq=False)
class NaryNode:
    """A tree node with any number of ordered children."""

    val: Any = 0
    children: list[NaryNode] = field(default_factory=list)


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a binary tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left_val = next(items, None)
        right_val = next(items, None)
        if left_val is not None:
            node.left = TreeNode(left_val)
            pending.append(node.left)
        if right_val is not None:
            node.right = TreeNode(right_val)
            pending.append(node.right)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Any]:
    """Return the level-order values of a tree, None for gaps, trailing gaps removed."""
    out: list[Any] = []
    pending: deque[Optional[TreeNode]] = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        if node is None:
            out.append(None)
            continue
        out.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while out and out[-1] is None:
        out.pop()
    return out


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding the given values in order."""
    head: Optional[ListNode] = None
    for val in reversed(list(values)):
        head = ListNode(val, head)
    return head


def list_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of a linked list in order."""
    out = []
    node = head
    while node is not None:
        out.append(node.val)
        node = node.next
    return out