"""Binary tree node type and classic tree algorithms."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from a level-order listing where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        parent = pending.popleft()
        try:
            left_val = next(items)
        except StopIteration:
            break
        if left_val is not None:
            parent.left = TreeNode(left_val)
            pending.append(parent.left)
        try:
            right_val = next(items)
        except StopIteration:
            break
        if right_val is not None:
            parent.right = TreeNode(right_val)
            pending.append(parent.right)
    return root


def is_valid_bst(root: TreeNode | None) -> bool:
    """Return True if every node is strictly between its ancestors' bounds."""

    def valid(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return valid(node.left, low, node.val) and valid(node.right, node.val, high)

    return valid(root, -math.inf, math.inf)


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node having both p and q as descendants (a node counts as its own)."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Return every root-to-leaf path as values joined by '->'."""
    paths: list[str] = []
    if root is None:
        return paths

    def walk(node: TreeNode, prefix: str) -> None:
        if node.left is None and node.right is None:
            paths.append(prefix)
            return
        for child in (node.left, node.right):
            if child is not None:
                walk(child, f"{prefix}->{child.val}")

    walk(root, str(root.val))
    return paths


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def insert_into_bst(root: TreeNode | None, val: int) -> TreeNode:
    """Insert val as a new leaf; equal values go to the right. Returns the root."""
    new_node = TreeNode(val)
    if root is None:
        return new_node
    node = root
    while True:
        if val < node.val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def prune_tree(root: TreeNode | None) -> TreeNode | None:
    """Remove every subtree that contains no node with a non-zero value."""
    if root is None:
        return None
    root.left = prune_tree(root.left)
    root.right = prune_tree(root.right)
    if root.val == 0 and root.left is None and root.right is None:
        return None
    return root


def distribute_coins(root: TreeNode | None) -> int:
    """Return the moves needed so that every node holds exactly one coin."""
    moves = 0

    def excess(node: TreeNode | None) -> int:
        nonlocal moves
        if node is None:
            return 0
        left = excess(node.left)
        right = excess(node.right)
        moves += abs(left) + abs(right)
        return node.val + left + right - 1

    excess(root)
    return moves


def is_valid_serialization(preorder: str) -> bool:
    """Check a comma-separated preorder listing with '#' for empty children."""
    tokens = preorder.split(",")
    if tokens[-1] == "":
        tokens.pop()
    slots = 1
    for token in tokens:
        slots -= 1
        if slots < 0:
            return False
        if token != "#":
            slots += 2
    return slots == 0


def bst_insert(root: TreeNode | None, data: int) -> TreeNode:
    """Insert data as a new leaf; equal values go to the left. Returns the root."""
    new_node = TreeNode(data)
    if root is None:
        return new_node
    node = root
    while True:
        if data <= node.val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def top_view(root: TreeNode | None) -> list[int]:
    """Return the left spine bottom-up, the root, then the right spine top-down."""
    if root is None:
        return []
    left: list[int] = []
    node = root.left
    while node is not None:
        left.append(node.val)
        node = node.left
    right: list[int] = []
    node = root.right
    while node is not None:
        right.append(node.val)
        node = node.right
    return [*reversed(left), root.val, *right]