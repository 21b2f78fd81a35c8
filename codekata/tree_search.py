"""Searching, summing and path queries on a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from codekata.tree import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    if root is None:
        return
    level = [root]
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def contains(root: Optional[TreeNode], data: int) -> bool:
    """Whether any node holds ``data``, searched in level order."""
    return any(node.data == data for level in _levels(root) for node in level)


def max_level_sum(root: Optional[TreeNode]) -> tuple[int, int]:
    """The 1-based level whose sum is largest, and that sum.

    Only sums strictly greater than zero count; if no level exceeds zero
    the result is ``(0, 0)``. Ties keep the shallower level.
    """
    best_level, best_sum = 0, 0
    for depth, level in enumerate(_levels(root), start=1):
        level_sum = sum(node.data for node in level)
        if level_sum > best_sum:
            best_level, best_sum = depth, level_sum
    return best_level, best_sum


def total_sum(root: Optional[TreeNode]) -> int:
    """Sum of every value, gathered in level order."""
    return sum(node.data for level in _levels(root) for node in level)


def total_sum_recursive(root: Optional[TreeNode]) -> int:
    """Sum of every value (recursive)."""
    if root is None:
        return 0
    return root.data + total_sum_recursive(root.left) + total_sum_recursive(root.right)


def has_path_sum(root: Optional[TreeNode], target: int) -> bool:
    """Whether some root-to-leaf path adds up to ``target`` (explicit stack)."""
    if root is None:
        return False
    stack = [(root, root.data)]
    while stack:
        node, running = stack.pop()
        if node.left is None and node.right is None:
            if running == target:
                return True
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, running + child.data))
    return False


def has_path_sum_recursive(root: Optional[TreeNode], target: int) -> bool:
    """Whether some root-to-leaf path adds up to ``target`` (recursive)."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return target == root.data
    remaining = target - root.data
    return has_path_sum_recursive(root.left, remaining) or has_path_sum_recursive(
        root.right, remaining
    )


def ancestors(root: Optional[TreeNode], node: Optional[TreeNode]) -> list[int]:
    """Values of the ancestors of ``node``, nearest first; empty if none."""
    found: list[int] = []

    def walk(current: Optional[TreeNode]) -> bool:
        if current is None:
            return False
        if (
            current.left is node
            or current.right is node
            or walk(current.left)
            or walk(current.right)
        ):
            found.append(current.data)
            return True
        return False

    walk(root)
    return found


def ancestors_of_value(root: Optional[TreeNode], target: int) -> list[int]:
    """Ancestors of the first node (preorder) holding ``target``, nearest first."""
    found: list[int] = []

    def walk(current: Optional[TreeNode]) -> bool:
        if current is None:
            return False
        if current.data == target:
            return True
        if walk(current.left) or walk(current.right):
            found.append(current.data)
            return True
        return False

    walk(root)
    return found


def root_to_leaf_paths(root: Optional[TreeNode]) -> list[list[int]]:
    """Every root-to-leaf path, left to right."""
    paths: list[list[int]] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        path.append(node.data)
        if node.left is None and node.right is None:
            paths.append(list(path))
        else:
            walk(node.left)
            walk(node.right)
        path.pop()

    walk(root)
    return paths